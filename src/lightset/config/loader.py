from __future__ import annotations

import logging
from typing import Optional

import aiohttp

from lightset.config.models import ConfigLoadRequest, LoaderSettings
from lightset.config.store import Configuration
from lightset.sources import load_path, load_resource, load_string, load_url

logger = logging.getLogger(__name__)


class LightsetLoader:
    def __init__(
        self,
        settings: Optional[LoaderSettings] = None,
        *,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self._settings = settings or LoaderSettings()
        self._session = session

    @property
    def settings(self) -> LoaderSettings:
        return self._settings

    async def load(self, request: ConfigLoadRequest) -> Configuration:
        origin = request.origin()

        if origin == "path":
            logger.info("Loading configuration. origin=path path=%s", request.path)
            config = load_path(request.path, self._settings)  # type: ignore[arg-type]
        elif origin == "resource":
            logger.info(
                "Loading configuration. origin=resource package=%s resource=%s",
                request.package,
                request.resource,
            )
            config = load_resource(request.package, request.resource, self._settings)  # type: ignore[arg-type]
        elif origin == "url":
            logger.info("Loading configuration. origin=url url=%s", request.url)
            config = await load_url(request.url, self._settings, session=self._session)  # type: ignore[arg-type]
        else:
            logger.info("Loading configuration. origin=text chars=%s", len(request.text or ""))
            config = load_string(request.text)  # type: ignore[arg-type]

        logger.info("Configuration loaded. origin=%s entries=%s", origin, len(config))
        return config
