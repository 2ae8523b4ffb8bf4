from __future__ import annotations

import asyncio
import logging
from typing import Optional

import aiohttp

from lightset.config.models import LoaderSettings
from lightset.config.store import Configuration
from lightset.errors import SourceError
from lightset.sources.local import load_string

logger = logging.getLogger(__name__)

_HTTP_ERRORS: tuple[type[BaseException], ...] = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
)


async def _fetch(session: aiohttp.ClientSession, url: str, *, settings: LoaderSettings) -> str:
    timeout = aiohttp.ClientTimeout(total=settings.url.timeout_seconds)
    try:
        async with session.get(url, headers=settings.url.headers, timeout=timeout) as response:
            if response.status != 200:
                logger.warning("Configuration download failed. url=%s status=%s", url, response.status)
                raise SourceError(f"Configuration download failed with status {response.status}. url={url}")
            payload = await response.read()
    except _HTTP_ERRORS as exc:
        logger.warning("Configuration download failed. url=%s error=%s", url, type(exc).__name__)
        raise SourceError(f"Configuration download failed. url={url} error={type(exc).__name__}") from exc

    try:
        return payload.decode(settings.encoding, errors=settings.decode_errors)
    except UnicodeDecodeError as exc:
        raise SourceError(f"Configuration download is not valid {settings.encoding} text. url={url}") from exc


async def fetch_url_text(
    url: str,
    settings: Optional[LoaderSettings] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> str:
    """
    Download ``url`` and return its decoded body.

    A caller-supplied ``session`` is used as is and left open. There are no retries: the first
    failure raises ``SourceError``.
    """
    settings = settings or LoaderSettings()
    if session is not None:
        return await _fetch(session, url, settings=settings)

    async with aiohttp.ClientSession() as owned_session:
        return await _fetch(owned_session, url, settings=settings)


async def load_url(
    url: str,
    settings: Optional[LoaderSettings] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> Configuration:
    logger.debug("Loading configuration URL. url=%s", url)
    text = await fetch_url_text(url, settings, session=session)
    return load_string(text)
