from __future__ import annotations

from typing import Protocol

from lightset.config.models import ConfigLoadRequest
from lightset.config.store import Configuration


class ConfigLoader(Protocol):
    """
    Loads a configuration from the origin named by a request.

    Implementations must read the whole source before returning and must not return a
    partially loaded configuration.
    """

    async def load(self, request: ConfigLoadRequest) -> Configuration:
        ...
