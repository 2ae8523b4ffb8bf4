"""Configuration store, settings models and the loader contract."""

from lightset.config.models import (
    ConfigLoadRequest,
    FileLoggingSettings,
    FileRotationSettings,
    LoaderSettings,
    LoggingSettings,
    UrlSourceSettings,
)
from lightset.config.store import Configuration, load

__all__ = [
    "ConfigLoadRequest",
    "Configuration",
    "FileLoggingSettings",
    "FileRotationSettings",
    "LoaderSettings",
    "LoggingSettings",
    "UrlSourceSettings",
    "load",
]
