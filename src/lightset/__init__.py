"""Read flat ``key=value`` configuration files into typed, read-only mappings."""

from lightset.config import (
    ConfigLoadRequest,
    Configuration,
    LoaderSettings,
    LoggingSettings,
    UrlSourceSettings,
    load,
)
from lightset.config.interfaces import ConfigLoader
from lightset.config.loader import LightsetLoader
from lightset.core import ConfigValue, ValueKind
from lightset.errors import LightsetError, SourceError, ValueTypeMismatchError
from lightset.parser import infer_value
from lightset.sources import fetch_url_text, load_path, load_resource, load_stream, load_string, load_url

__version__ = "0.1.0"

__all__ = [
    "ConfigLoadRequest",
    "ConfigLoader",
    "ConfigValue",
    "Configuration",
    "LightsetError",
    "LightsetLoader",
    "LoaderSettings",
    "LoggingSettings",
    "SourceError",
    "UrlSourceSettings",
    "ValueKind",
    "ValueTypeMismatchError",
    "fetch_url_text",
    "infer_value",
    "load",
    "load_path",
    "load_resource",
    "load_stream",
    "load_string",
    "load_url",
]
