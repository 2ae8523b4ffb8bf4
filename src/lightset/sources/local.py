from __future__ import annotations

import io
import logging
import os
from importlib import resources
from typing import IO, Optional, Union

from lightset.config.models import LoaderSettings
from lightset.config.store import Configuration, load
from lightset.errors import SourceError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_stream(stream: IO, settings: Optional[LoaderSettings] = None) -> Configuration:
    """
    Load from an already-open stream.

    Text streams are read as they are; binary streams are decoded with the configured encoding.
    The stream is left open for the caller to close.
    """
    if isinstance(stream, io.TextIOBase):
        return load(stream)

    settings = settings or LoaderSettings()
    reader = io.TextIOWrapper(stream, encoding=settings.encoding, errors=settings.decode_errors, newline=None)
    try:
        return load(reader)
    except UnicodeDecodeError as exc:
        raise SourceError(f"Configuration source is not valid {settings.encoding} text.") from exc
    finally:
        reader.detach()


def load_path(path: PathLike, settings: Optional[LoaderSettings] = None) -> Configuration:
    """Load from a file on disk. A missing file raises ``FileNotFoundError``."""
    logger.debug("Loading configuration file. path=%s", path)
    with open(path, "rb") as handle:
        return load_stream(handle, settings)


def load_resource(package: str, resource: str, settings: Optional[LoaderSettings] = None) -> Configuration:
    """Load a data file shipped inside an importable package, e.g. ``("myapp", "defaults.conf")``."""
    try:
        target = resources.files(package)
    except ModuleNotFoundError as exc:
        raise FileNotFoundError(f"Resource not found: {package}/{resource}") from exc

    for part in resource.split("/"):
        if part:
            target = target / part
    if not target.is_file():
        raise FileNotFoundError(f"Resource not found: {package}/{resource}")

    logger.debug("Loading configuration resource. package=%s resource=%s", package, resource)
    with target.open("rb") as handle:
        return load_stream(handle, settings)


def load_string(text: str) -> Configuration:
    """Load from an in-memory string. ``\\n``, ``\\r\\n`` and ``\\r`` all end a line."""
    return load(io.StringIO(text, newline=None))
