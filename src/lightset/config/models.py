from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UrlSourceSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout_seconds: float = 30
    headers: Dict[str, str] = Field(default_factory=dict)


class LoaderSettings(BaseModel):
    """
    How sources are decoded and fetched.

    ``decode_errors="replace"`` substitutes undecodable bytes the way a lenient stream reader
    does; ``"strict"`` turns them into a ``SourceError``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = "utf-8"
    decode_errors: Literal["strict", "replace"] = "replace"
    url: UrlSourceSettings = Field(default_factory=UrlSourceSettings)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        return value


class FileRotationSettings(BaseModel):
    """Daily log file rotation; ``backup_count`` old files are kept."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = "data/logs/lightset.log"
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: Optional[FileLoggingSettings] = None


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Where a configuration is read from.

    Exactly one origin must be set: ``path``, ``resource`` (together with ``package``), ``url`` or
    ``text``.
    """

    path: Optional[str] = None
    package: Optional[str] = None
    resource: Optional[str] = None
    url: Optional[str] = None
    text: Optional[str] = None

    def origin(self) -> str:
        origins = [
            name
            for name, value in (
                ("path", self.path),
                ("resource", self.resource),
                ("url", self.url),
                ("text", self.text),
            )
            if value is not None
        ]
        if len(origins) != 1:
            raise ValueError(
                f"ConfigLoadRequest needs exactly one of path, resource, url or text. got={origins or 'none'}"
            )
        if origins[0] == "resource" and not self.package:
            raise ValueError("ConfigLoadRequest.resource requires package.")
        return origins[0]
