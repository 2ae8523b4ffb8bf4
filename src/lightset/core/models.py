from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Union

ValueKind = Literal["boolean", "byte", "short", "int", "long", "float", "double", "string"]
Payload = Union[bool, int, float, str]

INTEGER_KINDS: frozenset[str] = frozenset({"byte", "short", "int", "long"})
FLOAT_KINDS: frozenset[str] = frozenset({"float", "double"})

_PAYLOAD_TYPES: dict[str, type] = {
    "boolean": bool,
    "byte": int,
    "short": int,
    "int": int,
    "long": int,
    "float": float,
    "double": float,
    "string": str,
}


@dataclass(frozen=True, slots=True)
class ConfigValue:
    """
    A single inferred configuration value.

    Exactly one variant (``kind``) is active per instance. ``float`` payloads already hold the
    value rounded to single precision.
    """

    kind: ValueKind
    value: Payload

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES.get(self.kind)
        if expected is None:
            raise ValueError(f"Unknown value kind: {self.kind}")
        if type(self.value) is not expected:
            raise TypeError(
                f"Payload does not match kind. kind={self.kind} payload_type={type(self.value).__name__}"
            )

    @classmethod
    def boolean(cls, value: bool) -> ConfigValue:
        return cls(kind="boolean", value=value)

    @classmethod
    def string(cls, value: str) -> ConfigValue:
        return cls(kind="string", value=value)

    @property
    def is_integer(self) -> bool:
        return self.kind in INTEGER_KINDS

    @property
    def is_float(self) -> bool:
        return self.kind in FLOAT_KINDS

    def __str__(self) -> str:
        if self.kind == "boolean":
            return "true" if self.value else "false"
        if self.is_float:
            if math.isnan(self.value):  # type: ignore[arg-type]
                return "NaN"
            if math.isinf(self.value):  # type: ignore[arg-type]
                return "Infinity" if self.value > 0 else "-Infinity"  # type: ignore[operator]
        return str(self.value)


@dataclass(frozen=True, slots=True)
class RawLine:
    """A declaration line split at its first ``=``. Neither side is trimmed."""

    key: str
    raw_value: str
