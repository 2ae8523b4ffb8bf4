"""Core value types."""

from lightset.core.models import ConfigValue, RawLine, ValueKind

__all__ = ["ConfigValue", "RawLine", "ValueKind"]
