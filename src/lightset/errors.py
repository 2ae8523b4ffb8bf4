from __future__ import annotations


class LightsetError(Exception):
    pass


class SourceError(LightsetError, OSError):
    """The configuration source could not be opened or read."""


class ValueTypeMismatchError(LightsetError, TypeError):
    """A typed accessor was called with a type that does not match the stored variant."""

    def __init__(self, *, key: str, stored_kind: str, expected: str) -> None:
        super().__init__(
            f"Configuration value has a different type. key={key!r} stored={stored_kind} expected={expected}"
        )
        self.key = key
        self.stored_kind = stored_kind
        self.expected = expected
