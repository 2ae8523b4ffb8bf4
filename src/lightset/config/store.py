from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional, Union, get_args

from lightset.core.models import FLOAT_KINDS, INTEGER_KINDS, ConfigValue, Payload, ValueKind
from lightset.errors import ValueTypeMismatchError
from lightset.parser import infer_value, split_line, strip_line_terminator

logger = logging.getLogger(__name__)

Visitor = Callable[[str, ConfigValue], Any]
ExpectedType = Union[ValueKind, type]

_KNOWN_KINDS: frozenset[str] = frozenset(get_args(ValueKind))

_KINDS_BY_PYTHON_TYPE: dict[type, frozenset[str]] = {
    bool: frozenset({"boolean"}),
    int: INTEGER_KINDS,
    float: FLOAT_KINDS,
    str: frozenset({"string"}),
}


def _accepted_kinds(expected: ExpectedType) -> frozenset[str]:
    if isinstance(expected, str):
        if expected not in _KNOWN_KINDS:
            raise ValueError(f"Unknown value kind: {expected}")
        return frozenset({expected})
    kinds = _KINDS_BY_PYTHON_TYPE.get(expected)
    if kinds is None:
        raise ValueError(f"Unsupported expected type: {getattr(expected, '__name__', expected)}")
    return kinds


def _describe(expected: ExpectedType) -> str:
    return expected if isinstance(expected, str) else expected.__name__


class Configuration(Mapping[str, ConfigValue]):
    """
    Loaded key to value mapping.

    The mapping is fixed when the instance is created and is never mutated afterwards, so one
    instance can be shared between threads for reading. Iteration order is not part of the
    contract.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, ConfigValue]] = None) -> None:
        self._entries: Mapping[str, ConfigValue] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, key: str) -> ConfigValue:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Configuration({dict(self._entries)!r})"

    def each(self, visit: Visitor) -> Configuration:
        """Call ``visit(key, value)`` for every entry."""
        for key, value in self._entries.items():
            visit(key, value)
        return self

    def get(self, key: str, default: Optional[ConfigValue] = None) -> Optional[ConfigValue]:  # type: ignore[override]
        """Return the stored value, or ``default`` unchanged when the key is missing."""
        return self._entries.get(key, default)

    def get_optional(self, key: str) -> Optional[ConfigValue]:
        return self._entries.get(key)

    def get_raw(self, key: str, default: Any = None) -> Any:
        """Return the Python payload of the stored value, or ``default``."""
        value = self._entries.get(key)
        if value is None:
            return default
        return value.value

    def get_typed(self, key: str, expected: ExpectedType, default: Any = None) -> Any:
        """
        Return the payload when the stored variant matches ``expected``.

        ``expected`` is either a value kind (``"byte"``, ``"double"``, ...) which must match
        exactly, or one of ``bool``, ``int``, ``float``, ``str``. ``int`` accepts every integer
        width and ``float`` both float widths. A missing key returns ``default`` unchecked; a
        present key of another variant raises ``ValueTypeMismatchError``.
        """
        accepted = _accepted_kinds(expected)
        value = self._entries.get(key)
        if value is None:
            return default
        if value.kind not in accepted:
            raise ValueTypeMismatchError(key=key, stored_kind=value.kind, expected=_describe(expected))
        return value.value

    def get_bool(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        return self.get_typed(key, bool, default)

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        return self.get_typed(key, int, default)

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        return self.get_typed(key, float, default)

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.get_typed(key, str, default)

    def to_dict(self) -> dict[str, Payload]:
        """Return a plain ``{key: payload}`` copy."""
        return {key: value.value for key, value in self._entries.items()}


def load(lines: Iterable[str]) -> Configuration:
    """
    Drain ``lines`` into a new ``Configuration``.

    ``lines`` is any iterable of text lines, an open text stream included. It is read once from
    start to end and is not closed here. Read errors propagate and no configuration is returned.
    Later declarations of a key replace earlier ones.
    """
    entries: Dict[str, ConfigValue] = {}
    skipped = 0
    for line in lines:
        raw_line = split_line(strip_line_terminator(line))
        if raw_line is None:
            skipped += 1
            continue
        entries[raw_line.key] = infer_value(raw_line.raw_value)

    logger.debug("Configuration loaded. entries=%s skipped_lines=%s", len(entries), skipped)
    return Configuration(entries)
