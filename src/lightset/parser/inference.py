"""
Value type inference.

A raw value is tried against an ordered cascade of parsers and becomes the first variant that
accepts it:

1. ``true`` / ``false`` (any case) -> boolean
2. float literal with an ``f``/``F`` suffix -> float
3. float literal with a ``d``/``D`` suffix -> double
4. decimal integer, narrowest of byte, short, int, long
5. float literal that stays finite in single precision -> float
6. float literal in double precision, infinity included -> double
7. anything else -> the unchanged string

The boolean and integer steps never trim whitespace, so ``" true"`` stays a string. The float
steps ignore surrounding spaces and control characters, so ``" 8080"`` is a float.
"""

from __future__ import annotations

import math
import re
import struct
from typing import Optional

from lightset.core.models import ConfigValue, ValueKind

_INTEGER_PATTERN = re.compile(r"-?[0-9]+", re.ASCII)

_DECIMAL_LITERAL = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_HEX_LITERAL = r"0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
_FLOAT_PATTERN = re.compile(
    rf"(?P<sign>[+-]?)(?:(?P<special>NaN|Infinity)|(?P<hex>{_HEX_LITERAL})[fFdD]?|(?P<decimal>{_DECIMAL_LITERAL})[fFdD]?)",
    re.ASCII,
)

# Characters U+0000 to U+0020, dropped from both ends before a float literal is matched.
_FLOAT_TRIM_CHARS = "".join(chr(code) for code in range(0x21))

# Longest digit run without leading zeros that can still fit in 64 bits.
_MAX_LONG_DIGITS = 19

_INTEGER_RANGES: tuple[tuple[ValueKind, int, int], ...] = (
    ("byte", -(2**7), 2**7 - 1),
    ("short", -(2**15), 2**15 - 1),
    ("int", -(2**31), 2**31 - 1),
    ("long", -(2**63), 2**63 - 1),
)

# Smallest magnitude that rounds to infinity in single precision (round-half-even).
_FLOAT32_OVERFLOW = (2 - 2**-24) * 2.0**127


def to_float32(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    if math.isnan(value) or math.isinf(value):
        return value
    if abs(value) >= _FLOAT32_OVERFLOW:
        return math.copysign(math.inf, value)
    return struct.unpack("<f", struct.pack("<f", value))[0]


def parse_float_literal(text: str) -> Optional[float]:
    """
    Parse a numeric literal in double precision.

    Accepts an optional sign, ``NaN``, ``Infinity``, decimal literals with an optional exponent,
    and hexadecimal literals with a mandatory binary exponent. Decimal and hexadecimal literals may
    end with one ``f``/``F``/``d``/``D`` suffix. Spaces and control characters around the literal are
    ignored. Returns ``None`` when the text is not a literal.
    """
    match = _FLOAT_PATTERN.fullmatch(text.strip(_FLOAT_TRIM_CHARS))
    if match is None:
        return None
    negative = match.group("sign") == "-"

    special = match.group("special")
    if special is not None:
        result = math.nan if special == "NaN" else math.inf
    elif match.group("hex") is not None:
        try:
            result = float.fromhex(match.group("hex"))
        except OverflowError:
            result = math.inf
    else:
        result = float(match.group("decimal"))

    return -result if negative else result


def parse_integer(text: str) -> Optional[int]:
    """Parse an optionally negative run of ASCII digits. No ``+``, spaces or separators."""
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return None
    negative = text.startswith("-")
    significant = text.lstrip("-").lstrip("0")
    if len(significant) > _MAX_LONG_DIGITS:
        return None
    value = int(significant or "0")
    return -value if negative else value


def _infer_number(raw: str) -> Optional[ConfigValue]:
    suffix = raw[-1:].lower()

    if suffix == "f":
        parsed = parse_float_literal(raw)
        if parsed is not None:
            return ConfigValue(kind="float", value=to_float32(parsed))

    if suffix == "d":
        parsed = parse_float_literal(raw)
        if parsed is not None:
            return ConfigValue(kind="double", value=parsed)

    integer = parse_integer(raw)
    if integer is not None:
        for kind, low, high in _INTEGER_RANGES:
            if low <= integer <= high:
                return ConfigValue(kind=kind, value=integer)

    parsed = parse_float_literal(raw)
    if parsed is None:
        return None

    single = to_float32(parsed)
    if not math.isinf(single):
        return ConfigValue(kind="float", value=single)
    return ConfigValue(kind="double", value=parsed)


def infer_value(raw: str) -> ConfigValue:
    """Return the most specific variant for a raw value string."""
    lowered = raw.lower()
    if lowered == "true":
        return ConfigValue.boolean(True)
    if lowered == "false":
        return ConfigValue.boolean(False)

    number = _infer_number(raw)
    if number is not None:
        return number
    return ConfigValue.string(raw)
