"""Value coercion for parsed INI data and stringification for saving."""

from __future__ import annotations

import re
from typing import Any, Protocol, Union, runtime_checkable

Value = Union[int, float, bool, str]

_INT_RE = re.compile(r"^[+-]?\d+$")
_HEX_RE = re.compile(r"^[+-]?0[xX][0-9a-fA-F]+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")


@runtime_checkable
class Stringable(Protocol):
    """Object providing its own INI text form."""

    def to_ini(self) -> str: ...


def parse_number(raw: str) -> int | float | None:
    """Return *raw* as a number, or ``None`` when it is not a number literal.

    Integral literals (decimal or ``0x`` hex) give :class:`int`, anything with
    a fraction or an exponent gives :class:`float`.  Words such as ``nan`` or
    ``inf`` are not numbers.
    """
    if _INT_RE.match(raw):
        return int(raw)
    if _HEX_RE.match(raw):
        return int(raw, 16)
    if _FLOAT_RE.match(raw):
        return float(raw)
    return None


def coerce_value(raw: str) -> Value:
    """Apply the number -> boolean -> string precedence to a raw value."""
    number = parse_number(raw)
    if number is not None:
        return number
    if raw == "true":
        return True
    if raw == "false":
        return False
    return raw


def format_value(value: Any) -> str:
    # bool first: it is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, Stringable):
        return value.to_ini()
    return str(value)
