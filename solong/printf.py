"""A small printf supporting the c, s, d, i, u, x, X, p and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else int(value)
    if address < 0:
        raise ValueError("pointer address cannot be negative")
    return "0x" + format(address, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_string(value)
    if spec in "di":
        return str(_to_int32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    if spec == "x":
        return format(int(value) & _UINT_MASK, "x")
    if spec == "X":
        return format(int(value) & _UINT_MASK, "X")
    return _format_pointer(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the result.

    Unknown conversions are dropped along with their specifier character;
    a lone trailing ``%`` is ignored.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)