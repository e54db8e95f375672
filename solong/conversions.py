"""Integer parsing and formatting helpers."""

from __future__ import annotations

from collections.abc import Iterable

_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` into a two's-complement integer of ``bits`` width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_leading_integer(text: str) -> int:
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    number = int("".join(digits)) if digits else 0
    return number * sign


def atoi(text: str) -> int:
    """Parse the leading integer of ``text`` as a 32-bit signed int.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Values outside the 32-bit range wrap.
    """
    return _wrap(_parse_leading_integer(text), 32)


def atol(text: str) -> int:
    """Parse the leading integer of ``text`` as a 64-bit signed long."""
    return _wrap(_parse_leading_integer(text), 64)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def lower_hex(number: int) -> str:
    """Return ``number`` in lowercase hexadecimal, without prefix.

    Raises ValueError for negative numbers, which have no such form.
    """
    if number < 0:
        raise ValueError(f"cannot format negative number {number} as hex")
    return format(number, "x")


def sort_ints(values: Iterable[int]) -> list[int]:
    """Return the integers of ``values`` in ascending order."""
    return sorted(values)