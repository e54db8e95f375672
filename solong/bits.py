"""Bit manipulation on single octets."""

from __future__ import annotations


def _check_octet(octet: int) -> int:
    if not 0 <= octet <= 0xFF:
        raise ValueError(f"octet out of range: {octet}")
    return octet


def format_bits(octet: int) -> str:
    """Return the eight bits of ``octet``, most significant first."""
    return format(_check_octet(octet), "08b")


def reverse_bits(octet: int) -> int:
    """Return ``octet`` with the order of its eight bits reversed."""
    value = _check_octet(octet)
    result = 0
    for _ in range(8):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


def swap_bits(octet: int) -> int:
    """Return ``octet`` with its high and low nibbles exchanged."""
    value = _check_octet(octet)
    return ((value >> 4) | (value << 4)) & 0xFF