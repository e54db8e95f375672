"""String helpers: splitting, trimming, searching and comparing."""

from __future__ import annotations

from collections.abc import Callable


def _check_separator(sep: str) -> str:
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def _pieces(text: str, sep: str) -> list[str]:
    return [piece for piece in text.split(_check_separator(sep)) if piece]


def count_words(text: str, sep: str) -> int:
    """Count the non-empty runs of ``text`` separated by ``sep``."""
    return len(_pieces(text, sep))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return _pieces(text, sep)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> str | None:
    """Find ``needle`` within the first ``limit`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, the whole haystack for
    an empty needle, or None when there is no match.
    """
    if not needle:
        return haystack
    if limit < 0:
        raise ValueError("limit must not be negative")
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else haystack[index:]


def _difference(left: str, right: str) -> int:
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    if len(left) == len(right):
        return 0
    if len(left) > len(right):
        return ord(left[len(right)])
    return -ord(right[len(left)])


def strcmp(left: str, right: str) -> int:
    """Compare two strings; return the difference of the first mismatch."""
    return _difference(left, right)


def strncmp(left: str, right: str, limit: int) -> int:
    """Compare at most ``limit`` characters of two strings."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return _difference(left[:limit], right[:limit])


def strrev(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))