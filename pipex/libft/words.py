"""Building new strings from old ones: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end, or a zero length, gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if length == 0 or start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """``s1`` followed by ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without the leading and trailing characters found in ``charset``.

    An empty ``charset`` returns ``s`` unchanged.
    """
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """The non-empty words of ``s`` separated by runs of the character ``sep``."""
    if s is None:
        raise TypeError("split needs a string")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``s``."""
    if s is None or func is None:
        raise TypeError("strmapi needs a string and a function")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence[Any]],
    func: Optional[Callable[[int, Any], Any]],
) -> None:
    """Call ``func(index, item)`` for each item of ``s`` in order.

    A result other than None replaces the item in place. Nothing happens
    when either argument is missing.
    """
    if s is None or func is None:
        return
    for index, item in enumerate(list(s)):
        result = func(index, item)
        if result is not None:
            s[index] = result