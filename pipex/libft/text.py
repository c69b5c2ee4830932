"""String searching, comparison and bounded copying.

Positions are returned as indices into the string, or None where
nothing was found. Characters compare by code point.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Union

CharLike = Union[str, int]


class BoundedCopy(NamedTuple):
    """Result of a size-bounded copy: the new text and the length it tried to make."""

    text: str
    length: int


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def strlen(s: Optional[str]) -> int:
    """Length of ``s``; a missing string counts as empty."""
    return 0 if s is None else len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator ``"\\0"`` is found at the end."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator ``"\\0"`` is found at the end."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    The end of a string compares as code 0. Returns the difference of the
    first differing codes, or 0.
    """
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two whole strings; the difference of the first differing codes, or 0."""
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if not little:
        return 0
    index = big[: max(length, 0)].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s``."""
    return str(s)


def strlcpy(dst: str, src: str, size: int) -> BoundedCopy:
    """Copy ``src`` into a destination holding ``size`` characters with terminator.

    With ``size`` 0 the destination is left as it was. The returned length
    is always that of ``src``.
    """
    if size <= 0:
        return BoundedCopy(dst, len(src))
    return BoundedCopy(src[: size - 1], len(src))


def strlcat(dst: str, src: str, size: int) -> BoundedCopy:
    """Append ``src`` to ``dst`` within a total of ``size`` characters with terminator.

    When ``size`` is no more than ``len(dst)`` nothing is appended and the
    length reported is ``size + len(src)``; otherwise it is
    ``len(dst) + len(src)``.
    """
    dlen, slen = len(dst), len(src)
    if size <= dlen:
        return BoundedCopy(dst, size + slen)
    return BoundedCopy(dst + src[: size - dlen - 1], dlen + slen)