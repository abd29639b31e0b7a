"""String helpers with C library semantics: search, compare, copy and split."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str | None, second: str | None) -> str:
    """Concatenate two strings; None counts as empty."""
    return (first or "") + (second or "")


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _single_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    if _single_char(char) == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the end of the string.
    """
    if _single_char(char) == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference at the first mismatch, where the end of a
    string counts as code 0, or 0 when no difference is found.
    """
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` within the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the new buffer contents and the length of ``src``. With a size
    of 0 the buffer ``dst`` is left as it was.
    """
    if size <= 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the new buffer contents and the length the full result would
    have needed. When the buffer is already full, ``dst`` is unchanged and
    the length reported is ``len(src) + size``.
    """
    dst_len = len(dst)
    if size <= dst_len:
        return dst, len(src) + size
    return dst + src[:size - 1 - dst_len], len(src) + dst_len


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence[str],
             func: Callable[[int, str], str]) -> None:
    """Replace each character of ``chars`` in place with ``func(index, char)``."""
    for index, char in enumerate(list(chars)):
        chars[index] = func(index, char)