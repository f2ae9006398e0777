"""Small byte-string comparison helpers shared by the search routines."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def is_prefix(haystack: BytesLike, needle: BytesLike) -> bool:
    """Return True if and only if ``needle`` is a prefix of ``haystack``."""
    n = len(needle)
    return n <= len(haystack) and haystack[:n] == needle


def is_suffix(haystack: BytesLike, needle: BytesLike) -> bool:
    """Return True if and only if ``needle`` is a suffix of ``haystack``."""
    n = len(needle)
    h = len(haystack)
    return n <= h and haystack[h - n:] == needle