"""Classical Rabin-Karp substring search for short haystacks.

The hash of a window ``b0 .. b(n-1)`` is ``sum(b_i * 2**(n-1-i))`` computed
with 32-bit wrapping arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bytesearch.util import BytesLike, is_prefix, is_suffix

_MASK = 0xFFFFFFFF


def _add(hash_value: int, byte: int) -> int:
    return ((hash_value << 1) + byte) & _MASK


def hash_forward(data: BytesLike) -> int:
    """Hash ``data`` for use in forward searches."""
    hash_value = 0
    for byte in data:
        hash_value = _add(hash_value, byte)
    return hash_value


def hash_reverse(data: BytesLike) -> int:
    """Hash ``data`` for use in reverse searches."""
    hash_value = 0
    for byte in reversed(data):
        hash_value = _add(hash_value, byte)
    return hash_value


@dataclass(frozen=True)
class NeedleHash:
    """The hash of a needle plus the factor needed to roll a byte out."""

    hash: int = 0
    hash_2pow: int = 1

    @classmethod
    def forward(cls, needle: BytesLike) -> "NeedleHash":
        """Hash a needle for forward searching."""
        if not needle:
            return cls()
        return cls(hash_forward(needle), (1 << (len(needle) - 1)) & _MASK)

    @classmethod
    def reverse(cls, needle: BytesLike) -> "NeedleHash":
        """Hash a needle for reverse searching."""
        if not needle:
            return cls()
        return cls(hash_reverse(needle), (1 << (len(needle) - 1)) & _MASK)

    def matches(self, hash: int) -> bool:
        """Return True if the given window hash equals this needle's hash."""
        return self.hash == hash

    def _roll(self, hash_value: int, old: int, new: int) -> int:
        hash_value = (hash_value - old * self.hash_2pow) & _MASK
        return _add(hash_value, new)


def is_fast(haystack: BytesLike, needle: BytesLike) -> bool:
    """Whether Rabin-Karp is believed to be very fast for these inputs."""
    return len(haystack) < 16


def find(haystack: BytesLike, needle: BytesLike) -> Optional[int]:
    """Return the offset of the first occurrence of ``needle``, or None."""
    return find_with(NeedleHash.forward(needle), haystack, needle)


def find_with(
    nhash: NeedleHash, haystack: BytesLike, needle: BytesLike
) -> Optional[int]:
    """Forward search using a precomputed forward needle hash."""
    n = len(needle)
    last = len(haystack) - n
    if last < 0:
        return None
    window = hash_forward(haystack[:n])
    for start in range(last + 1):
        if nhash.matches(window) and is_prefix(haystack[start:], needle):
            return start
        if start < last:
            window = nhash._roll(window, haystack[start], haystack[start + n])
    return None


def rfind(haystack: BytesLike, needle: BytesLike) -> Optional[int]:
    """Return the offset of the last occurrence of ``needle``, or None."""
    return rfind_with(NeedleHash.reverse(needle), haystack, needle)


def rfind_with(
    nhash: NeedleHash, haystack: BytesLike, needle: BytesLike
) -> Optional[int]:
    """Reverse search using a precomputed reverse needle hash."""
    n = len(needle)
    if len(haystack) < n:
        return None
    window = hash_reverse(haystack[len(haystack) - n:])
    for end in range(len(haystack), n - 1, -1):
        if nhash.matches(window) and is_suffix(haystack[:end], needle):
            return end - n
        if end > n:
            window = nhash._roll(window, haystack[end - 1], haystack[end - n - 1])
    return None