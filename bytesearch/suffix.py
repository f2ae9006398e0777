"""Critical factorisation helpers for Two-Way substring search.

The Two-Way searchers need a critical position in the needle. That position
is where a lexicographically maximal or minimal suffix begins. They also need
the shift allowed after a mismatch, and a cheap approximate set of the
needle's bytes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from bytesearch.util import BytesLike, is_prefix, is_suffix


class SuffixKind(enum.Enum):
    """Which kind of suffix to extract from a needle.

    ``MINIMAL`` is not strictly the smallest suffix: given ``a`` and ``aa``
    it picks ``aa``. ``MAXIMAL`` really picks the largest suffix.
    """

    MINIMAL = "minimal"
    MAXIMAL = "maximal"


class _Ordering(enum.Enum):
    ACCEPT = "accept"  # the candidate supplants the current suffix
    SKIP = "skip"  # the candidate is ruled out
    PUSH = "push"  # undecided; compare the next bytes


def _compare(kind: SuffixKind, current: int, candidate: int) -> _Ordering:
    if candidate == current:
        return _Ordering.PUSH
    better = candidate < current if kind is SuffixKind.MINIMAL else candidate > current
    return _Ordering.ACCEPT if better else _Ordering.SKIP


@dataclass(frozen=True)
class Suffix:
    """A suffix of a needle and its period.

    For a forward suffix ``needle[pos:]`` is the suffix. For a reverse suffix
    ``needle[:pos]`` is the suffix of the reversed needle. The period belongs
    to the suffix and is at most the period of the whole needle.
    """

    pos: int
    period: int


def suffix_forward(needle: BytesLike, kind: SuffixKind) -> Suffix:
    """Find the maximal or minimal suffix of ``needle`` and its period."""
    if not needle:
        raise ValueError("needle must not be empty")
    pos, period = 0, 1
    candidate_start = 1
    offset = 0
    n = len(needle)
    while candidate_start + offset < n:
        current = needle[pos + offset]
        candidate = needle[candidate_start + offset]
        ordering = _compare(kind, current, candidate)
        if ordering is _Ordering.ACCEPT:
            pos, period = candidate_start, 1
            candidate_start += 1
            offset = 0
        elif ordering is _Ordering.SKIP:
            candidate_start += offset + 1
            offset = 0
            period = candidate_start - pos
        elif offset + 1 == period:
            candidate_start += period
            offset = 0
        else:
            offset += 1
    return Suffix(pos, period)


def suffix_reverse(needle: BytesLike, kind: SuffixKind) -> Suffix:
    """Like :func:`suffix_forward`, but for the needle read backwards."""
    if not needle:
        raise ValueError("needle must not be empty")
    n = len(needle)
    pos, period = n, 1
    if n == 1:
        return Suffix(pos, period)
    candidate_start = n - 1
    offset = 0
    while offset < candidate_start:
        current = needle[pos - offset - 1]
        candidate = needle[candidate_start - offset - 1]
        ordering = _compare(kind, current, candidate)
        if ordering is _Ordering.ACCEPT:
            pos, period = candidate_start, 1
            candidate_start -= 1
            offset = 0
        elif ordering is _Ordering.SKIP:
            candidate_start -= offset + 1
            offset = 0
            period = pos - candidate_start
        elif offset + 1 == period:
            candidate_start -= period
            offset = 0
        else:
            offset += 1
    return Suffix(pos, period)


@dataclass(frozen=True)
class Shift:
    """How far Two-Way search may shift after a mismatch.

    When ``small`` is true, ``amount`` is the exact period of the needle and
    the small-period search applies. Otherwise ``amount`` is the large shift
    ``max(len(u), len(v))`` of the critical factorisation ``needle = uv``.
    """

    amount: int
    small: bool

    @classmethod
    def small_period(cls, period: int) -> "Shift":
        """A shift by the needle's exact period."""
        return cls(period, True)

    @classmethod
    def large(cls, shift: int) -> "Shift":
        """A shift by the larger part of the critical factorisation."""
        return cls(shift, False)


def shift_forward(
    needle: BytesLike, period_lower_bound: int, critical_pos: int
) -> Shift:
    """Compute the shift for a forward search."""
    n = len(needle)
    large = max(critical_pos, n - critical_pos)
    if critical_pos * 2 >= n:
        return Shift.large(large)
    u, v = needle[:critical_pos], needle[critical_pos:]
    if not is_suffix(v[:period_lower_bound], u):
        return Shift.large(large)
    return Shift.small_period(period_lower_bound)


def shift_reverse(
    needle: BytesLike, period_lower_bound: int, critical_pos: int
) -> Shift:
    """Compute the shift for a reverse search."""
    n = len(needle)
    large = max(critical_pos, n - critical_pos)
    if (n - critical_pos) * 2 >= n:
        return Shift.large(large)
    v, u = needle[:critical_pos], needle[critical_pos:]
    if not is_prefix(v[max(0, len(v) - period_lower_bound):], u):
        return Shift.large(large)
    return Shift.small_period(period_lower_bound)


@dataclass(frozen=True)
class ApproximateByteSet:
    """A 64-bit set where bit ``b % 64`` is set for every byte ``b`` present.

    Membership may give false positives but never false negatives.
    """

    bits: int = 0

    @classmethod
    def from_needle(cls, needle: BytesLike) -> "ApproximateByteSet":
        """Build the set from the bytes of ``needle``."""
        bits = 0
        for byte in needle:
            bits |= 1 << (byte % 64)
        return cls(bits)

    def contains(self, byte: int) -> bool:
        """Return True if ``byte`` might be in the set."""
        return bool(self.bits & (1 << (byte % 64)))