"""Two-Way substring search in the forward and reverse directions.

The needle is split at a critical position. Each candidate is checked by
scanning the right part first and the left part only if that matched. A
cheap approximate byte set lets whole windows be skipped when their edge
byte cannot occur in the needle. The forward searcher can also use a
prefilter to jump to likely candidates. Both run in linear time.
"""

from __future__ import annotations

from typing import Optional

from bytesearch.prefilter import Pre
from bytesearch.suffix import (
    ApproximateByteSet,
    Shift,
    SuffixKind,
    shift_forward,
    shift_reverse,
    suffix_forward,
    suffix_reverse,
)
from bytesearch.util import BytesLike


def _check_inputs(haystack: BytesLike, needle: BytesLike) -> None:
    if not needle:
        raise ValueError("needle should not be empty")
    if len(needle) > len(haystack):
        raise ValueError("haystack too short")


class Forward:
    """A Two-Way searcher that scans haystacks from front to back."""

    __slots__ = ("byteset", "critical_pos", "shift")

    def __init__(self, needle: BytesLike) -> None:
        if not needle:
            self.byteset = ApproximateByteSet()
            self.critical_pos = 0
            self.shift = Shift.large(0)
            return
        self.byteset = ApproximateByteSet.from_needle(needle)
        min_suffix = suffix_forward(needle, SuffixKind.MINIMAL)
        max_suffix = suffix_forward(needle, SuffixKind.MAXIMAL)
        chosen = min_suffix if min_suffix.pos > max_suffix.pos else max_suffix
        self.critical_pos = chosen.pos
        self.shift = shift_forward(needle, chosen.period, chosen.pos)

    def __repr__(self) -> str:
        return (
            f"Forward(critical_pos={self.critical_pos!r}, shift={self.shift!r})"
        )

    def find(
        self,
        haystack: BytesLike,
        needle: BytesLike,
        pre: Optional[Pre] = None,
    ) -> Optional[int]:
        """Return the offset of the first occurrence of ``needle``, or None.

        ``needle`` must be the one this searcher was built from, must not be
        empty, and must be no longer than ``haystack``; otherwise ValueError
        is raised. ``pre``, when given, is used to jump to candidates.
        """
        _check_inputs(haystack, needle)
        if self.shift.small:
            return self._find_small(pre, haystack, needle, self.shift.amount)
        return self._find_large(pre, haystack, needle, self.shift.amount)

    def _find_small(
        self,
        pre: Optional[Pre],
        haystack: BytesLike,
        needle: BytesLike,
        period: int,
    ) -> Optional[int]:
        n = len(needle)
        hlen = len(haystack)
        critical = self.critical_pos
        last_byte = n - 1
        pos = 0
        shift = 0
        while pos + n <= hlen:
            i = max(critical, shift)
            if pre is not None and pre.should_call():
                found = pre.call(haystack[pos:], needle)
                if found is None:
                    return None
                pos += found
                shift = 0
                i = critical
                if pos + n > hlen:
                    return None
            if not self.byteset.contains(haystack[pos + last_byte]):
                pos += n
                shift = 0
                continue
            while i < n and needle[i] == haystack[pos + i]:
                i += 1
            if i < n:
                pos += i - critical + 1
                shift = 0
            else:
                j = critical
                while j > shift and needle[j] == haystack[pos + j]:
                    j -= 1
                if j <= shift and needle[shift] == haystack[pos + shift]:
                    return pos
                pos += period
                shift = n - period
        return None

    def _find_large(
        self,
        pre: Optional[Pre],
        haystack: BytesLike,
        needle: BytesLike,
        shift: int,
    ) -> Optional[int]:
        n = len(needle)
        hlen = len(haystack)
        critical = self.critical_pos
        last_byte = n - 1
        pos = 0
        while pos + n <= hlen:
            if pre is not None and pre.should_call():
                found = pre.call(haystack[pos:], needle)
                if found is None:
                    return None
                pos += found
                if pos + n > hlen:
                    return None
            if not self.byteset.contains(haystack[pos + last_byte]):
                pos += n
                continue
            i = critical
            while i < n and needle[i] == haystack[pos + i]:
                i += 1
            if i < n:
                pos += i - critical + 1
            elif haystack[pos:pos + critical] == needle[:critical]:
                return pos
            else:
                pos += shift
        return None


class Reverse:
    """A Two-Way searcher that scans haystacks from back to front."""

    __slots__ = ("byteset", "critical_pos", "shift")

    def __init__(self, needle: BytesLike) -> None:
        if not needle:
            self.byteset = ApproximateByteSet()
            self.critical_pos = 0
            self.shift = Shift.large(0)
            return
        self.byteset = ApproximateByteSet.from_needle(needle)
        min_suffix = suffix_reverse(needle, SuffixKind.MINIMAL)
        max_suffix = suffix_reverse(needle, SuffixKind.MAXIMAL)
        chosen = min_suffix if min_suffix.pos < max_suffix.pos else max_suffix
        self.critical_pos = chosen.pos
        self.shift = shift_reverse(needle, chosen.period, chosen.pos)

    def __repr__(self) -> str:
        return (
            f"Reverse(critical_pos={self.critical_pos!r}, shift={self.shift!r})"
        )

    def rfind(self, haystack: BytesLike, needle: BytesLike) -> Optional[int]:
        """Return the offset of the last occurrence of ``needle``, or None.

        ``needle`` must be the one this searcher was built from, must not be
        empty, and must be no longer than ``haystack``; otherwise ValueError
        is raised.
        """
        _check_inputs(haystack, needle)
        if self.shift.small:
            return self._rfind_small(haystack, needle, self.shift.amount)
        return self._rfind_large(haystack, needle, self.shift.amount)

    def _rfind_small(
        self, haystack: BytesLike, needle: BytesLike, period: int
    ) -> Optional[int]:
        nlen = len(needle)
        critical = self.critical_pos
        pos = len(haystack)
        shift = nlen
        while pos >= nlen:
            start = pos - nlen
            if not self.byteset.contains(haystack[start]):
                pos -= nlen
                shift = nlen
                continue
            i = min(critical, shift)
            while i > 0 and needle[i - 1] == haystack[start + i - 1]:
                i -= 1
            if i > 0 or needle[0] != haystack[start]:
                pos -= critical - i + 1
                shift = nlen
            else:
                j = critical
                while j < shift and needle[j] == haystack[start + j]:
                    j += 1
                if j >= shift:
                    return start
                pos -= period
                shift = period
        return None

    def _rfind_large(
        self, haystack: BytesLike, needle: BytesLike, shift: int
    ) -> Optional[int]:
        nlen = len(needle)
        critical = self.critical_pos
        pos = len(haystack)
        while pos >= nlen:
            start = pos - nlen
            if not self.byteset.contains(haystack[start]):
                pos -= nlen
                continue
            i = critical
            while i > 0 and needle[i - 1] == haystack[start + i - 1]:
                i -= 1
            if i > 0 or needle[0] != haystack[start]:
                pos -= critical - i + 1
            elif haystack[start + critical:pos] == needle[critical:]:
                return start
            else:
                pos -= shift
        return None


def twoway_find(haystack: BytesLike, needle: BytesLike) -> Optional[int]:
    """Forward Two-Way search that also accepts degenerate inputs."""
    if not needle:
        return 0
    if len(haystack) < len(needle):
        return None
    return Forward(needle).find(haystack, needle)


def twoway_rfind(haystack: BytesLike, needle: BytesLike) -> Optional[int]:
    """Reverse Two-Way search that also accepts degenerate inputs."""
    if not needle:
        return len(haystack)
    if len(haystack) < len(needle):
        return None
    return Reverse(needle).rfind(haystack, needle)