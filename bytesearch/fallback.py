"""A prefilter that only needs a plain byte scan.

Two rare bytes of the needle are picked beforehand. The haystack is scanned
for the rarer one, and each hit is checked against the second rare byte
before it is reported as a candidate. Candidates may be false positives,
but an actual occurrence is never skipped.
"""

from __future__ import annotations

from typing import Optional

from bytesearch.prefilter import PrefilterState
from bytesearch.util import BytesLike


def fallback_find(
    state: PrefilterState,
    rare1i: int,
    rare2i: int,
    haystack: BytesLike,
    needle: BytesLike,
) -> Optional[int]:
    """Return the start of a possible occurrence of ``needle``, or None.

    ``rare1i`` and ``rare2i`` are offsets into ``needle`` of its rarest and
    second rarest bytes. The returned offset never lies past the first real
    occurrence. Once ``state`` says the prefilter is no longer effective,
    the position reached so far is returned as a candidate.
    """
    hay = haystack if isinstance(haystack, (bytes, bytearray)) else bytes(haystack)
    rare1 = needle[rare1i]
    rare2 = needle[rare2i]
    i = 0
    while state.is_effective():
        pos = hay.find(rare1, i)
        if pos < 0:
            return None
        state.update(pos - i)
        i = pos

        # The rare byte cannot be aligned with the start of the haystack.
        if i < rare1i:
            i += 1
            continue

        aligned_rare2i = i - rare1i + rare2i
        if aligned_rare2i >= len(hay) or hay[aligned_rare2i] != rare2:
            i += 1
            continue

        return i - rare1i
    # The heuristic stopped paying off; report where the scan got to.
    return max(i - rare1i, 0)