"""Prefilter configuration and the bookkeeping of prefilter effectiveness."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

from bytesearch.util import BytesLike

_U32_MAX = 0xFFFFFFFF


class Prefilter(enum.Enum):
    """Whether heuristic prefilters may be used to accelerate searching."""

    NONE = "none"
    AUTO = "auto"


@dataclass
class PrefilterState:
    """Tracks how many bytes a prefilter skips on average.

    When the average falls below a threshold the state turns inert and the
    prefilter stops being used. A ``skips`` value of 0 marks an inert state;
    otherwise it is one more than the number of skips recorded.
    """

    skips: int = 1
    skipped: int = 0

    MIN_SKIPS: ClassVar[int] = 50
    MIN_SKIP_BYTES: ClassVar[int] = 8

    @classmethod
    def inert(cls) -> "PrefilterState":
        """Return a state that never allows a prefilter to run."""
        return cls(skips=0, skipped=0)

    def update(self, skipped: int) -> None:
        """Record the number of bytes skipped by the last prefilter call."""
        self.skips = min(self.skips + 1, _U32_MAX)
        self.skipped = min(self.skipped + skipped, _U32_MAX)

    def is_effective(self) -> bool:
        """Return True while the prefilter still seems worth running."""
        if self.skips == 0:
            return False
        recorded = self.skips - 1
        if recorded < self.MIN_SKIPS:
            return True
        if self.skipped >= self.MIN_SKIP_BYTES * recorded:
            return True
        self.skips = 0
        return False


PrefilterFn = Callable[
    [PrefilterState, int, int, BytesLike, BytesLike], Optional[int]
]
"""A candidate finder: (state, rare1i, rare2i, haystack, needle) -> offset."""


@dataclass
class Pre:
    """A prefilter function bundled with its state and rare byte offsets."""

    state: PrefilterState
    prefn: PrefilterFn
    rare1i: int
    rare2i: int

    def should_call(self) -> bool:
        """Return True if the prefilter should be used."""
        return self.state.is_effective()

    def call(self, haystack: BytesLike, needle: BytesLike) -> Optional[int]:
        """Run the prefilter, returning a candidate start offset or None."""
        return self.prefn(self.state, self.rare1i, self.rare2i, haystack, needle)