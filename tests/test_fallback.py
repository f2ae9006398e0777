from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from bytesearch.fallback import fallback_find
from bytesearch.prefilter import PrefilterState


def _freqy(haystack: bytes, needle: bytes, rare1i: int, rare2i: int) -> Optional[int]:
    return fallback_find(PrefilterState(), rare1i, rare2i, haystack, needle)


@pytest.mark.parametrize(
    "haystack, needle, rare1i, rare2i, expected",
    [
        (b"BARFOO", b"BAR", 0, 1, 0),
        (b"FOOBAR", b"BAR", 0, 1, 3),
        (b"zyzz", b"zyzy", 0, 1, 0),
        (b"zzzy", b"zyzy", 0, 1, 2),
        (b"zazb", b"zyzy", 0, 1, None),
        (b"yzyy", b"yzyz", 1, 0, 0),
        (b"yyyz", b"yzyz", 1, 0, 2),
        (b"yayb", b"yzyz", 1, 0, None),
    ],
)
def test_freqy_forward(haystack, needle, rare1i, rare2i, expected):
    assert _freqy(haystack, needle, rare1i, rare2i) == expected


def test_accepts_memoryview():
    assert _freqy(memoryview(b"FOOBAR"), b"BAR", 0, 1) == 3


def test_inert_state_returns_start():
    state = PrefilterState.inert()
    assert fallback_find(state, 0, 1, b"nothing here", b"zq") == 0


def test_inert_state_returns_zero_when_rare_offset_is_large():
    state = PrefilterState.inert()
    assert fallback_find(state, 3, 0, b"abcdef", b"abcq") == 0


def test_becomes_inert_after_many_small_skips():
    state = PrefilterState()
    result = fallback_find(state, 0, 1, b"a" * 200, b"ab")
    assert result == 50
    assert state.skips == 0
    assert state.is_effective() is False


def test_updates_state_with_skipped_bytes():
    state = PrefilterState()
    assert fallback_find(state, 0, 1, b"......ab", b"ab") == 6
    assert state.skips == 2
    assert state.skipped == 6


# A generator of prefilter tests that varies needle and haystack lengths.


@dataclass
class _Seed:
    first: int
    rare1: int
    rare2: int


@dataclass
class _Case:
    rare1i: int
    rare2i: int
    haystack: bytes
    needle: bytes
    output: Optional[int]


_SEEDS = [
    _Seed(ord("x"), ord("y"), ord("z")),
    _Seed(ord("x"), ord("x"), ord("z")),
    _Seed(ord("x"), ord("y"), ord("x")),
    _Seed(ord("x"), ord("x"), ord("x")),
    _Seed(ord("x"), ord("y"), ord("y")),
]


def _make_case(
    seed: _Seed,
    rare1i: int,
    rare2i: int,
    haystack_len: int,
    needle_len: int,
    output: Optional[int],
) -> _Case:
    # '#' never appears in a haystack unless a match is planted, and '@'
    # never appears in a needle.
    haystack = bytearray(b"@" * haystack_len)
    needle = bytearray(b"#" * needle_len)
    needle[0] = seed.first
    needle[rare1i] = seed.rare1
    needle[rare2i] = seed.rare2
    if output is not None:
        haystack[output:output + needle_len] = needle
    found = needle.find(seed.rare1)
    if found >= 0:
        rare1i = found
    found = needle.find(seed.rare2)
    if found >= 0:
        rare2i = found
    return _Case(rare1i, rare2i, bytes(haystack), bytes(needle), output)


def _generate(seed: _Seed, max_needle: int = 10, max_haystack: int = 20) -> Iterator[_Case]:
    len_start = 2
    for needle_len in range(len_start, max_needle + 1):
        for rare1i in range(len_start - 1, needle_len):
            for rare2i in range(rare1i, needle_len):
                for haystack_len in range(needle_len, max_haystack + 1):
                    yield _make_case(seed, rare1i, rare2i, haystack_len, needle_len, None)
                    for output in range(haystack_len - needle_len + 1):
                        yield _make_case(
                            seed, rare1i, rare2i, haystack_len, needle_len, output
                        )


@pytest.mark.parametrize("seed", _SEEDS, ids=lambda s: bytes([s.first, s.rare1, s.rare2]).decode())
def test_prefilter_permutations(seed):
    failures: List[Tuple[bytes, bytes, int, int, Optional[int], Optional[int]]] = []
    count = 0
    for case in _generate(seed):
        count += 1
        got = fallback_find(
            PrefilterState(), case.rare1i, case.rare2i, case.haystack, case.needle
        )
        if got != case.output:
            failures.append(
                (case.haystack, case.needle, case.rare1i, case.rare2i, case.output, got)
            )
    assert count > 0
    assert failures == []


@settings(max_examples=300, deadline=None)
@given(
    haystack=st.binary(max_size=40).map(lambda b: bytes(c % 3 + 97 for c in b)),
    needle=st.binary(min_size=2, max_size=5).map(lambda b: bytes(c % 3 + 97 for c in b)),
    data=st.data(),
)
def test_never_skips_a_real_match(haystack, needle, data):
    rare1i = data.draw(st.integers(0, len(needle) - 1))
    rare2i = data.draw(st.integers(0, len(needle) - 1))
    got = fallback_find(PrefilterState(), rare1i, rare2i, haystack, needle)
    first = haystack.find(needle)
    if first >= 0:
        assert got is not None and got <= first
    else:
        assert got is None or 0 <= got <= len(haystack)