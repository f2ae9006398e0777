# bytesearch

Substring search on arbitrary bytes, forwards and in reverse.

The package has two algorithms:

- **Two-Way**. It runs in time linear in the lengths of the needle and the
  haystack. A forward search can take an optional prefilter that jumps to
  likely candidates.
- **Rabin-Karp**. It uses a 32-bit rolling hash and responds quickly on
  short inputs. Its worst case is quadratic, so it suits short haystacks.

For a non-empty needle, every search returns the same offset as `bytes.find`
or `bytes.rfind`, or `None` if the needle does not occur. An empty needle
matches at every position. A forward search then returns `0` and a reverse
search returns `len(haystack)`. Haystacks and needles can be `bytes`,
`bytearray` or `memoryview`.

## Installation

```
pip install bytesearch
```

To run the test suite:

```
pip install "bytesearch[test]"
pytest
```

## Usage

### Two-Way

```python
from bytesearch.twoway import twoway_find, twoway_rfind

haystack = b"foo bar baz"
assert twoway_find(haystack, b"bar") == 4
assert twoway_find(haystack, b"quux") is None
assert twoway_rfind(haystack, b"ba") == 8
assert twoway_find(haystack, b"") == 0
assert twoway_rfind(haystack, b"") == 11
```

`twoway_find` and `twoway_rfind` build a searcher on every call. To search
many haystacks for the same needle, build a `Forward` or `Reverse` once.
Pass the same needle to each search:

```python
from bytesearch.twoway import Forward, Reverse

needle = b"foo"
fwd = Forward(needle)
assert fwd.find(b"baz foo quux", needle) == 4

rev = Reverse(needle)
assert rev.rfind(b"foo bar foo", needle) == 8
```

`Forward.find` and `Reverse.rfind` raise `ValueError` in two cases: the
needle is empty, or it is longer than the haystack. The `twoway_*`
functions handle both cases themselves.

### Rabin-Karp

```python
from bytesearch import rabinkarp

assert rabinkarp.find(b"zzabc", b"abc") == 2
assert rabinkarp.rfind(b"abaab", b"ab") == 3
assert rabinkarp.is_fast(b"short haystack", b"ab")  # haystack under 16 bytes
```

To reuse a needle hash, build it once and pass it in. Use
`NeedleHash.forward` with `find_with`, and `NeedleHash.reverse` with
`rfind_with`:

```python
from bytesearch.rabinkarp import NeedleHash, find_with

nhash = NeedleHash.forward(b"abc")
assert find_with(nhash, b"zabc", b"abc") == 1
```

### Prefiltering a forward search

`bytesearch.fallback.fallback_find` is a candidate finder. It scans for one
rare byte of the needle and checks a second rare byte before it reports a
position. It can report a position where the needle does not occur, but it
never skips past a real occurrence. You choose the two rare offsets
(`rare1i`, `rare2i`) and pass them in.

A `PrefilterState` records how many bytes the prefilter skips. If the
average skip stays too small, the state turns inert and the prefilter stops
running. `PrefilterState.inert()` returns a state that never lets the
prefilter run. Wrap the state, the finder and the offsets in a `Pre` and
pass it to `Forward.find`:

```python
from bytesearch.fallback import fallback_find
from bytesearch.prefilter import Pre, PrefilterState
from bytesearch.twoway import Forward

needle = b"needle"
pre = Pre(state=PrefilterState(), prefn=fallback_find, rare1i=0, rare2i=1)
assert Forward(needle).find(b"a needle in a haystack", needle, pre) == 2

assert fallback_find(PrefilterState(), 0, 1, b"FOOBAR", b"BAR") == 3
```

Use one `PrefilterState` per haystack.

## Modules

- `bytesearch.twoway`: `Forward`, `Reverse`, `twoway_find` and
  `twoway_rfind`.
- `bytesearch.suffix`: the helpers behind Two-Way. They find the maximal and
  minimal suffixes (`suffix_forward`, `suffix_reverse`, `SuffixKind`,
  `Suffix`), compute the shift (`shift_forward`, `shift_reverse`, `Shift`),
  and provide `ApproximateByteSet`.
- `bytesearch.rabinkarp`: `find`, `rfind`, `find_with`, `rfind_with`,
  `is_fast`, `NeedleHash`, `hash_forward` and `hash_reverse`.
- `bytesearch.prefilter`: `PrefilterState`, `Pre` and the `Prefilter` enum
  (`NONE`, `AUTO`).
- `bytesearch.fallback`: `fallback_find`.
- `bytesearch.util`: `is_prefix` and `is_suffix`.

## What the package does not do

- It has no single entry point that picks an algorithm for you. You call
  Two-Way or Rabin-Karp directly.
- It does not choose rare bytes from a byte-frequency table. You supply the
  prefilter's rare byte offsets.
- It has no iterators over all matches.
- The `Prefilter` enum is a plain value. Nothing in the package reads it.
  To use a prefilter, pass a `Pre` to `Forward.find`; to go without one,
  leave it out.
- Reverse searches never use a prefilter.