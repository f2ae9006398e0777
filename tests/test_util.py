from hypothesis import given
from hypothesis import strategies as st

from bytesearch.util import is_prefix, is_suffix


def test_prefix_simple():
    assert is_prefix(b"foobar", b"foo")
    assert not is_prefix(b"foobar", b"bar")


def test_suffix_simple():
    assert is_suffix(b"foobar", b"bar")
    assert not is_suffix(b"foobar", b"foo")


def test_empty_needle_is_prefix_and_suffix():
    assert is_prefix(b"", b"")
    assert is_suffix(b"", b"")
    assert is_prefix(b"abc", b"")
    assert is_suffix(b"abc", b"")


def test_needle_longer_than_haystack():
    assert not is_prefix(b"ab", b"abc")
    assert not is_suffix(b"bc", b"abc")


def test_accepts_memoryview_and_bytearray():
    assert is_prefix(memoryview(b"hello world"), b"hello")
    assert is_suffix(bytearray(b"hello world"), b"world")


@given(st.binary(), st.binary())
def test_concatenation_has_prefix_and_suffix(a, b):
    joined = a + b
    assert is_prefix(joined, a)
    assert is_suffix(joined, b)


@given(st.binary(min_size=1), st.binary())
def test_changed_first_byte_is_not_prefix(needle, rest):
    haystack = bytes([needle[0] ^ 0xFF]) + needle[1:] + rest
    assert not is_prefix(haystack, needle)


@given(st.binary(min_size=1), st.binary())
def test_changed_last_byte_is_not_suffix(needle, rest):
    haystack = rest + needle[:-1] + bytes([needle[-1] ^ 0xFF])
    assert not is_suffix(haystack, needle)