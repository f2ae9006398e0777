"""Two-Way and Rabin-Karp substring search over arbitrary bytes."""

__version__ = "0.1.0"
__all__ = [
    "fallback",
    "prefilter",
    "rabinkarp",
    "suffix",
    "twoway",
    "util",
]