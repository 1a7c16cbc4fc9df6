"""Hash-based helpers for duplicates, anagrams, the single number, top-k frequencies and pair sums."""

__version__ = "0.1.0"

__all__ = ["__version__"]