"""
Distance utilities for word ladders.

Two words of equal length are compared position by position; the number of
differing positions is their Hamming distance. Words of different lengths
are never compared.
"""

from __future__ import annotations

import numpy as np


def hamming_distance(w1: str, w2: str) -> int:
    """
    Count the positions at which `w1` and `w2` differ.

    Raises
    ------
    TypeError
        If either argument is not a string.
    ValueError
        If the words have different lengths.
    """
    if not isinstance(w1, str) or not isinstance(w2, str):
        raise TypeError("words must be strings")
    if len(w1) != len(w2):
        raise ValueError(f"words must have equal length: {w1!r} vs {w2!r}")
    return sum(1 for a, b in zip(w1, w2) if a != b)


def within_distance(w1: str, w2: str, max_distance: int) -> bool:
    """True iff hamming_distance(w1, w2) <= max_distance; stops counting early."""
    if not isinstance(w1, str) or not isinstance(w2, str):
        raise TypeError("words must be strings")
    if len(w1) != len(w2):
        raise ValueError(f"words must have equal length: {w1!r} vs {w2!r}")
    dist = 0
    for a, b in zip(w1, w2):
        if a != b:
            dist += 1
            if dist > max_distance:
                return False
    return True


def encode_words(words: list[str], word_len: int) -> np.ndarray:
    """
    Encode equal-length words as an (n, word_len) int32 matrix of code points.
    """
    codes = np.zeros((len(words), word_len), dtype=np.int32)
    for i, w in enumerate(words):
        if len(w) != word_len:
            raise ValueError(f"word {w!r} does not have length {word_len}")
        codes[i, :] = [ord(ch) for ch in w]
    return codes


def distances_from(codes: np.ndarray, row: int) -> np.ndarray:
    """Hamming distance from word `row` to every word in `codes`."""
    return np.count_nonzero(codes != codes[row], axis=1)
