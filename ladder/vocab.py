from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

import numpy as np

from ladder.data_utils import load_csv_words, load_raw_words
from ladder.distance import encode_words
from ladder.result import ErrorKind, Outcome

logger = logging.getLogger(__name__)


class LadderDictionary:
    def __init__(self, words: List[str], word_len: int) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")
        if isinstance(word_len, bool) or not isinstance(word_len, int) or word_len < 0:
            raise ValueError("word_len must be a non-negative int")
        if any(len(w) != word_len for w in words):
            raise ValueError(f"all words must have length {word_len}")

        # Sorted and unique (use `build` to filter raw input)
        if any(a >= b for a, b in zip(words, words[1:])):
            raise ValueError("words must be sorted and deduplicated; use LadderDictionary.build")

        self._words: List[str] = list(words)
        self._word_len = word_len
        self._index = {w: i for i, w in enumerate(self._words)}
        self._codes = encode_words(self._words, word_len)
        self._codes.setflags(write=False)

    # ---------- Construction helpers ----------

    @classmethod
    def build(cls, raw_words: Iterable[str], required_length: int) -> "LadderDictionary":
        """
        Filter `raw_words` down to the strings of exactly `required_length`
        characters, drop duplicates and sort them.

        Entries of any other length are expected noise in a general word list
        and are skipped without complaint.
        """
        kept = set()
        total = 0
        for w in raw_words:
            if not isinstance(w, str):
                raise TypeError(f"dictionary entries must be str, got {type(w).__name__}")
            total += 1
            if len(w) == required_length:
                kept.add(w)
        logger.debug("Dictionary: kept %d of %d entries with length %d", len(kept), total, required_length)
        return cls(sorted(kept), required_length)

    @classmethod
    def from_text(
        cls,
        path: str,
        required_length: int,
        *,
        encoding: str = "utf-8",
    ) -> "LadderDictionary":
        """Load a one-word-per-line file and build a dictionary from it."""
        return cls.build(load_raw_words(path, encoding=encoding), required_length)

    @classmethod
    def from_csv(
        cls,
        path: str,
        required_length: int,
        column: str = "word",
        *,
        encoding: str = "utf-8",
    ) -> "LadderDictionary":
        """
        Load words from a CSV column and build a dictionary.

        Parameters
        ----------
        path : str
            Path to CSV file.
        required_length : int
            Word length to keep.
        column : str
            Column name containing words.

        Raises
        ------
        FileNotFoundError, KeyError
        """
        return cls.build(load_csv_words(path, column, encoding=encoding), required_length)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the dictionary."""
        return len(self._words)

    @property
    def word_length(self) -> int:
        return self._word_len

    @property
    def codes(self) -> np.ndarray:
        """Read-only (n, word_length) matrix of code points, row i = word i."""
        return self._codes

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        """Return True iff `word` exists in the dictionary (exact match)."""
        return word in self._index

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None

    def resolve(self, word: str) -> Outcome[int]:
        """Look up `word`; a missing word is a WORD_NOT_FOUND outcome."""
        if not self.contains(word):
            return Outcome.fail(
                ErrorKind.WORD_NOT_FOUND,
                f"dictionary should contain source and target words; {word!r} is missing",
            )
        return Outcome.success(self.index_of(word))

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]

    def to_words(self, indices: Iterable[int]) -> List[str]:
        """Convert indices to words; raise IndexError on the first invalid index."""
        return [self.word_at(int(i)) for i in indices]


def build_dictionary(
    source: str,
    target: str,
    raw_words: Iterable[str],
) -> Outcome[LadderDictionary]:
    """
    Check that `source` and `target` have the same length, then build the
    dictionary of words with that length. Nothing is scanned on a mismatch.
    """
    if not isinstance(source, str) or not isinstance(target, str):
        raise TypeError("source and target must be strings")
    if len(source) != len(target):
        return Outcome.fail(
            ErrorKind.INVALID_INPUT,
            f"source and target word sizes should be equal ({len(source)} != {len(target)})",
        )
    return Outcome.success(LadderDictionary.build(raw_words, len(source)))


def resolve_pair(dictionary: LadderDictionary, source: str, target: str) -> Outcome[Tuple[int, int]]:
    """Resolve both endpoints, target first; the first missing word decides the failure."""
    dst = dictionary.resolve(target)
    if not dst.ok:
        return dst.propagate()
    src = dictionary.resolve(source)
    if not src.ok:
        return src.propagate()
    return Outcome.success((src.value, dst.value))
