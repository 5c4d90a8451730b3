from __future__ import annotations

from typing import List, Tuple

import pandas as pd


def load_raw_words(path: str, *, encoding: str = "utf-8") -> List[str]:
    """
    Read a one-word-per-line text file into a list of strings.
    Each whole line is one entry (tabs included); blank lines are skipped and
    surrounding whitespace is stripped. No length filtering happens here.
    """
    words: List[str] = []
    with open(path, encoding=encoding) as fi:
        for line in fi:
            word = line.strip()
            if word:
                words.append(word)
    return words


def load_word_pair(path: str, *, encoding: str = "utf-8") -> Tuple[str, str]:
    """
    Read the source and target words from the first two lines of `path`.
    Raises ValueError if the file holds fewer than two words.
    """
    words = load_raw_words(path, encoding=encoding)
    if len(words) < 2:
        raise ValueError(f"Can't read file {path}: expected source and target words on two lines")
    return words[0], words[1]


def load_csv_words(path: str, column: str = "word", *, encoding: str = "utf-8") -> List[str]:
    """Read the `column` of a CSV file as a list of strings; raise KeyError if it is absent."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding=encoding)
    if column not in df.columns:
        raise KeyError(f"column '{column}' not found in {path}")
    return df[column].str.strip().tolist()
