from __future__ import annotations

import random
from typing import List, Tuple

from ladder.vocab import LadderDictionary


class WordSampler:
    def __init__(self, dictionary: LadderDictionary, seed: int | None = None) -> None:
        if not isinstance(dictionary, LadderDictionary):
            raise TypeError("dictionary must be a LadderDictionary")
        if len(dictionary) == 0:
            raise ValueError("dictionary is empty")

        self._dictionary = dictionary

        # Deterministic if seed provided
        self._rng = random.Random(seed)

    def choice_index(self) -> int:
        return self._rng.randrange(len(self._dictionary))

    def pair_indices(self, *, distinct: bool = True) -> Tuple[int, int]:
        """Random (source, target) indices; distinct unless the dictionary has one word."""
        src = self.choice_index()
        if not distinct or len(self._dictionary) == 1:
            return src, self.choice_index()
        dst = self._rng.randrange(len(self._dictionary) - 1)
        if dst >= src:
            dst += 1
        return src, dst

    def batch_pairs(self, k: int, *, distinct: bool = True) -> List[Tuple[int, int]]:
        if not isinstance(k, int) or k <= 0:
            raise ValueError("k must be a positive integer")
        return [self.pair_indices(distinct=distinct) for _ in range(k)]
