from __future__ import annotations

from dataclasses import dataclass

# Two words are neighbours when they differ in at most this many positions.
MAX_WORD_DISTANCE = 1
# Upper bound on BFS waves before a search gives up.
MAX_ITERATIONS = 10000


@dataclass(frozen=True)
class SearchConfig:
    max_word_distance: int = MAX_WORD_DISTANCE
    max_iterations: int = MAX_ITERATIONS

    def __post_init__(self) -> None:
        for name in ("max_word_distance", "max_iterations"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, int):
                raise TypeError(f"{name} must be an int")
        if self.max_word_distance < 0:
            raise ValueError("max_word_distance must be >= 0")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")


DEFAULT_CONFIG = SearchConfig()
