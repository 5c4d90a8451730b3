"""
search.py

Level-synchronous breadth-first search over the implicit word graph.
- Nodes: dictionary indices
- Edges: pairs of words within `max_word_distance` of each other
- Every edge has the same weight, so the wave at which a word is first
  reached is its distance from the source.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ladder.config import DEFAULT_CONFIG, SearchConfig
from ladder.distance import distances_from
from ladder.result import ErrorKind, Outcome
from ladder.vocab import LadderDictionary

logger = logging.getLogger(__name__)

UNVISITED = -1


@dataclass
class VisitState:
    """
    Per-search bookkeeping, indexed in parallel with the dictionary.

    waves[i]   : BFS wave at which word i was first reached, or UNVISITED
    parents[i] : frontier word that reached word i, or UNVISITED (source, unreached)
    """

    waves: np.ndarray
    parents: np.ndarray
    source_index: int
    iterations: int = 0
    wave_sizes: List[int] = field(default_factory=list)

    @classmethod
    def fresh(cls, size: int, source_index: int) -> "VisitState":
        return cls(
            waves=np.full(size, UNVISITED, dtype=np.int64),
            parents=np.full(size, UNVISITED, dtype=np.int64),
            source_index=source_index,
        )

    def mark(self, indices: np.ndarray, wave: int) -> None:
        """Record `wave` for unvisited `indices`; a recorded wave is never replaced."""
        if np.any(self.waves[indices] != UNVISITED):
            raise ValueError(f"wave {wave} tried to re-mark an already visited word")
        self.waves[indices] = wave
        self.wave_sizes.append(int(indices.size))

    def wave_of(self, idx: int) -> Optional[int]:
        w = int(self.waves[idx])
        return None if w == UNVISITED else w

    def is_visited(self, idx: int) -> bool:
        return self.wave_of(idx) is not None

    def parent_of(self, idx: int) -> Optional[int]:
        p = int(self.parents[idx])
        return None if p == UNVISITED else p

    def wave_members(self, wave: int) -> List[int]:
        """Indices first reached at `wave`, in dictionary order."""
        return [int(i) for i in np.flatnonzero(self.waves == wave)]

    def visited_indices(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(self.waves != UNVISITED)]


def _next_frontier(
    codes: np.ndarray,
    state: VisitState,
    frontier: np.ndarray,
    max_distance: int,
) -> np.ndarray:
    unvisited = state.waves == UNVISITED
    found = np.zeros(unvisited.shape[0], dtype=bool)
    # Ascending order: the lowest-index frontier word becomes the parent.
    for idx in np.sort(frontier):
        new = (distances_from(codes, int(idx)) <= max_distance) & unvisited & ~found
        state.parents[new] = idx
        found |= new
    return np.flatnonzero(found)


def search(
    dictionary: LadderDictionary,
    source_index: int,
    target_index: int,
    config: SearchConfig = DEFAULT_CONFIG,
) -> Outcome[VisitState]:
    """
    Expand waves from `source_index` until `target_index` is reached.

    Returns
    -------
    Outcome[VisitState]
        Success once the target is marked. NO_PATH when a wave comes up empty,
        ITERATION_LIMIT_EXCEEDED after `config.max_iterations` waves.

    Raises
    ------
    IndexError
        If either index lies outside the dictionary.
    """
    n = len(dictionary)
    for name, idx in (("source_index", source_index), ("target_index", target_index)):
        if idx < 0 or idx >= n:
            raise IndexError(f"{name} out of range: {idx}")

    codes = dictionary.codes
    state = VisitState.fresh(n, source_index)
    frontier = np.array([source_index], dtype=np.int64)

    for wave in range(config.max_iterations):
        state.mark(frontier, wave)
        state.iterations = wave + 1
        logger.debug("Wave %d: %d new words", wave, frontier.size)

        if np.any(frontier == target_index):
            logger.info(
                "Reached %r from %r at wave %d (%d words visited)",
                dictionary.word_at(target_index),
                dictionary.word_at(source_index),
                wave,
                len(state.visited_indices()),
            )
            return Outcome.success(state)

        frontier = _next_frontier(codes, state, frontier, config.max_word_distance)
        if frontier.size == 0:
            logger.warning(
                "No ladder from %r to %r: search exhausted after wave %d",
                dictionary.word_at(source_index),
                dictionary.word_at(target_index),
                wave,
            )
            return Outcome.fail(ErrorKind.NO_PATH, "no sequence between source and target words")

    logger.warning("Gave up after %d waves", config.max_iterations)
    return Outcome.fail(
        ErrorKind.ITERATION_LIMIT_EXCEEDED,
        f"maximum iterations count reached ({config.max_iterations})",
    )
