"""
reconstruct.py

Turns a finished VisitState back into the ordered list of words.

Two strategies give the same ladder:
- parents (default): follow the predecessor recorded when each word was
  discovered, O(path length).
- rescan: for each step, take the lowest dictionary index one wave earlier
  that is within reach of the current word, O(path length * dictionary).

The search expands each frontier in ascending index order and records the
first frontier word that reaches a node, which is exactly what the rescan
picks, so ties between equally short ladders break the same way.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ladder.config import DEFAULT_CONFIG, SearchConfig
from ladder.distance import distances_from, within_distance
from ladder.result import ErrorKind, Outcome
from ladder.search import VisitState
from ladder.vocab import LadderDictionary


def _rescan_predecessor(
    dictionary: LadderDictionary,
    state: VisitState,
    current: int,
    wave: int,
    max_distance: int,
) -> Optional[int]:
    near = distances_from(dictionary.codes, current) <= max_distance
    hits = np.flatnonzero((state.waves == wave - 1) & near)
    return int(hits[0]) if hits.size else None


def _recorded_predecessor(
    dictionary: LadderDictionary,
    state: VisitState,
    current: int,
    wave: int,
    max_distance: int,
) -> Optional[int]:
    parent = state.parent_of(current)
    if parent is None or state.wave_of(parent) != wave - 1:
        return None
    if not within_distance(dictionary.word_at(current), dictionary.word_at(parent), max_distance):
        return None
    return parent


def reconstruct(
    dictionary: LadderDictionary,
    state: VisitState,
    target_index: int,
    config: SearchConfig = DEFAULT_CONFIG,
    *,
    use_parents: bool = True,
) -> Outcome[List[str]]:
    """Walk back from `target_index` to the source; wave(target) + 1 words."""
    final_wave = state.wave_of(target_index)
    if final_wave is None:
        return Outcome.fail(
            ErrorKind.RECONSTRUCTION_INVARIANT_VIOLATION,
            f"target {dictionary.word_at(target_index)!r} was never reached",
        )

    step = _recorded_predecessor if use_parents else _rescan_predecessor
    indices = [0] * (final_wave + 1)
    current = target_index
    for wave in range(final_wave, -1, -1):
        indices[wave] = current
        if wave == 0:
            break
        prev = step(dictionary, state, current, wave, config.max_word_distance)
        if prev is None:
            return Outcome.fail(
                ErrorKind.RECONSTRUCTION_INVARIANT_VIOLATION,
                f"no predecessor for {dictionary.word_at(current)!r} at wave {wave}",
            )
        current = prev

    return Outcome.success(dictionary.to_words(indices))
