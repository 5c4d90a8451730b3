"""
converter.py

Ties the pieces together:
- prepare(): length check, dictionary build, source/target lookup
- run(): breadth-first search, then path reconstruction
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ladder.config import DEFAULT_CONFIG, SearchConfig
from ladder.reconstruct import reconstruct
from ladder.result import Outcome
from ladder.search import search
from ladder.vocab import LadderDictionary, build_dictionary, resolve_pair

logger = logging.getLogger(__name__)


class WordLadder:
    """
    A resolved word-ladder problem.

    Instances come from `prepare`, which has already checked that both words
    are in the dictionary; `run` can then only fail with NO_PATH,
    ITERATION_LIMIT_EXCEEDED or a reconstruction error.
    """

    def __init__(
        self,
        dictionary: LadderDictionary,
        source_index: int,
        target_index: int,
        config: SearchConfig = DEFAULT_CONFIG,
    ) -> None:
        if not isinstance(dictionary, LadderDictionary):
            raise TypeError("dictionary must be a LadderDictionary")
        if not isinstance(config, SearchConfig):
            raise TypeError("config must be a SearchConfig")
        self.dictionary = dictionary
        self.source_index = source_index
        self.target_index = target_index
        self.config = config

    @classmethod
    def prepare(
        cls,
        source: str,
        target: str,
        raw_words: Iterable[str],
        config: SearchConfig = DEFAULT_CONFIG,
    ) -> Outcome["WordLadder"]:
        built = build_dictionary(source, target, raw_words)
        if not built.ok:
            return built.propagate()
        dictionary = built.value
        pair = resolve_pair(dictionary, source, target)
        if not pair.ok:
            return pair.propagate()
        src, dst = pair.value
        logger.debug("Prepared %r -> %r over %d words", source, target, len(dictionary))
        return Outcome.success(cls(dictionary, src, dst, config))

    @property
    def source(self) -> str:
        return self.dictionary.word_at(self.source_index)

    @property
    def target(self) -> str:
        return self.dictionary.word_at(self.target_index)

    def run(self) -> Outcome[List[str]]:
        found = search(self.dictionary, self.source_index, self.target_index, self.config)
        if not found.ok:
            return found.propagate()
        return reconstruct(self.dictionary, found.value, self.target_index, self.config)


def find_ladder(
    source: str,
    target: str,
    raw_words: Iterable[str],
    config: Optional[SearchConfig] = None,
) -> Outcome[List[str]]:
    """Shortest ladder from `source` to `target` using words from `raw_words`."""
    prepared = WordLadder.prepare(source, target, raw_words, config or DEFAULT_CONFIG)
    if not prepared.ok:
        return prepared.propagate()
    return prepared.value.run()
