"""
solver/ladder_cli.py

Word ladder from the command line:
- WORDS holds the source word on the first line and the target on the second.
- DICTIONARY holds one word per line (or is a CSV, see --csv-column).
- Prints the shortest ladder, one word per line.

Run:
  python -m solver.ladder_cli words.txt dictionary.txt

Exit codes:
  0 -> ladder printed
  1 -> invalid input (unreadable files, length mismatch, unknown word, bad flags)
  2 -> no ladder found (unreachable target or iteration limit)
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ladder.config import MAX_ITERATIONS, MAX_WORD_DISTANCE, SearchConfig
from ladder.converter import WordLadder
from ladder.data_utils import load_csv_words, load_raw_words, load_word_pair
from ladder.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_NOT_FOUND = 2


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Shortest word ladder between two words")
    ap.add_argument("words", help="File with the source word on line 1 and the target word on line 2")
    ap.add_argument("dictionary", help="Dictionary file, one word per line")
    ap.add_argument("--csv-column", default=None, help="Read the dictionary as CSV, using this column")
    ap.add_argument("--encoding", default="utf-8", help="Encoding of both input files")
    ap.add_argument("--max-iterations", type=int, default=MAX_ITERATIONS, help="Give up after this many BFS waves")
    ap.add_argument("--max-distance", type=int, default=MAX_WORD_DISTANCE, help="Letters allowed to change per step")
    ap.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING or ERROR")
    ap.add_argument("--plain-log", action="store_true", help="Plain log lines instead of rich output")
    return ap


def _load_dictionary_words(path: str, csv_column: Optional[str], encoding: str) -> List[str]:
    if csv_column:
        return load_csv_words(path, csv_column, encoding=encoding)
    return load_raw_words(path, encoding=encoding)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level, use_rich=not args.plain_log)

    try:
        config = SearchConfig(max_word_distance=args.max_distance, max_iterations=args.max_iterations)
    except ValueError as e:
        print(f"Invalid input data. {e}")
        return EXIT_INVALID_INPUT

    # ValueError covers decoding and pandas parser errors as well
    try:
        source, target = load_word_pair(args.words, encoding=args.encoding)
        raw_words = _load_dictionary_words(args.dictionary, args.csv_column, args.encoding)
    except (OSError, ValueError, KeyError) as e:
        print(f"Invalid input data. {e}")
        return EXIT_INVALID_INPUT

    logger.info("Loaded %d dictionary entries from %s", len(raw_words), args.dictionary)

    prepared = WordLadder.prepare(source, target, raw_words, config)
    if not prepared.ok:
        print(f"Invalid input data. {prepared.failure.message}")
        return EXIT_INVALID_INPUT

    result = prepared.value.run()
    if not result.ok:
        print(f"Result not found. {result.failure.message}")
        return EXIT_NOT_FOUND

    for word in result.value:
        print(word)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
