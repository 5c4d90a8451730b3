"""
evaluation/eval_pairs.py

Run the ladder search over many random (source, target) pairs of one
dictionary and summarise how it behaves.

Metrics:
- solve rate: share of pairs with a ladder
- mean / max ladder length over solved pairs
- failure histogram by error kind
- mean search time per pair

Usage:
  python -m evaluation.eval_pairs dictionary.txt --length 4 --pairs 200
"""

from __future__ import annotations

import argparse
import csv
import logging
import time
from collections import Counter
from typing import Dict, List

from ladder.config import DEFAULT_CONFIG, SearchConfig
from ladder.converter import WordLadder
from ladder.logging_config import setup_logging
from ladder.sampler import WordSampler
from ladder.vocab import LadderDictionary

logger = logging.getLogger(__name__)


def evaluate_pairs(
    dictionary: LadderDictionary,
    n_pairs: int,
    *,
    seed: int | None = 0,
    config: SearchConfig = DEFAULT_CONFIG,
    progress: bool = False,
) -> List[Dict[str, object]]:
    """
    Search `n_pairs` random distinct pairs from `dictionary`.

    Returns
    -------
    list[dict]
        One record per pair with keys
        'source', 'target', 'solved', 'length', 'error', 'elapsed_ms'.
        'length' counts words in the ladder (0 when unsolved).
    """
    sampler = WordSampler(dictionary, seed=seed)
    rows: List[Dict[str, object]] = []
    for i, (src, dst) in enumerate(sampler.batch_pairs(n_pairs)):
        t0 = time.perf_counter()
        outcome = WordLadder(dictionary, src, dst, config).run()
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        rows.append(
            {
                "source": dictionary.word_at(src),
                "target": dictionary.word_at(dst),
                "solved": outcome.ok,
                "length": len(outcome.value) if outcome.ok else 0,
                "error": "" if outcome.ok else outcome.kind.value,
                "elapsed_ms": round(elapsed_ms, 3),
            }
        )
        if progress and (i + 1) % 50 == 0:
            print(f"Searched {i+1}/{n_pairs} pairs...", flush=True)
    return rows


def summarize(rows: List[Dict[str, object]]) -> Dict[str, object]:
    if not rows:
        raise ValueError("rows must be non-empty")
    lengths = [int(r["length"]) for r in rows if r["solved"]]
    failures = Counter(str(r["error"]) for r in rows if not r["solved"])
    return {
        "pairs": len(rows),
        "solve_rate": len(lengths) / len(rows),
        "mean_length": sum(lengths) / len(lengths) if lengths else float("nan"),
        "max_length": max(lengths) if lengths else 0,
        "failures": dict(failures),
        "mean_ms": sum(float(r["elapsed_ms"]) for r in rows) / len(rows),
    }


def _print_summary(summary: Dict[str, object]) -> None:
    print("\n=== Ladder evaluation ===")
    print(f"Pairs: {summary['pairs']}")
    print(f"Solve rate: {summary['solve_rate']:.3f}")
    print(f"Mean ladder length (solved only): {summary['mean_length']:.2f} | max: {summary['max_length']}")
    print(f"Mean search time: {summary['mean_ms']:.2f} ms")
    for kind, count in sorted(summary["failures"].items()):
        print(f"  {kind}: {count}")


def _write_csv(rows: List[Dict[str, object]], path: str) -> None:
    fieldnames = ["source", "target", "solved", "length", "error", "elapsed_ms"]
    with open(path, mode="w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def main() -> None:
    ap = argparse.ArgumentParser(description="Evaluate word ladders over random pairs")
    ap.add_argument("dictionary", help="Dictionary file, one word per line")
    ap.add_argument("--length", type=int, required=True, help="Word length to evaluate")
    ap.add_argument("--pairs", type=int, default=200)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--out", default="ladder_pairs.csv", help="Per-pair CSV output")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args()

    setup_logging(args.log_level)
    dictionary = LadderDictionary.from_text(args.dictionary, args.length)
    logger.info("Dictionary holds %d words of length %d", len(dictionary), args.length)
    if len(dictionary) < 2:
        raise SystemExit(f"need at least two words of length {args.length}")

    t0 = time.perf_counter()
    rows = evaluate_pairs(dictionary, args.pairs, seed=args.seed, progress=True)
    print(f"Done in {time.perf_counter() - t0:.2f}s", flush=True)
    _print_summary(summarize(rows))
    _write_csv(rows, args.out)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
