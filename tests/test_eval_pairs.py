import pytest

from evaluation.eval_pairs import evaluate_pairs, summarize
from ladder.sampler import WordSampler
from ladder.vocab import LadderDictionary

WORDS = ["cat", "cot", "cog", "dog", "dot", "cut", "hut", "hat", "hot", "dig", "zzz"]


@pytest.fixture
def dictionary():
    return LadderDictionary.build(WORDS, 3)


def test_sampler_pairs_are_distinct_and_seeded(dictionary):
    a = WordSampler(dictionary, seed=7).batch_pairs(50)
    b = WordSampler(dictionary, seed=7).batch_pairs(50)
    assert a == b
    assert all(src != dst for src, dst in a)
    assert all(0 <= i < len(dictionary) for pair in a for i in pair)


def test_sampler_validation(dictionary):
    with pytest.raises(ValueError):
        WordSampler(LadderDictionary([], 3))
    with pytest.raises(ValueError):
        WordSampler(dictionary).batch_pairs(0)


def test_evaluate_pairs(dictionary):
    rows = evaluate_pairs(dictionary, 30, seed=1)
    assert len(rows) == 30
    for r in rows:
        if r["solved"]:
            assert r["length"] >= 2
            assert r["error"] == ""
        else:
            assert "zzz" in (r["source"], r["target"])
            assert r["error"] == "no_path"

    summary = summarize(rows)
    assert summary["pairs"] == 30
    assert 0.0 <= summary["solve_rate"] <= 1.0
    assert sum(summary["failures"].values()) == sum(1 for r in rows if not r["solved"])
