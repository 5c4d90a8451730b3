import pytest

from ladder.result import ErrorKind
from ladder.vocab import LadderDictionary, build_dictionary, resolve_pair

RAW = ["КОТ", "ТОН", "НОТА", "КОТЫ", "РОТ", "РОТА", "ТОТ"]


def test_build_keeps_only_required_length_sorted():
    d = LadderDictionary.build(RAW, 3)
    assert len(d) == 4
    assert d.words() == ["КОТ", "РОТ", "ТОН", "ТОТ"]
    assert d.word_length == 3


def test_build_drops_duplicates():
    d = LadderDictionary.build(["ТОТ", "КОТ", "ТОТ", "КОТ"], 3)
    assert d.words() == ["КОТ", "ТОТ"]


def test_build_rejects_non_strings():
    with pytest.raises(TypeError):
        LadderDictionary.build(["КОТ", 42], 3)


def test_constructor_requires_sorted_unique_words():
    with pytest.raises(ValueError):
        LadderDictionary(["ТОТ", "КОТ"], 3)
    with pytest.raises(ValueError):
        LadderDictionary(["КОТ", "КОТ"], 3)
    with pytest.raises(ValueError):
        LadderDictionary(["КОТ", "КОТЫ"], 3)


def test_index_protocol():
    d = LadderDictionary.build(RAW, 3)
    w0 = d.word_at(0)
    assert d.index_of(w0) == 0
    assert d.contains("РОТ")
    assert not d.contains("РОТА")
    assert d.to_words([d.index_of("ТОН"), d.index_of("КОТ")]) == ["ТОН", "КОТ"]
    with pytest.raises(KeyError):
        d.index_of("ЖМОТ")
    with pytest.raises(IndexError):
        d.word_at(len(d))


def test_codes_matrix_is_read_only():
    d = LadderDictionary.build(RAW, 3)
    assert d.codes.shape == (4, 3)
    assert d.codes[0, 0] == ord("К")
    with pytest.raises(ValueError):
        d.codes[0, 0] = 0


def test_resolve_missing_word_is_a_failure():
    d = LadderDictionary.build(RAW, 3)
    found = d.resolve("ТОТ")
    assert found.ok and found.value == 3
    missing = d.resolve("КИТ")
    assert not missing.ok
    assert missing.kind is ErrorKind.WORD_NOT_FOUND
    assert "КИТ" in missing.failure.message


def test_build_dictionary_rejects_length_mismatch_before_scanning():
    def exploding():
        raise AssertionError("dictionary was scanned")
        yield  # pragma: no cover

    out = build_dictionary("КОТ", "РОТА", exploding())
    assert not out.ok
    assert out.kind is ErrorKind.INVALID_INPUT


def test_resolve_pair():
    d = build_dictionary("КОТ", "ТОН", RAW).unwrap()
    assert resolve_pair(d, "КОТ", "ТОН").value == (0, 2)
    assert resolve_pair(d, "КОТ", "КИТ").kind is ErrorKind.WORD_NOT_FOUND


def test_resolve_pair_reports_target_first_when_both_missing():
    d = build_dictionary("КОТ", "ТОН", RAW).unwrap()
    out = resolve_pair(d, "КИТ", "ЖУК")
    assert out.kind is ErrorKind.WORD_NOT_FOUND
    assert "ЖУК" in out.failure.message
    assert "КИТ" not in out.failure.message


def test_from_text_and_from_csv(tmp_path):
    txt = tmp_path / "dict.txt"
    txt.write_text("\n".join(RAW) + "\n", encoding="utf-8")
    assert LadderDictionary.from_text(str(txt), 4).words() == ["КОТЫ", "НОТА", "РОТА"]

    csv_path = tmp_path / "dict.csv"
    csv_path.write_text("word,freq\nКОТ,3\nТОТ,1\nКОТЫ,2\n", encoding="utf-8")
    assert LadderDictionary.from_csv(str(csv_path), 3).words() == ["КОТ", "ТОТ"]
    with pytest.raises(KeyError):
        LadderDictionary.from_csv(str(csv_path), 3, column="lemma")
