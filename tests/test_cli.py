import pytest

from solver.ladder_cli import EXIT_INVALID_INPUT, EXIT_NOT_FOUND, EXIT_OK, main

DICT = "КОТ\nТОН\nНОТА\nКОТЫ\nРОТ\nРОТА\nТОТ\nТИП\n"


@pytest.fixture
def dict_file(tmp_path):
    p = tmp_path / "dict.txt"
    p.write_text(DICT, encoding="utf-8")
    return str(p)


def _words(tmp_path, source, target):
    p = tmp_path / "words.txt"
    p.write_text(f"{source}\n{target}\n", encoding="utf-8")
    return str(p)


def test_prints_ladder(tmp_path, dict_file, capsys):
    code = main([_words(tmp_path, "КОТ", "ТОН"), dict_file, "--plain-log"])
    assert code == EXIT_OK
    assert capsys.readouterr().out.split() == ["КОТ", "ТОТ", "ТОН"]


def test_no_ladder(tmp_path, dict_file, capsys):
    code = main([_words(tmp_path, "КОТ", "ТИП"), dict_file, "--plain-log"])
    assert code == EXIT_NOT_FOUND
    assert capsys.readouterr().out.startswith("Result not found.")


@pytest.mark.parametrize("source, target", [("КОТ", "РОТА"), ("ЖМОТ", "КРОТ")])
def test_invalid_words(tmp_path, dict_file, capsys, source, target):
    code = main([_words(tmp_path, source, target), dict_file, "--plain-log"])
    assert code == EXIT_INVALID_INPUT
    assert capsys.readouterr().out.startswith("Invalid input data.")


def test_missing_files(tmp_path, dict_file, capsys):
    code = main([str(tmp_path / "missing.txt"), dict_file, "--plain-log"])
    assert code == EXIT_INVALID_INPUT
    assert "Invalid input data." in capsys.readouterr().out


def test_bad_iteration_flag(tmp_path, dict_file, capsys):
    code = main([_words(tmp_path, "КОТ", "ТОН"), dict_file, "--max-iterations", "0", "--plain-log"])
    assert code == EXIT_INVALID_INPUT


def test_csv_dictionary(tmp_path, capsys):
    p = tmp_path / "dict.csv"
    p.write_text("word\ncat\ncot\ndot\ndog\n", encoding="utf-8")
    code = main([_words(tmp_path, "cat", "dog"), str(p), "--csv-column", "word", "--plain-log"])
    assert code == EXIT_OK
    assert capsys.readouterr().out.split() == ["cat", "cot", "dot", "dog"]


def test_tabbed_dictionary_lines_are_dropped_by_length(tmp_path, capsys):
    p = tmp_path / "dict.txt"
    p.write_text("cat\nco\tt\ncot\n", encoding="utf-8")
    code = main([_words(tmp_path, "cat", "cot"), str(p), "--plain-log"])
    assert code == EXIT_OK
    assert capsys.readouterr().out.split() == ["cat", "cot"]
