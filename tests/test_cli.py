import io

import pytest

from numwords.cli import main, run
from numwords.dictionary import DictError
from numwords.speller import InvalidNumberError, Style

_DICT_TEXT = (
    "0: zero\n1: one\n2: two\n3: three\n4: four\n5: five\n6: six\n"
    "7: seven\n8: eight\n9: nine\n10: ten\n11: eleven\n12: twelve\n"
    "13: thirteen\n14: fourteen\n15: fifteen\n16: sixteen\n"
    "17: seventeen\n18: eighteen\n19: nineteen\n20: twenty\n"
    "30: thirty\n40: forty\n50: fifty\n60: sixty\n70: seventy\n"
    "80: eighty\n90: ninety\n100: hundred\n1000: thousand\n"
    "1000000: million\n1000000000: billion\n"
)


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "numbers.dict"
    path.write_text(_DICT_TEXT)
    return path


def test_run_spells_number(dict_file):
    assert run("42", dict_file, Style.STANDARD) == "forty-two"


def test_run_compact_style(dict_file):
    assert run("15", dict_file, Style.COMPACT).split() == ["ten", "five"]


def test_run_zero(dict_file):
    assert run("0", dict_file, Style.STANDARD) == "zero"


def test_run_invalid_number(dict_file):
    with pytest.raises(InvalidNumberError):
        run("12a", dict_file, Style.STANDARD)


def test_run_invalid_number_checked_before_dictionary(tmp_path):
    with pytest.raises(InvalidNumberError):
        run("x", tmp_path / "missing.dict", Style.STANDARD)


def test_run_missing_dictionary(tmp_path):
    with pytest.raises(DictError):
        run("42", tmp_path / "missing.dict", Style.STANDARD)


def test_run_incomplete_dictionary(tmp_path):
    path = tmp_path / "small.dict"
    path.write_text("0: zero\n1: one\n")
    with pytest.raises(DictError):
        run("2", path, Style.STANDARD)


def test_main_with_dictionary_argument(dict_file, capsys):
    assert main([str(dict_file), "7"]) == 0
    assert capsys.readouterr().out == "seven"


def test_main_uses_default_dictionary(dict_file, monkeypatch, capsys):
    monkeypatch.chdir(dict_file.parent)
    assert main(["13"]) == 0
    assert capsys.readouterr().out == "thirteen"


def test_main_compact_flag(dict_file, capsys):
    assert main(["--compact", str(dict_file), "100"]) == 0
    assert capsys.readouterr().out.split() == ["hundred"]


def test_main_bad_number(dict_file, capsys):
    assert main([str(dict_file), "-5"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_number_too_large(dict_file, capsys):
    assert main([str(dict_file), "4294967295"]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_malformed_dictionary(tmp_path, capsys):
    path = tmp_path / "bad.dict"
    path.write_text("0: zero\nnot a line\n")
    assert main([str(path), "0"]) == 1
    assert capsys.readouterr().out == "Dict Error\n"


def test_main_missing_dictionary(tmp_path, capsys):
    assert main([str(tmp_path / "missing.dict"), "1"]) == 1
    assert capsys.readouterr().out == "Dict Error\n"


def test_main_too_many_arguments_does_nothing(dict_file, capsys):
    assert main([str(dict_file), "1", "2"]) == 0
    assert capsys.readouterr().out == ""


def test_main_without_arguments_drains_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("anything\nmore\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == ""