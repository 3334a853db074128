import pytest

from kattis_py.errors import SampleDirectoryNotFound
from kattis_py.verify.cases import TestCase, load_test_cases, name_predicate


def touch(directory, *names):
    for name in names:
        (directory / name).write_text(name)


def test_pairs_inputs_with_answers(tmp_path):
    touch(tmp_path, "2.in", "2.ans", "1.in", "1.ans", "lonely.in", "orphan.ans", "notes.txt")
    (tmp_path / "nested.in").mkdir()

    cases = load_test_cases(tmp_path)

    assert cases == [
        TestCase("1", tmp_path / "1.in", tmp_path / "1.ans"),
        TestCase("2", tmp_path / "2.in", tmp_path / "2.ans"),
    ]


def test_sorted_by_name(tmp_path):
    names = ["c", "a", "b", "aa"]
    for name in names:
        touch(tmp_path, f"{name}.in", f"{name}.ans")

    assert [case.name for case in load_test_cases(tmp_path)] == sorted(names)


def test_predicate_filters_names(tmp_path):
    touch(tmp_path, "small.in", "small.ans", "big.in", "big.ans", "big2.in", "big2.ans")

    cases = load_test_cases(tmp_path, name_predicate(filter="big", ignore="2$"))

    assert [case.name for case in cases] == ["big"]


def test_missing_directory(tmp_path):
    with pytest.raises(SampleDirectoryNotFound):
        load_test_cases(tmp_path / "missing")


def test_name_predicate_defaults_accept_everything():
    predicate = name_predicate()
    assert predicate("anything")
    assert predicate("")
