from kattis_py.verify.compare import fuzzy_equal


def test_trailing_whitespace_ignored():
    assert fuzzy_equal("a \nb\n", "a\nb")
    assert fuzzy_equal("a\t\r\nb\r\n\n\n", "a\nb")


def test_different_content():
    assert not fuzzy_equal("a\nb\n", "a\nc\n")


def test_leading_whitespace_matters():
    assert not fuzzy_equal(" a\n", "a\n")


def test_blank_lines_in_the_middle_matter():
    assert not fuzzy_equal("a\n\nb\n", "a\nb\n")


def test_extra_line():
    assert not fuzzy_equal("a\nb\nc\n", "a\nb\n")


def test_empty():
    assert fuzzy_equal("", "\n  \n")
