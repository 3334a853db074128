"""Comparison of program output against expected answers."""

from typing import List


def _trimmed_lines(text: str) -> List[str]:
    return [line.rstrip() for line in text.rstrip().split("\n")]


def fuzzy_equal(found: str, expected: str) -> bool:
    """
    True if the texts are equal once trailing whitespace is stripped from
    every line and trailing blank lines are dropped.
    """
    return _trimmed_lines(found) == _trimmed_lines(expected)
