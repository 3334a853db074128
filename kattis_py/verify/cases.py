"""Discovery of sample test cases in a directory."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..errors import SampleDirectoryNotFound


INPUT_SUFFIX = ".in"
ANSWER_SUFFIX = ".ans"

NamePredicate = Callable[[str], bool]


@dataclass(frozen=True)
class TestCase:
    """A sample input paired with its expected answer."""

    __test__ = False

    name: str
    input: Path
    answer: Path


def load_test_cases(
    directory: Path, predicate: Optional[NamePredicate] = None
) -> List[TestCase]:
    """
    Pair up `<name>.in` and `<name>.ans` files in `directory`.

    Names rejected by `predicate` and files missing their counterpart are
    skipped. The result is sorted by name.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise SampleDirectoryNotFound(directory)

    inputs: Dict[str, Path] = {}
    answers: Dict[str, Path] = {}

    for path in directory.iterdir():
        if not path.is_file():
            continue

        name = path.stem
        if predicate is not None and not predicate(name):
            continue

        if path.suffix == INPUT_SUFFIX:
            inputs[name] = path
        elif path.suffix == ANSWER_SUFFIX:
            answers[name] = path

    return [
        TestCase(name=name, input=inputs[name], answer=answers[name])
        for name in sorted(inputs.keys() & answers.keys())
    ]


def name_predicate(
    filter: Optional[str] = None, ignore: Optional[str] = None
) -> NamePredicate:
    """Accept names matching `filter` (if given) and not matching `ignore` (if given)."""
    filter_re = re.compile(filter) if filter else None
    ignore_re = re.compile(ignore) if ignore else None

    def predicate(name: str) -> bool:
        if filter_re is not None and not filter_re.search(name):
            return False
        if ignore_re is not None and ignore_re.search(name):
            return False
        return True

    return predicate
