"""Building a solution and running it against test cases."""

import logging
import subprocess
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from ..errors import (
    BuildCommandFailed,
    InvalidSampleEncoding,
    InvalidUtf8Answer,
    KattisError,
    RunCommandFailed,
    RunCommandsMissing,
)
from .cases import TestCase
from .compare import fuzzy_equal


logger = logging.getLogger(__name__)


class Verdict(Enum):
    CORRECT = "Correct"
    WRONG_ANSWER = "Wrong Answer"
    RUN_FAILED = "Run Failed"

    def __str__(self) -> str:
        return self.value


@dataclass
class CaseResult:
    """Outcome of running the solution on one test case."""

    name: str
    verdict: Verdict
    input: str = ""
    found: str = ""
    expected: str = ""
    error: Optional[KattisError] = None
    # Wall-clock time, shown to the user but not part of the result.
    seconds: Optional[float] = field(default=None, compare=False)

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.CORRECT


def _read_sample(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidSampleEncoding(path, str(e))


def _run_step(command: str, cwd: Path) -> None:
    logger.debug("Running %r in %s", command, cwd)
    completed = subprocess.run(command, shell=True, cwd=cwd)
    if completed.returncode != 0:
        raise BuildCommandFailed(command)


def build_solution(directory: Path, commands: Iterable[str]) -> None:
    """Run the build commands in order, stopping at the first failure."""
    cwd = Path(directory).resolve()
    for command in commands:
        _run_step(command, cwd)


def run_test_cases(
    directory: Path, run_commands: List[str], cases: Iterable[TestCase]
) -> Iterator[CaseResult]:
    """
    Run the solution on each case and yield its result.

    All run commands but the last are setup steps and must succeed. The
    last one reads the case input on stdin and its stdout is compared with
    the answer. A failing last command only fails that case.
    """
    if not run_commands:
        raise RunCommandsMissing()

    cwd = Path(directory).resolve()
    *setup_commands, final_command = run_commands

    for case in cases:
        for command in setup_commands:
            _run_step(command, cwd)

        logger.debug("Running %r on %s", final_command, case.input)
        with open(case.input, "rb") as stdin:
            before = time.perf_counter()
            completed = subprocess.run(
                final_command,
                shell=True,
                cwd=cwd,
                stdin=stdin,
                stdout=subprocess.PIPE,
            )
            seconds = time.perf_counter() - before

        if completed.returncode != 0:
            yield CaseResult(
                name=case.name,
                verdict=Verdict.RUN_FAILED,
                error=RunCommandFailed(final_command),
                seconds=seconds,
            )
            continue

        try:
            found = completed.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUtf8Answer(str(e))

        expected = _read_sample(case.answer)

        if fuzzy_equal(found, expected):
            yield CaseResult(
                name=case.name, verdict=Verdict.CORRECT, seconds=seconds
            )
        else:
            yield CaseResult(
                name=case.name,
                verdict=Verdict.WRONG_ANSWER,
                input=_read_sample(case.input),
                found=found,
                expected=expected,
                seconds=seconds,
            )
