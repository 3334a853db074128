"""Data models for Kattis entities."""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from ..errors import SubmissionIdExtractFailed, TargetDirectoryNotFound, UnknownStatus
from .language import Language


# Status byte used by the submission row JSON for an accepted submission.
ACCEPTED_CODE = 16


class Status(Enum):
    """Verdict of a submission or of one of its test cases."""

    NEW = "New"
    NOT_CHECKED = "Not Checked"
    COMPILING = "Compiling"
    RUNNING = "Running"
    ACCEPTED = "Accepted"
    WRONG_ANSWER = "Wrong Answer"
    TIME_LIMIT_EXCEEDED = "Time Limit Exceeded"
    MEMORY_LIMIT_EXCEEDED = "Memory Limit Exceeded"
    COMPILE_ERROR = "Compile Error"
    RUN_TIME_ERROR = "Run Time Error"

    def __str__(self) -> str:
        return self.value

    @property
    def is_terminal(self) -> bool:
        return self not in _IN_PROGRESS

    @classmethod
    def from_text(cls, text: str) -> "Status":
        """Parse the status text shown by the judge (case-insensitive)."""
        status = _BY_TEXT.get(text.strip().lower())
        if status is None:
            raise UnknownStatus(text)
        return status

    @classmethod
    def from_code(cls, code: int) -> Union["Status", "OtherStatus"]:
        """Parse the numeric status used in the submission row JSON."""
        if code == ACCEPTED_CODE:
            return cls.ACCEPTED
        return OtherStatus(code)


_IN_PROGRESS = frozenset(
    {Status.NEW, Status.NOT_CHECKED, Status.COMPILING, Status.RUNNING}
)
_BY_TEXT = {status.value.lower(): status for status in Status}


@dataclass(frozen=True)
class OtherStatus:
    """A numeric status without a known meaning. Always terminal."""

    code: int

    def __str__(self) -> str:
        return f"Other ({self.code})"

    @property
    def is_terminal(self) -> bool:
        return True


AnyStatus = Union[Status, OtherStatus]


@dataclass(frozen=True)
class SubmissionId:
    """Identifier the judge assigns to a submission."""

    value: int

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def extract_from_response(cls, response: str) -> "SubmissionId":
        """Take the first run of ASCII digits in the submit response as the id."""
        match = re.search(r"[0-9]+", response)
        if match is None or int(match.group()) == 0:
            raise SubmissionIdExtractFailed(response)
        return cls(int(match.group()))


@dataclass(frozen=True)
class TestCaseStatus:
    """Status of one judge test case, keyed by its ordinal."""

    __test__ = False

    id: int
    status: AnyStatus


@dataclass
class SubmissionStatus:
    """Snapshot of a submission as reported by one poll."""

    status: AnyStatus
    cpu_time: str
    date: str
    test_cases: List[TestCaseStatus] = field(default_factory=list)

    def is_terminated(self) -> bool:
        return self.status.is_terminal


@dataclass
class Submission:
    """Files and settings sent to the judge."""

    files: List[Path]
    language: Language
    mainclass: Optional[str] = None


@dataclass
class Sample:
    """A sample file downloaded from a problem statement."""

    name: str
    content: bytes

    def save_in(self, directory: Path) -> Path:
        directory = Path(directory)
        if not directory.exists():
            raise TargetDirectoryNotFound(directory)

        path = directory / self.name
        path.write_bytes(self.content)
        return path
