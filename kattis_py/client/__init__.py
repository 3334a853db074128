"""Client module for Kattis interaction."""

from .language import Language
from .models import (
    OtherStatus,
    Sample,
    Status,
    Submission,
    SubmissionId,
    SubmissionStatus,
    TestCaseStatus,
)
from .session import KattisSession, assert_problem_exists, download_samples, problem_exists
from .status import parse_submission_row, parse_test_case_title
from .tracker import track_submission

__all__ = [
    "KattisSession",
    "Language",
    "OtherStatus",
    "Sample",
    "Status",
    "Submission",
    "SubmissionId",
    "SubmissionStatus",
    "TestCaseStatus",
    "assert_problem_exists",
    "download_samples",
    "parse_submission_row",
    "parse_test_case_title",
    "problem_exists",
    "track_submission",
]
