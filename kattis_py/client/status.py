"""Parsing of the submission row returned while a submission is judged."""

import re
from typing import List

from bs4 import BeautifulSoup

from ..errors import (
    CpuTimeMissing,
    DateMissing,
    InvalidTestCaseTitle,
    StatusMissing,
    SubmissionRowParseError,
)
from .models import Status, SubmissionStatus, TestCaseStatus


TITLE_PATTERN = re.compile(r"Test case (\d+)/(\d+): (.+)")


def parse_submission_row(row: dict) -> SubmissionStatus:
    """
    Build a SubmissionStatus from the decoded `only_submission_row` JSON.

    Only the HTML in `component` is read. It is a bare table row, so it is
    wrapped in html/body/table tags before parsing, otherwise the cells are
    dropped by the parser.
    """
    try:
        component = row["component"]
    except (KeyError, TypeError):
        raise SubmissionRowParseError(f"no component in response: {row!r}")

    html = f"<html><body><table>{component}</table></body></html>"
    soup = BeautifulSoup(html, "html.parser")

    status_cell = soup.find("td", attrs={"data-type": "status"})
    if status_cell is None:
        raise StatusMissing(component)
    status = Status.from_text(status_cell.get_text().strip())

    cpu_cell = soup.find("td", attrs={"data-type": "cpu"})
    if cpu_cell is None:
        raise CpuTimeMissing(component)

    date_cell = soup.find("td", attrs={"data-type": "time"})
    if date_cell is None:
        raise DateMissing(component)

    return SubmissionStatus(
        status=status,
        cpu_time=cpu_cell.get_text().strip(),
        date=date_cell.get_text().strip(),
        test_cases=_parse_test_cases(soup),
    )


def _parse_test_cases(soup: BeautifulSoup) -> List[TestCaseStatus]:
    # No container yet (e.g. still compiling): no test cases to report.
    container = soup.find("div", class_="testcases")
    if container is None:
        return []

    test_cases = []
    for child in container.find_all(recursive=False):
        title = child.get("title")
        if title is None:
            continue
        test_cases.append(parse_test_case_title(title))

    return test_cases


def parse_test_case_title(title: str) -> TestCaseStatus:
    """Parse a title such as "Test case 3/10: Accepted"."""
    match = TITLE_PATTERN.fullmatch(title.strip())
    if match is None:
        raise InvalidTestCaseTitle(title)

    return TestCaseStatus(
        id=int(match.group(1)),
        status=Status.from_text(match.group(3)),
    )
