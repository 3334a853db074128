import io
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from kattis_py.client.models import Status, SubmissionId, SubmissionStatus, TestCaseStatus
from kattis_py.client.tracker import track_submission
from kattis_py.errors import LoginFailed


def snapshot(status, *cases):
    return SubmissionStatus(
        status=status,
        cpu_time="0.05 s",
        date="2026-10-18 12:00:00",
        test_cases=[TestCaseStatus(i + 1, case) for i, case in enumerate(cases)],
    )


def track(snapshots):
    session = MagicMock()
    session.submission_status.side_effect = snapshots
    sleeps = []
    output = io.StringIO()

    final = track_submission(
        session,
        SubmissionId(1),
        sleep=sleeps.append,
        console=Console(file=output, width=200),
    )
    return final, session, sleeps, output.getvalue().splitlines()


def test_stops_at_terminal_status():
    final, session, sleeps, lines = track(
        [snapshot(Status.RUNNING), snapshot(Status.RUNNING), snapshot(Status.ACCEPTED)]
    )

    assert final.status is Status.ACCEPTED
    assert session.submission_status.call_count == 3
    assert sleeps == [0.1, 0.1]
    assert [line for line in lines if line.startswith("Submission Status")] == [
        "Submission Status: Accepted"
    ]
    assert lines[-2:] == ["Time: 2026-10-18 12:00:00", "CPU: 0.05 s"]


def test_heartbeat_until_a_case_is_reported():
    _, _, _, lines = track(
        [
            snapshot(Status.NEW),
            snapshot(Status.COMPILING),
            snapshot(Status.RUNNING, Status.RUNNING, Status.NOT_CHECKED),
            snapshot(Status.RUNNING, Status.RUNNING, Status.NOT_CHECKED),
            snapshot(Status.WRONG_ANSWER, Status.ACCEPTED, Status.WRONG_ANSWER),
        ]
    )

    assert lines[:4] == [
        "New...",
        "Compiling...",
        "Test Case 1/2: Running",
        "Test Case 1/2: Accepted",
    ]
    assert lines[4] == "Test Case 2/2: Wrong Answer"
    assert "Submission Status: Wrong Answer" in lines


def test_each_case_status_printed_once():
    _, _, _, lines = track(
        [
            snapshot(Status.RUNNING, Status.ACCEPTED),
            snapshot(Status.RUNNING, Status.ACCEPTED, Status.RUNNING),
            snapshot(Status.RUNNING, Status.ACCEPTED, Status.RUNNING),
            snapshot(Status.ACCEPTED, Status.ACCEPTED, Status.ACCEPTED),
        ]
    )

    case_lines = [line for line in lines if line.startswith("Test Case")]
    assert case_lines == [
        "Test Case 1/1: Accepted",
        "Test Case 2/2: Running",
        "Test Case 2/2: Accepted",
    ]


def test_never_terminal_is_bounded_by_the_transport():
    snapshots = [snapshot(Status.RUNNING)] * 50 + [LoginFailed(500)]

    with pytest.raises(LoginFailed):
        track(snapshots)
