"""Polling a submission until the judge reaches a final verdict."""

import time
from typing import Callable, Set, Tuple

from rich.console import Console
from rich.markup import escape

from ..utils.terminal import err_console
from .models import AnyStatus, Status, SubmissionId, SubmissionStatus
from .session import KattisSession


POLL_INTERVAL = 0.1


def format_status(status: AnyStatus) -> str:
    """Format a judge status with the appropriate color."""
    text = escape(str(status))

    if not status.is_terminal:
        return f"[yellow]{text}[/yellow]"
    if status is Status.ACCEPTED:
        return f"[bold green]{text}[/bold green]"
    return f"[bold red]{text}[/bold red]"


def track_submission(
    session: KattisSession,
    submission_id: SubmissionId,
    sleep: Callable[[float], None] = time.sleep,
    interval: float = POLL_INTERVAL,
    console: Console = err_console,
) -> SubmissionStatus:
    """
    Poll the submission status and print test case verdicts as they arrive.

    Every (test case, status) pair is printed once. Until some test case has
    a verdict, the overall status is printed on each poll instead. Returns
    the final status once the submission has terminated.
    """
    displayed: Set[Tuple[int, AnyStatus]] = set()

    while True:
        submission = session.submission_status(submission_id)
        count = len(submission.test_cases)

        for test_case in submission.test_cases:
            key = (test_case.id, test_case.status)
            if test_case.status is Status.NOT_CHECKED or key in displayed:
                continue

            displayed.add(key)
            console.print(
                f"Test Case {test_case.id}/{count}: {format_status(test_case.status)}"
            )

        if submission.is_terminated():
            console.print()
            console.print(f"Submission Status: {format_status(submission.status)}")
            console.print(f"Time: {submission.date}", markup=False)
            console.print(f"CPU: {submission.cpu_time}", markup=False)
            return submission

        if not displayed:
            console.print(f"{submission.status}...", markup=False)

        sleep(interval)
