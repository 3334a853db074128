import pytest

from kattis_py.client.models import OtherStatus, Status, SubmissionId, TestCaseStatus
from kattis_py.client.status import parse_submission_row, parse_test_case_title
from kattis_py.errors import (
    CpuTimeMissing,
    DateMissing,
    InvalidTestCaseTitle,
    StatusMissing,
    SubmissionIdExtractFailed,
    SubmissionRowParseError,
    UnknownStatus,
)


def row(status="Accepted", cpu="0.01 s", date="12:34:56", cases=None, **cells):
    cells = {"status": status, "cpu": cpu, "time": date, **cells}
    tds = "".join(
        f'<td data-type="{kind}">{text}</td>'
        for kind, text in cells.items()
        if text is not None
    )
    if cases is not None:
        children = "".join(f'<span title="{title}"><i></i></span>' for title in cases)
        tds += f'<td><div class="testcases">{children}</div></td>'
    return {"component": f"<tr>{tds}</tr>", "status_id": 16, "testcases_number": 2}


def test_submission_id_from_response():
    response = "Submission received. Submission ID: 12345."
    assert SubmissionId.extract_from_response(response) == SubmissionId(12345)


def test_submission_id_takes_first_digit_run():
    assert SubmissionId.extract_from_response("id 42 of 100") == SubmissionId(42)


def test_submission_id_without_digits():
    with pytest.raises(SubmissionIdExtractFailed) as excinfo:
        SubmissionId.extract_from_response("Something went wrong")
    assert excinfo.value.response == "Something went wrong"


def test_submission_id_ignores_non_ascii_digits():
    response = "Submission \u0663 received. Submission ID: 77."
    assert SubmissionId.extract_from_response(response) == SubmissionId(77)


def test_submission_id_zero_rejected():
    with pytest.raises(SubmissionIdExtractFailed):
        SubmissionId.extract_from_response("Submission ID: 0")


def test_status_from_text_is_case_insensitive():
    assert Status.from_text("accepted") is Status.ACCEPTED
    assert Status.from_text("WRONG ANSWER") is Status.WRONG_ANSWER
    assert Status.from_text("Run Time Error") is Status.RUN_TIME_ERROR
    assert Status.from_text("not checked") is Status.NOT_CHECKED


def test_status_from_unknown_text():
    with pytest.raises(UnknownStatus) as excinfo:
        Status.from_text("Judge On Fire")
    assert excinfo.value.status == "Judge On Fire"


def test_status_from_code():
    assert Status.from_code(16) is Status.ACCEPTED
    assert Status.from_code(14) == OtherStatus(14)
    assert str(OtherStatus(14)) == "Other (14)"


def test_terminal_partition():
    in_progress = {Status.NEW, Status.NOT_CHECKED, Status.COMPILING, Status.RUNNING}
    for status in Status:
        assert status.is_terminal == (status not in in_progress)
    assert OtherStatus(3).is_terminal


def test_test_case_title():
    assert parse_test_case_title("Test case 3/10: Accepted") == TestCaseStatus(
        id=3, status=Status.ACCEPTED
    )
    assert parse_test_case_title(" Test case 1/2: time limit exceeded ") == TestCaseStatus(
        id=1, status=Status.TIME_LIMIT_EXCEEDED
    )


@pytest.mark.parametrize(
    "title", ["Test case x/10: Accepted", "Test case 3/10:", "Case 3/10: Accepted", ""]
)
def test_invalid_test_case_title(title):
    with pytest.raises(InvalidTestCaseTitle):
        parse_test_case_title(title)


def test_title_with_unknown_status():
    with pytest.raises(UnknownStatus):
        parse_test_case_title("Test case 3/10: Exploded")


def test_parse_submission_row():
    status = parse_submission_row(
        row(
            status="Running",
            cases=["Test case 1/3: Accepted", "Test case 2/3: Running", "Test case 3/3: Not checked"],
        )
    )

    assert status.status is Status.RUNNING
    assert status.cpu_time == "0.01 s"
    assert status.date == "12:34:56"
    assert status.test_cases == [
        TestCaseStatus(1, Status.ACCEPTED),
        TestCaseStatus(2, Status.RUNNING),
        TestCaseStatus(3, Status.NOT_CHECKED),
    ]
    assert not status.is_terminated()


def test_parse_submission_row_without_test_cases():
    status = parse_submission_row(row(status="Compile Error"))
    assert status.test_cases == []
    assert status.is_terminated()


@pytest.mark.parametrize(
    "missing, error",
    [("status", StatusMissing), ("cpu", CpuTimeMissing), ("date", DateMissing)],
)
def test_missing_fields(missing, error):
    with pytest.raises(error):
        parse_submission_row(row(**{missing: None}))


def test_unknown_overall_status():
    with pytest.raises(UnknownStatus):
        parse_submission_row(row(status="Bogus"))


def test_response_without_component():
    with pytest.raises(SubmissionRowParseError):
        parse_submission_row({"status_id": 16})


def test_nested_markup_keeps_inner_spaces():
    status = parse_submission_row(
        row(
            status="<span>Wrong</span> <span>Answer</span>",
            cpu="<b>0.01</b> s",
            date="2020-01-01 <b>12:00</b>",
        )
    )

    assert status.status is Status.WRONG_ANSWER
    assert status.cpu_time == "0.01 s"
    assert status.date == "2020-01-01 12:00"
