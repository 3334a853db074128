"""HTTP session for talking to a Kattis judge."""

import io
import logging
import zipfile
from contextlib import ExitStack
from typing import List, Optional

import requests

from ..config.credentials import Credentials
from ..errors import (
    DownloadSampleFailed,
    JudgeError,
    LoginFailed,
    ProblemNotFound,
    StatusFetchFailed,
    SubmitFailed,
)
from .models import Sample, Submission, SubmissionId, SubmissionStatus
from .status import parse_submission_row


logger = logging.getLogger(__name__)


class KattisSession:
    """
    Authenticated access to the submit and submission status endpoints.

    The judge does not keep us logged in between requests, so `submit` and
    `submission_status` both log in again before doing anything.
    """

    def __init__(self, credentials: Credentials, http: Optional[requests.Session] = None):
        self.credentials = credentials
        self.http = http or requests.Session()

    def login(self) -> None:
        user = self.credentials.user
        form = {"user": user.user, "script": "false"}
        if user.password is not None:
            form["password"] = user.password
        if user.token is not None:
            form["token"] = user.token

        url = self.credentials.kattis.loginurl
        logger.debug("POST %s (user %s)", url, user.user)
        response = self.http.post(url, data=form)

        if response.status_code != requests.codes.ok:
            raise LoginFailed(response.status_code)

    def submit(self, problem: str, submission: Submission) -> SubmissionId:
        """Upload the submission files and return the id the judge assigned."""
        self.login()

        data = {
            "submit": "true",
            "submit_ctr": "2",
            "language": str(submission.language),
            "mainclass": submission.mainclass or "",
            "problem": problem,
            "tag": "",
            "script": "true",
        }

        url = self.credentials.kattis.submissionurl
        with ExitStack() as stack:
            files = [
                (
                    "sub_file[]",
                    (path.name, stack.enter_context(open(path, "rb")), "application/octet-stream"),
                )
                for path in submission.files
            ]
            logger.debug("POST %s (problem %s, %d file(s))", url, problem, len(files))
            response = self.http.post(url, data=data, files=files)

        if response.status_code != requests.codes.ok:
            raise SubmitFailed(response.status_code)

        return SubmissionId.extract_from_response(response.text)

    def submission_status(self, submission_id: SubmissionId) -> SubmissionStatus:
        """Fetch and parse the current status of a submission."""
        self.login()

        url = f"{self.credentials.kattis.submissionsurl}/{submission_id}?only_submission_row"
        logger.debug("GET %s", url)
        response = self.http.get(url)

        if response.status_code != requests.codes.ok:
            raise StatusFetchFailed(response.status_code)

        return parse_submission_row(response.json())


def problem_exists(hostname: str, problem: str, http=requests) -> bool:
    url = f"https://{hostname}/problems/{problem}"
    logger.debug("GET %s", url)
    response = http.get(url)

    if response.status_code == requests.codes.ok:
        return True
    if response.status_code == requests.codes.not_found:
        return False
    raise JudgeError(response.status_code)


def assert_problem_exists(hostname: str, problem: str, http=requests) -> None:
    if not problem_exists(hostname, problem, http):
        raise ProblemNotFound(problem)


def download_samples(hostname: str, problem: str, http=requests) -> List[Sample]:
    """Download the samples archive of a problem statement."""
    url = f"https://{hostname}/problems/{problem}/file/statement/samples.zip"
    logger.debug("GET %s", url)
    response = http.get(url)

    if response.status_code != requests.codes.ok:
        raise DownloadSampleFailed(response.status_code)

    samples = []
    with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            samples.append(Sample(name=info.filename, content=archive.read(info)))

    return samples
