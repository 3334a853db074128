"""Exceptions raised by kattis_py."""

from pathlib import Path


class KattisError(Exception):
    """Base class for every error reported to the user."""


# Configuration and IO


class ConfigDirectoryMissing(KattisError):
    def __init__(self):
        super().__init__(
            "Could not find the configuration directory. "
            "Try setting the KATTIS_CONFIG_HOME environment variable"
        )


class SolutionConfigNotFound(KattisError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Could not find the solution configuration file: {path}")


class InvalidConfig(KattisError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration file {path}: {reason}")


class SampleDirectoryNotFound(KattisError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The sample directory does not exist: {path}")


class TargetDirectoryNotFound(KattisError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The target directory does not exist: {path}")


class SolutionDirectoryExists(KattisError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"A solution with the same name already exists: {path}")


class TemplateNotSpecified(KattisError):
    def __init__(self):
        super().__init__(
            "No template was specified. Try running again with the -t flag "
            "or set `default_template` in the configuration file."
        )


class NoMatchingTemplate(KattisError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No template matches {name!r}")


class MultipleTemplateCandidates(KattisError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"More than one template matches {name!r}")


class TemplateNotDirectory(KattisError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The template is not a directory: {path}")


class TemplateDirectoryExists(KattisError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"A template with the same name already exists: {path}")


class NoMatchingCredentials(KattisError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No credentials match {name!r}")


class MultipleCredentialCandidates(KattisError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"More than one credentials file matches {name!r}")


class CredentialsParseError(KattisError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"When parsing credentials: {reason}")


class UnknownLanguage(KattisError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unknown language: {text!r}")


# External processes


class BuildCommandFailed(KattisError):
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Build command failed: {command}")


class RunCommandFailed(KattisError):
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Run command failed: {command}")


class RunCommandsMissing(KattisError):
    def __init__(self):
        super().__init__("No run commands provided")


class InvalidUtf8Answer(KattisError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Answer contained invalid UTF-8: {reason}")


class InvalidSampleEncoding(KattisError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Sample file is not valid UTF-8: {path} ({reason})")


# Judge


class JudgeError(KattisError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Kattis responded with an error: {code}")


class ProblemNotFound(KattisError):
    def __init__(self, problem: str):
        self.problem = problem
        super().__init__(f'Could not find a problem with the id "{problem}"')


class DownloadSampleFailed(KattisError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Could not download the samples: {code}")


class LoginFailed(KattisError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Failed to login to Kattis: {code}")


class SubmitFailed(KattisError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Failed to submit to Kattis: {code}")


class StatusFetchFailed(KattisError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Failed to fetch the submission status: {code}")


# Judge responses


class SubmissionIdExtractFailed(KattisError):
    def __init__(self, response: str):
        self.response = response
        super().__init__(f"Failed to extract submission id from string: {response!r}")


class SubmissionRowParseError(KattisError):
    """The submission status fragment could not be read."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to read submission status: {detail}")


class StatusMissing(SubmissionRowParseError):
    def __init__(self, fragment: str = ""):
        self.fragment = fragment
        super().__init__(f"Submission contained no status. Fragment: {fragment!r}")


class CpuTimeMissing(SubmissionRowParseError):
    def __init__(self, fragment: str = ""):
        self.fragment = fragment
        super().__init__(f"Submission contained no CPU time. Fragment: {fragment!r}")


class DateMissing(SubmissionRowParseError):
    def __init__(self, fragment: str = ""):
        self.fragment = fragment
        super().__init__(f"Submission contained no date. Fragment: {fragment!r}")


class InvalidTestCaseTitle(SubmissionRowParseError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Test case contained invalid title: {title!r}")


class UnknownStatus(SubmissionRowParseError):
    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Unknown status: {status!r}")
