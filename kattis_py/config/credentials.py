"""Judge credentials, read from .kattisrc files in the config home."""

import configparser
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..errors import (
    CredentialsParseError,
    MultipleCredentialCandidates,
    NoMatchingCredentials,
)
from .global_config import GlobalConfig


@dataclass
class User:
    """Login details. At most one of password and token is normally set."""

    user: str
    password: Optional[str] = None
    token: Optional[str] = None


@dataclass
class KattisUrls:
    """Endpoints of one judge installation."""

    hostname: str
    loginurl: str
    submissionurl: str
    submissionsurl: str


@dataclass
class Credentials:
    """
    Contents of a .kattisrc file, as downloaded from
    https://<hostname>/download/kattisrc.
    """

    user: User
    kattis: KattisUrls

    @staticmethod
    def directory(home: Optional[Path] = None) -> Path:
        return (home or GlobalConfig.home_directory()) / "credentials"

    @classmethod
    def find(cls, name: str, home: Optional[Path] = None) -> "Credentials":
        """Load the single credentials file whose name matches `name`."""
        candidates = file_name_matches(name, cls.directory(home))

        if not candidates:
            raise NoMatchingCredentials(name)
        if len(candidates) > 1:
            raise MultipleCredentialCandidates(name)

        return cls.parse(candidates[0].read_text(encoding="utf-8"))

    @classmethod
    def parse(cls, text: str) -> "Credentials":
        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read_string(text)
        except configparser.Error as e:
            raise CredentialsParseError(str(e).splitlines()[0])

        def required(section: str, key: str) -> str:
            value = parser.get(section, key, fallback=None)
            if value is None:
                raise CredentialsParseError(f"Missing field: {key}")
            return value

        def optional(section: str, key: str) -> Optional[str]:
            return parser.get(section, key, fallback=None)

        return cls(
            user=User(
                user=required("user", "username"),
                password=optional("user", "password"),
                token=optional("user", "token"),
            ),
            kattis=KattisUrls(
                hostname=required("kattis", "hostname"),
                loginurl=required("kattis", "loginurl"),
                submissionurl=required("kattis", "submissionurl"),
                submissionsurl=required("kattis", "submissionsurl"),
            ),
        )


def file_name_matches(pattern: str, directory: Path) -> List[Path]:
    """
    Entries of `directory` whose name matches the regex `pattern`.
    An entry named exactly `pattern` wins over partial matches.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []

    entries = sorted(directory.iterdir())
    exact = [entry for entry in entries if entry.name == pattern]
    if exact:
        return exact

    try:
        regex = re.compile(pattern)
    except re.error:
        regex = re.compile(re.escape(pattern))
    return [entry for entry in entries if regex.search(entry.name)]
