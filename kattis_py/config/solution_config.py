"""Per-solution configuration management (kattis.yml)."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..client.language import Language
from ..client.models import Submission
from ..errors import InvalidConfig, KattisError, SolutionConfigNotFound


CONFIG_FILE = "kattis.yml"
DEFAULT_SAMPLES_DIR = Path("./samples")


@dataclass
class TemplateConfig:
    """
    The part of a solution config that a template provides.

    `build` commands run in order before testing. All `run` commands but the
    last are run before every test case; the sample input is piped into the
    last one.
    """

    samples: Path = DEFAULT_SAMPLES_DIR
    files: List[Path] = field(default_factory=list)
    language: Language = Language.CPLUSPLUS
    mainclass: Optional[str] = None
    build: List[str] = field(default_factory=list)
    run: List[str] = field(default_factory=list)

    @property
    def submission(self) -> Submission:
        return Submission(
            files=list(self.files), language=self.language, mainclass=self.mainclass
        )

    @classmethod
    def load(cls, directory: Path) -> "TemplateConfig":
        data = _read_yaml(Path(directory) / CONFIG_FILE)
        return cls(**_common_fields(data, Path(directory) / CONFIG_FILE))

    @classmethod
    def load_or_default(cls, directory: Path, warn=None) -> "TemplateConfig":
        """Like load, but falls back to the defaults when there is no config file."""
        try:
            return cls.load(directory)
        except SolutionConfigNotFound as e:
            if warn is not None:
                warn(
                    f"The template did not contain a configuration file ({e.path}). "
                    "Using default..."
                )
            return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "samples": str(self.samples),
            "files": [str(path) for path in self.files],
            "language": str(self.language),
            "mainclass": self.mainclass,
            "build": list(self.build),
            "run": list(self.run),
        }

    def save_in(self, directory: Path) -> None:
        _write_yaml(Path(directory) / CONFIG_FILE, self.to_dict())


@dataclass
class SolutionConfig(TemplateConfig):
    """Configuration of one solution directory."""

    hostname: str = ""
    problem: str = ""

    @classmethod
    def load(cls, directory: Path) -> "SolutionConfig":
        path = Path(directory) / CONFIG_FILE
        data = _read_yaml(path)

        missing = [key for key in ("hostname", "problem") if not data.get(key)]
        if missing:
            raise InvalidConfig(path, f"missing field(s): {', '.join(missing)}")

        return cls(
            hostname=str(data["hostname"]),
            problem=str(data["problem"]),
            **_common_fields(data, path),
        )

    @classmethod
    def from_template(
        cls, template: TemplateConfig, problem: str, hostname: str
    ) -> "SolutionConfig":
        return cls(
            samples=template.samples,
            files=list(template.files),
            language=template.language,
            mainclass=template.mainclass,
            build=list(template.build),
            run=list(template.run),
            hostname=hostname,
            problem=problem,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {"hostname": self.hostname, "problem": self.problem}
        data.update(super().to_dict())
        return data

    def sample_dir(self, directory: Path) -> Path:
        """The sample directory, relative paths taken from the solution directory."""
        if self.samples.is_absolute():
            return self.samples
        return Path(directory) / self.samples


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        raise SolutionConfigNotFound(path)

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidConfig(path, str(e))

    if not isinstance(data, dict):
        raise InvalidConfig(path, "expected a mapping")
    return data


def _write_yaml(path: Path, data: Dict[str, Any]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)


def _string_list(data: Dict[str, Any], key: str, path: Path) -> List[str]:
    value = data.get(key) or []
    if isinstance(value, str) or not isinstance(value, list):
        raise InvalidConfig(path, f"`{key}` must be a list of strings")
    return [str(item) for item in value]


def _common_fields(data: Dict[str, Any], path: Path) -> Dict[str, Any]:
    language = data.get("language")
    try:
        language = Language.parse(str(language)) if language else Language.CPLUSPLUS
    except KattisError as e:
        raise InvalidConfig(path, str(e))

    mainclass = data.get("mainclass")
    return {
        "samples": Path(data.get("samples") or DEFAULT_SAMPLES_DIR),
        "files": [Path(item) for item in _string_list(data, "files", path)],
        "language": language,
        "mainclass": str(mainclass) if mainclass else None,
        "build": _string_list(data, "build", path),
        "run": _string_list(data, "run", path),
    }
