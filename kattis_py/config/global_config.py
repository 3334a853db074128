"""Global configuration management (<config home>/kattis-global.yml)."""

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

import click
import yaml

from ..errors import ConfigDirectoryMissing, InvalidConfig


CONFIG_FILE = "kattis-global.yml"
DEFAULT_HOSTNAME = "open.kattis.com"


@dataclass
class GlobalConfig:
    """
    Settings shared by every solution.
    The config home also holds the `templates` and `credentials` directories.
    """

    default_template: Optional[str] = None
    default_hostname: str = DEFAULT_HOSTNAME

    @staticmethod
    def home_directory() -> Path:
        """$KATTIS_CONFIG_HOME, or the platform config directory."""
        env = os.environ.get("KATTIS_CONFIG_HOME")
        if env:
            return Path(env)

        app_dir = click.get_app_dir("kattis")
        if not app_dir:
            raise ConfigDirectoryMissing()
        return Path(app_dir)

    @classmethod
    def file_path(cls, home: Optional[Path] = None) -> Path:
        return (home or cls.home_directory()) / CONFIG_FILE

    @staticmethod
    def init_home_directory(home: Path) -> None:
        home.mkdir(parents=True, exist_ok=True)
        (home / "templates").mkdir(exist_ok=True)
        (home / "credentials").mkdir(exist_ok=True)

    @classmethod
    def load(cls, home: Optional[Path] = None) -> "GlobalConfig":
        """Load the global config, creating the home and a default file if missing."""
        home = home or cls.home_directory()
        if not home.exists():
            cls.init_home_directory(home)

        path = cls.file_path(home)
        if not path.exists():
            config = cls()
            config.save(home)
            return config

        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise InvalidConfig(path, str(e))

        if not isinstance(data, dict):
            raise InvalidConfig(path, "expected a mapping")

        return cls(
            default_template=data.get("default_template"),
            default_hostname=data.get("default_hostname") or DEFAULT_HOSTNAME,
        )

    def save(self, home: Optional[Path] = None) -> None:
        path = self.file_path(home)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(asdict(self), f, default_flow_style=False)
