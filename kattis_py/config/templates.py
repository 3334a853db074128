"""Solution templates stored in <config home>/templates."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..errors import (
    MultipleTemplateCandidates,
    NoMatchingTemplate,
    TemplateDirectoryExists,
    TemplateNotDirectory,
)
from .credentials import file_name_matches
from .global_config import GlobalConfig
from .solution_config import TemplateConfig


@dataclass
class Template:
    """A directory whose contents seed a new solution."""

    name: str
    path: Path

    @staticmethod
    def directory(home: Optional[Path] = None) -> Path:
        return (home or GlobalConfig.home_directory()) / "templates"

    @classmethod
    def find(cls, name: str, home: Optional[Path] = None) -> "Template":
        candidates = file_name_matches(name, cls.directory(home))

        if not candidates:
            raise NoMatchingTemplate(name)
        if len(candidates) > 1:
            raise MultipleTemplateCandidates(name)

        path = candidates[0]
        if not path.is_dir():
            raise TemplateNotDirectory(path)
        return cls(name=path.name, path=path)

    @classmethod
    def create(cls, name: str, home: Optional[Path] = None) -> "Template":
        """Create an empty template holding a default kattis.yml."""
        path = cls.directory(home) / name
        if path.exists():
            raise TemplateDirectoryExists(path)

        path.mkdir(parents=True)
        TemplateConfig().save_in(path)
        return cls(name=name, path=path)

    @classmethod
    def list(cls, home: Optional[Path] = None) -> List["Template"]:
        directory = cls.directory(home)
        if not directory.is_dir():
            return []
        return [
            cls(name=entry.name, path=entry)
            for entry in sorted(directory.iterdir())
            if entry.is_dir()
        ]

    def init_dir(self, target: Path) -> None:
        """Copy the template contents into `target`, keeping files that already exist."""
        target = Path(target)
        for item in self.path.iterdir():
            destination = target / item.name
            if item.is_dir():
                shutil.copytree(item, destination, dirs_exist_ok=True, copy_function=_copy_new)
            elif not destination.exists():
                shutil.copy2(item, destination)


def _copy_new(src: str, dst: str) -> None:
    if not Path(dst).exists():
        shutil.copy2(src, dst)
