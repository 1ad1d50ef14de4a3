import os
import stat
from pathlib import Path
from typing import Optional

from got.errors import IOFailure
from got.modes import Mode

GIT_DIR = ".git"


class Workspace:
    IGNORE: list[str] = [GIT_DIR]

    def __init__(self, path: Path, store_path: Optional[Path] = None) -> None:
        self.path: Path = path
        self.store_path: Optional[Path] = (
            store_path.resolve() if store_path is not None else None
        )

    def list_dir(self, dirname: Path) -> list[os.DirEntry[str]]:
        path = self.path / dirname

        try:
            with os.scandir(path) as it:
                return [entry for entry in it if not self.is_ignored(entry)]
        except OSError as e:
            raise IOFailure(f"scandir(\"{path}\"): {e.strerror}") from e

    def is_ignored(self, entry: os.DirEntry[str]) -> bool:
        if entry.name in Workspace.IGNORE:
            return True
        if self.store_path is None:
            return False
        return Path(entry.path).resolve() == self.store_path

    def is_directory(self, entry: os.DirEntry[str]) -> bool:
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError as e:
            raise IOFailure(f"stat(\"{entry.path}\"): {e.strerror}") from e

    def read_file(self, path: Path) -> bytes:
        try:
            with open(self.path / path, "rb") as f:
                return f.read()
        except OSError as e:
            raise IOFailure(f"open(\"{path}\"): {e.strerror}") from e

    def stat_file(self, path: Path) -> os.stat_result:
        try:
            return (self.path / path).stat()
        except OSError as e:
            raise IOFailure(f"stat(\"{path}\"): {e.strerror}") from e

    def file_mode(self, path: Path) -> Mode:
        if self.stat_file(path).st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
            return Mode.EXECUTABLE
        return Mode.REGULAR
