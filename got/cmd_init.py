from __future__ import annotations

from pathlib import Path

from got.cmd_base import Base
from got.repository import Repository
from got.workspace import GIT_DIR


class Init(Base):
    USAGE = "got init [<directory>]"

    def run(self) -> None:
        if len(self.args) > 1:
            self.usage()

        if self.args:
            root_path = Path(self.args[0]).absolute().resolve()
        else:
            root_path = Path(self.dir).absolute().resolve()

        git_path: Path = root_path / GIT_DIR
        Repository.init(git_path)

        self.println(f"Initialized empty got repository in {git_path}")
