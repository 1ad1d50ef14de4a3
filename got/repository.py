from __future__ import annotations

from pathlib import Path

from got.database import Database
from got.db_loose import Raw
from got.errors import IOFailure
from got.ls_tree import LsTree
from got.modes import Kind
from got.workspace import Workspace
from got.write_tree import WriteTree

DEFAULT_BRANCH = "main"
HEAD_CONTENTS = f"ref: refs/heads/{DEFAULT_BRANCH}\n"


class Repository:
    def __init__(self, git_path: Path):
        self.git_path: Path = git_path
        self.database: Database = Database(git_path / "objects")

    @classmethod
    def init(cls, git_path: Path) -> "Repository":
        try:
            for d in ("objects", "refs"):
                (git_path / d).mkdir(parents=True, exist_ok=True)
            (git_path / "HEAD").write_text(HEAD_CONTENTS)
        except OSError as e:
            raise IOFailure(f"unable to initialize {git_path}: {e.strerror}") from e

        return cls(git_path)

    def workspace(self, root: Path | None = None) -> Workspace:
        root_path = root if root is not None else self.git_path.parent
        return Workspace(root_path, store_path=self.git_path)

    def store_object(self, kind: Kind, payload: bytes) -> str:
        return self.database.store(kind, payload)

    def read_object(self, oid: str) -> Raw:
        return self.database.load(oid)

    def build_tree(self, root: Path | None = None) -> str:
        return WriteTree(self.database, self.workspace(root)).build()

    def list_tree(self, oid: str, name_only: bool = False) -> list[str]:
        return LsTree(self.database).lines(oid, name_only)
