from __future__ import annotations

import logging
from pathlib import Path

from got.database import Database
from got.db_entry import DatabaseEntry
from got.modes import Kind, Mode
from got.tree import Tree
from got.workspace import Workspace

log = logging.getLogger(__name__)


class WriteTree:
    def __init__(self, database: Database, workspace: Workspace) -> None:
        self.database = database
        self.workspace = workspace

    def build(self, dirname: Path = Path()) -> str:
        entries: list[DatabaseEntry] = []

        for child in self.workspace.list_dir(dirname):
            path = dirname / child.name

            if self.workspace.is_directory(child):
                oid = self.build(path)
                entries.append(DatabaseEntry(Mode.TREE, child.name, oid))
            else:
                entries.append(self.store_file(path))

        tree = Tree.from_entries(entries)
        oid = self.database.store(tree.type(), tree.to_bytes())
        log.debug("stored tree %s for %s (%d entries)", oid, dirname, len(entries))
        return oid

    def store_file(self, path: Path) -> DatabaseEntry:
        data = self.workspace.read_file(path)
        oid = self.database.store(Kind.BLOB, data)
        mode = self.workspace.file_mode(path)
        return DatabaseEntry(mode, path.name, oid)
