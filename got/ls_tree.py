from __future__ import annotations

from got.database import Database
from got.db_entry import DatabaseEntry
from got.errors import CorruptObject
from got.modes import Kind, type_label
from got.tree import Tree


class LsTree:
    def __init__(self, database: Database) -> None:
        self.database = database

    def load_tree(self, oid: str) -> Tree:
        raw = self.database.load(oid)
        if raw.kind != Kind.TREE:
            raise CorruptObject(f"object {oid} is a {raw.kind.value}, not a tree")
        return Tree.parse(raw.data)

    def lines(self, oid: str, name_only: bool = False) -> list[str]:
        tree = self.load_tree(oid)
        return [self.format_entry(entry, name_only) for entry in tree.entries]

    def format_entry(self, entry: DatabaseEntry, name_only: bool) -> str:
        if name_only:
            return entry.name
        return f"{entry.mode} {type_label(entry.mode)} {entry.oid} {entry.name}"
