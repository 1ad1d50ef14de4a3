from __future__ import annotations

import os

from got import oid as oids
from got.db_entry import DatabaseEntry
from got.errors import CorruptObject
from got.modes import Kind


def name_sort_key(entry: DatabaseEntry) -> bytes:
    return os.fsencode(entry.name)


class Tree:
    def __init__(self, entries: list[DatabaseEntry] | None = None) -> None:
        self.entries: list[DatabaseEntry] = entries if entries is not None else []

    @classmethod
    def parse(cls, payload: bytes) -> "Tree":
        entries: list[DatabaseEntry] = []
        idx = 0
        end = len(payload)

        while idx < end:
            sp = payload.find(b" ", idx)
            if sp == -1:
                raise CorruptObject("malformed tree entry: missing mode")
            mode = os.fsdecode(payload[idx:sp])
            idx = sp + 1

            nul = payload.find(b"\x00", idx)
            if nul == -1:
                raise CorruptObject("malformed tree entry: missing name terminator")
            name = os.fsdecode(payload[idx:nul])
            idx = nul + 1

            if end - idx < oids.RAW_LENGTH:
                raise CorruptObject("malformed tree entry: incomplete hash")
            oid = oids.to_hex(payload[idx : idx + oids.RAW_LENGTH])
            idx += oids.RAW_LENGTH

            entries.append(DatabaseEntry(mode, name, oid))

        return cls(entries)

    @classmethod
    def from_entries(cls, entries: list[DatabaseEntry]) -> "Tree":
        return cls(sorted(entries, key=name_sort_key))

    def type(self) -> Kind:
        return Kind.TREE

    def to_bytes(self) -> bytes:
        parts = []
        for entry in self.entries:
            name = os.fsencode(entry.name)
            header = os.fsencode(entry.mode) + b" " + name + b"\x00"
            parts.append(header + oids.from_hex(entry.oid))
        return b"".join(parts)
