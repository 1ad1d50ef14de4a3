from __future__ import annotations

from typing import Any

from got.modes import Mode


class DatabaseEntry:
    def __init__(self, mode: str | Mode, name: str, oid: str) -> None:
        self.mode: str = str(mode)
        self.name: str = name
        self.oid: str = oid

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DatabaseEntry):
            return NotImplemented
        return (self.mode, self.name, self.oid) == (other.mode, other.name, other.oid)

    def __repr__(self) -> str:
        return f"DatabaseEntry(mode={self.mode!r}, name={self.name!r}, oid={self.oid!r})"
