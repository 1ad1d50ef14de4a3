from __future__ import annotations

from pathlib import Path

from got import oid as oids
from got.db_loose import Loose, Raw
from got.modes import Kind


class Database:
    def __init__(self, path: Path) -> None:
        self.path: Path = path
        self.backend = Loose(self.path)

    def has(self, oid: str) -> bool:
        return self.backend.has(oids.validate(oid))

    def load(self, oid: str) -> Raw:
        return self.backend.load_raw(oids.validate(oid))

    def store(self, kind: Kind, payload: bytes) -> str:
        content = self.serialize_object(kind, payload)
        oid = self.hash_content(content)

        self.backend.write_object(oid, content)
        return oid

    def hash_object(self, kind: Kind, payload: bytes) -> str:
        return self.hash_content(self.serialize_object(kind, payload))

    def serialize_object(self, kind: Kind, payload: bytes) -> bytes:
        header = f"{kind.value} {len(payload)}".encode("ascii") + b"\x00"

        return header + payload

    def hash_content(self, content: bytes) -> str:
        return oids.hash_content(content)
