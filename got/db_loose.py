from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from got import compression
from got.errors import CorruptObject, IOFailure, ObjectNotFound
from got.modes import Kind
from got.temp_file import TempFile

log = logging.getLogger(__name__)


class Raw:
    def __init__(self, kind: Kind, size: int, data: bytes) -> None:
        self.kind = kind
        self.size = size
        self.data = data

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Raw):
            return NotImplemented
        return (self.kind, self.size, self.data) == (other.kind, other.size, other.data)

    def __repr__(self) -> str:
        return f"Raw(kind={self.kind!r}, size={self.size!r}, data={self.data!r})"


class Loose:
    def __init__(self, path: Path) -> None:
        self.path = path

    def object_path(self, oid: str) -> Path:
        return self.path / oid[:2] / oid[2:]

    def has(self, oid: str) -> bool:
        return self.object_path(oid).exists()

    def load_raw(self, oid: str) -> Raw:
        path = self.object_path(oid)

        try:
            with open(path, "rb") as f:
                file_data = f.read()
        except FileNotFoundError:
            raise ObjectNotFound(f"object {oid} not found")
        except OSError as e:
            raise IOFailure(f"unable to read {path}: {e.strerror}") from e

        return self.parse_object(oid, compression.decompress(file_data))

    def write_object(self, oid: str, content: bytes) -> None:
        object_path = self.object_path(oid)
        if object_path.exists():
            log.debug("object %s already stored", oid)
            return

        try:
            with TempFile(object_path.parent, "tmp_obj_") as file:
                file.write(compression.compress(content))
                file.move(object_path.name)
        except OSError as e:
            raise IOFailure(f"unable to write object {oid}: {e.strerror}") from e

        log.debug("wrote object %s (%d bytes)", oid, len(content))

    def parse_object(self, oid: str, data: bytes) -> Raw:
        null_pos = data.find(b"\0")
        if null_pos == -1:
            raise CorruptObject(f"object {oid} has no header terminator")

        header = data[:null_pos]
        space_pos = header.find(b" ")
        if space_pos == -1:
            raise CorruptObject(f"object {oid} has a malformed header")

        type_ = header[:space_pos].decode("ascii", errors="replace")
        try:
            kind = Kind(type_)
        except ValueError:
            raise CorruptObject(f"object {oid} has unknown type {type_!r}")

        size_field = header[space_pos + 1 :]
        if not size_field.isdigit():
            raise CorruptObject(f"object {oid} has a malformed length")
        size = int(size_field)

        payload = data[null_pos + 1 :]
        if size != len(payload):
            log.warning(
                "object %s declares %d bytes but holds %d", oid, size, len(payload)
            )

        return Raw(kind, size, payload)
