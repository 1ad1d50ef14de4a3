from __future__ import annotations

from got.cmd_base import Base
from got.modes import Kind


class HashObject(Base):
    USAGE = "got hash-object [-w] <file>"

    def run(self) -> None:
        write = "-w" in self.args
        paths = [arg for arg in self.args if arg != "-w"]
        if len(paths) != 1:
            self.usage()

        workspace = self.repo.workspace(self.dir)
        data = workspace.read_file(self.expanded_path(paths[0]))

        if write:
            oid = self.repo.store_object(Kind.BLOB, data)
        else:
            oid = self.repo.database.hash_object(Kind.BLOB, data)

        self.println(oid)
