from __future__ import annotations

from got.cmd_base import Base


class CatFile(Base):
    USAGE = "got cat-file -p <object>"

    def run(self) -> None:
        if len(self.args) != 2 or self.args[0] != "-p":
            self.usage()

        raw = self.repo.read_object(self.args[1])
        self.write_bytes(raw.data)
