from __future__ import annotations

from got.cmd_base import Base


class WriteTree(Base):
    USAGE = "got write-tree"

    def run(self) -> None:
        if self.args:
            self.usage()

        self.println(self.repo.build_tree(self.dir))
