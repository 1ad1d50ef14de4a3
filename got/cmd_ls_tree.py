from __future__ import annotations

from got.cmd_base import Base


class LsTree(Base):
    USAGE = "got ls-tree [--name-only] <tree-ish>"

    def run(self) -> None:
        name_only = "--name-only" in self.args
        oids = [arg for arg in self.args if arg != "--name-only"]
        if len(oids) != 1:
            self.usage()

        for line in self.repo.list_tree(oids[0], name_only):
            self.println(line)
