from __future__ import annotations

import enum
from typing import Optional


class Kind(enum.Enum):
    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"

    def __str__(self) -> str:
        return self.value


class Mode(enum.Enum):
    TREE = "40000"
    REGULAR = "100644"
    EXECUTABLE = "100755"
    SYMLINK = "120000"
    GITLINK = "160000"

    def __str__(self) -> str:
        return self.value


# git writes tree modes without the leading zero but some tools pad it
MODE_KINDS: dict[str, Kind] = {
    "40000": Kind.TREE,
    "040000": Kind.TREE,
    "100644": Kind.BLOB,
    "100755": Kind.BLOB,
    "120000": Kind.BLOB,
    "160000": Kind.COMMIT,
}


def kind_for_mode(mode: str) -> Optional[Kind]:
    return MODE_KINDS.get(mode)


def type_label(mode: str) -> str:
    kind = kind_for_mode(mode)
    return kind.value if kind is not None else ""
