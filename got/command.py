from __future__ import annotations

from pathlib import Path
from typing import (
    MutableMapping,
    TextIO,
    Type,
)

from got.cmd_base import Base
from got.cmd_cat_file import CatFile
from got.cmd_hash_object import HashObject
from got.cmd_init import Init
from got.cmd_ls_tree import LsTree
from got.cmd_write_tree import WriteTree


class Command:
    class Unknown(Exception):
        pass

    COMMANDS: dict[str, Type[Base]] = {
        "init": Init,
        "cat-file": CatFile,
        "hash-object": HashObject,
        "ls-tree": LsTree,
        "write-tree": WriteTree,
    }

    @staticmethod
    def execute(
        _dir: Path,
        env: MutableMapping[str, str],
        argv: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ) -> Base:
        from got.setup_logging import setup_logging

        setup_logging(
            level=env.get("GOT_LOG_LEVEL", "WARNING"),
            log_file=env.get("GOT_LOG_FILE"),
        )

        name = argv[1]
        args = argv[2:]

        if name not in Command.COMMANDS:
            raise Command.Unknown(f"{name} is not a got command")

        cmd_class = Command.COMMANDS[name]
        cmd: Base = cmd_class(_dir, env, args, stdin, stdout, stderr)
        cmd.execute()

        return cmd
