from __future__ import annotations

import os
import random
import string
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Optional, Type


class TempFile:
    """
    A uniquely named scratch file beside its final location. Data is written
    in one call and published with a rename, so readers see either no file or
    the complete one. Leaving the ``with`` block without ``move`` removes it.
    """

    TEMP_CHARS: str = string.ascii_lowercase + string.ascii_uppercase + string.digits
    MODE: int = 0o644

    def __init__(self, dirname: Path, prefix: str) -> None:
        self.dirname: Path = dirname
        self.path: Path = self.dirname / self.generate_temp_name(prefix)
        self.file: BinaryIO | None = None

    def __enter__(self) -> "TempFile":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.discard()

    def generate_temp_name(self, prefix: str) -> str:
        return prefix + "".join(random.choices(self.TEMP_CHARS, k=6))

    def write(self, data: bytes) -> None:
        if self.file is None:
            self.open_file()
        assert self.file is not None
        self.file.write(data)

    def move(self, name: str) -> Path:
        assert self.file is not None
        self.file.close()
        self.file = None

        target = self.dirname / name
        os.replace(self.path, target)
        return target

    def discard(self) -> None:
        if self.file is not None:
            self.file.close()
            self.file = None
        self.path.unlink(missing_ok=True)

    def open_file(self) -> None:
        flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL

        try:
            fd = os.open(self.path, flags, self.MODE)
        except FileNotFoundError:
            self.dirname.mkdir(exist_ok=True, parents=True)
            fd = os.open(self.path, flags, self.MODE)

        self.file = os.fdopen(fd, "wb")
