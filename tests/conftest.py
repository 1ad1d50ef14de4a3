import shutil
from io import StringIO
from pathlib import Path
from typing import (
    Callable,
    Generator,
    Mapping,
    Protocol,
    TypeAlias,
    cast,
)

import pytest

from got.cmd_base import Base
from got.command import Command
from got.database import Database
from got.repository import Repository

GotCmdResult: TypeAlias = tuple[Base, StringIO, StringIO]

WriteFile: TypeAlias = Callable[[str, str | bytes], None]
Mkdir: TypeAlias = Callable[[str], None]
MakeExecutable: TypeAlias = Callable[[str], None]
MakeUnreadable: TypeAlias = Callable[[str], None]

HELLO_OID = "ce013625030ba8dba906f756967f9e9ca394464a"
EMPTY_BLOB_OID = "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"
EMPTY_TREE_OID = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


class GotCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> "GotCmdResult": ...


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    return tmp_path / "test_repo"


@pytest.fixture(autouse=True)
def setup_and_teardown(repo_path: Path) -> Generator[None, None, None]:
    Command.execute(repo_path, {}, ["got", "init"], StringIO(), StringIO(), StringIO())
    yield
    shutil.rmtree(repo_path, ignore_errors=True)


@pytest.fixture
def repo(repo_path: Path) -> Repository:
    return Repository(repo_path / ".git")


@pytest.fixture
def database(repo: Repository) -> Database:
    return repo.database


@pytest.fixture
def write_file(repo_path: Path) -> WriteFile:
    def _write_file(name: str, contents: str | bytes) -> None:
        path = repo_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(contents, str):
            contents = contents.encode("utf-8")
        with open(path, "wb") as f:
            f.write(contents)

    return _write_file


@pytest.fixture
def mkdir(repo_path: Path) -> Mkdir:
    def _mkdir(name: str) -> None:
        path = repo_path / name
        path.mkdir(parents=True, exist_ok=True)

    return _mkdir


@pytest.fixture
def make_executable(repo_path: Path) -> MakeExecutable:
    def _make_executable(name: str) -> None:
        path = repo_path / name
        path.chmod(0o755)

    return _make_executable


@pytest.fixture
def make_unreadable(repo_path: Path) -> MakeUnreadable:
    def _make_unreadable(name: str) -> None:
        path = repo_path / name
        path.chmod(0o200)

    return _make_unreadable


@pytest.fixture
def got_cmd(repo_path: Path) -> GotCmd:
    def _got_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> GotCmdResult:
        env = env or {}
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = StringIO()
        cmd = Command.execute(
            repo_path,
            cast(dict[str, str], env),
            ["got"] + list(argv),
            stdin,
            stdout,
            stderr,
        )
        return cmd, stdout, stderr

    return _got_cmd
