from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from got.cmd_base import Base
from got.command import Command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["got", cmd_name, *args]

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument(
    "path", type=click.Path(file_okay=False, path_type=Path), required=False
)
def init(path: Path | None) -> None:
    """Create an empty got repository or reinitialize an existing one."""
    run_cmd("init", *(str(path),) if path is not None else ())


@cli.command(name="cat-file")
@click.option(
    "-p",
    "pretty",
    is_flag=True,
    help="Pretty-print the contents of <object>.",
)
@click.argument("object_id", metavar="<object>")
def cat_file(pretty: bool, object_id: str) -> None:
    """Provide the content of a repository object."""
    if not pretty:
        raise click.UsageError("cat-file requires -p.")

    run_cmd("cat-file", "-p", object_id)


@cli.command(name="hash-object")
@click.option(
    "-w",
    "write",
    is_flag=True,
    help="Actually write the object into the object database.",
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def hash_object(write: bool, file: Path) -> None:
    """Compute the object ID of a file and optionally store it as a blob."""
    run_cmd("hash-object", *(("-w",) if write else ()), str(file))


@cli.command(name="ls-tree")
@click.option(
    "--name-only",
    "name_only",
    is_flag=True,
    help="List only filenames, one per line.",
)
@click.argument("tree_id", metavar="<tree-ish>")
def ls_tree(name_only: bool, tree_id: str) -> None:
    """List the contents of a tree object."""
    run_cmd("ls-tree", *(("--name-only",) if name_only else ()), tree_id)


@cli.command(name="write-tree")
def write_tree() -> None:
    """Create a tree object from the current directory."""
    run_cmd("write-tree")


if __name__ == "__main__":
    cli()
