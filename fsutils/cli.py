"""fsutils CLI using Click."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version

import click

from .cli_types import CatArgs, CopyArgs, DirListArgs, ListArgs, ReplaceArgs
from .commands import cmd_cat, cmd_copy, cmd_dirs, cmd_ls, cmd_replace
from .constants import DEFAULT_BUFFER_SIZE, REPLACE_ALL
from .exceptions import CommandFailureError, FsUtilsError

# Module logger
logger = logging.getLogger("fsutils")


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


def sort_options(func):
    """Decorator to add numeric sort options to listing commands."""
    func = click.option(
        "--reverse",
        is_flag=True,
        help="Reverse the numeric order (requires --num-sort).",
    )(func)
    func = click.option(
        "--num-sort",
        is_flag=True,
        help="Sort each directory level numerically (1, 2, 10 rather than 1, 10, 2).",
    )(func)
    return func


def buffer_size_option(func):
    """Decorator to add the --buffer-size option."""
    return click.option(
        "--buffer-size",
        type=click.IntRange(min=1),
        default=DEFAULT_BUFFER_SIZE,
        show_default=True,
        help="Maximum line length in bytes.",
    )(func)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version("fsutils"), prog_name="fsutils")
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """fsutils: numerically sorted directory listings and in-place text replacement."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    setup_logging(debug=debug)


@cli.command("ls")
@click.argument("dirname", metavar="DIR")
@click.option(
    "--recursive",
    "-r",
    is_flag=True,
    help="Descend into subdirectories (depth-first).",
)
@click.option(
    "--ignore-dirs",
    is_flag=True,
    help="Do not print directory paths, only files.",
)
@sort_options
def ls(dirname: str, recursive: bool, ignore_dirs: bool, num_sort: bool, reverse: bool):
    """List the entries of DIR.

    Entries that cannot be read are reported on stderr and the listing
    continues; the exit code is 1 if any were reported.
    """
    if reverse and not num_sort:
        raise click.UsageError("--reverse requires --num-sort")

    args = ListArgs(
        dirname=dirname,
        ignore_dirs=ignore_dirs,
        recursive=recursive,
        num_sort=num_sort,
        reverse=reverse,
    )
    cmd_ls(args)


@cli.command("dirs")
@click.argument("dirname", metavar="DIR")
@sort_options
def dirs(dirname: str, num_sort: bool, reverse: bool):
    """List every directory under DIR, recursively."""
    if reverse and not num_sort:
        raise click.UsageError("--reverse requires --num-sort")

    args = DirListArgs(dirname=dirname, num_sort=num_sort, reverse=reverse)
    cmd_dirs(args)


@cli.command("cp")
@click.argument("src", type=click.Path(dir_okay=False))
@click.argument("dst", type=click.Path(dir_okay=False))
def cp(src: str, dst: str):
    """Copy SRC to DST, replacing DST's contents."""
    args = CopyArgs(src=src, dst=dst)
    try:
        cmd_copy(args)
    except FsUtilsError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


@cli.command("replace")
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("old")
@click.argument("new")
@click.option(
    "--count",
    "-n",
    type=int,
    default=REPLACE_ALL,
    show_default=True,
    help="Maximum replacements per line (<= 0 replaces all).",
)
@buffer_size_option
def replace(file: str, old: str, new: str, count: int, buffer_size: int):
    """Replace OLD with NEW on every line of FILE.

    FILE is only rewritten when at least one line changes.
    """
    if not old:
        raise click.UsageError("OLD must not be empty")

    args = ReplaceArgs(file=file, old=old, new=new, count=count, buffer_size=buffer_size)
    try:
        cmd_replace(args)
    except FsUtilsError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


@cli.command("cat")
@click.argument("file", type=click.Path(dir_okay=False))
@buffer_size_option
def cat(file: str, buffer_size: int):
    """Print FILE line by line."""
    args = CatArgs(file=file, buffer_size=buffer_size)
    try:
        cmd_cat(args)
    except FsUtilsError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except CommandFailureError as e:
        # Command already printed its error message, just exit
        sys.exit(e.rc)
    except FsUtilsError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(2)
    except KeyboardInterrupt:
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(130)
