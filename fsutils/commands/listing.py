"""fsutils listing commands."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import TYPE_CHECKING

import click

from ..exceptions import CommandFailureError
from ..walk import get_dir_list, get_file_list, get_num_sort_dir_list, get_num_sort_file_list

if TYPE_CHECKING:
    from ..cli_types import DirListArgs, ListArgs
    from ..types import PathResult


def echo_results(results: Iterable[PathResult]) -> int:
    """Print each path to stdout and each failure to stderr.

    Returns:
        Number of failures printed
    """
    failures = 0
    for result in results:
        if result.error is not None:
            failures += 1
            click.echo(f"ERROR: {result.error}", err=True)
        else:
            # Paths go out as raw bytes; names need not be valid UTF-8.
            click.echo(os.fsencode(result.path))
    return failures


def cmd_ls(args: ListArgs) -> None:
    """List files (and directories unless ignored) under a directory."""
    if args.num_sort:
        results = get_num_sort_file_list(
            args.dirname,
            ignore_dirs=args.ignore_dirs,
            recursive=args.recursive,
            reverse=args.reverse,
        )
    else:
        results = get_file_list(args.dirname, ignore_dirs=args.ignore_dirs, recursive=args.recursive)
    if echo_results(results):
        raise CommandFailureError(rc=1)


def cmd_dirs(args: DirListArgs) -> None:
    """List every directory under a directory."""
    if args.num_sort:
        results = get_num_sort_dir_list(args.dirname, reverse=args.reverse)
    else:
        results = get_dir_list(args.dirname)
    if echo_results(results):
        raise CommandFailureError(rc=1)
