"""fsutils replace command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ..fileops import string_replace

if TYPE_CHECKING:
    from ..cli_types import ReplaceArgs


def cmd_replace(args: ReplaceArgs) -> int:
    """Replace text on every line of a file and report how many lines changed."""
    changed = string_replace(
        args.file,
        args.old,
        args.new,
        count=args.count,
        buffer_size=args.buffer_size,
    )
    click.echo(f"{args.file}: {changed} line(s) changed")
    return changed
