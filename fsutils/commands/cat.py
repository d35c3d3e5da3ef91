"""fsutils cat command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ..constants import DEFAULT_ENCODING
from ..fileops import read_lines

if TYPE_CHECKING:
    from ..cli_types import CatArgs


def cmd_cat(args: CatArgs) -> None:
    """Print a file line by line.

    Lines are written back out as the bytes they were read from, so content
    that is not valid UTF-8 is printed unchanged.

    Raises:
        FsUtilsError: The file could not be read or a line was too long
    """
    for result in read_lines(args.file, args.buffer_size, DEFAULT_ENCODING):
        click.echo(result.unwrap().encode(DEFAULT_ENCODING, "surrogateescape"))
