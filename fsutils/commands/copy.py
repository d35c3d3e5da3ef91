"""fsutils copy command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..fileops import copy_file

if TYPE_CHECKING:
    from ..cli_types import CopyArgs


def cmd_copy(args: CopyArgs) -> None:
    """Copy a file, replacing the destination's contents."""
    copy_file(args.src, args.dst)
