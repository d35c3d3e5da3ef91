"""fsutils command implementations."""

from __future__ import annotations

from .cat import cmd_cat
from .copy import cmd_copy
from .listing import cmd_dirs, cmd_ls
from .replace import cmd_replace

__all__ = [
    "cmd_cat",
    "cmd_copy",
    "cmd_dirs",
    "cmd_ls",
    "cmd_replace",
]
