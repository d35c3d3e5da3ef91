"""Type definitions for CLI command arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ListArgs:
    """Arguments for ls command."""

    dirname: str
    ignore_dirs: bool
    recursive: bool
    num_sort: bool
    reverse: bool


@dataclass
class DirListArgs:
    """Arguments for dirs command."""

    dirname: str
    num_sort: bool
    reverse: bool


@dataclass
class CopyArgs:
    """Arguments for cp command."""

    src: str
    dst: str


@dataclass
class ReplaceArgs:
    """Arguments for replace command."""

    file: str
    old: str
    new: str
    count: int
    buffer_size: int


@dataclass
class CatArgs:
    """Arguments for cat command."""

    file: str
    buffer_size: int
