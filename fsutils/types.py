"""Result and request types shared by traversal and line-reading operations."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .exceptions import FsUtilsError


class SortMode(enum.Enum):
    """Ordering applied to each directory level."""

    NONE = "none"
    NUMERIC = "numeric"


@dataclass(frozen=True)
class PathResult:
    """One emission of a traversal: either a path or the failure that replaced it."""

    path: str | None = None
    error: FsUtilsError | None = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.error is None):
            raise ValueError("PathResult requires exactly one of path or error")

    @classmethod
    def success(cls, path: str) -> PathResult:
        return cls(path=path)

    @classmethod
    def failure(cls, error: FsUtilsError) -> PathResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the path, or raise the carried error."""
        if self.error is not None:
            raise self.error
        assert self.path is not None
        return self.path


@dataclass(frozen=True)
class LineResult:
    """One emission of the line reader: either a line (terminator stripped) or a failure."""

    line: str | None = None
    error: FsUtilsError | None = None

    def __post_init__(self) -> None:
        if (self.line is None) == (self.error is None):
            raise ValueError("LineResult requires exactly one of line or error")

    @classmethod
    def success(cls, line: str) -> LineResult:
        return cls(line=line)

    @classmethod
    def failure(cls, error: FsUtilsError) -> LineResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        assert self.line is not None
        return self.line


@dataclass(frozen=True)
class FileParts:
    """Full path paired with its basename, so sorting derives the basename once."""

    full: str
    base: str


@dataclass(frozen=True)
class TraversalRequest:
    """Parameters for a single traversal call.

    Attributes:
        root: Directory to list
        include_dirs: Emit directory paths (ignored when dirs_only is set)
        recursive: Descend into child directories, depth-first pre-order
        dirs_only: Emit directories only, never regular files
        sort_mode: Ordering applied to each directory level
        reverse: Reverse the numeric ordering
    """

    root: str
    include_dirs: bool = True
    recursive: bool = False
    dirs_only: bool = False
    sort_mode: SortMode = SortMode.NONE
    reverse: bool = False

    def at(self, root: str) -> TraversalRequest:
        """Return the same request rooted at a different directory."""
        return TraversalRequest(
            root=root,
            include_dirs=self.include_dirs,
            recursive=self.recursive,
            dirs_only=self.dirs_only,
            sort_mode=self.sort_mode,
            reverse=self.reverse,
        )
