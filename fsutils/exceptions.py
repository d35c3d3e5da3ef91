"""fsutils exception classes."""

from __future__ import annotations


class FsUtilsError(RuntimeError):
    """Base exception for fsutils errors."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class NotADirectory(FsUtilsError):
    """Traversal root is not a directory."""


class StatFailure(FsUtilsError):
    """Metadata lookup failed for a path.

    Non-fatal when raised for a child entry, fatal for a traversal root.
    """


class DirectoryCycle(StatFailure):
    """A directory resolves to one of its own ancestors (symlink loop)."""


class GlobFailure(FsUtilsError):
    """Expanding the entries of a directory failed."""


class FileIOError(FsUtilsError):
    """Open/read/write/flush failure while copying, reading or rewriting a file."""


class LineTooLong(FsUtilsError):
    """A line exceeded the configured buffer size."""


class CommandFailureError(FsUtilsError):
    """Command failed - error message already printed, just need to exit.

    This exception is for cases where a command has already printed
    its error messages and just needs to signal failure without
    additional output from main().
    """

    def __init__(self, rc: int = 1):
        super().__init__("")
        self.rc = rc
