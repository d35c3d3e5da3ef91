"""
fsutils - filesystem traversal and text-line utilities.

Design goals:
- Deterministic listing order (numeric directory names sort as numbers).
- Lazy, depth-first traversal that reports per-entry failures inline.
- In-place text substitution that never touches the original unless a line changed.
"""

from __future__ import annotations

from .exceptions import (
    DirectoryCycle,
    FileIOError,
    FsUtilsError,
    GlobFailure,
    LineTooLong,
    NotADirectory,
    StatFailure,
)
from .fileops import copy_file, read_lines, string_replace
from .sorting import compare_basenames, read_dir_num_sort, sort_same_dir_numerically
from .types import FileParts, LineResult, PathResult, SortMode, TraversalRequest
from .walk import (
    get_dir_list,
    get_file_list,
    get_num_sort_dir_list,
    get_num_sort_file_list,
    list_files,
    list_files_num_sort,
    walk,
)

__all__ = [
    "DirectoryCycle",
    "FileIOError",
    "FileParts",
    "FsUtilsError",
    "GlobFailure",
    "LineResult",
    "LineTooLong",
    "NotADirectory",
    "PathResult",
    "SortMode",
    "StatFailure",
    "TraversalRequest",
    "compare_basenames",
    "copy_file",
    "get_dir_list",
    "get_file_list",
    "get_num_sort_dir_list",
    "get_num_sort_file_list",
    "list_files",
    "list_files_num_sort",
    "read_dir_num_sort",
    "read_lines",
    "sort_same_dir_numerically",
    "string_replace",
    "walk",
]
