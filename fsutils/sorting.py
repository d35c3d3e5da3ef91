"""Numeric-aware ordering of sibling paths."""

from __future__ import annotations

import functools
import os
import re

from .exceptions import GlobFailure
from .types import FileParts

# Same syntax as a plain base-10 integer literal: optional sign, ASCII digits only.
# int() alone would also accept whitespace, underscores and non-ASCII digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")

# Names outside the signed 64-bit range are not numbers; they sort as text.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def _parse_int(text: str) -> int | None:
    if _INT_RE.fullmatch(text) is None:
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def compare_basenames(a: str, b: str) -> int:
    """Compare two basenames, numerically when both are integers.

    If either name fails to parse as an integer the pair is compared
    lexicographically on the original strings. The fallback is decided per
    pair, so a mixed set is not guaranteed to be totally ordered.

    Args:
        a: First basename
        b: Second basename

    Returns:
        -1, 0 or 1
    """
    na = _parse_int(a)
    nb = _parse_int(b)
    if na is None or nb is None:
        return (a > b) - (a < b)
    return (na > nb) - (na < nb)


_basename_key = functools.cmp_to_key(compare_basenames)


def sort_same_dir_numerically(file_list: list[str], reverse: bool = False) -> list[str]:
    """Sort paths that share a parent directory by their basenames.

    Only basenames are compared, so paths from different parents are ordered
    as if they were siblings. The sort is stable; with reverse=True ties keep
    their input order.

    Example: ["d/10", "d/2", "d/1"] sorts as ["d/1", "d/2", "d/10"].
    """
    files = [FileParts(full=p, base=os.path.basename(p)) for p in file_list]
    files.sort(key=lambda fp: _basename_key(fp.base), reverse=reverse)
    return [fp.full for fp in files]


def read_dir_num_sort(dirname: str, reverse: bool = False) -> list[os.DirEntry[str]]:
    """Read one directory level, sorted numerically by entry name."""
    try:
        with os.scandir(dirname) as it:
            entries = list(it)
    except OSError as e:
        raise GlobFailure(f"cannot expand '{dirname}': {e}", path=dirname) from e
    entries.sort(key=lambda entry: _basename_key(entry.name), reverse=reverse)
    return entries
