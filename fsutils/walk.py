"""Lazy directory listing.

Every listing is a generator of PathResult. Nothing is read from disk until
the consumer asks for the first item, and each item is produced only when the
consumer asks for the next one. Recursion nests generators with ``yield from``,
so a subdirectory is fully drained before its next sibling is looked at.

Stopping early is just a matter of not pulling any more items; ``close()`` on
the generator (or dropping it) releases everything it holds.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator

from .exceptions import DirectoryCycle, GlobFailure, NotADirectory, StatFailure
from .sorting import sort_same_dir_numerically
from .types import PathResult, SortMode, TraversalRequest

logger = logging.getLogger(__name__)

_DirId = tuple[int, int]


def _dir_id(st: os.stat_result) -> _DirId:
    return (st.st_dev, st.st_ino)


def _expand(dirname: str) -> list[str]:
    """Return every entry of dirname (hidden ones included) joined to dirname.

    Entries come back in lexicographic order, the order a ``dirname/*`` glob
    yields them.
    """
    try:
        names = os.listdir(dirname)
    except OSError as e:
        raise GlobFailure(f"cannot expand '{dirname}': {e}", path=dirname) from e
    return [os.path.join(dirname, name) for name in sorted(names)]


def walk(request: TraversalRequest) -> Iterator[PathResult]:
    """Yield the entries under request.root in depth-first pre-order.

    A failure to stat or expand the root is reported as a single failure
    result and ends the sequence. A failure to stat a child is reported in
    place of that child and the walk continues with the next sibling.
    """
    logger.debug("Listing %s", request.root)
    try:
        st = os.stat(request.root)
    except OSError as e:
        yield PathResult.failure(
            StatFailure(f"cannot stat '{request.root}': {e}", path=request.root)
        )
        return
    if not stat.S_ISDIR(st.st_mode):
        yield PathResult.failure(
            NotADirectory(f"Provided dir is not a dir: '{request.root}'", path=request.root)
        )
        return
    yield from _walk_dir(request, frozenset({_dir_id(st)}))


def _walk_dir(request: TraversalRequest, ancestors: frozenset[_DirId]) -> Iterator[PathResult]:
    try:
        children = _expand(request.root)
    except GlobFailure as e:
        yield PathResult.failure(e)
        return
    if request.sort_mode is SortMode.NUMERIC:
        children = sort_same_dir_numerically(children, reverse=request.reverse)

    for child in children:
        try:
            st = os.stat(child)
        except OSError as e:
            logger.debug("Stat failed for %s: %s", child, e)
            yield PathResult.failure(StatFailure(f"cannot stat '{child}': {e}", path=child))
            continue

        if not stat.S_ISDIR(st.st_mode):
            if not request.dirs_only:
                yield PathResult.success(child)
            continue

        if request.include_dirs or request.dirs_only:
            yield PathResult.success(child)
        if not request.recursive:
            continue

        child_id = _dir_id(st)
        if child_id in ancestors:
            logger.debug("Not descending into %s: loops back to an ancestor", child)
            yield PathResult.failure(
                DirectoryCycle(f"directory cycle at '{child}'", path=child)
            )
            continue
        yield from _walk_dir(request.at(child), ancestors | {child_id})


def get_file_list(
    dirname: str, ignore_dirs: bool = False, recursive: bool = False
) -> Iterator[PathResult]:
    """Yield files (and directories unless ignore_dirs) under dirname, in directory order."""
    return walk(TraversalRequest(root=dirname, include_dirs=not ignore_dirs, recursive=recursive))


def get_num_sort_file_list(
    dirname: str, ignore_dirs: bool = False, recursive: bool = False, reverse: bool = False
) -> Iterator[PathResult]:
    """Same as get_file_list, with every directory level sorted numerically."""
    return walk(
        TraversalRequest(
            root=dirname,
            include_dirs=not ignore_dirs,
            recursive=recursive,
            sort_mode=SortMode.NUMERIC,
            reverse=reverse,
        )
    )


def get_dir_list(dirname: str, recursive: bool = True) -> Iterator[PathResult]:
    """Yield only the directories under dirname."""
    return walk(TraversalRequest(root=dirname, recursive=recursive, dirs_only=True))


def get_num_sort_dir_list(
    dirname: str, reverse: bool = False, recursive: bool = True
) -> Iterator[PathResult]:
    """Same as get_dir_list, with every directory level sorted numerically."""
    return walk(
        TraversalRequest(
            root=dirname,
            recursive=recursive,
            dirs_only=True,
            sort_mode=SortMode.NUMERIC,
            reverse=reverse,
        )
    )


def list_files(dirname: str, ignore_dirs: bool = False, recursive: bool = False) -> list[str]:
    """Return the get_file_list paths as a list.

    Raises:
        FsUtilsError: The first failure encountered (root or entry level)
    """
    return [r.unwrap() for r in get_file_list(dirname, ignore_dirs, recursive)]


def list_files_num_sort(
    dirname: str, ignore_dirs: bool = False, recursive: bool = False, reverse: bool = False
) -> list[str]:
    """Return the get_num_sort_file_list paths as a list, raising on the first failure."""
    return [r.unwrap() for r in get_num_sort_file_list(dirname, ignore_dirs, recursive, reverse)]
