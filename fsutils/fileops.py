"""File copy, line reading and in-place literal substitution."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Iterator
from pathlib import Path

from .constants import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_ENCODING,
    LINE_TERMINATOR,
    REPLACE_ALL,
    TEMP_NAME_SEPARATOR,
)
from .exceptions import FileIOError, LineTooLong
from .types import LineResult

logger = logging.getLogger(__name__)


def copy_file(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
    """Copy the bytes of src over dst and fsync dst.

    dst is created if it does not exist and truncated if it does. Its parent
    directory must already exist. A failed copy may leave dst partially
    written.

    Raises:
        FileIOError: src cannot be opened, dst cannot be created, or the copy
            or final flush fails
    """
    logger.debug("Copying %s -> %s", src, dst)
    try:
        with open(src, "rb") as fin, open(dst, "wb") as fout:
            shutil.copyfileobj(fin, fout)
            fout.flush()
            os.fsync(fout.fileno())
    except OSError as e:
        raise FileIOError(f"cannot copy '{src}' to '{dst}': {e}", path=os.fspath(dst)) from e


def read_lines(
    path: str | os.PathLike[str],
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[LineResult]:
    """Yield the lines of a file with their terminator ("\\n" or "\\r\\n") stripped.

    At most buffer_size bytes of a line are accepted. A longer line yields a
    LineTooLong failure and ends the sequence; an open or read error yields a
    FileIOError failure and ends the sequence. Undecodable bytes are carried
    through as surrogate escapes so they can be written back unchanged.

    Args:
        path: File to read
        buffer_size: Maximum line length in bytes, terminator excluded
        encoding: Text encoding of the file

    Yields:
        LineResult per line, or a single trailing failure
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    name = os.fspath(path)
    try:
        f = open(name, "rb")
    except OSError as e:
        yield LineResult.failure(FileIOError(f"Couldn't open file '{name}': {e}", path=name))
        return

    with f:
        while True:
            try:
                # Room for the longest accepted line plus "\r\n".
                raw = f.readline(buffer_size + 2)
            except OSError as e:
                yield LineResult.failure(FileIOError(f"Read error '{name}': {e}", path=name))
                return
            if not raw:
                return
            content = raw
            if content.endswith(b"\n"):
                content = content[:-1]
                if content.endswith(b"\r"):
                    content = content[:-1]
            if len(content) > buffer_size:
                yield LineResult.failure(
                    LineTooLong(f"{name}: buffer size too small ({buffer_size})", path=name)
                )
                return
            yield LineResult.success(content.decode(encoding, errors="surrogateescape"))


def string_replace(
    path: str | os.PathLike[str],
    old: str,
    new: str,
    count: int = REPLACE_ALL,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """Replace old with new on every line of a file, in place.

    The file is streamed line by line into a temporary copy. The original is
    overwritten from that copy only if at least one line changed. Every
    written line ends in "\\n", so a rewritten file gains a final newline and
    loses any "\\r\\n" terminators.

    Args:
        path: File to rewrite
        old: Literal text to search for
        new: Replacement text
        count: Maximum replacements per line; <= 0 means unlimited
        buffer_size: Maximum line length in bytes
        encoding: Text encoding of the file

    Returns:
        Number of lines changed

    Raises:
        FileIOError: The file or the temporary copy could not be read or written
        LineTooLong: A line exceeded buffer_size; the original is untouched
    """
    name = os.fspath(path)
    if count <= 0:
        count = REPLACE_ALL
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=os.path.basename(name) + TEMP_NAME_SEPARATOR)
    except OSError as e:
        raise FileIOError(f"cannot create temp file for '{name}': {e}", path=name) from e
    logger.debug("Rewriting %s via %s", name, tmp_name)

    lines_changed = 0
    try:
        try:
            with os.fdopen(fd, "w", encoding=encoding, errors="surrogateescape", newline="") as tmp:
                for result in read_lines(name, buffer_size, encoding):
                    if result.error is not None:
                        raise result.error
                    line = result.line.replace(old, new, count)
                    if line != result.line:
                        lines_changed += 1
                    tmp.write(line + LINE_TERMINATOR)
        except OSError as e:
            raise FileIOError(f"cannot write temp file '{tmp_name}': {e}", path=tmp_name) from e

        if lines_changed > 0:
            try:
                copy_file(tmp_name, name)
            except FileIOError as e:
                raise FileIOError(f"Couldn't update file: {name}. {e}", path=name) from e
            logger.debug("Updated %s (%d line(s) changed)", name, lines_changed)
        else:
            logger.debug("No changes in %s, leaving it untouched", name)
    finally:
        Path(tmp_name).unlink(missing_ok=True)
    return lines_changed
