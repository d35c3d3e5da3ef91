"""fsutils constants."""

from __future__ import annotations

# Line reading
DEFAULT_BUFFER_SIZE = 4096  # max line length in bytes, terminator excluded
LINE_TERMINATOR = "\n"
DEFAULT_ENCODING = "utf-8"  # undecodable bytes are kept as surrogate escapes

# Line rewriting
REPLACE_ALL = -1  # any count <= 0 means unlimited
TEMP_NAME_SEPARATOR = "-"  # temp file prefix is "<basename>-"
