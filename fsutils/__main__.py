"""Allow running as ``python -m fsutils``."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
