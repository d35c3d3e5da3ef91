"""Shared pytest fixtures for fsutils tests."""

from __future__ import annotations

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture
def tmp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def num_tree(tmp_dir: Path) -> Path:
    """Create a tree whose directory names only order correctly when compared as numbers.

    root/
        1/a.txt
        10/c.txt
        2/x/b.txt
        file.txt
    """
    root = tmp_dir / "root"
    (root / "1").mkdir(parents=True)
    (root / "1" / "a.txt").write_text("a\n")
    (root / "10").mkdir()
    (root / "10" / "c.txt").write_text("c\n")
    (root / "2" / "x").mkdir(parents=True)
    (root / "2" / "x" / "b.txt").write_text("b\n")
    (root / "file.txt").write_text("top\n")
    return root


@pytest.fixture
def scratch_dir(tmp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the platform temp directory at an empty, test-owned directory."""
    scratch = tmp_dir / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return scratch
