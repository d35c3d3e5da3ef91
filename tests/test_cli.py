"""Tests for fsutils/cli.py - CLI integration tests using Click's CliRunner."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner
from fsutils.cli import cli, main, setup_logging
from fsutils.exceptions import CommandFailureError


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo the handlers each CLI invocation attaches to the fsutils logger."""
    logger = logging.getLogger("fsutils")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in original_handlers:
        logger.addHandler(handler)
    logger.setLevel(original_level)


def out_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line]


# macOS and Windows filesystems refuse file names that are not valid UTF-8.
needs_raw_names = pytest.mark.skipif(
    sys.platform != "linux", reason="filesystem rejects non-UTF-8 names"
)


class TestCliHelp:
    """Tests for CLI help output."""

    def test_main_help(self, runner: CliRunner):
        """Main --help shows all commands."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for cmd in ["ls", "dirs", "cp", "replace", "cat"]:
            assert cmd in result.output

    def test_short_help_flag(self, runner: CliRunner):
        result = runner.invoke(cli, ["-h"])
        assert result.exit_code == 0
        assert "fsutils" in result.output

    def test_ls_help(self, runner: CliRunner):
        result = runner.invoke(cli, ["ls", "--help"])
        assert result.exit_code == 0
        assert "--recursive" in result.output
        assert "--ignore-dirs" in result.output
        assert "--num-sort" in result.output
        assert "--reverse" in result.output

    def test_replace_help(self, runner: CliRunner):
        result = runner.invoke(cli, ["replace", "--help"])
        assert result.exit_code == 0
        assert "--count" in result.output
        assert "--buffer-size" in result.output


class TestLsCommand:
    """Tests for the ls command."""

    def test_lexicographic(self, runner: CliRunner, num_tree: Path):
        result = runner.invoke(cli, ["ls", str(num_tree)])
        assert result.exit_code == 0
        assert out_lines(result.output) == [
            os.path.join(str(num_tree), name) for name in ["1", "10", "2", "file.txt"]
        ]

    def test_num_sort(self, runner: CliRunner, num_tree: Path):
        result = runner.invoke(cli, ["ls", str(num_tree), "--num-sort"])
        assert result.exit_code == 0
        assert out_lines(result.output) == [
            os.path.join(str(num_tree), name) for name in ["1", "2", "10", "file.txt"]
        ]

    def test_recursive_ignore_dirs_reverse(self, runner: CliRunner, num_tree: Path):
        result = runner.invoke(
            cli, ["ls", str(num_tree), "-r", "--ignore-dirs", "--num-sort", "--reverse"]
        )
        assert result.exit_code == 0
        assert out_lines(result.output) == [
            os.path.join(str(num_tree), *p)
            for p in [("file.txt",), ("10", "c.txt"), ("2", "x", "b.txt"), ("1", "a.txt")]
        ]

    def test_reverse_requires_num_sort(self, runner: CliRunner, num_tree: Path):
        result = runner.invoke(cli, ["ls", str(num_tree), "--reverse"])
        assert result.exit_code != 0
        assert "--num-sort" in result.output

    def test_missing_dir_fails(self, runner: CliRunner, tmp_dir: Path):
        result = runner.invoke(cli, ["ls", str(tmp_dir / "missing")])
        assert result.exit_code == 1
        assert isinstance(result.exception, CommandFailureError)
        assert "ERROR:" in result.output

    @needs_raw_names
    def test_undecodable_entry_name(self, runner: CliRunner, tmp_dir: Path):
        """A name that is not valid UTF-8 is printed as its raw bytes."""
        raw_name = os.path.join(os.fsencode(str(tmp_dir)), b"\xff")
        with open(raw_name, "wb"):
            pass
        result = runner.invoke(cli, ["ls", str(tmp_dir)])
        assert result.exit_code == 0
        assert result.stdout_bytes == raw_name + b"\n"


class TestDirsCommand:
    """Tests for the dirs command."""

    def test_dirs(self, runner: CliRunner, num_tree: Path):
        result = runner.invoke(cli, ["dirs", str(num_tree), "--num-sort"])
        assert result.exit_code == 0
        assert out_lines(result.output) == [
            os.path.join(str(num_tree), *p) for p in [("1",), ("2",), ("2", "x"), ("10",)]
        ]

    def test_not_a_dir(self, runner: CliRunner, num_tree: Path):
        result = runner.invoke(cli, ["dirs", str(num_tree / "file.txt")])
        assert result.exit_code == 1
        assert "not a dir" in result.output

    @needs_raw_names
    def test_undecodable_dir_name(self, runner: CliRunner, tmp_dir: Path):
        raw_dir = os.path.join(os.fsencode(str(tmp_dir)), b"caf\xe9")
        os.mkdir(raw_dir)
        result = runner.invoke(cli, ["dirs", str(tmp_dir)])
        assert result.exit_code == 0
        assert result.stdout_bytes == raw_dir + b"\n"


class TestCpCommand:
    """Tests for the cp command."""

    def test_copy(self, runner: CliRunner, tmp_dir: Path):
        src = tmp_dir / "src"
        src.write_text("payload")
        dst = tmp_dir / "dst"
        result = runner.invoke(cli, ["cp", str(src), str(dst)])
        assert result.exit_code == 0
        assert dst.read_text() == "payload"

    def test_copy_missing_source(self, runner: CliRunner, tmp_dir: Path):
        result = runner.invoke(cli, ["cp", str(tmp_dir / "missing"), str(tmp_dir / "dst")])
        assert result.exit_code == 1
        assert "ERROR:" in result.output


class TestReplaceCommand:
    """Tests for the replace command."""

    def test_replace(self, runner: CliRunner, tmp_dir: Path, scratch_dir: Path):
        path = tmp_dir / "f.txt"
        path.write_text("foo foo\nbar\n")
        result = runner.invoke(cli, ["replace", str(path), "foo", "baz", "-n", "1"])
        assert result.exit_code == 0
        assert "1 line(s) changed" in result.output
        assert path.read_text() == "baz foo\nbar\n"

    def test_replace_no_change(self, runner: CliRunner, tmp_dir: Path, scratch_dir: Path):
        path = tmp_dir / "f.txt"
        path.write_text("bar\n")
        result = runner.invoke(cli, ["replace", str(path), "foo", "baz"])
        assert result.exit_code == 0
        assert "0 line(s) changed" in result.output

    def test_replace_empty_search_rejected(self, runner: CliRunner, tmp_dir: Path):
        path = tmp_dir / "f.txt"
        path.write_text("bar\n")
        result = runner.invoke(cli, ["replace", str(path), "", "baz"])
        assert result.exit_code != 0

    def test_replace_line_too_long(self, runner: CliRunner, tmp_dir: Path, scratch_dir: Path):
        path = tmp_dir / "f.txt"
        path.write_text("x" * 100 + "\n")
        result = runner.invoke(
            cli, ["replace", str(path), "x", "y", "--buffer-size", "10"]
        )
        assert result.exit_code == 1
        assert "buffer size too small" in result.output
        assert path.read_text() == "x" * 100 + "\n"


class TestCatCommand:
    """Tests for the cat command."""

    def test_cat(self, runner: CliRunner, tmp_dir: Path):
        path = tmp_dir / "f.txt"
        path.write_bytes(b"one\r\ntwo\nthree")
        result = runner.invoke(cli, ["cat", str(path)])
        assert result.exit_code == 0
        assert result.output == "one\ntwo\nthree\n"

    def test_cat_undecodable_bytes(self, runner: CliRunner, tmp_dir: Path):
        """Bytes that are not valid UTF-8 come out exactly as they went in."""
        path = tmp_dir / "f.txt"
        path.write_bytes(b"\xffold\nplain\n")
        result = runner.invoke(cli, ["cat", str(path)])
        assert result.exit_code == 0
        assert result.stdout_bytes == b"\xffold\nplain\n"

    def test_cat_missing(self, runner: CliRunner, tmp_dir: Path):
        result = runner.invoke(cli, ["cat", str(tmp_dir / "missing")])
        assert result.exit_code == 1
        assert "Couldn't open file" in result.output


class TestMain:
    """Tests for main() exit code mapping."""

    def test_command_failure_exit_code(self, mocker):
        mocker.patch("fsutils.cli.cli", side_effect=CommandFailureError(rc=3))
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 3

    def test_keyboard_interrupt(self, mocker, capsys):
        mocker.patch("fsutils.cli.cli", side_effect=KeyboardInterrupt)
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 130
        assert "Interrupted" in capsys.readouterr().err


class TestCliLogging:
    """Tests for logging setup behavior."""

    def test_setup_logging_no_duplicate_handlers(self):
        """Repeated setup_logging calls do not add duplicate stderr handlers."""
        logger = logging.getLogger("fsutils")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

        setup_logging(debug=False)
        setup_logging(debug=True)

        stderr_handlers = [
            h
            for h in logger.handlers
            if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        ]
        assert len(stderr_handlers) == 1

    def test_debug_level(self):
        setup_logging(debug=True)
        assert logging.getLogger("fsutils").level == logging.DEBUG
        setup_logging(debug=False)
        assert logging.getLogger("fsutils").level == logging.WARNING

    def test_debug_flag_logs_traversal(self, runner: CliRunner, num_tree: Path):
        result = runner.invoke(cli, ["--debug", "ls", str(num_tree)])
        assert result.exit_code == 0
        assert "Listing" in result.output
