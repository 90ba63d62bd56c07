"""
Tests for tbasic - Command-Line Interface
=========================================

These tests run programs through the Click command and check output
and exit codes.
"""

import pytest
from click.testing import CliRunner

from tinybasic import __version__
from tinybasic.cli.tbasic import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_program(tmp_path):
    """Fixture: write program text to a file and return its path."""
    def writer(source: str, name: str = "prog.bas") -> str:
        path = tmp_path / name
        path.write_text(source)
        return str(path)
    return writer


class TestCLIBasics:
    """Tests for help, version and argument handling."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Run a Tiny BASIC program" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_argument(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 8
        assert "Cannot load source" in result.output


class TestCLIExecution:
    """Tests running programs end to end."""

    def test_run_program(self, runner, write_program):
        path = write_program("10 LET A=3\n20 PRINT A\n30 END\n")
        result = runner.invoke(main, [path])
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_input_from_stdin(self, runner, write_program):
        path = write_program("10 INPUT A\n20 PRINT A+1\n30 END\n")
        result = runner.invoke(main, [path, "--no-flow-control"], input="41\n")
        assert result.exit_code == 0
        assert "?42" in result.output

    def test_crlf_source_listed_verbatim(self, runner, tmp_path):
        path = tmp_path / "crlf.bas"
        path.write_bytes(b"10 LIST\r\n20 END\r\n")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == 0
        assert result.stdout_bytes == b"10 LIST\r\n20 END\r\n"

    def test_seed_is_repeatable(self, runner, write_program):
        path = write_program("10 PRINT RND(1000);RND(1000)\n20 END\n")
        first = runner.invoke(main, [path, "--seed", "3"])
        second = runner.invoke(main, [path, "--seed", "3"])
        assert first.exit_code == 0
        assert first.output == second.output

    def test_trace(self, runner, write_program):
        path = write_program("10 A=1\n20 END\n")
        result = runner.invoke(main, [path, "--trace"])
        assert result.exit_code == 0
        assert "TRACE: A=1" in result.output
        assert "TRACE: END" in result.output


class TestCLIErrors:
    """Fatal conditions exit with their category code."""

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.bas")])
        assert result.exit_code == 8
        assert "8: " in result.output
        assert "Cannot load source" in result.output

    def test_no_such_line(self, runner, write_program):
        path = write_program("10 GOTO 25\n20 END\n30 END\n")
        result = runner.invoke(main, [path])
        assert result.exit_code == 37
        assert "No line to GO TO" in result.output

    def test_return_without_gosub(self, runner, write_program):
        path = write_program("10 RETURN\n")
        result = runner.invoke(main, [path])
        assert result.exit_code == 133

    def test_output_before_error_is_kept(self, runner, write_program):
        path = write_program("10 PRINT 1\n20 PRINT RND(0)\n")
        result = runner.invoke(main, [path])
        assert result.exit_code == 259
        assert result.output.startswith("1")
