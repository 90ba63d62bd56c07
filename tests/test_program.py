# =============================================================================
# test_program.py - Program Text and Line Index Tests
# =============================================================================

import pytest

from tinybasic.errors import SourceLoadError, ZeroLineNumberError
from tinybasic.program import Program


SOURCE = "10 PRINT 1\n20 PRINT 2\n30 END\n"


@pytest.fixture
def program():
    return Program(SOURCE)


class TestLoading:
    """Test program construction and file loading."""

    def test_text_kept_verbatim(self, program):
        assert program.text == SOURCE

    def test_missing_final_newline_added(self):
        assert Program("10 END").text == "10 END\n"

    def test_empty_program(self):
        assert Program("").text == ""

    def test_from_file(self, tmp_path):
        path = tmp_path / "prog.bas"
        path.write_text(SOURCE)
        program = Program.from_file(path)
        assert program.text == SOURCE
        assert program.filename == str(path)

    def test_from_file_keeps_crlf(self, tmp_path):
        path = tmp_path / "crlf.bas"
        path.write_bytes(b"10 PRINT 1\r\n20 END\r\n")
        program = Program.from_file(path)
        assert program.text == "10 PRINT 1\r\n20 END\r\n"
        assert program.has_line(20)

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(SourceLoadError) as exc_info:
            Program.from_file(tmp_path / "missing.bas")
        assert exc_info.value.code == 8
        assert "Cannot load source" in str(exc_info.value)


class TestLineLookup:
    """Test find_line() and friends."""

    def test_first_line(self, program):
        assert program.find_line(10) == 0

    def test_exact_line(self, program):
        pos = program.find_line(20)
        assert pos == len("10 PRINT 1\n")
        assert program.line_number_at(pos) == 20

    def test_missing_line_finds_next(self, program):
        """A missing number resolves to the next higher line."""
        pos = program.find_line(25)
        assert program.line_number_at(pos) == 30

    def test_beyond_last_line(self, program):
        pos = program.find_line(40)
        assert pos == len(SOURCE)
        assert program.line_number_at(pos) == 0

    def test_below_first_line(self, program):
        assert program.find_line(5) == 0

    def test_zero_is_fatal(self, program):
        with pytest.raises(ZeroLineNumberError):
            program.find_line(0)

    def test_has_line(self, program):
        assert program.has_line(20)
        assert not program.has_line(25)

    def test_has_line_zero_is_fatal(self, program):
        with pytest.raises(ZeroLineNumberError):
            program.has_line(0)

    def test_line_text(self, program):
        assert program.line_text(program.find_line(20)) == "20 PRINT 2"


class TestRanges:
    """Test lines_between() used by LIST."""

    def test_inclusive_range(self, program):
        assert program.lines_between(10, 20) == "10 PRINT 1\n20 PRINT 2\n"

    def test_range_between_lines(self, program):
        assert program.lines_between(15, 25) == "20 PRINT 2\n"

    def test_range_to_end(self, program):
        assert program.lines_between(20, 999) == "20 PRINT 2\n30 END\n"

    def test_empty_range(self, program):
        assert program.lines_between(21, 29) == ""


class TestLocations:
    """Test location_of() for error reports."""

    def test_location_inside_line(self, program):
        location = program.location_of(program.find_line(20) + 3)
        assert location.line_number == 20
        assert location.text == "20 PRINT 2"
        assert str(location) == "<input>:20"

    def test_location_of_unnumbered_line(self):
        program = Program("PRINT 1\n")
        location = program.location_of(0)
        assert location.line_number is None
        assert str(location) == "<input>"
