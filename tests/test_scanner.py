# =============================================================================
# test_scanner.py - Scanner Unit Tests
# =============================================================================
# Tests for the cursor primitives the interpreter reads the program with.
#
# Test coverage includes:
#   - Tolerant keyword matching (spaces inside keywords)
#   - Space and target skipping, end-of-buffer behaviour
#   - atoi-style line number parsing
# =============================================================================

import pytest

from tinybasic.scanner import Scanner, keyword_match


# =============================================================================
# Keyword Matching Tests
# =============================================================================

class TestKeywordMatch:
    """Test keyword_match() against program text."""

    def test_exact_keyword(self):
        """Keyword followed by its argument consumes only the keyword."""
        assert keyword_match("PRINT", "PRINT 5") == 5

    def test_spaces_inside_keyword(self):
        """Spaces between keyword letters are skipped and counted."""
        assert keyword_match("GOTO", "G O T O 10") == 7
        assert keyword_match("GOTO", "GO TO 10") == 5

    def test_mismatch(self):
        """Different keyword returns None."""
        assert keyword_match("GOTO", "GOSUB 10") is None

    def test_text_shorter_than_keyword(self):
        """Text ending mid-keyword does not match."""
        assert keyword_match("PRINT", "PR") is None

    def test_case_sensitive(self):
        """Keywords are uppercase only."""
        assert keyword_match("LET", "let A=1") is None

    def test_empty_pattern_matches_anything(self):
        """The empty keyword matches without consuming text."""
        assert keyword_match("", "A=5") == 0
        assert keyword_match("", "") == 0

    def test_start_offset(self):
        """Matching can begin inside the text."""
        assert keyword_match("THEN", "1=1 THEN END", 4) == 4

    def test_scanner_match_keyword_consumes(self):
        """Scanner.match_keyword moves the cursor only on success."""
        sc = Scanner("RE M hello")
        assert not sc.match_keyword("RETURN")
        assert sc.pos == 0
        assert sc.match_keyword("REM")
        assert sc.pos == 4


# =============================================================================
# Cursor Movement Tests
# =============================================================================

class TestMovement:
    """Test skip_spaces(), skip_to() and the end-of-buffer sentinel."""

    def test_skip_spaces_stops_at_other_whitespace(self):
        """Only spaces are skipped, not tabs or newlines."""
        sc = Scanner("   \tX")
        sc.skip_spaces()
        assert sc.peek() == "\t"

        sc = Scanner("  \n10")
        sc.skip_spaces()
        assert sc.peek() == "\n"

    def test_skip_to_target(self):
        """skip_to leaves the cursor on the target."""
        sc = Scanner('HELLO" rest')
        sc.skip_to('"')
        assert sc.pos == 5
        assert sc.peek() == '"'

    def test_skip_to_missing_target_stops_at_end(self):
        """A missing target stops the scan at the end of the text."""
        sc = Scanner("no newline here")
        sc.skip_to("\n")
        assert sc.at_end
        assert sc.peek() == ""

    def test_advance_clamped(self):
        """advance() never moves past the end."""
        sc = Scanner("AB")
        sc.advance(10)
        assert sc.pos == 2

    def test_peek_offset(self):
        sc = Scanner("ABC", 1)
        assert sc.peek() == "B"
        assert sc.peek(1) == "C"
        assert sc.peek(2) == ""

    def test_rest_of_line(self):
        sc = Scanner("10 PRINT 1\n20 END\n", 3)
        assert sc.rest_of_line() == "PRINT 1"


# =============================================================================
# Number Parsing Tests
# =============================================================================

class TestNumbers:
    """Test leading_number(), read_digits() and read_number()."""

    @pytest.mark.parametrize("text,expected", [
        ("20 PRINT", 20),
        ("  20 PRINT", 20),
        ("\n30 END", 30),
        ("-5", -5),
        ("+7x", 7),
        ("PRINT", 0),
        ("", 0),
    ])
    def test_leading_number(self, text, expected):
        """leading_number behaves like C atoi."""
        assert Scanner(text).leading_number() == expected

    def test_leading_number_does_not_move(self):
        sc = Scanner("100 END")
        sc.leading_number()
        assert sc.pos == 0

    def test_leading_number_at_position(self):
        sc = Scanner("10 A\n20 B\n")
        assert sc.leading_number(5) == 20

    def test_read_digits(self):
        sc = Scanner("123+4")
        assert sc.read_digits() == "123"
        assert sc.peek() == "+"

    def test_read_number_wraps_to_16_bits(self):
        sc = Scanner("70000 ")
        assert sc.read_number() == 4464
        assert sc.peek() == " "
