"""
Source Scanner
==============

Cursor primitives over an immutable piece of text. The interpreter never
tokenizes: every statement handler and the expression evaluator read the
program directly through a Scanner, advancing its position as they go.

Reading past the end of the text yields the empty string, which acts as
an end-of-buffer sentinel so that no scan can run away on a program
that lacks a trailing newline.

Keyword Matching
----------------
Keywords are matched tolerantly: spaces in the program text between the
letters of a keyword are ignored, so ``G O TO 100`` is a GOTO.

>>> keyword_match("GOTO", "G O TO 100")
6
>>> keyword_match("GOTO", "GOSUB 100") is None
True
"""

from typing import Optional


WHITESPACE = " \t\n\r\v\f"


def keyword_match(pattern: str, text: str, start: int = 0) -> Optional[int]:
    """
    Match a keyword against text, ignoring spaces inside the text.

    Args:
        pattern: Keyword without embedded spaces (e.g. "GOSUB")
        text: Text to match against
        start: Position in text where matching begins

    Returns:
        Number of characters of text consumed by the match, or None if
        the keyword does not match. The empty pattern always matches
        and consumes nothing.
    """
    pos = start
    end = len(text)
    for char in pattern:
        while pos < end and text[pos] == " ":
            pos += 1
        if pos >= end or text[pos] != char:
            return None
        pos += 1
    return pos - start


class Scanner:
    """
    A read position over immutable text.

    Attributes:
        text: The text being scanned (never modified)
        pos: Index of the next character to interpret
    """

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"Scanner(pos={self.pos}, next={self.text[self.pos:self.pos + 10]!r})"

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def at_end(self) -> bool:
        """True once the cursor has reached the end of the text."""
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Return the character at pos + offset, or "" past the end."""
        index = self.pos + offset
        if 0 <= index < len(self.text):
            return self.text[index]
        return ""

    def startswith(self, prefix: str) -> bool:
        """Exact (space-sensitive) comparison at the cursor."""
        return self.text.startswith(prefix, self.pos)

    def rest_of_line(self) -> str:
        """Text from the cursor up to, not including, the next newline."""
        end = self.text.find("\n", self.pos)
        if end < 0:
            end = len(self.text)
        return self.text[self.pos:end]

    # =========================================================================
    # Movement
    # =========================================================================

    def advance(self, count: int = 1) -> None:
        """Move the cursor forward, never beyond the end of the text."""
        self.pos = min(self.pos + count, len(self.text))

    def skip_spaces(self) -> None:
        """Advance past space characters only (not tabs or newlines)."""
        end = len(self.text)
        while self.pos < end and self.text[self.pos] == " ":
            self.pos += 1

    def skip_to(self, target: str) -> None:
        """
        Advance until the cursor rests on target.

        The target itself is not consumed. If it never occurs the cursor
        stops at the end of the text.
        """
        index = self.text.find(target, self.pos)
        self.pos = index if index >= 0 else len(self.text)

    def keyword_match(self, pattern: str) -> Optional[int]:
        """Tolerant keyword match at the cursor; does not move."""
        return keyword_match(pattern, self.text, self.pos)

    def match_keyword(self, pattern: str) -> bool:
        """Consume pattern if it matches at the cursor."""
        length = self.keyword_match(pattern)
        if length is None:
            return False
        self.pos += length
        return True

    # =========================================================================
    # Numbers
    # =========================================================================

    def leading_number(self, pos: Optional[int] = None) -> int:
        """
        Parse a decimal number the way C's atoi does, without moving.

        Leading whitespace (newlines included) is skipped, an optional
        sign is accepted, and digits are read until the first non-digit.
        Returns 0 when no digits follow.
        """
        text = self.text
        end = len(text)
        index = self.pos if pos is None else pos
        while index < end and text[index] in WHITESPACE:
            index += 1
        sign = 1
        if index < end and text[index] in "+-":
            if text[index] == "-":
                sign = -1
            index += 1
        value = 0
        while index < end and text[index].isdigit() and text[index].isascii():
            value = value * 10 + (ord(text[index]) - ord("0"))
            index += 1
        return sign * value

    def read_digits(self) -> str:
        """Consume and return the run of decimal digits at the cursor."""
        start = self.pos
        end = len(self.text)
        while self.pos < end and self.text[self.pos] in "0123456789":
            self.pos += 1
        return self.text[start:self.pos]

    def read_number(self) -> int:
        """
        Consume a run of decimal digits and return its value modulo 2**16.

        Literals of any length are accepted; only the low 16 bits survive.
        """
        value = 0
        for digit in self.read_digits():
            value = (value * 10 + ord(digit) - ord("0")) & 0xFFFF
        return value
