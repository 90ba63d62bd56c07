"""
Program Source and Line Index
=============================

A ``Program`` holds the complete text of a Tiny BASIC program. The text is
never modified after loading; the interpreter executes it in place through
a Scanner.

Lines are located by their leading decimal number with a linear scan from
the top of the program, stopping at the first line whose number is at
least the one requested. Programs are small, so this is not worth an
index structure. Line numbers are expected to increase through the file.

Example:
    >>> program = Program("10 PRINT 1\\n20 PRINT 2\\n")
    >>> pos = program.find_line(20)
    >>> program.line_number_at(pos)
    20
"""

import logging
from pathlib import Path
from typing import Optional, Union

from tinybasic.errors import SourceLoadError, SourceLocation, ZeroLineNumberError
from tinybasic.scanner import Scanner


logger = logging.getLogger(__name__)


class Program:
    """
    Immutable program text plus line lookup.

    Attributes:
        text: The program source; always ends with a newline unless empty
        filename: Name used in error locations
    """

    def __init__(self, text: str, filename: str = "<input>"):
        if text and not text.endswith("\n"):
            text += "\n"
        self.text = text
        self.filename = filename
        self._numbers = Scanner(text)

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"Program({self.filename!r}, {len(self.text)} chars)"

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Program":
        """
        Load a program from a text file.

        Raises:
            SourceLoadError: If the file cannot be opened or decoded
        """
        path = Path(path)
        try:
            with path.open(newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceLoadError(hint=f"{path}: {e}") from e
        logger.debug(f"Loaded {path} ({len(text)} chars)")
        return cls(text, filename=str(path))

    # =========================================================================
    # Line Lookup
    # =========================================================================

    def find_line(self, number: int) -> int:
        """
        Locate the first line numbered at or above ``number``.

        Args:
            number: Target line number

        Returns:
            Position of the start of that line, or the end of the text if
            every line is numbered below the target. Callers needing an
            exact line compare ``line_number_at`` with the target.

        Raises:
            ZeroLineNumberError: If number is 0
        """
        if number == 0:
            raise ZeroLineNumberError()
        text = self.text
        pos = 0
        while pos < len(text) and self.line_number_at(pos) < number:
            newline = text.find("\n", pos)
            pos = len(text) if newline < 0 else newline + 1
        logger.debug(f"Line {number} resolved to offset {pos}")
        return pos

    def line_number_at(self, pos: int) -> int:
        """Leading number of the text at pos (0 when there is none)."""
        return self._numbers.leading_number(pos)

    def has_line(self, number: int) -> bool:
        """
        True if a line carries exactly this number.

        Raises:
            ZeroLineNumberError: If number is 0
        """
        return self.line_number_at(self.find_line(number)) == number

    def line_bounds(self, pos: int) -> tuple[int, int]:
        """Start and end (exclusive of the newline) of the line holding pos."""
        start = self.text.rfind("\n", 0, pos) + 1
        end = self.text.find("\n", pos)
        if end < 0:
            end = len(self.text)
        return start, end

    def line_text(self, pos: int) -> str:
        """Text from pos up to the end of its line."""
        end = self.text.find("\n", pos)
        if end < 0:
            end = len(self.text)
        return self.text[pos:end]

    def lines_between(self, first: int, last: int) -> str:
        """
        Text of every line numbered from first to last inclusive.

        Each returned line keeps its newline.
        """
        text = self.text
        start = pos = self.find_line(first)
        while pos < len(text) and self.line_number_at(pos) <= last:
            newline = text.find("\n", pos)
            pos = len(text) if newline < 0 else newline + 1
        return text[start:pos]

    # =========================================================================
    # Error Locations
    # =========================================================================

    def location_of(self, pos: int) -> SourceLocation:
        """Describe the line containing pos for error messages."""
        start, end = self.line_bounds(min(pos, len(self.text)))
        line = self.text[start:end]
        number: Optional[int] = None
        if line.lstrip(" ")[:1].isdigit():
            number = self._numbers.leading_number(start)
        return SourceLocation(self.filename, number, line)
