"""
Statement Dispatcher
====================

Statements are recognised by trying each keyword of an ordered table
against the cursor with tolerant (space-ignoring) matching. The first
entry that matches wins, so order matters:

- ``PRINT`` is tried before its abbreviation ``PR``; the other way round
  ``PRINT X`` would run as ``PR`` followed by the text ``INT X``.
- The final entry has an empty keyword. It matches anything and routes
  the statement to assignment, which is how ``A=5`` works without LET.

After a match the cursor is moved past the keyword and the handler for
the statement kind runs; the handler consumes the rest of the statement.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence, TYPE_CHECKING

from tinybasic.scanner import Scanner

if TYPE_CHECKING:
    from tinybasic.interpreter import Interpreter


logger = logging.getLogger(__name__)


class StatementKind(Enum):
    """The statements the interpreter can execute."""
    PRINT = auto()
    INPUT = auto()
    LET = auto()
    GOTO = auto()
    GOSUB = auto()
    RETURN = auto()
    IF = auto()
    REM = auto()
    LIST = auto()
    END = auto()
    ASSIGN = auto()     # Bare "A=5" with no keyword


@dataclass(frozen=True)
class Keyword:
    """
    One entry of the keyword table.

    Attributes:
        text: Keyword as written, without spaces ("" matches anything)
        kind: Statement run when the keyword matches
    """
    text: str
    kind: StatementKind


KEYWORDS: tuple[Keyword, ...] = (
    Keyword("PRINT", StatementKind.PRINT),
    Keyword("PR", StatementKind.PRINT),
    Keyword("INPUT", StatementKind.INPUT),
    Keyword("LET", StatementKind.LET),
    Keyword("GOTO", StatementKind.GOTO),
    Keyword("GOSUB", StatementKind.GOSUB),
    Keyword("RETURN", StatementKind.RETURN),
    Keyword("IF", StatementKind.IF),
    Keyword("REM", StatementKind.REM),
    Keyword("LIST", StatementKind.LIST),
    Keyword("END", StatementKind.END),
    Keyword("", StatementKind.ASSIGN),
)


class Dispatcher:
    """
    Resolves the statement at the cursor and hands it to the interpreter.

    Attributes:
        keywords: Ordered keyword table; earlier entries take priority
    """

    def __init__(self, keywords: Sequence[Keyword] = KEYWORDS):
        self.keywords = tuple(keywords)

    def match(self, scanner: Scanner) -> Optional[tuple[Keyword, int]]:
        """
        Find the first keyword matching at the cursor.

        Returns:
            The keyword and the number of characters it spans, or None
            when no entry matches. The cursor is not moved.
        """
        for keyword in self.keywords:
            length = scanner.keyword_match(keyword.text)
            if length is not None:
                return keyword, length
        return None

    def dispatch(self, interpreter: "Interpreter") -> bool:
        """
        Execute the statement at the interpreter's cursor.

        Returns:
            True if a keyword matched and its handler ran; False when the
            statement matched nothing, in which case nothing happens.
        """
        cursor = interpreter.cursor
        found = self.match(cursor)
        if found is None:
            logger.debug(f"No statement matches {cursor.rest_of_line()!r}")
            return False
        keyword, length = found
        interpreter.trace_statement(cursor.rest_of_line())
        cursor.advance(length)
        interpreter.execute(keyword.kind)
        return True
