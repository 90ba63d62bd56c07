"""
Tiny BASIC Error Hierarchy
==========================

This module defines the exception hierarchy for the interpreter. Every
failure the interpreter can detect is fatal: it stops the running program
and is reported with a category-specific exit status.

Exception Hierarchy
-------------------
TinyBasicError (base)
└── FatalError (program cannot continue; carries an exit code)
    ├── SourceLoadError            8   - program file unreadable
    ├── ZeroLineNumberError        9   - 0 used as a branch target
    ├── LetMissingVariableError    18  - LET without a variable name
    ├── LetMissingEqualsError      20  - LET without '='
    ├── NoSuchLineError            37  - GOTO to a missing line
    ├── NoSuchSubroutineError      46  - GOSUB to a missing line
    ├── InputVariableError         104 - INPUT expects a variable name
    ├── InputCommaError            123 - INPUT expects a comma
    ├── ReturnWithoutGosubError    133 - RETURN with empty call stack
    ├── ListLineZeroError          154 - LIST of line 0
    ├── CallStackOverflowError     188 - too many nested GOSUBs
    ├── RndZeroError               259 - RND(0)
    ├── UsrNotSupportedError       303 - USR(...) call
    ├── RelationalOperatorError    330 - IF without a relation operator
    ├── DivisionByZeroError        340 - integer division by zero
    └── InputExhaustedError        350 - end of input while INPUT waits

Error messages follow this format:
    program.bas:20: error: No line to GO TO
        20 GOTO 25
    hint: line 25 does not exist
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TinyBasicError(Exception):
    """
    Base exception for all interpreter errors.

    Callers can catch every interpreter-related error with a single
    except clause:

        try:
            interpreter.run()
        except TinyBasicError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Location of a statement in the program text.

    Attributes:
        filename: Name of the program file (or "<input>" for string input)
        line_number: BASIC line number, None when the line has none
        text: The source line without its terminator
    """
    filename: str
    line_number: Optional[int]
    text: str

    def __str__(self) -> str:
        if self.line_number is None:
            return self.filename
        return f"{self.filename}:{self.line_number}"


# =============================================================================
# Fatal Conditions
# =============================================================================

class FatalError(TinyBasicError):
    """
    A condition that terminates the running program.

    Subclasses set ``code`` (the process exit status for the category)
    and ``default_message``. The execution driver attaches the location
    of the failing statement when the raising code did not.

    Attributes:
        message: The error description
        location: The statement being executed (optional)
        hint: A suggestion for fixing the error (optional)
    """

    code: int = 1
    default_message: str = "Fatal error"

    def __init__(
        self,
        message: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.location = location
        self.hint = hint
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.format()

    def format(self) -> str:
        """
        Format the error with location, source context and hint.

        Example output:
            loop.bas:20: error: No line to GO TO
                20 GOTO 25
            hint: line 25 does not exist
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.location is not None and self.location.text:
            parts.append(f"    {self.location.text}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class SourceLoadError(FatalError):
    """The program file is missing or cannot be read."""
    code = 8
    default_message = "Cannot load source"


class ZeroLineNumberError(FatalError):
    """Line number 0 is reserved and cannot be a branch target."""
    code = 9
    default_message = "Line number 0 not allowed"


class LetMissingVariableError(FatalError):
    """
    Assignment without a variable name.

    Also raised for any statement that matches no keyword and does not
    start with a variable, since such statements fall through to LET.
    """
    code = 18
    default_message = "LET is missing a variable name"


class LetMissingEqualsError(FatalError):
    """Assignment whose variable is not followed by '='."""
    code = 20
    default_message = "LET is missing an ="


class NoSuchLineError(FatalError):
    """GOTO target line does not exist."""
    code = 37
    default_message = "No line to GO TO"


class NoSuchSubroutineError(FatalError):
    """GOSUB target line does not exist."""
    code = 46
    default_message = "GOSUB subroutine does not exist"


class InputVariableError(FatalError):
    """INPUT target is not a variable name."""
    code = 104
    default_message = "INPUT syntax bad - expects variable name"


class InputCommaError(FatalError):
    """INPUT targets are not separated by commas."""
    code = 123
    default_message = "INPUT syntax bad - expects comma"


class ReturnWithoutGosubError(FatalError):
    """RETURN executed with an empty call stack."""
    code = 133
    default_message = "RETURN has no matching GOSUB"


class ListLineZeroError(FatalError):
    """LIST asked for line 0."""
    code = 154
    default_message = "Can't LIST line number 0"


class CallStackOverflowError(FatalError):
    """
    Too many pending GOSUBs.

    The call stack is bounded; a GOSUB issued while every slot is in use
    cannot save its return position.
    """
    code = 188
    default_message = "Memory overflow: too many GOSUB's"


class RndZeroError(FatalError):
    """RND called with a bound of zero."""
    code = 259
    default_message = "RND (0) not allowed"


class UsrNotSupportedError(FatalError):
    """USR machine-code calls are not available."""
    code = 303
    default_message = "USR not supported"


class RelationalOperatorError(FatalError):
    """IF without one of = < > <= >= <> between its expressions."""
    code = 330
    default_message = "IF syntax error - expects relation operator"


class DivisionByZeroError(FatalError):
    """Integer division by zero inside an expression."""
    code = 340
    default_message = "Division by zero"


class InputExhaustedError(FatalError):
    """The input stream ended while INPUT was waiting for a line."""
    code = 350
    default_message = "INPUT reached end of input"


FATAL_ERRORS: tuple[type[FatalError], ...] = (
    SourceLoadError,
    ZeroLineNumberError,
    LetMissingVariableError,
    LetMissingEqualsError,
    NoSuchLineError,
    NoSuchSubroutineError,
    InputVariableError,
    InputCommaError,
    ReturnWithoutGosubError,
    ListLineZeroError,
    CallStackOverflowError,
    RndZeroError,
    UsrNotSupportedError,
    RelationalOperatorError,
    DivisionByZeroError,
    InputExhaustedError,
)
