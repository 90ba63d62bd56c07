"""
Tiny BASIC - Direct-Execution Line-Numbered BASIC Interpreter
=============================================================

This package runs programs written in a minimal line-numbered BASIC
dialect. The program text is executed in place, statement by statement,
with no tokenizer, syntax tree or bytecode in between.

Main Components
---------------
- **scanner**: cursor primitives and tolerant keyword matching
- **expressions**: recursive-descent evaluator over signed 16-bit integers
- **program**: program text and line-number lookup
- **dispatcher**: ordered keyword table mapping text to statements
- **interpreter**: statement handlers and the execution driver
- **cli**: the ``tbasic`` command

The Language
------------
- 26 integer variables, A to Z, signed 16-bit
- PRINT (or PR), INPUT, LET (optional), GOTO, GOSUB, RETURN,
  IF ... [THEN], REM, LIST, END
- Operators + - * / and parentheses; RND(n)

Quick Start
-----------
Run a program held in a string:
    >>> from tinybasic import run_source
    >>> run_source("10 PRINT 2+3*4\\n20 END\\n")
    '14\\r\\n'

Run a program file with the interpreter directly:
    >>> from tinybasic import Interpreter, Program
    >>> Interpreter(Program.from_file("hello.bas")).run()

Or use the command-line tool:
    $ tbasic hello.bas
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from tinybasic.config import InterpreterConfig
from tinybasic.errors import (
    TinyBasicError,
    FatalError,
    SourceLocation,
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
from tinybasic.scanner import Scanner, keyword_match
from tinybasic.program import Program
from tinybasic.variables import VariableStore
from tinybasic.callstack import CallStack
from tinybasic.expressions import ExpressionEvaluator
from tinybasic.dispatcher import Dispatcher, Keyword, KEYWORDS, StatementKind
from tinybasic.interpreter import Interpreter, run_source

__all__ = [
    "__version__",
    # Configuration
    "InterpreterConfig",
    # Errors
    "TinyBasicError",
    "FatalError",
    "SourceLocation",
    "SourceLoadError",
    "ZeroLineNumberError",
    "LetMissingVariableError",
    "LetMissingEqualsError",
    "NoSuchLineError",
    "NoSuchSubroutineError",
    "InputVariableError",
    "InputCommaError",
    "ReturnWithoutGosubError",
    "ListLineZeroError",
    "CallStackOverflowError",
    "RndZeroError",
    "UsrNotSupportedError",
    "RelationalOperatorError",
    "DivisionByZeroError",
    "InputExhaustedError",
    # Engine
    "Scanner",
    "keyword_match",
    "Program",
    "VariableStore",
    "CallStack",
    "ExpressionEvaluator",
    "Dispatcher",
    "Keyword",
    "KEYWORDS",
    "StatementKind",
    "Interpreter",
    "run_source",
]
