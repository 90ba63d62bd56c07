"""
Tiny BASIC Interpreter
======================

This module provides the ``Interpreter`` class, which executes a program
straight from its source text. There is no tokenizer, syntax tree or
bytecode: a single cursor walks the program and each statement handler
reads its own arguments from the cursor, leaving it after the text it
consumed.

Execution Model
---------------
The driver loop repeats two steps until END:

1. Skip forward to the next uppercase letter. This passes over the line
   number, spaces, newlines and ':' separators.
2. Dispatch the statement found there (see ``tinybasic.dispatcher``).

Because separators are simply skipped, several statements may share a
line (``10 A=1: PRINT A``). A false IF skips to the end of its line,
discarding any statements after it. Reaching the end of the program
without END stops execution normally.

State
-----
- ``cursor``: Scanner over the program text; the only control-flow state
- ``variables``: the 26 variables A-Z
- ``call_stack``: return positions of pending GOSUBs
- ``column``: output column used by ``,`` tab stops in PRINT
- a pending input line, so one line typed at an INPUT prompt can supply
  several variables, across several INPUT statements

Example usage:
    >>> from tinybasic import Program, Interpreter
    >>> import io
    >>> out = io.StringIO()
    >>> Interpreter(Program("10 LET A=3\\n20 PRINT A\\n30 END\\n"), output=out).run()
    >>> out.getvalue()
    '3\\r\\n'
"""

import io
import logging
import operator
import random
import sys
from typing import Callable, Optional, TextIO

from tinybasic.callstack import CallStack
from tinybasic.config import InterpreterConfig, XOFF, XON
from tinybasic.dispatcher import Dispatcher, StatementKind
from tinybasic.errors import (
    FatalError,
    InputCommaError,
    InputExhaustedError,
    InputVariableError,
    LetMissingEqualsError,
    LetMissingVariableError,
    ListLineZeroError,
    NoSuchLineError,
    NoSuchSubroutineError,
    RelationalOperatorError,
)
from tinybasic.expressions import ExpressionEvaluator
from tinybasic.program import Program
from tinybasic.scanner import Scanner
from tinybasic.variables import VariableStore, is_variable_name


logger = logging.getLogger(__name__)


TAB_WIDTH = 8

# Relational operators accepted by IF. Unlisted two-character forms
# ("==", "=<", "<<", ...) are decided by their first character.
RELATIONS: dict[str, Callable[[int, int], bool]] = {
    "=": operator.eq,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
    "<>": operator.ne,
    "><": operator.ne,
}

RELATION_CHARS = ("<", "=", ">")
LINE_END = ("\n", "\r", "")
STATEMENT_END = LINE_END + (":",)


class Interpreter:
    """
    Direct-execution interpreter for one Tiny BASIC program.

    Attributes:
        program: The program being run (never modified)
        config: Runtime settings
        cursor: Position of the next character to interpret
        variables: Variables A-Z
        call_stack: Pending GOSUB return positions
        evaluator: Expression evaluator bound to ``variables``
        dispatcher: Keyword table used to recognise statements
        column: Current output column, reset by each line break
        halted: True once END has run or the program text is exhausted
    """

    def __init__(
        self,
        program: Program,
        config: Optional[InterpreterConfig] = None,
        output: Optional[TextIO] = None,
        input: Optional[TextIO] = None,
        dispatcher: Optional[Dispatcher] = None,
    ):
        self.program = program
        self.config = config or InterpreterConfig()
        self.output = output if output is not None else sys.stdout
        self.input = input if input is not None else sys.stdin

        self.cursor = Scanner(program.text)
        self.variables = VariableStore()
        self.call_stack = CallStack(self.config.call_stack_depth)
        self.evaluator = ExpressionEvaluator(self.variables, random.Random(self.config.seed))
        self.dispatcher = dispatcher or Dispatcher()

        self.column = 0
        self.halted = False
        self._pending_input: Optional[Scanner] = None

        self._handlers: dict[StatementKind, Callable[[], None]] = {
            StatementKind.PRINT: self.do_print,
            StatementKind.INPUT: self.do_input,
            StatementKind.LET: self.do_let,
            StatementKind.GOTO: self.do_goto,
            StatementKind.GOSUB: self.do_gosub,
            StatementKind.RETURN: self.do_return,
            StatementKind.IF: self.do_if,
            StatementKind.REM: self.do_rem,
            StatementKind.LIST: self.do_list,
            StatementKind.END: self.do_end,
            StatementKind.ASSIGN: self.do_let,
        }

    def __repr__(self) -> str:
        return f"Interpreter({self.program!r}, pos={self.cursor.pos}, halted={self.halted})"

    # =========================================================================
    # Execution Driver
    # =========================================================================

    def run(self) -> None:
        """Execute statements until END or the end of the program."""
        logger.debug(f"Running {self.program.filename}")
        while self.step():
            pass

    def step(self) -> bool:
        """
        Find and execute the next statement.

        Returns:
            False once the program has halted, True otherwise

        Raises:
            FatalError: With the location of the failing statement
        """
        if self.halted:
            return False

        cursor = self.cursor
        while not cursor.at_end and not is_variable_name(cursor.peek()):
            cursor.advance()
        if cursor.at_end:
            logger.debug("Reached end of program without END")
            self.halted = True
            return False

        start = cursor.pos
        try:
            matched = self.statement()
        except FatalError as error:
            if error.location is None:
                error.location = self.program.location_of(start)
            raise

        if not matched:
            cursor.advance()
        return not self.halted

    def statement(self) -> bool:
        """
        Dispatch the single statement at the cursor.

        IF calls this recursively to run its THEN clause.

        Returns:
            True if a statement was recognised and executed
        """
        return self.dispatcher.dispatch(self)

    def execute(self, kind: StatementKind) -> None:
        """Run the handler for a statement whose keyword was consumed."""
        self._handlers[kind]()

    def trace_statement(self, text: str) -> None:
        """Report a statement about to be executed."""
        logger.debug(f"exec: {text}")
        if self.config.trace:
            self.output.write(f"TRACE: {text}\n")

    # =========================================================================
    # Output
    # =========================================================================

    def write(self, text: str) -> None:
        self.output.write(text)

    def _end_output_line(self) -> None:
        self.write(self.config.line_ending)
        self.column = 0

    def _at_statement_end(self) -> bool:
        return self.cursor.peek() in STATEMENT_END

    # =========================================================================
    # PRINT
    # =========================================================================

    def do_print(self) -> None:
        """
        PRINT item [sep item ...]

        Items are quoted text or expressions. A ',' pads to the next
        multiple of 8 columns, a ';' joins items directly. A trailing ','
        or ';' at the end of the line suppresses the line break. A ':'
        always ends the line and signals the terminal with XOFF before the
        next statement runs.
        """
        cursor = self.cursor
        cursor.skip_spaces()

        while cursor.peek() not in STATEMENT_END:
            if cursor.peek() == '"':
                cursor.advance()
                start = cursor.pos
                end = cursor.text.find('"', start)
                line_end = cursor.text.find("\n", start)
                if end < 0 or (0 <= line_end < end):
                    end = line_end if line_end >= 0 else len(cursor.text)
                cursor.pos = end
                text = cursor.text[start:end]
                self.write(text)
                self.column += len(text)
            else:
                text = str(self.evaluator.evaluate(cursor))
                self.write(text)
                self.column += len(text)

            # Scan forward to the separator that follows the item
            while cursor.peek() not in STATEMENT_END:
                char = cursor.peek()
                cursor.advance()
                if char == ",":
                    padding = TAB_WIDTH - self.column % TAB_WIDTH
                    self.write(" " * padding)
                    self.column += padding
                elif char != ";":
                    continue
                cursor.skip_spaces()
                if cursor.peek() in LINE_END:
                    return
                break

        if cursor.peek() == ":" and self.config.flow_control:
            self.write(XOFF)
        self._end_output_line()

    # =========================================================================
    # INPUT
    # =========================================================================

    def do_input(self) -> None:
        """
        INPUT var [, var ...]

        Each variable takes the next value from the current input line,
        prompting for a new line once it is used up. A letter typed in
        reply stores its position in the alphabet (A=1); anything else is
        evaluated as an expression.
        """
        cursor = self.cursor
        cursor.skip_spaces()

        while not self._at_statement_end():
            name = cursor.peek()
            if not is_variable_name(name):
                raise InputVariableError(hint=f"found {name!r}")

            reply = self._input_reply()
            if is_variable_name(reply.peek()):
                value = ord(reply.peek()) - ord("@")
                reply.advance()
            else:
                value = self.evaluator.evaluate(reply)
            self.variables[name] = value
            while reply.peek() in (" ", ","):
                reply.advance()

            cursor.advance()
            cursor.skip_spaces()
            if self._at_statement_end():
                break
            if cursor.peek() != ",":
                raise InputCommaError(hint=f"found {cursor.peek()!r} after {name}")
            cursor.advance()
            cursor.skip_spaces()

    def _input_reply(self) -> Scanner:
        """Return the unread part of the input line, reading one if needed."""
        reply = self._pending_input
        if reply is None or reply.peek() in LINE_END:
            prompt = self.config.input_prompt
            if self.config.flow_control:
                prompt += XON
            self.write(prompt)
            self.output.flush()
            line = self.input.readline()
            if not line:
                raise InputExhaustedError()
            logger.debug(f"Input line: {line.rstrip()!r}")
            reply = Scanner(line)
            self._pending_input = reply
        reply.skip_spaces()
        return reply

    # =========================================================================
    # LET
    # =========================================================================

    def do_let(self) -> None:
        """LET var = expr, or the bare form var = expr."""
        cursor = self.cursor
        cursor.skip_spaces()
        name = cursor.peek()
        if not is_variable_name(name):
            raise LetMissingVariableError()
        cursor.advance()
        cursor.skip_spaces()
        if cursor.peek() != "=":
            raise LetMissingEqualsError(hint=f"assignment to {name} needs '='")
        cursor.advance()
        cursor.skip_spaces()
        self.variables[name] = self.evaluator.evaluate(cursor)

    # =========================================================================
    # Control Flow
    # =========================================================================

    def do_goto(self) -> None:
        """GOTO expr"""
        number = self.evaluator.evaluate(self.cursor)
        if not self.program.has_line(number):
            raise NoSuchLineError(hint=f"line {number} does not exist")
        logger.debug(f"GOTO {number}")
        self.cursor.pos = self.program.find_line(number)

    def do_gosub(self) -> None:
        """GOSUB expr: save the position after the argument, then branch."""
        number = self.evaluator.evaluate(self.cursor)
        self.call_stack.push(self.cursor.pos)
        if not self.program.has_line(number):
            raise NoSuchSubroutineError(hint=f"line {number} does not exist")
        logger.debug(f"GOSUB {number}")
        self.cursor.pos = self.program.find_line(number)

    def do_return(self) -> None:
        """RETURN: resume after the most recent GOSUB."""
        self.cursor.pos = self.call_stack.pop()

    def do_if(self) -> None:
        """
        IF expr relop expr [THEN] statement

        When the relation holds, the statement after it is dispatched
        directly; otherwise the rest of the line is skipped.
        """
        cursor = self.cursor
        cursor.skip_spaces()
        left = self.evaluator.evaluate(cursor)

        while cursor.peek() not in RELATION_CHARS:
            if cursor.peek() in LINE_END:
                raise RelationalOperatorError()
            cursor.advance()
        op = cursor.peek()
        cursor.advance()
        if cursor.peek() in RELATION_CHARS:
            op += cursor.peek()
            cursor.advance()

        right = self.evaluator.evaluate(cursor)
        cursor.skip_spaces()
        cursor.match_keyword("THEN")
        cursor.skip_spaces()

        relation = RELATIONS.get(op) or RELATIONS[op[0]]
        if relation(left, right):
            self.statement()
            return
        cursor.skip_to("\n")

    def do_rem(self) -> None:
        self.cursor.skip_to("\n")

    # =========================================================================
    # LIST and END
    # =========================================================================

    def do_list(self) -> None:
        """
        LIST             whole program, verbatim
        LIST n           line n (or the first line after it)
        LIST first,last  every line numbered first to last inclusive

        The execution cursor only moves past the arguments.
        """
        cursor = self.cursor
        cursor.skip_spaces()
        if self._at_statement_end():
            self.write(self.program.text)
            return

        first = self.evaluator.evaluate(cursor)
        if first == 0:
            raise ListLineZeroError()
        cursor.skip_spaces()
        if cursor.peek() != ",":
            position = self.program.find_line(first)
            self.write(self.program.line_text(position) + "\n")
            return

        cursor.advance()
        last = self.evaluator.evaluate(cursor)
        self.write(self.program.lines_between(first, last))

    def do_end(self) -> None:
        logger.debug("END")
        self.halted = True


# =============================================================================
# Convenience
# =============================================================================

def run_source(
    source: str,
    input_text: str = "",
    config: Optional[InterpreterConfig] = None,
    filename: str = "<input>",
) -> str:
    """
    Run program text with canned input and return everything it printed.

    Example:
        >>> run_source('10 PRINT "HI"\\n20 END\\n')
        'HI\\r\\n'
    """
    output = io.StringIO()
    interpreter = Interpreter(
        Program(source, filename),
        config=config,
        output=output,
        input=io.StringIO(input_text),
    )
    interpreter.run()
    return output.getvalue()
