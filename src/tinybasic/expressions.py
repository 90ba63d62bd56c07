"""
Expression Evaluator
====================

Recursive-descent evaluation of Tiny BASIC expressions, read directly from
a Scanner with no intermediate tokens or tree. Each tier returns its
value as soon as it has consumed its text.

Expression Grammar
------------------
From lowest to highest precedence:

1. expr:          [+|-] unsigned_expr
2. unsigned_expr: term { (+|-) term }
3. term:          factor { (*|/) factor }
4. factor:        ( expr ) | RND(expr) | USR(...) | variable | number

All arithmetic is signed 16-bit: results wrap on overflow and division
truncates toward zero.

>>> from tinybasic.scanner import Scanner
>>> from tinybasic.variables import VariableStore
>>> evaluator = ExpressionEvaluator(VariableStore())
>>> evaluator.evaluate(Scanner("2+3*4"))
14
>>> evaluator.evaluate(Scanner("32767+1"))
-32768
"""

import random
from typing import Optional

from tinybasic.errors import DivisionByZeroError, RndZeroError, UsrNotSupportedError
from tinybasic.scanner import Scanner
from tinybasic.variables import VariableStore, is_variable_name, to_int16


def truncating_divide(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero, as 16-bit hardware does."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient


class ExpressionEvaluator:
    """
    Evaluates expressions against the variable store.

    The evaluator keeps no position of its own: it reads from whatever
    Scanner it is given, so the same instance evaluates program text and
    text typed in response to INPUT.

    Attributes:
        variables: Store consulted for variable references
        rng: Random source used by RND
    """

    def __init__(self, variables: VariableStore, rng: Optional[random.Random] = None):
        self.variables = variables
        self.rng = rng or random.Random()

    def evaluate(self, scanner: Scanner) -> int:
        """
        Evaluate a full expression (optional sign, then terms).

        Leaves the scanner on the first character after the expression.
        """
        scanner.skip_spaces()
        sign = 1
        if scanner.peek() == "+":
            scanner.advance()
        elif scanner.peek() == "-":
            sign = -1
            scanner.advance()
        return to_int16(sign * self.unsigned_expr(scanner))

    # =========================================================================
    # Precedence Tiers
    # =========================================================================

    def unsigned_expr(self, scanner: Scanner) -> int:
        """Parse addition and subtraction."""
        scanner.skip_spaces()
        value = self.term(scanner)
        while True:
            scanner.skip_spaces()
            op = scanner.peek()
            if op == "+":
                scanner.advance()
                value = to_int16(value + self.term(scanner))
            elif op == "-":
                scanner.advance()
                value = to_int16(value - self.term(scanner))
            else:
                return value

    def term(self, scanner: Scanner) -> int:
        """Parse multiplication and division."""
        scanner.skip_spaces()
        value = self.factor(scanner)
        while True:
            scanner.skip_spaces()
            op = scanner.peek()
            if op == "*":
                scanner.advance()
                value = to_int16(value * self.factor(scanner))
            elif op == "/":
                scanner.advance()
                divisor = self.factor(scanner)
                if divisor == 0:
                    raise DivisionByZeroError()
                value = to_int16(truncating_divide(value, divisor))
            else:
                return value

    def factor(self, scanner: Scanner) -> int:
        """
        Parse a primary value.

        Anything that is not a group, function, variable or number
        evaluates to 0 without consuming input.
        """
        scanner.skip_spaces()
        char = scanner.peek()

        if char == "(":
            scanner.advance()
            value = self.evaluate(scanner)
            scanner.skip_to(")")
            scanner.advance()
            return value

        if is_variable_name(char):
            if scanner.startswith("RND"):
                value = self._random(scanner)
            elif scanner.startswith("USR"):
                raise UsrNotSupportedError()
            else:
                value = self.variables[char]
            scanner.advance()
            return value

        if char and char in "0123456789":
            return to_int16(scanner.read_number())

        return 0

    def _random(self, scanner: Scanner) -> int:
        """
        Evaluate RND(n): uniform integer in [0, |n|).

        Leaves the scanner on the closing parenthesis.
        """
        scanner.skip_to("(")
        scanner.advance()
        bound = self.evaluate(scanner)
        if bound == 0:
            raise RndZeroError()
        value = self.rng.randrange(abs(bound))
        scanner.skip_to(")")
        return value
