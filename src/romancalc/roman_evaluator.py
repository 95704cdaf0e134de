"""
Single-pass evaluator for the Roman numeral desk calculator.

Parses and evaluates a token list in one recursive-descent pass without
building a syntax tree. There is no precedence table: `+ - * / **` all bind
equally and are folded strictly left to right. Only parentheses change the
grouping, so "II + III * II" is (2 + 3) * 2 = 10.

Evaluation rules
----------------
- The whole line starts at token 0 and must end at END_OF_LINE. A
  parenthesized group starts right after its LEFT_PAREN and must end at the
  matching RIGHT_PAREN.
- A line, but not a group, may start with an operator. Its left operand is
  then the previous line's result.
- Division truncates toward zero. Exponentiation is truncated toward zero as
  well, so negative exponents give 0 unless the base is 1 or -1.
- Every intermediate result must stay inside [-3999, 3999].

Entry Points
------------
- `Evaluator.evaluate()`: Evaluate a whole tokenized line.
- `Evaluator.parse_and_evaluate(start)`: Evaluate the line or one group and
  return the value with the index of its terminating token.
- `evaluate(tokens, previous_result)`: Module-level shortcut.

Raises
------
RomanCalcError
    One of its subclasses, at the first fault. The exception unwinds every
    enclosing group so no partial result escapes.
"""

import logging
from collections.abc import Callable

from romancalc.roman_constants import MAX_VALUE, MIN_VALUE
from romancalc.roman_errors import (
    DivisionByZeroError,
    IncompleteExpressionError,
    InvalidExpressionError,
    MissingExpressionError,
    MissingOperandError,
    MissingOperatorError,
    ResultOutOfRangeError,
)
from romancalc.roman_lexer import Token, TokenKind

logger = logging.getLogger(__name__)


def truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def truncating_power(base: int, exponent: int) -> int:
    """Raises `base` to `exponent`, truncating fractional results toward zero.

    A zero base with a negative exponent has no finite value; the caller
    rejects it before calling.
    """
    if exponent >= 0:
        return base**exponent
    if base in (1, -1):
        return base ** (-exponent)
    return 0


ARITHMETIC: dict[TokenKind, Callable[[int, int], int]] = {
    TokenKind.ADD: lambda a, b: a + b,
    TokenKind.SUBTRACT: lambda a, b: a - b,
    TokenKind.MULTIPLY: lambda a, b: a * b,
    TokenKind.DIVIDE: truncating_divide,
    TokenKind.EXPONENT: truncating_power,
}


class Evaluator:
    """Evaluates one tokenized line.

    Attributes
    ----------
    tokens : list[Token]
        The line's tokens, ending with END_OF_LINE.
    previous_result : int
        Left operand for a line that starts with an operator.
    """

    def __init__(self, tokens: list[Token], previous_result: int = 0) -> None:
        self.tokens: list[Token] = tokens
        self.previous_result: int = previous_result
        self.innermost_start: int = 0

    def evaluate(self) -> int:
        """Evaluates the whole line.

        Raises:
            InvalidExpressionError: If groups nest deeper than the interpreter's
                recursion limit; positioned at the innermost opening parenthesis.
        """
        try:
            value, _ = self.parse_and_evaluate(0)
        except RecursionError:
            opener = self.tokens[max(self.innermost_start - 1, 0)]
            raise InvalidExpressionError(
                opener.end_position, "nesting too deep"
            ) from None
        return value

    def parse_and_evaluate(self, start: int) -> tuple[int, int]:
        """Evaluates the whole line (start 0) or the group starting at `start`.

        Each group costs one call of this method.

        Args:
            start (int): Index of the first token of the expression.

        Returns:
            tuple[int, int]: The value and the index of the terminating token
            (END_OF_LINE for the line, RIGHT_PAREN for a group).

        Raises:
            RomanCalcError: At the first fault in this expression or any group in it.
        """
        self.innermost_start = start
        outermost = start == 0
        terminator = TokenKind.END_OF_LINE if outermost else TokenKind.RIGHT_PAREN
        cursor = start

        first = self.tokens[cursor]
        if first.kind.is_ender:
            raise MissingExpressionError(first.end_position)
        if first.kind.is_operator:
            if not outermost:
                raise InvalidExpressionError(first.end_position)
            result = self.previous_result
            # Step back so the fold below picks this operator up first.
            cursor -= 1
        elif first.kind is TokenKind.LEFT_PAREN:
            result, cursor = self.parse_and_evaluate(cursor + 1)
        else:
            result = self.literal_value(first)

        while True:
            cursor += 1
            operator = self.tokens[cursor]
            if operator.kind is terminator:
                break
            if not operator.kind.is_operator:
                if operator.kind.is_ender:
                    raise IncompleteExpressionError(operator.end_position)
                raise MissingOperatorError(operator.end_position)

            cursor += 1
            operand_token = self.tokens[cursor]
            if not operand_token.kind.is_operand_start:
                raise MissingOperandError(operand_token.end_position)
            if operand_token.kind is TokenKind.LEFT_PAREN:
                operand, cursor = self.parse_and_evaluate(cursor + 1)
            else:
                operand = self.literal_value(operand_token)

            result = self.apply(operator.kind, result, operand, self.tokens[cursor])
            logger.debug(
                "%s %s -> %d (token %d)", operator.kind.name, operand, result, cursor
            )

        return result, cursor

    @staticmethod
    def literal_value(token: Token) -> int:
        return token.integer_value or 0

    def apply(self, kind: TokenKind, left: int, right: int, at: Token) -> int:
        """Applies one operator and checks the result's range.

        Args:
            kind (TokenKind): The operator.
            left (int): The running value.
            right (int): The second operand.
            at (Token): Last token of the second operand; errors point at it.

        Raises:
            DivisionByZeroError: On division by zero.
            ResultOutOfRangeError: If the result leaves [-3999, 3999].
        """
        if kind is TokenKind.DIVIDE and right == 0:
            raise DivisionByZeroError(at.end_position)
        if kind is TokenKind.EXPONENT and left == 0 and right < 0:
            raise ResultOutOfRangeError(at.end_position, "zero to a negative power")

        result = ARITHMETIC[kind](left, right)
        if not MIN_VALUE <= result <= MAX_VALUE:
            raise ResultOutOfRangeError(at.end_position)
        return result


def evaluate(tokens: list[Token], previous_result: int = 0) -> int:
    return Evaluator(tokens, previous_result).evaluate()


__all__ = ["Evaluator", "evaluate", "truncating_divide", "truncating_power"]
