"""
Exception types raised while tokenizing and evaluating a calculator line.

Every error is a user-input error: it aborts the current line and is reported
once, with the position of the character where it was detected. None of them
ends the session.

Classes:
    RomanCalcError: Base class carrying the fault position and message formatting.
    MissingExpressionError, InvalidExpressionError, InvalidCharacterError,
    IncompleteExpressionError, MissingOperatorError, MissingOperandError,
    DivisionByZeroError, ResultOutOfRangeError: One subclass per error kind.

Example:
    >>> err = MissingOperandError(4)
    >>> err.format_message("II + ")
    "There's a missing operand detected at the end of this text: II + "
"""


class RomanCalcError(Exception):
    """Base class for calculator errors.

    Attributes:
        description (str): Short phrase naming the error kind, e.g. "a missing operand".
        position (int): Index in the line of the character where the error was found.
    """

    description: str = "an error"

    def __init__(self, position: int, detail: str | None = None) -> None:
        self.position = position
        self.detail = detail
        message = f"{self.description} at position {position}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)

    def format_message(self, line: str) -> str:
        """Builds the user-facing message for this error.

        Args:
            line (str): The prepared line the error was detected in.

        Returns:
            str: The description followed by the line up to and including the fault.
        """
        return (
            f"There's {self.description} detected at the end of this text: "
            f"{line[: self.position + 1]}"
        )


class MissingExpressionError(RomanCalcError):
    """An expression or parenthesized group is empty."""

    description = "a missing expression"


class InvalidExpressionError(RomanCalcError):
    """A parenthesized group starts with an operator."""

    description = "an invalid expression"


class InvalidCharacterError(RomanCalcError):
    """An unknown character, or a numeral letter right after a literal."""

    description = "an invalid character"


class IncompleteExpressionError(RomanCalcError):
    """An ender appeared where an operator or the matching terminator was expected."""

    description = "an incomplete expression"


class MissingOperatorError(RomanCalcError):
    description = "a missing operator"


class MissingOperandError(RomanCalcError):
    description = "a missing operand"


class DivisionByZeroError(RomanCalcError):
    description = "a division by zero"


class ResultOutOfRangeError(RomanCalcError):
    """A literal or intermediate result left [-3999, 3999]."""

    description = "a result out of range"


__all__ = [
    "DivisionByZeroError",
    "IncompleteExpressionError",
    "InvalidCharacterError",
    "InvalidExpressionError",
    "MissingExpressionError",
    "MissingOperandError",
    "MissingOperatorError",
    "ResultOutOfRangeError",
    "RomanCalcError",
]
