"""
Lexical analyzer for the Roman numeral desk calculator.

Converts one prepared input line into a list of tokens. A prepared line is
upper-case, trimmed, has any trailing "=" removed and ends with one sentinel
blank, so lookahead past a literal always finds a character.

Classes:
    TokenBand: Three-way classification of token kinds used by the evaluator.
    TokenKind: The kinds of token a line can contain.
    Token: A single token with its kind, end position and literal value.
    Lexer: Scans a line and produces tokens.

Recognizes:
    - Numeral literals (letters M D C L X V I, or O alone for zero)
    - Operators + - * / and ** (exponent)
    - Parentheses
    - Blanks, which are skipped

Raises:
    InvalidCharacterError: On an unknown character, or when a numeral letter
        directly follows a complete literal (e.g. "IIII", "VV", "IC", "OI").

Example:
    >>> tokenize("II + III ")
    [Token(INTEGER_LITERAL, 1, 2), Token(ADD, 3), Token(INTEGER_LITERAL, 7, 3), Token(END_OF_LINE, 8)]

Exports:
    - TokenBand
    - TokenKind
    - Token
    - Lexer
    - tokenize
"""

import logging
from dataclasses import dataclass
from enum import Enum

from romancalc.roman_constants import NUMERAL_LETTERS
from romancalc.roman_errors import InvalidCharacterError
from romancalc.roman_numerals import decode

logger = logging.getLogger(__name__)


class TokenBand(Enum):
    """Disjoint groups of token kinds.

    ENDER kinds can terminate an expression, OPERAND_START kinds can begin an
    operand and OPERATOR kinds combine the running value with the next operand.
    """

    ENDER = "ender"
    OPERAND_START = "operand_start"
    OPERATOR = "operator"


class TokenKind(Enum):
    END_OF_LINE = "END_OF_LINE"
    RIGHT_PAREN = "RIGHT_PAREN"
    LEFT_PAREN = "LEFT_PAREN"
    INTEGER_LITERAL = "INTEGER_LITERAL"
    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"
    EXPONENT = "EXPONENT"

    @property
    def band(self) -> TokenBand:
        return _KIND_BANDS[self]

    @property
    def is_ender(self) -> bool:
        return self.band is TokenBand.ENDER

    @property
    def is_operand_start(self) -> bool:
        return self.band is TokenBand.OPERAND_START

    @property
    def is_operator(self) -> bool:
        return self.band is TokenBand.OPERATOR


_KIND_BANDS: dict[TokenKind, TokenBand] = {
    TokenKind.END_OF_LINE: TokenBand.ENDER,
    TokenKind.RIGHT_PAREN: TokenBand.ENDER,
    TokenKind.LEFT_PAREN: TokenBand.OPERAND_START,
    TokenKind.INTEGER_LITERAL: TokenBand.OPERAND_START,
    TokenKind.ADD: TokenBand.OPERATOR,
    TokenKind.SUBTRACT: TokenBand.OPERATOR,
    TokenKind.MULTIPLY: TokenBand.OPERATOR,
    TokenKind.DIVIDE: TokenBand.OPERATOR,
    TokenKind.EXPONENT: TokenBand.OPERATOR,
}

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUBTRACT,
    "/": TokenKind.DIVIDE,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}


@dataclass(frozen=True)
class Token:
    """Represents a single lexical token.

    Attributes:
        kind (TokenKind): The token's kind.
        end_position (int): Index in the line of the token's last character,
            used to point error messages at the fault.
        integer_value (int | None): The literal's value; None for other kinds.
    """

    kind: TokenKind
    end_position: int
    integer_value: int | None = None

    def __repr__(self) -> str:
        if self.integer_value is None:
            return f"Token({self.kind.name}, {self.end_position})"
        return f"Token({self.kind.name}, {self.end_position}, {self.integer_value})"


def _is_numeral_letter(ch: str) -> bool:
    return ch != "" and ch in NUMERAL_LETTERS


class Lexer:
    """Lexical analyzer for one calculator line.

    Attributes:
        line (str): The prepared line being scanned.
        position (int): Index of the next unread character.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        self.position = 0

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` from the current position, or "" past the end."""
        index = self.position + offset
        if index < 0 or index >= len(self.line):
            return ""
        return self.line[index]

    def advance(self) -> str:
        char = self.line[self.position]
        self.position += 1
        return char

    def end_of_line(self) -> bool:
        return self.position >= len(self.line)

    def skip_blanks(self) -> None:
        while self.peek() == " ":
            self.advance()

    def read_numeral(self) -> Token:
        """Reads one maximal numeral literal at the current position.

        Raises:
            InvalidCharacterError: If a numeral letter follows the literal.
        """
        start = self.position
        value, end = decode(self.line, start)
        self.position = end
        if _is_numeral_letter(self.peek()):
            raise InvalidCharacterError(end, "numeral letter after a complete literal")
        return Token(TokenKind.INTEGER_LITERAL, end - 1, value)

    def read_symbol(self) -> Token:
        """Reads an operator or parenthesis at the current position.

        Raises:
            InvalidCharacterError: If the character is not part of the vocabulary.
        """
        ch = self.peek()
        if ch == "*":
            if self.peek(1) == "*":
                self.advance()
                self.advance()
                return Token(TokenKind.EXPONENT, self.position - 1)
            self.advance()
            return Token(TokenKind.MULTIPLY, self.position - 1)
        if ch in SINGLE_CHAR_TOKENS:
            self.advance()
            return Token(SINGLE_CHAR_TOKENS[ch], self.position - 1)
        raise InvalidCharacterError(self.position, f"unexpected {ch!r}")

    def next_token(self) -> Token:
        """Consumes and returns the next token.

        Returns END_OF_LINE, positioned at the line's last character, once the
        line is exhausted.
        """
        self.skip_blanks()
        if self.end_of_line():
            return Token(TokenKind.END_OF_LINE, len(self.line) - 1)
        if _is_numeral_letter(self.peek()):
            return self.read_numeral()
        return self.read_symbol()

    def tokenize(self) -> list[Token]:
        """Scans the rest of the line.

        Returns:
            list[Token]: The tokens in order, ending with exactly one END_OF_LINE.
        """
        tokens: list[Token] = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.kind is TokenKind.END_OF_LINE:
                break
        logger.debug("Tokenized %r into %s", self.line, tokens)
        return tokens


def tokenize(line: str) -> list[Token]:
    return Lexer(line).tokenize()


__all__ = ["Lexer", "Token", "TokenBand", "TokenKind", "tokenize"]
