"""
Interactive shell for the Roman numeral desk calculator.

Reads one line at a time, evaluates it and prints the result as a Roman
numeral and an Arabic integer. The previous line's result is kept in a
`LineSession` so that a line starting with an operator continues from it.

Functions:
    normalize_line(raw) -> str
    prepare_line(line) -> str
    is_quit_directive(line) -> bool
    calculate(line, previous_result=0) -> int
    format_result(value, used_previous=False) -> str
    handle_line(raw, session) -> LineOutcome
    start_repl(banner=True, prompt="") -> None
"""

import logging
from dataclasses import dataclass

from romancalc.roman_constants import (
    BANNER,
    DIGIT_ZERO_MESSAGE,
    EMPTY_LINE_MESSAGE,
    GOODBYE_MESSAGE,
    MESSAGE_PREFIX,
    PREVIOUS_RESULT_NOTE,
    QUIT_WORDS,
    RESULT_MARKER,
    SENTINEL,
)
from romancalc.roman_errors import RomanCalcError
from romancalc.roman_evaluator import evaluate
from romancalc.roman_lexer import tokenize
from romancalc.roman_numerals import encode

logger = logging.getLogger(__name__)


@dataclass
class LineSession:
    """State carried from one line to the next.

    Attributes:
        previous_result (int): Result of the last line that evaluated without error.
    """

    previous_result: int = 0


@dataclass(frozen=True)
class LineOutcome:
    """What the shell should do after one input line.

    Attributes:
        message (str): Text to show the user, without the "[] " prefix.
        quit (bool): True when the line asked to end the session.
        value (int | None): The evaluated result, if the line evaluated.
        used_previous (bool): True when the line started with an operator.
        error (RomanCalcError | None): The error that rejected the line, if any.
    """

    message: str
    quit: bool = False
    value: int | None = None
    used_previous: bool = False
    error: RomanCalcError | None = None


def normalize_line(raw: str) -> str:
    return raw.upper().strip()


def prepare_line(line: str) -> str:
    """Drops one trailing "=" and appends the sentinel blank the lexer expects."""
    if line.endswith(RESULT_MARKER):
        line = line[:-1]
    return line + SENTINEL


def is_quit_directive(line: str) -> bool:
    return any(word in line for word in QUIT_WORDS)


def calculate(line: str, previous_result: int = 0) -> int:
    """Tokenizes and evaluates a prepared line.

    Raises:
        RomanCalcError: If the line cannot be tokenized or evaluated.
    """
    return evaluate(tokenize(line), previous_result)


def format_result(value: int, used_previous: bool = False) -> str:
    note = PREVIOUS_RESULT_NOTE if used_previous else ""
    return f"Result{note}: Roman {encode(value)} (Arabic {value})."


def handle_line(raw: str, session: LineSession) -> LineOutcome:
    """Processes one raw input line against the session.

    The session is updated only when the line evaluates without error.

    Args:
        raw (str): The line as typed.
        session (LineSession): State carried across lines.

    Returns:
        LineOutcome: The message to show and whether to quit.
    """
    line = normalize_line(raw)
    if line in ("", RESULT_MARKER):
        return LineOutcome(EMPTY_LINE_MESSAGE)
    if "0" in line:
        return LineOutcome(DIGIT_ZERO_MESSAGE)

    line = prepare_line(line)
    if is_quit_directive(line):
        return LineOutcome(GOODBYE_MESSAGE, quit=True)

    try:
        tokens = tokenize(line)
        value = evaluate(tokens, session.previous_result)
    except RomanCalcError as e:
        logger.info("Rejected %r: %s", line, e)
        return LineOutcome(e.format_message(line), error=e)

    used_previous = tokens[0].kind.is_operator
    session.previous_result = value
    logger.debug("Previous result is now %d", value)
    return LineOutcome(
        format_result(value, used_previous), value=value, used_previous=used_previous
    )


def print_message(text: str) -> None:
    print(f"{MESSAGE_PREFIX}{text}")


def print_banner() -> None:
    for text in BANNER:
        print_message(text)


def start_repl(banner: bool = True, prompt: str = "") -> None:
    if banner:
        print_banner()
    session = LineSession()

    while True:
        try:
            raw = input(prompt)
        except (KeyboardInterrupt, EOFError):
            print()
            print_message(GOODBYE_MESSAGE)
            break
        outcome = handle_line(raw, session)
        print_message(outcome.message)
        if outcome.quit:
            break


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
