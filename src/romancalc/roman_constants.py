"""
Shared constants for the Roman numeral desk calculator.

Groups:
    - Numeral alphabet and the zero extension letter
    - Valid integer range for literals and results
    - Per decimal place letter tables used by the numeral codec
    - Shell vocabulary (quit words, sentinel) and user-facing messages

Exports:
    - MIN_VALUE, MAX_VALUE
    - ZERO_SYMBOL, NUMERAL_LETTERS
    - PLACE_VALUES, ONE_LETTERS, FIVE_LETTERS, THOUSANDS
    - QUIT_WORDS, SENTINEL, MESSAGE_PREFIX
    - BANNER and the shell messages
"""

MIN_VALUE: int = -3999  # -MMMCMXCIX
MAX_VALUE: int = 3999  # MMMCMXCIX

ZERO_SYMBOL: str = "O"
NUMERAL_LETTERS: str = "MDCLXVI" + ZERO_SYMBOL

# Indexed by decimal place: 0 = units, 1 = tens, 2 = hundreds, 3 = thousands.
PLACE_VALUES: tuple[int, ...] = (1, 10, 100, 1000)
ONE_LETTERS: tuple[str, ...] = ("I", "X", "C", "M")
FIVE_LETTERS: tuple[str | None, ...] = ("V", "L", "D", None)
THOUSANDS: int = 3

QUIT_WORDS: tuple[str, ...] = ("QUIT", "EXIT")
SENTINEL: str = " "
RESULT_MARKER: str = "="
MESSAGE_PREFIX: str = "[] "

BANNER: tuple[str, ...] = (
    "Welcome to the Roman numeral desk calculator!",
    "Any number of times, you can type an expression and Enter",
    "to see the result; type QUIT or EXIT to quit.",
    "You can end a line with = (but the = has no effect).",
    "You can use integers up through MMMCMXCIX (Arabic 3,999).",
    "Unlike the original Roman numerals, you can also",
    "specify zero, by using the LETTER (NOT DIGIT) O.",
    "You can also use lower case, parentheses,",
    "and these operators: +, -, *, /, and ** (exponent).",
    "To achieve the effect of a negative integer,",
    "use O, -, and a positive integer; you MUST include the O.",
    "If you start a line with an operator,",
    "the operator's left operand is the previous line's result.",
    "NO fractions are allowed in expressions or in results.",
)

EMPTY_LINE_MESSAGE: str = "Please type an expression, QUIT, or EXIT."
DIGIT_ZERO_MESSAGE: str = "For zero, specify the LETTER (NOT DIGIT) O."
GOODBYE_MESSAGE: str = "Bye!  Visit again!"
PREVIOUS_RESULT_NOTE: str = " (which uses previous line's result)"

LOG_LEVEL_ENV: str = "ROMANCALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "WARNING"
