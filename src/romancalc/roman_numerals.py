"""
Numeral codec for the Roman numeral desk calculator.

Converts between integers in [-3999, 3999] and their Roman numeral spelling.
The letter O stands alone for zero; it never combines with other letters.

Decoding works one decimal place at a time, from thousands down to units. For
each place a digit group is one of:
    - nine: one letter followed by the next place's one letter (IX, XC, CM)
    - four: one letter followed by the five letter (IV, XL, CD)
    - five letter followed by zero to three one letters (V, VIII, LXX, DCCC)
    - one to three one letters (I, III, XX, MMM)
Thousands have no five letter and no nine or four form.

Functions:
    decode_digit_group(text, position, place) -> tuple[int, int]
    decode(text, position=0) -> tuple[int, int]
    parse_numeral(text) -> int
    encode(value) -> str

Example:
    >>> encode(1994)
    'MCMXCIV'
    >>> decode("MCMXCIV + I")
    (1994, 7)
"""

from romancalc.roman_constants import (
    FIVE_LETTERS,
    MAX_VALUE,
    MIN_VALUE,
    NUMERAL_LETTERS,
    ONE_LETTERS,
    PLACE_VALUES,
    THOUSANDS,
    ZERO_SYMBOL,
)
from romancalc.roman_errors import InvalidCharacterError


def _char_at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def decode_digit_group(text: str, position: int, place: int) -> tuple[int, int]:
    """Decodes the digit group for one decimal place starting at `position`.

    Args:
        text (str): Upper-case text containing the numeral.
        position (int): Index where the group may start.
        place (int): Decimal place, 0 for units up to 3 for thousands.

    Returns:
        tuple[int, int]: The group's value and the index just past it. When no
        group of this place starts at `position`, returns (0, position).
    """
    one = ONE_LETTERS[place]
    five = FIVE_LETTERS[place]
    unit = PLACE_VALUES[place]
    current = _char_at(text, position)
    following = _char_at(text, position + 1)

    if place < THOUSANDS and current == one:
        if following == ONE_LETTERS[place + 1]:
            return 9 * unit, position + 2
        if following == five:
            return 4 * unit, position + 2

    value = 0
    if five is not None and current == five:
        value = 5 * unit
        position += 1

    count = 0
    while count < 3 and _char_at(text, position) == one:
        count += 1
        position += 1
    return value + count * unit, position


def decode(text: str, position: int = 0) -> tuple[int, int]:
    """Decodes one maximal numeral literal starting at `position`.

    Whatever follows the literal is left for the caller to inspect; a numeral
    letter there means the spelling was not canonical.

    Returns:
        tuple[int, int]: The literal's value and the index just past it.
    """
    if _char_at(text, position) == ZERO_SYMBOL:
        return 0, position + 1

    value = 0
    for place in range(THOUSANDS, -1, -1):
        group, position = decode_digit_group(text, position, place)
        value += group
    return value, position


def parse_numeral(text: str) -> int:
    """Converts a complete numeral string, optionally negative, to an integer.

    Input is case-insensitive and surrounding whitespace is ignored.

    Raises:
        InvalidCharacterError: If the text is not exactly one canonical numeral.
    """
    text = text.strip().upper()
    start = 1 if text.startswith("-") else 0
    if _char_at(text, start) == "" or _char_at(text, start) not in NUMERAL_LETTERS:
        raise InvalidCharacterError(start, f"not a Roman numeral: {text!r}")

    if start and _char_at(text, start) == ZERO_SYMBOL:
        raise InvalidCharacterError(0, "zero has no sign")

    value, end = decode(text, start)
    if end != len(text):
        raise InvalidCharacterError(end, f"not a Roman numeral: {text!r}")
    return -value if start else value


def _encode_digit(digit: int, place: int) -> str:
    one = ONE_LETTERS[place]
    if digit == 9:
        return one + ONE_LETTERS[place + 1]
    if digit == 4:
        return one + (FIVE_LETTERS[place] or "")
    five = FIVE_LETTERS[place] if digit >= 5 else None
    return (five or "") + one * (digit % 5)


def encode(value: int) -> str:
    """Converts an integer to its Roman numeral spelling.

    Args:
        value (int): Integer in [-3999, 3999].

    Returns:
        str: "O" for zero, otherwise the canonical numeral with a leading "-"
        for negative values.

    Raises:
        ValueError: If the value is outside [-3999, 3999].
    """
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ValueError(f"{value} is outside [{MIN_VALUE}, {MAX_VALUE}]")
    if value == 0:
        return ZERO_SYMBOL

    digits = str(abs(value))
    parts = ["-"] if value < 0 else []
    for offset, digit in enumerate(digits):
        parts.append(_encode_digit(int(digit), len(digits) - 1 - offset))
    return "".join(parts)


__all__ = ["decode", "decode_digit_group", "encode", "parse_numeral"]
