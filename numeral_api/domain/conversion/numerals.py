"""
Roman ↔ Arabic numeral conversion.

Both conversions are pure functions over the classical subtractive
notation (I, V, X, L, C, D, M) for values 1-3999. Roman input goes
through three separate stages: character check, grammar check and
decoding. Decoding alone accepts malformed strings such as "IIX", so
it must only ever run on input that passed the grammar check.
"""

import re
from typing import Any

from numeral_api.domain.conversion.entities import ConversionDirection
from numeral_api.domain.conversion.errors import (
    InvalidCharactersError,
    InvalidFormatError,
    InvalidGrammarError,
    InvalidInputError,
    OutOfRangeError,
)

MIN_VALUE = 1
MAX_VALUE = 3999

# Ordered largest to smallest, subtractive pairs included.
ROMAN_TABLE: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

SYMBOL_VALUES: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

DIGITS_PATTERN = re.compile(r"[0-9]+")
ROMAN_CHARS_PATTERN = re.compile(r"[IVXLCDM]+")
ROMAN_CHARS_ANY_CASE_PATTERN = re.compile(r"[IVXLCDM]+", re.IGNORECASE)
CANONICAL_ROMAN_PATTERN = re.compile(
    r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})"
)


def _check_range(value: Any, number: int) -> None:
    if not (MIN_VALUE <= number <= MAX_VALUE):
        raise OutOfRangeError(value, number)


def parse_arabic(value: Any) -> int:
    """Parse a textual or numeric Arabic value into an int in 1-3999.

    Args:
        value: An int, an integral float, or a string of decimal digits
            optionally surrounded by whitespace.

    Returns:
        The parsed integer.

    Raises:
        InvalidInputError: If value is None.
        InvalidFormatError: If value is not made of decimal digits only.
        OutOfRangeError: If the parsed integer is outside 1-3999.
    """
    if value is None:
        raise InvalidInputError(value)

    if isinstance(value, bool):
        raise InvalidFormatError(value)
    if isinstance(value, int):
        if value > MAX_VALUE:
            raise OutOfRangeError(value)
        text = str(value)
    elif isinstance(value, float):
        if not value.is_integer():
            raise InvalidFormatError(value)
        text = str(int(value))
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise InvalidFormatError(value)

    if not DIGITS_PATTERN.fullmatch(text):
        raise InvalidFormatError(value)

    # int() refuses digit strings past sys.get_int_max_str_digits(), zeros included
    significant = text.lstrip("0") or "0"
    if len(significant) > len(str(MAX_VALUE)):
        raise OutOfRangeError(value)

    number = int(significant)
    _check_range(value, number)
    return number


def arabic_to_roman(value: Any) -> str:
    """Convert an Arabic value to its canonical Roman numeral.

    Greedy over ROMAN_TABLE: each entry is emitted as many times as it
    fits before moving on to the next one.

    Raises:
        InvalidInputError, InvalidFormatError, OutOfRangeError: See parse_arabic.
    """
    remaining = parse_arabic(value)

    parts: list[str] = []
    for amount, symbol in ROMAN_TABLE:
        while remaining >= amount:
            parts.append(symbol)
            remaining -= amount
    return "".join(parts)


def normalize_roman(text: Any) -> str:
    """Trim and upper-case a Roman numeral candidate.

    Raises:
        InvalidInputError: If text is not a non-empty string.
    """
    if not isinstance(text, str):
        raise InvalidInputError(text)
    normalized = text.strip().upper()
    if not normalized:
        raise InvalidInputError(text)
    return normalized


def roman_to_arabic(text: Any) -> int:
    """Convert a Roman numeral to an integer.

    Input is case-insensitive and surrounding whitespace is ignored.

    Args:
        text: The Roman numeral, e.g. "XIV" or " mcmxciv ".

    Returns:
        The decoded integer in 1-3999.

    Raises:
        InvalidInputError: If text is missing, not a string, or empty.
        InvalidCharactersError: If text has symbols outside I,V,X,L,C,D,M.
        InvalidGrammarError: If text is not a canonical numeral.
        OutOfRangeError: If the decoded value is outside 1-3999.
    """
    numeral = normalize_roman(text)

    if not ROMAN_CHARS_PATTERN.fullmatch(numeral):
        raise InvalidCharactersError(text)

    if not CANONICAL_ROMAN_PATTERN.fullmatch(numeral):
        raise InvalidGrammarError(text)

    total = 0
    for index, symbol in enumerate(numeral):
        current = SYMBOL_VALUES[symbol]
        following = (
            SYMBOL_VALUES[numeral[index + 1]] if index + 1 < len(numeral) else 0
        )
        if current < following:
            total -= current
        else:
            total += current

    _check_range(text, total)
    return total


def detect_direction(value: Any) -> ConversionDirection:
    """Decide which conversion applies to an arbitrary input value.

    Strings made only of Roman symbols (any case) go to Roman → Arabic;
    everything else goes to Arabic → Roman.

    Raises:
        InvalidInputError: If value is None, empty or whitespace-only.
    """
    if value is None:
        raise InvalidInputError(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            raise InvalidInputError(value)
        if ROMAN_CHARS_ANY_CASE_PATTERN.fullmatch(stripped):
            return ConversionDirection.ROMAN_TO_ARABIC
    return ConversionDirection.ARABIC_TO_ROMAN
