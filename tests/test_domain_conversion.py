"""
Tests for the conversion domain layer.

Tests the numeral conversion functions and error classes in isolation.
No external dependencies or IO required.
"""

import re

import pytest

from numeral_api.domain.conversion import (
    ConversionDirection,
    arabic_to_roman,
    detect_direction,
    normalize_roman,
    parse_arabic,
    roman_to_arabic,
)
from numeral_api.domain.conversion.errors import (
    InvalidCharactersError,
    InvalidFormatError,
    InvalidGrammarError,
    InvalidInputError,
    MissingFieldError,
    NumeralDomainError,
    OutOfRangeError,
)


class TestArabicToRoman:
    """Tests for arabic_to_roman."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (90, "XC"),
            (400, "CD"),
            (900, "CM"),
            (1994, "MCMXCIV"),
            (2024, "MMXXIV"),
            (3888, "MMMDCCCLXXXVIII"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_known_values(self, value: int, expected: str) -> None:
        """Known values convert to their canonical numerals."""
        assert arabic_to_roman(value) == expected

    def test_accepts_digit_strings_with_whitespace(self) -> None:
        """Digit strings are trimmed before parsing."""
        assert arabic_to_roman("  14 ") == "XIV"

    def test_accepts_integral_float(self) -> None:
        """A float with no fractional part is accepted as that integer."""
        assert arabic_to_roman(14.0) == "XIV"

    @pytest.mark.parametrize("value", [0, "0", 4000, "4000", "0000"])
    def test_out_of_range(self, value: object) -> None:
        """Values outside 1-3999 raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            arabic_to_roman(value)

    @pytest.mark.parametrize(
        "value", ["14a", "-5", -5, "1.5", 14.5, "", "   ", "XIV", True, [14], "١٤"]
    )
    def test_invalid_format(self, value: object) -> None:
        """Anything that is not plain decimal digits raises InvalidFormatError."""
        with pytest.raises(InvalidFormatError):
            arabic_to_roman(value)

    def test_none_is_invalid_input(self) -> None:
        """A missing value raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            arabic_to_roman(None)

    def test_canonical_form_for_every_value(self) -> None:
        """No numeral repeats I, X, C or M more than 3 times, nor V, L or D at all."""
        four_repeats = re.compile(r"(IIII|XXXX|CCCC|MMMM)")
        double_fives = re.compile(r"(V.*V|L.*L|D.*D)")
        for number in range(1, 4000):
            numeral = arabic_to_roman(number)
            assert not four_repeats.search(numeral), numeral
            assert not double_fives.search(numeral), numeral


class TestParseArabic:
    """Tests for parse_arabic."""

    def test_returns_int(self) -> None:
        """Parsed values are plain ints."""
        assert parse_arabic("0042") == 42

    def test_error_keeps_original_value(self) -> None:
        """Errors carry the value as received, not the trimmed text."""
        with pytest.raises(OutOfRangeError) as exc_info:
            parse_arabic(" 5000 ")
        assert exc_info.value.value == " 5000 "
        assert exc_info.value.number == 5000

    def test_oversized_digit_string_is_out_of_range(self) -> None:
        """Digit strings longer than int() will parse are still range errors."""
        huge = "1" * 5000
        with pytest.raises(OutOfRangeError) as exc_info:
            parse_arabic(huge)
        assert exc_info.value.value == huge
        assert exc_info.value.number is None

    def test_oversized_int_is_out_of_range(self) -> None:
        """Huge ints are rejected without being converted to text."""
        with pytest.raises(OutOfRangeError):
            parse_arabic(10**5000)

    def test_leading_zeros_do_not_count_towards_length(self) -> None:
        """Zero padding is accepted as long as the value is in range."""
        assert parse_arabic("0" * 5000 + "14") == 14


class TestRomanToArabic:
    """Tests for roman_to_arabic."""

    @pytest.mark.parametrize(
        ("numeral", "expected"),
        [
            ("I", 1),
            ("IV", 4),
            ("IX", 9),
            ("XIV", 14),
            ("XL", 40),
            ("MCMXCIV", 1994),
            ("MMMCMXCIX", 3999),
        ],
    )
    def test_known_numerals(self, numeral: str, expected: int) -> None:
        """Canonical numerals decode to their values."""
        assert roman_to_arabic(numeral) == expected

    def test_case_insensitive(self) -> None:
        """Lower and mixed case input is accepted."""
        assert roman_to_arabic("xiv") == 14
        assert roman_to_arabic("McMxCiV") == 1994

    def test_whitespace_tolerant(self) -> None:
        """Surrounding whitespace is ignored."""
        assert roman_to_arabic(" XIV ") == 14

    @pytest.mark.parametrize(
        "numeral", ["IIII", "VX", "IIV", "MMMM", "IIX", "VV", "LL", "DD", "IC", "XM", "IXIX", "CMCM"]
    )
    def test_invalid_grammar(self, numeral: str) -> None:
        """Non-canonical numerals raise InvalidGrammarError."""
        with pytest.raises(InvalidGrammarError):
            roman_to_arabic(numeral)

    @pytest.mark.parametrize("numeral", ["ABC", "XIV!", "X I V", "14", "XIVZ"])
    def test_invalid_characters(self, numeral: str) -> None:
        """Symbols outside I,V,X,L,C,D,M raise InvalidCharactersError."""
        with pytest.raises(InvalidCharactersError):
            roman_to_arabic(numeral)

    @pytest.mark.parametrize("value", [None, "", "   ", 14, ["XIV"]])
    def test_invalid_input(self, value: object) -> None:
        """Missing, empty and non-string values raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            roman_to_arabic(value)

    def test_round_trip(self) -> None:
        """Every value in range survives a conversion round trip."""
        for number in range(1, 4000):
            assert roman_to_arabic(arabic_to_roman(number)) == number

    def test_normalize_roman(self) -> None:
        """Normalization trims and upper-cases."""
        assert normalize_roman("  mcm ") == "MCM"


class TestDetectDirection:
    """Tests for the dispatch heuristic."""

    @pytest.mark.parametrize("value", ["XIV", "xiv", " mcm "])
    def test_roman_strings(self, value: str) -> None:
        """Strings of Roman symbols go Roman → Arabic."""
        assert detect_direction(value) is ConversionDirection.ROMAN_TO_ARABIC

    @pytest.mark.parametrize("value", [14, "14", "not-a-numeral", 14.0, True])
    def test_everything_else(self, value: object) -> None:
        """All other values go Arabic → Roman."""
        assert detect_direction(value) is ConversionDirection.ARABIC_TO_ROMAN

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_empty_values_rejected_before_dispatch(self, value: object) -> None:
        """Empty values are not routed to either converter."""
        with pytest.raises(InvalidInputError):
            detect_direction(value)


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_all_errors_share_base(self) -> None:
        """Every conversion error derives from NumeralDomainError."""
        for error_cls in (
            InvalidInputError,
            InvalidFormatError,
            InvalidCharactersError,
            InvalidGrammarError,
            OutOfRangeError,
        ):
            assert issubclass(error_cls, NumeralDomainError)

    def test_out_of_range_message_contains_number(self) -> None:
        """OutOfRangeError mentions the rejected number."""
        error = OutOfRangeError("4000", 4000)
        assert "4000" in error.message
        assert error.value == "4000"

    def test_missing_field_error(self) -> None:
        """MissingFieldError names the field and carries an example."""
        error = MissingFieldError("roman", "/api/r2a?roman=XIV")
        assert isinstance(error, InvalidInputError)
        assert error.message == 'Field "roman" is required'
        assert error.example == "/api/r2a?roman=XIV"
