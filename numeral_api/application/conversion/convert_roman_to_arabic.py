"""
Use case: Convert a Roman numeral to its Arabic value.

Input: RomanToArabicCommand (value)
Output: ConversionResult
Side effects: None.
Failure cases: InvalidInputError, InvalidCharactersError,
InvalidGrammarError, OutOfRangeError.
"""

import logging

from numeral_api.application.conversion.dtos import (
    ConversionResult,
    RomanToArabicCommand,
)
from numeral_api.domain.conversion.entities import ConversionDirection
from numeral_api.domain.conversion.numerals import normalize_roman, roman_to_arabic

logger = logging.getLogger(__name__)


class ConvertRomanToArabicUseCase:
    """Validates and decodes a Roman numeral."""

    def execute(self, command: RomanToArabicCommand) -> ConversionResult:
        """Run the Roman → Arabic conversion.

        Args:
            command: The request carrying the raw numeral.

        Returns:
            The normalized numeral alongside its Arabic value.
        """
        arabic = roman_to_arabic(command.value)
        roman = normalize_roman(command.value)

        logger.debug("Converted roman=%s to arabic=%d", roman, arabic)

        return ConversionResult(
            direction=ConversionDirection.ROMAN_TO_ARABIC,
            input=roman,
            arabic=arabic,
            roman=roman,
        )
