"""
Use case: Convert an Arabic value to its Roman numeral.

Input: ArabicToRomanCommand (value)
Output: ConversionResult
Side effects: None.
Failure cases: InvalidInputError, InvalidFormatError, OutOfRangeError.
"""

import logging

from numeral_api.application.conversion.dtos import (
    ArabicToRomanCommand,
    ConversionResult,
)
from numeral_api.domain.conversion.entities import ConversionDirection
from numeral_api.domain.conversion.numerals import arabic_to_roman, parse_arabic

logger = logging.getLogger(__name__)


class ConvertArabicToRomanUseCase:
    """Parses the Arabic value and renders it as a canonical numeral."""

    def execute(self, command: ArabicToRomanCommand) -> ConversionResult:
        """Run the Arabic → Roman conversion.

        Args:
            command: The request carrying the raw Arabic value.

        Returns:
            The parsed number alongside its Roman numeral.

        Raises:
            InvalidFormatError: If the value is not made of digits only.
            OutOfRangeError: If the value is outside 1-3999.
        """
        arabic = parse_arabic(command.value)
        roman = arabic_to_roman(arabic)

        logger.debug("Converted arabic=%d to roman=%s", arabic, roman)

        return ConversionResult(
            direction=ConversionDirection.ARABIC_TO_ROMAN,
            input=arabic,
            arabic=arabic,
            roman=roman,
        )
