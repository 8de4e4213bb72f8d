"""
Use case: Convert a value in whichever direction its shape calls for.

Input: AutoConvertCommand (value)
Output: ConversionResult
Side effects: None.
Failure cases: any conversion domain error.
"""

import logging

from numeral_api.application.conversion.convert_arabic_to_roman import (
    ConvertArabicToRomanUseCase,
)
from numeral_api.application.conversion.convert_roman_to_arabic import (
    ConvertRomanToArabicUseCase,
)
from numeral_api.application.conversion.dtos import (
    ArabicToRomanCommand,
    AutoConvertCommand,
    ConversionResult,
    RomanToArabicCommand,
)
from numeral_api.domain.conversion.entities import ConversionDirection
from numeral_api.domain.conversion.numerals import detect_direction

logger = logging.getLogger(__name__)


class AutoConvertUseCase:
    """Detects the conversion direction and delegates to the matching use case.

    Values that are strings of Roman symbols go Roman → Arabic, all
    other values go Arabic → Roman. Empty values are rejected before
    either converter runs.
    """

    def __init__(
        self,
        arabic_to_roman: ConvertArabicToRomanUseCase,
        roman_to_arabic: ConvertRomanToArabicUseCase,
    ) -> None:
        self._arabic_to_roman = arabic_to_roman
        self._roman_to_arabic = roman_to_arabic

    def execute(self, command: AutoConvertCommand) -> ConversionResult:
        """Run the auto-detecting conversion.

        Raises:
            InvalidInputError: If the value is null, empty or blank.
            NumeralDomainError: Whatever the selected converter raises.
        """
        direction = detect_direction(command.value)
        logger.debug("Detected direction=%s", direction.value)

        if direction is ConversionDirection.ROMAN_TO_ARABIC:
            return self._roman_to_arabic.execute(
                RomanToArabicCommand(value=command.value)
            )
        return self._arabic_to_roman.execute(
            ArabicToRomanCommand(value=command.value)
        )
