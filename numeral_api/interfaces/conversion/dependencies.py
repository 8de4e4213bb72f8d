"""
Dependency injection for the conversion bounded context.

Provides FastAPI dependency functions that build use cases
via constructor injection. These are the composition root
for the conversion context.
"""

from numeral_api.application.conversion.auto_convert import AutoConvertUseCase
from numeral_api.application.conversion.batch_convert import BatchConvertUseCase
from numeral_api.application.conversion.convert_arabic_to_roman import (
    ConvertArabicToRomanUseCase,
)
from numeral_api.application.conversion.convert_roman_to_arabic import (
    ConvertRomanToArabicUseCase,
)


def get_arabic_to_roman_use_case() -> ConvertArabicToRomanUseCase:
    """Build ConvertArabicToRomanUseCase."""
    return ConvertArabicToRomanUseCase()


def get_roman_to_arabic_use_case() -> ConvertRomanToArabicUseCase:
    """Build ConvertRomanToArabicUseCase."""
    return ConvertRomanToArabicUseCase()


def get_auto_convert_use_case() -> AutoConvertUseCase:
    """Build AutoConvertUseCase with both directional converters."""
    return AutoConvertUseCase(
        arabic_to_roman=get_arabic_to_roman_use_case(),
        roman_to_arabic=get_roman_to_arabic_use_case(),
    )


def get_batch_convert_use_case() -> BatchConvertUseCase:
    """Build BatchConvertUseCase on top of the auto-detecting converter."""
    return BatchConvertUseCase(auto_convert=get_auto_convert_use_case())
