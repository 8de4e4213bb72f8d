"""
Value types for the conversion bounded context.

They contain no framework imports and no IO operations.
"""

from enum import Enum


class ConversionDirection(Enum):
    """Direction taken by a conversion."""

    ROMAN_TO_ARABIC = "roman_to_arabic"
    ARABIC_TO_ROMAN = "arabic_to_roman"
