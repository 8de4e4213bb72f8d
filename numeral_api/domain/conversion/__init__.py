"""
Domain layer of the conversion bounded context.

Exposes the two numeral conversion functions and the dispatch
heuristic used by the auto-detecting endpoints.
"""

from numeral_api.domain.conversion.entities import ConversionDirection
from numeral_api.domain.conversion.numerals import (
    MAX_VALUE,
    MIN_VALUE,
    arabic_to_roman,
    detect_direction,
    normalize_roman,
    parse_arabic,
    roman_to_arabic,
)

__all__ = [
    "ConversionDirection",
    "MAX_VALUE",
    "MIN_VALUE",
    "arabic_to_roman",
    "detect_direction",
    "normalize_roman",
    "parse_arabic",
    "roman_to_arabic",
]
