"""
Data Transfer Objects for the conversion application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Any

from numeral_api.domain.conversion.entities import ConversionDirection


@dataclass(frozen=True)
class ArabicToRomanCommand:
    """Input DTO for converting an Arabic value to a Roman numeral.

    Attributes:
        value: Digits as text or a number, as received from the client.
    """

    value: Any


@dataclass(frozen=True)
class RomanToArabicCommand:
    """Input DTO for converting a Roman numeral to an Arabic value.

    Attributes:
        value: The Roman numeral as received from the client.
    """

    value: Any


@dataclass(frozen=True)
class AutoConvertCommand:
    """Input DTO for a conversion whose direction is detected from the value."""

    value: Any


@dataclass(frozen=True)
class BatchConvertCommand:
    """Input DTO for converting several values independently."""

    values: list[Any]


@dataclass(frozen=True)
class ConversionResult:
    """Output DTO for a successful conversion.

    Attributes:
        direction: Which conversion was applied.
        input: The normalized input (int for Arabic, upper-case str for Roman).
        arabic: The Arabic value.
        roman: The canonical Roman numeral.
    """

    direction: ConversionDirection
    input: int | str
    arabic: int
    roman: str


@dataclass(frozen=True)
class BatchItemResult:
    """Outcome of converting one element of a batch.

    Exactly one of ``result`` and ``error`` is set.

    Attributes:
        input: The element as received.
        result: The conversion on success.
        error: The failure message otherwise.
    """

    input: Any
    result: ConversionResult | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.result is not None


@dataclass(frozen=True)
class BatchConversionResult:
    """Output DTO for a batch conversion."""

    total: int
    items: list[BatchItemResult]

    @property
    def succeeded(self) -> int:
        return sum(1 for item in self.items if item.succeeded)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded
