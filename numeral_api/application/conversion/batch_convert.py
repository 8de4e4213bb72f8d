"""
Use case: Convert a list of values, each one independently.

Input: BatchConvertCommand (values)
Output: BatchConversionResult
Side effects: None.
Failure cases: InvalidInputError if values is not a non-empty list.
Per-element failures never abort the batch; they are reported
in the element's BatchItemResult.
"""

import logging

from numeral_api.application.conversion.auto_convert import AutoConvertUseCase
from numeral_api.application.conversion.dtos import (
    AutoConvertCommand,
    BatchConversionResult,
    BatchConvertCommand,
    BatchItemResult,
)
from numeral_api.domain.conversion.errors import (
    InvalidInputError,
    NumeralDomainError,
)

logger = logging.getLogger(__name__)


class BatchConvertUseCase:
    """Maps every element of a batch through the auto-detecting conversion."""

    def __init__(self, auto_convert: AutoConvertUseCase) -> None:
        self._auto_convert = auto_convert

    def execute(self, command: BatchConvertCommand) -> BatchConversionResult:
        """Run the batch conversion.

        Args:
            command: The values to convert.

        Returns:
            One item per input value, in input order.

        Raises:
            InvalidInputError: If values is not a non-empty list.
        """
        if not isinstance(command.values, list) or not command.values:
            raise InvalidInputError(
                command.values, 'Field "values" must be a non-empty array'
            )

        items = [self._convert_one(value) for value in command.values]
        result = BatchConversionResult(total=len(items), items=items)

        logger.info(
            "Batch conversion: total=%d, succeeded=%d, failed=%d",
            result.total,
            result.succeeded,
            result.failed,
        )
        return result

    def _convert_one(self, value: object) -> BatchItemResult:
        try:
            converted = self._auto_convert.execute(AutoConvertCommand(value=value))
        except NumeralDomainError as exc:
            return BatchItemResult(input=value, error=exc.message)
        return BatchItemResult(input=value, result=converted)
