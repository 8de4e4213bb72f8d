"""
Domain-specific errors for the conversion bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Any


class NumeralDomainError(Exception):
    """Base error for all conversion domain errors.

    Attributes:
        message: Human-readable description of the failure.
        value: The offending input, echoed back to the caller.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)


class InvalidInputError(NumeralDomainError):
    """Raised when a value is missing, null, of the wrong type, or empty."""

    def __init__(self, value: Any = None, message: str | None = None) -> None:
        super().__init__(message or "A valid numeral must be provided", value)


class MissingFieldError(InvalidInputError):
    """Raised when a required request field or query parameter is absent.

    Carries an example of a well-formed request so clients can
    correct the call.
    """

    def __init__(
        self,
        field: str,
        example: Any,
        value: Any = None,
        message: str | None = None,
    ) -> None:
        super().__init__(value, message or f'Field "{field}" is required')
        self.field = field
        self.example = example


class InvalidFormatError(NumeralDomainError):
    """Raised when an Arabic input contains anything other than digits."""

    def __init__(self, value: Any) -> None:
        super().__init__("A valid number must be provided (digits only)", value)


class InvalidCharactersError(NumeralDomainError):
    """Raised when a Roman input contains characters outside I,V,X,L,C,D,M."""

    def __init__(self, value: Any) -> None:
        super().__init__("The Roman numeral contains invalid characters", value)


class InvalidGrammarError(NumeralDomainError):
    """Raised when a Roman input uses disallowed ordering or repetition."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            "The Roman numeral has an invalid format "
            "(wrong order or combination of symbols)",
            value,
        )


class OutOfRangeError(NumeralDomainError):
    """Raised when a parsed or decoded value falls outside 1-3999.

    ``number`` is None when the value was too large to parse at all.
    """

    def __init__(self, value: Any, number: int | None = None) -> None:
        message = "The number must be between 1 and 3999"
        if number is not None:
            message = f"{message} (got {number})"
        super().__init__(message, value)
        self.number = number
