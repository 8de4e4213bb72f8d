"""
Pydantic schemas for conversion API requests and responses.

These schemas define the API contract. Request bodies accept any
JSON value for the fields to convert: type and content checks belong
to the domain, which reports them with the conversion error envelope.
No business logic belongs here.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    service: str
    version: str


class ConvertRequest(BaseModel):
    """Request schema for the auto-detecting conversion endpoint.

    Attributes:
        value: A Roman numeral (e.g. "XIV") or an Arabic value (e.g. 14 or "14").
    """

    value: Any = Field(default=None, description="Roman numeral or Arabic number")


class BatchRequest(BaseModel):
    """Request schema for the batch conversion endpoint.

    Attributes:
        values: Non-empty array of Roman numerals and/or Arabic numbers.
    """

    values: Any = Field(default=None, description="Array of values to convert")


class ConversionResponse(BaseModel):
    """Response schema for a single successful conversion."""

    status: Literal["success"] = "success"
    input: int | str
    arabic: int
    roman: str
    timestamp: str


class ConvertResponse(ConversionResponse):
    """Response schema for the auto-detecting conversion endpoint.

    Attributes:
        conversion: Direction taken, "roman_to_arabic" or "arabic_to_roman".
    """

    conversion: Literal["roman_to_arabic", "arabic_to_roman"]


class BatchItem(BaseModel):
    """One element of a batch response.

    Successful items carry roman and arabic, failed items carry message.
    """

    status: Literal["success", "error"]
    input: Any
    roman: str | None = None
    arabic: int | None = None
    message: str | None = None


class BatchResponse(BaseModel):
    """Response schema for the batch conversion endpoint."""

    status: Literal["success"] = "success"
    total: int
    results: list[BatchItem]
    timestamp: str


class ErrorResponse(BaseModel):
    """Error envelope returned with 4xx/5xx responses."""

    status: Literal["error"] = "error"
    message: str
    input: Any = None
    example: Any = None


class ApiDocsResponse(BaseModel):
    """Static documentation payload served at the API root."""

    name: str
    version: str
    endpoints: dict[str, dict[str, Any]]
    status: str
    timestamp: str
