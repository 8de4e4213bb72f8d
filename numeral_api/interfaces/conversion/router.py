"""
FastAPI router for the conversion bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Query, Request

from numeral_api.application.conversion.auto_convert import AutoConvertUseCase
from numeral_api.application.conversion.batch_convert import BatchConvertUseCase
from numeral_api.application.conversion.convert_arabic_to_roman import (
    ConvertArabicToRomanUseCase,
)
from numeral_api.application.conversion.convert_roman_to_arabic import (
    ConvertRomanToArabicUseCase,
)
from numeral_api.application.conversion.dtos import (
    ArabicToRomanCommand,
    AutoConvertCommand,
    BatchConvertCommand,
    BatchItemResult,
    ConversionResult,
    RomanToArabicCommand,
)
from numeral_api.domain.conversion.errors import MissingFieldError
from numeral_api.interfaces.conversion.dependencies import (
    get_arabic_to_roman_use_case,
    get_auto_convert_use_case,
    get_batch_convert_use_case,
    get_roman_to_arabic_use_case,
)
from numeral_api.interfaces.conversion.schemas import (
    BatchItem,
    BatchRequest,
    BatchResponse,
    ConversionResponse,
    ConvertRequest,
    ConvertResponse,
    ErrorResponse,
)
from numeral_api.shared.security.rate_limiting import default_rate_limit, limiter
from numeral_api.shared.time import utc_timestamp

A2R_EXAMPLE = "/api/a2r?arabic=14"
R2A_EXAMPLE = "/api/r2a?roman=XIV"
CONVERT_EXAMPLE = {"value": "XIV"}
BATCH_EXAMPLE = {"values": ["XIV", 14, "IX"]}

router = APIRouter(prefix="/api", tags=["conversion"])


def _conversion_response(result: ConversionResult) -> ConversionResponse:
    return ConversionResponse(
        input=result.input,
        arabic=result.arabic,
        roman=result.roman,
        timestamp=utc_timestamp(),
    )


def _batch_item(item: BatchItemResult) -> BatchItem:
    if item.result is None:
        return BatchItem(status="error", input=item.input, message=item.error)
    return BatchItem(
        status="success",
        input=item.result.input,
        roman=item.result.roman,
        arabic=item.result.arabic,
    )


@router.get(
    "/a2r",
    response_model=ConversionResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Arabic to Roman",
    description="Convert an Arabic number between 1 and 3999 to a Roman numeral.",
)
@limiter.limit(default_rate_limit)
def arabic_to_roman(
    request: Request,
    arabic: str | None = Query(default=None, description="Number from 1 to 3999"),
    use_case: ConvertArabicToRomanUseCase = Depends(get_arabic_to_roman_use_case),
) -> ConversionResponse:
    """Convert the ``arabic`` query parameter to a Roman numeral."""
    if not arabic:
        raise MissingFieldError("arabic", A2R_EXAMPLE, arabic)
    result = use_case.execute(ArabicToRomanCommand(value=arabic))
    return _conversion_response(result)


@router.get(
    "/r2a",
    response_model=ConversionResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Roman to Arabic",
    description="Convert a canonical Roman numeral (I to MMMCMXCIX) to a number.",
)
@limiter.limit(default_rate_limit)
def roman_to_arabic(
    request: Request,
    roman: str | None = Query(default=None, description="Roman numeral, e.g. XIV"),
    use_case: ConvertRomanToArabicUseCase = Depends(get_roman_to_arabic_use_case),
) -> ConversionResponse:
    """Convert the ``roman`` query parameter to an Arabic number."""
    if not roman:
        raise MissingFieldError("roman", R2A_EXAMPLE, roman)
    result = use_case.execute(RomanToArabicCommand(value=roman))
    return _conversion_response(result)


@router.post(
    "/convert",
    response_model=ConvertResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Auto-detecting conversion",
    description=(
        "Convert a value in the direction its shape calls for: strings of "
        "Roman symbols become numbers, everything else becomes a numeral."
    ),
)
@limiter.limit(default_rate_limit)
def convert(
    request: Request,
    payload: ConvertRequest,
    use_case: AutoConvertUseCase = Depends(get_auto_convert_use_case),
) -> ConvertResponse:
    """Convert ``value`` after detecting its direction."""
    if payload.value is None or payload.value == "":
        raise MissingFieldError("value", CONVERT_EXAMPLE, payload.value)
    result = use_case.execute(AutoConvertCommand(value=payload.value))
    return ConvertResponse(
        conversion=result.direction.value,
        input=result.input,
        arabic=result.arabic,
        roman=result.roman,
        timestamp=utc_timestamp(),
    )


@router.post(
    "/batch",
    response_model=BatchResponse,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}},
    summary="Batch conversion",
    description="Convert several values; each one succeeds or fails on its own.",
)
@limiter.limit(default_rate_limit)
def batch(
    request: Request,
    payload: BatchRequest,
    use_case: BatchConvertUseCase = Depends(get_batch_convert_use_case),
) -> BatchResponse:
    """Convert every element of ``values`` independently."""
    if not isinstance(payload.values, list) or not payload.values:
        raise MissingFieldError(
            "values",
            BATCH_EXAMPLE,
            payload.values,
            'Field "values" must be a non-empty array',
        )
    result = use_case.execute(BatchConvertCommand(values=payload.values))
    return BatchResponse(
        status="success",
        total=result.total,
        results=[_batch_item(item) for item in result.items],
        timestamp=utc_timestamp(),
    )
