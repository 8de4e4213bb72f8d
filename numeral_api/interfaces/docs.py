"""
API documentation router.

Serves a static, human-oriented description of the conversion
endpoints at the API root. The same endpoint list is advertised
in 404 responses.
"""

from fastapi import APIRouter

from numeral_api.core.config import settings
from numeral_api.interfaces.conversion.router import (
    A2R_EXAMPLE,
    BATCH_EXAMPLE,
    CONVERT_EXAMPLE,
    R2A_EXAMPLE,
)
from numeral_api.interfaces.conversion.schemas import ApiDocsResponse
from numeral_api.shared.time import utc_timestamp

AVAILABLE_ENDPOINTS = ["/api", "/api/r2a", "/api/a2r", "/api/convert", "/api/batch"]

ENDPOINT_DOCS = {
    "GET /api/r2a": {
        "description": "Convert a Roman numeral to an Arabic number",
        "params": {"roman": "Roman numeral (e.g. XIV)"},
        "example": R2A_EXAMPLE,
    },
    "GET /api/a2r": {
        "description": "Convert an Arabic number to a Roman numeral",
        "params": {"arabic": "Number from 1 to 3999 (e.g. 14)"},
        "example": A2R_EXAMPLE,
    },
    "POST /api/convert": {
        "description": "Automatic conversion based on the value's shape",
        "body": {"value": "Roman numeral or Arabic number"},
        "example": CONVERT_EXAMPLE,
    },
    "POST /api/batch": {
        "description": "Convert several values at once",
        "body": {"values": "Array of Roman numerals and/or Arabic numbers"},
        "example": {"values": [*BATCH_EXAMPLE["values"], 100]},
    },
}

router = APIRouter(prefix="/api", tags=["docs"])


@router.get(
    "",
    response_model=ApiDocsResponse,
    summary="API documentation",
    description="Lists the available conversion endpoints.",
)
def api_docs() -> ApiDocsResponse:
    """Return the static endpoint documentation."""
    return ApiDocsResponse(
        name=settings.project_name,
        version=settings.version,
        endpoints=ENDPOINT_DOCS,
        status="online",
        timestamp=utc_timestamp(),
    )
