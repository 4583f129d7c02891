"""Response validation routes."""

import structlog
from fastapi import APIRouter, HTTPException

from labpages_core.errors import UnknownEndpointError
from labpages_core.schemas import ValidationVerdict
from labpages_core.validation import validate

from app.schemas.api import ValidateRequest

router = APIRouter()
logger = structlog.get_logger()


@router.post("/validate", response_model=ValidationVerdict)
async def validate_response(payload: ValidateRequest) -> ValidationVerdict:
    """Validate a response body against its endpoint's rules."""
    try:
        verdict = validate(payload.endpoint, payload.raw_json_text)
    except UnknownEndpointError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    logger.info(
        "response_validated",
        endpoint=verdict.endpoint.value,
        is_valid=verdict.is_valid,
        errors=len(verdict.errors),
    )
    return verdict
