"""Endpoint catalog routes."""

from fastapi import APIRouter, HTTPException

from labpages_core.content import example_response
from labpages_core.errors import UnknownEndpointError
from labpages_core.validation import ENDPOINT_DESCRIPTIONS, resolve_endpoint

from app.schemas.api import EndpointListResponse, EndpointResponse, ExampleResponse

router = APIRouter()


@router.get("/endpoints", response_model=EndpointListResponse)
async def list_endpoints() -> EndpointListResponse:
    """List the endpoints learners implement."""
    return EndpointListResponse(
        endpoints=[
            EndpointResponse(path=endpoint.value, description=description)
            for endpoint, description in ENDPOINT_DESCRIPTIONS.items()
        ]
    )


@router.get("/endpoints/example", response_model=ExampleResponse)
async def get_example(endpoint: str) -> ExampleResponse:
    """Get a valid example response body for an endpoint."""
    try:
        resolved = resolve_endpoint(endpoint)
    except UnknownEndpointError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return ExampleResponse(endpoint=resolved.value, example=example_response(resolved))
