"""Pydantic schemas for API request and response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from labpages_core.schemas import EndpointStatus


class RenderRequest(BaseModel):
    """Payload for rendering lesson markdown."""

    markdown: str
    strict: bool | None = Field(
        None, description="Reject surplus widget markers; defaults to the server setting"
    )


class ValidateRequest(BaseModel):
    """Payload for validating one API response body."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    endpoint: str = Field(..., description="Endpoint identifier, e.g. /accounts")
    raw_json_text: str = Field(..., description="Response body exactly as written")


class EndpointResponse(BaseModel):
    """One endpoint learners implement."""

    method: str = "GET"
    path: str
    description: str


class EndpointListResponse(BaseModel):
    """List response for endpoints."""

    endpoints: list[EndpointResponse]


class ExampleResponse(BaseModel):
    """Example response body for an endpoint."""

    endpoint: str
    example: str


class SessionResponse(BaseModel):
    """Progress of a validation session."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    progress: dict[str, EndpointStatus]
    completed_count: int
    is_complete: bool


class Prerequisite(BaseModel):
    """One prerequisite shown before a lab starts."""

    text: str


class StepResponse(BaseModel):
    """A lab step and the markdown file holding its content."""

    id: int
    title: str
    file: str | None = None


class LabResponse(BaseModel):
    """Lab catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    prerequisites: list[Prerequisite] = []
    steps: list[StepResponse] = []


class LabListResponse(BaseModel):
    """List response for labs."""

    labs: list[LabResponse]
