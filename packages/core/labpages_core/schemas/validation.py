"""Schemas for API response validation."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Endpoint(str, Enum):
    """Provider API endpoints whose responses can be validated."""

    CAPABILITIES = "/capabilities"
    ASSETS = "/capabilities/assets"
    ACCOUNTS = "/accounts"
    BALANCES = "/accounts/{accountId}/balances"


class EndpointStatus(str, Enum):
    """Progress of one endpoint within a validation session."""

    PENDING = "pending"
    VALID = "valid"
    INVALID = "invalid"


class ValidationVerdict(BaseModel):
    """Result of validating one JSON payload against one endpoint's rules."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    is_valid: bool = Field(..., description="True iff there are no errors")
    errors: tuple[str, ...] = Field(default_factory=tuple)
    warnings: tuple[str, ...] = Field(default_factory=tuple)
    parsed_response: Any = Field(None, description="Parsed payload, None on parse failure")
    endpoint: Endpoint = Field(..., description="Endpoint the payload was checked against")
