"""Validate JSON API responses against the provider endpoint rules."""

from __future__ import annotations

import json
from typing import Any, NoReturn

from labpages_core.schemas.validation import Endpoint, ValidationVerdict
from labpages_core.utils.logging import get_logger, log_duration
from labpages_core.validation.endpoints import resolve_endpoint
from labpages_core.validation.rules import RULES

logger = get_logger(__name__)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Unexpected token {name} is not valid JSON")


def parse_response(raw_json_text: str) -> Any:
    """Parse strict JSON; NaN and Infinity are rejected.

    Input nested deeper than the interpreter recursion limit raises
    RecursionError, which callers treat as a parse failure.
    """
    return json.loads(raw_json_text, parse_constant=_reject_constant)


@log_duration(logger)
def validate(endpoint: str | Endpoint, raw_json_text: str) -> ValidationVerdict:
    """Validate a response body for one endpoint.

    Args:
        endpoint: Endpoint identifier, e.g. ``/capabilities``
        raw_json_text: Response body as submitted

    Returns:
        Verdict with every error and warning found

    Raises:
        UnknownEndpointError: If the endpoint has no rule set
    """
    resolved = resolve_endpoint(endpoint)

    try:
        payload = parse_response(raw_json_text)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug(f"Unparseable response for {resolved.value}: {exc}")
        return ValidationVerdict(
            is_valid=False,
            errors=(f"JSON Parse Error: {exc}",),
            warnings=(),
            parsed_response=None,
            endpoint=resolved,
        )

    errors: list[str] = []
    warnings: list[str] = []
    if isinstance(payload, dict):
        RULES[resolved](payload, errors, warnings)
    else:
        errors.append("Response must be a JSON object")

    logger.debug(
        f"Validated {resolved.value}: {len(errors)} error(s), {len(warnings)} warning(s)"
    )
    return ValidationVerdict(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
        parsed_response=payload,
        endpoint=resolved,
    )
