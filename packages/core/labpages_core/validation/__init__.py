"""Validation of provider API responses.

    >>> from labpages_core.validation import validate
    >>> verdict = validate("/capabilities", body)
    >>> verdict.is_valid, verdict.errors
"""

from labpages_core.validation.endpoints import ENDPOINT_DESCRIPTIONS, resolve_endpoint
from labpages_core.validation.engine import parse_response, validate
from labpages_core.validation.rules import RULES
from labpages_core.validation.session import ValidationSession

__all__ = [
    "ENDPOINT_DESCRIPTIONS",
    "RULES",
    "ValidationSession",
    "parse_response",
    "resolve_endpoint",
    "validate",
]
