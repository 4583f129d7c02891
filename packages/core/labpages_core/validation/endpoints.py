"""Endpoint identifiers and their normalization."""

import re

from labpages_core.errors import UnknownEndpointError
from labpages_core.schemas.validation import Endpoint

_BALANCES_PATH = re.compile(r"^/accounts/[^/]+/balances$")

# Display metadata for hosts listing the endpoints to build.
ENDPOINT_DESCRIPTIONS: dict[Endpoint, str] = {
    Endpoint.CAPABILITIES: "Get server capabilities and supported features",
    Endpoint.ASSETS: "Get list of supported additional assets",
    Endpoint.ACCOUNTS: "Get list of sub-accounts",
    Endpoint.BALANCES: "Get current balances for a specific account",
}


def resolve_endpoint(endpoint: str | Endpoint) -> Endpoint:
    """Map an endpoint identifier to its canonical form.

    Accepts identifiers with or without a leading slash, and concrete
    balance paths such as ``/accounts/acc-1/balances``.

    Raises:
        UnknownEndpointError: If no rule set exists for the identifier
    """
    if isinstance(endpoint, Endpoint):
        return endpoint
    if not isinstance(endpoint, str):
        raise UnknownEndpointError(repr(endpoint))

    path = endpoint.strip()
    if not path.startswith("/"):
        path = "/" + path
    path = path.rstrip("/") or "/"

    try:
        return Endpoint(path)
    except ValueError:
        pass
    if _BALANCES_PATH.match(path):
        return Endpoint.BALANCES
    raise UnknownEndpointError(endpoint)
