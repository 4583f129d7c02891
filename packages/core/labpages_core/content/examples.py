"""Example responses for each validated endpoint."""

from __future__ import annotations

import copy
import json
from functools import lru_cache
from importlib import resources
from typing import Any

from labpages_core.schemas.validation import Endpoint
from labpages_core.validation.endpoints import resolve_endpoint


@lru_cache(maxsize=1)
def _load_examples() -> dict[Endpoint, Any]:
    raw = resources.files("labpages_core.data").joinpath("examples.json").read_text(
        encoding="utf-8"
    )
    data = json.loads(raw)
    return {Endpoint(path): payload for path, payload in data["examples"].items()}


def example_payload(endpoint: str | Endpoint) -> Any:
    """Return a parsed example response for an endpoint."""
    return copy.deepcopy(_load_examples()[resolve_endpoint(endpoint)])


def example_response(endpoint: str | Endpoint) -> str:
    """Return an example response as pretty-printed JSON text."""
    return json.dumps(example_payload(endpoint), indent=2)
