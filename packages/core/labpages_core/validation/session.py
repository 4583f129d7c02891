"""Per-user validation progress across the provider endpoints."""

from __future__ import annotations

from collections.abc import Callable

from labpages_core.schemas.validation import Endpoint, EndpointStatus, ValidationVerdict
from labpages_core.validation.endpoints import resolve_endpoint
from labpages_core.validation.engine import validate


class ValidationSession:
    """Latest verdict per endpoint for one learner.

    A new verdict for an endpoint replaces the previous one, so a failing
    resubmission takes an endpoint back out of the completed set.
    """

    def __init__(
        self, on_progress: Callable[[bool], None] | None = None
    ) -> None:
        self._verdicts: dict[Endpoint, ValidationVerdict] = {}
        self._on_progress = on_progress

    def validate(self, endpoint: str | Endpoint, raw_json_text: str) -> ValidationVerdict:
        """Validate a response and record the verdict."""
        verdict = validate(endpoint, raw_json_text)
        self.record(verdict)
        return verdict

    def record(self, verdict: ValidationVerdict) -> None:
        """Store a verdict as the latest for its endpoint."""
        self._verdicts[verdict.endpoint] = verdict
        if self._on_progress is not None:
            self._on_progress(self.is_complete)

    def verdict(self, endpoint: str | Endpoint) -> ValidationVerdict | None:
        """Latest verdict for an endpoint, if any."""
        return self._verdicts.get(resolve_endpoint(endpoint))

    def status(self, endpoint: str | Endpoint) -> EndpointStatus:
        verdict = self.verdict(endpoint)
        if verdict is None:
            return EndpointStatus.PENDING
        return EndpointStatus.VALID if verdict.is_valid else EndpointStatus.INVALID

    def progress(self) -> dict[Endpoint, EndpointStatus]:
        """Status of every endpoint, in declaration order."""
        return {endpoint: self.status(endpoint) for endpoint in Endpoint}

    @property
    def completed_count(self) -> int:
        return sum(1 for verdict in self._verdicts.values() if verdict.is_valid)

    @property
    def is_complete(self) -> bool:
        return self.completed_count == len(Endpoint)

    def reset(self) -> None:
        """Forget every recorded verdict."""
        self._verdicts.clear()
