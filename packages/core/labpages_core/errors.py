"""Exception hierarchy for labpages-core.

Expected bad input (a broken lesson, an invalid API response) never raises:
the engines return structured results. These exceptions signal
configuration or programming errors instead.
"""


class LabpagesError(Exception):
    """Base exception for all labpages errors."""


class UnknownEndpointError(LabpagesError, ValueError):
    """Raised when a validation call names an endpoint with no rule set."""

    def __init__(self, endpoint: str) -> None:
        self.endpoint = endpoint
        super().__init__(f"Unknown endpoint: {endpoint!r}")


class PlaceholderConflictError(LabpagesError):
    """Raised in strict mode when a document carries more than one widget marker."""

    def __init__(self, markers: list[str]) -> None:
        self.markers = markers
        super().__init__(
            "Document contains more than one widget placeholder: " + ", ".join(markers)
        )


class QuizBankError(LabpagesError):
    """Raised when quiz data cannot be loaded or selected."""


class ContentPathError(LabpagesError):
    """Raised for step content paths that escape the content root."""


class ContentNotFoundError(LabpagesError):
    """Raised when a step content file does not exist."""
