"""Data schemas shared by the render and validation engines."""

from labpages_core.schemas.quiz import QuizBank, QuizOption, QuizQuestion, QuizRule
from labpages_core.schemas.render import SENTINEL_MARKERS, RenderedFragments, WidgetKind
from labpages_core.schemas.validation import Endpoint, EndpointStatus, ValidationVerdict

__all__ = [
    # Quiz
    "QuizBank",
    "QuizOption",
    "QuizQuestion",
    "QuizRule",
    # Rendering
    "RenderedFragments",
    "SENTINEL_MARKERS",
    "WidgetKind",
    # Validation
    "Endpoint",
    "EndpointStatus",
    "ValidationVerdict",
]
