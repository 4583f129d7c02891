"""labpages-core: rendering and response validation for hands-on lab pages.

Two engines make up the package:

Rendering:
    Turns lesson markdown into styled HTML and splits it where an
    interactive widget (quiz, API builder, deployment simulator) belongs.

    >>> from labpages_core import render_document
    >>> fragments = render_document(markdown)

Validation:
    Checks JSON responses a learner writes for the provider API endpoints.

    >>> from labpages_core import validate
    >>> verdict = validate("/capabilities", body)

Both are pure functions of their input. Progress across endpoints is tracked
explicitly with a `ValidationSession`.
"""

from labpages_core.render import RenderTheme, render_document
from labpages_core.schemas.quiz import QuizBank, QuizQuestion
from labpages_core.schemas.render import RenderedFragments, WidgetKind
from labpages_core.schemas.validation import Endpoint, EndpointStatus, ValidationVerdict
from labpages_core.validation import ValidationSession, validate

__version__ = "0.1.0"

__all__ = [
    # Rendering
    "render_document",
    "RenderTheme",
    "RenderedFragments",
    "WidgetKind",
    # Quizzes
    "QuizBank",
    "QuizQuestion",
    # Validation
    "validate",
    "ValidationSession",
    "ValidationVerdict",
    "Endpoint",
    "EndpointStatus",
]
