"""Content data: quiz banks and example endpoint payloads."""

from labpages_core.content.examples import example_payload, example_response
from labpages_core.content.quizzes import QuizCatalog, load_default_catalog, parse_quiz_bank

__all__ = [
    "QuizCatalog",
    "example_payload",
    "example_response",
    "load_default_catalog",
    "parse_quiz_bank",
]
