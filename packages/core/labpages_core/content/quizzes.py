"""Quiz bank loading and selection."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources

from pydantic import ValidationError

from labpages_core.errors import QuizBankError
from labpages_core.schemas.quiz import QuizBank, QuizRule
from labpages_core.utils.logging import get_logger

logger = get_logger(__name__)

QUIZ_PACKAGE = "labpages_core.data.quizzes"


@dataclass(frozen=True)
class QuizCatalog:
    """Quiz banks plus the rules that choose one for a lesson.

    Rules are tried in order; the first rule with a phrase found in the
    lesson text wins. Lessons matching no rule get the default bank.
    """

    banks: dict[str, QuizBank]
    rules: tuple[QuizRule, ...] = field(default_factory=tuple)
    default: str = "authentication"

    def __post_init__(self) -> None:
        if self.default not in self.banks:
            raise QuizBankError(f"Default quiz bank {self.default!r} is not loaded")
        for rule in self.rules:
            if rule.bank not in self.banks:
                raise QuizBankError(f"Quiz rule refers to unknown bank {rule.bank!r}")

    def select(self, document: str) -> QuizBank:
        """Pick the bank for a lesson by inspecting its raw text."""
        for rule in self.rules:
            if any(phrase in document for phrase in rule.phrases):
                return self.banks[rule.bank]
        return self.banks[self.default]


def parse_quiz_bank(raw: str | bytes) -> QuizBank:
    """Validate JSON quiz data into a QuizBank.

    Raises:
        QuizBankError: If the data is malformed or breaks a quiz invariant
    """
    try:
        return QuizBank.model_validate_json(raw)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise QuizBankError(f"Invalid quiz bank: {errors}") from exc


def _read(name: str) -> str:
    return resources.files(QUIZ_PACKAGE).joinpath(name).read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def load_default_catalog() -> QuizCatalog:
    """Load the quiz banks and selection rules shipped with the package."""
    config = json.loads(_read("catalog.json"))
    banks = {name: parse_quiz_bank(_read(f"{name}.json")) for name in config["banks"]}
    rules = tuple(QuizRule.model_validate(rule) for rule in config.get("rules", []))

    for name, bank in banks.items():
        logger.debug(
            f"Loaded quiz bank {name} v{bank.version} "
            f"({len(bank.questions)} questions, {bank.fingerprint[:12]})"
        )
    return QuizCatalog(banks=banks, rules=rules, default=config["default"])
