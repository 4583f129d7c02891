"""Tests for quiz data and bank selection."""

import json

import pytest
from pydantic import ValidationError

from labpages_core.content.quizzes import QuizCatalog, load_default_catalog, parse_quiz_bank
from labpages_core.errors import QuizBankError
from labpages_core.schemas.quiz import QuizBank, QuizQuestion, QuizRule


def _question(question_id: int = 1, **overrides: object) -> dict:
    data = {
        "id": question_id,
        "question": "Which letter?",
        "options": [{"letter": letter, "text": f"Option {letter}"} for letter in "ABCD"],
        "correctAnswer": "C",
        "explanation": "Because.",
    }
    data.update(overrides)
    return data


class TestQuizQuestion:
    """Tests for the question schema."""

    def test_aliases(self) -> None:
        """Test that camelCase input populates snake_case fields."""
        question = QuizQuestion.model_validate(
            _question(learnMoreUrl="https://example.com", learnMoreText="Docs")
        )
        assert question.correct_answer == "C"
        assert question.learn_more_text == "Docs"

    def test_is_correct(self) -> None:
        """Test answer checking."""
        question = QuizQuestion.model_validate(_question())
        assert question.is_correct("C")
        assert question.is_correct(" c ")
        assert not question.is_correct("A")

    def test_options_in_order(self) -> None:
        """Test that options must run A to D."""
        options = [{"letter": letter, "text": letter} for letter in "BACD"]
        with pytest.raises(ValidationError, match="A, B, C, D in order"):
            QuizQuestion.model_validate(_question(options=options))

    def test_three_options_rejected(self) -> None:
        """Test that every question has four options."""
        options = [{"letter": letter, "text": letter} for letter in "ABC"]
        with pytest.raises(ValidationError):
            QuizQuestion.model_validate(_question(options=options))

    def test_link_text_needs_url(self) -> None:
        """Test that link text alone is rejected."""
        with pytest.raises(ValidationError, match="learnMoreText requires learnMoreUrl"):
            QuizQuestion.model_validate(_question(learnMoreText="Docs"))


class TestQuizBank:
    """Tests for bank parsing."""

    def test_duplicate_ids(self) -> None:
        """Test that question ids are unique within a bank."""
        raw = json.dumps({"name": "x", "version": "1", "questions": [_question(1), _question(1)]})
        with pytest.raises(QuizBankError, match="duplicate question id 1"):
            parse_quiz_bank(raw)

    def test_malformed_json(self) -> None:
        """Test that broken JSON is a QuizBankError."""
        with pytest.raises(QuizBankError, match="Invalid quiz bank"):
            parse_quiz_bank("{")

    def test_fingerprint_ignores_version(self) -> None:
        """Test that the fingerprint tracks content only."""
        first = QuizBank.model_validate({"name": "x", "version": "1", "questions": [_question()]})
        second = QuizBank.model_validate({"name": "x", "version": "2", "questions": [_question()]})
        changed = QuizBank.model_validate(
            {"name": "x", "version": "1", "questions": [_question(correctAnswer="D")]}
        )
        assert first.fingerprint == second.fingerprint
        assert first.fingerprint != changed.fingerprint


class TestQuizCatalog:
    """Tests for bank selection."""

    def test_default_catalog(self) -> None:
        """Test the packaged banks."""
        catalog = load_default_catalog()
        assert len(catalog.banks["general"].questions) == 17
        assert len(catalog.banks["authentication"].questions) == 6
        assert catalog.default == "authentication"

    @pytest.mark.parametrize(
        ("document", "bank"),
        [
            ("# General Knowledge Quiz", "general"),
            ("Review of Network Link v2 Fundamentals", "general"),
            ("# Signing requests", "authentication"),
            ("general knowledge quiz", "authentication"),
        ],
    )
    def test_select(self, document: str, bank: str) -> None:
        """Test phrase matching, which is case sensitive."""
        assert load_default_catalog().select(document).name == bank

    def test_unknown_default(self) -> None:
        """Test that the default bank must be loaded."""
        with pytest.raises(QuizBankError):
            QuizCatalog(banks={}, default="missing")

    def test_rule_for_unknown_bank(self) -> None:
        """Test that rules must point at loaded banks."""
        bank = QuizBank(name="only", version="1")
        with pytest.raises(QuizBankError, match="unknown bank"):
            QuizCatalog(
                banks={"only": bank},
                rules=(QuizRule(phrases=("x",), bank="other"),),
                default="only",
            )

    def test_packaged_explanations_present(self) -> None:
        """Test that every packaged explanation is filled in."""
        for bank in load_default_catalog().banks.values():
            for question in bank.questions:
                assert question.explanation
