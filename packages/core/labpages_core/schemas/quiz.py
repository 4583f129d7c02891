"""Quiz schemas for the knowledge-check widget."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from labpages_core.utils.hashing import fingerprint

OptionLetter = Literal["A", "B", "C", "D"]

OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D")


class QuizOption(BaseModel):
    """One labeled answer option."""

    model_config = ConfigDict(frozen=True)

    letter: OptionLetter = Field(..., description="Option letter (A-D)")
    text: str = Field(..., min_length=1, description="Display text")


class QuizQuestion(BaseModel):
    """A multiple-choice question with its explanation."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int = Field(..., description="Identifier, unique within a bank")
    question: str = Field(..., min_length=1, description="Question text")
    options: tuple[QuizOption, ...] = Field(..., description="Options A-D in order")
    correct_answer: OptionLetter = Field(..., description="Letter of the correct option")
    explanation: str = Field(..., description="Shown after answering")
    learn_more_url: str | None = Field(None, description="External reference link")
    learn_more_text: str | None = Field(None, description="Label for the reference link")

    @model_validator(mode="after")
    def _check_options(self) -> "QuizQuestion":
        letters = tuple(option.letter for option in self.options)
        if letters != OPTION_LETTERS:
            raise ValueError(
                f"Question {self.id}: options must be labeled A, B, C, D in order, got {letters}"
            )
        if self.learn_more_text and not self.learn_more_url:
            raise ValueError(f"Question {self.id}: learnMoreText requires learnMoreUrl")
        return self

    def is_correct(self, letter: str) -> bool:
        """Check a submitted answer letter."""
        return letter.strip().upper() == self.correct_answer


class QuizBank(BaseModel):
    """A named, versioned set of quiz questions."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Bank key used by selection rules")
    version: str = Field(..., description="Content version of the bank")
    title: str = Field("Knowledge Check", description="Heading shown above the quiz")
    questions: tuple[QuizQuestion, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "QuizBank":
        seen: set[int] = set()
        for question in self.questions:
            if question.id in seen:
                raise ValueError(f"Quiz bank {self.name!r}: duplicate question id {question.id}")
            seen.add(question.id)
        return self

    @property
    def fingerprint(self) -> str:
        """Content hash of the questions, independent of the version label."""
        return fingerprint(
            [question.model_dump(by_alias=True) for question in self.questions]
        )


class QuizRule(BaseModel):
    """Selects a bank when any of its phrases occurs in the lesson text."""

    model_config = ConfigDict(frozen=True)

    phrases: tuple[str, ...] = Field(..., min_length=1)
    bank: str = Field(..., description="Name of the bank this rule selects")
