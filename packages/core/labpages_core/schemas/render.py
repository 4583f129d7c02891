"""Schemas for rendered lesson output."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from labpages_core.schemas.quiz import QuizQuestion


class WidgetKind(str, Enum):
    """Interactive widget spliced between the two HTML fragments."""

    NONE = "none"
    QUIZ = "quiz"
    API_BUILDER = "apiBuilder"
    DEPLOYMENT_SIMULATOR = "deploymentSimulator"


# Literal tokens authors place in lesson markdown, in priority order.
SENTINEL_MARKERS: dict[WidgetKind, str] = {
    WidgetKind.QUIZ: "<!--QUIZ_PLACEHOLDER-->",
    WidgetKind.API_BUILDER: "[API_BUILDER_COMPONENT]",
    WidgetKind.DEPLOYMENT_SIMULATOR: "[DEPLOYMENT_SIMULATOR_COMPONENT]",
}


class RenderedFragments(BaseModel):
    """HTML before and after the widget placeholder, plus the widget to insert."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    before_html: str = Field("", description="HTML preceding the widget")
    after_html: str = Field("", description="HTML following the widget")
    widget_kind: WidgetKind = Field(WidgetKind.NONE, description="Widget to insert")
    questions: tuple[QuizQuestion, ...] = Field(
        default_factory=tuple, description="Quiz questions when widget_kind is quiz"
    )
    quiz_bank: str | None = Field(None, description="Name of the selected quiz bank")
    ignored_markers: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Marker literals that were present but rendered inertly",
    )

    @property
    def html(self) -> str:
        """Both fragments joined, for hosts that ignore the widget."""
        return self.before_html + self.after_html
