"""Tests for rendering whole lesson pages."""

import pytest

from labpages_core.content.quizzes import QuizCatalog
from labpages_core.errors import PlaceholderConflictError
from labpages_core.render import DEFAULT_THEME, extract, render_document, restore, transform
from labpages_core.schemas.quiz import QuizBank
from labpages_core.schemas.render import SENTINEL_MARKERS, WidgetKind

T = DEFAULT_THEME
QUIZ = SENTINEL_MARKERS[WidgetKind.QUIZ]
API = SENTINEL_MARKERS[WidgetKind.API_BUILDER]
DEPLOY = SENTINEL_MARKERS[WidgetKind.DEPLOYMENT_SIMULATOR]

LESSON = """# Build API Responses

Write a response for each endpoint. 🚀

```json
{"version": "1.0.37", "note": "# not a heading, **not bold**"}
```

- Start with `/capabilities`
- Then *the rest*
"""


class TestNoWidget:
    """Tests for documents without a placeholder."""

    def test_widget_none_and_empty_after(self) -> None:
        """Test that a plain lesson renders entirely into the first fragment."""
        result = render_document(LESSON)
        assert result.widget_kind is WidgetKind.NONE
        assert result.after_html == ""
        assert result.questions == ()
        assert result.quiz_bank is None

    def test_code_restored_verbatim(self) -> None:
        """Test that code content escapes every markdown rule."""
        result = render_document(LESSON)
        assert (
            '<code>json\n{"version": "1.0.37", "note": "# not a heading, **not bold**"}\n</code>'
            in result.before_html
        )
        assert "__CODE_BLOCK_" not in result.before_html

    def test_layout(self) -> None:
        """Test the overall element order of a rendered lesson."""
        html = render_document(LESSON).before_html
        assert html.startswith(f'<h1 class="{T.h1}">Build API Responses</h1>')
        assert html.index("<pre") < html.index("<ul")
        assert f'<code class="{T.inline_code}">/capabilities</code>' in html

    def test_round_trip_of_code_bodies(self) -> None:
        """Test that restore(transform(extract(d))) keeps each body intact."""
        text, vault = extract(LESSON)
        html = restore(transform(text), vault)
        for body in vault.bodies:
            assert f"<code>{body}</code>" in html

    def test_token_text_in_prose(self) -> None:
        """Test that prose mentioning a code token keeps it as text."""
        result = render_document("see __CODE_BLOCK_0__\n```\nx\n```")
        assert result.before_html == (
            f'<p class="{T.paragraph}">see __CODE_BLOCK_0__</p>'
            f'<pre class="{T.code_block}"><code>\nx\n</code></pre>'
        )
        assert result.before_html.count("<pre") == 1

    def test_token_line_in_prose_is_paragraph(self) -> None:
        """Test that a token-shaped line with no code block stays a paragraph."""
        result = render_document("__CODE_BLOCK_0__")
        assert result.before_html == f'<p class="{T.paragraph}">__CODE_BLOCK_0__</p>'

    def test_rendering_is_deterministic(self) -> None:
        """Test that rendering twice gives the same result."""
        assert render_document(LESSON) == render_document(LESSON)


class TestWidgets:
    """Tests for placeholder detection and splitting."""

    def test_api_builder_split(self) -> None:
        """Test splitting around the API builder marker."""
        result = render_document(f"# Build\n\n{API}\n\nAfter text")
        assert result.widget_kind is WidgetKind.API_BUILDER
        assert result.before_html == f'<h1 class="{T.h1}">Build</h1>'
        assert result.after_html == f'<p class="{T.paragraph}">After text</p>'
        assert API not in result.html
        assert result.html == result.before_html + result.after_html

    def test_deployment_simulator(self) -> None:
        """Test that the deployment simulator marker is recognized."""
        result = render_document(f"Intro\n{DEPLOY}")
        assert result.widget_kind is WidgetKind.DEPLOYMENT_SIMULATOR
        assert result.after_html == ""

    def test_general_quiz_selected_by_phrase(self) -> None:
        """Test that the general knowledge phrase picks the general bank."""
        result = render_document(f"# General Knowledge Quiz\n\n{QUIZ}")
        assert result.widget_kind is WidgetKind.QUIZ
        assert result.quiz_bank == "general"
        assert len(result.questions) == 17

    def test_quiz_falls_back_to_authentication(self) -> None:
        """Test that a quiz with no matching phrase gets the default bank."""
        result = render_document(f"# Authentication & Signature Quiz\n\n{QUIZ}")
        assert result.quiz_bank == "authentication"
        assert len(result.questions) == 6

    def test_quiz_marker_inline(self) -> None:
        """Test that a marker inside a line still splits the page."""
        result = render_document(f"Answer below {QUIZ} then continue")
        assert result.before_html == f'<p class="{T.paragraph}">Answer below</p>'
        assert result.after_html == f'<p class="{T.paragraph}"> then continue</p>'

    def test_marker_inside_code_ignored(self) -> None:
        """Test that markers shown in code samples are not widgets."""
        result = render_document(f"Put this in your page:\n```\n{API}\n```")
        assert result.widget_kind is WidgetKind.NONE
        assert f"<code>\n{API}\n</code>" in result.before_html

    def test_marker_in_inline_code_ignored(self) -> None:
        """Test that a marker quoted in an inline code span is not a widget."""
        result = render_document(f"Type `{API}` here")
        assert result.widget_kind is WidgetKind.NONE
        assert result.ignored_markers == ()
        assert f'<code class="{T.inline_code}">{API}</code>' in result.before_html

    def test_custom_catalog(self) -> None:
        """Test that hosts can supply their own quiz banks."""
        bank = QuizBank.model_validate(
            {
                "name": "custom",
                "version": "1",
                "questions": [
                    {
                        "id": 1,
                        "question": "Pick B",
                        "options": [
                            {"letter": letter, "text": letter} for letter in "ABCD"
                        ],
                        "correctAnswer": "B",
                        "explanation": "It was B.",
                    }
                ],
            }
        )
        catalog = QuizCatalog(banks={"custom": bank}, default="custom")
        result = render_document(QUIZ, quizzes=catalog)
        assert result.quiz_bank == "custom"
        assert result.questions[0].correct_answer == "B"


class TestMultipleMarkers:
    """Tests for documents carrying more than one marker."""

    def test_priority_quiz_first(self) -> None:
        """Test that the quiz wins over other kinds and the rest stay inert."""
        result = render_document(f"{API}\n\ntext\n\n{QUIZ}\n\n{DEPLOY}")
        assert result.widget_kind is WidgetKind.QUIZ
        assert result.before_html.startswith(API)
        assert result.after_html == DEPLOY
        assert result.ignored_markers == (API, DEPLOY)

    def test_api_builder_over_simulator(self) -> None:
        """Test the priority between the two component markers."""
        result = render_document(f"{DEPLOY}\n{API}")
        assert result.widget_kind is WidgetKind.API_BUILDER
        assert result.ignored_markers == (DEPLOY,)

    def test_repeated_marker_kept_literal(self) -> None:
        """Test that only the first occurrence of a marker is honored."""
        result = render_document(f"one\n{API}\ntwo\n{API}")
        assert result.after_html == f'<p class="{T.paragraph}">two</p>{API}'
        assert result.ignored_markers == (API,)

    def test_strict_mode_raises(self) -> None:
        """Test that strict rendering rejects surplus markers."""
        with pytest.raises(PlaceholderConflictError) as excinfo:
            render_document(f"{API}\n{QUIZ}", strict=True)
        assert excinfo.value.markers == [QUIZ, API]

    def test_strict_mode_single_marker_ok(self) -> None:
        """Test that strict rendering accepts one marker."""
        assert render_document(API, strict=True).widget_kind is WidgetKind.API_BUILDER


class TestSplitEquivalence:
    """Rendering then splitting equals splitting then rendering."""

    @pytest.mark.parametrize("marker", [QUIZ, API, DEPLOY])
    @pytest.mark.parametrize(
        ("before_md", "after_md"),
        [
            ("# Title\n\nSome **bold** text", "- a\n- b\n\nClosing 💡"),
            ("Intro with ```code\n# x\n```", "```\nmore code\n```\nDone"),
            ("- only\n- a list", "### Next\nline one\nline two"),
            ("", "Only after"),
        ],
    )
    def test_split_matches_independent_render(
        self, marker: str, before_md: str, after_md: str
    ) -> None:
        """Test the fragments against rendering each half on its own."""
        whole = render_document(f"{before_md}\n{marker}\n{after_md}")
        assert whole.before_html == render_document(before_md).before_html
        assert whole.after_html == render_document(after_md).before_html


class TestInputErrors:
    """Tests for programming errors."""

    def test_none_document(self) -> None:
        """Test that a missing document is a TypeError."""
        with pytest.raises(TypeError):
            render_document(None)  # type: ignore[arg-type]

    def test_arbitrary_text_is_total(self) -> None:
        """Test that odd input renders without failing."""
        result = render_document("**unclosed *nested `tick [x](y\n```\n###### deep")
        assert result.widget_kind is WidgetKind.NONE


class TestSerialization:
    """Tests for the wire form of rendered fragments."""

    def test_camel_case_aliases(self) -> None:
        """Test that fragments serialize with camelCase keys."""
        data = render_document(f"a\n{API}\nb").model_dump(by_alias=True, mode="json")
        assert data["widgetKind"] == "apiBuilder"
        assert set(data) >= {"beforeHtml", "afterHtml", "questions", "ignoredMarkers"}
