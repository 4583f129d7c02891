"""Render a lesson page into HTML fragments around its widget placeholder."""

from __future__ import annotations

from labpages_core.content.quizzes import QuizCatalog, load_default_catalog
from labpages_core.errors import PlaceholderConflictError
from labpages_core.render.html import render_blocks
from labpages_core.render.parser import parse_blocks
from labpages_core.render.placeholders import locate_widget, split_blocks
from labpages_core.render.theme import DEFAULT_THEME, RenderTheme
from labpages_core.render.vault import extract, restore
from labpages_core.schemas.render import SENTINEL_MARKERS, RenderedFragments, WidgetKind
from labpages_core.utils.logging import get_logger, log_duration

logger = get_logger(__name__)


def transform(text: str, theme: RenderTheme = DEFAULT_THEME) -> str:
    """Render vault-extracted markdown to HTML, leaving code tokens in place.

    Markers are emitted as their literal text.
    """
    return render_blocks(parse_blocks(text), theme)


@log_duration(logger)
def render_document(
    document: str,
    *,
    theme: RenderTheme = DEFAULT_THEME,
    quizzes: QuizCatalog | None = None,
    strict: bool = False,
) -> RenderedFragments:
    """Render lesson markdown and split it at the widget placeholder.

    Code blocks are pulled out first so no markdown rule touches them, the
    rest is parsed into a node tree and rendered, and the code is restored
    into each fragment last.

    Args:
        document: Raw lesson markdown
        theme: CSS classes to render with
        quizzes: Quiz banks and selection rules; defaults to the packaged ones
        strict: Raise instead of ignoring surplus widget markers

    Returns:
        Fragments before and after the widget, plus the widget to insert

    Raises:
        TypeError: If document is not a string
        PlaceholderConflictError: In strict mode, if more than one marker is present
    """
    if not isinstance(document, str):
        raise TypeError(f"document must be a str, got {type(document).__name__}")

    text, vault = extract(document)
    blocks = parse_blocks(text)
    match = locate_widget(blocks)

    if match.ignored:
        if strict:
            raise PlaceholderConflictError([SENTINEL_MARKERS[match.kind], *match.ignored])
        logger.warning(
            f"Widget {match.kind.value} placed; rendering surplus markers as text: "
            f"{', '.join(match.ignored)}"
        )

    before, after = split_blocks(blocks, match)
    before_html = restore(render_blocks(before, theme), vault, theme.code_block)
    after_html = restore(render_blocks(after, theme), vault, theme.code_block)

    questions = ()
    quiz_bank = None
    if match.kind is WidgetKind.QUIZ:
        bank = (quizzes or load_default_catalog()).select(document)
        questions = bank.questions
        quiz_bank = bank.name

    logger.debug(
        f"Rendered {len(blocks)} blocks, {len(vault)} code blocks, widget={match.kind.value}"
    )
    return RenderedFragments(
        before_html=before_html,
        after_html=after_html,
        widget_kind=match.kind,
        questions=questions,
        quiz_bank=quiz_bank,
        ignored_markers=match.ignored,
    )
