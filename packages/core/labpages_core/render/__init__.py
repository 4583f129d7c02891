"""Lesson markdown rendering.

    >>> from labpages_core.render import render_document
    >>> fragments = render_document(markdown)
    >>> fragments.widget_kind, fragments.before_html, fragments.after_html
"""

from labpages_core.render.coordinator import render_document, transform
from labpages_core.render.parser import parse_blocks, parse_inline
from labpages_core.render.placeholders import PlaceholderMatch, locate_widget
from labpages_core.render.theme import DEFAULT_THEME, RenderTheme
from labpages_core.render.vault import CodeBlockVault, extract, restore

__all__ = [
    "CodeBlockVault",
    "DEFAULT_THEME",
    "PlaceholderMatch",
    "RenderTheme",
    "extract",
    "locate_widget",
    "parse_blocks",
    "parse_inline",
    "render_document",
    "restore",
    "transform",
]
