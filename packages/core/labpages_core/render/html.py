"""HTML renderer for the lesson node tree."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from labpages_core.render.nodes import (
    Block,
    BulletList,
    CodePlaceholder,
    Emphasis,
    Heading,
    Inline,
    InlineCode,
    Link,
    Marker,
    Paragraph,
    Strong,
    Text,
)
from labpages_core.render.theme import DEFAULT_THEME, RenderTheme
from labpages_core.render.vault import token_for


@lru_cache(maxsize=8)
def _emoji_pattern(emoji: tuple[tuple[str, str], ...]) -> re.Pattern[str] | None:
    if not emoji:
        return None
    # Longest first so a glyph with a variation selector wins over its base.
    glyphs = sorted((glyph for glyph, _ in emoji), key=len, reverse=True)
    return re.compile("|".join(re.escape(glyph) for glyph in glyphs))


def _decorate_emoji(text: str, theme: RenderTheme) -> str:
    pattern = _emoji_pattern(theme.emoji)
    if pattern is None:
        return text
    classes = dict(theme.emoji)
    return pattern.sub(
        lambda match: f'<span class="{classes[match.group(0)]}">{match.group(0)}</span>',
        text,
    )


def render_inline(nodes: Iterable[Inline], theme: RenderTheme = DEFAULT_THEME) -> str:
    """Render inline nodes to HTML."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Text):
            parts.append(_decorate_emoji(node.value, theme))
        elif isinstance(node, Strong):
            parts.append(
                f'<strong class="{theme.strong}">{render_inline(node.children, theme)}</strong>'
            )
        elif isinstance(node, Emphasis):
            parts.append(
                f'<em class="{theme.emphasis}">{render_inline(node.children, theme)}</em>'
            )
        elif isinstance(node, InlineCode):
            parts.append(f'<code class="{theme.inline_code}">{node.value}</code>')
        elif isinstance(node, Link):
            parts.append(
                f'<a href="{node.href}" class="{theme.link}" target="_blank" '
                f'rel="noopener noreferrer">{render_inline(node.children, theme)}</a>'
            )
        else:
            raise TypeError(f"Unknown inline node: {node!r}")
    return "".join(parts)


def render_block(block: Block, theme: RenderTheme = DEFAULT_THEME) -> str:
    """Render one top-level block to HTML."""
    if isinstance(block, Heading):
        tag = f"h{block.level}"
        return f'<{tag} class="{theme.heading(block.level)}">{render_inline(block.children, theme)}</{tag}>'
    if isinstance(block, Paragraph):
        body = "<br/>".join(render_inline(line, theme) for line in block.lines)
        return f'<p class="{theme.paragraph}">{body}</p>'
    if isinstance(block, BulletList):
        items = "".join(
            f'<li class="{theme.list_item}">{render_inline(item, theme)}</li>'
            for item in block.items
        )
        return f'<ul class="{theme.bullet_list}">{items}</ul>'
    if isinstance(block, CodePlaceholder):
        # Left as a token; the vault fills it in after rendering.
        return token_for(block.index)
    if isinstance(block, Marker):
        return block.literal
    raise TypeError(f"Unknown block node: {block!r}")


def render_blocks(blocks: Iterable[Block], theme: RenderTheme = DEFAULT_THEME) -> str:
    """Render a block sequence; blocks are concatenated without separators."""
    return "".join(render_block(block, theme) for block in blocks)
