"""Tokenizer and parser turning lesson markdown into a node tree.

Supports the subset of markdown lesson pages use: ``#``-``###`` headings,
bullet lists, paragraphs, bold, italic, inline code and links. Fenced code
must already have been swapped for vault tokens; sentinel markers become
their own top-level nodes wherever they occur in a line.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

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
from labpages_core.schemas.render import SENTINEL_MARKERS, WidgetKind

HEADING_RE = re.compile(r"^(#{1,3}) (.*)$")
LIST_ITEM_RE = re.compile(r"^\s*[-*+]\s+(\S.*)$")
CODE_TOKEN_LINE_RE = re.compile(r"^\s*__CODE_BLOCK_(0|[1-9][0-9]*)__\s*$")
LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
MARKER_RE = re.compile("|".join(re.escape(literal) for literal in SENTINEL_MARKERS.values()))

_KIND_BY_LITERAL: dict[str, WidgetKind] = {
    literal: kind for kind, literal in SENTINEL_MARKERS.items()
}


def parse_inline(text: str) -> tuple[Inline, ...]:
    """Parse the inline content of a single line.

    Delimiters without a partner are kept as literal text.
    """
    nodes: list[Inline] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            nodes.append(Text("".join(buffer)))
            buffer.clear()

    i = 0
    length = len(text)
    while i < length:
        char = text[i]

        if char == "`":
            end = text.find("`", i + 1)
            if end > i + 1:
                flush()
                nodes.append(InlineCode(text[i + 1 : end]))
                i = end + 1
                continue

        elif char == "[":
            match = LINK_RE.match(text, i)
            if match:
                flush()
                nodes.append(Link(parse_inline(match.group(1)), match.group(2)))
                i = match.end()
                continue

        elif text.startswith("**", i):
            end = text.find("**", i + 2)
            if end > i + 2:
                flush()
                nodes.append(Strong(parse_inline(text[i + 2 : end])))
                i = end + 2
            else:
                buffer.append("**")
                i += 2
            continue

        elif char == "*":
            end = text.find("*", i + 1)
            if end > i + 1:
                flush()
                nodes.append(Emphasis(parse_inline(text[i + 1 : end])))
                i = end + 1
                continue

        buffer.append(char)
        i += 1

    flush()
    return tuple(nodes)


def _code_spans(line: str) -> list[tuple[int, int]]:
    """Offsets of backtick pairs, paired left to right as parse_inline does."""
    spans: list[tuple[int, int]] = []
    position = 0
    while True:
        start = line.find("`", position)
        if start == -1:
            break
        end = line.find("`", start + 1)
        if end == -1:
            break
        if end > start + 1:
            spans.append((start, end))
            position = end + 1
        else:
            position = start + 1
    return spans


def _units(text: str) -> Iterator[str | Marker]:
    """Yield lines, with any sentinel marker split out as its own unit.

    Markers inside an inline code span are left in the line as text.
    """
    for line in text.replace("\r\n", "\n").split("\n"):
        spans = _code_spans(line) if "`" in line else []
        position = 0
        for match in MARKER_RE.finditer(line):
            if any(start < match.start() and match.end() <= end for start, end in spans):
                continue
            yield line[position : match.start()]
            yield Marker(_KIND_BY_LITERAL[match.group(0)], match.group(0))
            position = match.end()
        yield line[position:]


def parse_blocks(text: str) -> tuple[Block, ...]:
    """Parse vault-extracted markdown into top-level blocks.

    Bullet items on consecutive lines form one list; blank lines between two
    items do not end it. Any other blank line ends the current paragraph.
    """
    blocks: list[Block] = []
    paragraph: list[str] = []
    items: list[str] = []

    def flush_paragraph() -> None:
        if paragraph:
            blocks.append(Paragraph(tuple(parse_inline(line) for line in paragraph)))
            paragraph.clear()

    def flush_list() -> None:
        if items:
            blocks.append(BulletList(tuple(parse_inline(item) for item in items)))
            items.clear()

    for unit in _units(text):
        if isinstance(unit, Marker):
            flush_paragraph()
            flush_list()
            blocks.append(unit)
            continue

        if not unit.strip():
            flush_paragraph()
            continue

        item = LIST_ITEM_RE.match(unit)
        if item:
            flush_paragraph()
            items.append(item.group(1).rstrip())
            continue

        flush_list()

        heading = HEADING_RE.match(unit)
        if heading:
            flush_paragraph()
            level = len(heading.group(1))
            blocks.append(Heading(level, parse_inline(heading.group(2).strip())))
            continue

        token = CODE_TOKEN_LINE_RE.match(unit)
        if token:
            flush_paragraph()
            blocks.append(CodePlaceholder(int(token.group(1))))
            continue

        paragraph.append(unit.rstrip())

    flush_paragraph()
    flush_list()
    return tuple(blocks)
