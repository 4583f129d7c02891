"""Node tree produced by the lesson parser.

Inline nodes describe spans within one line of text; block nodes are the
top-level sequence a document parses into. Both are immutable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from labpages_core.schemas.render import WidgetKind


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Strong:
    children: tuple[Inline, ...]


@dataclass(frozen=True)
class Emphasis:
    children: tuple[Inline, ...]


@dataclass(frozen=True)
class InlineCode:
    value: str


@dataclass(frozen=True)
class Link:
    children: tuple[Inline, ...]
    href: str


Inline = Union[Text, Strong, Emphasis, InlineCode, Link]


@dataclass(frozen=True)
class Heading:
    level: int
    children: tuple[Inline, ...]


@dataclass(frozen=True)
class Paragraph:
    """Consecutive text lines; each entry is one line's inline content."""

    lines: tuple[tuple[Inline, ...], ...]


@dataclass(frozen=True)
class BulletList:
    items: tuple[tuple[Inline, ...], ...]


@dataclass(frozen=True)
class CodePlaceholder:
    """A line holding only a code-block vault token."""

    index: int


@dataclass(frozen=True)
class Marker:
    """A widget sentinel found in the text."""

    kind: WidgetKind
    literal: str


Block = Union[Heading, Paragraph, BulletList, CodePlaceholder, Marker]
