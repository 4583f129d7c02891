"""Locate the widget placeholder in a parsed lesson."""

from __future__ import annotations

from dataclasses import dataclass, field

from labpages_core.render.nodes import Block, Marker
from labpages_core.schemas.render import SENTINEL_MARKERS, WidgetKind

# Priority when more than one kind of marker is present.
PRIORITY: tuple[WidgetKind, ...] = tuple(SENTINEL_MARKERS)


@dataclass(frozen=True)
class PlaceholderMatch:
    """Which widget a document asks for and where it goes.

    ``index`` is the position of the honored marker in the block sequence,
    None when the document has no marker. ``ignored`` lists the literals of
    every other marker, in document order.
    """

    kind: WidgetKind = WidgetKind.NONE
    index: int | None = None
    ignored: tuple[str, ...] = field(default_factory=tuple)


def locate_widget(blocks: tuple[Block, ...]) -> PlaceholderMatch:
    """Find the first marker of the highest-priority kind present."""
    markers = [(i, block) for i, block in enumerate(blocks) if isinstance(block, Marker)]
    if not markers:
        return PlaceholderMatch()

    kinds_present = {marker.kind for _, marker in markers}
    kind = next(kind for kind in PRIORITY if kind in kinds_present)
    index = next(i for i, marker in markers if marker.kind is kind)
    ignored = tuple(marker.literal for i, marker in markers if i != index)
    return PlaceholderMatch(kind=kind, index=index, ignored=ignored)


def split_blocks(
    blocks: tuple[Block, ...], match: PlaceholderMatch
) -> tuple[tuple[Block, ...], tuple[Block, ...]]:
    """Split blocks around the honored marker, dropping the marker itself."""
    if match.index is None:
        return blocks, ()
    return blocks[: match.index], blocks[match.index + 1 :]
