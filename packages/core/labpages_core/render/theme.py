"""Styling configuration for the HTML renderer.

The default theme reproduces the Tailwind classes the lesson pages were
designed against. Hosts with a different stylesheet pass their own
``RenderTheme`` to ``render_document``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from labpages_core.render.vault import DEFAULT_PRE_CLASS

# Decorated emoji and the colour class applied to each.
DEFAULT_EMOJI_CLASSES: tuple[tuple[str, str], ...] = (
    ("🔗", "text-blue-500"),
    ("🛡️", "text-green-500"),
    ("🏦", "text-blue-600"),
    ("📈", "text-green-600"),
    ("🧠", "text-purple-500"),
    ("🚀", "text-red-500"),
    ("🎯", "text-blue-600"),
    ("✅", "text-green-600"),
    ("💡", "text-yellow-500"),
    ("📚", "text-blue-500"),
    ("🔧", "text-gray-600"),
    ("📋", "text-blue-500"),
    ("💼", "text-gray-700"),
    ("📊", "text-green-500"),
    ("📞", "text-blue-500"),
)


@dataclass(frozen=True)
class RenderTheme:
    """CSS classes for every element the renderer emits."""

    h1: str = "text-3xl font-bold mb-6 mt-8 text-gray-900"
    h2: str = "text-2xl font-bold mb-4 mt-8 text-gray-900"
    h3: str = "text-xl font-semibold mb-3 mt-6 text-gray-900"
    paragraph: str = "mb-4 text-gray-700"
    strong: str = "font-semibold text-gray-900"
    emphasis: str = "italic"
    inline_code: str = "bg-gray-100 text-gray-800 px-2 py-1 rounded text-sm font-mono"
    link: str = "text-blue-600 underline hover:text-blue-800"
    bullet_list: str = "list-disc list-inside ml-4 mb-4"
    list_item: str = "text-gray-700"
    code_block: str = DEFAULT_PRE_CLASS
    emoji: tuple[tuple[str, str], ...] = field(default=DEFAULT_EMOJI_CLASSES)

    def heading(self, level: int) -> str:
        """Class for a heading of the given level (1-3)."""
        return (self.h1, self.h2, self.h3)[level - 1]


DEFAULT_THEME = RenderTheme()
