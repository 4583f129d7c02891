"""Tests for HTML rendering of the node tree."""

from labpages_core.render import DEFAULT_THEME, RenderTheme, transform

T = DEFAULT_THEME


class TestBlockHtml:
    """Tests for block-level markup."""

    def test_headings(self) -> None:
        """Test that each heading level gets its own element and class."""
        assert transform("# A") == f'<h1 class="{T.h1}">A</h1>'
        assert transform("## B") == f'<h2 class="{T.h2}">B</h2>'
        assert transform("### C") == f'<h3 class="{T.h3}">C</h3>'

    def test_paragraph_line_breaks(self) -> None:
        """Test that single newlines become explicit breaks."""
        assert transform("a\nb") == f'<p class="{T.paragraph}">a<br/>b</p>'

    def test_list(self) -> None:
        """Test that a run of items is one list container."""
        assert transform("- a\n- b") == (
            f'<ul class="{T.bullet_list}">'
            f'<li class="{T.list_item}">a</li>'
            f'<li class="{T.list_item}">b</li>'
            "</ul>"
        )

    def test_no_paragraph_around_headings_or_lists(self) -> None:
        """Test that headings and lists are never wrapped in paragraphs."""
        html = transform("# Title\n- item\n\nBody text")
        assert html == (
            f'<h1 class="{T.h1}">Title</h1>'
            f'<ul class="{T.bullet_list}"><li class="{T.list_item}">item</li></ul>'
            f'<p class="{T.paragraph}">Body text</p>'
        )

    def test_no_empty_paragraphs(self) -> None:
        """Test that blank runs produce no markup."""
        assert transform("\n\n\n") == ""
        assert "<p" not in transform("# T\n\n\n\n## U")

    def test_no_breaks_inside_list_items(self) -> None:
        """Test that list items never carry break elements."""
        html = transform("- one\n- two\n\n- three")
        assert "<br/>" not in html

    def test_marker_emitted_literally(self) -> None:
        """Test that transform keeps marker text without wrapping it."""
        assert transform("[API_BUILDER_COMPONENT]") == "[API_BUILDER_COMPONENT]"

    def test_code_token_left_for_vault(self) -> None:
        """Test that code placeholders survive rendering unwrapped."""
        assert transform("__CODE_BLOCK_0__") == "__CODE_BLOCK_0__"


class TestInlineHtml:
    """Tests for inline markup."""

    def test_emphasis(self) -> None:
        """Test bold and italic markup."""
        assert transform("**b** *i*") == (
            f'<p class="{T.paragraph}"><strong class="{T.strong}">b</strong> '
            f'<em class="{T.emphasis}">i</em></p>'
        )

    def test_inline_code(self) -> None:
        """Test inline code markup."""
        assert transform("`x`") == f'<p class="{T.paragraph}"><code class="{T.inline_code}">x</code></p>'

    def test_link_opens_new_context(self) -> None:
        """Test that links open in a new tab without opener or referrer."""
        html = transform("[Docs](https://example.com/docs)")
        assert html == (
            f'<p class="{T.paragraph}"><a href="https://example.com/docs" class="{T.link}" '
            'target="_blank" rel="noopener noreferrer">Docs</a></p>'
        )

    def test_emoji_decorated(self) -> None:
        """Test that known emoji are wrapped in coloured spans."""
        assert transform("🚀 Go") == (
            f'<p class="{T.paragraph}"><span class="text-red-500">🚀</span> Go</p>'
        )

    def test_emoji_with_variation_selector(self) -> None:
        """Test that the shield emoji is matched with its selector."""
        assert '<span class="text-green-500">🛡️</span>' in transform("🛡️ Secure")

    def test_unknown_emoji_untouched(self) -> None:
        """Test that emoji outside the table are left alone."""
        assert transform("🍕") == f'<p class="{T.paragraph}">🍕</p>'

    def test_emoji_in_inline_code_untouched(self) -> None:
        """Test that code spans are not decorated."""
        assert "<span" not in transform("`🚀`")

    def test_emoji_in_heading_and_list(self) -> None:
        """Test that decoration applies in every text context."""
        assert '<span class="text-blue-600">🎯</span>' in transform("## 🎯 Goals")
        assert '<span class="text-green-600">✅</span>' in transform("- ✅ done")


class TestTheme:
    """Tests for custom render themes."""

    def test_custom_classes(self) -> None:
        """Test that a theme replaces the default classes."""
        theme = RenderTheme(paragraph="prose", emoji=())
        assert transform("🚀 hi", theme) == '<p class="prose">🚀 hi</p>'

    def test_heading_lookup(self) -> None:
        """Test the level to class lookup."""
        theme = RenderTheme(h1="one", h2="two", h3="three")
        assert [theme.heading(level) for level in (1, 2, 3)] == ["one", "two", "three"]
