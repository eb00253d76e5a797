"""Tests for the inline fragment renderer."""

import pytest

from styledown.formatting.inline import InlineRenderer
from styledown.formatting.ir import (
    FRAGMENT_KINDS,
    Autolink,
    AutolinkKind,
    Code,
    CustomFragment,
    DelimiterFlags,
    DelimiterRun,
    Emphasis,
    HardBreak,
    Image,
    InlineHTML,
    Link,
    PlainText,
    SoftBreak,
    Strong,
    Text,
    make_text,
)


class TestInlineRenderer:
    """Tests for fragment-by-fragment rendering."""

    def test_every_fragment_kind_has_handler(self):
        """Test that the handler table covers the closed fragment set."""
        assert set(InlineRenderer.HANDLERS) == set(FRAGMENT_KINDS)

    def test_plain_text_escaped(self, renderer: InlineRenderer):
        """Test that plain text is entity-encoded."""
        assert renderer.render(make_text("a < b")) == "a &lt; b"

    def test_plain_text_decodes_references(self, renderer: InlineRenderer):
        """Test that named references in plain text are normalized."""
        assert renderer.render(make_text("&copy; &amp; &quot;")) == "© &amp; &quot;"

    def test_code(self, renderer: InlineRenderer):
        """Test that code is wrapped and encoded without decoding."""
        assert renderer.render(make_text(Code("a<b && &amp;"))) == (
            "<code>a&lt;b &amp;&amp; &amp;amp;</code>"
        )

    def test_emphasis_and_strong(self, renderer: InlineRenderer):
        """Test emphasis and strong wrap their rendered content."""
        fragment = Strong(make_text("a ", Emphasis(make_text("b & c"))))
        assert renderer.render_fragment(fragment) == (
            "<strong>a <em>b &amp; c</em></strong>"
        )

    def test_link_without_title(self, renderer: InlineRenderer):
        """Test that the title attribute is omitted when absent."""
        fragment = Link(make_text("go"), "https://x")
        assert renderer.render_fragment(fragment) == '<a href="https://x">go</a>'

    def test_link_with_title(self, renderer: InlineRenderer):
        """Test link title attribute."""
        fragment = Link(make_text("go"), "https://x", "Go there")
        assert renderer.render_fragment(fragment) == (
            '<a href="https://x" title="Go there">go</a>'
        )

    def test_link_without_uri(self, renderer: InlineRenderer):
        """Test that a missing URI becomes an empty href."""
        assert renderer.render_fragment(Link(make_text("x"))) == '<a href="">x</a>'

    def test_link_uri_not_escaped(self, renderer: InlineRenderer):
        """Test that URIs are inserted verbatim."""
        fragment = Link(make_text("q"), "https://x/?a=1&b=2")
        assert 'href="https://x/?a=1&b=2"' in renderer.render_fragment(fragment)

    def test_autolink_uri(self, renderer: InlineRenderer):
        """Test URI autolink."""
        fragment = Autolink(AutolinkKind.URI, "https://example.com")
        assert renderer.render_fragment(fragment) == (
            '<a href="https://example.com">https://example.com</a>'
        )

    def test_autolink_email(self, renderer: InlineRenderer):
        """Test email autolink gets a mailto: href."""
        fragment = Autolink(AutolinkKind.EMAIL, "me@example.com")
        assert renderer.render_fragment(fragment) == (
            '<a href="mailto:me@example.com">me@example.com</a>'
        )

    def test_image_with_uri(self, renderer: InlineRenderer):
        """Test image tag with escaped plain alt text and title."""
        fragment = Image(
            make_text("a ", Emphasis(make_text("<b>"))), "pic.png", "A picture"
        )
        assert renderer.render_fragment(fragment) == (
            '<img src="pic.png" alt="a &lt;b&gt;" title="A picture"/>'
        )

    def test_image_without_title(self, renderer: InlineRenderer):
        """Test that image title is omitted when absent."""
        fragment = Image(make_text("alt"), "pic.png")
        assert renderer.render_fragment(fragment) == '<img src="pic.png" alt="alt"/>'

    def test_image_without_uri_renders_alt(self, renderer: InlineRenderer):
        """Test that an image without URI falls back to its alt text."""
        fragment = Image(make_text("alt ", Emphasis(make_text("text"))))
        assert renderer.render_fragment(fragment) == "alt <em>text</em>"

    def test_inline_html_verbatim(self, renderer: InlineRenderer):
        """Test that inline HTML is passed through unescaped."""
        fragment = InlineHTML('span class="x"')
        assert renderer.render_fragment(fragment) == '<span class="x">'

    @pytest.mark.parametrize(
        "character, count, expected",
        [
            ("*", 2, "**"),
            ("_", 3, "___"),
            ("<", 2, "&lt;&lt;"),
            (">", 1, "&gt;"),
            ("&", 2, "&&"),
            ("*", 0, ""),
        ],
    )
    def test_delimiter_run(
        self, renderer: InlineRenderer, character: str, count: int, expected: str
    ):
        """Test delimiter repetition and angle bracket mapping."""
        fragment = DelimiterRun(character, count, DelimiterFlags.LEFT_FLANKING)
        assert renderer.render_fragment(fragment) == expected

    def test_breaks(self, renderer: InlineRenderer):
        """Test soft and hard line breaks."""
        text = make_text("one", SoftBreak(), "two", HardBreak(), "three")
        assert renderer.render(text) == "one\ntwo<br/>three"

    def test_custom_placeholder(self, renderer: InlineRenderer):
        """Test that unknown custom fragments render a placeholder."""
        assert renderer.render_fragment(CustomFragment("mark")) == "<custom/>"

    def test_custom_extension(self):
        """Test that registered extensions render custom fragments."""
        def render_mark(renderer: InlineRenderer, fragment: CustomFragment) -> str:
            return f"<mark>{renderer.render(fragment.text)}</mark>"

        renderer = InlineRenderer(extensions={"mark": render_mark})
        fragment = CustomFragment("mark", make_text("a & b"))
        assert renderer.render_fragment(fragment) == "<mark>a &amp; b</mark>"
        assert renderer.render_fragment(CustomFragment("other")) == "<custom/>"

    def test_empty_text(self, renderer: InlineRenderer):
        """Test that empty inline content renders to an empty string."""
        assert renderer.render(Text()) == ""

    def test_fragments_concatenated_in_order(self, renderer: InlineRenderer):
        """Test left-to-right concatenation."""
        text = make_text(PlainText("1"), Code("2"), PlainText("3"))
        assert renderer.render(text) == "1<code>2</code>3"

    def test_deep_nesting(self, renderer: InlineRenderer):
        """Test recursion follows the input nesting."""
        text = make_text("x")
        for _ in range(50):
            text = make_text(Emphasis(text))
        assert renderer.render(text) == "<em>" * 50 + "x" + "</em>" * 50

    def test_rejects_non_fragment(self, renderer: InlineRenderer):
        """Test that non-fragment objects raise TypeError."""
        with pytest.raises(TypeError, match="Not an inline fragment"):
            renderer.render_fragment("plain string")
