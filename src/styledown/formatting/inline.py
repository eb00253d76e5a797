"""Inline fragment renderer.

Converts a block's inline content into a single markup string. Literal text
is entity-encoded; structural pieces (tags, URIs, titles, raw inline HTML)
are emitted verbatim, so callers embedding the markup in a web view must
sanitize it themselves.
"""

import logging
from typing import Callable, Mapping, Optional

from styledown.formatting.escape import encode_xml_entities, escape_text
from styledown.formatting.ir import (
    FRAGMENT_KINDS,
    Autolink,
    AutolinkKind,
    Code,
    CustomFragment,
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
    TextFragment,
)

logger = logging.getLogger(__name__)

CUSTOM_PLACEHOLDER = "<custom/>"

# Delimiters that would otherwise open or close a tag
DELIMITER_ENTITIES = {"<": "&lt;", ">": "&gt;"}

# Renders a custom fragment; receives the renderer for nested content
CustomRenderer = Callable[["InlineRenderer", CustomFragment], str]


def _title_attribute(title: Optional[str]) -> str:
    return "" if title is None else f' title="{title}"'


class InlineRenderer:
    """Render Text into inline markup.

    Each fragment type maps to exactly one handler in ``HANDLERS``.
    Fragments from parser extensions are rendered by the handler registered
    for their name, or as a ``<custom/>`` placeholder.
    """

    HANDLERS: dict[type, str] = {
        PlainText: "_render_plain_text",
        Code: "_render_code",
        Emphasis: "_render_emphasis",
        Strong: "_render_strong",
        Link: "_render_link",
        Autolink: "_render_autolink",
        Image: "_render_image",
        InlineHTML: "_render_inline_html",
        DelimiterRun: "_render_delimiter_run",
        SoftBreak: "_render_soft_break",
        HardBreak: "_render_hard_break",
        CustomFragment: "_render_custom",
    }

    def __init__(
        self,
        extensions: Optional[Mapping[str, CustomRenderer]] = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            extensions: Renderers for custom fragments, keyed by name
        """
        missing = [kind.__name__ for kind in FRAGMENT_KINDS
                   if kind not in self.HANDLERS]
        if missing:
            raise TypeError(f"No inline handler for: {', '.join(missing)}")
        self.extensions: dict[str, CustomRenderer] = dict(extensions or {})

    def render(self, text: Text) -> str:
        """Render a Text to markup, fragment by fragment."""
        return "".join(self.render_fragment(fragment) for fragment in text)

    def render_fragment(self, fragment: TextFragment) -> str:
        """Render a single fragment to markup.

        Raises:
            TypeError: If the object is not an inline fragment
        """
        handler_name = self.HANDLERS.get(type(fragment))
        if handler_name is None:
            raise TypeError(
                f"Not an inline fragment: {type(fragment).__name__}"
            )
        return getattr(self, handler_name)(fragment)

    def _render_plain_text(self, fragment: PlainText) -> str:
        return escape_text(fragment.value)

    def _render_code(self, fragment: Code) -> str:
        return f"<code>{encode_xml_entities(fragment.value)}</code>"

    def _render_emphasis(self, fragment: Emphasis) -> str:
        return f"<em>{self.render(fragment.text)}</em>"

    def _render_strong(self, fragment: Strong) -> str:
        return f"<strong>{self.render(fragment.text)}</strong>"

    def _render_link(self, fragment: Link) -> str:
        uri = fragment.uri or ""
        title = _title_attribute(fragment.title)
        return f'<a href="{uri}"{title}>{self.render(fragment.text)}</a>'

    def _render_autolink(self, fragment: Autolink) -> str:
        value = fragment.value
        if fragment.kind is AutolinkKind.EMAIL:
            return f'<a href="mailto:{value}">{value}</a>'
        return f'<a href="{value}">{value}</a>'

    def _render_image(self, fragment: Image) -> str:
        if fragment.uri is None:
            return self.render(fragment.alt)
        alt = escape_text(fragment.alt.plain_text)
        title = _title_attribute(fragment.title)
        return f'<img src="{fragment.uri}" alt="{alt}"{title}/>'

    def _render_inline_html(self, fragment: InlineHTML) -> str:
        return f"<{fragment.tag}>"

    def _render_delimiter_run(self, fragment: DelimiterRun) -> str:
        char = DELIMITER_ENTITIES.get(fragment.character, fragment.character)
        return char * max(fragment.count, 0)

    def _render_soft_break(self, fragment: SoftBreak) -> str:
        return "\n"

    def _render_hard_break(self, fragment: HardBreak) -> str:
        return "<br/>"

    def _render_custom(self, fragment: CustomFragment) -> str:
        extension = self.extensions.get(fragment.name)
        if extension is None:
            logger.debug("No renderer for custom fragment %r", fragment.name)
            return CUSTOM_PLACEHOLDER
        return extension(self, fragment)
