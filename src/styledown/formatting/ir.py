"""Intermediate Representation for parsed Markdown documents.

This module defines the node tree handed to the generator by an upstream
Markdown parser. Blocks and inline fragments are closed sets of frozen
dataclasses: the generator reads them and never mutates them.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Any, Mapping, Optional, Union


# =============================================================================
# Inline content
# =============================================================================

class AutolinkKind(Enum):
    """Target kind of an autolink (``<https://...>`` or ``<a@b.c>``)."""

    URI = "uri"
    EMAIL = "email"


class DelimiterFlags(Flag):
    """Delimiter run properties recorded by the parser (combinable with |)."""

    NONE = 0
    LEFT_FLANKING = auto()
    RIGHT_FLANKING = auto()
    LEFT_PUNCTUATION = auto()
    RIGHT_PUNCTUATION = auto()
    ESCAPED = auto()
    IMAGE = auto()


@dataclass(frozen=True)
class Text:
    """Inline content of a block: an ordered sequence of fragments.

    Attributes:
        fragments: The fragments, in reading order
    """

    fragments: tuple["TextFragment", ...] = ()

    @property
    def plain_text(self) -> str:
        """Get the textual content without any markup."""
        return "".join(fragment.plain_text for fragment in self.fragments)

    def __iter__(self):
        return iter(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)

    def __str__(self) -> str:
        return self.plain_text


@dataclass(frozen=True)
class PlainText:
    """Literal text, possibly holding named character references."""

    value: str

    @property
    def plain_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Code:
    """Inline code span."""

    value: str

    @property
    def plain_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Emphasis:
    """Emphasized text (``*text*``)."""

    text: Text

    @property
    def plain_text(self) -> str:
        return self.text.plain_text


@dataclass(frozen=True)
class Strong:
    """Strongly emphasized text (``**text**``)."""

    text: Text

    @property
    def plain_text(self) -> str:
        return self.text.plain_text


@dataclass(frozen=True)
class Link:
    """Inline link.

    Attributes:
        text: The link label
        uri: Link destination (None when the source had none)
        title: Optional link title
    """

    text: Text
    uri: Optional[str] = None
    title: Optional[str] = None

    @property
    def plain_text(self) -> str:
        return self.text.plain_text


@dataclass(frozen=True)
class Autolink:
    """Autolink to a URI or an email address."""

    kind: AutolinkKind
    value: str

    @property
    def plain_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Image:
    """Inline image.

    Attributes:
        alt: Alternative text, itself inline content
        uri: Image source (None when the source had none)
        title: Optional image title
    """

    alt: Text
    uri: Optional[str] = None
    title: Optional[str] = None

    @property
    def plain_text(self) -> str:
        return self.alt.plain_text


@dataclass(frozen=True)
class InlineHTML:
    """Raw inline HTML tag, without its angle brackets."""

    tag: str

    @property
    def plain_text(self) -> str:
        return ""


@dataclass(frozen=True)
class DelimiterRun:
    """A run of delimiter characters the parser did not match.

    Attributes:
        character: The delimiter character (``*``, ``_``, ``<`` ...)
        count: Number of repetitions
        flags: Flanking/punctuation properties of the run
    """

    character: str
    count: int = 1
    flags: DelimiterFlags = DelimiterFlags.NONE

    @property
    def plain_text(self) -> str:
        return self.character * max(self.count, 0)


@dataclass(frozen=True)
class SoftBreak:
    """Soft line break (a plain newline in the source)."""

    @property
    def plain_text(self) -> str:
        return "\n"


@dataclass(frozen=True)
class HardBreak:
    """Hard line break (trailing double space or backslash)."""

    @property
    def plain_text(self) -> str:
        return "\n"


@dataclass(frozen=True)
class CustomFragment:
    """Fragment produced by a parser extension.

    Attributes:
        name: Extension name, used to look up a renderer
        text: Optional nested content
        attributes: Extension-specific values
    """

    name: str
    text: Text = Text()
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @property
    def plain_text(self) -> str:
        return self.text.plain_text


TextFragment = Union[
    PlainText,
    Code,
    Emphasis,
    Strong,
    Link,
    Autolink,
    Image,
    InlineHTML,
    DelimiterRun,
    SoftBreak,
    HardBreak,
    CustomFragment,
]

FRAGMENT_KINDS: tuple[type, ...] = (
    PlainText,
    Code,
    Emphasis,
    Strong,
    Link,
    Autolink,
    Image,
    InlineHTML,
    DelimiterRun,
    SoftBreak,
    HardBreak,
    CustomFragment,
)


def make_text(*fragments: Union[TextFragment, str]) -> Text:
    """Build a Text from fragments, wrapping bare strings as PlainText."""
    return Text(tuple(
        PlainText(f) if isinstance(f, str) else f for f in fragments
    ))


# =============================================================================
# Blocks
# =============================================================================

@dataclass(frozen=True)
class Document:
    """A whole document: an ordered sequence of blocks."""

    blocks: tuple["Block", ...] = ()


@dataclass(frozen=True)
class Heading:
    """ATX or setext heading.

    Attributes:
        level: Heading level, 1 to 6
        text: Heading content
    """

    level: int
    text: Text


@dataclass(frozen=True)
class Paragraph:
    """A paragraph of inline content."""

    text: Text


@dataclass(frozen=True)
class Blockquote:
    """Block quote containing nested blocks."""

    blocks: tuple["Block", ...] = ()


@dataclass(frozen=True)
class ListItem:
    """A single list item containing nested blocks."""

    blocks: tuple["Block", ...] = ()


@dataclass(frozen=True)
class ListBlock:
    """Bullet or ordered list.

    Attributes:
        items: The list items
        start: First number for ordered lists, None for bullet lists
        tight: Whether items are separated without blank lines
    """

    items: tuple[ListItem, ...] = ()
    start: Optional[int] = None
    tight: bool = True


@dataclass(frozen=True)
class CodeBlock:
    """Indented or fenced code block."""

    code: str
    language: Optional[str] = None


@dataclass(frozen=True)
class HtmlBlock:
    """Raw HTML block."""

    html: str


@dataclass(frozen=True)
class ThematicBreak:
    """Horizontal rule."""


@dataclass(frozen=True)
class CustomBlock:
    """Block produced by a parser extension."""

    name: str
    attributes: Mapping[str, Any] = field(default_factory=dict)


Block = Union[
    Document,
    Heading,
    Paragraph,
    Blockquote,
    ListBlock,
    ListItem,
    CodeBlock,
    HtmlBlock,
    ThematicBreak,
    CustomBlock,
]

BLOCK_KINDS: tuple[type, ...] = (
    Document,
    Heading,
    Paragraph,
    Blockquote,
    ListBlock,
    ListItem,
    CodeBlock,
    HtmlBlock,
    ThematicBreak,
    CustomBlock,
)
