"""Node tree, inline rendering and styling for styledown."""

from styledown.formatting.ir import (
    Autolink,
    AutolinkKind,
    Block,
    Blockquote,
    Code,
    CodeBlock,
    CustomBlock,
    CustomFragment,
    DelimiterFlags,
    DelimiterRun,
    Document,
    Emphasis,
    HardBreak,
    Heading,
    HtmlBlock,
    Image,
    InlineHTML,
    Link,
    ListBlock,
    ListItem,
    Paragraph,
    PlainText,
    SoftBreak,
    Strong,
    Text,
    TextFragment,
    ThematicBreak,
    make_text,
)
from styledown.formatting.attributes import (
    LineBreakMode,
    ParagraphAttributes,
    RunAttributes,
    StyledRun,
    StyledText,
    WritingDirection,
)
from styledown.formatting.inline import InlineRenderer
from styledown.formatting.styles import StyleTable

__all__ = [
    "Autolink",
    "AutolinkKind",
    "Block",
    "Blockquote",
    "Code",
    "CodeBlock",
    "CustomBlock",
    "CustomFragment",
    "DelimiterFlags",
    "DelimiterRun",
    "Document",
    "Emphasis",
    "HardBreak",
    "Heading",
    "HtmlBlock",
    "Image",
    "InlineHTML",
    "Link",
    "ListBlock",
    "ListItem",
    "Paragraph",
    "PlainText",
    "SoftBreak",
    "Strong",
    "Text",
    "TextFragment",
    "ThematicBreak",
    "make_text",
    "LineBreakMode",
    "ParagraphAttributes",
    "RunAttributes",
    "StyledRun",
    "StyledText",
    "WritingDirection",
    "InlineRenderer",
    "StyleTable",
]
