"""Build the node tree from JSON-compatible data.

Upstream parsers hand documents over as nested mappings, one per node, with
a ``type`` key naming the node kind::

    {"type": "document", "blocks": [
        {"type": "heading", "level": 1, "text": [{"type": "text", "value": "Hi"}]}
    ]}

Inline content is a list of fragment mappings; a bare string is accepted as
shorthand for a ``text`` fragment.
"""

import json
from pathlib import Path
from typing import Any, Callable, Optional

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
)


class TreeFormatError(ValueError):
    """Input data does not describe a valid node tree."""

    pass


def _field(data: dict, name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise TreeFormatError(
            f"Node of type {data.get('type')!r} is missing field {name!r}"
        ) from None


def _int_field(data: dict, name: str, default: Optional[int] = None) -> int:
    value = _field(data, name) if default is None else data.get(name, default)
    # bool is an int subclass but never a valid count or level
    if not isinstance(value, int) or isinstance(value, bool):
        raise TreeFormatError(
            f"Field {name!r} of {data.get('type')!r} must be an integer, "
            f"got {value!r}"
        )
    return value


def _delimiter_flags(names: Any) -> DelimiterFlags:
    if not isinstance(names, list):
        raise TreeFormatError(f"Delimiter flags must be a list, got {names!r}")
    flags = DelimiterFlags.NONE
    for name in names:
        if not isinstance(name, str):
            raise TreeFormatError(f"Unknown delimiter flag: {name!r}")
        try:
            flags |= DelimiterFlags[name.upper()]
        except KeyError:
            raise TreeFormatError(f"Unknown delimiter flag: {name!r}") from None
    return flags


def _autolink_kind(value: str) -> AutolinkKind:
    try:
        return AutolinkKind(value)
    except ValueError:
        raise TreeFormatError(f"Unknown autolink kind: {value!r}") from None


def _blocks(data: dict, name: str = "blocks") -> tuple[Block, ...]:
    return tuple(load_block(child) for child in data.get(name, []))


FRAGMENT_LOADERS: dict[str, Callable[[dict], TextFragment]] = {
    "text": lambda d: PlainText(_field(d, "value")),
    "code": lambda d: Code(_field(d, "value")),
    "emphasis": lambda d: Emphasis(load_text(_field(d, "text"))),
    "strong": lambda d: Strong(load_text(_field(d, "text"))),
    "link": lambda d: Link(
        load_text(_field(d, "text")), d.get("uri"), d.get("title")
    ),
    "autolink": lambda d: Autolink(
        _autolink_kind(d.get("kind", "uri")), _field(d, "value")
    ),
    "image": lambda d: Image(
        load_text(d.get("alt", [])), d.get("uri"), d.get("title")
    ),
    "html": lambda d: InlineHTML(_field(d, "tag")),
    "delimiter": lambda d: DelimiterRun(
        _field(d, "character"),
        _int_field(d, "count", default=1),
        _delimiter_flags(d.get("flags", [])),
    ),
    "softbreak": lambda d: SoftBreak(),
    "hardbreak": lambda d: HardBreak(),
    "custom": lambda d: CustomFragment(
        _field(d, "name"), load_text(d.get("text", [])), d.get("attributes", {})
    ),
}

BLOCK_LOADERS: dict[str, Callable[[dict], Block]] = {
    "document": lambda d: Document(_blocks(d)),
    "heading": lambda d: Heading(
        _int_field(d, "level"), load_text(_field(d, "text"))
    ),
    "paragraph": lambda d: Paragraph(load_text(_field(d, "text"))),
    "blockquote": lambda d: Blockquote(_blocks(d)),
    "list": lambda d: ListBlock(
        tuple(ListItem(_blocks(item)) for item in d.get("items", [])),
        d.get("start"),
        d.get("tight", True),
    ),
    "list_item": lambda d: ListItem(_blocks(d)),
    "code_block": lambda d: CodeBlock(_field(d, "code"), d.get("language")),
    "html_block": lambda d: HtmlBlock(_field(d, "html")),
    "thematic_break": lambda d: ThematicBreak(),
    "custom_block": lambda d: CustomBlock(
        _field(d, "name"), d.get("attributes", {})
    ),
}


def _load_node(data: Any, loaders: dict[str, Callable[[dict], Any]], what: str):
    if not isinstance(data, dict):
        raise TreeFormatError(f"Expected a {what} object, got {type(data).__name__}")
    kind = data.get("type")
    loader = loaders.get(kind)
    if loader is None:
        raise TreeFormatError(f"Unknown {what} type: {kind!r}")
    return loader(data)


def load_fragment(data: Any) -> TextFragment:
    """Build one inline fragment from its mapping (or a bare string)."""
    if isinstance(data, str):
        return PlainText(data)
    return _load_node(data, FRAGMENT_LOADERS, "fragment")


def load_text(data: Any) -> Text:
    """Build inline content from a list of fragment mappings."""
    if isinstance(data, str):
        return Text((PlainText(data),))
    if not isinstance(data, list):
        raise TreeFormatError(f"Expected a fragment list, got {type(data).__name__}")
    return Text(tuple(load_fragment(item) for item in data))


def load_block(data: Any) -> Block:
    """Build a block (and everything below it) from its mapping."""
    return _load_node(data, BLOCK_LOADERS, "block")


def load_json(path: Path) -> Block:
    """Load a block tree from a JSON file.

    A top-level list is read as the blocks of a document.

    Raises:
        TreeFormatError: If the file is not valid JSON or not a valid tree
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"Invalid JSON in {path}: {e}") from e
    if isinstance(data, list):
        return Document(tuple(load_block(item) for item in data))
    return load_block(data)
