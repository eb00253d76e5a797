"""Pytest fixtures for styledown tests."""

import pytest

from styledown import config
from styledown.core.generator import StyledTextGenerator
from styledown.formatting.inline import InlineRenderer
from styledown.formatting.ir import (
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Link,
    Paragraph,
    ThematicBreak,
    make_text,
)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop any cached global settings between tests."""
    monkeypatch.setattr(config, "_settings", None)


@pytest.fixture
def generator() -> StyledTextGenerator:
    """Generator with the default configuration."""
    return StyledTextGenerator()


@pytest.fixture
def renderer() -> InlineRenderer:
    """Inline renderer without extensions."""
    return InlineRenderer()


@pytest.fixture
def sample_document() -> Document:
    """Document mixing rendered and unrendered block kinds."""
    return Document((
        Heading(1, make_text("Getting started")),
        Paragraph(make_text("Install with ", Emphasis(make_text("pip")), ".")),
        ThematicBreak(),
        Heading(2, make_text("Usage")),
        CodeBlock("styledown doc.json", language="sh"),
        Paragraph(make_text(
            "See ", Link(make_text("the docs"), "https://example.com"), "."
        )),
    ))


@pytest.fixture
def sample_tree() -> dict:
    """JSON-compatible tree as produced by an upstream parser."""
    return {
        "type": "document",
        "blocks": [
            {"type": "heading", "level": 1, "text": [{"type": "text", "value": "Title"}]},
            {"type": "thematic_break"},
            {"type": "paragraph", "text": [
                {"type": "text", "value": "a < b "},
                {"type": "strong", "text": ["bold"]},
            ]},
        ],
    }
