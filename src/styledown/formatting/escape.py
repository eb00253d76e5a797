"""Character reference decoding and XML entity encoding for inline text."""

import re
from html.entities import html5
from xml.sax.saxutils import escape

NAMED_REFERENCE_PATTERN = re.compile(r"&([A-Za-z][A-Za-z0-9]*);")

# `&`, `<` and `>` are always handled by saxutils.escape
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def _replace_named(match: re.Match) -> str:
    return html5.get(match.group(1) + ";", match.group(0))


def decode_named_characters(text: str) -> str:
    """Replace HTML5 named character references with their characters.

    Unknown names and numeric references are left untouched.

    Args:
        text: Text possibly containing references such as ``&amp;``

    Returns:
        Text with every known named reference decoded
    """
    if "&" not in text:
        return text
    return NAMED_REFERENCE_PATTERN.sub(_replace_named, text)


def encode_xml_entities(text: str) -> str:
    """Encode the five predefined XML entities (& < > " ')."""
    return escape(text, _QUOTE_ENTITIES)


def escape_text(text: str) -> str:
    """Normalize literal text for inline markup.

    Named references are decoded first so that ``&amp;`` in the source
    and a bare ``&`` both end up as a single ``&amp;``.
    """
    return encode_xml_entities(decode_named_characters(text))
