"""Style table: block kind and configuration to run attributes.

Font and color values are resolved against reportlab once, when the table
is built. A family list that names no font reportlab can supply is a
configuration error, never replaced by some other font.
"""

import logging
from typing import Optional

from reportlab.lib.colors import toColor
from reportlab.pdfbase import pdfmetrics

from styledown.config import GeneratorConfig
from styledown.formatting.attributes import ParagraphAttributes, RunAttributes
from styledown.formatting.ir import Block, Heading, Paragraph

logger = logging.getLogger(__name__)

# Family names (lowercase) mapped to the base-14 font that implements them
FAMILY_ALIASES: dict[str, str] = {
    "times new roman": "Times-Roman",
    "times": "Times-Roman",
    "serif": "Times-Roman",
    "helvetica": "Helvetica",
    "arial": "Helvetica",
    "sans-serif": "Helvetica",
    "courier": "Courier",
    "courier new": "Courier",
    "monospace": "Courier",
    "symbol": "Symbol",
    "zapfdingbats": "ZapfDingbats",
}

HEADING_SCALE = 2


class StyleResolutionError(ValueError):
    """A configured style resource is unavailable."""

    pass


class FontResolutionError(StyleResolutionError):
    """No font in the configured family list can be resolved."""

    pass


class ColorResolutionError(StyleResolutionError):
    """The configured color is not a valid color value."""

    pass


def parse_font_family(value: str) -> list[str]:
    """Split a CSS-like family list into candidate names.

    ``'"Times New Roman",Times,serif'`` gives
    ``['Times New Roman', 'Times', 'serif']``.
    """
    candidates: list[str] = []
    for part in value.split(","):
        name = part.strip().strip("\"'").strip()
        if name:
            candidates.append(name)
    return candidates


def _lookup_font(name: str) -> Optional[str]:
    """Get the reportlab font name for one candidate, if there is one."""
    if name in pdfmetrics.getRegisteredFontNames() or name in pdfmetrics.standardFonts:
        return name
    return FAMILY_ALIASES.get(name.lower())


def resolve_font(family: str) -> str:
    """Resolve a family list to the first font reportlab can supply.

    Args:
        family: CSS-like family list, most preferred first

    Returns:
        A font name usable with reportlab

    Raises:
        FontResolutionError: If no candidate resolves
    """
    candidates = parse_font_family(family)
    for candidate in candidates:
        font_name = _lookup_font(candidate)
        if font_name is None:
            continue
        try:
            pdfmetrics.getFont(font_name)
        except KeyError as e:
            raise FontResolutionError(
                f"Font {font_name!r} for family {candidate!r} is not available"
            ) from e
        logger.debug("Resolved font family %r to %s", family, font_name)
        return font_name

    raise FontResolutionError(
        f"Cannot resolve font family: {family!r}. "
        f"Register one of {', '.join(candidates) or 'the named fonts'} "
        f"with reportlab or use a standard family."
    )


def resolve_color(value: str) -> str:
    """Check that a color value is understood by reportlab.

    Returns:
        The value unchanged

    Raises:
        ColorResolutionError: If the value is not a color
    """
    try:
        toColor(value)
    except ValueError as e:
        raise ColorResolutionError(f"Invalid font color: {value!r}") from e
    return value


class StyleTable:
    """Map blocks to run attributes for one configuration.

    The table holds only immutable data, so ``attributes_for`` is a pure
    function of the block and may be called from several threads.
    """

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize the table, resolving font and color.

        Raises:
            FontResolutionError: If the font family cannot be resolved
            ColorResolutionError: If the font color is invalid
        """
        self.config = config
        self.font_name = resolve_font(config.font_family)
        self.font_color = resolve_color(config.font_color)

    def attributes_for(self, block: Block) -> Optional[RunAttributes]:
        """Get the attributes of the run a block produces.

        Returns:
            The run attributes, or None for kinds that produce no run
        """
        if isinstance(block, Heading):
            return self.heading_attributes(block.level)
        if isinstance(block, Paragraph):
            return self.paragraph_attributes()
        return None

    def heading_attributes(self, level: int) -> RunAttributes:
        """Attributes for a heading: double size, one base size after."""
        size = self.config.font_size
        return self._attributes(
            font_size=size * HEADING_SCALE,
            paragraph_spacing=size,
            header_level=level,
        )

    def paragraph_attributes(self) -> RunAttributes:
        """Attributes for a paragraph: base size, 0.7 base size after."""
        size = self.config.font_size
        return self._attributes(
            font_size=size,
            paragraph_spacing=size * 7 / 10,
        )

    def _attributes(
        self,
        font_size: float,
        paragraph_spacing: float,
        header_level: Optional[int] = None,
    ) -> RunAttributes:
        paragraph = ParagraphAttributes(
            # 1.2x the font size, as 6/5 so 14pt gives exactly 16.8
            minimum_line_height=font_size * 6 / 5,
            paragraph_spacing=paragraph_spacing,
            header_level=header_level,
        )
        return RunAttributes(
            foreground_color=self.font_color,
            stroke_color=self.font_color,
            font_family=self.config.font_family,
            font_name=self.font_name,
            font_size=font_size,
            paragraph=paragraph,
        )
