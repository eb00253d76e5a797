"""Styled-text generator: depth-first traversal of a document tree."""

import logging
from typing import Iterable, Mapping, Optional

from styledown.config import (
    DEFAULT_FONT_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    GeneratorConfig,
    GeneratorOptions,
    Settings,
    get_settings,
)
from styledown.formatting.attributes import StyledRun, StyledText
from styledown.formatting.inline import CustomRenderer, InlineRenderer
from styledown.formatting.ir import (
    Block,
    Document,
    Heading,
    Paragraph,
    Text,
    TextFragment,
)
from styledown.formatting.styles import StyleTable

logger = logging.getLogger(__name__)


class UnsupportedBlockError(Exception):
    """A block kind the generator does not render, in strict mode."""

    def __init__(self, block: Block) -> None:
        self.block = block
        super().__init__(f"Unsupported block kind: {type(block).__name__}")


class StyledTextGenerator:
    """Converts Markdown blocks into styled text.

    Pipeline per block:
    1. Look up the block handler by block type
    2. Compute the run attributes via the style table
    3. Render the inline content to escaped markup
    4. Append one run to the buffer

    Headings and paragraphs produce runs; documents recurse into their
    blocks. Other kinds are skipped, or rejected with
    ``GeneratorOptions.STRICT``.
    """

    BLOCK_HANDLERS: dict[type, str] = {
        Document: "_generate_document",
        Heading: "_generate_text_block",
        Paragraph: "_generate_text_block",
    }

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        *,
        options: GeneratorOptions = GeneratorOptions.NONE,
        font_size: float = DEFAULT_FONT_SIZE,
        font_family: str = DEFAULT_FONT_FAMILY,
        font_color: str = DEFAULT_FONT_COLOR,
        extensions: Optional[Mapping[str, CustomRenderer]] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Complete configuration; overrides the keyword values
            options: Behavioral flags
            font_size: Base font size in points
            font_family: CSS-like font family list
            font_color: Text color
            extensions: Renderers for custom inline fragments, by name

        Raises:
            FontResolutionError: If the font family cannot be resolved
            ColorResolutionError: If the font color is invalid
        """
        self.config = config or GeneratorConfig(
            options=options,
            font_size=font_size,
            font_family=font_family,
            font_color=font_color,
        )
        self.styles = StyleTable(self.config)
        self.inline = InlineRenderer(extensions)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        extensions: Optional[Mapping[str, CustomRenderer]] = None,
    ) -> "StyledTextGenerator":
        """Create a generator configured from environment settings."""
        settings = settings or get_settings()
        return cls(settings.to_generator_config(), extensions=extensions)

    @property
    def options(self) -> GeneratorOptions:
        return self.config.options

    @property
    def font_size(self) -> float:
        return self.config.font_size

    @property
    def font_family(self) -> str:
        return self.config.font_family

    @property
    def font_color(self) -> str:
        return self.config.font_color

    def generate(
        self,
        block: Block,
        existing: Optional[StyledText] = None,
    ) -> StyledText:
        """Append the styled runs of a block to a buffer.

        Args:
            block: The block to render (a Document renders all its blocks)
            existing: Buffer to append to; a new one is created if omitted

        Returns:
            The updated buffer. Always use this return value.

        Raises:
            UnsupportedBlockError: In strict mode, for block kinds that
                produce no output. Nothing is appended in that case.
        """
        updated = StyledText() if existing is None else existing
        handler_name = self.BLOCK_HANDLERS.get(type(block))
        if handler_name is None:
            if self.config.strict:
                raise UnsupportedBlockError(block)
            logger.debug("Skipping unsupported block: %s", type(block).__name__)
            return updated
        return getattr(self, handler_name)(block, updated)

    def generate_blocks(
        self,
        blocks: Iterable[Block],
        existing: Optional[StyledText] = None,
    ) -> StyledText:
        """Append the styled runs of several blocks, in order.

        Like a Document, the blocks are rendered as a unit: if any block
        raises, nothing is appended to ``existing``.
        """
        updated = StyledText() if existing is None else existing
        scratch = StyledText()
        for block in blocks:
            scratch = self.generate(block, scratch)
        updated.extend(scratch)
        return updated

    def generate_text(self, text: Text) -> str:
        """Render inline content to escaped markup."""
        return self.inline.render(text)

    def generate_fragment(self, fragment: TextFragment) -> str:
        """Render a single inline fragment to escaped markup."""
        return self.inline.render_fragment(fragment)

    def markup(self, block: Block) -> list[str]:
        """Get the inline markup of every run a block produces."""
        return [run.text for run in self.generate(block)]

    def _generate_document(
        self, document: Document, existing: StyledText
    ) -> StyledText:
        return self.generate_blocks(document.blocks, existing)

    def _generate_text_block(
        self, block: Block, existing: StyledText
    ) -> StyledText:
        attributes = self.styles.attributes_for(block)
        existing.append(StyledRun(self.generate_text(block.text), attributes))
        return existing


# Global default generator
_default_generator: Optional[StyledTextGenerator] = None


def get_default_generator() -> StyledTextGenerator:
    """Get the generator with default configuration, creating it if needed."""
    global _default_generator
    if _default_generator is None:
        _default_generator = StyledTextGenerator()
    return _default_generator
