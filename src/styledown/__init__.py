"""Render parsed Markdown documents into styled text."""

from styledown.config import GeneratorConfig, GeneratorOptions
from styledown.core.generator import (
    StyledTextGenerator,
    UnsupportedBlockError,
    get_default_generator,
)
from styledown.formatting.attributes import RunAttributes, StyledRun, StyledText
from styledown.formatting.styles import (
    ColorResolutionError,
    FontResolutionError,
    StyleResolutionError,
)

__version__ = "0.1.0"

__all__ = [
    "GeneratorConfig",
    "GeneratorOptions",
    "StyledTextGenerator",
    "UnsupportedBlockError",
    "get_default_generator",
    "RunAttributes",
    "StyledRun",
    "StyledText",
    "StyleResolutionError",
    "FontResolutionError",
    "ColorResolutionError",
    "__version__",
]
