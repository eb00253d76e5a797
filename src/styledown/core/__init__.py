"""Core generation logic for styledown."""

from styledown.core.generator import (
    StyledTextGenerator,
    UnsupportedBlockError,
    get_default_generator,
)

__all__ = [
    "StyledTextGenerator",
    "UnsupportedBlockError",
    "get_default_generator",
]
