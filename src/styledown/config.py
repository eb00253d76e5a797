"""Configuration management for styledown."""

from dataclasses import dataclass
from enum import Flag, auto
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FONT_SIZE = 14.0
DEFAULT_FONT_FAMILY = '"Times New Roman",Times,serif'
DEFAULT_FONT_COLOR = "#000000"


class GeneratorOptions(Flag):
    """Behavioral toggles for the generator (combinable with |)."""

    NONE = 0
    # Placeholder kept so existing option values stay stable
    RESERVED = auto()
    # Raise on block kinds the generator does not render
    STRICT = auto()


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable generator configuration, shared by all rendering calls.

    Attributes:
        options: Behavioral flags
        font_size: Base font size in points (paragraph size)
        font_family: CSS-like font family list, tried in order
        font_color: Text color (hex value or color name)
    """

    options: GeneratorOptions = GeneratorOptions.NONE
    font_size: float = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    font_color: str = DEFAULT_FONT_COLOR

    def __post_init__(self) -> None:
        if not self.font_size > 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if not self.font_family.strip():
            raise ValueError("font_family must not be empty")
        if not self.font_color.strip():
            raise ValueError("font_color must not be empty")

    @property
    def strict(self) -> bool:
        """Check if unsupported blocks should raise."""
        return GeneratorOptions.STRICT in self.options


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    font_size: float = Field(
        default=DEFAULT_FONT_SIZE,
        gt=0,
        alias="STYLEDOWN_FONT_SIZE",
    )
    font_family: str = Field(
        default=DEFAULT_FONT_FAMILY,
        alias="STYLEDOWN_FONT_FAMILY",
    )
    font_color: str = Field(
        default=DEFAULT_FONT_COLOR,
        alias="STYLEDOWN_FONT_COLOR",
    )
    strict: bool = Field(
        default=False,
        alias="STYLEDOWN_STRICT",
    )
    log_level: str = Field(
        default="WARNING",
        alias="STYLEDOWN_LOG_LEVEL",
    )

    def to_generator_config(self) -> GeneratorConfig:
        """Build the generator configuration these settings describe."""
        options = GeneratorOptions.STRICT if self.strict else GeneratorOptions.NONE
        return GeneratorConfig(
            options=options,
            font_size=self.font_size,
            font_family=self.font_family,
            font_color=self.font_color,
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
