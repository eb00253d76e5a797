"""Tests for configuration and settings."""

from pathlib import Path

import pytest

from styledown.config import (
    DEFAULT_FONT_COLOR,
    DEFAULT_FONT_FAMILY,
    GeneratorConfig,
    GeneratorOptions,
    Settings,
    get_settings,
    load_settings,
)


class TestGeneratorConfig:
    """Tests for the immutable generator configuration."""

    def test_defaults(self):
        """Test default values."""
        config = GeneratorConfig()

        assert config.options == GeneratorOptions.NONE
        assert config.font_size == 14.0
        assert config.font_family == DEFAULT_FONT_FAMILY == '"Times New Roman",Times,serif'
        assert config.font_color == DEFAULT_FONT_COLOR
        assert config.strict is False

    def test_frozen(self):
        """Test that the configuration cannot be mutated."""
        config = GeneratorConfig()
        with pytest.raises(AttributeError):
            config.font_size = 20

    @pytest.mark.parametrize("font_size", [0, -1.5])
    def test_rejects_non_positive_size(self, font_size: float):
        """Test that the font size must be positive."""
        with pytest.raises(ValueError):
            GeneratorConfig(font_size=font_size)

    def test_rejects_empty_family(self):
        """Test that the font family must not be blank."""
        with pytest.raises(ValueError):
            GeneratorConfig(font_family="  ")

    def test_strict_flag(self):
        """Test the strict property follows the option flags."""
        options = GeneratorOptions.RESERVED | GeneratorOptions.STRICT
        assert GeneratorConfig(options=options).strict is True
        assert GeneratorConfig(options=GeneratorOptions.RESERVED).strict is False


class TestSettings:
    """Tests for environment-based settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Test settings defaults without environment."""
        for name in ("STYLEDOWN_FONT_SIZE", "STYLEDOWN_STRICT", "STYLEDOWN_FONT_FAMILY"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.font_size == 14.0
        assert settings.strict is False
        assert settings.to_generator_config() == GeneratorConfig()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Test that environment variables are used."""
        monkeypatch.setenv("STYLEDOWN_FONT_SIZE", "12")
        monkeypatch.setenv("STYLEDOWN_FONT_FAMILY", "Helvetica")
        monkeypatch.setenv("STYLEDOWN_FONT_COLOR", "#333333")
        monkeypatch.setenv("STYLEDOWN_STRICT", "true")

        config = Settings(_env_file=None).to_generator_config()

        assert config.font_size == 12.0
        assert config.font_family == "Helvetica"
        assert config.font_color == "#333333"
        assert config.options == GeneratorOptions.STRICT

    def test_rejects_invalid_size(self, monkeypatch: pytest.MonkeyPatch):
        """Test that settings validation rejects a zero size."""
        monkeypatch.setenv("STYLEDOWN_FONT_SIZE", "0")
        with pytest.raises(ValueError):
            Settings(_env_file=None)

    def test_load_from_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test loading settings from a specific .env file."""
        monkeypatch.delenv("STYLEDOWN_FONT_SIZE", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("STYLEDOWN_FONT_SIZE=9\n", encoding="utf-8")

        settings = load_settings(env_file)

        assert settings.font_size == 9.0
        assert get_settings() is settings

    def test_get_settings_cached(self):
        """Test that the global settings instance is reused."""
        assert get_settings() is get_settings()
