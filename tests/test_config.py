"""Tests for environment settings (config.py)."""

from __future__ import annotations

import pytest

from pier.config import (
    DEFAULT_LOG_LEVEL,
    Settings,
    load_settings,
    parse_color_profile,
    parse_log_level,
)
from pier.core.models import ColorProfile
from pier.exceptions import ConfigurationError


class TestParseColorProfile:
    @pytest.mark.parametrize("value", ["auto", "AUTO", "", "  "])
    def test_auto(self, value: str) -> None:
        assert parse_color_profile(value) is None

    @pytest.mark.parametrize("profile", list(ColorProfile))
    def test_each_profile(self, profile: ColorProfile) -> None:
        assert parse_color_profile(profile.value.upper()) is profile

    def test_unknown(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown color profile") as exc_info:
            parse_color_profile("16million")
        assert exc_info.value.hint is not None
        assert "truecolor" in exc_info.value.hint


class TestParseLogLevel:
    def test_normalised(self) -> None:
        assert parse_log_level(" debug ") == "DEBUG"

    def test_empty_is_default(self) -> None:
        assert parse_log_level("") == DEFAULT_LOG_LEVEL

    def test_unknown(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_log_level("chatty")


class TestLoadSettings:
    def test_defaults(self) -> None:
        assert load_settings({}) == Settings(color_profile=None, log_level="WARNING")

    def test_from_mapping(self) -> None:
        settings = load_settings(
            {"PIER_COLOR_PROFILE": "ansi256", "PIER_LOG_LEVEL": "info"}
        )
        assert settings.color_profile is ColorProfile.ANSI256
        assert settings.log_level == "INFO"

    def test_from_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIER_COLOR_PROFILE", "ascii")
        assert load_settings().color_profile is ColorProfile.ASCII

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            load_settings({"PIER_COLOR_PROFILE": "sepia"})

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            load_settings({}).log_level = "DEBUG"  # type: ignore[misc]
