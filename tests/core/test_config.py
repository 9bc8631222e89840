"""
Tests for tolstoi.core.config and tolstoi.core.exceptions.

Tests organized by concern:
- TestSettingsDefaults: defaults match the War and Peace edition
- TestSettingsEnvironment: TOLSTOI_ prefixed overrides
- TestExceptions: hierarchy and messages
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tolstoi.core.config import Settings, get_settings
from tolstoi.core.exceptions import ConfigurationError, InputReadError, TolstoiError


class TestSettingsDefaults:
    """Default settings."""

    def test_get_settings_returns_settings(self) -> None:
        assert isinstance(get_settings(), Settings)

    def test_default_markers(self) -> None:
        """Markers default to the Project Gutenberg War and Peace edition."""
        settings = Settings()

        assert settings.chapter_marker == "CHAPTER "
        assert settings.book_end_marker == (
            "END OF THE PROJECT GUTENBERG EBOOK, WAR AND PEACE"
        )

    def test_default_tie_tolerance_is_exact(self) -> None:
        assert Settings().tie_tolerance == 0.0

    def test_tracing_disabled_by_default(self) -> None:
        assert Settings().tracing_enabled is False

    def test_no_version_field(self) -> None:
        """The package version lives in tolstoi.__version__ only."""
        assert "version" not in Settings.model_fields


class TestSettingsEnvironment:
    """Environment variable overrides."""

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOLSTOI_LOG_LEVEL", "DEBUG")

        assert get_settings().log_level == "DEBUG"

    def test_chapter_marker_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOLSTOI_CHAPTER_MARKER", "BOOK ")

        assert get_settings().chapter_marker == "BOOK "

    def test_unprefixed_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert get_settings().log_level == "INFO"

    def test_negative_tolerance_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOLSTOI_TIE_TOLERANCE", "-0.1")

        with pytest.raises(ValidationError):
            get_settings()


class TestExceptions:
    """Exception hierarchy."""

    def test_configuration_error_is_tolstoi_error(self) -> None:
        assert issubclass(ConfigurationError, TolstoiError)

    def test_input_read_error_is_tolstoi_error(self) -> None:
        assert issubclass(InputReadError, TolstoiError)

    def test_input_read_error_message(self) -> None:
        error = InputReadError("book", "missing.txt", "No such file or directory")

        assert error.label == "book"
        assert error.path == "missing.txt"
        assert str(error) == (
            "Couldn't read book file missing.txt: No such file or directory"
        )
