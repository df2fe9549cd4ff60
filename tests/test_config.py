# ==============================================================================
# Tests for Settings
# ==============================================================================
"""
Tests for environment-driven configuration.
"""

import pytest
from pydantic import ValidationError

from sessiontop.utils.config import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults, overrides and validation."""

    def test_defaults(self):
        settings = Settings()
        assert settings.session_threshold_seconds == 600
        assert settings.top_n == 5
        assert settings.strategy == "streaming"
        assert settings.include_seconds is False

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("SESSIONTOP_SESSION_THRESHOLD_SECONDS", "900")
        monkeypatch.setenv("SESSIONTOP_INCLUDE_SECONDS", "true")

        settings = Settings()
        assert settings.session_threshold_seconds == 900
        assert settings.include_seconds is True

    @pytest.mark.parametrize(
        "variable, value",
        [
            ("SESSIONTOP_SESSION_THRESHOLD_SECONDS", "0"),
            ("SESSIONTOP_TOP_N", "-1"),
            ("SESSIONTOP_STRATEGY", "bogus"),
        ],
    )
    def test_invalid_values_rejected(self, monkeypatch, variable, value):
        monkeypatch.setenv(variable, value)
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
