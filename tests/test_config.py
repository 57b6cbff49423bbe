"""Tests for settings loading."""

import pytest
from pathlib import Path

from chat_format.config import get_settings, load_settings


class TestSettings:
    """Tests for the Settings class and accessors."""

    def test_defaults(self):
        settings = get_settings()

        assert settings.default_format == "terminal"
        assert settings.code_style == "bold cyan"
        assert settings.terminal_width == 88
        assert settings.html_wrapper_class is None
        assert settings.log_level == "WARNING"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHAT_FORMAT_OUTPUT", "html")
        monkeypatch.setenv("CHAT_FORMAT_WIDTH", "60")

        settings = load_settings()

        assert settings.default_format == "html"
        assert settings.terminal_width == 60
        assert get_settings() is settings

    def test_env_file(self, tmp_path: Path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("CHAT_FORMAT_HTML_CLASS=chat-reply\n", encoding="utf-8")

        settings = load_settings(env_file)

        assert settings.html_wrapper_class == "chat-reply"
