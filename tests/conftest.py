"""Pytest fixtures for Chat Format tests."""

import json

import pytest
from pathlib import Path

from loguru import logger

from chat_format import config


@pytest.fixture
def sample_reply() -> str:
    """Assistant reply using every supported block kind."""
    return (
        "# Enrollment Summary\r\n"
        "\r\n"
        "You are registered for **3 courses** this term.\r\n"
        "Use `CS-101` when you contact the advisor.\r\n"
        "\r\n"
        "- Intro to Programming\r\n"
        "* Calculus I\r\n"
        "\r\n"
        "1. Pay tuition\r\n"
        "2. Confirm schedule\r\n"
        "\r\n"
        "> Deadlines are final.\r\n"
        "> Late requests need approval.\r\n"
        "\r\n"
        "---"
    )


@pytest.fixture
def sample_messages() -> list[dict]:
    """Chat history as returned by the chat session layer."""
    return [
        {"id": "0", "role": "system", "content": "You are a helpful advisor."},
        {
            "id": "1",
            "role": "user",
            "content": "What is **due** next?",
            "createdAt": "2026-10-19T09:30:00Z",
        },
        {
            "id": "2",
            "role": "assistant",
            "content": "## Next steps\n\n- Submit the `form`",
            "createdAt": "2026-10-19T09:30:05Z",
            "sources": [{"text": "Forms are due Friday.", "source": "handbook.pdf", "score": 0.82}],
        },
    ]


@pytest.fixture
def tmp_transcript_file(tmp_path: Path, sample_messages: list[dict]) -> Path:
    """Create a temporary JSON transcript file."""
    file_path = tmp_path / "chat.json"
    file_path.write_text(json.dumps(sample_messages), encoding="utf-8")
    return file_path


@pytest.fixture
def tmp_reply_file(tmp_path: Path, sample_reply: str) -> Path:
    """Create a temporary reply file."""
    file_path = tmp_path / "reply.md"
    file_path.write_text(sample_reply, encoding="utf-8")
    return file_path


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings, ignoring any local .env."""
    for name in (
        "CHAT_FORMAT_OUTPUT",
        "CHAT_FORMAT_HTML_CLASS",
        "CHAT_FORMAT_CODE_STYLE",
        "CHAT_FORMAT_WIDTH",
        "CHAT_FORMAT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    monkeypatch.setitem(config.Settings.model_config, "env_file", None)
    yield


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added during a test and silence the library again."""
    yield
    logger.remove()
    logger.disable("chat_format")
