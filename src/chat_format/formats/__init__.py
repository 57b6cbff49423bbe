"""Output format handlers for Chat Format."""

from chat_format.formats.base import OutputHandler
from chat_format.formats.html_handler import HTMLHandler
from chat_format.formats.text_handler import TextHandler
from chat_format.formats.markdown_handler import MarkdownHandler
from chat_format.formats.json_handler import JSONHandler
from chat_format.formats.terminal_handler import TerminalHandler

__all__ = [
    "OutputHandler",
    "HTMLHandler",
    "TextHandler",
    "MarkdownHandler",
    "JSONHandler",
    "TerminalHandler",
]

# Map format names to handlers
HANDLER_MAP: dict[str, type[OutputHandler]] = {
    "terminal": TerminalHandler,
    "html": HTMLHandler,
    "text": TextHandler,
    "markdown": MarkdownHandler,
    "json": JSONHandler,
}

SUPPORTED_FORMATS = tuple(HANDLER_MAP.keys())


def get_handler(name: str) -> type[OutputHandler]:
    """Get the handler class for a format name."""
    key = name.lower()
    if key not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported output format: {name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    return HANDLER_MAP[key]
