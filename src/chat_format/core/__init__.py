"""Chat message handling for Chat Format."""

from chat_format.core.models import ChatRole, ChatSource, ChatMessage
from chat_format.core.formatter import FormatError, FormattedMessage, MessageFormatter

__all__ = [
    "ChatRole",
    "ChatSource",
    "ChatMessage",
    "FormatError",
    "FormattedMessage",
    "MessageFormatter",
]
