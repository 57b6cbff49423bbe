"""Format chat messages for display."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from chat_format.core.models import ChatMessage, ChatRole
from chat_format.formatting.ir import (
    Bold,
    Code,
    ListKind,
    ListNode,
    OutputNode,
    ParagraphNode,
    PlainText,
)
from chat_format.formatting.parser import format_reply

_MESSAGE_LIST = TypeAdapter(list[ChatMessage])


class FormatError(Exception):
    """Error loading or formatting chat messages."""

    pass


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        FormatError: If the file is not valid UTF-8
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(f"{path.name} is not valid UTF-8 text: {e}") from e


@dataclass
class FormattedMessage:
    """A chat message paired with its output nodes.

    Attributes:
        message: The source message
        nodes: Output nodes ready for a presentation layer
    """

    message: ChatMessage
    nodes: list[OutputNode] = field(default_factory=list)

    def citation_nodes(self) -> list[OutputNode]:
        """Build a "Sources" label and list for an assistant's citations.

        Each item reads ``<quoted text> (`<source>`)``. Returns an empty
        list for user messages and for answers without sources.
        """
        if not self.message.is_assistant or not self.message.sources:
            return []

        items = tuple(
            (PlainText(f"{source.text} ("), Code(source.source), PlainText(")"))
            for source in self.message.sources
        )
        return [
            ParagraphNode(content=(Bold("Sources"),)),
            ListNode(kind=ListKind.UNORDERED, items=items),
        ]


class MessageFormatter:
    """Turns chat messages into output nodes.

    Assistant replies are parsed for structure and inline formatting.
    User messages are shown exactly as typed. System messages are never
    displayed.
    """

    def format_message(self, message: ChatMessage) -> FormattedMessage:
        """Format a single message."""
        if message.is_assistant:
            nodes = format_reply(message.content)
        elif message.content:
            nodes = [ParagraphNode(content=(PlainText(message.content),))]
        else:
            nodes = []

        logger.debug(
            "Formatted {} message {} into {} node(s)",
            message.role.value,
            message.id,
            len(nodes),
        )
        return FormattedMessage(message=message, nodes=nodes)

    def format_transcript(self, messages: list[ChatMessage]) -> list[FormattedMessage]:
        """Format every displayable message, keeping conversation order."""
        formatted: list[FormattedMessage] = []
        for message in messages:
            if message.role is ChatRole.SYSTEM:
                logger.debug("Skipping system message {}", message.id)
                continue
            formatted.append(self.format_message(message))
        return formatted

    def load_transcript(self, path: Path) -> list[ChatMessage]:
        """Load chat messages from a JSON file.

        Accepts a list of messages, an object with a "messages" list, or a
        chat response object with an "answer" (read as one assistant message).

        Raises:
            FormatError: If the file is missing or does not hold valid messages
        """
        if not path.exists():
            raise FormatError(f"Transcript file not found: {path}")

        return self.parse_transcript(read_text_file(path), source=path.name)

    def parse_transcript(self, raw: str, source: str = "<transcript>") -> list[ChatMessage]:
        """Parse chat messages from a JSON string.

        Args:
            raw: JSON text in any of the shapes accepted by load_transcript
            source: Name used in error and log messages

        Raises:
            FormatError: If the text does not hold valid messages
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise FormatError(f"Invalid JSON in {source}: {e}") from e

        try:
            messages = _MESSAGE_LIST.validate_python(self._message_payload(data))
        except ValidationError as e:
            raise FormatError(f"Invalid chat messages in {source}: {e}") from e

        logger.info("Loaded {} message(s) from {}", len(messages), source)
        return messages

    @staticmethod
    def _message_payload(data: Any) -> Any:
        """Normalize the accepted transcript shapes to a list of message dicts."""
        if isinstance(data, dict):
            if "messages" in data:
                return data["messages"]
            if "answer" in data:
                return [{
                    "id": str(data.get("id", "answer")),
                    "role": ChatRole.ASSISTANT.value,
                    "content": data["answer"],
                    "sources": data.get("sources") or [],
                }]
        return data
