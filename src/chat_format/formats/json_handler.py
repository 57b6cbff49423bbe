"""JSON output handler."""

import json
from typing import Any

from chat_format.core.formatter import FormattedMessage
from chat_format.formats.base import OutputHandler
from chat_format.formatting.ir import (
    Bold,
    Code,
    HeadingNode,
    InlineText,
    ListNode,
    OutputNode,
    ParagraphNode,
    QuoteNode,
)


def inline_to_dicts(tokens: InlineText) -> list[dict[str, str]]:
    """Convert inline tokens to tagged dicts."""
    result = []
    for token in tokens:
        if isinstance(token, Bold):
            token_type = "bold"
        elif isinstance(token, Code):
            token_type = "code"
        else:
            token_type = "text"
        result.append({"type": token_type, "text": token.text})
    return result


def node_to_dict(node: OutputNode) -> dict[str, Any]:
    """Convert an output node to a JSON-serializable dict."""
    if isinstance(node, HeadingNode):
        return {
            "type": "heading",
            "level": node.level,
            "content": inline_to_dicts(node.content),
        }

    if isinstance(node, ParagraphNode):
        return {"type": "paragraph", "content": inline_to_dicts(node.content)}

    if isinstance(node, ListNode):
        return {
            "type": "list",
            "kind": node.kind.value,
            "items": [inline_to_dicts(item) for item in node.items],
        }

    if isinstance(node, QuoteNode):
        return {
            "type": "quote",
            "lines": [inline_to_dicts(line) for line in node.lines],
        }

    return {"type": "rule"}


class JSONHandler(OutputHandler):
    """Handler for JSON output, one tagged object per node."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    @property
    def name(self) -> str:
        return "json"

    @property
    def extension(self) -> str:
        return ".json"

    def render(self, nodes: list[OutputNode]) -> str:
        return json.dumps(
            [node_to_dict(node) for node in nodes],
            indent=self.indent,
            ensure_ascii=False,
        )

    def render_messages(self, messages: list[FormattedMessage]) -> str:
        """Render messages as one JSON array of message objects.

        Each object carries id, role, createdAt (ISO 8601 or null), nodes
        and the message's sources.
        """
        payload = []
        for formatted in messages:
            message = formatted.message
            payload.append({
                "id": message.id,
                "role": message.role.value,
                "createdAt": message.created_at.isoformat() if message.created_at else None,
                "nodes": [node_to_dict(node) for node in formatted.nodes],
                "sources": [source.model_dump(mode="json") for source in message.sources],
            })
        return json.dumps(payload, indent=self.indent, ensure_ascii=False)
