"""Plain text output handler."""

from chat_format.formats.base import OutputHandler
from chat_format.formatting.ir import (
    HeadingNode,
    ListKind,
    ListNode,
    OutputNode,
    ParagraphNode,
    QuoteNode,
    plain_text,
)

RULE_TEXT = "-" * 40


class TextHandler(OutputHandler):
    """Handler for plain text (.txt) output.

    All inline formatting is dropped. Lists keep a marker so items stay
    readable:
    - "- " for unordered items
    - "1. ", "2. ", ... for ordered items, numbered from one
    - "| " in front of each quoted line
    """

    @property
    def name(self) -> str:
        return "text"

    @property
    def extension(self) -> str:
        return ".txt"

    def render(self, nodes: list[OutputNode]) -> str:
        # Blocks separated by a blank line
        return "\n\n".join(self._render_node(node) for node in nodes)

    def _render_node(self, node: OutputNode) -> str:
        if isinstance(node, (HeadingNode, ParagraphNode)):
            return plain_text(node.content)

        if isinstance(node, ListNode):
            if node.kind is ListKind.ORDERED:
                return "\n".join(
                    f"{number}. {plain_text(item)}"
                    for number, item in enumerate(node.items, start=1)
                )
            return "\n".join(f"- {plain_text(item)}" for item in node.items)

        if isinstance(node, QuoteNode):
            return "\n".join(f"| {plain_text(line)}" for line in node.lines)

        return RULE_TEXT
