"""Markdown output handler."""

from chat_format.core.formatter import FormattedMessage
from chat_format.core.models import ChatRole
from chat_format.formats.base import OutputHandler
from chat_format.formatting.ir import (
    Bold,
    Code,
    HeadingNode,
    InlineText,
    ListKind,
    ListNode,
    OutputNode,
    ParagraphNode,
    PlainText,
    QuoteNode,
)

# Characters escaped anywhere in verbatim text
INLINE_SPECIALS = ("\\", "`", "*")
# Characters escaped only when they open a line
LINE_START_SPECIALS = ("#", ">", "-", "+")


def escape_markdown(text: str) -> str:
    """Backslash-escape text so markdown viewers show it literally.

    Covers inline emphasis and code markers, plus heading, quote, bullet
    and "N." markers at the start of each line.
    """
    lines: list[str] = []
    for line in text.split("\n"):
        escaped = "".join("\\" + ch if ch in INLINE_SPECIALS else ch for ch in line)
        body = escaped.lstrip()
        indent = escaped[: len(escaped) - len(body)]

        if body[:1] in LINE_START_SPECIALS:
            body = "\\" + body
        else:
            digits = len(body) - len(body.lstrip("0123456789"))
            if digits and body[digits : digits + 1] == ".":
                body = f"{body[:digits]}\\{body[digits:]}"

        lines.append(indent + body)
    return "\n".join(lines)


def to_markdown_inline(tokens: InlineText) -> str:
    """Convert inline tokens back to markdown."""
    parts: list[str] = []
    for token in tokens:
        text = token.text
        if isinstance(token, Bold):
            text = f"**{text}**"
        elif isinstance(token, Code):
            text = f"`{text}`"
        parts.append(text)
    return "".join(parts)


class MarkdownHandler(OutputHandler):
    """Handler for canonical markdown (.md) output.

    Ordered lists are renumbered from one and unordered items always
    use "-", so the output is a normalized form of the original reply.
    User messages in a transcript are escaped, since they were never
    meant as markup.
    """

    @property
    def name(self) -> str:
        return "markdown"

    @property
    def extension(self) -> str:
        return ".md"

    def render(self, nodes: list[OutputNode]) -> str:
        return "\n\n".join(self._render_node(node) for node in nodes)

    def message_nodes(self, message: FormattedMessage) -> list[OutputNode]:
        nodes = super().message_nodes(message)
        if message.message.role is not ChatRole.USER:
            return nodes

        escaped: list[OutputNode] = []
        for node in nodes:
            if isinstance(node, ParagraphNode):
                node = ParagraphNode(content=tuple(
                    PlainText(escape_markdown(token.text)) for token in node.content
                ))
            escaped.append(node)
        return escaped

    def _render_node(self, node: OutputNode) -> str:
        if isinstance(node, HeadingNode):
            return f"{'#' * node.level} {to_markdown_inline(node.content)}"

        if isinstance(node, ParagraphNode):
            return to_markdown_inline(node.content)

        if isinstance(node, ListNode):
            if node.kind is ListKind.ORDERED:
                return "\n".join(
                    f"{number}. {to_markdown_inline(item)}"
                    for number, item in enumerate(node.items, start=1)
                )
            return "\n".join(f"- {to_markdown_inline(item)}" for item in node.items)

        if isinstance(node, QuoteNode):
            return "\n".join(
                f"> {to_markdown_inline(line)}".rstrip() for line in node.lines
            )

        return "---"
