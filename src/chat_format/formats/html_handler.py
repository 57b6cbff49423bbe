"""HTML output handler."""

import html
from typing import Optional

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
    QuoteNode,
)


def render_inline(tokens: InlineText) -> str:
    """Render inline tokens as escaped HTML.

    Line breaks in plain text (verbatim user messages) become <br>.
    """
    parts: list[str] = []
    for token in tokens:
        text = html.escape(token.text)
        if isinstance(token, Bold):
            text = f"<strong>{text}</strong>"
        elif isinstance(token, Code):
            text = f"<code>{text}</code>"
        else:
            text = text.replace("\r\n", "\n").replace("\n", "<br>")
        parts.append(text)
    return "".join(parts)


class HTMLHandler(OutputHandler):
    """Handler for HTML fragments.

    Each node becomes one element: h1-h3, p, ul/ol with li, blockquote
    with one p per line, or hr. Styling is left to the page.
    """

    def __init__(self, wrapper_class: Optional[str] = None) -> None:
        """Initialize the handler.

        Args:
            wrapper_class: If set, wrap the output in a div with this class
        """
        self.wrapper_class = wrapper_class

    @property
    def name(self) -> str:
        return "html"

    @property
    def extension(self) -> str:
        return ".html"

    def render(self, nodes: list[OutputNode]) -> str:
        elements = [self._render_node(node) for node in nodes]

        if self.wrapper_class:
            elements.insert(0, f'<div class="{html.escape(self.wrapper_class)}">')
            elements.append("</div>")

        return "\n".join(elements)

    def _render_node(self, node: OutputNode) -> str:
        if isinstance(node, HeadingNode):
            return f"<h{node.level}>{render_inline(node.content)}</h{node.level}>"

        if isinstance(node, ParagraphNode):
            return f"<p>{render_inline(node.content)}</p>"

        if isinstance(node, ListNode):
            tag = "ol" if node.kind is ListKind.ORDERED else "ul"
            items = "".join(f"<li>{render_inline(item)}</li>" for item in node.items)
            return f"<{tag}>{items}</{tag}>"

        if isinstance(node, QuoteNode):
            lines = "".join(f"<p>{render_inline(line)}</p>" for line in node.lines)
            return f"<blockquote>{lines}</blockquote>"

        return "<hr>"
