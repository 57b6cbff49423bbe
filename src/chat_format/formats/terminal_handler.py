"""Terminal output handler using rich."""

from io import StringIO

from rich.console import Console, RenderableType
from rich.rule import Rule
from rich.text import Text

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

HEADING_STYLES = {
    1: "bold underline",
    2: "bold",
    3: "bold dim",
}
QUOTE_PREFIX = "▌ "


class TerminalHandler(OutputHandler):
    """Handler for terminal preview output.

    Nodes become rich renderables: styled Text for text-bearing nodes and
    a Rule for horizontal rules. ``render`` captures them as plain text
    at a fixed width; the CLI prints the renderables directly.
    """

    def __init__(self, code_style: str = "bold cyan", width: int = 88) -> None:
        self.code_style = code_style
        self.width = width

    @property
    def name(self) -> str:
        return "terminal"

    @property
    def extension(self) -> str:
        return ".txt"

    def styled(self, tokens: InlineText, base_style: str = "") -> Text:
        """Build a rich Text from inline tokens."""
        text = Text(style=base_style)
        for token in tokens:
            if isinstance(token, Bold):
                text.append(token.text, style="bold")
            elif isinstance(token, Code):
                text.append(token.text, style=self.code_style)
            else:
                text.append(token.text)
        return text

    def to_renderable(self, node: OutputNode) -> RenderableType:
        """Convert one output node to a rich renderable."""
        if isinstance(node, HeadingNode):
            return self.styled(node.content, HEADING_STYLES.get(node.level, "bold"))

        if isinstance(node, ParagraphNode):
            return self.styled(node.content)

        if isinstance(node, ListNode):
            lines = []
            for number, item in enumerate(node.items, start=1):
                marker = f"{number}. " if node.kind is ListKind.ORDERED else "• "
                line = Text(marker, style="dim")
                line.append_text(self.styled(item))
                lines.append(line)
            return Text("\n").join(lines)

        if isinstance(node, QuoteNode):
            lines = []
            for quoted in node.lines:
                line = Text(QUOTE_PREFIX, style="green")
                line.append_text(self.styled(quoted, "italic"))
                lines.append(line)
            return Text("\n").join(lines)

        return Rule(style="dim")

    def to_renderables(self, nodes: list[OutputNode]) -> list[RenderableType]:
        return [self.to_renderable(node) for node in nodes]

    def print(self, nodes: list[OutputNode], console: Console) -> None:
        """Print nodes to a console, one blank line between blocks."""
        for index, renderable in enumerate(self.to_renderables(nodes)):
            if index:
                console.line()
            console.print(renderable)

    def render(self, nodes: list[OutputNode]) -> str:
        buffer = StringIO()
        capture = Console(
            file=buffer,
            width=self.width,
            color_system=None,
            force_terminal=False,
            highlight=False,
        )
        self.print(nodes, capture)
        return buffer.getvalue()
