"""Tests for the rich terminal handler."""

from rich.rule import Rule
from rich.text import Text

from chat_format.formats.terminal_handler import TerminalHandler
from chat_format.formatting.ir import HeadingNode, PlainText
from chat_format.formatting.parser import format_reply


class TestTerminalHandler:
    """Tests for the terminal output handler."""

    def test_styled_spans(self):
        handler = TerminalHandler(code_style="magenta")
        text = handler.styled(format_reply("a **b** `c`")[0].content)

        assert text.plain == "a b c"
        styles = {str(span.style) for span in text.spans}
        assert styles == {"bold", "magenta"}

    def test_heading_style(self):
        renderable = TerminalHandler().to_renderable(
            HeadingNode(level=1, content=(PlainText("T"),))
        )

        assert isinstance(renderable, Text)
        assert str(renderable.style) == "bold underline"

    def test_rule_renderable(self):
        renderables = TerminalHandler().to_renderables(format_reply("---"))

        assert isinstance(renderables[0], Rule)

    def test_render_plain(self):
        output = TerminalHandler(width=40).render(format_reply("# Title\n\n- a\n\n2. b\n\n> q"))

        assert output == "Title\n\n• a\n\n1. b\n\n▌ q\n"

    def test_render_rule_width(self):
        output = TerminalHandler(width=20).render(format_reply("---"))

        assert output == "─" * 20 + "\n"
