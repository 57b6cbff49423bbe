"""Raw reply text to document and output nodes."""

from chat_format.formatting.assembler import assemble, split_lines
from chat_format.formatting.ir import Document, OutputNode
from chat_format.formatting.renderer import render


def parse(raw: str) -> Document:
    """Convert raw reply text into blocks.

    Args:
        raw: The reply body as received from the assistant

    Returns:
        Blocks in source order
    """
    return assemble(split_lines(raw))


def format_reply(raw: str) -> list[OutputNode]:
    """Convert raw reply text into renderable output nodes."""
    return render(parse(raw))
