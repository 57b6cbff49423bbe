"""Map assembled blocks to UI-agnostic output nodes."""

from chat_format.formatting.inline import tokenize
from chat_format.formatting.ir import (
    Block,
    Blockquote,
    Document,
    Heading,
    HeadingNode,
    InlineText,
    ListKind,
    ListNode,
    OrderedList,
    OutputNode,
    Paragraph,
    ParagraphNode,
    QuoteNode,
    RuleNode,
    UnorderedList,
)


def _inline(text: str) -> InlineText:
    return tuple(tokenize(text))


def render_block(block: Block) -> OutputNode:
    """Convert one block into its output node."""
    if isinstance(block, Heading):
        return HeadingNode(level=block.level, content=_inline(block.text))

    if isinstance(block, Paragraph):
        return ParagraphNode(content=_inline(block.text))

    if isinstance(block, UnorderedList):
        return ListNode(
            kind=ListKind.UNORDERED,
            items=tuple(_inline(item) for item in block.items),
        )

    if isinstance(block, OrderedList):
        return ListNode(
            kind=ListKind.ORDERED,
            items=tuple(_inline(item) for item in block.items),
        )

    if isinstance(block, Blockquote):
        return QuoteNode(lines=tuple(_inline(line) for line in block.lines))

    return RuleNode()


def render(document: Document) -> list[OutputNode]:
    """Convert a document into output nodes, one per block, in order."""
    return [render_block(block) for block in document]
