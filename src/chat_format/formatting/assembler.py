"""Block assembler: groups classified lines into blocks.

A single forward-only pointer walks the lines. Single-line kinds (rules
and headings) become one block each; list, quote and text lines are
collected in runs of the same kind. A run ends at the first line of any
other kind, and that line starts the next block.
"""

from chat_format.formatting.classifier import classify
from chat_format.formatting.ir import (
    Block,
    Blockquote,
    ClassifiedLine,
    Document,
    Heading,
    HorizontalRule,
    LineType,
    OrderedList,
    Paragraph,
    UnorderedList,
)


def split_lines(raw: str) -> list[str]:
    """Normalize CRLF line endings and split into lines."""
    return raw.replace("\r\n", "\n").split("\n")


def _collect_run(
    lines: list[ClassifiedLine],
    start: int,
    line_type: LineType,
) -> tuple[list[str], int]:
    """Collect the contents of consecutive lines of one kind.

    Returns:
        Tuple of (contents, index of the first line after the run)
    """
    contents: list[str] = []
    i = start
    while i < len(lines) and lines[i].type is line_type:
        contents.append(lines[i].content)
        i += 1
    return contents, i


def assemble(lines: list[str]) -> Document:
    """Group lines into an ordered list of blocks.

    Args:
        lines: Source lines; each is stripped before classification

    Returns:
        Blocks in source order (empty for blank-only input)
    """
    classified = [classify(line.strip()) for line in lines]
    blocks: list[Block] = []
    i = 0

    while i < len(classified):
        line = classified[i]

        if line.type is LineType.BLANK:
            i += 1
            continue

        if line.type is LineType.RULE:
            blocks.append(HorizontalRule())
            i += 1
            continue

        if line.type is LineType.HEADING:
            blocks.append(Heading(level=line.level, text=line.content))
            i += 1
            continue

        contents, i = _collect_run(classified, i, line.type)

        if line.type is LineType.QUOTE:
            blocks.append(Blockquote(lines=tuple(contents)))
        elif line.type is LineType.UNORDERED_ITEM:
            # "-" and "*" items share a kind, so mixed markers form one list
            blocks.append(UnorderedList(items=tuple(contents)))
        elif line.type is LineType.ORDERED_ITEM:
            blocks.append(OrderedList(items=tuple(contents)))
        else:
            blocks.append(Paragraph(text=" ".join(contents)))

    return blocks
