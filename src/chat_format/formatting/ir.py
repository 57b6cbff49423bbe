"""Intermediate Representation for formatted chat replies.

This module defines the data structures that sit between the raw text of
an assistant reply and whatever paints it on screen. Blocks describe the
line-level structure, inline tokens describe emphasis inside one line, and
output nodes pair the two for the presentation layer.

Every type here is a plain, immutable data shape; the functions that build
and consume them live in the sibling modules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


# =============================================================================
# Line classification
# =============================================================================

class LineType(Enum):
    """Kind of a single trimmed source line."""

    BLANK = "blank"
    RULE = "rule"
    HEADING = "heading"
    QUOTE = "quote"
    UNORDERED_ITEM = "unordered_item"
    ORDERED_ITEM = "ordered_item"
    TEXT = "text"


@dataclass(frozen=True)
class ClassifiedLine:
    """A source line tagged with its kind.

    Attributes:
        type: The line kind
        content: Text left after stripping the kind's marker
        level: Heading level (1-3), 0 for every other kind
    """

    type: LineType
    content: str = ""
    level: int = 0


# =============================================================================
# Blocks
# =============================================================================

@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class UnorderedList:
    items: tuple[str, ...]


@dataclass(frozen=True)
class OrderedList:
    items: tuple[str, ...]


@dataclass(frozen=True)
class Blockquote:
    lines: tuple[str, ...]


@dataclass(frozen=True)
class HorizontalRule:
    pass


Block = Union[Heading, Paragraph, UnorderedList, OrderedList, Blockquote, HorizontalRule]

# Blocks in source order
Document = list[Block]


# =============================================================================
# Inline tokens
# =============================================================================

@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class Bold:
    text: str


@dataclass(frozen=True)
class Code:
    text: str


InlineToken = Union[PlainText, Bold, Code]

InlineText = tuple[InlineToken, ...]


def plain_text(tokens: InlineText) -> str:
    """Get the text of a token sequence without styling."""
    return "".join(token.text for token in tokens)


# =============================================================================
# Output nodes
# =============================================================================

class ListKind(str, Enum):
    """Which kind of list a ListNode came from."""

    UNORDERED = "unordered"
    ORDERED = "ordered"


@dataclass(frozen=True)
class HeadingNode:
    """A heading with its inline-tokenized text.

    Attributes:
        level: Heading level (1-3)
        content: Tokens of the heading text
    """

    level: int
    content: InlineText


@dataclass(frozen=True)
class ParagraphNode:
    content: InlineText


@dataclass(frozen=True)
class ListNode:
    """A list of tokenized items.

    Attributes:
        kind: UNORDERED or ORDERED
        items: One token sequence per item, in source order
    """

    kind: ListKind
    items: tuple[InlineText, ...]


@dataclass(frozen=True)
class QuoteNode:
    lines: tuple[InlineText, ...]


@dataclass(frozen=True)
class RuleNode:
    pass


OutputNode = Union[HeadingNode, ParagraphNode, ListNode, QuoteNode, RuleNode]
