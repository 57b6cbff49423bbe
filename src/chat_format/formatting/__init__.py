"""Formatting engine for parsing and rendering assistant replies."""

from chat_format.formatting.ir import (
    LineType,
    ClassifiedLine,
    Heading,
    Paragraph,
    UnorderedList,
    OrderedList,
    Blockquote,
    HorizontalRule,
    Block,
    Document,
    PlainText,
    Bold,
    Code,
    InlineToken,
    ListKind,
    HeadingNode,
    ParagraphNode,
    ListNode,
    QuoteNode,
    RuleNode,
    OutputNode,
    plain_text,
)
from chat_format.formatting.classifier import classify
from chat_format.formatting.inline import tokenize
from chat_format.formatting.assembler import assemble, split_lines
from chat_format.formatting.renderer import render
from chat_format.formatting.parser import parse, format_reply

__all__ = [
    "LineType",
    "ClassifiedLine",
    "Heading",
    "Paragraph",
    "UnorderedList",
    "OrderedList",
    "Blockquote",
    "HorizontalRule",
    "Block",
    "Document",
    "PlainText",
    "Bold",
    "Code",
    "InlineToken",
    "ListKind",
    "HeadingNode",
    "ParagraphNode",
    "ListNode",
    "QuoteNode",
    "RuleNode",
    "OutputNode",
    "plain_text",
    "classify",
    "tokenize",
    "assemble",
    "split_lines",
    "render",
    "parse",
    "format_reply",
]
