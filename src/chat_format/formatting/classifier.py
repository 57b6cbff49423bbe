"""Line classification for chat reply text.

Each rule is a named predicate so the priority order in ``classify``
reads top to bottom. Every function expects a line that is already
stripped of leading and trailing whitespace.
"""

from typing import Optional

from chat_format.formatting.ir import ClassifiedLine, LineType

ASCII_DIGITS = "0123456789"
MAX_HEADING_LEVEL = 3


def is_blank(line: str) -> bool:
    return line == ""


def is_rule(line: str) -> bool:
    """Check for three or more dashes and nothing else."""
    return len(line) >= 3 and line.strip("-") == ""


def match_heading(line: str) -> Optional[tuple[int, str]]:
    """Match ``#``-``###`` followed by whitespace and text.

    Returns:
        Tuple of (level, text), or None if the line is not a heading
    """
    level = len(line) - len(line.lstrip("#"))
    if level < 1 or level > MAX_HEADING_LEVEL:
        return None

    rest = line[level:]
    if not rest[:1].isspace():
        return None

    text = rest.lstrip()
    if not text:
        return None
    return level, text


def match_quote(line: str) -> Optional[str]:
    """Match a leading ``>``; the content drops at most one whitespace char."""
    if not line.startswith(">"):
        return None

    content = line[1:]
    if content[:1].isspace():
        content = content[1:]
    return content


def match_unordered_item(line: str) -> Optional[str]:
    """Match a ``-`` or ``*`` marker followed by whitespace."""
    if line[:1] not in ("-", "*") or not line[1:2].isspace():
        return None
    return line[1:].lstrip()


def match_ordered_item(line: str) -> Optional[str]:
    """Match a numeral, a dot and whitespace. The numeral is dropped."""
    end = 0
    while end < len(line) and line[end] in ASCII_DIGITS:
        end += 1

    if end == 0 or line[end : end + 1] != "." or not line[end + 1 : end + 2].isspace():
        return None
    return line[end + 1 :].lstrip()


def classify(line: str) -> ClassifiedLine:
    """Classify one trimmed line. First matching rule wins."""
    if is_blank(line):
        return ClassifiedLine(LineType.BLANK)

    if is_rule(line):
        return ClassifiedLine(LineType.RULE)

    heading = match_heading(line)
    if heading is not None:
        level, text = heading
        return ClassifiedLine(LineType.HEADING, text, level)

    quote = match_quote(line)
    if quote is not None:
        return ClassifiedLine(LineType.QUOTE, quote)

    item = match_unordered_item(line)
    if item is not None:
        return ClassifiedLine(LineType.UNORDERED_ITEM, item)

    item = match_ordered_item(line)
    if item is not None:
        return ClassifiedLine(LineType.ORDERED_ITEM, item)

    return ClassifiedLine(LineType.TEXT, line)
