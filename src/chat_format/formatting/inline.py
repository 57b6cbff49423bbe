"""Inline tokenizer for bold and code spans."""

from chat_format.formatting.ir import Bold, Code, InlineToken, PlainText

BOLD_MARKER = "**"
CODE_MARKER = "`"


def tokenize(text: str) -> list[InlineToken]:
    """Split one line of text into plain, bold and code tokens.

    Handles:
    - **bold** (content non-empty, closed by the next ``**``)
    - `code` (content non-empty, closed by the next backtick)
    - plain text, including any delimiter that cannot close

    Returns:
        Tokens in source order, with no empty PlainText runs
    """
    tokens: list[InlineToken] = []
    plain: list[str] = []
    pos = 0

    def flush_plain() -> None:
        if plain:
            tokens.append(PlainText("".join(plain)))
            plain.clear()

    while pos < len(text):
        # Check for bold (**)
        if text.startswith(BOLD_MARKER, pos):
            end = text.find(BOLD_MARKER, pos + 2)
            if end > pos + 2:
                flush_plain()
                tokens.append(Bold(text[pos + 2 : end]))
                pos = end + 2
                continue

        # Check for code (`)
        elif text[pos] == CODE_MARKER:
            end = text.find(CODE_MARKER, pos + 1)
            if end > pos + 1:
                flush_plain()
                tokens.append(Code(text[pos + 1 : end]))
                pos = end + 1
                continue

        # Plain text - copy up to the next possible delimiter
        next_marker = len(text)
        for marker in (BOLD_MARKER, CODE_MARKER):
            idx = text.find(marker, pos + 1)
            if idx != -1 and idx < next_marker:
                next_marker = idx

        plain.append(text[pos:next_marker])
        pos = next_marker

    flush_plain()
    return tokens
