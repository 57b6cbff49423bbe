"""Tests for the inline tokenizer."""

from chat_format.formatting.inline import tokenize
from chat_format.formatting.ir import Bold, Code, PlainText, plain_text


class TestTokenize:
    """Tests for the tokenize function."""

    def test_plain_text(self):
        assert tokenize("Hello, world!") == [PlainText("Hello, world!")]

    def test_empty_string(self):
        assert tokenize("") == []

    def test_bold_and_code(self):
        tokens = tokenize("plain **bold** and `code`")

        assert tokens == [
            PlainText("plain "),
            Bold("bold"),
            PlainText(" and "),
            Code("code"),
        ]

    def test_adjacent_spans_have_no_empty_text(self):
        assert tokenize("**a**`b`") == [Bold("a"), Code("b")]

    def test_unclosed_bold_is_plain(self):
        assert tokenize("a **b") == [PlainText("a **b")]

    def test_unclosed_code_is_plain(self):
        assert tokenize("run `make") == [PlainText("run `make")]

    def test_empty_bold_is_plain(self):
        assert tokenize("****") == [PlainText("****")]

    def test_empty_code_pairs_with_later_backtick(self):
        """An empty `` pair cannot close, so its second backtick opens a span."""
        assert tokenize("``x`") == [PlainText("`"), Code("x")]

    def test_bold_closes_at_next_marker(self):
        assert tokenize("**a**b**") == [Bold("a"), PlainText("b**")]

    def test_bold_inside_code_stays_literal(self):
        assert tokenize("`**not bold**`") == [Code("**not bold**")]

    def test_backtick_inside_bold(self):
        assert tokenize("**use `x**`") == [Bold("use `x"), PlainText("`")]

    def test_single_star_is_plain(self):
        assert tokenize("2 * 3 = 6") == [PlainText("2 * 3 = 6")]

    def test_preserves_all_characters(self):
        text = "a **b** `c` **d `e"
        tokens = tokenize(text)

        assert plain_text(tuple(tokens)) == "a b c **d `e"

    def test_unicode(self):
        assert tokenize("**café** ☕") == [Bold("café"), PlainText(" ☕")]
