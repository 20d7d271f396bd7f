"""
Tests for the quote-aware tokenizer.
"""

import pytest

from treeshell.parsing import tokenize


class TestTokenize:
    """Double quotes group words; nothing else is special."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("hello world", ["hello", "world"]),
            ("  hello   world  ", ["hello", "world"]),
            ('echo "hello world" now', ["echo", "hello world", "now"]),
            ('set name ""', ["set", "name"]),
            ('"a b"c', ["a b", "c"]),
            ("", []),
            ("   ", []),
        ],
    )
    def test_tokens(self, line, expected):
        assert tokenize(line) == expected

    def test_quoted_whitespace_is_preserved(self):
        assert tokenize('say "  spaced  out "') == ["say", "  spaced  out "]

    def test_unterminated_quote_keeps_rest_whole(self):
        assert tokenize('say "open ended') == ["say", "open ended"]

    def test_single_quotes_are_not_special(self):
        assert tokenize("say 'a b'") == ["say", "'a", "b'"]
