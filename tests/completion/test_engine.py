"""
Tests for the completion engine.

Focus Areas:
1. Prefix matching at every level of the tree
2. Next-level suggestions after a complete command
3. Argument values and hidden nodes never produce candidates
"""

import pytest

from treeshell.completion import Candidates, complete_line, split_levels, suggest
from treeshell.structure import build_tree, node


class TestSplitLevels:
    """Trailing whitespace asks for a fresh token."""

    def test_plain_words(self):
        assert split_levels("hello dark") == ["hello", "dark"]

    def test_trailing_space_adds_empty_level(self):
        assert split_levels("hello ") == ["hello", ""]

    def test_empty_line(self):
        assert split_levels("") == []


class TestSuggest:
    """Candidates from the root of the hello tree."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("", ["hello", "context", "dawn", "daylight", "exit", "quit"]),
            ("da", ["dawn", "daylight"]),
            ("daw", ["dawn"]),
            ("hello ", ["world", "darkness"]),
            ("hello wo", ["world"]),
            ("hello darkness", ["darkness"]),
            ("context myc ", ["world", "darkness", "leave"]),
            ("context myc le", ["leave"]),
            ("zzz", []),
        ],
    )
    def test_candidates(self, hello_tree, line, expected):
        assert suggest(hello_tree.root, line) == expected

    def test_names_are_case_sensitive(self, hello_tree):
        assert suggest(hello_tree.root, "HE") == []

    def test_complete_command_offers_next_level(self, hello_tree):
        result = complete_line(hello_tree.root, "hello")

        assert result == Candidates(["world", "darkness"], next_level=True)

    def test_argument_value_offers_nothing(self, hello_tree):
        assert suggest(hello_tree.root, "context myc") is None

    def test_leaf_offers_nothing(self, hello_tree):
        assert suggest(hello_tree.root, "hello world") is None
        assert suggest(hello_tree.root, "dawn ") is None

    def test_tree_accessor(self, hello_tree):
        assert hello_tree.get_suggestions("hello d") == ["darkness"]


class TestContextCompletion:
    """The active context replaces the root as the search scope."""

    def test_context_children_are_offered(self, hello_tree):
        context = hello_tree.root.find("context")

        assert suggest(hello_tree.root, "", context) == ["world", "darkness", "leave"]
        assert suggest(hello_tree.root, "l", context) == ["leave"]

    def test_root_commands_are_not_offered_inside_a_context(self, hello_tree):
        context = hello_tree.root.find("context")

        assert suggest(hello_tree.root, "da", context) == ["darkness"]


class TestHiddenNodes:
    """Conditional nodes only complete when their variable exists."""

    def test_hidden_node_is_not_offered(self, hello_tree):
        assert suggest(hello_tree.root, "se") == []

    def test_visible_conditional_node_is_offered(self, monkeypatch):
        monkeypatch.setenv("TREESHELL_TEST_SECRET", "1")
        tree = build_tree(
            "cli",
            "CLI",
            "1.0",
            [node("secret", "Secret", conditional="TREESHELL_TEST_SECRET")],
            exit_commands=False,
        )

        assert suggest(tree.root, "se") == ["secret"]


class TestPurity:
    """Completion never invokes callbacks."""

    def test_callbacks_are_not_invoked(self, hello_tree, recorder):
        suggest(hello_tree.root, "context myc ")
        suggest(hello_tree.root, "hello darkness bob ")

        assert recorder.calls == []
