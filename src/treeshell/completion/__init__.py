"""
Tab completion for command trees.

This package provides the completion engine that turns a partially typed
line into candidate tokens, and its prompt_toolkit completer adapter.
"""

from treeshell.completion.completer import TreeCompleter, insert_offset
from treeshell.completion.engine import (
    Candidates,
    complete_line,
    node_suggestions,
    split_levels,
    suggest,
)

__all__ = [
    "Candidates",
    "TreeCompleter",
    "complete_line",
    "insert_offset",
    "node_suggestions",
    "split_levels",
    "suggest",
]
