"""
Core treeshell components.

This package provides the fundamental building blocks of a command tree:
the node model, help rendering and shared type definitions.
"""

from treeshell.core.help import format_usage, print_help, render_help
from treeshell.core.node import Argument, Node
from treeshell.core.types import (
    BoundArgs,
    Callback,
    CommandResult,
    SessionHistory,
)

__all__ = [
    "Node",
    "Argument",
    "BoundArgs",
    "Callback",
    "CommandResult",
    "SessionHistory",
    "format_usage",
    "print_help",
    "render_help",
]
