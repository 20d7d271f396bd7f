"""
Core type definitions for treeshell.

This module contains the type aliases shared by the node model, the
dispatcher and user supplied command callbacks.
"""

from collections.abc import Callable
from typing import Any

BoundArgs = dict[str, str]

SessionHistory = dict[str, str]

# None for a plain side effect, "up" or "label:value" to move between contexts
CommandResult = str | None

Callback = Callable[[BoundArgs, Any, SessionHistory], CommandResult]
