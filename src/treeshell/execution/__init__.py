"""
treeshell execution components.

This package provides the interactive session state (context stack, session
history, prompt) and the dispatcher that runs one input line against the tree.
"""

from treeshell.execution.dispatcher import (
    EXIT_COMMANDS,
    UP_RESULT,
    DispatchOutcome,
    Dispatcher,
)
from treeshell.execution.session import (
    DEFAULT_PROMPT_COLOR,
    RESET_COLOR,
    ContextEntry,
    ShellSession,
)

__all__ = [
    "ContextEntry",
    "DEFAULT_PROMPT_COLOR",
    "Dispatcher",
    "DispatchOutcome",
    "EXIT_COMMANDS",
    "RESET_COLOR",
    "ShellSession",
    "UP_RESULT",
]
