"""
Interactive session state: the context stack, the session history and the prompt.

The context stack records how deep the user has navigated into context
switching commands. Its top entry is the active scope searched by both the
dispatcher and the completer; an empty stack means the root is active.
"""

import logging

from attrs import frozen

from treeshell.core.node import Node
from treeshell.core.types import SessionHistory

logger = logging.getLogger(__name__)

DEFAULT_PROMPT_COLOR = "\x1b[1;32m"
RESET_COLOR = "\x1b[0m"


@frozen
class ContextEntry:
    """A context the user entered: the switching command and the label it returned."""

    node: Node
    label: str


class ShellSession:
    """Mutable state of one interactive loop.

    Responsibilities:
      - Maintain the stack of entered contexts and expose the active scope.
      - Own the session history handed to every callback.
      - Render the prompt from the tree name and the context labels.
    """

    def __init__(self, name: str, prompt_color: str = DEFAULT_PROMPT_COLOR):
        self.name = name
        self.prompt_color = prompt_color
        self.stack: list[ContextEntry] = []
        self.history: SessionHistory = {}

    @property
    def context_node(self) -> Node | None:
        """Node of the innermost context, None at the top level."""
        return self.stack[-1].node if self.stack else None

    @property
    def at_top_level(self) -> bool:
        return not self.stack

    @property
    def labels(self) -> list[str]:
        return [entry.label for entry in self.stack]

    def active_node(self, root: Node) -> Node:
        """Return the node new lines are resolved against."""
        return self.context_node or root

    def enter(self, node: Node, label: str) -> None:
        """
        Push a context entry; ``node`` becomes the active scope.

        Params:
            node: Context switching command whose children become the active commands
            label: Value returned by the command, shown in the prompt
        """
        logger.debug("Entering context %s:%s", node.name, label)
        self.stack.append(ContextEntry(node=node, label=label))

    def up(self) -> ContextEntry | None:
        """
        Leave the innermost context.

        The session history survives unless the session was already at the top
        level, in which case it is cleared.

        Returns:
            The entry that was popped, None at the top level
        """
        if not self.stack:
            self.history.clear()
            return None
        entry = self.stack.pop()
        logger.debug("Leaving context %s:%s", entry.node.name, entry.label)
        return entry

    def top(self) -> None:
        """Return to the top level, dropping every context and the session history."""
        self.stack.clear()
        self.history.clear()

    def prompt(self) -> str:
        """
        Render the prompt text.

        Returns:
            ``name/label/...>>`` wrapped in the prompt color, followed by a space
        """
        path = "/".join([self.name, *self.labels])
        return f"{self.prompt_color}{path}>>{RESET_COLOR} "
