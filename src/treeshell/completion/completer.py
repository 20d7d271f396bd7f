"""
prompt_toolkit integration for command tree completion.

The completer asks the completion engine for candidates on every keystroke,
using whatever context the shell session is currently in.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from treeshell.completion.engine import complete_line

if TYPE_CHECKING:
    from treeshell.execution.session import ShellSession
    from treeshell.structure.tree import CommandTree

logger = logging.getLogger(__name__)


def insert_offset(text: str) -> int:
    """
    Position where a candidate for the last word of ``text`` is inserted.

    Params:
        text: Line content before the cursor

    Returns:
        One past the last whitespace, or 0 when the text has none
    """
    for position in range(len(text) - 1, -1, -1):
        if text[position].isspace():
            return position + 1
    return 0


class TreeCompleter(Completer):
    """Complete command names from a command tree.

    Example usage:
        "he" -> completes to "hello"
        "hello " -> shows "world", "darkness"
        "hello" -> shows " world", " darkness" appended after a space
    """

    def __init__(self, tree: "CommandTree", session: "ShellSession | None" = None):
        """Initialize the completer.

        Args:
            tree: Command tree to complete against.
            session: Shell session providing the active context, None for the root.
        """
        self._tree = tree
        self._session = session

    def complete(self, line: str, cursor: int) -> tuple[int, list[str]]:
        """Compute the insertion offset and candidates for a line.

        Args:
            line: Whole buffer content.
            cursor: Cursor position within ``line``.

        Returns:
            Tuple of (insert offset, ordered candidate names). Candidates for
            a new word after a complete one are inserted at the cursor with a
            leading space.
        """
        logger.debug("Completion on line: %s, pos: %d", line, cursor)
        text = line[:cursor]
        context_node = self._session.context_node if self._session else None
        candidates = complete_line(self._tree.root, text, context_node)
        if candidates.next_level:
            return len(text), [" " + name for name in candidates.names]
        return insert_offset(text), list(candidates.names or [])

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        """Yield prompt_toolkit completions for the text before the cursor."""
        text = document.text_before_cursor
        context_node = self._session.context_node if self._session else None
        candidates = complete_line(self._tree.root, text, context_node)
        if not candidates.names:
            return

        offset = insert_offset(text)
        for name in candidates.names:
            if candidates.next_level:
                # Keep the completed word and start a new token after it
                yield Completion(" " + name, start_position=0, display=name)
            else:
                yield Completion(name, start_position=offset - len(text), display=name)
