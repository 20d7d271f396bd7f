"""
Line reading service used by the shell loop.

The loop only depends on the LineReader protocol; PromptToolkitLineReader
implements it on top of prompt_toolkit, with line editing, in-memory history
and tab completion.
"""

import logging
from pathlib import Path
from typing import Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import InMemoryHistory

logger = logging.getLogger(__name__)


class LineReader(Protocol):
    """What the shell loop needs from a line editor.

    ``read_line`` raises KeyboardInterrupt when the user cancels the line,
    EOFError at end of input and OSError when the terminal fails.
    """

    def read_line(self, prompt: str) -> str: ...

    def add_history_entry(self, line: str) -> None: ...

    def load_history(self, path: Path) -> None: ...

    def save_history(self, path: Path) -> None: ...

    def set_completer(self, completer: Completer | None) -> None: ...


class PromptToolkitLineReader:
    """LineReader backed by a prompt_toolkit PromptSession.

    The history file holds one entry per line, oldest first.
    """

    def __init__(self, max_entries: int = 1000):
        """Initialize the reader.

        Args:
            max_entries: Most recent history entries kept when saving
        """
        self.max_entries = max_entries
        self.history = InMemoryHistory()
        self._entries: list[str] = []
        self._completer: Completer | None = None
        self._session: PromptSession | None = None

    @property
    def session(self) -> PromptSession:
        # Created on first use so that building a shell never touches the terminal
        if self._session is None:
            self._session = PromptSession(history=self.history)
        return self._session

    def read_line(self, prompt: str) -> str:
        return self.session.prompt(ANSI(prompt), completer=self._completer)

    def add_history_entry(self, line: str) -> None:
        """Record a line for persistence.

        prompt_toolkit already keeps accepted lines for up-arrow recall, so
        only the persisted list is updated here.
        """
        self._entries.append(line)

    def load_history(self, path: Path) -> None:
        """Load entries from ``path``.

        Raises:
            FileNotFoundError: If there is no history file yet
            OSError: If the file cannot be read
        """
        with Path(path).open(encoding="utf-8") as f:
            lines = [line.rstrip("\n") for line in f if line.strip()]
        for line in lines:
            self.history.append_string(line)
        self._entries.extend(lines)
        logger.debug("Loaded %d history entries from %s", len(lines), path)

    def save_history(self, path: Path) -> None:
        """Write the most recent entries to ``path``.

        Raises:
            OSError: If the file cannot be written
        """
        entries = self._entries[-self.max_entries :]
        with Path(path).open("w", encoding="utf-8") as f:
            for entry in entries:
                f.write(entry + "\n")
        logger.debug("Saved %d history entries to %s", len(entries), path)

    def set_completer(self, completer: Completer | None) -> None:
        self._completer = completer
