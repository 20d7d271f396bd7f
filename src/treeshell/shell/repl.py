"""
Interactive read-eval-print loop over a command tree.

The loop reads a line, hands it to the Dispatcher, reports failures and
keeps the history file up to date. It only ends on ``exit``/``quit`` or when
the line reader fails.
"""

import logging

from treeshell.completion import TreeCompleter
from treeshell.exceptions import ShellExit, TreeShellError
from treeshell.execution import DispatchOutcome, Dispatcher, ShellSession
from treeshell.shell.config import ShellConfig
from treeshell.shell.line_reader import LineReader, PromptToolkitLineReader
from treeshell.structure.tree import CommandTree

logger = logging.getLogger(__name__)

# Outcomes that count towards the periodic history save
_COUNTED_OUTCOMES = frozenset({DispatchOutcome.EXECUTED, DispatchOutcome.EMPTY})


class Shell:
    """Interactive shell driving a CommandTree.

    Responsibilities:
      - Read lines through a LineReader and feed them to the Dispatcher.
      - Print failures and keep going; only the current line is lost.
      - Load the history file at start, save it periodically and on exit.
    """

    def __init__(
        self,
        tree: CommandTree,
        reader: LineReader | None = None,
        config: ShellConfig | None = None,
    ):
        self.tree = tree
        self.config = config or ShellConfig()
        self.session = ShellSession(tree.name, prompt_color=self.config.prompt_color)
        self.dispatcher = Dispatcher(tree, self.session)
        self.reader = reader or PromptToolkitLineReader()
        self.reader.set_completer(TreeCompleter(tree, self.session))
        self.processed_lines = 0

    def run(self) -> int:
        """
        Run the loop until the user leaves the shell.

        Returns:
            Exit status, 0 on ``exit``/``quit`` and when the line reader fails
        """
        if self.config.welcome:
            print(f"Welcome to {self.tree.name} v{self.tree.version}")
        self.load_history()

        while True:
            try:
                line = self.reader.read_line(self.session.prompt())
            except (KeyboardInterrupt, EOFError):
                continue
            except OSError as e:
                print(f"Readline error: {e}")
                return 0

            try:
                self.process_line(line)
            except ShellExit as request:
                self.save_history()
                return request.code

    def process_line(self, line: str) -> DispatchOutcome | None:
        """
        Record, dispatch and account for one input line.

        Params:
            line: Raw line from the reader

        Returns:
            How the line was handled, None when it failed

        Raises:
            ShellExit: If the line asked to leave the shell
        """
        self._remember(line)
        try:
            outcome = self.dispatcher.dispatch(line)
        except ShellExit:
            raise
        except TreeShellError as e:
            print(f"Error: {e}")
            return None
        except Exception as e:
            # A broken callback loses its line only
            logger.exception("Command failed: %s", line)
            print(f"Error: {type(e).__name__}: {e}")
            return None

        if outcome in _COUNTED_OUTCOMES:
            if self.processed_lines % self.config.history_save_interval == 0:
                self.save_history()
            self.processed_lines += 1
        return outcome

    def _remember(self, line: str) -> None:
        if not line.strip():
            return
        if self.config.history_ignore_space and line[0].isspace():
            return
        self.reader.add_history_entry(line)

    def load_history(self) -> None:
        try:
            self.reader.load_history(self.config.history_file)
        except FileNotFoundError:
            print("No previous history.")
        except OSError as e:
            logger.warning("Could not load history. Err: %s", e)

    def save_history(self) -> None:
        """Persist the history; failures are logged and otherwise ignored."""
        try:
            self.reader.save_history(self.config.history_file)
        except OSError as e:
            logger.warning("Could not save history. Err: %s", e)
