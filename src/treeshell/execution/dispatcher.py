"""
Per-line dispatch of commands against a command tree.

A line goes through redirection extraction, built-in interception,
tokenization and a walk over the tree. Every resolved command with a callback
is invoked with its bound arguments, the application context and the session
history, and its return value may move the session between contexts.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from treeshell.core.help import print_help
from treeshell.core.node import Node
from treeshell.core.types import CommandResult
from treeshell.exceptions import (
    CallbackFailure,
    CommandError,
    HelpRequested,
    MalformedContextLabelError,
    ShellExit,
)
from treeshell.execution.session import ShellSession
from treeshell.navigation import Step, iter_steps
from treeshell.parsing import parse_redirection, tokenize

if TYPE_CHECKING:
    from treeshell.structure.tree import CommandTree

logger = logging.getLogger(__name__)

UP_RESULT = "up"
LABEL_SEPARATOR = ":"

EXIT_COMMANDS = frozenset({"exit", "quit"})
HELP_COMMAND = "help"
TOP_COMMAND = "top"
UP_COMMAND = "up"


class DispatchOutcome(Enum):
    """How a line was handled."""

    EMPTY = "empty"  # nothing left to resolve after parsing
    EXECUTED = "executed"  # walked the tree
    BUILTIN = "builtin"  # help, top or up
    HELP = "help"  # '?' in place of an argument value


class Dispatcher:
    """Resolve and execute one input line at a time.

    Failures surface as ``TreeShellError`` subclasses; only the current line is
    affected, the session stays usable. ``ShellExit`` propagates to the caller.
    """

    def __init__(self, tree: "CommandTree", session: ShellSession):
        self.tree = tree
        self.session = session

    def dispatch(self, line: str) -> DispatchOutcome:
        """
        Process one input line.

        Params:
            line: Raw line as read from the user

        Returns:
            The way the line was handled

        Raises:
            MalformedRedirectionError: If a redirection marker is malformed
            MissingRequiredArgumentError: If a command's required arguments are cut short
            UnknownCommandError: If a token matches no command
            CallbackFailure: If a callback fails or returns a malformed navigation string
            ShellExit: If the user asked to leave the shell
        """
        redirection = parse_redirection(line)
        redirection.apply(self.session.history)
        command = redirection.line.strip()

        if command in EXIT_COMMANDS:
            raise ShellExit(0)
        if command == TOP_COMMAND:
            self.session.top()
            return DispatchOutcome.BUILTIN
        if command == UP_COMMAND:
            self.session.up()
            return DispatchOutcome.BUILTIN
        if command == HELP_COMMAND or command.startswith(HELP_COMMAND + " "):
            print_help(self.session.active_node(self.tree.root))
            return DispatchOutcome.BUILTIN

        tokens = tokenize(command)
        if not tokens:
            return DispatchOutcome.EMPTY

        try:
            self._execute(tokens)
        except HelpRequested as request:
            print_help(request.node, level=1, depth=1)
            return DispatchOutcome.HELP
        return DispatchOutcome.EXECUTED

    def _execute(self, tokens: list[str]) -> None:
        start = self.session.active_node(self.tree.root)
        for step in iter_steps(tokens, start):
            if not step.node.has_callback:
                continue
            result = self._invoke(step)
            more_tokens = step.next_index < len(tokens)
            if self._apply_result(step.node, result, more_tokens):
                break

    def _invoke(self, step: Step) -> CommandResult:
        logger.debug(
            "Current: %s, args: %s, next index: %d",
            step.node.name,
            step.bound_args,
            step.next_index,
        )
        try:
            return step.node.callback(
                step.bound_args, self.tree.context, self.session.history
            )
        except CommandError as error:
            raise CallbackFailure(step.node.name, error.message) from error

    def _apply_result(self, node: Node, result: CommandResult, more_tokens: bool) -> bool:
        """
        Interpret a callback's return value as a context transition.

        Params:
            node: Command whose callback returned ``result``
            result: None, "up" or "label:value"
            more_tokens: Whether the line continues after the command and its arguments

        Returns:
            True when the rest of the line must be skipped

        Raises:
            MalformedContextLabelError: If ``result`` is not shaped 'label:value'
        """
        if result is None:
            return False
        if result == UP_RESULT:
            self.session.up()
            return True

        if not isinstance(result, str):
            raise MalformedContextLabelError(node.name, repr(result))
        parts = result.split(LABEL_SEPARATOR)
        if len(parts) != 2:
            raise MalformedContextLabelError(node.name, result)

        label, value = parts
        logger.debug("new_context: %s", value)
        if more_tokens:
            # Same-line switch: the rest of the line runs inside the context
            # without it becoming the active scope
            self.session.history[node.name] = value
        else:
            self.session.enter(node, value)
            self.session.history[label] = value
        return False
