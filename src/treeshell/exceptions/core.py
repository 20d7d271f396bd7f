"""
Exception classes for treeshell command processing.

This module defines specific exception types for the different error conditions
that can occur while building a command tree, parsing an input line, resolving
it against the tree and running its callbacks.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from treeshell.core.node import Node


class TreeShellError(Exception):
    """Base exception for all treeshell-related errors."""

    pass


class TreeDefinitionError(TreeShellError):
    """Base exception for problems detected while a command tree is built."""

    pass


class InvalidNodeNameError(TreeDefinitionError):
    """Raised when a command name cannot be typed as a single token."""

    def __init__(self, name: str, reason: str):
        """
        Initialize the exception.

        Params:
            name: The rejected command name
            reason: Why the name is invalid
        """
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid command name '{name}': {reason}")


class DuplicateNodeError(TreeDefinitionError):
    """Raised when attempting to add a child whose name is already taken."""

    def __init__(self, parent_name: str, child_name: str):
        """
        Initialize the exception.

        Params:
            parent_name: Name of the node receiving the child
            child_name: The clashing child name
        """
        self.parent_name = parent_name
        self.child_name = child_name
        super().__init__(
            f"Command '{child_name}' already exists under '{parent_name}'"
        )


class UnknownCallbackError(TreeDefinitionError):
    """Raised when a declarative tree references an unregistered callback."""

    def __init__(self, callback_name: str, node_name: str, available: list[str]):
        """
        Initialize the exception.

        Params:
            callback_name: The callback name that could not be resolved
            node_name: The node declaring the callback
            available: Names of the registered callbacks
        """
        self.callback_name = callback_name
        self.node_name = node_name
        self.available = available
        super().__init__(
            f"Callback '{callback_name}' for command '{node_name}' is not registered. "
            f"Available callbacks: {', '.join(sorted(available)) or '(none)'}"
        )


class MissingRequiredArgumentError(TreeShellError):
    """Raised when a command line ends before all required arguments are supplied."""

    def __init__(self, node_name: str, missing: list[str]):
        """
        Initialize the exception.

        Params:
            node_name: The command whose arguments are incomplete
            missing: Required argument names from the first unmet one onward
        """
        self.node_name = node_name
        self.missing = missing
        super().__init__(f"'{node_name}' missing fields: {', '.join(missing)}")


class UnknownCommandError(TreeShellError):
    """Raised when a token does not name any visible command at the active level."""

    def __init__(self, token: str):
        """
        Initialize the exception.

        Params:
            token: The unmatched token
        """
        self.token = token
        super().__init__(f"command not found: {token}")


class MalformedRedirectionError(TreeShellError):
    """Raised when a '>', '|' or '<' marker does not have the expected shape."""

    def __init__(self, line: str, reason: str):
        """
        Initialize the exception.

        Params:
            line: The offending input line or redirection target
            reason: Why the redirection was rejected
        """
        self.line = line
        self.reason = reason
        super().__init__(f"Wrong cmd format ({reason}) in: {line}")


class CommandError(TreeShellError):
    """Raised by a command callback to report that the command failed.

    The message is shown to the user and the rest of the line is skipped.
    """

    def __init__(self, message: str):
        """
        Initialize the exception.

        Params:
            message: Failure description shown to the user
        """
        self.message = message
        super().__init__(message)


class CallbackFailure(TreeShellError):
    """Raised by the dispatcher when a command callback did not succeed."""

    def __init__(self, node_name: str, message: str):
        """
        Initialize the exception.

        Params:
            node_name: The command whose callback failed
            message: The failure message reported by the callback
        """
        self.node_name = node_name
        self.message = message
        super().__init__(message)


class MalformedContextLabelError(CallbackFailure):
    """Raised when a callback returns a navigation string not shaped 'label:value'."""

    def __init__(self, node_name: str, result: str):
        """
        Initialize the exception.

        Params:
            node_name: The command whose callback returned the string
            result: The returned navigation string
        """
        self.result = result
        super().__init__(
            node_name,
            f"'{node_name}' returned '{result}', context switchers must return 'label:value'",
        )


class HelpRequested(TreeShellError):
    """Signals that '?' was given where an argument value was expected."""

    def __init__(self, node: "Node"):
        """
        Initialize the signal.

        Params:
            node: The command the help was requested for
        """
        self.node = node
        super().__init__(f"help requested for '{node.name}'")


class ShellExit(TreeShellError):
    """Signals that the shell should stop and exit with the given status."""

    def __init__(self, code: int = 0):
        self.code = code
        super().__init__(f"exit requested with status {code}")
