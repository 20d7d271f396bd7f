"""
treeshell exception classes.

This package provides all exception types used throughout treeshell
for consistent error handling and reporting.
"""

from treeshell.exceptions.core import (
    CallbackFailure,
    CommandError,
    DuplicateNodeError,
    HelpRequested,
    InvalidNodeNameError,
    MalformedContextLabelError,
    MalformedRedirectionError,
    MissingRequiredArgumentError,
    ShellExit,
    TreeDefinitionError,
    TreeShellError,
    UnknownCallbackError,
    UnknownCommandError,
)

__all__ = [
    "TreeShellError",
    "TreeDefinitionError",
    "InvalidNodeNameError",
    "DuplicateNodeError",
    "UnknownCallbackError",
    "MissingRequiredArgumentError",
    "UnknownCommandError",
    "MalformedRedirectionError",
    "CommandError",
    "CallbackFailure",
    "MalformedContextLabelError",
    "HelpRequested",
    "ShellExit",
]
