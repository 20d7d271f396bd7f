"""
Tree navigation primitives shared by command execution and completion.

A command line is walked iteratively: each token is resolved against the
children of the active node, the required arguments of the resolved node are
taken from the tokens that immediately follow it, and the resolved node then
becomes the active node for the next token.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from treeshell.core.help import print_help
from treeshell.core.node import Node
from treeshell.core.types import BoundArgs
from treeshell.exceptions import (
    HelpRequested,
    MissingRequiredArgumentError,
    UnknownCommandError,
)

logger = logging.getLogger(__name__)

HELP_TOKEN = "?"


@dataclass
class Step:
    """One resolved command on a line together with its bound arguments."""

    node: Node
    bound_args: BoundArgs
    index: int  # position of the command token
    next_index: int  # position of the first token after the consumed arguments


@dataclass
class Walk:
    """Where a lenient walk over a line stopped."""

    node: Node
    index: int
    steps: list[Step] = field(default_factory=list)
    # Required arguments of the deepest resolved node still to be typed
    pending_args: int = 0


def find(active: Node, token: str, show_help: bool = True) -> Node | None:
    """
    Resolve a token against the visible children of the active node.

    Params:
        active: Node whose children are searched
        token: Exact, case-sensitive command name
        show_help: Print the one-level help of ``active`` when ``token`` is '?'

    Returns:
        The matching child, or None when nothing matches or a help dump was requested
    """
    logger.debug("Find: %s", token)
    if token == HELP_TOKEN:
        if show_help:
            print_help(active, level=1, depth=1)
        return None
    return active.find(token)


def required_arg_count(node: Node) -> int:
    """Number of tokens a command consumes after its own name."""
    return node.required_arg_count


def bind_args(node: Node, tokens: list[str], index: int) -> BoundArgs:
    """
    Bind the required arguments of ``node`` from the tokens after ``index``.

    Params:
        node: Command found at ``tokens[index]``
        tokens: All tokens of the line
        index: Position of the command token

    Returns:
        Mapping of argument name to the literal token supplied for it

    Raises:
        HelpRequested: When '?' stands where an argument value is expected
        MissingRequiredArgumentError: When the line ends before all required arguments
    """
    required = node.required_args
    bound: BoundArgs = {}
    for offset in range(required_arg_count(node)):
        position = index + 1 + offset
        if position >= len(tokens):
            raise MissingRequiredArgumentError(node.name, required[offset:])
        value = tokens[position]
        if value == HELP_TOKEN:
            raise HelpRequested(node)
        bound[required[offset]] = value
    return bound


def iter_steps(tokens: list[str], start: Node) -> Iterator[Step]:
    """
    Lazily resolve a tokenized line, one command at a time.

    The consumer may stop early, which is how callbacks interrupt the rest of
    a line. A token starting with '?' ends the walk quietly after its help dump.

    Params:
        tokens: Tokens of the line
        start: Active node the first token is resolved against

    Yields:
        A Step for every resolved command

    Raises:
        UnknownCommandError: When a token matches no visible command
        MissingRequiredArgumentError: When a command's required arguments are cut short
        HelpRequested: When '?' replaces an argument value
    """
    node = start
    index = 0
    while index < len(tokens):
        token = tokens[index]
        logger.debug("i: %d, looking for: %s", index, token)
        found = find(node, token)
        if found is None:
            if token.startswith(HELP_TOKEN):
                return
            raise UnknownCommandError(token)

        bound = bind_args(found, tokens, index)
        step = Step(
            node=found,
            bound_args=bound,
            index=index,
            next_index=index + 1 + len(bound),
        )
        yield step
        logger.debug("new node: %s", found.name)
        node = found
        index = step.next_index


def walk(tokens: list[str], start: Node) -> Walk:
    """
    Resolve as many tokens as possible without raising.

    The walk stops at the first token that matches nothing, and before a
    command whose required arguments run past the end of the line. Help
    requests are not printed.

    Params:
        tokens: Tokens of the line
        start: Active node the first token is resolved against

    Returns:
        The deepest node reached and the index of the first unresolved token
    """
    result = Walk(node=start, index=0)
    while result.index < len(tokens):
        found = find(result.node, tokens[result.index], show_help=False)
        if found is None:
            break

        required = found.required_args
        count = required_arg_count(found)
        available = len(tokens) - result.index - 1
        if available < count:
            logger.debug(
                "'%s' missing fields: %s", found.name, required[available:]
            )
            result.pending_args = count - available
            break

        bound = dict(zip(required, tokens[result.index + 1 :]))
        next_index = result.index + 1 + count
        result.steps.append(Step(found, bound, result.index, next_index))
        result.node = found
        result.index = next_index
        result.pending_args = 0
    return result
