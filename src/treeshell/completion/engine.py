"""
Prefix-based completion over a command tree.

Completion reuses the navigator's lenient walk and never mutates the tree,
the context stack or the session history, nor does it invoke callbacks.
"""

import logging

from attrs import frozen

from treeshell.core.node import Node
from treeshell.navigation import walk

logger = logging.getLogger(__name__)


@frozen
class Candidates:
    """Completion result for one line.

    ``next_level`` is set when the line ends right after a complete command,
    so the names belong to a new token rather than extending the last word.
    """

    names: list[str] | None
    next_level: bool = False


def split_levels(line: str) -> list[str]:
    """
    Split a not-yet-submitted line into completion levels.

    A trailing whitespace adds one empty level, meaning the user asks for the
    next fresh token rather than for more of the last word.

    Params:
        line: Raw input line

    Returns:
        Whitespace separated tokens, plus '' when the line ends in whitespace
    """
    levels = line.split()
    if line and line[-1].isspace():
        levels.append("")
    return levels


def node_suggestions(node: Node, levels: list[str], index: int) -> Candidates:
    """
    Candidate names among the children of ``node`` for ``levels[index]``.

    Params:
        node: Deepest node reached by the walk
        levels: Completion levels of the line
        index: Position where the walk stopped

    Returns:
        Names in declaration order, None when nothing should be offered
    """
    if not node.has_children:
        return Candidates(None)

    names = [child.name for child in node.visible_children]
    if index < len(levels):
        current = levels[index]
        if not current:
            return Candidates(names)
        return Candidates([name for name in names if name.startswith(current)])

    # The line ends right after a complete token. Offer the next level only if
    # that token named the node itself, not one of its argument values.
    if index == 0:
        return Candidates(names)
    if levels[index - 1] == node.name:
        return Candidates(names, next_level=True)
    return Candidates(None)


def complete_line(root: Node, line: str, context_node: Node | None = None) -> Candidates:
    """
    Walk a partially typed line and collect the candidates at the stop point.

    Params:
        root: Root of the command tree
        line: Raw input line up to the cursor
        context_node: Active context, searched instead of the root when given

    Returns:
        Candidates for the token at the position where the walk stopped
    """
    levels = split_levels(line)
    logger.debug("Levels: %s", levels)

    result = walk(levels, context_node or root)
    logger.debug(
        "Matching: node: %s, levels: %s, index: %d, pending args: %d",
        result.node.name,
        levels,
        result.index,
        result.pending_args,
    )
    return node_suggestions(result.node, levels, result.index)


def suggest(root: Node, line: str, context_node: Node | None = None) -> list[str] | None:
    """
    Compute the valid next tokens for a partially typed line.

    Params:
        root: Root of the command tree
        line: Raw input line up to the cursor
        context_node: Active context, searched instead of the root when given

    Returns:
        Ordered candidate tokens, or None when no node offers any
    """
    return complete_line(root, line, context_node).names
