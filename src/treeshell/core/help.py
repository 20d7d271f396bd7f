"""
Help text rendering for command trees.

Level 0 renders a node as a banner followed by its commands; deeper levels
render one indented line per command, including the argument format.
"""

from treeshell.core.node import Node

INDENT = "  "
RULE = "-------------------"


def format_usage(node: Node) -> str:
    """
    Build the ``Format:`` suffix describing how a command is typed.

    Params:
        node: The command to describe

    Returns:
        Suffix such as ``", Format: darkness <friend> [mood] "``, or an empty
        string when the command declares no arguments
    """
    if not node.args:
        return ""

    parts = [f", Format: {node.name} "]
    parts.extend(f"<{name}> " for name in node.required_args)
    parts.extend(f"[{name}] " for name in node.optional_args)
    if node.has_children:
        parts.append("[enter]")
    return "".join(parts)


def render_help(node: Node, level: int = 0, depth: int | None = None) -> list[str]:
    """
    Render help lines for a node and its visible descendants.

    Params:
        node: Node to start from
        level: Indentation level; 0 renders the banner form used for the root
        depth: How many levels of children to include, None for the whole subtree

    Returns:
        Help lines without trailing newlines; empty for hidden nodes
    """
    if node.hidden:
        return []

    if level > 0:
        lines = [f"{INDENT * level}{node.name}:\t{node.help}{format_usage(node)}"]
    else:
        lines = [f"{node.name}: {node.help}", RULE, "Commands:"]

    if depth is None or depth > 0:
        child_depth = None if depth is None else depth - 1
        for child in node.children:
            lines.extend(render_help(child, level + 1, child_depth))
    return lines


def print_help(node: Node, level: int = 0, depth: int | None = None) -> None:
    """Print the lines produced by :func:`render_help`."""
    for line in render_help(node, level, depth):
        print(line)
