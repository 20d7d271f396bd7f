"""
Command tree container and builder helpers.

This module contains the CommandTree class that owns the root node and the
application context, plus small builder functions for assembling trees in
plain Python.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from inflection import dasherize, underscore

from treeshell.completion import suggest
from treeshell.core.help import print_help, render_help
from treeshell.core.node import Argument, Node
from treeshell.core.types import BoundArgs, SessionHistory
from treeshell.exceptions import ShellExit, TreeDefinitionError

if TYPE_CHECKING:
    from treeshell.shell.config import ShellConfig
    from treeshell.shell.line_reader import LineReader


class CommandTree:
    """A named, versioned command tree and the application context it serves.

    The context is any object; it is handed by reference to every callback
    invocation, one call at a time.
    """

    def __init__(self, name: str, version: str, root: Node, context: Any = None):
        self.name = name
        self.version = version
        self.root = root
        self.context = context

    def get_help(self) -> None:
        """Print the help of the whole tree."""
        print_help(self.root)

    def render_help(self) -> list[str]:
        return render_help(self.root)

    def get_suggestions(self, line: str, context_node: Node | None = None) -> list[str] | None:
        """
        Completion candidates for a partially typed line.

        Params:
            line: Raw input line up to the cursor
            context_node: Active context node, None to search from the root

        Returns:
            Ordered candidate tokens, or None when none apply
        """
        return suggest(self.root, line, context_node)

    def run(
        self,
        reader: "LineReader | None" = None,
        config: "ShellConfig | None" = None,
    ) -> int:
        """Run an interactive shell over this tree and return its exit status."""
        from treeshell.shell.repl import Shell

        return Shell(self, reader=reader, config=config).run()


def exit_shell(args: BoundArgs, context: Any, history: SessionHistory) -> None:
    """Callback that ends the interactive shell with status 0."""
    raise ShellExit(0)


def command_name(func: Callable[..., Any]) -> str:
    """
    Derive a command name from a callback's function name.

    Examples:
        new_context -> "new-context"
        showInterfaces -> "show-interfaces"
    """
    return dasherize(underscore(func.__name__))


def _normalize_args(args: Mapping[str, bool] | Iterable[str] | None) -> list[Argument]:
    if args is None:
        return []
    if isinstance(args, Mapping):
        return [Argument(name=name, required=required) for name, required in args.items()]
    return [Argument(name=name, required=True) for name in args]


def node(
    name: str | None = None,
    help: str = "",
    *,
    callback: Callable[..., Any] | None = None,
    args: Mapping[str, bool] | Iterable[str] | None = None,
    nodes: Iterable[Node] = (),
    conditional: str | None = None,
) -> Node:
    """
    Build a command node in one expression.

    Params:
        name: Command token; derived from ``callback`` when omitted
        help: One-line description
        callback: Function invoked when the command is typed
        args: ``{name: required}`` mapping, or names that are all required
        nodes: Sub-commands in declaration order
        conditional: Environment variable that must exist for the node to be visible

    Returns:
        The assembled Node

    Raises:
        TreeDefinitionError: If neither a name nor a callback is given
        DuplicateNodeError: If two sub-commands share a name
    """
    if name is None:
        if callback is None:
            raise TreeDefinitionError("A command needs a name or a callback to derive it from")
        name = command_name(callback)

    this_node = Node(
        name=name,
        help=help,
        conditional=conditional,
        args=_normalize_args(args),
        callback=callback,
    )
    for child in nodes:
        this_node.add_node(child)
    return this_node


def build_tree(
    name: str,
    help: str,
    version: str,
    nodes: Iterable[Node],
    context: Any = None,
    exit_commands: bool = True,
) -> CommandTree:
    """
    Assemble a command tree under a root named after the shell.

    Params:
        name: Shell name, used for the root node and the prompt
        help: Description shown at the top of the help output
        version: Version shown in the welcome banner
        nodes: Top level commands in declaration order
        context: Application context handed to every callback
        exit_commands: Append ``exit`` and ``quit`` commands to the root

    Returns:
        The CommandTree
    """
    root = Node(name=name, help=help)
    for child in nodes:
        root.add_node(child)
    if exit_commands:
        root.add_node(Node(name="exit", help="Exit Shell", callback=exit_shell))
        root.add_node(Node(name="quit", help="Exit Shell", callback=exit_shell))
    return CommandTree(name, version, root, context)
