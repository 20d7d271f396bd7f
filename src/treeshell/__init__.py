"""
treeshell - A toolkit for building interactive, tree-structured command shells

treeshell resolves hierarchical commands against a command tree, binds their
arguments, dispatches them to callbacks and offers prefix-based completion,
with nested contexts the user can enter and leave.
"""

from importlib.metadata import version

from treeshell.core.node import Argument, Node
from treeshell.exceptions import CommandError
from treeshell.shell import Shell, ShellConfig
from treeshell.structure import CommandTree, TreeSpec, build_tree, node

__version__ = version("treeshell")

__all__ = [
    "__version__",
    "Argument",
    "CommandError",
    "CommandTree",
    "Node",
    "Shell",
    "ShellConfig",
    "TreeSpec",
    "build_tree",
    "node",
]
