"""
treeshell tree structure components.

This package provides the CommandTree container, the Python builder helpers
and the declarative (dict / YAML) tree definitions.
"""

from treeshell.structure.spec import NodeSpec, TreeSpec
from treeshell.structure.tree import (
    CommandTree,
    build_tree,
    command_name,
    exit_shell,
    node,
)

__all__ = [
    "CommandTree",
    "NodeSpec",
    "TreeSpec",
    "build_tree",
    "command_name",
    "exit_shell",
    "node",
]
