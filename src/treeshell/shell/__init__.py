"""
Interactive shell around a command tree.

Example:
    from treeshell import build_tree, node
    from treeshell.shell import Shell, ShellConfig

    tree = build_tree("my_cli", "MyCLI", "0.1.0", [node("hello", "Hello")])
    Shell(tree, config=ShellConfig(welcome=False)).run()
"""

from treeshell.shell.config import HISTORY_FILENAME, ShellConfig, default_history_file
from treeshell.shell.line_reader import LineReader, PromptToolkitLineReader
from treeshell.shell.repl import Shell

__all__ = [
    "HISTORY_FILENAME",
    "LineReader",
    "PromptToolkitLineReader",
    "Shell",
    "ShellConfig",
    "default_history_file",
]
