"""
Declarative command tree definitions.

A tree can be described as plain data (a dict or a YAML file) and built into a
CommandTree once callbacks are supplied by name.

Example YAML:
    name: my_cli
    version: 0.1.0
    help: MyCLI
    commands:
      - name: hello
        help: Hello Root
        children:
          - name: world
            callback: world
          - name: darkness
            callback: darkness
            args: [friend]
      - name: debug
        conditional: MY_CLI_DEBUG
        callback: debug
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from treeshell.core.node import Argument, Node
from treeshell.core.types import Callback
from treeshell.exceptions import UnknownCallbackError
from treeshell.structure.tree import CommandTree, build_tree


class NodeSpec(BaseModel):
    """Data description of one command and its sub-commands."""

    name: str
    help: str = ""
    conditional: str | None = None
    callback: str | None = None
    args: list[Argument] = Field(default_factory=list)
    children: list[NodeSpec] = Field(default_factory=list)

    @field_validator("args", mode="before")
    @classmethod
    def _expand_args(cls, value: Any) -> Any:
        """Accept ``{friend: true}`` mappings and bare names as shorthand."""
        if isinstance(value, Mapping):
            return [{"name": name, "required": required} for name, required in value.items()]
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value

    def build(self, callbacks: Mapping[str, Callback]) -> Node:
        """
        Materialize this description and its children into Nodes.

        Params:
            callbacks: Registry of callback name -> function

        Returns:
            The built Node

        Raises:
            UnknownCallbackError: If a referenced callback is not in ``callbacks``
            TreeDefinitionError: If a name is invalid or duplicated among siblings
        """
        callback = None
        if self.callback is not None:
            if self.callback not in callbacks:
                raise UnknownCallbackError(self.callback, self.name, list(callbacks))
            callback = callbacks[self.callback]

        node = Node(
            name=self.name,
            help=self.help,
            conditional=self.conditional,
            args=list(self.args),
            callback=callback,
        )
        for child in self.children:
            node.add_node(child.build(callbacks))
        return node


class TreeSpec(BaseModel):
    """Data description of a whole command tree.

    Can be created from dict, YAML, or Path.

    Examples:
        spec = TreeSpec.from_dict({"name": "my_cli", "commands": [...]})
        spec = TreeSpec.from_yaml("tree.yaml")
        tree = spec.build({"world": world, "darkness": darkness}, context=MyContext())
    """

    name: str
    version: str = "0.1.0"
    help: str = ""
    exit_commands: bool = True
    commands: list[NodeSpec] = Field(default_factory=list)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> TreeSpec:
        """
        Create from a dict.

        Raises:
            pydantic.ValidationError: If the data does not describe a tree
        """
        return cls.model_validate(config)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> TreeSpec:
        """Create from a YAML file.

        Args:
            yaml_path: Path to YAML file containing the tree description

        Returns:
            TreeSpec instance
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)

    def build(
        self, callbacks: Mapping[str, Callback] | None = None, context: Any = None
    ) -> CommandTree:
        """
        Build the CommandTree described by this spec.

        Params:
            callbacks: Registry of callback name -> function
            context: Application context handed to every callback

        Returns:
            The assembled CommandTree
        """
        registry = callbacks or {}
        return build_tree(
            self.name,
            self.help,
            self.version,
            [command.build(registry) for command in self.commands],
            context=context,
            exit_commands=self.exit_commands,
        )
