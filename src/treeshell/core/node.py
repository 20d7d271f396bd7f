"""
Command node model for treeshell.

This module contains the Node class, a single command definition in a
command tree, together with the Argument model describing its positional
parameters.
"""

import os
import re
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from treeshell.exceptions import DuplicateNodeError, InvalidNodeNameError

# Characters with a meaning of their own on the input line
_RESERVED_CHARS = re.compile(r'[\s"<>|]')


class Argument(BaseModel):
    """A named positional argument of a command."""

    model_config = ConfigDict(frozen=True)

    name: str
    required: bool = True


class Node(BaseModel):
    """
    A single command definition in a command tree.

    A node may carry a callback, children, or both. When it has both, the
    callback runs and the remaining tokens of the same line keep descending
    into its children. A node with neither is only reachable, never actionable.

    Params:
        name: Command token, unique among siblings and matched case-sensitively
        help: One-line description shown by help output
        conditional: Environment variable that must exist for the node to be visible
        hidden: Visibility flag, derived from ``conditional`` when one is given
        args: Ordered argument declarations; required ones are consumed positionally
        children: Sub-commands in declaration order
        callback: Function called as ``callback(bound_args, app_context, history)``
    """

    name: str
    help: str = ""
    conditional: str | None = None
    hidden: bool = False
    args: list[Argument] = Field(default_factory=list)
    children: list["Node"] = Field(default_factory=list)
    callback: Callable[..., Any] | None = Field(default=None, repr=False)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not value:
            raise InvalidNodeNameError(value, "must be a non-empty string")
        if _RESERVED_CHARS.search(value):
            raise InvalidNodeNameError(
                value, "must not contain whitespace, quotes or redirection markers"
            )
        if value.startswith("?"):
            raise InvalidNodeNameError(value, "'?' is reserved for help requests")
        return value

    def model_post_init(self, __context: Any) -> None:
        # Presence of the variable is what counts, an empty value still unhides
        if self.conditional is not None:
            self.hidden = self.conditional not in os.environ

        seen: set[str] = set()
        for child in self.children:
            if child.name in seen:
                raise DuplicateNodeError(self.name, child.name)
            seen.add(child.name)

    def add_node(self, node: "Node") -> "Node":
        """
        Append a child command.

        Params:
            node: The child to append after the existing children

        Returns:
            The appended child

        Raises:
            DuplicateNodeError: If a sibling with the same name already exists
        """
        if any(child.name == node.name for child in self.children):
            raise DuplicateNodeError(self.name, node.name)
        self.children.append(node)
        return node

    def add_arg(self, name: str, required: bool = True) -> None:
        """Declare another positional argument after the existing ones."""
        self.args.append(Argument(name=name, required=required))

    def find(self, name: str) -> "Node | None":
        """Return the visible child called exactly ``name``, if any."""
        for child in self.children:
            if child.name == name and not child.hidden:
                return child
        return None

    @property
    def required_args(self) -> list[str]:
        """Names of the required arguments in declaration order."""
        return [arg.name for arg in self.args if arg.required]

    @property
    def optional_args(self) -> list[str]:
        return [arg.name for arg in self.args if not arg.required]

    @property
    def required_arg_count(self) -> int:
        return len(self.required_args)

    @property
    def visible_children(self) -> list["Node"]:
        """Children that are not hidden, in declaration order."""
        return [child for child in self.children if not child.hidden]

    @property
    def has_callback(self) -> bool:
        return self.callback is not None

    @property
    def has_children(self) -> bool:
        return bool(self.children)
