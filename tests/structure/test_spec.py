"""
Tests for declarative tree definitions.
"""

import pytest
from pydantic import ValidationError

from treeshell.core.node import Argument
from treeshell.exceptions import DuplicateNodeError, UnknownCallbackError
from treeshell.structure import NodeSpec, TreeSpec

TREE_YAML = """\
name: my_cli
version: 2.0.0
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
  - name: connect
    callback: connect
    args:
      host: true
      port: false
"""


def callback_registry(recorder):
    def make(name):
        def callback(args, context, history):
            context.calls.append((name, dict(args), dict(history)))

        return callback

    return {name: make(name) for name in ("world", "darkness", "connect")}


class TestNodeSpec:
    """Argument shorthand and validation."""

    def test_bare_names_are_required(self):
        spec = NodeSpec(name="darkness", args=["friend"])

        assert spec.args == [Argument(name="friend", required=True)]

    def test_mapping_keeps_flags(self):
        spec = NodeSpec(name="connect", args={"host": True, "port": False})

        assert spec.args == [
            Argument(name="host", required=True),
            Argument(name="port", required=False),
        ]

    def test_full_form(self):
        spec = NodeSpec(name="connect", args=[{"name": "host", "required": False}])

        assert spec.args == [Argument(name="host", required=False)]

    def test_unknown_callback(self):
        with pytest.raises(UnknownCallbackError) as exc_info:
            NodeSpec(name="world", callback="missing").build({"world": print})

        assert exc_info.value.callback_name == "missing"
        assert exc_info.value.node_name == "world"
        assert "Available callbacks: world" in str(exc_info.value)

    def test_duplicate_children(self):
        spec = NodeSpec(name="hello", children=[{"name": "a"}, {"name": "a"}])

        with pytest.raises(DuplicateNodeError):
            spec.build({})


class TestTreeSpec:
    """Loading whole trees from data."""

    def test_from_yaml(self, tmp_path, recorder):
        path = tmp_path / "tree.yaml"
        path.write_text(TREE_YAML)

        tree = TreeSpec.from_yaml(path).build(callback_registry(recorder), context=recorder)

        assert tree.name == "my_cli"
        assert tree.version == "2.0.0"
        assert [c.name for c in tree.root.children] == ["hello", "connect", "exit", "quit"]
        darkness = tree.root.find("hello").find("darkness")
        assert darkness.required_args == ["friend"]
        assert tree.root.find("connect").optional_args == ["port"]
        assert tree.context is recorder

    def test_built_tree_dispatches(self, tmp_path, recorder):
        from treeshell.execution import Dispatcher, ShellSession

        path = tmp_path / "tree.yaml"
        path.write_text(TREE_YAML)
        tree = TreeSpec.from_yaml(path).build(callback_registry(recorder), context=recorder)

        Dispatcher(tree, ShellSession(tree.name)).dispatch("hello darkness bob")

        assert recorder.calls == [("darkness", {"friend": "bob"}, {})]

    def test_from_dict_defaults(self):
        spec = TreeSpec.from_dict({"name": "cli"})

        assert spec.version == "0.1.0"
        assert spec.exit_commands is True
        assert spec.commands == []

    def test_exit_commands_flag(self):
        tree = TreeSpec.from_dict({"name": "cli", "exit_commands": False}).build()

        assert tree.root.children == []

    def test_missing_name_is_invalid(self):
        with pytest.raises(ValidationError):
            TreeSpec.from_dict({"commands": []})

    def test_empty_yaml_is_invalid(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with pytest.raises(ValidationError):
            TreeSpec.from_yaml(path)
