"""
Shared test fixtures and utilities for the treeshell test suite.
"""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from treeshell.structure import CommandTree, build_tree, node


@dataclass
class Recorder:
    """Application context that records every callback invocation."""

    calls: list[tuple[str, dict, dict]] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [name for name, _, _ in self.calls]


def recording(name: str, result=None):
    """Callback that records (name, bound args, history snapshot) and returns ``result``."""

    def callback(args, context, history):
        context.calls.append((name, dict(args), dict(history)))
        return result

    callback.__name__ = name
    return callback


def context_switcher(args, context, history):
    context.calls.append(("context", dict(args), dict(history)))
    return f"context:{args['context']}"


class ScriptedReader:
    """LineReader replaying a fixed script.

    Items of the script are returned as lines, or raised when they are
    exceptions. An exhausted script answers "exit".
    """

    def __init__(self, lines=(), history_error: Exception | None = None):
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.entries: list[str] = []
        self.saved: list[Path] = []
        self.loaded: list[Path] = []
        self.completer = None
        self.history_error = history_error

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            return "exit"
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def add_history_entry(self, line: str) -> None:
        self.entries.append(line)

    def load_history(self, path: Path) -> None:
        self.loaded.append(path)
        raise FileNotFoundError(path)

    def save_history(self, path: Path) -> None:
        if self.history_error is not None:
            raise self.history_error
        self.saved.append(path)

    def set_completer(self, completer) -> None:
        self.completer = completer


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def hello_tree(recorder) -> CommandTree:
    """Tree used across the suite.

    my_cli
      hello
        world
        darkness <friend>
      context <context>          (switches context)
        world
        darkness <friend>
        leave                    (returns "up")
      dawn
      daylight
      secret                     (hidden unless TREESHELL_TEST_SECRET is set)
      exit / quit
    """
    return build_tree(
        "my_cli",
        "MyCLI",
        "0.1.0",
        [
            node(
                "hello",
                "Hello Root",
                nodes=[
                    node("world", "World", callback=recording("world")),
                    node(
                        "darkness",
                        "Darkness",
                        callback=recording("darkness"),
                        args={"friend": True},
                    ),
                ],
            ),
            node(
                "context",
                "Enter a context",
                callback=context_switcher,
                args={"context": True},
                nodes=[
                    node("world", "World", callback=recording("world")),
                    node(
                        "darkness",
                        "Darkness",
                        callback=recording("darkness"),
                        args={"friend": True},
                    ),
                    node("leave", "Leave", callback=recording("leave", "up")),
                ],
            ),
            node("dawn", "Dawn", callback=recording("dawn")),
            node("daylight", "Daylight", callback=recording("daylight")),
            node(
                "secret",
                "Hidden command",
                callback=recording("secret"),
                conditional="TREESHELL_TEST_SECRET",
            ),
        ],
        context=recorder,
    )


@pytest.fixture(autouse=True)
def _no_secret(monkeypatch):
    """Keep the conditional test variable out of the environment by default."""
    monkeypatch.delenv("TREESHELL_TEST_SECRET", raising=False)


@pytest.fixture
def scripted_reader():
    """Factory for ScriptedReader instances."""
    return ScriptedReader


@pytest.fixture
def make_callback():
    """Factory for recording callbacks: ``make_callback(name, result=None)``."""
    return recording
