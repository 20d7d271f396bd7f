"""
Example shell showing nested commands, required arguments and contexts.

Try:
    hello world
    hello darkness bob
    context mycontext          (enters the context, prompt becomes my_cli/mycontext)
    world                      (runs inside the context)
    context other darkness bob  (same-line switch, stays at the top level)
    echo "some text" > out.txt
    up / top / help / ?
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from treeshell.core.types import BoundArgs, SessionHistory
from treeshell.exceptions import CommandError
from treeshell.parsing import OUTPUT_FILE_KEY
from treeshell.shell import Shell, ShellConfig
from treeshell.structure import CommandTree, build_tree, node

DEBUG_VARIABLE = "MY_CLI_DEBUG"


@dataclass
class DemoContext:
    memory: str | None = None
    calls: list[str] = field(default_factory=list)


def world(args: BoundArgs, context: DemoContext, history: SessionHistory) -> None:
    context.calls.append("world")
    if "context" in history:
        print(f"Context: {history['context']}")
    print("World")


def darkness(args: BoundArgs, context: DemoContext, history: SessionHistory) -> None:
    context.calls.append("darkness")
    print(f"Darkness, friend = {args['friend']}")


def new_context(args: BoundArgs, context: DemoContext, history: SessionHistory) -> str:
    context.calls.append("context")
    return f"context:{args['context']}"


def leave(args: BoundArgs, context: DemoContext, history: SessionHistory) -> str:
    return "up"


def remember(args: BoundArgs, context: DemoContext, history: SessionHistory) -> None:
    context.memory = args["value"]


def recall(args: BoundArgs, context: DemoContext, history: SessionHistory) -> None:
    if context.memory is None:
        raise CommandError("nothing remembered yet")
    print(context.memory)


def echo(args: BoundArgs, context: DemoContext, history: SessionHistory) -> None:
    text = args["text"]
    target = history.get(OUTPUT_FILE_KEY)
    if target is None:
        print(text)
        return
    try:
        with Path(target).open("a", encoding="utf-8") as f:
            f.write(text + "\n")
    except OSError as e:
        raise CommandError(f"could not write {target}: {e}") from e


def debug(args: BoundArgs, context: DemoContext, history: SessionHistory) -> None:
    print(f"calls: {context.calls}")
    print(f"history: {history}")


def _greetings() -> list:
    return [
        node("world", "World", callback=world),
        node("darkness", "Darkness", callback=darkness, args={"friend": True}),
    ]


def create_tree(context: DemoContext | None = None) -> CommandTree:
    """Build the demo command tree."""
    return build_tree(
        "my_cli",
        "MyCLI",
        "0.1.0",
        [
            node("hello", "Hello Root", nodes=_greetings()),
            node(
                "context",
                "Enter a named context",
                callback=new_context,
                args={"context": True},
                nodes=[*_greetings(), node("leave", "Leave this context", callback=leave)],
            ),
            node(
                "memory",
                "Application context storage",
                nodes=[
                    node(callback=remember, help="Store a value", args=["value"]),
                    node(callback=recall, help="Print the stored value"),
                ],
            ),
            node(callback=echo, help="Print text, or append it to '> file'", args={"text": True}),
            node(callback=debug, help="Show internal state", conditional=DEBUG_VARIABLE),
        ],
        context=context or DemoContext(),
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="treeshell demo shell")
    parser.add_argument("--config", type=Path, help="YAML file with shell settings")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    config = ShellConfig.from_yaml(args.config) if args.config else ShellConfig()
    return Shell(create_tree(), config=config).run()


if __name__ == "__main__":
    sys.exit(main())
