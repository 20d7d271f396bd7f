"""
Command tree navigation.

Exact-match child lookup, required argument binding and line walking used
both by the dispatcher and by the completion engine.
"""

from treeshell.navigation.navigator import (
    HELP_TOKEN,
    Step,
    Walk,
    bind_args,
    find,
    iter_steps,
    required_arg_count,
    walk,
)

__all__ = [
    "HELP_TOKEN",
    "Step",
    "Walk",
    "bind_args",
    "find",
    "iter_steps",
    "required_arg_count",
    "walk",
]
