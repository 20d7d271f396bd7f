"""
Configuration for the interactive shell loop.

This module provides the settings that shape the REPL around a command tree:
where history is persisted, how often, and how the prompt looks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from treeshell.execution.session import DEFAULT_PROMPT_COLOR

HISTORY_FILENAME = ".txcli_history"


def default_history_file() -> Path:
    """History file in the user's home directory, or in /tmp when there is none."""
    try:
        home = Path.home()
    except RuntimeError:
        home = Path("/tmp")
    return home / HISTORY_FILENAME


@dataclass
class ShellConfig:
    """Settings of the interactive loop.

    Can be created from dict or YAML with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        config = ShellConfig()

        # Partial override from dict
        config = ShellConfig.from_dict({"history_save_interval": 1})

        # From YAML file
        config = ShellConfig.from_yaml("shell.yaml")
    """

    history_file: Path = field(default_factory=default_history_file)
    # Save the history every N successfully processed lines
    history_save_interval: int = 5
    prompt_color: str = DEFAULT_PROMPT_COLOR
    # Lines typed with a leading space are kept out of the history
    history_ignore_space: bool = True
    welcome: bool = True

    def __post_init__(self) -> None:
        self.history_file = Path(self.history_file).expanduser()
        if self.history_save_interval < 1:
            raise ValueError(
                f"history_save_interval must be positive, got {self.history_save_interval}"
            )

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ShellConfig:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            ShellConfig instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> ShellConfig:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            ShellConfig instance with YAML overrides

        Example YAML:
            history_file: ~/.my_cli_history
            history_save_interval: 1
            welcome: false
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)
