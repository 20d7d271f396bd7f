"""
Tests for ShellConfig.
"""

from pathlib import Path

import pytest

from treeshell.execution import DEFAULT_PROMPT_COLOR
from treeshell.shell import HISTORY_FILENAME, ShellConfig, default_history_file


class TestDefaults:
    def test_defaults(self):
        config = ShellConfig()

        assert config.history_file == Path.home() / HISTORY_FILENAME
        assert config.history_save_interval == 5
        assert config.prompt_color == DEFAULT_PROMPT_COLOR
        assert config.history_ignore_space is True
        assert config.welcome is True

    def test_default_history_file_without_home(self, monkeypatch):
        def no_home():
            raise RuntimeError("no home directory")

        monkeypatch.setattr(Path, "home", staticmethod(no_home))

        assert default_history_file() == Path("/tmp") / HISTORY_FILENAME


class TestValidation:
    def test_history_path_is_expanded(self):
        config = ShellConfig(history_file="~/my_history")

        assert config.history_file == Path("~/my_history").expanduser()

    @pytest.mark.parametrize("interval", [0, -1])
    def test_interval_must_be_positive(self, interval):
        with pytest.raises(ValueError, match="history_save_interval"):
            ShellConfig(history_save_interval=interval)


class TestLoading:
    """Partial overrides from dict and YAML."""

    def test_from_dict_ignores_unknown_keys(self):
        config = ShellConfig.from_dict({"history_save_interval": 1, "colour": "red"})

        assert config.history_save_interval == 1
        assert config.welcome is True

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "shell.yaml"
        path.write_text(
            f"history_file: {tmp_path / 'hist'}\nhistory_save_interval: 2\nwelcome: false\n"
        )

        config = ShellConfig.from_yaml(path)

        assert config.history_file == tmp_path / "hist"
        assert config.history_save_interval == 2
        assert config.welcome is False

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "shell.yaml"
        path.write_text("")

        assert ShellConfig.from_yaml(path) == ShellConfig()
