"""Tests for the environment config provider."""

import pytest
from pathlib import Path

from mdkanban.adapters.config import EnvironmentConfigProvider
from mdkanban.core.domain import TaskHeaderFormat
from mdkanban.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate each test from the caller's environment and any .env in cwd."""
    for key in EnvironmentConfigProvider.ENV_MAPPING:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestEnvironmentConfigProvider:
    """Tests for EnvironmentConfigProvider."""

    def test_defaults(self):
        config = EnvironmentConfigProvider().load()

        assert config.task_header_format == TaskHeaderFormat.TITLE
        assert config.verbose is False
        assert config.color is True
        assert config.board_path is None

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("MDKANBAN_TASK_HEADER", "list")
        monkeypatch.setenv("MDKANBAN_VERBOSE", "true")
        monkeypatch.setenv("MDKANBAN_NO_COLOR", "1")
        monkeypatch.setenv("MDKANBAN_BOARD", "board.md")

        config = EnvironmentConfigProvider().load()

        assert config.task_header_format == TaskHeaderFormat.LIST
        assert config.verbose is True
        assert config.color is False
        assert config.board_path == Path("board.md")

    def test_header_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("MDKANBAN_TASK_HEADER", " LIST ")
        assert EnvironmentConfigProvider().load().task_header_format == TaskHeaderFormat.LIST

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "settings.env"
        env_file.write_text(
            "# comment\n"
            "MDKANBAN_TASK_HEADER='list'\n"
            'MDKANBAN_BOARD="boards/main.md"\n'
            "OTHER_TOOL=ignored\n"
            "not a setting\n"
        )

        provider = EnvironmentConfigProvider(env_file=env_file)
        config = provider.load()

        assert config.task_header_format == TaskHeaderFormat.LIST
        assert config.board_path == Path("boards/main.md")
        assert provider.get("other_tool") is None

    def test_env_file_in_cwd(self, tmp_path):
        (tmp_path / ".env").write_text("MDKANBAN_VERBOSE=yes\n")
        assert EnvironmentConfigProvider().load().verbose is True

    def test_environment_beats_env_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("MDKANBAN_TASK_HEADER=list\n")
        monkeypatch.setenv("MDKANBAN_TASK_HEADER", "title")

        assert EnvironmentConfigProvider().load().task_header_format == TaskHeaderFormat.TITLE

    def test_cli_beats_environment(self, monkeypatch):
        monkeypatch.setenv("MDKANBAN_TASK_HEADER", "title")
        monkeypatch.setenv("MDKANBAN_BOARD", "env.md")

        provider = EnvironmentConfigProvider(
            cli_overrides={"header": "list", "board": Path("cli.md")}
        )
        config = provider.load()

        assert config.task_header_format == TaskHeaderFormat.LIST
        assert config.board_path == Path("cli.md")

    def test_unset_cli_flags_do_not_override(self, monkeypatch):
        monkeypatch.setenv("MDKANBAN_VERBOSE", "true")

        provider = EnvironmentConfigProvider(
            cli_overrides={"header": None, "verbose": False, "no_color": False}
        )

        assert provider.load().verbose is True

    def test_get_and_set(self):
        provider = EnvironmentConfigProvider()
        provider.set("Task-Header", "list")

        assert provider.get("task_header") == "list"
        assert provider.get("missing", "fallback") == "fallback"

    def test_invalid_header(self, monkeypatch):
        monkeypatch.setenv("MDKANBAN_TASK_HEADER", "table")
        provider = EnvironmentConfigProvider()

        errors = provider.validate()
        assert len(errors) == 1
        assert "table" in errors[0]

        with pytest.raises(ConfigError):
            provider.load()
