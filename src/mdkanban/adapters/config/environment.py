"""
Environment Config Provider - Load configuration from environment variables.

Supports:
- Environment variables (MDKANBAN_TASK_HEADER, MDKANBAN_VERBOSE, MDKANBAN_NO_COLOR)
- .env files
- Command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...core.domain.enums import TaskHeaderFormat
from ...core.exceptions import ConfigError
from ...core.ports.config_provider import AppConfig, ConfigProviderPort


_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


def _coerce(raw_value: str) -> Any:
    """Convert boolean-ish strings to bools, leave everything else alone."""
    if raw_value.lower() in _TRUE_VALUES:
        return True
    if raw_value.lower() in _FALSE_VALUES:
        return False
    return raw_value


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.

    Precedence (highest first): CLI overrides, environment, .env file, defaults.
    """

    ENV_MAPPING = {
        "MDKANBAN_TASK_HEADER": "task_header",
        "MDKANBAN_VERBOSE": "verbose",
        "MDKANBAN_NO_COLOR": "no_color",
        "MDKANBAN_BOARD": "board_path",
    }

    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            env_file: Path to .env file (auto-detected if not specified)
            cli_overrides: Command line argument overrides
        """
        self._values: dict[str, Any] = {}
        self._env_file = env_file
        self._cli_overrides = cli_overrides or {}

        self._load_env_file()
        self._load_environment()
        self._apply_cli_overrides()

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> AppConfig:
        """Load complete configuration."""
        errors = self.validate()
        if errors:
            raise ConfigError("; ".join(errors))

        header = self.get("task_header", TaskHeaderFormat.TITLE.value)
        board_path = self.get("board_path")

        return AppConfig(
            task_header_format=TaskHeaderFormat.from_string(str(header)),
            verbose=bool(self.get("verbose", False)),
            color=not self.get("no_color", False),
            board_path=Path(board_path) if board_path else None,
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        key = key.lower().replace("-", "_")
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        key = key.lower().replace("-", "_")
        self._values[key] = value

    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []

        header = self.get("task_header")
        if header is not None and TaskHeaderFormat.from_string(str(header)) is None:
            allowed = ", ".join(f.value for f in TaskHeaderFormat)
            errors.append(f"Invalid MDKANBAN_TASK_HEADER '{header}' (expected one of: {allowed})")

        return errors

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return

        for line in env_file.read_text().splitlines():
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            config_key = self.ENV_MAPPING.get(key.strip())
            if config_key is None:
                continue

            value = value.strip().strip('"').strip("'")
            self._values[config_key] = _coerce(value)

    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file and self._env_file.exists():
            return self._env_file

        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env

        return None

    def _load_environment(self) -> None:
        """Load values from environment variables."""
        for env_key, config_key in self.ENV_MAPPING.items():
            raw_value = os.environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = _coerce(raw_value)

    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        cli_mapping = {
            "board": "board_path",
            "header": "task_header",
            "verbose": "verbose",
            "no_color": "no_color",
        }

        for cli_key, config_key in cli_mapping.items():
            value = self._cli_overrides.get(cli_key)
            # argparse store_true flags default to False; only an explicit flag overrides
            if value is not None and value is not False:
                self._values[config_key] = value
