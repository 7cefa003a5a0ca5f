"""
Configuration management for pubgraph.

Settings are layered: packaged defaults, then one user file (the --config
argument, or pubgraph.config.yaml in the working directory), then CLI flags.
The layered result is validated before anything uses it.
"""
import importlib.resources as importlib_resources
import os
from enum import Enum
from typing import Any, Dict, Optional

import yaml

from pubgraph.utils.exceptions import InvalidConfigError

USER_CONFIG_FILE = "pubgraph.config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OutputFormat(str, Enum):
    """How `pubgraph show` renders the graph."""
    TEXT = "text"
    TABLE = "table"


class ConfigManager:
    """Resolves pubgraph settings from defaults, a user file and CLI flags."""

    def load_package_default_config(self) -> Dict[str, Any]:
        """Load the default.yaml shipped inside the package."""
        import pubgraph.config

        default_config_path = importlib_resources.files(pubgraph.config) / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def read_config_file(self, path: str) -> Dict[str, Any]:
        """
        Read a user configuration file.

        An empty file yields an empty mapping.

        Raises:
            InvalidConfigError: If the file is not valid YAML or not a mapping
        """
        try:
            with open(path, "r") as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigError(path, f"not valid YAML ({e})") from e

        if user_config is None:
            return {}
        if not isinstance(user_config, dict):
            raise InvalidConfigError(path, "expected a mapping at the top level")
        return user_config

    def overlay(self, base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Return base with overrides applied, merging nested sections key by key."""
        layered = dict(base)
        for key, value in overrides.items():
            if isinstance(layered.get(key), dict) and isinstance(value, dict):
                layered[key] = self.overlay(layered[key], value)
            else:
                layered[key] = value
        return layered

    def find_user_config(self, config_arg: Optional[str]) -> Optional[str]:
        """
        Pick the user configuration file, if any.

        Raises:
            FileNotFoundError: If config_arg names a file that does not exist
        """
        if config_arg:
            if not os.path.isfile(config_arg):
                raise FileNotFoundError(f"Config file not found: {config_arg}")
            return config_arg

        if os.path.isfile(USER_CONFIG_FILE):
            return USER_CONFIG_FILE
        return None

    def discover_and_load_config(self, config_arg: Optional[str]) -> Dict[str, Any]:
        """Load the defaults, overlay the user file when one is found, and validate."""
        config = self.load_package_default_config()
        config_path = self.find_user_config(config_arg)
        if config_path is None:
            return config

        config = self.overlay(config, self.read_config_file(config_path))
        return self.validate(config, config_path)

    def validate(self, config: Dict[str, Any], config_path: str) -> Dict[str, Any]:
        """
        Check layered settings and normalize their spelling.

        Log levels are upper-cased and output formats lower-cased.

        Raises:
            InvalidConfigError: Naming config_path and the offending key
        """
        for key in ("manifest_file", "location_index_file"):
            if not isinstance(config.get(key), str) or not config[key]:
                raise InvalidConfigError(config_path, f"`{key}` must be a non-empty file name")

        for section in ("logging", "output"):
            if not isinstance(config.get(section), dict):
                raise InvalidConfigError(config_path, f"`{section}` must be a mapping")

        level = str(config["logging"].get("level", "WARNING")).upper()
        if level not in LOG_LEVELS:
            raise InvalidConfigError(
                config_path, f"`logging.level` must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
            )
        config["logging"]["level"] = level

        output_format = str(config["output"].get("format", OutputFormat.TEXT.value)).lower()
        if output_format not in {fmt.value for fmt in OutputFormat}:
            raise InvalidConfigError(config_path, f"`output.format` must be text or table, got {output_format!r}")
        config["output"]["format"] = output_format

        return config

    def apply_cli_args(
        self,
        config: Dict[str, Any],
        output_format: Optional[OutputFormat],
        verbose: bool,
    ) -> Dict[str, Any]:
        """Let CLI flags win over file settings."""
        if output_format is not None:
            config["output"]["format"] = OutputFormat(output_format).value

        if verbose:
            config["logging"]["level"] = "DEBUG"

        return config
