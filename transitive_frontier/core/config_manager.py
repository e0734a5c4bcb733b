"""
Configuration management for transitive-frontier.

Handles loading, merging, and discovery of configuration files.
"""
import importlib.resources as importlib_resources
import os
from typing import Iterable, Optional

import yaml

from transitive_frontier.utils.exceptions import ConfigurationError

USER_CONFIG_FILE = "transitive-frontier.config.yaml"


class ConfigManager:
    """Manages configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            try:
                document = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}", [str(e)]) from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ConfigurationError(f"Invalid configuration in {path}", ["top level must be a mapping"])
        return document

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and value is None:
                # Empty section keeps the defaults
                continue
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        import transitive_frontier.config
        config_files = importlib_resources.files(transitive_frontier.config)
        with (config_files / "default.yaml").open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            else:
                raise FileNotFoundError(f"Config file not found: {config_arg}")

        # Priority 2: config file in current directory
        if os.path.exists(USER_CONFIG_FILE):
            return self.load_and_merge_config(USER_CONFIG_FILE)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def merge_config_and_args(
        self,
        config: dict,
        skip: Optional[Iterable[str]] = None,
        fmt: Optional[str] = None,
        output: Optional[str] = None,
        manifest_path: Optional[str] = None,
        metadata_file: Optional[str] = None,
        debug: bool = False,
    ) -> dict:
        """Merge configuration with CLI arguments."""
        analysis = self._section(config, "analysis")
        output_config = self._section(config, "output")
        cargo_config = self._section(config, "cargo")
        logging_config = self._section(config, "logging")

        if skip:
            analysis["skip"] = list(analysis.get("skip") or []) + list(skip)

        if fmt is not None:
            output_config["format"] = fmt

        if output is not None:
            output_config["file"] = output

        if manifest_path is not None:
            cargo_config["manifest_path"] = manifest_path

        if metadata_file is not None:
            cargo_config["metadata_file"] = metadata_file

        if debug:
            logging_config["level"] = "DEBUG"
        config["debug"] = debug

        return config

    def _section(self, config: dict, name: str) -> dict:
        """Return ``config[name]`` as a mapping, creating it when empty."""
        section = config.get(name)
        if section is None:
            section = config[name] = {}
        if not isinstance(section, dict):
            raise ConfigurationError("Invalid configuration", [f"'{name}' section must be a mapping"])
        return section
