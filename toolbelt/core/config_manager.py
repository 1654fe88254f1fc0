"""
Configuration Manager for toolbelt

Handles configuration loading and environment overrides.
Configuration files are optional: every setting has a built-in default.

Python 3.9+ compatible.
"""

import json
import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml


DEFAULT_PROVIDERS = [
    "toolbelt.helpers.datetime_helper.DateTimeHelper",
]


class ConfigManager:
    """
    Centralized configuration management for toolbelt.

    Supports JSON and YAML configuration files and environment variable
    overrides in the form TOOLBELT_<CONFIG>_<KEY>, with nested keys
    separated by a double underscore.
    """

    ENV_PREFIX = "TOOLBELT"

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Optional config directory (defaults to ./config)
        """
        if config_dir:
            self.config_dir = Path(config_dir)
        else:
            self.config_dir = Path.cwd() / "config"

        self._config_cache: Dict[str, Any] = {}
        self._defaults = self._load_default_config()

        self.logger = logging.getLogger(__name__)

    def _load_default_config(self) -> Dict[str, Any]:
        """Load default configuration values."""
        return {
            "toolbelt": {
                "debug": False,
                "log_level": None,
                "log_file": None,
                "providers": list(DEFAULT_PROVIDERS)
            }
        }

    def load_config(self, config_name: str, required: bool = False) -> Dict[str, Any]:
        """
        Load configuration from file with caching.

        Args:
            config_name: Configuration file name (without extension)
            required: Whether this config file is required

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If required config file not found
        """
        if config_name in self._config_cache:
            return self._config_cache[config_name]

        config_data: Dict[str, Any] = {}
        found = False

        for extension in ['.json', '.yaml', '.yml']:
            config_path = self.config_dir / f"{config_name}{extension}"

            if config_path.exists():
                found = True
                try:
                    if extension == '.json':
                        config_data = self._load_json(config_path)
                    else:
                        config_data = self._load_yaml(config_path)

                    self.logger.info(f"Loaded configuration from {config_path}")
                    break

                except (OSError, ValueError, yaml.YAMLError) as e:
                    self.logger.error(f"Error loading config from {config_path}: {e}")
                    continue

        if not found and required:
            raise FileNotFoundError(f"Required configuration '{config_name}' not found in {self.config_dir}")

        if config_name in self._defaults:
            config_data = self._deep_merge(self._defaults[config_name], config_data)

        config_data = self._apply_env_overrides(config_name, config_data)

        self._config_cache[config_name] = config_data

        return config_data

    def _load_json(self, path: Path) -> Dict[str, Any]:
        """Load JSON configuration file."""
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f) or {}

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML configuration file."""
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def _deep_merge(self, default: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries, with override taking precedence."""
        result = default.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config_name: str, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        prefix = f"{self.ENV_PREFIX}_{config_name.upper()}_"

        for env_var, value in os.environ.items():
            if not env_var.startswith(prefix):
                continue

            key_path = env_var[len(prefix):].lower().split('__')

            current = config
            for key in key_path[:-1]:
                if not isinstance(current.get(key), dict):
                    current[key] = {}
                current = current[key]

            final_key = key_path[-1]
            if isinstance(current.get(final_key), list):
                current[final_key] = [item.strip() for item in value.split(',') if item.strip()]
            else:
                current[final_key] = self._convert_env_value(value)

        return config

    def _convert_env_value(self, value: str) -> Union[str, int, bool, float]:
        """Convert environment variable string to appropriate type."""
        if value.lower() in ['true', 'yes']:
            return True
        elif value.lower() in ['false', 'no']:
            return False

        try:
            if '.' in value:
                return float(value)
            else:
                return int(value)
        except ValueError:
            pass

        return value

    def get(self, config_name: str, key: Optional[str] = None, default: Any = None) -> Any:
        """
        Get configuration value with optional key path.

        Args:
            config_name: Configuration file name
            key: Optional dot-separated key path (e.g., "debug")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        config = self.load_config(config_name)

        if key is None:
            return config

        current = config
        for key_part in key.split('.'):
            if isinstance(current, dict) and key_part in current:
                current = current[key_part]
            else:
                return default

        return current
