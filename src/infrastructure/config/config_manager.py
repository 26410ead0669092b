"""
Configuration manager for centralized configuration handling.

This module provides a manager for loading and managing application
configurations, with support for different environments.
"""

import copy
import os
from pathlib import Path
from typing import Dict, Any, Optional

import yaml
from dotenv import load_dotenv

from ...shared.exceptions import ConfigurationError
from .config_validator import ConfigValidator
from .environment_config import EnvironmentConfig

DEFAULT_INDICES = [f"chunk{number}" for number in range(1, 31)]

DEFAULT_CONFIG: Dict[str, Any] = {
    "elasticsearch": {
        "cloud_id": None,
        "username": None,
        "password": None,
        "indices": DEFAULT_INDICES,
        "page_size": 100,
        "request_timeout": "60s",
        "max_result_window": 1000000,
        "apply_result_window": True
    },
    "discord": {
        "api_base": "https://discord.com/api/v10",
        "cdn_base": "https://cdn.discordapp.com",
        "bot_tokens": [],
        "timeout_seconds": 10.0,
        "user_cache_capacity": None,
        "fallback_ttl_seconds": None,
        "lookup_workers": 8
    },
    "server": {
        "host": "0.0.0.0",
        "port": 5000,
        "cors_origins": "*"
    },
    "logging": {
        "level": "INFO",
        "file": None
    }
}


class ConfigManager:
    """
    Manager for application configurations.

    Layers, lowest precedence first: built-in defaults, ``base.yaml``,
    ``<environment>.yaml``, then environment variables. Missing YAML files
    are skipped.
    """

    def __init__(
        self,
        config_dir: Optional[str] = None,
        environment: Optional[str] = None,
        load_env_file: bool = True
    ):
        """
        Initialize the manager.

        Args:
            config_dir: Configuration directory path
            environment: Optional environment name
            load_env_file: Whether to read a ``.env`` file into the environment
        """
        self.config_dir = Path(
            config_dir or os.getenv("ARCHIVE_SEARCH_CONFIG_DIR", "config")
        )
        self.environment = environment or os.getenv("APP_ENV", "development")
        self.load_env_file = load_env_file
        self.validator = ConfigValidator()
        self._config: Optional[EnvironmentConfig] = None

    def load_config(self) -> EnvironmentConfig:
        """
        Load configuration from defaults, files and the environment.

        Returns:
            EnvironmentConfig: Loaded and validated configuration

        Raises:
            ConfigurationError: If configuration is invalid or incomplete
        """
        if self._config is not None:
            return self._config

        if self.load_env_file:
            load_dotenv()

        config = copy.deepcopy(DEFAULT_CONFIG)
        for filename in ("base.yaml", f"{self.environment}.yaml"):
            config = self._merge_configs(config, self._load_yaml(filename))

        env_config = EnvironmentConfig(config)
        self.validator.validate_config(env_config.config)

        self._config = env_config
        return self._config

    def get_config(self) -> EnvironmentConfig:
        """
        Get the current configuration, loading it on first use.

        Returns:
            EnvironmentConfig: Current configuration
        """
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def _load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Args:
            filename: Configuration file name

        Returns:
            Dict[str, Any]: Loaded configuration, empty if the file is absent

        Raises:
            ConfigurationError: If the file is not a YAML mapping
        """
        file_path = self.config_dir / filename
        if not file_path.exists():
            return {}

        with open(file_path, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {file_path}", cause=e) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")
        return data

    def _merge_configs(
        self,
        base: Dict[str, Any],
        override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Merge two configurations.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Dict[str, Any]: Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result
