"""
Configuration validator for validating configuration values.

This module provides a validator for ensuring configuration values
meet the required format and constraints.
"""

from typing import Dict, Any, List

from ...shared.exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

REQUIRED_ELASTICSEARCH_SETTINGS = (
    ("cloud_id", "ELASTICSEARCH_CLOUD_ID"),
    ("username", "ELASTICSEARCH_USERNAME"),
    ("password", "ELASTICSEARCH_PASSWORD")
)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """
    Validator for configuration values.

    This class validates configuration values to ensure they meet
    the required format and constraints. All problems are collected
    and reported together.
    """

    def __init__(self):
        """Initialize the validator."""
        self.errors: List[str] = []

    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.errors = []

        self._validate_elasticsearch_config(config.get("elasticsearch", {}))
        self._validate_discord_config(config.get("discord", {}))
        self._validate_server_config(config.get("server", {}))
        self._validate_logging_config(config.get("logging", {}))

        if self.errors:
            raise ConfigurationError("\n".join(self.errors))

    def _validate_elasticsearch_config(self, config: Dict[str, Any]) -> None:
        """
        Validate Elasticsearch configuration.

        Args:
            config: Elasticsearch configuration
        """
        missing = [
            variable
            for key, variable in REQUIRED_ELASTICSEARCH_SETTINGS
            if not isinstance(config.get(key), str) or not config.get(key)
        ]
        if missing:
            self.errors.append(
                "Missing required Elasticsearch settings: " + ", ".join(missing)
            )

        indices = config.get("indices")
        if (
            not isinstance(indices, list) or not indices or
            not all(isinstance(name, str) and name for name in indices)
        ):
            self.errors.append("Elasticsearch indices must be a non-empty list of names")

        page_size = config.get("page_size")
        if not _is_positive_int(page_size):
            self.errors.append("Elasticsearch page size must be a positive integer")

        window = config.get("max_result_window")
        if not _is_positive_int(window):
            self.errors.append("Elasticsearch max result window must be a positive integer")
        elif _is_positive_int(page_size) and window < page_size:
            self.errors.append("Elasticsearch max result window must not be smaller than the page size")

        timeout = config.get("request_timeout")
        if timeout is not None and (not isinstance(timeout, str) or not timeout):
            self.errors.append("Elasticsearch request timeout must be a time value such as '60s'")

    def _validate_discord_config(self, config: Dict[str, Any]) -> None:
        """
        Validate Discord configuration.

        Args:
            config: Discord configuration
        """
        tokens = config.get("bot_tokens", [])
        if not isinstance(tokens, list) or not all(isinstance(t, str) for t in tokens):
            self.errors.append("Discord bot tokens must be a list of strings")

        for key in ("api_base", "cdn_base"):
            url = config.get(key)
            if not isinstance(url, str) or not url.startswith(("http://", "https://")):
                self.errors.append(f"Discord {key} must start with http:// or https://")

        if not _is_positive_number(config.get("timeout_seconds")):
            self.errors.append("Discord timeout must be a positive number")

        capacity = config.get("user_cache_capacity")
        if capacity is not None and not _is_positive_int(capacity):
            self.errors.append("User cache capacity must be a positive integer or null")

        ttl = config.get("fallback_ttl_seconds")
        if ttl is not None and not _is_positive_number(ttl):
            self.errors.append("Fallback TTL must be a positive number or null")

        if not _is_positive_int(config.get("lookup_workers")):
            self.errors.append("Discord lookup workers must be a positive integer")

    def _validate_server_config(self, config: Dict[str, Any]) -> None:
        """
        Validate HTTP server configuration.

        Args:
            config: Server configuration
        """
        port = config.get("port")
        if not _is_positive_int(port) or port > 65535:
            self.errors.append("Server port must be an integer between 1 and 65535")

        host = config.get("host")
        if not isinstance(host, str) or not host:
            self.errors.append("Server host must be a non-empty string")

    def _validate_logging_config(self, config: Dict[str, Any]) -> None:
        """
        Validate logging configuration.

        Args:
            config: Logging configuration
        """
        level = config.get("level")
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            self.errors.append(
                f"Logging level must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

        file_path = config.get("file")
        if file_path is not None and (not isinstance(file_path, str) or not file_path):
            self.errors.append("Logging file path must be a non-empty string")
