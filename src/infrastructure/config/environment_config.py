"""
Environment configuration for environment-specific settings.

This module provides typed access to the merged configuration, with
environment variables taking precedence over file values.
"""

from typing import Dict, Any, List, Optional
import os

DISCORD_TOKEN_VARIABLES = (
    "DISCORD_BOT_TOKEN",
    "DISCORD_BOT_TOKEN2",
    "DISCORD_BOT_TOKEN3"
)


class EnvironmentConfig:
    """
    Environment-specific configuration.

    This class provides configuration settings specific to different
    environments, with support for environment variables.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the configuration.

        Args:
            config: Merged file configuration
        """
        self.config = config
        for section in ("elasticsearch", "discord", "server", "logging"):
            self.config.setdefault(section, {})
        self._apply_environment_overrides()

    def _apply_environment_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        es_config = self.config["elasticsearch"]
        for key, variable in (
            ("cloud_id", "ELASTICSEARCH_CLOUD_ID"),
            ("username", "ELASTICSEARCH_USERNAME"),
            ("password", "ELASTICSEARCH_PASSWORD")
        ):
            if os.environ.get(variable):
                es_config[key] = os.environ[variable]

        tokens = [
            os.environ[variable]
            for variable in DISCORD_TOKEN_VARIABLES
            if os.environ.get(variable)
        ]
        if tokens:
            self.config["discord"]["bot_tokens"] = tokens

        server_config = self.config["server"]
        if os.environ.get("ARCHIVE_SEARCH_HOST"):
            server_config["host"] = os.environ["ARCHIVE_SEARCH_HOST"]
        if os.environ.get("ARCHIVE_SEARCH_PORT"):
            port = os.environ["ARCHIVE_SEARCH_PORT"]
            # Left as a string when not numeric so the validator reports it
            server_config["port"] = int(port) if port.isdigit() else port
        if os.environ.get("ARCHIVE_SEARCH_CORS_ORIGINS"):
            server_config["cors_origins"] = os.environ["ARCHIVE_SEARCH_CORS_ORIGINS"]

        log_config = self.config["logging"]
        if os.environ.get("LOG_LEVEL"):
            log_config["level"] = os.environ["LOG_LEVEL"].upper()
        if os.environ.get("LOG_FILE"):
            log_config["file"] = os.environ["LOG_FILE"]

    def get(self, section: str, default: Any = None) -> Any:
        """Return a raw configuration section."""
        return self.config.get(section, default)

    # Elasticsearch

    def get_elasticsearch_cloud_id(self) -> str:
        return self.config["elasticsearch"]["cloud_id"]

    def get_elasticsearch_username(self) -> str:
        return self.config["elasticsearch"]["username"]

    def get_elasticsearch_password(self) -> str:
        return self.config["elasticsearch"]["password"]

    def get_indices(self) -> List[str]:
        """
        Get the index partitions searched as one corpus.

        Returns:
            List[str]: Index names
        """
        return list(self.config["elasticsearch"].get("indices", []))

    def get_page_size(self) -> int:
        return self.config["elasticsearch"].get("page_size", 100)

    def get_request_timeout(self) -> Optional[str]:
        """
        Get the backend-side search timeout.

        Returns:
            Optional[str]: Elasticsearch time value such as ``"60s"``
        """
        return self.config["elasticsearch"].get("request_timeout")

    def get_max_result_window(self) -> int:
        return self.config["elasticsearch"].get("max_result_window", 1000000)

    def should_apply_result_window(self) -> bool:
        return bool(self.config["elasticsearch"].get("apply_result_window", True))

    # Discord

    def get_discord_tokens(self) -> List[str]:
        """
        Get the configured bot credentials, in rotation order.

        Returns:
            List[str]: Non-empty tokens
        """
        return [token for token in self.config["discord"].get("bot_tokens", []) if token]

    def get_discord_api_base(self) -> str:
        return self.config["discord"].get("api_base", "https://discord.com/api/v10")

    def get_discord_cdn_base(self) -> str:
        return self.config["discord"].get("cdn_base", "https://cdn.discordapp.com")

    def get_discord_timeout(self) -> float:
        return float(self.config["discord"].get("timeout_seconds", 10.0))

    def get_user_cache_capacity(self) -> Optional[int]:
        return self.config["discord"].get("user_cache_capacity")

    def get_fallback_ttl(self) -> Optional[float]:
        """
        Get how long fallback identities stay cached.

        Returns:
            Optional[float]: Seconds, or None to keep them for the process lifetime
        """
        return self.config["discord"].get("fallback_ttl_seconds")

    def get_lookup_workers(self) -> int:
        return self.config["discord"].get("lookup_workers", 8)

    # Server

    def get_server_host(self) -> str:
        return self.config["server"].get("host", "0.0.0.0")

    def get_server_port(self) -> int:
        return self.config["server"].get("port", 5000)

    def get_cors_origins(self) -> str:
        return self.config["server"].get("cors_origins", "*")

    # Logging

    def get_log_level(self) -> str:
        return self.config["logging"].get("level", "INFO")

    def get_log_file(self) -> Optional[str]:
        return self.config["logging"].get("file")
