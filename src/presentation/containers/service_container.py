"""
Service container for the archive search application.

This module wires configuration, clients and services together and owns
their lifecycle: clients are created once and closed on teardown.
"""

from typing import Optional

from ...application.handlers import SearchHandler
from ...application.services import (
    SearchApplicationService,
    StatisticsApplicationService,
    UserEnrichmentService
)
from ...core.interfaces import SearchBackendClientInterface, UserDirectoryClientInterface
from ...infrastructure.cache import UserCache
from ...infrastructure.config import ConfigManager, EnvironmentConfig
from ...infrastructure.external import DiscordClient, TokenRotator
from ...infrastructure.search import SearchClientFactory
from ...shared.logging import get_logger

logger = get_logger(__name__)


class ServiceContainer:
    """
    Container for archive search services.

    Build one with ``from_config`` (or ``from_config_manager``) in
    production; tests pass pre-built clients to the constructor.
    """

    def __init__(
        self,
        config: EnvironmentConfig,
        search_client: SearchBackendClientInterface,
        directory_client: UserDirectoryClientInterface,
        search_factory: Optional[SearchClientFactory] = None
    ):
        """
        Initialize the container.

        Args:
            config: Loaded configuration
            search_client: Search backend client
            directory_client: User directory client
            search_factory: Factory owning ``search_client``, if any
        """
        self.config = config
        self.search_client = search_client
        self.directory_client = directory_client
        self._search_factory = search_factory
        self._closed = False

        indices = config.get_indices()
        self.search_service = SearchApplicationService(
            client=search_client,
            indices=indices,
            page_size=config.get_page_size(),
            request_timeout=config.get_request_timeout()
        )
        self.search_handler = SearchHandler(self.search_service)
        self.statistics_service = StatisticsApplicationService(search_client, indices)
        self.user_cache = UserCache(
            capacity=config.get_user_cache_capacity(),
            fallback_ttl_seconds=config.get_fallback_ttl()
        )
        self.token_rotator = TokenRotator(config.get_discord_tokens())
        self.enrichment_service = UserEnrichmentService(
            directory=directory_client,
            rotator=self.token_rotator,
            cache=self.user_cache,
            max_workers=config.get_lookup_workers()
        )

    @classmethod
    def from_config(cls, config: EnvironmentConfig) -> "ServiceContainer":
        """
        Build the container and its real clients from configuration.

        Args:
            config: Loaded configuration

        Returns:
            ServiceContainer: Ready container
        """
        factory = SearchClientFactory(config)
        directory = DiscordClient(
            api_base=config.get_discord_api_base(),
            cdn_base=config.get_discord_cdn_base(),
            timeout=config.get_discord_timeout()
        )
        container = cls(
            config=config,
            search_client=factory.client,
            directory_client=directory,
            search_factory=factory
        )
        if not len(container.token_rotator):
            logger.warning("No Discord bot tokens configured, authors will use fallback names")
        return container

    @classmethod
    def from_config_manager(
        cls,
        config_dir: Optional[str] = None,
        environment: Optional[str] = None
    ) -> "ServiceContainer":
        """Load configuration and build the container."""
        manager = ConfigManager(config_dir=config_dir, environment=environment)
        return cls.from_config(manager.load_config())

    def prepare_backend(self) -> bool:
        """
        Raise the result window on every index partition when configured.

        Failures are logged and do not stop startup; deep pages will then
        be rejected by the backend instead.

        Returns:
            bool: Whether the window was applied
        """
        if not self.config.should_apply_result_window():
            return False
        try:
            self.search_client.set_max_result_window(
                self.config.get_indices(),
                self.config.get_max_result_window()
            )
        except Exception as e:
            logger.warning(
                "Could not update max_result_window",
                error=str(e),
                size=self.config.get_max_result_window()
            )
            return False
        return True

    def check_health(self) -> bool:
        """Whether the search backend answers a ping."""
        return self.search_client.is_connected()

    def close(self) -> None:
        """Close all clients. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._search_factory is not None:
            self._search_factory.close()
        else:
            self.search_client.close()
        self.directory_client.close()
        logger.info("Service container closed")

    def __enter__(self) -> "ServiceContainer":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
