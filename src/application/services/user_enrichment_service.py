"""
Application service for author enrichment.

Resolves author ids to display identities through the user directory,
with caching, credential rotation and a deterministic fallback. This
service never raises for lookup failures.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

from ...core.entities import DiscordUser, SearchResult
from ...core.interfaces import UserDirectoryClientInterface, UserEnrichmentServiceInterface
from ...domain.users import UserDomainService
from ...infrastructure.cache import UserCache
from ...infrastructure.external import TokenRotator
from ...shared.exceptions import (
    ErrorContextManager,
    FallbackStrategy,
    UserLookupError
)
from ...shared.logging import get_logger

logger = get_logger(__name__)


class UserEnrichmentService(UserEnrichmentServiceInterface):
    """
    Author identity resolution.

    Lookup order: cache, then the directory with the caller's token or
    the next pooled token. Any failure, including having no token at all,
    yields the fallback identity. Real and fallback identities are cached.
    """

    def __init__(
        self,
        directory: UserDirectoryClientInterface,
        rotator: TokenRotator,
        cache: Optional[UserCache] = None,
        max_workers: int = 8
    ):
        """
        Initialize the service.

        Args:
            directory: User directory client
            rotator: Pool of bot tokens
            cache: Identity cache; an unbounded one is created if omitted
            max_workers: Thread pool size for batch resolution
        """
        self.directory = directory
        self.rotator = rotator
        self.cache = cache if cache is not None else UserCache()
        self.max_workers = max_workers
        self.recovery = FallbackStrategy(
            fallback=self._fallback_for,
            error_types=(UserLookupError,)
        )

    @staticmethod
    def _fallback_for(error: Exception) -> DiscordUser:
        return UserDomainService.fallback_user(error.user_id)

    def _lookup(self, user_id: str, bot_token: Optional[str]) -> DiscordUser:
        token = bot_token or self.rotator.next_token()
        if not token:
            raise UserLookupError("No Discord bot token configured", user_id=user_id)
        return self.directory.fetch_user(user_id, token)

    def resolve_user(self, user_id: str, bot_token: Optional[str] = None) -> DiscordUser:
        """
        Resolve one author identity.

        Args:
            user_id: Discord user id
            bot_token: Optional caller-supplied token, used instead of the pool

        Returns:
            DiscordUser: Real identity, or the fallback identity
        """
        cached = self.cache.get(user_id)
        if cached is not None:
            return cached

        try:
            user = self._lookup(user_id, bot_token)
        except UserLookupError as e:
            context = ErrorContextManager.create_context(e, user_id=user_id)
            user = self.recovery.recover(e, context)
            logger.warning(
                "User lookup failed, using fallback identity",
                error_context=context.to_dict()
            )
            self.cache.put(user, is_fallback=True)
            return user

        logger.debug("Resolved user", user_id=user_id, username=user.username)
        self.cache.put(user)
        return user

    def resolve_users(self, user_ids: Sequence[str]) -> Dict[str, DiscordUser]:
        """
        Resolve many author identities concurrently.

        Args:
            user_ids: Author ids; duplicates are resolved once

        Returns:
            Dict[str, DiscordUser]: Identity per id, in first-seen order
        """
        unique_ids: List[str] = list(dict.fromkeys(uid for uid in user_ids if uid))
        if not unique_ids:
            return {}

        workers = max(1, min(self.max_workers, len(unique_ids)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            users = list(executor.map(self.resolve_user, unique_ids))
        return dict(zip(unique_ids, users))

    def resolve_authors(self, result: SearchResult) -> Dict[str, DiscordUser]:
        """Resolve the distinct authors of a page of results."""
        return self.resolve_users(result.author_ids())
