"""
Discord REST client for user lookups.

This module resolves user ids to display identities through the Discord
API. Every failure surfaces as ``UserLookupError``; recovery is the
caller's concern.
"""

from typing import Optional

import requests

from ...core.entities import DiscordUser
from ...core.interfaces import UserDirectoryClientInterface
from ...shared.exceptions import UserLookupError

DEFAULT_API_BASE = "https://discord.com/api/v10"
DEFAULT_CDN_BASE = "https://cdn.discordapp.com"


class DiscordClient(UserDirectoryClientInterface):
    """Client for the Discord user endpoint."""

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        cdn_base: str = DEFAULT_CDN_BASE,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            api_base: REST API base URL
            cdn_base: CDN base URL for avatars
            timeout: Per-request timeout in seconds
            session: Optional pre-built session, mainly for tests
        """
        self.api_base = api_base.rstrip("/")
        self.cdn_base = cdn_base.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_user(self, user_id: str, token: str) -> DiscordUser:
        """
        Look up a single user.

        Args:
            user_id: Discord user id
            token: Bot token, without the ``Bot`` prefix

        Returns:
            DiscordUser: Identity with a full avatar URL

        Raises:
            UserLookupError: On transport errors, non-2xx statuses or bad payloads
        """
        url = f"{self.api_base}/users/{user_id}"
        try:
            response = self.session.get(
                url,
                headers={"Authorization": f"Bot {token}"},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise UserLookupError(
                f"Discord request for user {user_id} failed: {e}",
                user_id=user_id,
                cause=e
            ) from e

        if not 200 <= response.status_code < 300:
            raise UserLookupError(
                f"Discord returned HTTP {response.status_code} for user {user_id}",
                user_id=user_id,
                status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UserLookupError(
                f"Discord returned invalid JSON for user {user_id}",
                user_id=user_id,
                status_code=response.status_code,
                cause=e
            ) from e

        if not isinstance(data, dict) or not data.get("username"):
            raise UserLookupError(
                f"Discord response for user {user_id} has no username",
                user_id=user_id,
                status_code=response.status_code
            )

        return DiscordUser(
            id=str(data.get("id") or user_id),
            username=data["username"],
            avatar=self.avatar_url(user_id, data.get("avatar"))
        )

    def avatar_url(self, user_id: str, avatar_hash: Optional[str]) -> Optional[str]:
        if not avatar_hash:
            return None
        return f"{self.cdn_base}/avatars/{user_id}/{avatar_hash}.png"

    def close(self) -> None:
        self.session.close()
