"""
Domain rules for author display identities.
"""

from ...core.entities import DiscordUser

FALLBACK_SUFFIX_LENGTH = 4


class UserDomainService:
    """Pure rules for building author identities."""

    @staticmethod
    def fallback_user(user_id: str) -> DiscordUser:
        """
        Deterministic identity used when the directory lookup fails.

        Args:
            user_id: Discord user id

        Returns:
            DiscordUser: ``"User " + last four characters``, no avatar
        """
        return DiscordUser(
            id=user_id,
            username=f"User {user_id[-FALLBACK_SUFFIX_LENGTH:]}",
            avatar=None
        )

    @staticmethod
    def is_snowflake(user_id: str) -> bool:
        """Whether ``user_id`` can be a Discord snowflake id."""
        return bool(user_id) and user_id.isascii() and user_id.isdigit()
