"""
Archived Discord message and user identity models.
"""

from dataclasses import dataclass
from typing import Dict, Any, Mapping, Optional


MESSAGE_FIELDS = (
    'message_id',
    'content',
    'author_id',
    'channel_id',
    'guild_id',
    'timestamp'
)


@dataclass(frozen=True)
class Message:
    """
    A single archived message as stored in the search index.

    Messages are read-only; ``timestamp`` is kept as the ISO-8601 string
    found in the index document.
    """
    message_id: str
    content: str
    author_id: str
    channel_id: str
    guild_id: str
    timestamp: str

    @classmethod
    def from_source(cls, source: Mapping[str, Any]) -> 'Message':
        """
        Build a message from an index document ``_source``.

        Args:
            source: Index document fields

        Returns:
            Message: Parsed message; missing fields become empty strings
        """
        values = {}
        for name in MESSAGE_FIELDS:
            value = source.get(name)
            values[name] = "" if value is None else str(value)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert message to dictionary representation."""
        return {name: getattr(self, name) for name in MESSAGE_FIELDS}


@dataclass(frozen=True)
class DiscordUser:
    """Display identity of a message author."""
    id: str
    username: str
    avatar: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert user to dictionary representation."""
        return {
            'id': self.id,
            'username': self.username,
            'avatar': self.avatar
        }
