"""
Clients for services outside the search backend.
"""

from .discord_client import DiscordClient
from .token_rotator import TokenRotator

__all__ = ['DiscordClient', 'TokenRotator']
