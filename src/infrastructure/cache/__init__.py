from .user_cache import UserCache

__all__ = ['UserCache']
