from .search_handler import SearchHandler

__all__ = ['SearchHandler']
