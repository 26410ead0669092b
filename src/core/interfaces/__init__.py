"""
Core interfaces module for archive search.

This module provides access to all core interfaces used throughout
the application.
"""

from .client_interface import (
    SearchBackendClientInterface,
    UserDirectoryClientInterface
)
from .service_interface import (
    SearchServiceInterface,
    StatisticsServiceInterface,
    UserEnrichmentServiceInterface
)

__all__ = [
    'SearchBackendClientInterface',
    'UserDirectoryClientInterface',
    'SearchServiceInterface',
    'StatisticsServiceInterface',
    'UserEnrichmentServiceInterface'
]
