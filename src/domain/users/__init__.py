"""
User identity domain rules.
"""

from .user_domain_service import UserDomainService

__all__ = ['UserDomainService']
