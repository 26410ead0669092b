from .search_application_service import SearchApplicationService
from .statistics_application_service import StatisticsApplicationService
from .user_enrichment_service import UserEnrichmentService

__all__ = [
    'SearchApplicationService',
    'StatisticsApplicationService',
    'UserEnrichmentService'
]
