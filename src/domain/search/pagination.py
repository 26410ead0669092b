"""
Pagination math for fixed-size result pages.
"""

DEFAULT_PAGE_SIZE = 100


def page_offset(page: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """
    Offset of the first hit on a 1-based page.

    Args:
        page: Page number, at least 1
        page_size: Hits per page

    Returns:
        int: ``(page - 1) * page_size``

    Raises:
        ValueError: If page or page_size is not positive
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return (page - 1) * page_size


def has_more_results(offset: int, page_size: int, total: int) -> bool:
    """Whether hits remain after the page starting at ``offset``."""
    return offset + page_size < total


def page_count(total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Number of pages needed to show ``total`` hits (0 for none)."""
    if total <= 0:
        return 0
    return (total + page_size - 1) // page_size
