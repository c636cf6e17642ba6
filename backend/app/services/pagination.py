"""
Pagination helpers for the list endpoints.
"""
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple


def offset_pagination(page: int, limit: int, total: int) -> Dict[str, Any]:
    """Build the page-number pagination block."""
    total_pages = math.ceil(total / limit) if limit > 0 else 0
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "total_pages": total_pages,
        "has_next": page < total_pages,
        "has_prev": page > 1,
    }


def page_offset(page: int, limit: int) -> int:
    """Rows to skip before the given 1-based page."""
    return (page - 1) * limit


def cursor_window(rows: Sequence[Any], limit: int) -> Tuple[List[Any], bool, Optional[str]]:
    """
    Trim a ``limit + 1`` fetch to one page.

    Returns the page, whether another page exists and the cursor (id of the
    last row on the page) to resume from.
    """
    has_next = len(rows) > limit
    page = list(rows[:limit])
    next_cursor = page[-1].id if has_next and page else None
    return page, has_next, next_cursor
