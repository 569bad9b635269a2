"""Page and cursor metadata derived from ``total``, ``skip`` and ``limit``.

The current page is counted back from the last page and clamped to
``[1, total_pages]``: when ``total`` is a multiple of ``limit`` the raw count
lands one page short of the first. ``limit`` must be positive; a zero limit
raises ``ZeroDivisionError``.
"""

from __future__ import annotations

import math

from contentql.models import PageInfo


def paginate(total: int, skip: int, limit: int) -> PageInfo:
    total_pages = math.ceil(total / limit)
    current_page = max(1, min(total_pages - (total - skip) // limit, total_pages))
    has_next = total_pages > current_page
    has_prev = current_page > 1
    return PageInfo(
        total=total,
        page_size=limit,
        current_page=current_page,
        total_pages=total_pages,
        has_next=has_next,
        has_prev=has_prev,
        cursor=skip,
        next_skip=skip + limit if has_next else skip,
        prev_skip=skip - limit if has_prev else skip,
    )
