from __future__ import annotations

from typing import Sequence

from ..core.constants import DEFAULT_PAGE_SIZE
from .validators import require_int, require_range

MAX_PAGE_SIZE = 200


def paginate(items: Sequence, page_number=1, page_size=DEFAULT_PAGE_SIZE) -> dict:
    """Slice ``items`` into one page (1-based ``page_number``)."""

    page_number = require_range(require_int(page_number, "Page number"), "Page number", minimum=1)
    page_size = require_range(require_int(page_size, "Page size"), "Page size", minimum=1, maximum=MAX_PAGE_SIZE)

    total = len(items)
    start = (page_number - 1) * page_size
    return {
        "items": list(items[start : start + page_size]),
        "page_number": page_number,
        "page_size": page_size,
        "total_count": total,
        "total_pages": (total + page_size - 1) // page_size,
    }
