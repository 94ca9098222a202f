# pagebuilder/normalizers/pagination.py
from typing import Any, Callable, Dict, List, Optional, Sequence


def normalize_pagination(
    items: Sequence[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Normalize list responses.

    Without `page`/`per_page` every item is returned. With them, the
    items are sliced offset-style and pagination metadata is attached.
    """
    if page is None or per_page is None:
        return {"items": [normalize_fn(item) for item in items]}

    if page < 1 or per_page < 1:
        raise ValueError("page and per_page must be positive")

    total = len(items)
    start = (page - 1) * per_page
    window: List[Any] = list(items[start:start + per_page])

    return {
        "items": [normalize_fn(item) for item in window],
        "pagination": {
            "page": page,
            "per_page": per_page,
            "total": total,
            "total_pages": (total + per_page - 1) // per_page,
        },
    }
