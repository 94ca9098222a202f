import logging
from typing import Any, Dict, Optional

from pagebuilder.domain.exceptions import ConflictError
from pagebuilder.domain.invariants.content import validate_content
from pagebuilder.domain.lifecycle.page import assert_page_transition
from pagebuilder.domain.page import Page, parse_page, require_page_fields
from pagebuilder.storage.store import DocumentStore
from pagebuilder.utils.optimistic_lock import enforce_optimistic_lock

logger = logging.getLogger(__name__)


def save_page(
    *,
    store: DocumentStore,
    data: Dict[str, Any],
    if_unmodified_since: Optional[str] = None,
) -> Page:
    """
    Save an editor payload as a page.

    Order of checks:
    - slug and seo present (MissingFieldError)
    - content passes the design rules (ValidationError)
    - the stored page is not published (ConflictError)
    - optional optimistic lock on the stored updatedAt (ConflictError)
    Nothing is written unless all of them pass.
    """
    require_page_fields(data)

    # 🔒 Design rules (single source of truth, no bypass)
    content = validate_content(data.get("content"))

    page = parse_page({**data, "content": content})

    existing = store.get_page(page.slug)

    if existing is not None:
        if existing.is_published:
            raise ConflictError(
                "Published pages cannot be modified. Revert the page to draft first.",
                slug=page.slug,
            )

        assert_page_transition(from_status=existing.status, to_status=page.status)
        enforce_optimistic_lock(existing, if_unmodified_since)

    saved = store.save_page(page)

    logger.info(
        "page.save slug=%s status=%s created=%s",
        saved.slug, saved.status.value, existing is None,
    )
    return saved
