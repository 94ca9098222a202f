import logging

from pagebuilder.domain.invariants.content import validate_content
from pagebuilder.domain.lifecycle.page import assert_page_transition
from pagebuilder.domain.page import Page, PageStatus
from pagebuilder.storage.store import DocumentStore
from .get_page import get_page

logger = logging.getLogger(__name__)


def publish_page(*, store: DocumentStore, slug: str) -> Page:
    """
    Publishes a stored draft.

    Responsibilities:
    - lifecycle transition enforcement
    - content re-validated against the current design rules
    - publishedAt stamped by the store on first publish
    """
    page = get_page(store=store, slug=slug)

    assert_page_transition(from_status=page.status, to_status=PageStatus.PUBLISHED)
    validate_content(page.content)

    published = store.save_page(page.model_copy(update={"status": PageStatus.PUBLISHED}))

    logger.info("page.publish slug=%s published_at=%s", slug, published.publishedAt)
    return published
