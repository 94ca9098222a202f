import logging

from pagebuilder.domain.exceptions import IllegalTransition
from pagebuilder.domain.lifecycle.page import assert_page_transition
from pagebuilder.domain.page import Page, PageStatus
from pagebuilder.storage.store import DocumentStore
from .get_page import get_page

logger = logging.getLogger(__name__)


def revert_to_draft(*, store: DocumentStore, slug: str) -> Page:
    """
    Reverts a published page to draft so it can be edited again.

    publishedAt is kept; it records the first publication.
    """
    page = get_page(store=store, slug=slug)

    if not page.is_published:
        raise IllegalTransition(f"Page {slug} is not published", slug=slug)

    assert_page_transition(from_status=page.status, to_status=PageStatus.DRAFT)

    draft = store.save_page(page.model_copy(update={"status": PageStatus.DRAFT}))

    logger.info("page.revert_to_draft slug=%s", slug)
    return draft
