import logging

from pagebuilder.storage.store import DocumentStore
from .get_page import get_page

logger = logging.getLogger(__name__)


def delete_page(*, store: DocumentStore, slug: str) -> None:
    """
    Hard-delete a page.

    Raises NotFoundError when nothing is stored under `slug`.
    """
    page = get_page(store=store, slug=slug)

    store.delete_page(page.slug)

    logger.info("page.delete slug=%s status=%s", page.slug, page.status.value)
