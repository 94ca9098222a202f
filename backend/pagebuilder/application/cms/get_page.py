from typing import List, Optional

from pagebuilder.domain.exceptions import NotFoundError
from pagebuilder.domain.page import Page, PageStatus
from pagebuilder.storage.store import DocumentStore


def get_page(*, store: DocumentStore, slug: str) -> Page:
    page = store.get_page(slug)
    if page is None:
        raise NotFoundError(slug)
    return page


def get_published_page(*, store: DocumentStore, slug: str) -> Page:
    """Published pages only; drafts are reported as missing."""
    page = store.get_page(slug)
    if page is None or not page.is_published:
        raise NotFoundError(slug)
    return page


def list_pages(*, store: DocumentStore, status: Optional[PageStatus] = None) -> List[Page]:
    """Most recently updated first, optionally filtered by status."""
    pages = store.list_pages()
    if status is not None:
        pages = [page for page in pages if page.status is status]
    return pages
