# pagebuilder/storage/store.py
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from pagebuilder.domain.exceptions import PageBuilderError, PersistenceError
from pagebuilder.domain.page import Page, PageStatus
from pagebuilder.utils.timestamps import parse_timestamp, utcnow
from .backends import InMemoryBackend, Record, StorageBackend
from .policy import FallbackPolicy

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Persists Page documents.

    The store stamps timestamps and verifies every write by reading it
    back. It does not know about the published-page rule; callers check
    the stored status before saving.
    """

    def __init__(
        self,
        policy: FallbackPolicy,
        *,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._policy = policy
        self._clock = clock

    @classmethod
    def create(
        cls,
        durable: Optional[StorageBackend] = None,
        *,
        strict: bool,
        fallback: Optional[StorageBackend] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> "DocumentStore":
        if fallback is None and not strict:
            fallback = InMemoryBackend()
        return cls(FallbackPolicy(durable, fallback, strict=strict), clock=clock)

    @property
    def policy(self) -> FallbackPolicy:
        return self._policy

    def save_page(self, page: Page) -> Page:
        """
        Upsert `page` keyed by slug and return the stamped copy that was written.

        - updatedAt is always now
        - createdAt is kept (incoming, else stored, else now)
        - publishedAt is stamped once, on the first save in PUBLISHED status
        """
        now = self._clock()

        created_at = page.createdAt
        published_at = page.publishedAt

        if created_at is None or published_at is None:
            existing, _ = self._policy.run(
                "select", lambda b: b.select_by_slug(page.slug), slug=page.slug
            )
            if existing is not None:
                created_at = created_at or parse_timestamp(existing.get("created_at"))
                published_at = published_at or parse_timestamp(existing.get("published_at"))

        if published_at is None and page.status is PageStatus.PUBLISHED:
            published_at = now

        stamped = page.model_copy(update={
            "createdAt": created_at or now,
            "updatedAt": now,
            "publishedAt": published_at,
        })
        record = stamped.to_record()

        _, backend = self._policy.run("upsert", lambda b: b.upsert(record), slug=page.slug)
        self._verify_write(backend, page.slug)

        logger.info(
            "Saved page %s (status=%s, sections=%d) to %s backend",
            page.slug, stamped.status.value, len(stamped.content), backend.name,
        )
        return stamped

    def _verify_write(self, backend: StorageBackend, slug: str) -> None:
        # Runs outside the policy: a failed verification never falls back.
        try:
            found = backend.select_by_slug(slug)
        except Exception as exc:
            logger.error("Read-after-write of page %s on %s failed: %s", slug, backend.name, exc)
            raise PersistenceError(
                f"write of page {slug!r} could not be verified on {backend.name} backend: {exc}",
                operation="verify",
                slug=slug,
                cause=exc,
            ) from exc

        if found is None:
            logger.error(
                "Backend %s acknowledged write of page %s but the record is not readable",
                backend.name, slug,
            )
            raise PersistenceError(
                f"write of page {slug!r} was acknowledged by {backend.name} backend "
                "but the record could not be read back",
                operation="verify",
                slug=slug,
            )

    def get_page(self, slug: str) -> Optional[Page]:
        """The page stored under `slug`, or None when there is no such page."""
        record, backend = self._policy.run(
            "select", lambda b: b.select_by_slug(slug), slug=slug
        )
        if record is None:
            logger.debug("Page %s not found on %s backend", slug, backend.name)
            return None
        return self._decode(record)

    def list_pages(self) -> List[Page]:
        """All pages, most recently updated first."""
        records, _ = self._policy.run("list", lambda b: b.select_all("updated_at"))
        return [self._decode(record) for record in records]

    def delete_page(self, slug: str) -> None:
        self._policy.run("delete", lambda b: b.delete_by_slug(slug), slug=slug)
        logger.info("Deleted page %s", slug)

    def describe(self) -> Dict[str, Any]:
        policy = self._policy
        active = policy.active_backend
        info: Dict[str, Any] = {
            "mode": policy.mode,
            "durable": policy.durable.name if policy.durable else None,
            "active": active.name if active else None,
        }
        if isinstance(active, InMemoryBackend):
            info["memory"] = active.snapshot()
        return info

    def _decode(self, record: Record) -> Page:
        try:
            return Page.from_record(record)
        except (PydanticValidationError, PageBuilderError) as exc:
            raise PersistenceError(
                f"stored page {record.get('slug')!r} could not be decoded: {exc}",
                operation="decode",
                slug=record.get("slug"),
                cause=exc,
            ) from exc
