# pagebuilder/storage/backends.py
"""
Storage backends for page records.

A record is the flat dict produced by `Page.to_record()`:
slug, city_code, status, seo, content, created_at, updated_at, published_at.
`select_by_slug` returns None when the row does not exist; every other
failure is raised.
"""
from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from pagebuilder.models.page import PageRecord

Record = Dict[str, Any]

RECORD_FIELDS = (
    "city_code",
    "status",
    "seo",
    "content",
    "created_at",
    "updated_at",
    "published_at",
)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class BackendError(Exception):
    """Raised by a backend for anything other than a missing row."""


class StorageBackend(ABC):
    name = "backend"

    @abstractmethod
    def upsert(self, record: Record) -> Record:
        ...

    @abstractmethod
    def select_by_slug(self, slug: str) -> Optional[Record]:
        ...

    @abstractmethod
    def select_all(self, order_by: str = "updated_at") -> List[Record]:
        """All records, newest first on `order_by`."""

    @abstractmethod
    def delete_by_slug(self, slug: str) -> None:
        ...


class InMemoryBackend(StorageBackend):
    """
    Process-local record map for development without a database.

    Lives for the life of the object; nothing is synchronized.
    """

    name = "memory"

    def __init__(self):
        self._records: Dict[str, Record] = {}

    def upsert(self, record: Record) -> Record:
        self._records[record["slug"]] = copy.deepcopy(record)
        return copy.deepcopy(record)

    def select_by_slug(self, slug: str) -> Optional[Record]:
        record = self._records.get(slug)
        return copy.deepcopy(record) if record is not None else None

    def select_all(self, order_by: str = "updated_at") -> List[Record]:
        records = sorted(
            self._records.values(),
            key=lambda r: r.get(order_by) or _EPOCH,
            reverse=True,
        )
        return [copy.deepcopy(r) for r in records]

    def delete_by_slug(self, slug: str) -> None:
        self._records.pop(slug, None)

    def clear(self) -> None:
        self._records.clear()

    def snapshot(self) -> Dict[str, Any]:
        return {
            "size": len(self._records),
            "slugs": list(self._records.keys()),
        }


class SqlAlchemyBackend(StorageBackend):
    """
    Durable backend on the `citydirect_pages` table.

    Uses the Flask-SQLAlchemy session, so calls need an app context.
    """

    name = "sqlalchemy"

    def __init__(self, db):
        self._db = db

    @contextmanager
    def _transaction(self):
        session = self._db.session
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise

    def upsert(self, record: Record) -> Record:
        try:
            with self._transaction() as session:
                row = session.get(PageRecord, record["slug"])
                if row is None:
                    row = PageRecord(slug=record["slug"])
                    session.add(row)

                for field in RECORD_FIELDS:
                    setattr(row, field, record.get(field))

            return row.to_record()
        except SQLAlchemyError as exc:
            raise BackendError(f"upsert of {record['slug']!r} failed: {exc}") from exc

    def select_by_slug(self, slug: str) -> Optional[Record]:
        try:
            row = self._db.session.execute(
                select(PageRecord).where(PageRecord.slug == slug)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise BackendError(f"select of {slug!r} failed: {exc}") from exc

        return row.to_record() if row is not None else None

    def select_all(self, order_by: str = "updated_at") -> List[Record]:
        column = getattr(PageRecord, order_by)
        try:
            rows = self._db.session.execute(
                select(PageRecord).order_by(column.desc())
            ).scalars().all()
        except SQLAlchemyError as exc:
            raise BackendError(f"listing pages failed: {exc}") from exc

        return [row.to_record() for row in rows]

    def delete_by_slug(self, slug: str) -> None:
        try:
            with self._transaction() as session:
                row = session.get(PageRecord, slug)
                if row is not None:
                    session.delete(row)
        except SQLAlchemyError as exc:
            raise BackendError(f"delete of {slug!r} failed: {exc}") from exc
