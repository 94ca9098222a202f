# pagebuilder/domain/page.py
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from pagebuilder.utils.timestamps import parse_timestamp
from .exceptions import MissingFieldError, ValidationError
from .sections import Section, dump_content, parse_content


class PageStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class SeoMeta(BaseModel):
    title: str = ""
    description: str = ""
    ogTitle: Optional[str] = None
    ogDescription: Optional[str] = None
    ogImage: Optional[str] = None
    index: bool = True


class Page(BaseModel):
    model_config = ConfigDict(extra="ignore")

    slug: str
    cityCode: Optional[str] = None
    status: PageStatus = PageStatus.DRAFT
    seo: SeoMeta
    content: List[Section] = Field(default_factory=list)
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    publishedAt: Optional[datetime] = None

    @field_validator("createdAt", "updatedAt", "publishedAt", mode="before")
    @classmethod
    def coerce_timestamp(cls, value: Any) -> Optional[datetime]:
        return parse_timestamp(value)

    @property
    def is_published(self) -> bool:
        return self.status is PageStatus.PUBLISHED

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape: camelCase keys, ISO-8601 timestamps, canonical badges."""
        return self.model_dump(mode="json", exclude_none=True)

    # -------------------------------------------------
    # Storage record mapping
    # -------------------------------------------------
    def to_record(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "city_code": self.cityCode,
            "status": self.status.value,
            "seo": self.seo.model_dump(mode="json", exclude_none=True),
            "content": dump_content(self.content),
            "created_at": self.createdAt,
            "updated_at": self.updatedAt,
            "published_at": self.publishedAt,
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Page":
        return cls(
            slug=record["slug"],
            cityCode=record.get("city_code"),
            status=record.get("status") or PageStatus.DRAFT,
            seo=record.get("seo") or {},
            content=parse_content(record.get("content")),
            createdAt=record.get("created_at"),
            updatedAt=record.get("updated_at"),
            publishedAt=record.get("published_at"),
        )


def require_page_fields(payload: Any) -> None:
    """Raises MissingFieldError when the payload, its slug or its seo is absent."""
    if not isinstance(payload, dict) or not payload:
        raise MissingFieldError("data")

    if not payload.get("slug"):
        raise MissingFieldError("slug")

    if not payload.get("seo"):
        raise MissingFieldError("seo")


def parse_page(payload: Any) -> Page:
    """
    Build a Page from an editor payload.

    Raises MissingFieldError when slug or seo is absent and
    ValidationError for malformed sections or field values. Content may
    already be parsed sections.
    """
    require_page_fields(payload)

    content = parse_content(payload.get("content"))

    try:
        return Page.model_validate({**payload, "content": content})
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ValidationError(f"{location}: {first['msg'].lower()}") from exc
