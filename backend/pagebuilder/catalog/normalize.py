# pagebuilder/catalog/normalize.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

DEFAULT_CURRENCY = "원"


class NormalizedProduct(BaseModel):
    """Product as the page renderer consumes it."""

    id: str
    name: str
    subName: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    thumbnail: Optional[str] = None
    ogImage: Optional[str] = None
    images: Optional[List[str]] = None
    soldOut: bool = False
    description: Optional[str] = None
    region: Optional[str] = None
    reviewScore: Optional[float] = None
    reviewCount: Optional[int] = None
    reviewKeywords: Optional[List[str]] = None
    isClosed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None and value != "":
            return value
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _collect_images(raw: Dict[str, Any], thumbnail: Optional[str]) -> List[str]:
    """Primary image first, then display images, de-duplicated."""
    images: List[str] = [
        img["origin"]
        for img in _as_list(raw.get("display_images"))
        if isinstance(img, dict) and img.get("origin")
    ]

    primary = _as_dict(raw.get("primary_image")).get("origin")
    if primary and primary not in images:
        images.insert(0, primary)

    if not images:
        images.extend(url for url in _as_list(raw.get("images")) if url)

    if thumbnail and thumbnail not in images:
        images.insert(0, thumbnail)

    return list(dict.fromkeys(images))


def _region(raw: Dict[str, Any]) -> Optional[str]:
    areas = _as_list(raw.get("areas"))
    if not areas or not isinstance(areas[0], dict):
        return None

    first = areas[0]
    if first.get("scope") != "city":
        return None
    return first.get("name")


def normalize_product(raw: Dict[str, Any]) -> NormalizedProduct:
    """Map a provider product record onto NormalizedProduct."""
    display_price = _as_dict(raw.get("display_price"))
    flat_price = _as_dict(raw.get("price"))
    primary_image = _as_dict(raw.get("primary_image"))
    display_images = [img for img in _as_list(raw.get("display_images")) if isinstance(img, dict)]
    first_display = display_images[0] if display_images else {}
    review = _as_dict(raw.get("review"))

    thumbnail = _first(
        primary_image.get("origin"),
        first_display.get("origin"),
        next(iter(_as_list(raw.get("images"))), None),
    )
    images = _collect_images(raw, thumbnail)

    return NormalizedProduct(
        id=str(_first(raw.get("product_id"), raw.get("productId"), raw.get("id")) or ""),
        name=_first(raw.get("name"), raw.get("productName"), raw.get("product_name")) or "",
        subName=raw.get("sub_name"),
        price=_first(display_price.get("price2"), flat_price.get("amount")),
        currency=flat_price.get("currency") or DEFAULT_CURRENCY,
        thumbnail=thumbnail,
        ogImage=_first(primary_image.get("og"), first_display.get("og")),
        images=images or None,
        soldOut=raw.get("sold_out") is True,
        description=raw.get("description"),
        region=_region(raw),
        reviewScore=_first(review.get("review_score"), raw.get("review_score")),
        reviewCount=_first(review.get("review_count"), raw.get("review_count")),
        reviewKeywords=_first(review.get("review_keywords"), raw.get("review_keywords")),
        isClosed=raw.get("closed") is True,
    )
