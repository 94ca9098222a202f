# pagebuilder/domain/badges.py
from __future__ import annotations

from typing import List, Optional, Sequence

from pydantic import BaseModel


LEGACY_BADGE_ID = "legacy-badge"


class ProductBadge(BaseModel):
    """Single badge shape used by pages saved before multi-badge support."""

    text: Optional[str] = None
    backgroundColor: Optional[str] = None
    textColor: Optional[str] = None
    borderColor: Optional[str] = None


class ProductBadgeItem(ProductBadge):
    id: Optional[str] = None
    # None or [] means the badge applies to every product
    targets: Optional[List[str]] = None


def normalize_badges(
    badges: Optional[Sequence[ProductBadgeItem]] = None,
    badge: Optional[ProductBadge] = None,
    badge_targets: Optional[Sequence[str]] = None,
) -> List[ProductBadgeItem]:
    """
    Collapse the legacy `badge` + `badgeTargets` pair and the `badges`
    list into the canonical list form.

    - a non-empty `badges` list wins; items without an id get `badge-{n}`
    - otherwise a legacy badge with text becomes a one-item list
    - anything else yields an empty list
    """
    if badges:
        return [
            item if item.id else item.model_copy(update={"id": f"badge-{index}"})
            for index, item in enumerate(badges, start=1)
        ]

    if badge is not None and badge.text:
        return [
            ProductBadgeItem(
                id=LEGACY_BADGE_ID,
                text=badge.text,
                backgroundColor=badge.backgroundColor,
                textColor=badge.textColor,
                borderColor=badge.borderColor,
                targets=list(badge_targets) if badge_targets is not None else None,
            )
        ]

    return []


def get_badges_for_product(
    product_id: Optional[str],
    badges: Optional[Sequence[ProductBadgeItem]],
) -> List[ProductBadgeItem]:
    """Badges that should be shown on one product, in declaration order."""
    if not badges:
        return []

    pid = product_id or ""

    return [
        b for b in badges
        if b.text and (not b.targets or pid in b.targets)
    ]
