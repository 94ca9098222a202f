from typing import Any, Dict, Mapping, Optional

from pagebuilder.catalog.normalize import NormalizedProduct
from pagebuilder.domain.page import Page
from .section import normalize_section


def _iso(value):
    return value.isoformat() if value else None


def normalize_page(
    page: Page,
    admin: bool = False,
    products: Optional[Mapping[str, NormalizedProduct]] = None,
) -> Dict[str, Any]:
    data = {
        "slug": page.slug,
        "cityCode": page.cityCode,
        "seo": page.seo.model_dump(mode="json", exclude_none=True),
        "content": [
            normalize_section(section, products=products)
            for section in page.content
        ],
        "publishedAt": _iso(page.publishedAt),
    }

    if admin:
        data["status"] = page.status.value
        data["createdAt"] = _iso(page.createdAt)
        data["updatedAt"] = _iso(page.updatedAt)

    return data
