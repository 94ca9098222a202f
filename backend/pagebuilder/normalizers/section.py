from typing import Any, Dict, Mapping, Optional, assert_never

from pagebuilder.catalog.normalize import NormalizedProduct
from pagebuilder.domain.sections import (
    FAQSection,
    HeroSection,
    ImageCarouselSection,
    ImageSection,
    IntroTextSection,
    ProductGridSection,
    ProductTabsSection,
    Section,
)
from pagebuilder.domain.targeting import resolve_product_badges


def _product_cards(product_ids, badge_map, products):
    cards = []
    for pid in product_ids:
        product = products.get(pid)
        if product is None:
            continue
        card = product.to_dict()
        card["badges"] = [
            b.model_dump(mode="json", exclude_none=True)
            for b in badge_map.get(pid, [])
        ]
        cards.append(card)
    return cards


def normalize_section(
    section: Section,
    products: Optional[Mapping[str, NormalizedProduct]] = None,
) -> Dict[str, Any]:
    """
    Section as JSON. With `products`, product sections also get the
    resolved product cards, each carrying the badges that target it.
    """
    data = section.model_dump(mode="json", exclude_none=True)

    if products is None:
        return data

    match section:
        case ProductGridSection():
            badge_map = resolve_product_badges(section)
            data["products"] = _product_cards(section.productIds, badge_map, products)
        case ProductTabsSection():
            badge_map = resolve_product_badges(section)
            for tab_data, tab in zip(data["tabs"], section.tabs):
                tab_data["products"] = _product_cards(tab.productIds, badge_map, products)
        case HeroSection() | IntroTextSection() | FAQSection() | ImageCarouselSection() | ImageSection():
            pass
        case _:
            assert_never(section)

    return data
