# pagebuilder/domain/targeting.py
"""Which products a section shows and which badges land on each of them."""
from typing import Dict, List, assert_never

from .badges import ProductBadgeItem, get_badges_for_product
from .sections import (
    FAQSection,
    HeroSection,
    ImageCarouselSection,
    ImageSection,
    IntroTextSection,
    ProductGridSection,
    ProductTabsSection,
    Section,
)


def section_product_ids(section: Section) -> List[str]:
    """Product ids referenced by a section, first occurrence order."""
    match section:
        case ProductGridSection():
            return list(dict.fromkeys(section.productIds))
        case ProductTabsSection():
            return list(dict.fromkeys(
                pid for tab in section.tabs for pid in tab.productIds
            ))
        case HeroSection() | IntroTextSection() | FAQSection() | ImageCarouselSection() | ImageSection():
            return []
        case _:
            assert_never(section)


def section_badges(section: Section) -> List[ProductBadgeItem]:
    match section:
        case ProductGridSection() | ProductTabsSection():
            return list(section.badges)
        case HeroSection() | IntroTextSection() | FAQSection() | ImageCarouselSection() | ImageSection():
            return []
        case _:
            assert_never(section)


def resolve_product_badges(section: Section) -> Dict[str, List[ProductBadgeItem]]:
    badges = section_badges(section)
    return {
        pid: get_badges_for_product(pid, badges)
        for pid in section_product_ids(section)
    }
