# pagebuilder/domain/rules.py
"""
Design rules per section type.

This table is configuration, not editor data, and is the single source of
truth the content invariants consult. Adjust the numbers here when the
business requirements change.
"""
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class SectionRule:
    max_occurrences_in_page: int
    required_fields: Tuple[str, ...] = ()
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    # ProductTabs
    min_tabs: Optional[int] = None
    max_tabs: Optional[int] = None
    min_items_per_tab: Optional[int] = None
    max_items_per_tab: Optional[int] = None
    # ImageCarousel
    min_slides: Optional[int] = None
    max_slides: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        for key, value in asdict(self).items():
            if value is None:
                continue
            head, *rest = key.split("_")
            camel = head + "".join(part.title() for part in rest)
            data[camel] = list(value) if isinstance(value, tuple) else value
        return data


DESIGN_RULES: Mapping[str, SectionRule] = MappingProxyType({
    "Hero": SectionRule(
        max_occurrences_in_page=1,
        required_fields=("title",),
    ),
    "ProductGrid": SectionRule(
        max_occurrences_in_page=2,
        min_items=1,
        max_items=6,
        required_fields=("title",),
    ),
    "ProductTabs": SectionRule(
        max_occurrences_in_page=2,
        min_tabs=1,
        max_tabs=6,
        min_items_per_tab=1,
        max_items_per_tab=6,
    ),
    "IntroText": SectionRule(
        max_occurrences_in_page=1,
        required_fields=("title", "description"),
    ),
    "FAQ": SectionRule(
        max_occurrences_in_page=1,
        min_items=1,
    ),
    "ImageCarousel": SectionRule(
        max_occurrences_in_page=3,
        min_slides=1,
        max_slides=20,
    ),
    "Image": SectionRule(
        max_occurrences_in_page=10,
        required_fields=("image",),
    ),
})


def get_rules(rules: Mapping[str, SectionRule] = DESIGN_RULES) -> Dict[str, Dict[str, Any]]:
    return {section_type: rule.to_dict() for section_type, rule in rules.items()}
