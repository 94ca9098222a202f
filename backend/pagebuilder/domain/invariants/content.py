from collections import Counter
from typing import Any, List, Mapping, Sequence, assert_never

from ..exceptions import ValidationError
from ..rules import DESIGN_RULES, SectionRule
from ..sections import (
    FAQSection,
    HeroSection,
    ImageCarouselSection,
    ImageSection,
    IntroTextSection,
    ProductGridSection,
    ProductTabsSection,
    Section,
    parse_section,
)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def validate_content(
    content: Any,
    rules: Mapping[str, SectionRule] = DESIGN_RULES,
) -> List[Section]:
    """
    Check a page's content list against the design rules.

    Accepts raw editor dicts or parsed sections. Each section is parsed
    and checked before the next one is looked at, so the first violation
    in list order is the one raised. Once every section passes, per-type
    occurrence limits are enforced across the whole list. Returns the
    parsed sections. Pure: no I/O, no side effects.
    """
    if content is None:
        content = []

    if not isinstance(content, (list, tuple)):
        raise ValidationError("Page content must be a list of sections")

    sections: List[Section] = []
    for index, item in enumerate(content):
        section = parse_section(item, index)
        rule = rules.get(section.type)

        if rule is None:
            raise ValidationError(
                f"Unknown section type: {section.type!r}",
                section_index=index,
            )

        assert_section(section, rule, index)
        sections.append(section)

    assert_section_counts(sections, rules)
    return sections


def assert_section(section: Section, rule: SectionRule, index: int = 0) -> None:
    match section:
        case ProductGridSection():
            _assert_product_grid(section, rule, index)
        case ProductTabsSection():
            _assert_product_tabs(section, rule, index)
        case FAQSection():
            _assert_faq(section, rule, index)
        case ImageCarouselSection():
            _assert_carousel(section, rule, index)
        case HeroSection() | IntroTextSection() | ImageSection():
            pass
        case _:
            assert_never(section)

    for field in rule.required_fields:
        if not getattr(section, field, None):
            _fail(section, index, f"{section.type} requires {field}")


def assert_section_counts(
    content: Sequence[Section],
    rules: Mapping[str, SectionRule] = DESIGN_RULES,
) -> None:
    counts = Counter(section.type for section in content)

    for section_type, rule in rules.items():
        limit = rule.max_occurrences_in_page
        if counts[section_type] > limit:
            raise ValidationError(
                f"{section_type} may appear at most {_plural(limit, 'time')} per page "
                f"(found {counts[section_type]})",
                section_type=section_type,
            )


def _fail(section: Any, index: int, reason: str) -> None:
    raise ValidationError(reason, section_index=index, section_type=section.type)


def _assert_product_grid(section: ProductGridSection, rule: SectionRule, index: int) -> None:
    count = len(section.productIds)

    if rule.min_items is not None and count < rule.min_items:
        _fail(
            section, index,
            f"ProductGrid has {_plural(count, 'product')}, below the minimum items of {rule.min_items}",
        )

    if rule.max_items is not None and count > rule.max_items:
        _fail(
            section, index,
            f"ProductGrid has {_plural(count, 'product')}, above the maximum items of {rule.max_items}",
        )


def _assert_product_tabs(section: ProductTabsSection, rule: SectionRule, index: int) -> None:
    tabs = section.tabs

    if rule.min_tabs is not None and len(tabs) < rule.min_tabs:
        _fail(section, index, f"ProductTabs requires at least {_plural(rule.min_tabs, 'tab')}")

    if rule.max_tabs is not None and len(tabs) > rule.max_tabs:
        _fail(section, index, f"ProductTabs allows at most {_plural(rule.max_tabs, 'tab')}")

    for position, tab in enumerate(tabs, start=1):
        if not tab.label:
            _fail(section, index, f"ProductTabs: tab {position} requires a label")

        count = len(tab.productIds)
        if rule.min_items_per_tab is not None and count < rule.min_items_per_tab:
            _fail(
                section, index,
                f"ProductTabs: tab {position} requires at least "
                f"{_plural(rule.min_items_per_tab, 'product')}",
            )
        if rule.max_items_per_tab is not None and count > rule.max_items_per_tab:
            _fail(
                section, index,
                f"ProductTabs: tab {position} exceeds maximum products ({rule.max_items_per_tab})",
            )


def _assert_faq(section: FAQSection, rule: SectionRule, index: int) -> None:
    if rule.min_items is not None and len(section.items) < rule.min_items:
        _fail(section, index, f"FAQ requires at least {_plural(rule.min_items, 'item')}")

    if rule.max_items is not None and len(section.items) > rule.max_items:
        _fail(section, index, f"FAQ allows at most {_plural(rule.max_items, 'item')}")

    for position, item in enumerate(section.items, start=1):
        if not item.q or not item.a:
            _fail(section, index, f"FAQ: item {position} requires both a question and an answer")


def _assert_carousel(section: ImageCarouselSection, rule: SectionRule, index: int) -> None:
    slides = section.slides

    if rule.min_slides is not None and len(slides) < rule.min_slides:
        _fail(section, index, f"ImageCarousel requires at least {_plural(rule.min_slides, 'slide')}")

    if rule.max_slides is not None and len(slides) > rule.max_slides:
        _fail(section, index, f"ImageCarousel allows at most {_plural(rule.max_slides, 'slide')}")

    for position, slide in enumerate(slides, start=1):
        if not slide.image:
            _fail(section, index, f"ImageCarousel: slide {position} requires an image URL")
