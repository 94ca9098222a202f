import pytest

from pagebuilder.domain.exceptions import ValidationError
from pagebuilder.domain.sections import (
    FAQSection,
    ProductGridSection,
    ProductTabsSection,
    dump_content,
    parse_content,
    parse_section,
)
from pagebuilder.domain.targeting import resolve_product_badges, section_product_ids
from pagebuilder.domain.templates import create_section


def test_parse_picks_variant_from_type():
    grid = parse_section({"type": "ProductGrid", "title": "Top", "productIds": ["A"], "columns": 4})
    faq = parse_section({"type": "FAQ", "items": [{"q": "When?", "a": "Now"}]})

    assert isinstance(grid, ProductGridSection)
    assert grid.columns == 4
    assert isinstance(faq, FAQSection)
    assert faq.items[0].q == "When?"


def test_unknown_type_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        parse_section({"type": "Video"}, index=2)

    assert "Unknown section type" in str(exc_info.value)
    assert exc_info.value.section_index == 2


def test_bad_field_value_is_reported_with_section():
    with pytest.raises(ValidationError) as exc_info:
        parse_section({"type": "ProductGrid", "title": "Top", "columns": 9})

    assert exc_info.value.section_type == "ProductGrid"
    assert "columns" in str(exc_info.value)


def test_content_must_be_a_list():
    with pytest.raises(ValidationError):
        parse_content({"type": "Hero"})

    assert parse_content(None) == []


def test_unknown_keys_are_ignored_and_dump_keeps_order():
    content = parse_content([
        {"type": "Hero", "title": "Seoul", "legacyField": 1},
        {"type": "IntroText", "title": "Hi", "description": "There"},
    ])

    dumped = dump_content(content)

    assert [s["type"] for s in dumped] == ["Hero", "IntroText"]
    assert "legacyField" not in dumped[0]


def test_product_ids_and_badges_per_section():
    tabs = parse_section({
        "type": "ProductTabs",
        "tabs": [
            {"id": "t1", "label": "Day", "productIds": ["A", "B"]},
            {"id": "t2", "label": "Night", "productIds": ["B", "C"]},
        ],
        "badges": [{"text": "Night only", "targets": ["C"]}],
    })

    assert isinstance(tabs, ProductTabsSection)
    assert section_product_ids(tabs) == ["A", "B", "C"]

    resolved = resolve_product_badges(tabs)
    assert resolved["A"] == []
    assert [b.text for b in resolved["C"]] == ["Night only"]


def test_templates_exist_for_every_section_type():
    for section_type in ("Hero", "IntroText", "ProductGrid", "ProductTabs", "FAQ", "ImageCarousel", "Image"):
        assert create_section(section_type).type == section_type

    with pytest.raises(ValidationError):
        create_section("Video")
