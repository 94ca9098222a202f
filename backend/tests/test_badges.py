from pagebuilder.domain.badges import (
    LEGACY_BADGE_ID,
    ProductBadge,
    ProductBadgeItem,
    get_badges_for_product,
    normalize_badges,
)
from pagebuilder.domain.sections import parse_section


def test_normalize_keeps_length_and_fills_missing_ids():
    badges = [
        ProductBadgeItem(id="sale", text="Sale"),
        ProductBadgeItem(text="New"),
        ProductBadgeItem(id="", text="Hot"),
    ]

    result = normalize_badges(badges)

    assert len(result) == 3
    assert [b.id for b in result] == ["sale", "badge-2", "badge-3"]
    assert all(b.id for b in result)


def test_legacy_badge_becomes_single_item():
    result = normalize_badges(None, ProductBadge(text="X"), ["p1"])

    assert [b.model_dump(exclude_none=True) for b in result] == [
        {"id": LEGACY_BADGE_ID, "text": "X", "targets": ["p1"]}
    ]


def test_legacy_badge_without_text_is_dropped():
    assert normalize_badges(None, ProductBadge(text=""), ["p1"]) == []
    assert normalize_badges(None, None, None) == []


def test_badges_list_wins_over_legacy_badge():
    result = normalize_badges([ProductBadgeItem(id="b", text="Best")], ProductBadge(text="Old"), None)

    assert [b.id for b in result] == ["b"]


def test_untargeted_badge_applies_to_every_product():
    for targets in (None, []):
        badge = ProductBadgeItem(id="b", text="Best", targets=targets)
        assert get_badges_for_product("anything", [badge]) == [badge]
        assert get_badges_for_product(None, [badge]) == [badge]


def test_targeted_badge_applies_only_to_its_products():
    badge = ProductBadgeItem(id="b", text="Best", targets=["p1"])

    assert get_badges_for_product("p1", [badge]) == [badge]
    assert get_badges_for_product("p2", [badge]) == []


def test_badges_without_text_are_never_shown():
    badge = ProductBadgeItem(id="b", text="")

    assert get_badges_for_product("p1", [badge]) == []


def test_legacy_fields_are_folded_when_parsing_a_section():
    section = parse_section({
        "type": "ProductGrid",
        "title": "Top",
        "productIds": ["p1", "p2"],
        "badge": {"text": "Hot", "backgroundColor": "#f00"},
        "badgeTargets": ["p2"],
    })

    dumped = section.model_dump(mode="json", exclude_none=True)

    assert "badge" not in dumped
    assert "badgeTargets" not in dumped
    assert dumped["badges"] == [
        {"id": LEGACY_BADGE_ID, "text": "Hot", "backgroundColor": "#f00", "targets": ["p2"]}
    ]
