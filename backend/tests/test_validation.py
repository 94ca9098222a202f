import pytest

from pagebuilder.domain.exceptions import ValidationError
from pagebuilder.domain.invariants.content import validate_content
from pagebuilder.domain.rules import DESIGN_RULES, SectionRule, get_rules


def _validate(raw, rules=DESIGN_RULES):
    return validate_content(raw, rules)


def test_top_picks_grid_passes():
    _validate([{"type": "ProductGrid", "title": "Top Picks", "productIds": ["A", "B"], "columns": 4}])


def test_second_hero_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        _validate([{"type": "Hero", "title": "One"}, {"type": "Hero", "title": "Two"}])

    assert "Hero may appear at most 1 time per page" in str(exc_info.value)


def test_empty_grid_is_below_minimum_items():
    with pytest.raises(ValidationError) as exc_info:
        _validate([{"type": "ProductGrid", "title": "Top", "productIds": []}])

    assert "minimum items" in str(exc_info.value)
    assert exc_info.value.section_index == 0


def test_grid_above_maximum_items():
    with pytest.raises(ValidationError) as exc_info:
        _validate([{"type": "ProductGrid", "title": "Top", "productIds": list("ABCDEFG")}])

    assert "maximum items of 6" in str(exc_info.value)


def test_faq_item_needs_question_and_answer():
    with pytest.raises(ValidationError) as exc_info:
        _validate([{"type": "FAQ", "items": [{"q": "", "a": "x"}]}])

    assert "FAQ: item 1 requires both a question and an answer" == str(exc_info.value)


def test_required_field_missing():
    with pytest.raises(ValidationError) as exc_info:
        _validate([{"type": "Hero"}])

    assert str(exc_info.value) == "Hero requires title"


def test_tab_rules():
    with pytest.raises(ValidationError, match="tab 1 requires a label"):
        _validate([{"type": "ProductTabs", "tabs": [{"id": "t", "label": "", "productIds": ["A"]}]}])

    with pytest.raises(ValidationError, match="exceeds maximum products"):
        _validate([{"type": "ProductTabs", "tabs": [{"id": "t", "label": "L", "productIds": list("ABCDEFG")}]}])


def test_carousel_slide_needs_image():
    with pytest.raises(ValidationError, match="slide 2 requires an image URL"):
        _validate([{
            "type": "ImageCarousel",
            "slides": [{"id": "s1", "image": "a.jpg"}, {"id": "s2", "image": ""}],
        }])


def test_first_violation_wins():
    with pytest.raises(ValidationError) as exc_info:
        _validate([
            {"type": "Hero", "title": "Seoul"},
            {"type": "FAQ", "items": []},
            {"type": "ProductGrid", "title": "Top", "productIds": []},
        ])

    assert exc_info.value.section_index == 1


def test_rules_can_be_swapped():
    relaxed = dict(DESIGN_RULES, Hero=SectionRule(max_occurrences_in_page=2, required_fields=("title",)))

    _validate([{"type": "Hero", "title": "One"}, {"type": "Hero", "title": "Two"}], relaxed)


def test_rules_are_exposed_in_camel_case():
    rules = get_rules()

    assert rules["ProductGrid"] == {
        "maxOccurrencesInPage": 2,
        "requiredFields": ["title"],
        "minItems": 1,
        "maxItems": 6,
    }


@pytest.mark.parametrize("later", [
    {"type": "Video"},
    {"type": "Hero", "title": None},
])
def test_earlier_section_is_reported_before_a_malformed_later_one(later):
    with pytest.raises(ValidationError) as exc_info:
        _validate([{"type": "FAQ", "items": []}, later])

    assert str(exc_info.value) == "FAQ requires at least 1 item"
    assert exc_info.value.section_index == 0


def test_unknown_type_after_valid_sections_is_reported_at_its_index():
    with pytest.raises(ValidationError) as exc_info:
        _validate([{"type": "Hero", "title": "Seoul"}, {"type": "Video"}])

    assert "Unknown section type" in str(exc_info.value)
    assert exc_info.value.section_index == 1


def test_parsed_sections_are_returned_in_order():
    sections = _validate([
        {"type": "Hero", "title": "Seoul"},
        {"type": "ProductGrid", "title": "Top Picks", "productIds": ["A", "B"]},
    ])

    assert [s.type for s in sections] == ["Hero", "ProductGrid"]
    assert _validate(sections) == sections


def test_content_that_is_not_a_list_is_rejected():
    with pytest.raises(ValidationError, match="must be a list"):
        _validate({"type": "Hero", "title": "Seoul"})
