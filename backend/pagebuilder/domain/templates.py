# pagebuilder/domain/templates.py
from .badges import ProductBadgeItem
from .exceptions import ValidationError
from .sections import (
    CarouselSlide,
    FAQItem,
    FAQSection,
    HeroSection,
    ImageCarouselSection,
    ImageSection,
    IntroTextSection,
    ProductGridSection,
    ProductTab,
    ProductTabsSection,
    Section,
)


def create_section(section_type: str) -> Section:
    """
    Blank section the editor starts from.

    Templates are intentionally incomplete; they only pass validation once
    the editor fills them in.
    """
    match section_type:
        case "Hero":
            return HeroSection(title="")
        case "IntroText":
            return IntroTextSection(title="", description="")
        case "ProductGrid":
            return ProductGridSection(
                title="",
                productIds=[],
                columns=4,
                badges=[ProductBadgeItem(id="badge1", text="")],
            )
        case "ProductTabs":
            return ProductTabsSection(
                title="",
                tabs=[ProductTab(id="tab1", label="Tab 1", productIds=[])],
                columns=4,
                badges=[ProductBadgeItem(id="badge1", text="")],
            )
        case "FAQ":
            return FAQSection(title="Frequently asked questions", items=[FAQItem(q="", a="")])
        case "ImageCarousel":
            return ImageCarouselSection(
                title="",
                slides=[CarouselSlide(id="slide1", image="", title="", description="")],
                imageHeight="medium",
            )
        case "Image":
            return ImageSection(image="", imageHeight="auto")
        case _:
            raise ValidationError(f"Unknown section type: {section_type!r}")
