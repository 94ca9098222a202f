# pagebuilder/domain/sections.py
"""
Section variants a page's content list is built from.

`Section` is a closed union discriminated on `type`. Code that consumes
sections matches on the variant classes and ends with `assert_never`, so a
new variant has to be handled everywhere before the type checker is happy.
"""
from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from .badges import ProductBadge, ProductBadgeItem, normalize_badges
from .exceptions import ValidationError


SECTION_TYPES = (
    "Hero",
    "IntroText",
    "ProductGrid",
    "ProductTabs",
    "FAQ",
    "ImageCarousel",
    "Image",
)

Columns = Literal[1, 2, 3, 4]
ImageHeight = Literal["auto", "small", "medium", "large", "xlarge", "custom"]


class SectionStyle(BaseModel):
    backgroundColor: Optional[str] = None
    titleColor: Optional[str] = None
    titleSize: Optional[Literal["sm", "base", "lg", "xl", "2xl", "3xl"]] = None
    textColor: Optional[str] = None
    textSize: Optional[Literal["sm", "base", "lg", "xl"]] = None


class SectionBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    style: Optional[SectionStyle] = None


class BadgedSection(SectionBase):
    """
    Product sections carry badges. The legacy `badge` / `badgeTargets`
    fields are accepted on input only and folded into `badges`.
    """

    badges: List[ProductBadgeItem] = Field(default_factory=list)
    badge: Optional[ProductBadge] = Field(default=None, exclude=True)
    badgeTargets: Optional[List[str]] = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def canonicalize_badges(self):
        self.badges = normalize_badges(self.badges, self.badge, self.badgeTargets)
        self.badge = None
        self.badgeTargets = None
        return self


class HeroSection(SectionBase):
    type: Literal["Hero"] = "Hero"
    title: str = ""
    subtitle: Optional[str] = None
    image: Optional[str] = None


class IntroTextSection(SectionBase):
    type: Literal["IntroText"] = "IntroText"
    title: str = ""
    description: str = ""


class ProductGridSection(BadgedSection):
    type: Literal["ProductGrid"] = "ProductGrid"
    title: str = ""
    productIds: List[str] = Field(default_factory=list)
    columns: Optional[Columns] = None


class ProductTab(BaseModel):
    id: str = ""
    label: str = ""
    productIds: List[str] = Field(default_factory=list)


class ProductTabsSection(BadgedSection):
    type: Literal["ProductTabs"] = "ProductTabs"
    title: Optional[str] = None
    tabs: List[ProductTab] = Field(default_factory=list)
    columns: Optional[Columns] = None


class FAQItem(BaseModel):
    q: str = ""
    a: str = ""


class FAQSection(SectionBase):
    type: Literal["FAQ"] = "FAQ"
    title: Optional[str] = None
    items: List[FAQItem] = Field(default_factory=list)


class CarouselSlide(BaseModel):
    id: str = ""
    image: str = ""
    title: Optional[str] = None
    description: Optional[str] = None


class ImageCarouselSection(SectionBase):
    type: Literal["ImageCarousel"] = "ImageCarousel"
    title: Optional[str] = None
    slides: List[CarouselSlide] = Field(default_factory=list)
    imageHeight: Optional[ImageHeight] = None
    customHeight: Optional[int] = None
    customWidth: Optional[int] = None


class ImageSection(SectionBase):
    type: Literal["Image"] = "Image"
    image: str = ""
    alt: Optional[str] = None
    caption: Optional[str] = None
    fullWidth: Optional[bool] = None
    link: Optional[str] = None
    imageHeight: Optional[ImageHeight] = None
    customHeight: Optional[int] = None
    customWidth: Optional[int] = None


Section = Annotated[
    Union[
        HeroSection,
        IntroTextSection,
        ProductGridSection,
        ProductTabsSection,
        FAQSection,
        ImageCarouselSection,
        ImageSection,
    ],
    Field(discriminator="type"),
]

_section_adapter: TypeAdapter[Section] = TypeAdapter(Section)


def parse_section(raw: Any, index: int = 0) -> Section:
    """Turn one editor-supplied section into its typed variant."""
    if isinstance(raw, SectionBase):
        return raw

    if isinstance(raw, BaseModel):
        raw = raw.model_dump()

    if not isinstance(raw, dict):
        raise ValidationError(
            f"Section {index + 1} must be an object",
            section_index=index,
        )

    section_type = raw.get("type")
    if section_type not in SECTION_TYPES:
        raise ValidationError(
            f"Unknown section type: {section_type!r}",
            section_index=index,
            section_type=section_type if isinstance(section_type, str) else None,
        )

    try:
        return _section_adapter.validate_python(raw)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"][1:])
        raise ValidationError(
            f"{section_type} section {index + 1}: {location or 'value'} {first['msg'].lower()}",
            section_index=index,
            section_type=section_type,
        ) from exc


def parse_content(raw: Any) -> List[Section]:
    if raw is None:
        return []

    if not isinstance(raw, (list, tuple)):
        raise ValidationError("Page content must be a list of sections")

    return [parse_section(item, index) for index, item in enumerate(raw)]


def dump_content(content: Sequence[Section]) -> List[dict]:
    return [section.model_dump(mode="json", exclude_none=True) for section in content]
