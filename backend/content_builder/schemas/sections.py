"""
Content Section Schemas

Each page is composed of an ordered list of typed sections. The set of
variants is closed and discriminated by the ``type`` field; field names on
the wire are camelCase while Python code uses snake_case attributes.
"""
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SectionModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# -------------------------------------------------
# Shared sub-schemas
# -------------------------------------------------

class ResponsiveValue(SectionModel):
    """A CSS value per breakpoint."""
    mobile: str
    tablet: str
    desktop: str


class HeroAnimation(SectionModel):
    enabled: bool = True
    type: Literal["fadeIn", "slideUp", "scaleIn", "none"] = "fadeIn"
    duration: float = Field(default=0.8, ge=0.1, le=3)
    delay: float = Field(default=0, ge=0, le=2)


class TextAnimation(SectionModel):
    enabled: bool = False
    type: Literal["fadeIn", "slideUp", "slideInLeft", "slideInRight", "none"] = "fadeIn"
    duration: float = Field(default=0.6, ge=0.1, le=3)
    delay: float = Field(default=0, ge=0, le=2)


class GalleryAnimation(SectionModel):
    enabled: bool = False
    type: Literal["fadeIn", "slideUp", "scaleIn", "none"] = "fadeIn"
    duration: float = Field(default=0.6, ge=0.1, le=3)
    delay: float = Field(default=0, ge=0, le=2)


SocialPlatform = Literal["facebook", "twitter", "linkedin", "copy", "share"]


class SocialSharing(SectionModel):
    enabled: bool = True
    platforms: List[SocialPlatform] = Field(
        default_factory=lambda: ["facebook", "twitter", "linkedin", "copy"]
    )
    position: Literal["bottom-right", "bottom-left", "top-right", "top-left"] = "bottom-right"
    style: Literal["glass", "solid", "outline"] = "glass"

    @field_validator("platforms")
    @classmethod
    def dedupe_platforms(cls, v: List[str]) -> List[str]:
        # platforms behave as a set; keep first-seen order for rendering
        return list(dict.fromkeys(v))


# -------------------------------------------------
# Hero
# -------------------------------------------------

class HeroSection(SectionModel):
    type: Literal["hero"] = "hero"
    background_image: str = Field(min_length=1)
    title: str = Field(min_length=1, max_length=200)
    subtitle: Optional[str] = None
    author: Optional[str] = None
    publish_date: Optional[str] = None
    read_time: Optional[str] = None
    overlay_opacity: float = Field(default=0.3, ge=0, le=1)
    height: ResponsiveValue = Field(
        default_factory=lambda: ResponsiveValue(mobile="70vh", tablet="80vh", desktop="90vh")
    )
    title_size: ResponsiveValue = Field(
        default_factory=lambda: ResponsiveValue(
            mobile="text-3xl", tablet="text-5xl", desktop="text-6xl"
        )
    )
    parallax_enabled: bool = True
    parallax_speed: float = Field(default=0.5, ge=0, le=2)
    background_position: Literal["center", "top", "bottom", "left", "right"] = "center"
    background_size: Literal["cover", "contain", "auto"] = "cover"
    animation: HeroAnimation = Field(default_factory=HeroAnimation)
    social_sharing: SocialSharing = Field(default_factory=SocialSharing)


# -------------------------------------------------
# Text
# -------------------------------------------------

class DropCap(SectionModel):
    enabled: bool = False
    size: Literal["text-4xl", "text-5xl", "text-6xl"] = "text-4xl"
    color: str = "text-gray-900"
    font_weight: Literal["normal", "medium", "semibold", "bold"] = "semibold"
    float: bool = True


class TextSection(SectionModel):
    type: Literal["text"] = "text"
    content: str = Field(min_length=1)
    alignment: Literal["left", "center", "right", "justify"] = "left"
    font_size: Literal["sm", "base", "lg", "xl"] = "base"
    font_family: Literal["inter", "serif", "sans", "mono"] = "inter"
    line_height: Literal["tight", "snug", "normal", "relaxed", "loose"] = "relaxed"
    drop_cap: DropCap = Field(default_factory=DropCap)
    animation: TextAnimation = Field(default_factory=TextAnimation)


# -------------------------------------------------
# Image
# -------------------------------------------------

class ImageSection(SectionModel):
    type: Literal["image"] = "image"
    image_url: str = Field(min_length=1)
    alt_text: Optional[str] = None
    caption: Optional[str] = None
    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    alignment: Literal["left", "center", "right"] = "center"
    rounded: bool = True
    shadow: bool = True


# -------------------------------------------------
# Gallery
# -------------------------------------------------

class GalleryImage(SectionModel):
    url: str = Field(min_length=1)
    alt_text: Optional[str] = None
    caption: Optional[str] = None
    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)


Spacing = Literal["sm", "md", "lg"]


class GalleryBreakpoint(SectionModel):
    columns: int = Field(ge=1, le=6)
    spacing: Spacing = "md"


class GalleryResponsive(SectionModel):
    mobile: GalleryBreakpoint = Field(
        default_factory=lambda: GalleryBreakpoint(columns=1, spacing="sm")
    )
    desktop: GalleryBreakpoint = Field(
        default_factory=lambda: GalleryBreakpoint(columns=3, spacing="md")
    )


class HoverEffects(SectionModel):
    enabled: bool = True
    zoom: bool = True
    overlay: bool = False
    show_caption: bool = True


class GallerySection(SectionModel):
    type: Literal["gallery"] = "gallery"
    images: List[GalleryImage] = Field(min_length=1)
    layout: Literal["grid", "masonry", "carousel", "postcard", "complex"] = "grid"
    columns: int = Field(default=3, ge=1, le=6)
    spacing: Spacing = "md"
    responsive: GalleryResponsive = Field(default_factory=GalleryResponsive)
    hover_effects: HoverEffects = Field(default_factory=HoverEffects)
    animation: GalleryAnimation = Field(default_factory=GalleryAnimation)


# -------------------------------------------------
# Popular posts
# -------------------------------------------------

class SidePost(SectionModel):
    title: str = ""
    excerpt: str = ""
    image_url: str = ""
    read_time: str = ""
    publish_date: str = ""


class FeaturedPost(SidePost):
    category: str = ""


MAX_SIDE_POSTS = 3


class PopularPostsSection(SectionModel):
    type: Literal["popular-posts"] = "popular-posts"
    title: str = "Popular Posts"
    description: Optional[str] = None
    featured_post: Optional[FeaturedPost] = None
    side_posts: List[SidePost] = Field(default_factory=list, max_length=MAX_SIDE_POSTS)


# -------------------------------------------------
# Breadcrumb
# -------------------------------------------------

class BreadcrumbItem(SectionModel):
    label: str = Field(min_length=1)
    href: Optional[str] = None


class BreadcrumbStyle(SectionModel):
    separator: Literal[">", "→", "|", "/"] = ">"
    text_size: Literal["sm", "base", "lg"] = "sm"
    show_home_icon: bool = False
    color: Literal["gray", "blue", "black"] = "gray"


class BreadcrumbSection(SectionModel):
    type: Literal["breadcrumb"] = "breadcrumb"
    enabled: bool = True
    items: List[BreadcrumbItem] = Field(min_length=1)
    style: BreadcrumbStyle = Field(default_factory=BreadcrumbStyle)


# -------------------------------------------------
# Union
# -------------------------------------------------

ContentSection = Annotated[
    Union[
        HeroSection,
        TextSection,
        ImageSection,
        GallerySection,
        PopularPostsSection,
        BreadcrumbSection,
    ],
    Field(discriminator="type"),
]

SECTION_MODELS = {
    "hero": HeroSection,
    "text": TextSection,
    "image": ImageSection,
    "gallery": GallerySection,
    "popular-posts": PopularPostsSection,
    "breadcrumb": BreadcrumbSection,
}
