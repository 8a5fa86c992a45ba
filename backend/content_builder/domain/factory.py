from typing import Optional

from content_builder.schemas.sections import (
    BreadcrumbItem,
    BreadcrumbSection,
    GalleryImage,
    GallerySection,
    HeroSection,
    ImageSection,
    PopularPostsSection,
    TextSection,
)
from .exceptions import UnknownSectionType


DEFAULT_PLACEHOLDER_IMAGE = "/static/placeholders/image.svg"
DEFAULT_TEXT_CONTENT = "Enter your text content here..."

# Palette offered by the section builder, in display order
SECTION_TYPES = (
    {
        "type": "hero",
        "label": "Hero Section",
        "description": "Full-screen hero with background image and overlay",
    },
    {
        "type": "breadcrumb",
        "label": "Breadcrumb",
        "description": "Navigation breadcrumb trail",
    },
    {
        "type": "text",
        "label": "Text Block",
        "description": "Rich text content with formatting options",
    },
    {
        "type": "image",
        "label": "Single Image",
        "description": "Single image with caption and styling",
    },
    {
        "type": "gallery",
        "label": "Image Gallery",
        "description": "Multiple images in grid or masonry layout",
    },
    {
        "type": "popular-posts",
        "label": "Popular Posts",
        "description": "Featured and side posts section",
    },
)


def section_label(section_type: str) -> str:
    for entry in SECTION_TYPES:
        if entry["type"] == section_type:
            return entry["label"]
    raise UnknownSectionType(section_type)


def create_section(section_type: str, placeholder_image: Optional[str] = None):
    """
    Build a new, schema-valid section of the given type.

    Required fields that cannot be empty are seeded with placeholder content
    so the new section validates before the editor has touched it.
    """
    image = placeholder_image or DEFAULT_PLACEHOLDER_IMAGE

    if section_type == "hero":
        return HeroSection(background_image=image, title="Untitled")

    if section_type == "text":
        return TextSection(content=DEFAULT_TEXT_CONTENT)

    if section_type == "image":
        return ImageSection(image_url=image, alt_text="", caption="")

    if section_type == "gallery":
        return GallerySection(images=[GalleryImage(url=image, alt_text="", caption="")])

    if section_type == "popular-posts":
        return PopularPostsSection(title="Popular Posts", description="")

    if section_type == "breadcrumb":
        return BreadcrumbSection(
            items=[
                BreadcrumbItem(label="Home", href="/"),
                BreadcrumbItem(label="Destinations", href="#destinations"),
            ]
        )

    raise UnknownSectionType(section_type)
