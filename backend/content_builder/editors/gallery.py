from content_builder.domain.exceptions import FieldError, SectionValidationError
from .base import (
    add_item,
    asset_filename,
    asset_url,
    move_item,
    remove_item,
    require_type,
    update_animation,
    update_item,
    update_nested,
    update_section,
)

MIN_GALLERY_IMAGES = 1


def update_gallery(section, updates):
    require_type(section, "gallery")
    return update_section(section, updates)


def add_gallery_image(section, url, alt_text: str = "", caption: str = ""):
    require_type(section, "gallery")
    return add_item(
        section,
        "images",
        {"url": url, "altText": alt_text, "caption": caption},
    )


def add_media_assets(section, assets):
    """Append every selected media-library asset, keeping selection order."""
    require_type(section, "gallery")
    for asset in assets:
        section = add_gallery_image(
            section, asset_url(asset), alt_text=asset_filename(asset) or ""
        )
    return section


def update_gallery_image(section, index: int, updates):
    require_type(section, "gallery")
    return update_item(section, "images", index, updates)


def remove_gallery_image(section, index: int):
    require_type(section, "gallery")
    return remove_item(section, "images", index, minimum=MIN_GALLERY_IMAGES)


def move_gallery_image(section, from_index: int, to_index: int):
    require_type(section, "gallery")
    return move_item(section, "images", from_index, to_index)


def update_responsive(section, device: str, updates):
    require_type(section, "gallery")
    if device not in ("mobile", "desktop"):
        raise SectionValidationError(
            [FieldError(path=f"responsive.{device}", message=f"Unknown device: {device}")]
        )
    return update_nested(section, "responsive", {device: dict(updates)})


def update_hover_effects(section, updates):
    require_type(section, "gallery")
    return update_nested(section, "hoverEffects", updates)


def update_gallery_animation(section, updates):
    require_type(section, "gallery")
    return update_animation(section, updates)
