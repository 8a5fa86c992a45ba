from content_builder.domain.exceptions import FieldError, SectionValidationError
from .base import asset_url, require_type, update_animation, update_nested, update_section

DEVICES = ("mobile", "tablet", "desktop")


def _check_device(field: str, device: str) -> None:
    if device not in DEVICES:
        raise SectionValidationError(
            [FieldError(path=f"{field}.{device}", message=f"Unknown device: {device}")]
        )


def update_hero(section, updates):
    require_type(section, "hero")
    return update_section(section, updates)


def set_height(section, device: str, value: str):
    require_type(section, "hero")
    _check_device("height", device)
    return update_nested(section, "height", {device: value})


def set_title_size(section, device: str, value: str):
    require_type(section, "hero")
    _check_device("titleSize", device)
    return update_nested(section, "titleSize", {device: value})


def update_hero_animation(section, updates):
    require_type(section, "hero")
    return update_animation(section, updates)


def update_social_sharing(section, updates):
    require_type(section, "hero")
    return update_nested(section, "socialSharing", updates)


def toggle_platform(section, platform: str):
    """Add the platform if it is not shared yet, drop it otherwise."""
    require_type(section, "hero")
    platforms = list(section.social_sharing.platforms)

    if platform in platforms:
        platforms = [p for p in platforms if p != platform]
    else:
        platforms.append(platform)

    return update_social_sharing(section, {"platforms": platforms})


def select_background(section, asset):
    require_type(section, "hero")
    return update_section(section, {"backgroundImage": asset_url(asset)})
