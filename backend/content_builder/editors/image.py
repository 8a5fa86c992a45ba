from .base import asset_filename, asset_url, require_type, update_section


def update_image(section, updates):
    require_type(section, "image")
    return update_section(section, updates)


def select_media(section, asset):
    """
    Point the section at a media-library asset.

    The asset's filename becomes the alt text when none has been written.
    """
    require_type(section, "image")
    updates = {"imageUrl": asset_url(asset)}

    filename = asset_filename(asset)
    if filename and not section.alt_text:
        updates["altText"] = filename

    return update_section(section, updates)


def set_dimensions(section, width=None, height=None):
    require_type(section, "image")
    return update_section(section, {"width": width, "height": height})
