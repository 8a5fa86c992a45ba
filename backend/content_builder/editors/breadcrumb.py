from .base import (
    add_item,
    move_item,
    remove_item,
    require_type,
    update_item,
    update_nested,
    update_section,
)

MIN_BREADCRUMB_ITEMS = 1


def update_breadcrumb(section, updates):
    require_type(section, "breadcrumb")
    return update_section(section, updates)


def set_enabled(section, enabled: bool):
    return update_breadcrumb(section, {"enabled": enabled})


def add_breadcrumb_item(section, label: str = "New Item", href: str = ""):
    require_type(section, "breadcrumb")
    return add_item(section, "items", {"label": label, "href": href})


def update_breadcrumb_item(section, index: int, updates):
    require_type(section, "breadcrumb")
    return update_item(section, "items", index, updates)


def remove_breadcrumb_item(section, index: int):
    require_type(section, "breadcrumb")
    return remove_item(section, "items", index, minimum=MIN_BREADCRUMB_ITEMS)


def move_breadcrumb_item(section, from_index: int, to_index: int):
    require_type(section, "breadcrumb")
    return move_item(section, "items", from_index, to_index)


def update_breadcrumb_style(section, updates):
    require_type(section, "breadcrumb")
    return update_nested(section, "style", updates)
