from .base import require_type, update_animation, update_nested, update_section


def update_text(section, updates):
    require_type(section, "text")
    return update_section(section, updates)


def set_content(section, content: str):
    return update_text(section, {"content": content})


def update_drop_cap(section, updates):
    require_type(section, "text")
    return update_nested(section, "dropCap", updates)


def toggle_drop_cap(section):
    return update_drop_cap(section, {"enabled": not section.drop_cap.enabled})


def update_text_animation(section, updates):
    require_type(section, "text")
    return update_animation(section, updates)
