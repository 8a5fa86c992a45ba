from .create_page import create_page
from .edit_sections import (
    add_section,
    move_section,
    remove_section,
    save_sections,
    update_section,
)
from .preview_page import preview_page
from .refresh_media import refresh_media_catalog
