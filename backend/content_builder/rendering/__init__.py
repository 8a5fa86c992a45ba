from .nodes import by_role, find_all, iter_nodes, render_html, text_content
from .sections import (
    GALLERY_PREVIEW_LIMIT,
    RENDERERS,
    render_section,
    render_sections,
)
