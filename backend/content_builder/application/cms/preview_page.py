from typing import Any, Dict, Optional
from flask import current_app
from content_builder.normalizers.section import normalize_sections
from content_builder.rendering import render_html, render_sections
from .lookup import load_page_sections


def preview_page(*, page_id: str, media: Optional[Any] = None) -> Dict[str, Any]:
    """
    Render the page's composition for the live preview.

    Media references resolve against the app's media catalog unless an
    explicit catalog or asset list is supplied.
    """
    page, sections = load_page_sections(page_id)

    if media is None:
        media = current_app.extensions.get("media_catalog")

    tree = render_sections(sections, media)

    return {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "seo": page.seo or {},
        "sections": normalize_sections(sections),
        "tree": tree,
        "html": str(render_html(tree)),
    }
