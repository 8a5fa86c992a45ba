from typing import Any, Dict, Iterable, Optional
from flask import current_app
from sqlalchemy.exc import IntegrityError
from content_builder.domain.invariants.page import assert_page
from content_builder.extensions import db
from content_builder.models.page import Page
from content_builder.normalizers.section import normalize_sections
from content_builder.utils.slug import generate_unique_slug, is_valid_slug, slugify
from content_builder.utils.transaction import transactional


def create_page(
    *,
    title: str,
    slug: Optional[str] = None,
    sections: Optional[Iterable[Any]] = None,
    seo: Optional[Dict[str, Any]] = None,
) -> Page:
    """
    Create a new page with an optional initial composition.

    Edge cases handled:
    - Missing title
    - Missing slug (derived from the title, suffixed until unique)
    - Slug with spaces or punctuation (slugified, then checked)
    - Invalid section payloads (rejected before anything is written)
    - Duplicate slug
    """
    if not title:
        raise ValueError("Page title is required")

    if slug:
        slug = slugify(slug)
    else:
        slug = generate_unique_slug(title)

    if not is_valid_slug(slug):
        raise ValueError(f"Invalid slug: {slug!r}")

    page = Page()
    page.title = title
    page.slug = slug
    page.seo = seo or {}
    page.content_sections = list(sections or [])

    # normalizes defaults into the stored payload
    page.content_sections = normalize_sections(assert_page(page))

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()

            current_app.logger.info(
                "page.create id=%s slug=%s sections=%d",
                page.id,
                page.slug,
                len(page.content_sections),
            )

        return page

    except IntegrityError as exc:
        raise ValueError("A page with this slug already exists") from exc
