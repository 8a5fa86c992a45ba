import re
from typing import Optional

from content_builder.models.page import Page

MAX_SLUG_LENGTH = 100

_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str) -> str:
    """
    Convert text to a URL-safe slug: lowercase, punctuation dropped,
    runs of whitespace, underscores and hyphens collapsed to one hyphen.
    """
    slug = (text or "").lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug, flags=re.ASCII)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def is_valid_slug(slug: str) -> bool:
    return bool(slug) and len(slug) <= MAX_SLUG_LENGTH and bool(_SLUG_RE.match(slug))


def slug_exists(slug: str, exclude_id: Optional[str] = None) -> bool:
    query = Page.query.filter(Page.slug == slug)
    if exclude_id is not None:
        query = query.filter(Page.id != exclude_id)
    return query.first() is not None


def generate_unique_slug(base: str, exclude_id: Optional[str] = None) -> str:
    """
    Slugify ``base`` and append -1, -2, ... until no other page uses it.
    """
    root = slugify(base)
    slug = root
    counter = 1

    while slug_exists(slug, exclude_id):
        slug = f"{root}-{counter}"
        counter += 1

    return slug
