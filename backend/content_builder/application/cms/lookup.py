from content_builder.domain.exceptions import PageNotFound
from content_builder.domain.invariants.page import assert_page
from content_builder.extensions import db
from content_builder.models.page import Page


def get_page(page_id: str) -> Page:
    page = db.session.get(Page, page_id)
    if page is None:
        raise PageNotFound(page_id)
    return page


def load_page_sections(page_id: str):
    """Return the page and its validated section list."""
    page = get_page(page_id)
    return page, assert_page(page)
