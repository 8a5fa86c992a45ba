from content_builder.domain.exceptions import InvariantViolation
from content_builder.domain.validation import validate_sections


def assert_page(page):
    """
    Validate a page's stored composition and return its sections.

    Stored lists are re-validated on every load so that a payload written
    by an older schema never reaches the editors half-formed.
    """
    if not page.title:
        raise InvariantViolation("Page title is required.")

    if not page.slug:
        raise InvariantViolation("Page slug is required.")

    return validate_sections(page.content_sections or [])
