import pytest

from content_builder.application.cms import create_page
from content_builder.utils.slug import generate_unique_slug, is_valid_slug, slugify


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Lisbon Guide!!", "lisbon-guide"),
        ("  Porto_and   Douro  ", "porto-and-douro"),
        ("--Café Culture--", "caf-culture"),
        ("!!!", ""),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_is_valid_slug():
    assert is_valid_slug("lisbon-guide")
    assert is_valid_slug("a" * 100)

    assert not is_valid_slug("")
    assert not is_valid_slug("a" * 101)
    assert not is_valid_slug("Lisbon")
    assert not is_valid_slug("lisbon--guide")
    assert not is_valid_slug("-lisbon")


def test_generate_unique_slug_suffixes_collisions(app):
    assert generate_unique_slug("Lisbon Guide") == "lisbon-guide"

    create_page(title="Lisbon Guide")
    assert generate_unique_slug("Lisbon Guide") == "lisbon-guide-1"

    create_page(title="Lisbon Guide")
    assert generate_unique_slug("Lisbon Guide") == "lisbon-guide-2"


def test_generate_unique_slug_ignores_excluded_page(app):
    page = create_page(title="Lisbon Guide")

    assert generate_unique_slug("Lisbon Guide", exclude_id=page.id) == "lisbon-guide"
