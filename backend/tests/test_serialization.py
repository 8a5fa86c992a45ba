import json

import pytest

from content_builder.domain.exceptions import SectionValidationError
from content_builder.domain.factory import create_section
from content_builder.domain.validation import validate_sections
from content_builder.normalizers.section import (
    deserialize_sections,
    load_sections,
    normalize_section,
    serialize_sections,
)

ALL_TYPES = ["hero", "text", "image", "gallery", "popular-posts", "breadcrumb"]


def test_factory_sections_round_trip():
    sections = [create_section(t) for t in ALL_TYPES]

    assert load_sections(serialize_sections(sections)) == sections


def test_edited_sections_round_trip(gallery_payload):
    sections = validate_sections(
        [
            {
                "type": "hero",
                "backgroundImage": "asset-hero",
                "title": "Sunrise over Lisbon",
                "subtitle": "Miradouros worth the climb",
                "author": "Ana",
                "readTime": "6 min read",
                "overlayOpacity": 0.45,
                "socialSharing": {"platforms": ["share"], "style": "outline"},
            },
            {
                "type": "popular-posts",
                "featuredPost": {"title": "Porto", "category": "City breaks"},
                "sidePosts": [{"title": "Douro"}],
            },
            gallery_payload,
        ]
    )

    assert load_sections(serialize_sections(sections)) == sections


def test_serialized_form_uses_wire_names():
    data = json.loads(serialize_sections([create_section("hero")]))

    assert data[0]["type"] == "hero"
    assert "backgroundImage" in data[0]
    assert "subtitle" not in data[0]
    assert data[0]["socialSharing"]["position"] == "bottom-right"


def test_normalize_section_keeps_defaults():
    data = normalize_section(create_section("text"))

    assert data["dropCap"] == {
        "enabled": False,
        "size": "text-4xl",
        "color": "text-gray-900",
        "fontWeight": "semibold",
        "float": True,
    }


def test_deserialize_rejects_non_lists():
    with pytest.raises(SectionValidationError):
        deserialize_sections('{"type": "hero"}')
    with pytest.raises(SectionValidationError):
        deserialize_sections("not json")
