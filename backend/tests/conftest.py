"""
Pytest configuration and fixtures for content builder tests.
"""
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from content_builder import create_app
from content_builder.domain.factory import create_section
from content_builder.extensions import db


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def hero():
    return create_section("hero")


@pytest.fixture
def gallery_payload():
    """A gallery with more images than the preview shows."""
    return {
        "type": "gallery",
        "columns": 3,
        "images": [
            {"url": f"https://cdn.example.com/trip/{i}.jpg", "altText": f"Photo {i}"}
            for i in range(1, 10)
        ],
    }


@pytest.fixture
def media_assets():
    return [
        {
            "id": "asset-hero",
            "url": "https://cdn.example.com/uploads/lisbon.jpg",
            "type": "image",
            "sizeKB": 512,
            "filename": "lisbon.jpg",
        },
        {
            "id": "asset-video",
            "url": "https://cdn.example.com/uploads/tram.mp4",
            "type": "video",
            "sizeKB": 20480,
            "filename": "tram.mp4",
        },
    ]
