"""
Section builder use cases.

Each operation loads the page's stored composition, applies one pure store
or editor operation, and writes the whole list back. Saves are
last-write-wins: concurrent editors overwrite each other's composition.
"""
from typing import Any, Iterable, List, Mapping
from flask import current_app
from content_builder.domain import store
from content_builder.domain.factory import create_section
from content_builder.domain.validation import validate_sections
from content_builder.editors import update_section as apply_update
from content_builder.models.page import Page
from content_builder.normalizers.section import normalize_sections
from content_builder.utils.transaction import transactional
from .lookup import load_page_sections


def _persist(page: Page, sections: List[Any], action: str, **details) -> List[Any]:
    with transactional():
        page.content_sections = normalize_sections(sections)

        current_app.logger.info(
            "%s page=%s count=%d %s",
            action,
            page.id,
            len(sections),
            " ".join(f"{k}={v}" for k, v in details.items()),
        )

    return sections


def add_section(*, page_id: str, section_type: str) -> List[Any]:
    page, sections = load_page_sections(page_id)

    section = create_section(
        section_type,
        placeholder_image=current_app.config.get("PLACEHOLDER_IMAGE_URL"),
    )

    return _persist(
        page,
        store.append(sections, section),
        "section.create",
        type=section_type,
        index=len(sections),
    )


def update_section(*, page_id: str, index: int, updates: Mapping[str, Any]) -> List[Any]:
    page, sections = load_page_sections(page_id)
    store.check_index(sections, index)

    updated = apply_update(sections[index], updates)

    return _persist(
        page,
        store.replace_at(sections, index, updated),
        "section.update",
        index=index,
        fields=",".join(sorted(updates)),
    )


def remove_section(*, page_id: str, index: int) -> List[Any]:
    page, sections = load_page_sections(page_id)

    return _persist(
        page,
        store.remove_at(sections, index),
        "section.delete",
        index=index,
    )


def move_section(*, page_id: str, from_index: int, to_index: int) -> List[Any]:
    page, sections = load_page_sections(page_id)

    return _persist(
        page,
        store.move_to(sections, from_index, to_index),
        "section.reorder",
        source=from_index,
        destination=to_index,
    )


def save_sections(*, page_id: str, sections: Iterable[Any]) -> List[Any]:
    """Replace the whole composition, as the builder does on autosave."""
    page, _ = load_page_sections(page_id)

    return _persist(page, validate_sections(sections), "page.autosave")
