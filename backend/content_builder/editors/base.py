"""
Structural updates shared by every section editor.

Editors never mutate a section: they merge the requested changes into a
copy of its wire representation and validate the result into a new
instance. A failed validation raises SectionValidationError and the
caller keeps the section it already had.
"""
from collections.abc import Mapping
from typing import Any, Dict, List

from pydantic import BaseModel

from content_builder.domain import store
from content_builder.domain.exceptions import FieldError, SectionValidationError
from content_builder.domain.validation import section_type_of, validate_section


# Sub-objects merged field by field instead of being replaced wholesale
MERGEABLE_FIELDS = frozenset(
    {
        "style",
        "animation",
        "dropCap",
        "socialSharing",
        "responsive",
        "hoverEffects",
        "height",
        "titleSize",
        "featuredPost",
    }
)


def wire_key(key: str) -> str:
    """snake_case -> camelCase; camelCase keys pass through."""
    if "_" not in key:
        return key
    head, *rest = key.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_wire(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, Mapping):
        return {wire_key(str(k)): to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def deep_merge(current: Mapping, updates: Mapping) -> Dict[str, Any]:
    merged = dict(current)
    for key, value in updates.items():
        existing = merged.get(key)
        if isinstance(value, Mapping) and isinstance(existing, Mapping):
            merged[key] = deep_merge(existing, value)
        else:
            merged[key] = value
    return merged


def require_type(section, section_type: str) -> None:
    section_type_of(section, expected_type=section_type)


def update_section(section, updates: Mapping):
    """
    Apply a partial update to a section.

    Top-level fields are replaced; the known nested sub-objects are merged
    recursively, so updating ``animation.duration`` keeps the rest of
    ``animation`` intact.
    """
    current = section.model_dump(by_alias=True)
    changes = to_wire(updates)

    if "type" in changes and changes["type"] != current["type"]:
        raise SectionValidationError(
            [FieldError(path="type", message="Section type cannot be changed")]
        )

    merged = dict(current)
    for key, value in changes.items():
        existing = current.get(key)
        if key in MERGEABLE_FIELDS and isinstance(value, Mapping) and isinstance(existing, Mapping):
            merged[key] = deep_merge(existing, value)
        else:
            merged[key] = value

    return validate_section(merged, expected_type=current["type"])


def update_nested(section, field: str, updates: Mapping):
    return update_section(section, {field: dict(updates)})


def update_animation(section, updates: Mapping):
    return update_nested(section, "animation", updates)


# -------------------------------------------------
# List-valued fields
# -------------------------------------------------

def list_items(section, field: str) -> List[Dict[str, Any]]:
    return list(section.model_dump(by_alias=True)[field])


def add_item(section, field: str, item: Any):
    items = store.append(list_items(section, field), to_wire(item))
    return update_section(section, {field: items})


def update_item(section, field: str, index: int, updates: Mapping):
    items = list_items(section, field)
    store.check_index(items, index)
    items = store.replace_at(items, index, deep_merge(items[index], to_wire(updates)))
    return update_section(section, {field: items})


def remove_item(section, field: str, index: int, minimum: int = 0):
    """
    Remove one entry from a list field.

    Lists already at their minimum length are returned unchanged; the
    remove control is disabled in that state rather than reported as an
    error.
    """
    items = list_items(section, field)
    store.check_index(items, index)

    if len(items) <= minimum:
        return section

    return update_section(section, {field: store.remove_at(items, index)})


def move_item(section, field: str, from_index: int, to_index: int):
    items = store.move_to(list_items(section, field), from_index, to_index)
    return update_section(section, {field: items})


def asset_url(asset) -> str:
    """Accept a URL string, an asset dict or a MediaAssetSchema."""
    if asset is None:
        return ""
    if isinstance(asset, str):
        return asset
    if isinstance(asset, Mapping):
        return asset.get("url", "")
    return asset.url


def asset_filename(asset):
    if isinstance(asset, Mapping):
        return asset.get("filename")
    return getattr(asset, "filename", None)
