import re
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ValidationError

from content_builder.schemas.sections import SECTION_MODELS
from .exceptions import FieldError, SectionValidationError, UnknownSectionType


# Labels used when a field's camelCase name does not read well on its own
FIELD_LABELS = {
    "backgroundImage": "Background image",
    "imageUrl": "Image",
    "url": "Image URL",
    "content": "Content",
    "label": "Label",
    "title": "Title",
}

# Noun used in "At least one ... is required" / "At most N ... allowed"
LIST_NOUNS = {
    "images": ("image", "images"),
    "items": ("breadcrumb item", "breadcrumb items"),
    "sidePosts": ("side post", "side posts"),
    "platforms": ("platform", "platforms"),
}

# Inclusive numeric ranges, reported as a single "between" message
FIELD_RANGES = {
    "overlayOpacity": (0, 1),
    "parallaxSpeed": (0, 2),
    "duration": (0.1, 3),
    "delay": (0, 2),
    "columns": (1, 6),
}

NESTED_LABELS = {
    "animation",
    "dropCap",
    "socialSharing",
    "style",
    "hoverEffects",
    "height",
    "titleSize",
    "featuredPost",
}


def _humanize(name: str) -> str:
    words = re.sub(r"(?<!^)(?=[A-Z])", " ", name).lower()
    return words[:1].upper() + words[1:]


def _label(loc) -> str:
    names = [part for part in loc if isinstance(part, str)]
    if not names:
        return "Value"

    leaf = names[-1]
    label = FIELD_LABELS.get(leaf) or _humanize(leaf)

    if len(names) > 1 and names[-2] in NESTED_LABELS:
        label = f"{_humanize(names[-2])} {label.lower()}"

    return label


def _format_bound(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _message(error: dict) -> str:
    loc = error.get("loc", ())
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}
    label = _label(loc)
    leaf = next((p for p in reversed(loc) if isinstance(p, str)), "")

    if kind == "missing":
        return f"{label} is required"

    if kind == "string_too_short" and ctx.get("min_length") == 1:
        return f"{label} is required"

    if kind == "string_too_long":
        return f"{label} must be at most {ctx.get('max_length')} characters"

    if kind == "too_short":
        singular, plural = LIST_NOUNS.get(leaf, ("item", "items"))
        minimum = ctx.get("min_length", 1)
        if minimum == 1:
            return f"At least one {singular} is required"
        return f"At least {minimum} {plural} are required"

    if kind == "too_long":
        _, plural = LIST_NOUNS.get(leaf, ("item", "items"))
        return f"At most {ctx.get('max_length')} {plural} are allowed"

    if kind in ("greater_than_equal", "less_than_equal") and leaf in FIELD_RANGES:
        low, high = FIELD_RANGES[leaf]
        return f"{label} must be between {_format_bound(low)} and {_format_bound(high)}"

    if kind == "greater_than" and ctx.get("gt") == 0:
        return f"{label} must be a positive number"

    if kind == "literal_error":
        return f"{label} must be one of {ctx.get('expected')}"

    return f"{label}: {error.get('msg', 'is invalid')}"


def field_errors(exc: ValidationError) -> List[FieldError]:
    """Convert pydantic errors to field-path/message pairs."""
    return [
        FieldError(
            path=".".join(str(part) for part in err.get("loc", ())),
            message=_message(err),
        )
        for err in exc.errors()
    ]


def _as_mapping(data: Any) -> Mapping:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    if isinstance(data, Mapping):
        return data
    raise SectionValidationError(
        [FieldError(path="", message="Section must be an object")]
    )


def section_type_of(data: Any, expected_type: Optional[str] = None) -> str:
    """
    Resolve the variant tag of a payload.

    The payload's own ``type`` wins; ``expected_type`` is only used to fill a
    missing tag and to reject a payload of another variant.
    """
    # tags from decoded JSON may be lists or objects, which are unhashable
    if expected_type is not None and (
        not isinstance(expected_type, str) or expected_type not in SECTION_MODELS
    ):
        raise UnknownSectionType(expected_type)

    tag = _as_mapping(data).get("type")

    if tag is None:
        if expected_type is None:
            raise UnknownSectionType(None)
        return expected_type

    if not isinstance(tag, str) or tag not in SECTION_MODELS:
        raise UnknownSectionType(tag)

    if expected_type is not None and tag != expected_type:
        raise SectionValidationError(
            [
                FieldError(
                    path="type",
                    message=f"Expected a {expected_type} section, got {tag}",
                )
            ]
        )

    return tag


def validate_section(data: Any, expected_type: Optional[str] = None):
    """
    Validate an untyped section payload.

    Returns the normalized section with every default filled in, or raises
    SectionValidationError listing each violated field. A missing or
    unrecognized ``type`` raises UnknownSectionType.
    """
    tag = section_type_of(data, expected_type)
    payload = dict(_as_mapping(data))
    payload["type"] = tag

    model = SECTION_MODELS[tag]
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise SectionValidationError(field_errors(exc)) from exc


def validate_sections(items: Iterable[Any]) -> list:
    """
    Validate a whole page composition.

    Field paths are prefixed with the section's index so errors can be
    reported against the right entry.
    """
    if isinstance(items, (str, bytes, Mapping)):
        raise SectionValidationError(
            [FieldError(path="", message="Sections must be a list")]
        )

    sections = []
    errors: List[FieldError] = []

    for index, item in enumerate(items):
        try:
            sections.append(validate_section(item))
        except SectionValidationError as exc:
            errors.extend(exc.prefixed(str(index)).errors)

    if errors:
        raise SectionValidationError(errors)

    return sections
