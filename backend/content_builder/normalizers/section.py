import json
from typing import Any, Dict, Iterable, List, Union

from content_builder.domain.exceptions import FieldError, SectionValidationError
from content_builder.domain.validation import validate_sections


def normalize_section(section) -> Dict[str, Any]:
    """Wire/JSON-column representation: camelCase keys, unset optionals omitted."""
    return section.model_dump(by_alias=True, exclude_none=True, mode="json")


def normalize_sections(sections: Iterable) -> List[Dict[str, Any]]:
    return [normalize_section(s) for s in sections]


def serialize_sections(sections: Iterable) -> str:
    return json.dumps(normalize_sections(sections), ensure_ascii=False)


def deserialize_sections(payload: Union[str, bytes, list]) -> List[Dict[str, Any]]:
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise SectionValidationError(
                [FieldError(path="", message=f"Sections are not valid JSON: {exc}")]
            ) from exc

    if not isinstance(payload, list):
        raise SectionValidationError(
            [FieldError(path="", message="Sections must be a list")]
        )

    return payload


def load_sections(payload) -> list:
    return validate_sections(deserialize_sections(payload))
