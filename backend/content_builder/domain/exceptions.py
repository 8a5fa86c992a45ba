from dataclasses import dataclass
from typing import List, Sequence


class InvariantViolation(Exception):
    """Base class for every domain rule the content builder enforces."""


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str

    def to_dict(self):
        return {"path": self.path, "message": self.message}


class SectionValidationError(InvariantViolation):
    """
    A section payload does not match its variant's schema.

    Recoverable: the editing user gets the field errors back and the
    section list they were editing is left untouched.
    """

    def __init__(self, errors: Sequence[FieldError]):
        self.errors: List[FieldError] = list(errors)
        super().__init__(
            "; ".join(f"{e.path}: {e.message}" for e in self.errors)
            or "Invalid section"
        )

    @property
    def paths(self) -> List[str]:
        return [e.path for e in self.errors]

    def prefixed(self, prefix: str) -> "SectionValidationError":
        return SectionValidationError(
            [
                FieldError(f"{prefix}.{e.path}" if e.path else prefix, e.message)
                for e in self.errors
            ]
        )


class UnknownSectionType(InvariantViolation):
    def __init__(self, section_type):
        self.section_type = section_type
        super().__init__(f"Unknown section type: {section_type!r}")


class IndexOutOfRange(InvariantViolation, IndexError):
    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(
            f"Index {index} is out of range for a sequence of length {length}"
        )


class PageNotFound(InvariantViolation):
    def __init__(self, page_id):
        self.page_id = page_id
        super().__init__(f"Page not found: {page_id}")
