"""
Domain models for formguard.

Violations, field errors and uploaded files are immutable records.
ConstraintViolationList is the one mutable collection: validators append to it
while walking an object graph.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def interpolate(template: str, parameters: Mapping[str, Any]) -> str:
    """Replace ``{{ name }}`` placeholders in a message template."""
    message = template
    for placeholder, value in parameters.items():
        message = message.replace(placeholder, str(value))
    return message


# =============================================================================
# VIOLATIONS
# =============================================================================


@dataclass(frozen=True)
class ConstraintViolation:
    """A failed validation rule against a single value."""

    message_template: str
    message_parameters: Mapping[str, Any] = field(default_factory=dict)
    root: Any = None  # The object validation started from
    property_path: str = ""  # Path from root to the invalid value
    invalid_value: Any = None

    @property
    def message(self) -> str:
        return interpolate(self.message_template, self.message_parameters)

    def __str__(self) -> str:
        root_name = self.root.__class__.__name__ if self.root is not None else ""
        if self.property_path:
            if self.property_path.startswith("["):
                location = f"{root_name}{self.property_path}"
            else:
                location = f"{root_name}.{self.property_path}"
        else:
            location = root_name
        return f"{location}:\n    {self.message}"


class ConstraintViolationList:
    """Ordered collection of constraint violations."""

    def __init__(self, violations: Iterable[ConstraintViolation] = ()) -> None:
        self._violations: list[ConstraintViolation] = list(violations)

    def add(self, violation: ConstraintViolation) -> None:
        self._violations.append(violation)

    def add_all(self, violations: Iterable[ConstraintViolation]) -> None:
        for violation in violations:
            self.add(violation)

    def __iter__(self) -> Iterator[ConstraintViolation]:
        return iter(self._violations)

    def __len__(self) -> int:
        return len(self._violations)

    def __getitem__(self, index: int) -> ConstraintViolation:
        return self._violations[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintViolationList):
            return NotImplemented
        return self._violations == other._violations

    def __str__(self) -> str:
        return "\n".join(str(violation) for violation in self._violations)

    def __repr__(self) -> str:
        return f"ConstraintViolationList({self._violations!r})"


# =============================================================================
# FIELD ERRORS
# =============================================================================


class ErrorType(Enum):
    """Origin of an error mapped onto a field tree."""

    FIELD = "field"  # Raised against the field objects themselves
    DATA = "data"  # Raised against the bound data object


@dataclass(frozen=True)
class FieldError:
    """Error attached to a field after binding."""

    message_template: str
    message_parameters: Mapping[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return interpolate(self.message_template, self.message_parameters)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# UPLOADS
# =============================================================================


@dataclass(frozen=True)
class UploadedFile:
    """File received as part of a multipart submission."""

    filename: str  # Client-side name
    content_type: str = "application/octet-stream"
    size: int = 0  # Bytes
    path: str | None = None  # Temporary location on disk, if stored
