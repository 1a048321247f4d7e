"""
File constraint for uploaded files.
"""

from typing import Any

from formguard.domain.constraint import Constraint
from formguard.domain.exceptions import ConstraintDefinitionError, UnexpectedTypeError
from formguard.domain.interfaces import (
    ConstraintValidatorInterface,
    ExecutionContextInterface,
)
from formguard.domain.models import UploadedFile


class File(Constraint):
    """Value must be an uploaded file within size and MIME type limits."""

    message = "This value should be an uploaded file"
    max_size_message = (
        "The file is too large ({{ size }} bytes). "
        "Allowed maximum size is {{ limit }} bytes"
    )
    mime_types_message = (
        'The mime type of the file is invalid ("{{ type }}"). '
        "Allowed mime types are {{ types }}"
    )

    def __init__(
        self,
        max_size: int | None = None,
        mime_types: tuple[str, ...] = (),
        **options: Any,
    ):
        super().__init__(**options)
        if max_size is not None and (
            isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 0
        ):
            raise ConstraintDefinitionError(
                "The option max_size of constraint File must be a non-negative integer"
            )
        self.max_size = max_size
        self.mime_types = tuple(mime_types)


class FileValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, File):
            raise UnexpectedTypeError(constraint, "File")
        if value is None or value == "":
            return
        if not isinstance(value, UploadedFile):
            context.add_violation(constraint.message, invalid_value=value)
            return
        if constraint.max_size is not None and value.size > constraint.max_size:
            context.add_violation(
                constraint.max_size_message,
                {"{{ size }}": value.size, "{{ limit }}": constraint.max_size},
                invalid_value=value,
            )
        if constraint.mime_types and not _mime_allowed(
            value.content_type, constraint.mime_types
        ):
            context.add_violation(
                constraint.mime_types_message,
                {
                    "{{ type }}": value.content_type,
                    "{{ types }}": ", ".join(constraint.mime_types),
                },
                invalid_value=value,
            )


def _mime_allowed(content_type: str, allowed: tuple[str, ...]) -> bool:
    for pattern in allowed:
        if pattern.endswith("/*"):
            if content_type.startswith(pattern[:-1]):
                return True
        elif content_type == pattern:
            return True
    return False
