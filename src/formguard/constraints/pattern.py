"""
Pattern-based string constraints.
"""

import re
from typing import Any

from formguard.domain.constraint import Constraint
from formguard.domain.exceptions import ConstraintDefinitionError, UnexpectedTypeError
from formguard.domain.interfaces import (
    ConstraintValidatorInterface,
    ExecutionContextInterface,
)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+\Z")
_URL_RE = re.compile(
    r"^(?P<scheme>[a-z][a-z0-9+.-]*)://"
    r"(?:[^\s:@/]+(?::[^\s@/]*)?@)?"  # user:pass@
    r"(?:[a-z0-9-]+(?:\.[a-z0-9-]+)*|\[[0-9a-f:.]+\])"  # host
    r"(?::\d{1,5})?"  # port
    r"(?:[/?#]\S*)?\Z",
    re.IGNORECASE,
)


def _string_value(value: Any) -> str | None:
    """Return the string to check, or None when there is nothing to check."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise UnexpectedTypeError(value, "str")
    return value


class Regex(Constraint):
    """Value must (or, with ``match=False``, must not) match ``pattern``."""

    message = "This value is not valid"

    def __init__(self, pattern: str | re.Pattern[str], match: bool = True, **options: Any):
        super().__init__(**options)
        try:
            self.pattern = re.compile(pattern)
        except (re.error, TypeError) as e:
            raise ConstraintDefinitionError(
                f"The option pattern of constraint Regex is invalid: {e}"
            ) from e
        self.match = match


class RegexValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, Regex):
            raise UnexpectedTypeError(constraint, "Regex")
        string = _string_value(value)
        if string is None:
            return
        found = constraint.pattern.search(string) is not None
        if found != constraint.match:
            context.add_violation(
                constraint.message, {"{{ value }}": value}, invalid_value=value
            )


class Email(Constraint):
    message = "This value is not a valid email address"


class EmailValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        string = _string_value(value)
        if string is None:
            return
        if not _EMAIL_RE.match(string):
            context.add_violation(
                constraint.message, {"{{ value }}": value}, invalid_value=value
            )


class Url(Constraint):
    message = "This value is not a valid URL"

    def __init__(self, protocols: tuple[str, ...] = ("http", "https"), **options: Any):
        super().__init__(**options)
        if isinstance(protocols, str) or not protocols:
            raise ConstraintDefinitionError(
                "The option protocols of constraint Url must be a non-empty tuple"
            )
        self.protocols = tuple(p.lower() for p in protocols)


class UrlValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, Url):
            raise UnexpectedTypeError(constraint, "Url")
        string = _string_value(value)
        if string is None:
            return
        match = _URL_RE.match(string)
        if match is None or match.group("scheme").lower() not in constraint.protocols:
            context.add_violation(
                constraint.message, {"{{ value }}": value}, invalid_value=value
            )
