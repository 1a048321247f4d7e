"""
Numeric range and string length constraints.

None passes all of them; use NotNull or NotBlank to require a value.
"""

import math
from numbers import Real
from typing import Any

from formguard.domain.constraint import Constraint
from formguard.domain.exceptions import ConstraintDefinitionError, UnexpectedTypeError
from formguard.domain.interfaces import (
    ConstraintValidatorInterface,
    ExecutionContextInterface,
)


def _as_number(value: Any) -> float | None:
    """Finite float for numbers and numeric strings, None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


class _Limit(Constraint):
    def __init__(self, limit: Any, **options: Any):
        super().__init__(**options)
        self._check_limit(limit)
        self.limit = limit

    def _check_limit(self, limit: Any) -> None:
        if isinstance(limit, bool) or not isinstance(limit, Real):
            raise ConstraintDefinitionError(
                f"The option limit of constraint {type(self).__name__} must be "
                "a number"
            )


class _LengthLimit(_Limit):
    def _check_limit(self, limit: Any) -> None:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ConstraintDefinitionError(
                f"The option limit of constraint {type(self).__name__} must be "
                "a non-negative integer"
            )


class Min(_Limit):
    message = "This value should be {{ limit }} or more"
    invalid_message = "This value should be a valid number"


class Max(_Limit):
    message = "This value should be {{ limit }} or less"
    invalid_message = "This value should be a valid number"


class MinValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, Min):
            raise UnexpectedTypeError(constraint, "Min")
        if value is None or value == "":
            return
        number = _as_number(value)
        if number is None:
            context.add_violation(
                constraint.invalid_message, {"{{ value }}": value}, invalid_value=value
            )
        elif number < constraint.limit:
            context.add_violation(
                constraint.message,
                {"{{ value }}": value, "{{ limit }}": constraint.limit},
                invalid_value=value,
            )


class MaxValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, Max):
            raise UnexpectedTypeError(constraint, "Max")
        if value is None or value == "":
            return
        number = _as_number(value)
        if number is None:
            context.add_violation(
                constraint.invalid_message, {"{{ value }}": value}, invalid_value=value
            )
        elif number > constraint.limit:
            context.add_violation(
                constraint.message,
                {"{{ value }}": value, "{{ limit }}": constraint.limit},
                invalid_value=value,
            )


class MinLength(_LengthLimit):
    message = "This value is too short. It should have {{ limit }} characters or more"


class MaxLength(_LengthLimit):
    message = "This value is too long. It should have {{ limit }} characters or less"


class MinLengthValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, MinLength):
            raise UnexpectedTypeError(constraint, "MinLength")
        if value is None or value == "":
            return
        if not isinstance(value, str):
            raise UnexpectedTypeError(value, "str")
        if len(value) < constraint.limit:
            context.add_violation(
                constraint.message,
                {"{{ value }}": value, "{{ limit }}": constraint.limit},
                invalid_value=value,
            )


class MaxLengthValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, MaxLength):
            raise UnexpectedTypeError(constraint, "MaxLength")
        if value is None or value == "":
            return
        if not isinstance(value, str):
            raise UnexpectedTypeError(value, "str")
        if len(value) > constraint.limit:
            context.add_violation(
                constraint.message,
                {"{{ value }}": value, "{{ limit }}": constraint.limit},
                invalid_value=value,
            )
