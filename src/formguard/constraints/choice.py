"""
Choice constraint: the value must be one of a fixed set.
"""

from collections.abc import Iterable
from typing import Any

from formguard.domain.constraint import Constraint
from formguard.domain.exceptions import ConstraintDefinitionError, UnexpectedTypeError
from formguard.domain.interfaces import (
    ConstraintValidatorInterface,
    ExecutionContextInterface,
)


class Choice(Constraint):
    """
    Value must be in ``choices``.

    With ``multiple=True`` the value is a collection whose every element must
    be a valid choice; ``min`` and ``max`` bound the number of selections.
    """

    message = "The value you selected is not a valid choice"
    multiple_message = "One or more of the given values is invalid"
    min_message = "You must select at least {{ limit }} choices"
    max_message = "You must select at most {{ limit }} choices"

    def __init__(
        self,
        choices: Iterable[Any],
        multiple: bool = False,
        min: int | None = None,
        max: int | None = None,
        **options: Any,
    ):
        super().__init__(**options)
        if isinstance(choices, str):
            raise ConstraintDefinitionError(
                "The option choices of constraint Choice must be a collection"
            )
        self.choices = tuple(choices)
        if not self.choices:
            raise ConstraintDefinitionError(
                "The option choices of constraint Choice must not be empty"
            )
        if (min is not None or max is not None) and not multiple:
            raise ConstraintDefinitionError(
                "The options min and max of constraint Choice require multiple=True"
            )
        self.multiple = multiple
        self.min = min
        self.max = max


class ChoiceValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, Choice):
            raise UnexpectedTypeError(constraint, "Choice")
        if value is None:
            return

        if not constraint.multiple:
            if value not in constraint.choices:
                context.add_violation(
                    constraint.message, {"{{ value }}": value}, invalid_value=value
                )
            return

        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise UnexpectedTypeError(value, "iterable")
        selected = list(value)
        for item in selected:
            if item not in constraint.choices:
                context.add_violation(
                    constraint.multiple_message,
                    {"{{ value }}": item},
                    invalid_value=item,
                )
                return
        if constraint.min is not None and len(selected) < constraint.min:
            context.add_violation(
                constraint.min_message, {"{{ limit }}": constraint.min}, invalid_value=value
            )
        elif constraint.max is not None and len(selected) > constraint.max:
            context.add_violation(
                constraint.max_message, {"{{ limit }}": constraint.max}, invalid_value=value
            )
