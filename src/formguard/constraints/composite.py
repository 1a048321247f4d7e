"""
Constraints composing other validation: All and Valid.
"""

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from formguard.domain.constraint import Constraint
from formguard.domain.exceptions import ConstraintDefinitionError, UnexpectedTypeError
from formguard.domain.interfaces import (
    ConstraintValidatorInterface,
    ExecutionContextInterface,
)


class All(Constraint):
    """Apply ``constraints`` to every element of a collection."""

    def __init__(self, constraints: Constraint | Iterable[Constraint], **options: Any):
        super().__init__(**options)
        if isinstance(constraints, Constraint):
            constraints = (constraints,)
        self.constraints = tuple(constraints)
        for constraint in self.constraints:
            if not isinstance(constraint, Constraint):
                raise ConstraintDefinitionError(
                    f"The value {constraint!r} is not an instance of Constraint "
                    "in constraint All"
                )
            if isinstance(constraint, Valid):
                raise ConstraintDefinitionError(
                    "The constraint Valid cannot be nested inside constraint All"
                )

    def add_implicit_group(self, group: str) -> None:
        super().add_implicit_group(group)
        for constraint in self.constraints:
            constraint.add_implicit_group(group)

    def __copy__(self) -> "All":
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.constraints = tuple(copy.copy(c) for c in self.constraints)
        return clone


class AllValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, All):
            raise UnexpectedTypeError(constraint, "All")
        if value is None:
            return
        if isinstance(value, Mapping):
            items = value.items()
        elif isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            items = enumerate(value)
        else:
            raise UnexpectedTypeError(value, "iterable")

        for key, element in items:
            for nested in constraint.constraints:
                context.validate_nested(element, nested, f"[{key}]")


class Valid(Constraint):
    """
    Cascade validation into the value.

    Objects are validated against the constraints of their own class;
    mappings and sequences are traversed element by element. When ``class_``
    is given the value must be an instance of it.

    Valid applies in every validation group.
    """

    message = "This value should be instance of class {{ class }}"

    def __init__(self, class_: type | None = None, **options: Any):
        super().__init__(**options)
        if class_ is not None and not isinstance(class_, type):
            raise ConstraintDefinitionError(
                "The option class_ of constraint Valid must be a class"
            )
        self.class_ = class_

    def in_group(self, group: str) -> bool:
        return True


class ValidValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, Valid):
            raise UnexpectedTypeError(constraint, "Valid")
        if value is None:
            return
        if constraint.class_ is not None and not isinstance(value, constraint.class_):
            context.add_violation(
                constraint.message,
                {"{{ class }}": constraint.class_.__name__},
                invalid_value=value,
            )
            return
        context.cascade(value)
