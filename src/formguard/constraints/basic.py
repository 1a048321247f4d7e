"""
Presence, boolean and type constraints.
"""

from typing import Any

from formguard.domain.constraint import Constraint
from formguard.domain.exceptions import ConstraintDefinitionError, UnexpectedTypeError
from formguard.domain.interfaces import (
    ConstraintValidatorInterface,
    ExecutionContextInterface,
)


def _is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


class NotNull(Constraint):
    message = "This value should not be null"


class NotNullValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if value is None:
            context.add_violation(constraint.message, invalid_value=value)


class NotBlank(Constraint):
    message = "This value should not be blank"


class NotBlankValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if _is_blank(value):
            context.add_violation(constraint.message, invalid_value=value)


class Blank(Constraint):
    message = "This value should be blank"


class BlankValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if value is not None and value != "":
            context.add_violation(
                constraint.message, {"{{ value }}": value}, invalid_value=value
            )


class IsTrue(Constraint):
    message = "This value should be true"


class IsTrueValidator(ConstraintValidatorInterface):
    """None passes; combine with NotNull to require a value."""

    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if value is None:
            return
        if value is not True and value != 1 and value != "1":
            context.add_violation(constraint.message, invalid_value=value)


class IsFalse(Constraint):
    message = "This value should be false"


class IsFalseValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if value is None:
            return
        if value is not False and value != 0 and value != "0":
            context.add_violation(constraint.message, invalid_value=value)


class Type(Constraint):
    """Value must be an instance of ``type_`` (a class or tuple of classes)."""

    message = "This value should be of type {{ type }}"

    def __init__(self, type_: type | tuple[type, ...], **options: Any):
        super().__init__(**options)
        types = type_ if isinstance(type_, tuple) else (type_,)
        if not types or not all(isinstance(t, type) for t in types):
            raise ConstraintDefinitionError(
                "The option type_ of constraint Type must be a class or a "
                "tuple of classes"
            )
        self.type_ = type_


class TypeValidator(ConstraintValidatorInterface):
    def validate(
        self, value: Any, constraint: Constraint, context: ExecutionContextInterface
    ) -> None:
        if not isinstance(constraint, Type):
            raise UnexpectedTypeError(constraint, "Type")
        if value is None or isinstance(value, constraint.type_):
            return
        if isinstance(constraint.type_, tuple):
            type_name = " or ".join(t.__name__ for t in constraint.type_)
        else:
            type_name = constraint.type_.__name__
        context.add_violation(
            constraint.message, {"{{ type }}": type_name}, invalid_value=value
        )
