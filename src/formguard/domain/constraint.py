"""
Base class for declarative validation constraints.

A constraint only describes a rule. The logic lives in a constraint validator,
resolved through ``validated_by()``.
"""

from collections.abc import Iterable
from typing import Any

from formguard.domain.exceptions import ConstraintDefinitionError

DEFAULT_GROUP = "Default"
ANY_GROUP = "*"  # Matches every validation group


class Constraint:
    """
    Declarative validation rule.

    Subclasses declare their options as keyword arguments and a class-level
    ``message`` template. Placeholders use the ``{{ name }}`` syntax.
    """

    message = "This value is not valid"

    def __init__(
        self,
        *,
        message: str | None = None,
        groups: Iterable[str] | str | None = None,
    ):
        if message is not None:
            self.message = message
        if groups is None:
            self.groups: tuple[str, ...] = (DEFAULT_GROUP,)
        elif isinstance(groups, str):
            self.groups = (groups,)
        else:
            self.groups = tuple(groups)
        if not self.groups:
            raise ConstraintDefinitionError(
                f"{type(self).__name__} must belong to at least one group"
            )

    def add_implicit_group(self, group: str) -> None:
        """Add the owning class name to constraints of the default group."""
        if DEFAULT_GROUP in self.groups and group not in self.groups:
            self.groups = (*self.groups, group)

    def in_group(self, group: str) -> bool:
        return group in self.groups or ANY_GROUP in self.groups

    def validated_by(self) -> "str | type[Any]":
        """Name (or class) of the validator for this constraint."""
        return f"{type(self).__name__}Validator"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(groups={self.groups!r})"
