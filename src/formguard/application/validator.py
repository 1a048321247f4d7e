"""
Validator: walks an object graph and collects constraint violations.

Stateless between calls. Each validate() call creates a GraphWalker that
tracks visited objects so that cyclic graphs terminate and every object is
validated at most once per group.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any

from formguard.domain.constraint import DEFAULT_GROUP, Constraint
from formguard.domain.interfaces import (
    ConstraintValidatorFactoryInterface,
    ExecutionContextInterface,
    MetadataFactoryInterface,
    ValidatorInterface,
)
from formguard.domain.metadata import ClassMetadata, MemberMetadata
from formguard.domain.models import (
    ConstraintViolation,
    ConstraintViolationList,
    UploadedFile,
)

logger = logging.getLogger(__name__)

# Values the walker never cascades into
_LEAF_TYPES = (
    str,
    bytes,
    int,
    float,
    complex,
    Decimal,
    date,
    datetime,
    time,
    timedelta,
    Enum,
    UploadedFile,
)


def normalize_groups(groups: Iterable[str] | str | None) -> list[str]:
    if groups is None:
        return [DEFAULT_GROUP]
    if isinstance(groups, str):
        return [groups]
    return list(groups) or [DEFAULT_GROUP]


def join_path(path: str, element: str) -> str:
    if element.startswith("["):
        return f"{path}{element}"
    return f"{path}.{element}" if path else element


class ExecutionContext(ExecutionContextInterface):
    """Handle given to a constraint validator for one value."""

    def __init__(self, walker: "GraphWalker", group: str, property_path: str):
        self._walker = walker
        self.group = group
        self.property_path = property_path

    @property
    def root(self) -> Any:
        return self._walker.root

    def add_violation(
        self,
        message_template: str,
        parameters: dict[str, Any] | None = None,
        invalid_value: Any = None,
    ) -> None:
        self._walker.violations.add(
            ConstraintViolation(
                message_template=message_template,
                message_parameters=dict(parameters or {}),
                root=self._walker.root,
                property_path=self.property_path,
                invalid_value=invalid_value,
            )
        )

    def validate_nested(
        self, value: Any, constraint: Constraint, path_suffix: str
    ) -> None:
        self._walker.walk_constraint(
            constraint, value, self.group, join_path(self.property_path, path_suffix)
        )

    def cascade(self, value: Any) -> None:
        self._walker.walk_reference(value, self.group, self.property_path)


class GraphWalker:
    """Single validation run over one root value."""

    def __init__(
        self,
        root: Any,
        metadata_factory: MetadataFactoryInterface,
        validator_factory: ConstraintValidatorFactoryInterface,
    ):
        self.root = root
        self.violations = ConstraintViolationList()
        self._metadata_factory = metadata_factory
        self._validator_factory = validator_factory
        self._visited: dict[int, set[str]] = {}

    def walk_class(
        self, metadata: ClassMetadata, obj: Any, group: str, property_path: str
    ) -> None:
        groups_seen = self._visited.setdefault(id(obj), set())
        if group in groups_seen:
            return
        groups_seen.add(group)

        for constraint in metadata.constraints:
            if constraint.in_group(group):
                self.walk_constraint(constraint, obj, group, property_path)

        for name in metadata.constrained_members:
            for member in metadata.get_member_metadata(name):
                self.walk_member(member, obj, group, join_path(property_path, name))

    def walk_member(
        self, member: MemberMetadata, obj: Any, group: str, property_path: str
    ) -> None:
        constraints = [c for c in member.constraints if c.in_group(group)]
        if not constraints:
            return
        value = member.get_value(obj)
        for constraint in constraints:
            self.walk_constraint(constraint, value, group, property_path)

    def walk_reference(self, value: Any, group: str, property_path: str) -> None:
        if value is None or isinstance(value, _LEAF_TYPES):
            return
        if isinstance(value, Mapping):
            for key, element in value.items():
                self.walk_reference(element, group, join_path(property_path, f"[{key}]"))
        elif isinstance(value, (list, tuple, set, frozenset)):
            for index, element in enumerate(value):
                self.walk_reference(
                    element, group, join_path(property_path, f"[{index}]")
                )
        else:
            metadata = self._metadata_factory.get_class_metadata(type(value))
            self.walk_class(metadata, value, group, property_path)

    def walk_constraint(
        self, constraint: Constraint, value: Any, group: str, property_path: str
    ) -> None:
        validator = self._validator_factory.get_instance(constraint)
        context = ExecutionContext(self, group, property_path)
        validator.validate(value, constraint, context)


class Validator(ValidatorInterface):
    """
    Validates objects against the constraints declared for their classes.

    Args:
        metadata_factory: Source of per-class constraint metadata
        validator_factory: Resolves constraints to their validators
    """

    def __init__(
        self,
        metadata_factory: MetadataFactoryInterface,
        validator_factory: ConstraintValidatorFactoryInterface,
    ):
        self._metadata_factory = metadata_factory
        self._validator_factory = validator_factory

    def validate(
        self, value: Any, groups: Iterable[str] | str | None = None
    ) -> ConstraintViolationList:
        walker = self._walker(value)
        for group in normalize_groups(groups):
            walker.walk_reference(value, group, "")
        self._log(value, groups, walker.violations)
        return walker.violations

    def validate_property(
        self, value: Any, name: str, groups: Iterable[str] | str | None = None
    ) -> ConstraintViolationList:
        walker = self._walker(value)
        metadata = self._metadata_factory.get_class_metadata(type(value))
        for group in normalize_groups(groups):
            for member in metadata.get_member_metadata(name):
                walker.walk_member(member, value, group, name)
        self._log(value, groups, walker.violations)
        return walker.violations

    def validate_value(
        self,
        value: Any,
        constraints: Constraint | Iterable[Constraint],
        groups: Iterable[str] | str | None = None,
    ) -> ConstraintViolationList:
        if isinstance(constraints, Constraint):
            constraints = (constraints,)
        constraints = tuple(constraints)
        walker = self._walker(value)
        for group in normalize_groups(groups):
            for constraint in constraints:
                if constraint.in_group(group):
                    walker.walk_constraint(constraint, value, group, "")
        self._log(value, groups, walker.violations)
        return walker.violations

    def _walker(self, root: Any) -> GraphWalker:
        return GraphWalker(root, self._metadata_factory, self._validator_factory)

    @staticmethod
    def _log(
        value: Any,
        groups: Iterable[str] | str | None,
        violations: ConstraintViolationList,
    ) -> None:
        logger.debug(
            "Validated %s (groups=%s): %d violation(s)",
            type(value).__name__,
            groups,
            len(violations),
        )
