"""
Validation metadata: which constraints apply to a class and its members.

Classes declare their constraints in a ``load_validator_metadata`` classmethod:

    @classmethod
    def load_validator_metadata(cls, metadata: ClassMetadata) -> None:
        metadata.add_property_constraint("first_name", NotBlank())
        metadata.add_getter_constraint("adult", IsTrue())
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from formguard.domain.constraint import Constraint
from formguard.domain.exceptions import ConstraintDefinitionError

GETTER_PREFIXES = ("is", "get", "has")


class MemberKind(Enum):
    """How a member value is read from an object."""

    PROPERTY = "property"  # Attribute or Python property
    GETTER = "getter"  # is_/get_/has_ method


@dataclass
class MemberMetadata:
    """Constraints attached to one member of a class."""

    name: str
    kind: MemberKind
    constraints: list[Constraint] = field(default_factory=list)

    def get_value(self, obj: Any) -> Any:
        if self.kind is MemberKind.GETTER:
            for prefix in GETTER_PREFIXES:
                method = getattr(obj, f"{prefix}_{self.name}", None)
                if callable(method):
                    return method()
        return getattr(obj, self.name)


class ClassMetadata:
    """Constraints declared for a class, including inherited ones."""

    def __init__(self, cls: type):
        self.cls = cls
        self.constraints: list[Constraint] = []
        self.members: dict[str, list[MemberMetadata]] = {}
        # id of an inherited copy -> the constraint it was copied from
        self._origins: dict[int, Constraint] = {}

    @property
    def class_name(self) -> str:
        return self.cls.__name__

    def add_constraint(self, constraint: Constraint) -> "ClassMetadata":
        """Add a constraint validated against the object itself."""
        constraint.add_implicit_group(self.class_name)
        self.constraints.append(constraint)
        return self

    def add_property_constraint(
        self, name: str, constraint: Constraint
    ) -> "ClassMetadata":
        self._member(name, MemberKind.PROPERTY).constraints.append(constraint)
        constraint.add_implicit_group(self.class_name)
        return self

    def add_getter_constraint(
        self, name: str, constraint: Constraint
    ) -> "ClassMetadata":
        if not any(
            callable(getattr(self.cls, f"{prefix}_{name}", None))
            for prefix in GETTER_PREFIXES
        ):
            raise ConstraintDefinitionError(
                f'Neither of these methods exist in class "{self.class_name}": '
                + ", ".join(f"{prefix}_{name}" for prefix in GETTER_PREFIXES)
            )
        self._member(name, MemberKind.GETTER).constraints.append(constraint)
        constraint.add_implicit_group(self.class_name)
        return self

    def merge_constraints(self, parent: "ClassMetadata") -> None:
        """Inherit the constraints of a base class.

        Inherited constraints are copies, so the implicit group of this
        class never leaks into the base class. Constraints reached through
        several bases are added once.
        """
        for constraint in parent.constraints:
            inherited = self._inherit(parent, constraint, self.constraints)
            if inherited is not None:
                self.add_constraint(inherited)
        for name, members in parent.members.items():
            for member in members:
                target = self._member(name, member.kind)
                for constraint in member.constraints:
                    inherited = self._inherit(parent, constraint, target.constraints)
                    if inherited is None:
                        continue
                    inherited.add_implicit_group(self.class_name)
                    target.constraints.append(inherited)

    def origin_of(self, constraint: Constraint) -> Constraint:
        """The declared constraint an inherited copy was made from."""
        return self._origins.get(id(constraint), constraint)

    def _inherit(
        self,
        parent: "ClassMetadata",
        constraint: Constraint,
        existing: list[Constraint],
    ) -> Constraint | None:
        origin = parent.origin_of(constraint)
        if any(self.origin_of(own) is origin for own in existing):
            return None
        inherited = copy.copy(constraint)
        self._origins[id(inherited)] = origin
        return inherited

    def get_member_metadata(self, name: str) -> list[MemberMetadata]:
        return list(self.members.get(name, ()))

    @property
    def constrained_members(self) -> list[str]:
        return list(self.members)

    def has_constraints(self) -> bool:
        return bool(self.constraints) or any(
            member.constraints
            for members in self.members.values()
            for member in members
        )

    def _member(self, name: str, kind: MemberKind) -> MemberMetadata:
        members = self.members.setdefault(name, [])
        for member in members:
            if member.kind is kind:
                return member
        member = MemberMetadata(name=name, kind=kind)
        members.append(member)
        return member

    def __repr__(self) -> str:
        return f"ClassMetadata({self.class_name})"
