"""
Domain interfaces (Ports) for formguard.

These abstract base classes define the contracts that implementations must satisfy.
They have no external dependencies and represent the core domain boundaries.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from collections.abc import Iterable

    from formguard.domain.constraint import Constraint
    from formguard.domain.metadata import ClassMetadata
    from formguard.domain.models import (
        ConstraintViolationList,
        ErrorType,
        FieldError,
    )
    from formguard.domain.property_path import PropertyPath


class FieldInterface(ABC):
    """
    Port for a node in a form tree.

    A field holds two representations of its value: the normalized ``data``
    written to the bound object, and the ``displayed_data`` submitted by and
    rendered to the client.
    """

    @property
    @abstractmethod
    def key(self) -> str:
        """Key of the field inside its parent."""

    @property
    @abstractmethod
    def property_path(self) -> Optional["PropertyPath"]:
        """Path into the bound object, or None if the field is not mapped."""

    @property
    @abstractmethod
    def data(self) -> Any:
        """Normalized value."""

    @property
    @abstractmethod
    def displayed_data(self) -> Any:
        """Client-side value."""

    @property
    @abstractmethod
    def errors(self) -> list["FieldError"]:
        """Errors attached to this field."""

    @property
    @abstractmethod
    def parent(self) -> Optional["FieldInterface"]:
        """Enclosing field group, if any."""

    @abstractmethod
    def set_parent(self, parent: Optional["FieldInterface"]) -> None:
        """Attach the field to a group."""

    @abstractmethod
    def has_parent(self) -> bool:
        """Whether the field is attached to a group."""

    @abstractmethod
    def set_locale(self, locale: str | None) -> None:
        """Set the locale used to transform values."""

    @abstractmethod
    def set_data(self, data: Any) -> None:
        """Set the normalized value and refresh the displayed one."""

    @abstractmethod
    def bind(self, tainted_data: Any) -> None:
        """Bind a submitted client-side value."""

    @abstractmethod
    def is_bound(self) -> bool:
        """Whether bind() was called."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the field is bound and has no errors."""

    @abstractmethod
    def has_errors(self) -> bool:
        """Whether errors are attached to this field."""

    @abstractmethod
    def add_error(
        self,
        error: "FieldError",
        path: Optional["PropertyPath"] = None,
        error_type: Optional["ErrorType"] = None,
    ) -> None:
        """Attach an error, routing it along ``path`` where supported."""

    @abstractmethod
    def is_required(self) -> bool:
        """Whether a value must be submitted."""

    @abstractmethod
    def is_disabled(self) -> bool:
        """Whether submitted values are ignored."""

    @abstractmethod
    def is_multipart(self) -> bool:
        """Whether binding needs uploaded files."""

    @abstractmethod
    def is_hidden(self) -> bool:
        """Whether the field is invisible to the user."""

    @abstractmethod
    def update_from_object(self, obj: Any) -> None:
        """Read the field's data from ``obj`` through its property path."""

    @abstractmethod
    def update_object(self, obj: Any) -> None:
        """Write the field's data to ``obj`` through its property path."""


class ValidatorInterface(ABC):
    """
    Port for object graph validation.

    Validators never raise on invalid data; they return violations.
    """

    @abstractmethod
    def validate(
        self, value: Any, groups: "Iterable[str] | str | None" = None
    ) -> "ConstraintViolationList":
        """
        Validate an object against the constraints declared for its class.

        Args:
            value: The object to validate
            groups: Validation groups (None selects the default group)

        Returns:
            All violations found in the object graph
        """

    @abstractmethod
    def validate_property(
        self, value: Any, name: str, groups: "Iterable[str] | str | None" = None
    ) -> "ConstraintViolationList":
        """Validate a single member of an object."""

    @abstractmethod
    def validate_value(
        self,
        value: Any,
        constraints: "Constraint | Iterable[Constraint]",
        groups: "Iterable[str] | str | None" = None,
    ) -> "ConstraintViolationList":
        """Validate a value against explicit constraints."""


class ExecutionContextInterface(ABC):
    """Port through which constraint validators report violations."""

    @abstractmethod
    def add_violation(
        self,
        message_template: str,
        parameters: dict[str, Any] | None = None,
        invalid_value: Any = None,
    ) -> None:
        """Record a violation at the current property path."""

    @abstractmethod
    def validate_nested(
        self, value: Any, constraint: "Constraint", path_suffix: str
    ) -> None:
        """Validate ``value`` against ``constraint`` at a sub-path, e.g. ``[0]``."""

    @abstractmethod
    def cascade(self, value: Any) -> None:
        """Walk into ``value`` with its own metadata, at the current path."""


class ConstraintValidatorInterface(ABC):
    """Port for the logic behind a constraint."""

    @abstractmethod
    def validate(
        self,
        value: Any,
        constraint: "Constraint",
        context: ExecutionContextInterface,
    ) -> None:
        """Check ``value`` and report failures through ``context``."""


class ConstraintValidatorFactoryInterface(ABC):
    """Port resolving constraints to validator instances."""

    @abstractmethod
    def get_instance(self, constraint: "Constraint") -> ConstraintValidatorInterface:
        """Return the validator for ``constraint``."""


class MetadataFactoryInterface(ABC):
    """Port providing validation metadata per class."""

    @abstractmethod
    def get_class_metadata(self, cls: type) -> "ClassMetadata":
        """Return the (possibly cached) metadata of ``cls``."""


class MetadataCacheInterface(ABC):
    """Port for storing loaded class metadata."""

    @abstractmethod
    def has(self, cls: type) -> bool:
        """Whether metadata for ``cls`` is cached."""

    @abstractmethod
    def read(self, cls: type) -> "ClassMetadata":
        """
        Return cached metadata.

        Raises:
            KeyError: If nothing is cached for ``cls``
        """

    @abstractmethod
    def write(self, metadata: "ClassMetadata") -> None:
        """Store metadata."""


class ValueTransformerInterface(ABC):
    """Port converting between normalized and displayed values."""

    @abstractmethod
    def transform(self, value: Any) -> Any:
        """Normalized value -> displayed value."""

    @abstractmethod
    def reverse_transform(self, value: Any) -> Any:
        """
        Displayed value -> normalized value.

        Raises:
            TransformationFailedError: If the value cannot be converted
        """
