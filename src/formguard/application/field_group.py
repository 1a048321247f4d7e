"""
FieldGroup: a field made of other fields.

The group's data is an object (or mapping) whose properties the children
read and write through their property paths. A group without a property
path is virtual: its children map onto the parent's data directly.
"""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from formguard.application.field import Field
from formguard.constraints import Valid
from formguard.domain.exceptions import (
    AlreadyBoundError,
    FieldNotFoundError,
    UnexpectedTypeError,
)
from formguard.domain.interfaces import FieldInterface
from formguard.domain.metadata import ClassMetadata
from formguard.domain.models import ErrorType, FieldError
from formguard.domain.property_path import PropertyPath

logger = logging.getLogger(__name__)

_SCALARS = (str, bytes, int, float, complex, bool)


class FieldGroup(Field):
    """
    Ordered collection of fields.

    Args:
        key: Name of the group inside its parent
        data_class: Class instantiated as data when binding without data
        **options: Options of Field
    """

    def __init__(self, key: str, *, data_class: type | None = None, **options: Any):
        self._fields: dict[str, FieldInterface] = {}
        self._data_class = data_class
        super().__init__(key, **options)

    @classmethod
    def load_validator_metadata(cls, metadata: ClassMetadata) -> None:
        metadata.add_property_constraint("fields", Valid())

    # -------------------------------------------------------------------------
    # Children
    # -------------------------------------------------------------------------

    def add(self, field: FieldInterface) -> FieldInterface:
        """
        Add a field, replacing any field with the same key.

        Raises:
            AlreadyBoundError: If the group is already bound
            UnexpectedTypeError: If ``field`` is not a FieldInterface
        """
        if self.is_bound():
            raise AlreadyBoundError("You cannot add fields after binding a form")
        if not isinstance(field, FieldInterface):
            raise UnexpectedTypeError(field, "FieldInterface")

        self._fields[field.key] = field
        field.set_parent(self)
        field.set_locale(self.locale)
        if self._data is not None:
            field.update_from_object(self._data)
        return field

    def get(self, key: str) -> FieldInterface:
        if key not in self._fields:
            raise FieldNotFoundError(key)
        return self._fields[key]

    def has(self, key: str) -> bool:
        return key in self._fields

    def remove(self, key: str) -> None:
        field = self._fields.pop(key, None)
        if field is None:
            raise FieldNotFoundError(key)
        field.set_parent(None)

    @property
    def fields(self) -> Mapping[str, FieldInterface]:
        return MappingProxyType(self._fields)

    def __getitem__(self, key: str) -> FieldInterface:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[FieldInterface]:
        return iter(list(self._fields.values()))

    def __len__(self) -> int:
        return len(self._fields)

    # -------------------------------------------------------------------------
    # Data
    # -------------------------------------------------------------------------

    @property
    def displayed_data(self) -> dict[str, Any]:
        return {key: field.displayed_data for key, field in self._fields.items()}

    def set_data(self, data: Any) -> None:
        if isinstance(data, _SCALARS):
            raise UnexpectedTypeError(data, "object or mapping")
        self._data = data
        if data is not None:
            for field in self._fields.values():
                field.update_from_object(data)

    def set_locale(self, locale: str | None) -> None:
        super().set_locale(locale)
        for field in self._fields.values():
            field.set_locale(locale)

    def bind(self, tainted_data: Any) -> None:
        """
        Bind a mapping of submitted values to the children.

        Missing keys are bound as None; unknown keys are ignored.

        Raises:
            UnexpectedTypeError: If ``tainted_data`` is not a mapping
        """
        if tainted_data is None or tainted_data == "":
            tainted_data = {}
        if not isinstance(tainted_data, Mapping):
            raise UnexpectedTypeError(tainted_data, "Mapping")

        self._bound = True
        self._errors = []
        self._transformation_successful = True
        if self.is_disabled():
            return

        for key, field in self._fields.items():
            field.bind(tainted_data.get(key))

        if self._data is None:
            self._data = self._data_class() if self._data_class is not None else {}
        for field in self._fields.values():
            field.update_object(self._data)

        extra = set(tainted_data) - set(self._fields)
        if extra:
            logger.debug(
                "Ignoring extra fields submitted to '%s': %s",
                self.key,
                ", ".join(sorted(map(str, extra))),
            )

    def transform(self, value: Any) -> Any:
        return value

    def reverse_transform(self, value: Any) -> Any:
        return value

    def update_from_object(self, obj: Any) -> None:
        if self._property_path is None:
            self.set_data(obj)
        else:
            self.set_data(self._property_path.get_value(obj))

    def update_object(self, obj: Any) -> None:
        if self.is_disabled():
            return
        if self._property_path is None:
            for field in self._fields.values():
                field.update_object(obj)
        else:
            self._property_path.set_value(obj, self._data)

    # -------------------------------------------------------------------------
    # State and errors
    # -------------------------------------------------------------------------

    def is_valid(self) -> bool:
        if not super().is_valid():
            return False
        return all(field.is_valid() for field in self._fields.values())

    def is_multipart(self) -> bool:
        return any(field.is_multipart() for field in self._fields.values())

    def add_error(
        self,
        error: FieldError,
        path: PropertyPath | None = None,
        error_type: ErrorType | None = None,
    ) -> None:
        """
        Attach an error, routing it to the child ``path`` points at.

        FIELD errors follow ``fields[key]`` elements; DATA errors go to the
        child whose property path starts like ``path``. Errors that match no
        (visible) child stay on the group.
        """
        if path is not None:
            if error_type is ErrorType.FIELD:
                if (
                    len(path) > 1
                    and path.first == "fields"
                    and path.is_property(0)
                    and path.is_index(1)
                ):
                    key = path.elements[1]
                    field = self._fields.get(key)
                    if field is not None and not field.is_hidden():
                        field.add_error(error, path.tail(2), error_type)
                        return
            elif error_type is ErrorType.DATA:
                field = self._field_for_data_path(path)
                if field is not None:
                    field.add_error(error, path.tail(), error_type)
                    return

        self._errors.append(error)

    def _field_for_data_path(self, path: PropertyPath) -> FieldInterface | None:
        for field in self._fields.values():
            field_path = field.property_path
            if field_path is None:
                if isinstance(field, FieldGroup):
                    found = field._field_for_data_path(path)
                    if found is not None:
                        return found
            elif isinstance(field_path, PropertyPath) and field_path.first == path.first:
                return field
        return None

    def iter_errors(self) -> Iterator[tuple[str, FieldError]]:
        """Yield ``(field name, error)`` for this group and all descendants."""
        for error in self._errors:
            yield self.name, error
        for field in self._fields.values():
            if isinstance(field, FieldGroup):
                yield from field.iter_errors()
            else:
                for error in field.errors:
                    yield field.name, error
