"""
Field: a leaf of the form tree.

A field converts between the normalized value written to the bound object
(``data``) and the value exchanged with the client (``displayed_data``),
optionally through a value transformer.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from formguard.constraints import IsTrue
from formguard.domain.constraint import ANY_GROUP
from formguard.domain.exceptions import InvalidArgumentError, TransformationFailedError
from formguard.domain.interfaces import FieldInterface, ValueTransformerInterface
from formguard.domain.metadata import ClassMetadata
from formguard.domain.models import ErrorType, FieldError, UploadedFile
from formguard.domain.property_path import PropertyPath

logger = logging.getLogger(__name__)

# Default for ``property_path``: map the field to the property named like its key
KEY = object()


class Field(FieldInterface):
    """
    Single input element.

    Args:
        key: Name of the field inside its parent
        data: Initial normalized value
        property_path: Path into the bound object; the key by default, None
            for fields that are not mapped
        required: Whether a value must be submitted
        disabled: Whether submitted values are ignored
        trim: Whether submitted strings are stripped
        value_transformer: Converts between normalized and displayed values
        locale: Locale handed to the transformer
    """

    def __init__(
        self,
        key: str,
        *,
        data: Any = None,
        property_path: Any = KEY,
        required: bool = True,
        disabled: bool = False,
        trim: bool = True,
        value_transformer: ValueTransformerInterface | None = None,
        locale: str | None = None,
    ):
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError("The key of a field must be a non-empty string")
        self._key = key
        if property_path is KEY:
            property_path = key
        if isinstance(property_path, str):
            property_path = PropertyPath(property_path)
        self._property_path: PropertyPath | None = property_path
        self._required = required
        self._disabled = disabled
        self._trim = trim
        self._value_transformer = value_transformer
        self._locale: str | None = None
        self._parent: FieldInterface | None = None
        self._bound = False
        self._errors: list[FieldError] = []
        self._transformation_successful = True
        self._data: Any = None
        self._displayed_data: Any = ""

        self.set_locale(locale)
        self.set_data(data)
        self.configure()

    def configure(self) -> None:
        """Hook for subclasses, called at the end of construction."""

    @classmethod
    def load_validator_metadata(cls, metadata: ClassMetadata) -> None:
        metadata.add_getter_constraint(
            "transformation_successful",
            IsTrue(message="This value is invalid", groups=ANY_GROUP),
        )

    # -------------------------------------------------------------------------
    # Identity and tree
    # -------------------------------------------------------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def property_path(self) -> PropertyPath | None:
        return self._property_path

    @property
    def name(self) -> str:
        """Client-side name, e.g. ``author[first_name]``."""
        if self._parent is not None:
            return f"{self._parent.name}[{self._key}]"
        return self._key

    @property
    def id(self) -> str:
        return self.name.replace("[", "_").replace("]", "")

    @property
    def parent(self) -> Optional[FieldInterface]:
        return self._parent

    def set_parent(self, parent: Optional[FieldInterface]) -> None:
        self._parent = parent

    def has_parent(self) -> bool:
        return self._parent is not None

    @property
    def locale(self) -> str | None:
        return self._locale

    def set_locale(self, locale: str | None) -> None:
        self._locale = locale
        set_locale = getattr(self._value_transformer, "set_locale", None)
        if callable(set_locale):
            set_locale(locale)

    @property
    def value_transformer(self) -> ValueTransformerInterface | None:
        return self._value_transformer

    # -------------------------------------------------------------------------
    # Data
    # -------------------------------------------------------------------------

    @property
    def data(self) -> Any:
        return self._data

    @property
    def displayed_data(self) -> Any:
        return self._displayed_data

    def set_data(self, data: Any) -> None:
        self._data = data
        self._displayed_data = self.transform(data)

    def bind(self, tainted_data: Any) -> None:
        self._bound = True
        self._errors = []
        if self._disabled:
            return

        tainted_data = self._normalize_submission(tainted_data)
        self._displayed_data = tainted_data
        self._transformation_successful = True
        try:
            self._data = self.process_data(self.reverse_transform(tainted_data))
            self._displayed_data = self.transform(self._data)
        except TransformationFailedError as e:
            logger.debug("Could not transform value of field '%s': %s", self._key, e)
            self._transformation_successful = False
            self._data = None

    def _normalize_submission(self, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "1" if value else ""
        if not isinstance(value, (str, Mapping, list, tuple, UploadedFile)):
            value = str(value)
        if self._trim and isinstance(value, str):
            value = value.strip()
        return value

    def process_data(self, data: Any) -> Any:
        """Hook for subclasses to post-process reverse-transformed data."""
        return data

    def transform(self, value: Any) -> Any:
        if self._value_transformer is None:
            return "" if value is None else value
        return self._value_transformer.transform(value)

    def reverse_transform(self, value: Any) -> Any:
        if self._value_transformer is None:
            return None if value == "" else value
        return self._value_transformer.reverse_transform(value)

    def is_transformation_successful(self) -> bool:
        return self._transformation_successful

    def update_from_object(self, obj: Any) -> None:
        if self._property_path is not None:
            self.set_data(self._property_path.get_value(obj))

    def update_object(self, obj: Any) -> None:
        if self._property_path is not None and not self._disabled:
            self._property_path.set_value(obj, self._data)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def is_bound(self) -> bool:
        return self._bound

    def is_valid(self) -> bool:
        return self._bound and not self.has_errors()

    @property
    def errors(self) -> list[FieldError]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def add_error(
        self,
        error: FieldError,
        path: PropertyPath | None = None,
        error_type: ErrorType | None = None,
    ) -> None:
        self._errors.append(error)

    def is_required(self) -> bool:
        if not self._required:
            return False
        return self._parent is None or self._parent.is_required()

    def set_required(self, required: bool) -> None:
        self._required = required

    def is_disabled(self) -> bool:
        return self._disabled

    def is_multipart(self) -> bool:
        return False

    def is_hidden(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r})"


class HiddenField(Field):
    """Field invisible to the user, e.g. a CSRF token."""

    def is_hidden(self) -> bool:
        return True
