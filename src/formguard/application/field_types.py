"""
Concrete field types built on Field.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from formguard.application.field import Field
from formguard.domain.exceptions import TransformationFailedError
from formguard.domain.models import UploadedFile
from formguard.transformers import (
    BooleanToStringTransformer,
    DateToStringTransformer,
    IntegerToStringTransformer,
    NumberToStringTransformer,
)


class CheckboxField(Field):
    """
    Boolean field. A missing submission means unchecked.

    Args:
        value: Displayed value of a checked box
    """

    def __init__(self, key: str, *, value: str = "1", **options: Any):
        options.setdefault("required", False)
        options.setdefault("value_transformer", BooleanToStringTransformer(value))
        self.value = value
        super().__init__(key, **options)

    def is_checked(self) -> bool:
        return bool(self.data)


class IntegerField(Field):
    def __init__(self, key: str, **options: Any):
        options.setdefault("value_transformer", IntegerToStringTransformer())
        super().__init__(key, **options)


class NumberField(Field):
    def __init__(self, key: str, *, precision: int | None = None, **options: Any):
        options.setdefault("value_transformer", NumberToStringTransformer(precision))
        super().__init__(key, **options)


class DateField(Field):
    def __init__(self, key: str, *, format: str = "%Y-%m-%d", **options: Any):
        options.setdefault("value_transformer", DateToStringTransformer(format))
        super().__init__(key, **options)


class ChoiceField(Field):
    """
    Field restricted to a set of choices.

    Args:
        choices: Mapping of value -> label, or an iterable of values
        multiple: Whether several values can be selected
    """

    def __init__(
        self,
        key: str,
        *,
        choices: Mapping[Any, str] | Iterable[Any],
        multiple: bool = False,
        **options: Any,
    ):
        if isinstance(choices, Mapping):
            self.choices = dict(choices)
        else:
            self.choices = {choice: str(choice) for choice in choices}
        self._by_string = {str(choice): choice for choice in self.choices}
        self.multiple = multiple
        super().__init__(key, **options)

    def transform(self, value: Any) -> Any:
        if self.multiple:
            return [str(choice) for choice in value or ()]
        return "" if value is None else str(value)

    def reverse_transform(self, value: Any) -> Any:
        if self.multiple:
            if value == "":
                return []
            if isinstance(value, str) or not isinstance(value, (list, tuple)):
                raise TransformationFailedError("Expected a list of choices")
            return [self._choice(item) for item in value]
        if value == "":
            return None
        return self._choice(value)

    def _choice(self, value: Any) -> Any:
        if not isinstance(value, str) or value not in self._by_string:
            raise TransformationFailedError(f'"{value}" is not a valid choice')
        return self._by_string[value]

    def is_choice_selected(self, choice: Any) -> bool:
        if self.multiple:
            return choice in (self.data or ())
        return choice == self.data


class FileField(Field):
    """
    Uploaded file. Forms containing a FileField are multipart.
    """

    def __init__(self, key: str, **options: Any):
        options.setdefault("trim", False)
        super().__init__(key, **options)

    def transform(self, value: Any) -> Any:
        return "" if value is None else value

    def reverse_transform(self, value: Any) -> UploadedFile | None:
        if value == "":
            return None
        if not isinstance(value, UploadedFile):
            raise TransformationFailedError(
                f"Expected an uploaded file, {type(value).__name__} given"
            )
        return value

    def is_multipart(self) -> bool:
        return True
