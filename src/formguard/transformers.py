"""
Value transformers between normalized data and displayed data.

``transform`` renders a normalized value for the client; ``reverse_transform``
parses a submitted value and raises TransformationFailedError when it cannot.
Transformers that define ``set_locale(locale)`` receive the field's locale.
"""

from datetime import date, datetime
from typing import Any

from formguard.domain.exceptions import TransformationFailedError, UnexpectedTypeError
from formguard.domain.interfaces import ValueTransformerInterface


class BooleanToStringTransformer(ValueTransformerInterface):
    """True <-> ``true_value``, False/None <-> empty string."""

    def __init__(self, true_value: str = "1"):
        self.true_value = true_value

    def transform(self, value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, bool):
            raise UnexpectedTypeError(value, "bool")
        return self.true_value if value else ""

    def reverse_transform(self, value: Any) -> bool:
        if value is None:
            return False
        if not isinstance(value, str):
            raise TransformationFailedError(
                f"Expected a string, {type(value).__name__} given"
            )
        return value != ""


class IntegerToStringTransformer(ValueTransformerInterface):
    def transform(self, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnexpectedTypeError(value, "int")
        return str(value)

    def reverse_transform(self, value: Any) -> int | None:
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise TransformationFailedError(
                f"Expected a string, {type(value).__name__} given"
            )
        try:
            return int(value.strip())
        except ValueError as e:
            raise TransformationFailedError(f'"{value}" is not an integer') from e


class NumberToStringTransformer(ValueTransformerInterface):
    """
    Floats with an optional fixed precision.

    Args:
        precision: Digits after the decimal point (unrounded if None)
        decimal_separator: Separator used in displayed values
    """

    def __init__(self, precision: int | None = None, decimal_separator: str = "."):
        self.precision = precision
        self.decimal_separator = decimal_separator

    def transform(self, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise UnexpectedTypeError(value, "int or float")
        if self.precision is None:
            text = repr(float(value)) if isinstance(value, float) else str(value)
        else:
            text = f"{value:.{self.precision}f}"
        return text.replace(".", self.decimal_separator)

    def reverse_transform(self, value: Any) -> float | None:
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise TransformationFailedError(
                f"Expected a string, {type(value).__name__} given"
            )
        text = value.strip().replace(self.decimal_separator, ".")
        try:
            number = float(text)
        except ValueError as e:
            raise TransformationFailedError(f'"{value}" is not a number') from e
        if self.precision is not None:
            number = round(number, self.precision)
        return number


class DateToStringTransformer(ValueTransformerInterface):
    """Dates <-> strings in a strftime/strptime ``format``."""

    def __init__(self, format: str = "%Y-%m-%d"):
        self.format = format

    def transform(self, value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, date):
            raise UnexpectedTypeError(value, "date")
        return value.strftime(self.format)

    def reverse_transform(self, value: Any) -> date | None:
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise TransformationFailedError(
                f"Expected a string, {type(value).__name__} given"
            )
        try:
            return datetime.strptime(value.strip(), self.format).date()
        except ValueError as e:
            raise TransformationFailedError(
                f'"{value}" does not match the format "{self.format}"'
            ) from e


class ValueTransformerChain(ValueTransformerInterface):
    """
    Applies transformers in order; reverse transformation runs backwards.
    """

    def __init__(self, *transformers: ValueTransformerInterface):
        self.transformers = transformers

    def transform(self, value: Any) -> Any:
        for transformer in self.transformers:
            value = transformer.transform(value)
        return value

    def reverse_transform(self, value: Any) -> Any:
        for transformer in reversed(self.transformers):
            value = transformer.reverse_transform(value)
        return value

    def set_locale(self, locale: str | None) -> None:
        for transformer in self.transformers:
            set_locale = getattr(transformer, "set_locale", None)
            if callable(set_locale):
                set_locale(locale)
