"""
Property paths address a value inside an object graph.

    author.first_name
    author.addresses[0].city
    fields[email].transformation_successful

Dotted elements are properties, bracketed elements are indices.
"""

import re
from collections.abc import Iterator, Mapping, MutableMapping, Sequence
from typing import Any

from formguard.domain.exceptions import (
    InvalidPropertyPathError,
    PropertyAccessDeniedError,
)

_ELEMENT = re.compile(r"^(\.?)([^.\[\]]+)|^\[([^\[\]]+)\]")


def _parse(path: str) -> tuple[tuple[str, ...], tuple[bool, ...]]:
    if not isinstance(path, str) or path == "":
        raise InvalidPropertyPathError("The property path must not be empty")

    elements: list[str] = []
    is_index: list[bool] = []
    remaining = path
    position = 0

    while remaining:
        match = _ELEMENT.match(remaining)
        if match is None:
            raise InvalidPropertyPathError(
                f'Could not parse property path "{path}". '
                f'Unexpected token "{remaining[0]}" at position {position}'
            )
        dot, name, index = match.groups()
        if name is not None:
            # Only the first element may omit the dot
            if bool(dot) == (position == 0):
                raise InvalidPropertyPathError(
                    f'Could not parse property path "{path}". '
                    f"Unexpected token at position {position}"
                )
            elements.append(name)
            is_index.append(False)
        else:
            elements.append(index)
            is_index.append(True)
        position += match.end()
        remaining = remaining[match.end() :]

    return tuple(elements), tuple(is_index)


def _accessor(obj: Any, prefixes: tuple[str, ...], name: str) -> Any:
    for prefix in prefixes:
        method = getattr(obj, f"{prefix}_{name}", None)
        if callable(method):
            return method
    return None


class PropertyPath:
    """Immutable, parsed property path."""

    def __init__(self, path: str):
        self._elements, self._is_index = _parse(path)
        self._string = path

    @classmethod
    def _from_parts(
        cls, elements: tuple[str, ...], is_index: tuple[bool, ...]
    ) -> "PropertyPath":
        instance = cls.__new__(cls)
        instance._elements = elements
        instance._is_index = is_index
        parts = []
        for position, (element, index) in enumerate(zip(elements, is_index)):
            if index:
                parts.append(f"[{element}]")
            elif position == 0:
                parts.append(element)
            else:
                parts.append(f".{element}")
        instance._string = "".join(parts)
        return instance

    @property
    def elements(self) -> tuple[str, ...]:
        return self._elements

    @property
    def first(self) -> str:
        return self._elements[0]

    def is_index(self, position: int) -> bool:
        return self._is_index[position]

    def is_property(self, position: int) -> bool:
        return not self._is_index[position]

    def tail(self, count: int = 1) -> "PropertyPath | None":
        """Return the path without its first ``count`` elements, or None."""
        if count >= len(self._elements):
            return None
        return self._from_parts(self._elements[count:], self._is_index[count:])

    # -------------------------------------------------------------------------
    # Reading and writing
    # -------------------------------------------------------------------------

    def get_value(self, obj: Any) -> Any:
        """Read the value this path points to, starting at ``obj``."""
        current = obj
        for position, element in enumerate(self._elements):
            if current is None:
                return None
            current = self._read(current, element, self._is_index[position])
        return current

    def set_value(self, obj: Any, value: Any) -> None:
        """Write ``value`` at this path, starting at ``obj``.

        Intermediate objects must exist; only the last element is written.
        """
        current = obj
        for position, element in enumerate(self._elements[:-1]):
            current = self._read(current, element, self._is_index[position])
            if current is None:
                raise InvalidPropertyPathError(
                    f'Cannot write "{self}": "{element}" is None'
                )
        self._write(current, self._elements[-1], self._is_index[-1], value)

    def _read(self, obj: Any, element: str, index: bool) -> Any:
        if index:
            return self._read_index(obj, element)

        if isinstance(obj, Mapping):
            return obj.get(element)

        self._check_public(obj, element)
        getter = _accessor(obj, ("get", "is", "has"), element)
        if getter is not None:
            return getter()
        if hasattr(obj, element):
            return getattr(obj, element)
        raise InvalidPropertyPathError(
            f'Property "{element}" does not exist in class '
            f'"{obj.__class__.__name__}"'
        )

    def _read_index(self, obj: Any, element: str) -> Any:
        if isinstance(obj, Mapping):
            return obj.get(element)
        if isinstance(obj, Sequence) and not isinstance(obj, str):
            try:
                position = int(element)
            except ValueError as e:
                raise InvalidPropertyPathError(
                    f'Index "{element}" is not an integer'
                ) from e
            return obj[position] if -len(obj) <= position < len(obj) else None
        if hasattr(obj, "__getitem__"):
            return obj[element]
        raise InvalidPropertyPathError(
            f'Cannot read index "{element}" from "{obj.__class__.__name__}"'
        )

    def _write(self, obj: Any, element: str, index: bool, value: Any) -> None:
        if isinstance(obj, MutableMapping):
            obj[element] = value
            return

        if index:
            if isinstance(obj, list):
                self._write_list_item(obj, element, value)
                return
            if hasattr(obj, "__setitem__"):
                obj[element] = value
                return
            raise InvalidPropertyPathError(
                f'Cannot write index "{element}" on "{obj.__class__.__name__}"'
            )

        self._check_public(obj, element)
        setter = _accessor(obj, ("set",), element)
        if setter is not None:
            setter(value)
            return
        try:
            setattr(obj, element, value)
        except AttributeError as e:
            raise InvalidPropertyPathError(
                f'Property "{element}" of class "{obj.__class__.__name__}" '
                "is not writable"
            ) from e

    @staticmethod
    def _write_list_item(items: list, element: str, value: Any) -> None:
        """Replace an item, or append when the index is one past the end."""
        try:
            position = int(element)
        except ValueError as e:
            raise InvalidPropertyPathError(
                f'Index "{element}" is not an integer'
            ) from e
        if position == len(items):
            items.append(value)
        elif -len(items) <= position < len(items):
            items[position] = value
        else:
            raise InvalidPropertyPathError(
                f'Index "{element}" is out of range for a list of {len(items)} items'
            )

    @staticmethod
    def _check_public(obj: Any, element: str) -> None:
        if element.startswith("_"):
            raise PropertyAccessDeniedError(
                f'Property "{element}" of class "{obj.__class__.__name__}" '
                "is not public"
            )

    # -------------------------------------------------------------------------
    # Protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PropertyPath):
            return self._string == other._string
        if isinstance(other, str):
            return self._string == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._string)

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"PropertyPath({self._string!r})"
