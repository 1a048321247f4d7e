"""
Domain exceptions for formguard.

Validation failures are not exceptions: they are collected as constraint
violations. These exceptions signal misuse of the API or malformed input.
"""


class FormGuardError(Exception):
    """Base class for all formguard errors."""


class InvalidArgumentError(FormGuardError, ValueError):
    """Raised when an operation receives an argument it cannot work with.

    The typical case is binding a multipart form without uploaded files.
    """


class UnexpectedTypeError(FormGuardError, TypeError):
    """Raised when a value does not have the type an operation expects."""

    def __init__(self, value: object, expected: str):
        super().__init__(
            f"Expected argument of type {expected}, {type(value).__name__} given"
        )
        self.value = value
        self.expected = expected


class AlreadyBoundError(FormGuardError):
    """Raised when a bound field group is modified."""


class FieldNotFoundError(FormGuardError, KeyError):
    """Raised when a field group has no field with the requested key."""

    def __init__(self, key: str):
        super().__init__(f'Field "{key}" does not exist')
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidPropertyPathError(FormGuardError, ValueError):
    """Raised for unparsable property paths or paths that cannot be resolved."""


class PropertyAccessDeniedError(FormGuardError, AttributeError):
    """Raised when a property path targets a private attribute."""


class TransformationFailedError(FormGuardError):
    """Raised by value transformers when a value cannot be converted."""


class ConstraintDefinitionError(FormGuardError):
    """Raised when a constraint is declared with missing or invalid options."""


class ConfigurationError(FormGuardError, ValueError):
    """Raised for invalid form defaults from code, a file or the environment."""
