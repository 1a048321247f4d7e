"""
formguard: form binding, validation and CSRF protection.

Binds submitted request data to domain objects through a tree of fields,
validates the objects against declared constraints and maps the violations
back onto the fields that produced them.

Example:
    from dataclasses import dataclass
    from formguard import Field, Form, NotBlank, create_validator

    @dataclass
    class Author:
        first_name: str = ""

        @classmethod
        def load_validator_metadata(cls, metadata):
            metadata.add_property_constraint("first_name", NotBlank())

    class AuthorForm(Form):
        def configure(self):
            self.add(Field("first_name"))

    form = AuthorForm("author", Author(), create_validator())
    form.bind({"first_name": ""})
    form.is_valid()  # False
    form["first_name"].errors[0].message  # "This value should not be blank"
"""

# Application layer (form tree and validation)
from formguard.application import (
    CheckboxField,
    ChoiceField,
    DateField,
    Field,
    FieldGroup,
    FileField,
    Form,
    HiddenField,
    IntegerField,
    NumberField,
    Validator,
)
from formguard.config import FormConfig, load_form_config

# Constraints (commonly declared)
from formguard.constraints import (
    All,
    Blank,
    Choice,
    Email,
    File,
    IsFalse,
    IsTrue,
    Max,
    MaxLength,
    Min,
    MinLength,
    NotBlank,
    NotNull,
    Regex,
    Type,
    Url,
    Valid,
)
from formguard.domain.constraint import ANY_GROUP, DEFAULT_GROUP, Constraint

# Domain exceptions
from formguard.domain.exceptions import (
    AlreadyBoundError,
    ConfigurationError,
    FieldNotFoundError,
    FormGuardError,
    InvalidArgumentError,
    TransformationFailedError,
    UnexpectedTypeError,
)

# Domain interfaces (for type hints and custom implementations)
from formguard.domain.interfaces import (
    ConstraintValidatorInterface,
    FieldInterface,
    ValidatorInterface,
    ValueTransformerInterface,
)
from formguard.domain.metadata import ClassMetadata
from formguard.domain.models import (
    ConstraintViolation,
    ConstraintViolationList,
    FieldError,
    UploadedFile,
)
from formguard.factory import create_validator

# Infrastructure (explicit import encouraged for dependency injection)
from formguard.infrastructure import (
    ConsoleViolationReporter,
    ConstraintValidatorRegistry,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "ConstraintViolation",
    "ConstraintViolationList",
    "FieldError",
    "UploadedFile",
    "ClassMetadata",
    "Constraint",
    "DEFAULT_GROUP",
    "ANY_GROUP",
    # Domain interfaces
    "FieldInterface",
    "ValidatorInterface",
    "ConstraintValidatorInterface",
    "ValueTransformerInterface",
    # Domain exceptions
    "FormGuardError",
    "InvalidArgumentError",
    "UnexpectedTypeError",
    "AlreadyBoundError",
    "FieldNotFoundError",
    "TransformationFailedError",
    "ConfigurationError",
    # Application layer
    "Field",
    "HiddenField",
    "CheckboxField",
    "ChoiceField",
    "DateField",
    "FileField",
    "IntegerField",
    "NumberField",
    "FieldGroup",
    "Form",
    "Validator",
    "create_validator",
    # Configuration
    "FormConfig",
    "load_form_config",
    # Constraints
    "NotNull",
    "NotBlank",
    "Blank",
    "IsTrue",
    "IsFalse",
    "Type",
    "Min",
    "Max",
    "MinLength",
    "MaxLength",
    "Regex",
    "Email",
    "Url",
    "Choice",
    "File",
    "All",
    "Valid",
    # Infrastructure
    "ConstraintValidatorRegistry",
    "ConsoleViolationReporter",
]
