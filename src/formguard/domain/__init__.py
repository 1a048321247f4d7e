"""
Domain layer for formguard.

Contains core business logic with no external dependencies.
"""

from formguard.domain.constraint import ANY_GROUP, DEFAULT_GROUP, Constraint
from formguard.domain.exceptions import (
    AlreadyBoundError,
    ConfigurationError,
    ConstraintDefinitionError,
    FieldNotFoundError,
    FormGuardError,
    InvalidArgumentError,
    InvalidPropertyPathError,
    PropertyAccessDeniedError,
    TransformationFailedError,
    UnexpectedTypeError,
)
from formguard.domain.interfaces import (
    ConstraintValidatorFactoryInterface,
    ConstraintValidatorInterface,
    ExecutionContextInterface,
    FieldInterface,
    MetadataCacheInterface,
    MetadataFactoryInterface,
    ValidatorInterface,
    ValueTransformerInterface,
)
from formguard.domain.metadata import ClassMetadata, MemberKind, MemberMetadata
from formguard.domain.models import (
    ConstraintViolation,
    ConstraintViolationList,
    ErrorType,
    FieldError,
    UploadedFile,
)
from formguard.domain.property_path import PropertyPath

__all__ = [
    # Models
    "ConstraintViolation",
    "ConstraintViolationList",
    "ErrorType",
    "FieldError",
    "UploadedFile",
    "PropertyPath",
    # Constraints and metadata
    "Constraint",
    "DEFAULT_GROUP",
    "ANY_GROUP",
    "ClassMetadata",
    "MemberKind",
    "MemberMetadata",
    # Interfaces
    "FieldInterface",
    "ValidatorInterface",
    "ExecutionContextInterface",
    "ConstraintValidatorInterface",
    "ConstraintValidatorFactoryInterface",
    "MetadataFactoryInterface",
    "MetadataCacheInterface",
    "ValueTransformerInterface",
    # Exceptions
    "FormGuardError",
    "InvalidArgumentError",
    "UnexpectedTypeError",
    "AlreadyBoundError",
    "FieldNotFoundError",
    "InvalidPropertyPathError",
    "PropertyAccessDeniedError",
    "TransformationFailedError",
    "ConstraintDefinitionError",
    "ConfigurationError",
]
