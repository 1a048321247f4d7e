"""
Wiring for a ready-to-use Validator.
"""

from formguard.application.validator import Validator
from formguard.domain.interfaces import (
    ConstraintValidatorFactoryInterface,
    MetadataFactoryInterface,
)
from formguard.infrastructure.metadata import ClassMetadataFactory
from formguard.infrastructure.registry import ConstraintValidatorFactory


def create_validator(
    metadata_factory: MetadataFactoryInterface | None = None,
    validator_factory: ConstraintValidatorFactoryInterface | None = None,
) -> Validator:
    """
    Build a Validator reading ``load_validator_metadata`` hooks and resolving
    validators through the registry (built-ins plus entry points).
    """
    return Validator(
        metadata_factory if metadata_factory is not None else ClassMetadataFactory(),
        validator_factory
        if validator_factory is not None
        else ConstraintValidatorFactory(),
    )
