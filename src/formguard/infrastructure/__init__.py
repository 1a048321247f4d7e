"""
Infrastructure layer for formguard.

Contains adapters: validator discovery, metadata loading and caching, and
console reporting.
"""

from formguard.infrastructure.metadata import ClassMetadataFactory, StaticMethodLoader
from formguard.infrastructure.persistence import InMemoryMetadataCache
from formguard.infrastructure.registry import (
    ConstraintValidatorFactory,
    ConstraintValidatorRegistry,
)
from formguard.infrastructure.reporting import ConsoleViolationReporter

__all__ = [
    # Validator discovery
    "ConstraintValidatorRegistry",
    "ConstraintValidatorFactory",
    # Metadata
    "ClassMetadataFactory",
    "StaticMethodLoader",
    "InMemoryMetadataCache",
    # Reporting
    "ConsoleViolationReporter",
]
