"""Shared pytest fixtures for formguard tests."""

from collections.abc import Callable
from unittest.mock import Mock

import pytest

from formguard.application.form import Form
from formguard.application.validator import Validator
from formguard.domain.interfaces import FieldInterface, ValidatorInterface
from formguard.domain.models import ConstraintViolationList
from formguard.factory import create_validator
from formguard.infrastructure.registry import ConstraintValidatorRegistry


@pytest.fixture(autouse=True)
def reset_form_defaults():
    """Form defaults are process-global; isolate every test."""
    Form.reset_defaults()
    yield
    Form.reset_defaults()


@pytest.fixture(autouse=True)
def reset_validator_registry():
    """Drop validators registered by individual tests."""
    ConstraintValidatorRegistry.clear()
    yield
    ConstraintValidatorRegistry.clear()


@pytest.fixture
def validator() -> Validator:
    """Validator wired with the built-in constraint validators."""
    return create_validator()


@pytest.fixture
def mock_validator() -> Mock:
    """Validator double reporting no violations."""
    validator = Mock(spec=ValidatorInterface)
    validator.validate.return_value = ConstraintViolationList()
    return validator


@pytest.fixture
def mock_field() -> Callable[..., Mock]:
    """Factory for field doubles with a key and a multipart flag."""

    def create(key: str, multipart: bool = False) -> Mock:
        field = Mock(spec=FieldInterface)
        field.key = key
        field.name = key
        field.property_path = None
        field.is_multipart.return_value = multipart
        field.is_hidden.return_value = False
        field.is_valid.return_value = True
        field.errors = []
        return field

    return create
