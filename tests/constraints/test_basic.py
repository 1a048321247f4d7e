"""Tests for presence, boolean and type constraints."""

from unittest.mock import Mock

import pytest

from formguard.constraints import (
    AllValidator,
    Blank,
    ChoiceValidator,
    FileValidator,
    IsFalse,
    IsTrue,
    MaxLengthValidator,
    MaxValidator,
    MinLengthValidator,
    MinValidator,
    NotBlank,
    NotNull,
    RegexValidator,
    Type,
    TypeValidator,
    UrlValidator,
    ValidValidator,
)
from formguard.domain.exceptions import ConstraintDefinitionError, UnexpectedTypeError
from formguard.domain.interfaces import ExecutionContextInterface


def messages(violations) -> list[str]:
    return [violation.message for violation in violations]


class TestNotNull:
    def test_none_fails(self, validator) -> None:
        assert messages(validator.validate_value(None, NotNull())) == [
            "This value should not be null"
        ]

    @pytest.mark.parametrize("value", ["", 0, False, [], "foo"])
    def test_other_values_pass(self, validator, value) -> None:
        assert len(validator.validate_value(value, NotNull())) == 0


class TestNotBlank:
    @pytest.mark.parametrize("value", [None, "", False, [], {}, ()])
    def test_blank_values_fail(self, validator, value) -> None:
        assert messages(validator.validate_value(value, NotBlank())) == [
            "This value should not be blank"
        ]

    @pytest.mark.parametrize("value", ["foo", 0, True, ["a"], 1.5])
    def test_other_values_pass(self, validator, value) -> None:
        assert len(validator.validate_value(value, NotBlank())) == 0

    def test_custom_message(self, validator) -> None:
        violations = validator.validate_value("", NotBlank(message="Required"))

        assert messages(violations) == ["Required"]


class TestBlank:
    @pytest.mark.parametrize("value", [None, ""])
    def test_blank_values_pass(self, validator, value) -> None:
        assert len(validator.validate_value(value, Blank())) == 0

    def test_other_values_fail(self, validator) -> None:
        violations = validator.validate_value("foo", Blank())

        assert messages(violations) == ["This value should be blank"]
        assert violations[0].message_parameters == {"{{ value }}": "foo"}


class TestIsTrue:
    @pytest.mark.parametrize("value", [True, 1, "1", None])
    def test_true_values_pass(self, validator, value) -> None:
        assert len(validator.validate_value(value, IsTrue())) == 0

    @pytest.mark.parametrize("value", [False, 0, "0", "foo"])
    def test_other_values_fail(self, validator, value) -> None:
        assert messages(validator.validate_value(value, IsTrue())) == [
            "This value should be true"
        ]


class TestIsFalse:
    @pytest.mark.parametrize("value", [False, 0, "0", None])
    def test_false_values_pass(self, validator, value) -> None:
        assert len(validator.validate_value(value, IsFalse())) == 0

    @pytest.mark.parametrize("value", [True, 1, "foo"])
    def test_other_values_fail(self, validator, value) -> None:
        assert messages(validator.validate_value(value, IsFalse())) == [
            "This value should be false"
        ]


class TestType:
    def test_matching_type_passes(self, validator) -> None:
        assert len(validator.validate_value(3, Type(int))) == 0
        assert len(validator.validate_value(None, Type(int))) == 0

    def test_other_type_fails(self, validator) -> None:
        assert messages(validator.validate_value("3", Type(int))) == [
            "This value should be of type int"
        ]

    def test_tuple_of_types(self, validator) -> None:
        assert len(validator.validate_value(1.5, Type((int, float)))) == 0
        assert messages(validator.validate_value("x", Type((int, float)))) == [
            "This value should be of type int or float"
        ]

    def test_type_option_must_be_a_class(self) -> None:
        with pytest.raises(ConstraintDefinitionError):
            Type("int")


class TestValidatorConstraintTypes:
    """Validators reject constraints they were not written for."""

    @pytest.mark.parametrize(
        "validator_class",
        [
            TypeValidator,
            MinValidator,
            MaxValidator,
            MinLengthValidator,
            MaxLengthValidator,
            RegexValidator,
            UrlValidator,
            ChoiceValidator,
            FileValidator,
            AllValidator,
            ValidValidator,
        ],
    )
    def test_foreign_constraint_raises(self, validator_class) -> None:
        context = Mock(spec=ExecutionContextInterface)

        with pytest.raises(UnexpectedTypeError):
            validator_class().validate("value", NotNull(), context)

        context.add_violation.assert_not_called()
