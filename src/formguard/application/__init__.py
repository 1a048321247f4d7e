"""
Application layer for formguard.

Contains the form tree (fields, groups, forms) and the validator that walks
object graphs.
"""

from formguard.application.field import Field, HiddenField
from formguard.application.field_group import FieldGroup
from formguard.application.field_types import (
    CheckboxField,
    ChoiceField,
    DateField,
    FileField,
    IntegerField,
    NumberField,
)
from formguard.application.form import Form
from formguard.application.validator import ExecutionContext, GraphWalker, Validator

__all__ = [
    "CheckboxField",
    "ChoiceField",
    "DateField",
    "ExecutionContext",
    "Field",
    "FieldGroup",
    "FileField",
    "Form",
    "GraphWalker",
    "HiddenField",
    "IntegerField",
    "NumberField",
    "Validator",
]
