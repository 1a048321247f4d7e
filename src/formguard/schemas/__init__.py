"""JSON Schema definitions for formguard configuration files.

Schemas:
    - form_config.schema.json: Form defaults (CSRF protection, locale)

Usage:
    from formguard.schemas import validate_form_config

    with open("formguard.json") as f:
        data = json.load(f)
    validate_form_config(data)  # Raises jsonschema.ValidationError if invalid
"""

import json
from importlib.resources import files
from typing import Any

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    schema_text = files("formguard.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_form_config_schema() -> dict[str, Any]:
    """Get the form_config.json schema."""
    return _load_schema("form_config.schema.json")


def validate_form_config(data: Any) -> None:
    """Validate form defaults against the schema.

    Args:
        data: Parsed JSON document

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_form_config_schema())
