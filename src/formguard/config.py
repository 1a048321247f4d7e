"""Form defaults and the ways to load them.

Defaults apply to forms created after they are set; see
``Form.configure_defaults``. Sources, in the order applications usually
layer them: built-in values, a JSON file, then environment variables.
"""

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from formguard.domain.exceptions import ConfigurationError
from formguard.schemas import validate_form_config

ENV_PREFIX = "FORMGUARD_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class FormConfig:
    """Defaults applied to newly created forms."""

    csrf_protection: bool = False
    csrf_field_name: str = "_token"
    csrf_secret: str | None = None  # None derives a secret from the host
    locale: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.csrf_protection, bool):
            raise ConfigurationError("csrf_protection must be a boolean")
        if not isinstance(self.csrf_field_name, str) or not self.csrf_field_name:
            raise ConfigurationError("csrf_field_name must be a non-empty string")
        if self.csrf_secret is not None and not isinstance(self.csrf_secret, str):
            raise ConfigurationError("csrf_secret must be a string")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown form config keys: {', '.join(sorted(unknown))}"
            )
        return cls(**dict(data))

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        base: "FormConfig | None" = None,
    ) -> "FormConfig":
        """Overlay ``FORMGUARD_*`` environment variables on ``base``.

        Args:
            environ: Variables to read (os.environ if None)
            base: Config to override (built-in defaults if None)
        """
        environ = os.environ if environ is None else environ
        config = base or cls()
        overrides: dict[str, Any] = {}

        protection = environ.get(f"{ENV_PREFIX}CSRF_PROTECTION")
        if protection is not None:
            overrides["csrf_protection"] = _parse_bool(protection)
        for name in ("csrf_field_name", "csrf_secret", "locale"):
            value = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None:
                overrides[name] = value

        return replace(config, **overrides) if overrides else config


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"Invalid boolean value: {value!r}")


def load_form_config(config_file: Path) -> FormConfig:
    """Load form defaults from a JSON file.

    Args:
        config_file: Path to a JSON object with FormConfig keys.

    Returns:
        The parsed FormConfig.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigurationError: If the file is not valid JSON.
        jsonschema.ValidationError: If the file doesn't match
            form_config.schema.json.
    """
    if not config_file.exists():
        raise FileNotFoundError(f"Form config not found: {config_file}")
    try:
        data = json.loads(config_file.read_text())
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_file}: {e}") from e
    validate_form_config(data)
    return FormConfig.from_mapping(data)
