"""
Form: the root of a field tree.

Binds submitted data to a domain object, validates the result and maps the
violations back onto the fields. Optionally protects submissions against
cross-site request forgery with a token in a hidden field.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any, ClassVar

from formguard.application.field import HiddenField
from formguard.application.field_group import FieldGroup
from formguard.config import FormConfig
from formguard.constraints import IsTrue, Valid
from formguard.domain import csrf
from formguard.domain.constraint import ANY_GROUP
from formguard.domain.exceptions import InvalidArgumentError
from formguard.domain.interfaces import ValidatorInterface
from formguard.domain.metadata import ClassMetadata
from formguard.domain.models import (
    ConstraintViolationList,
    ErrorType,
    FieldError,
)
from formguard.domain.property_path import PropertyPath

logger = logging.getLogger(__name__)

CSRF_ERROR_MESSAGE = "The CSRF token is invalid. Please try to resubmit the form"


def merge_files(data: Any, files: Mapping[str, Any]) -> Any:
    """Deep-merge uploaded files over submitted values.

    An empty submission (None or "") counts as an empty mapping.
    """
    if files and (data is None or data == ""):
        data = {}
    if not isinstance(data, Mapping):
        return data
    merged = dict(data)
    for key, value in files.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_files(current, value)
        else:
            merged[key] = value
    return merged


class Form(FieldGroup):
    """
    Root field group bound to a data object.

    Subclasses add their fields in ``configure()``, which runs after the data
    object has been set:

        class AuthorForm(Form):
            def configure(self):
                self.add(Field("first_name"))

    Args:
        name: Form name, used as prefix of the client-side field names
        data: Object (or mapping) to read from and write to
        validator: Validates the form after binding
        csrf_context: Per-user value mixed into the CSRF token (e.g. session id)
        **options: Options of FieldGroup
    """

    _defaults: ClassVar[FormConfig] = FormConfig()

    def __init__(
        self,
        name: str,
        data: Any = None,
        validator: ValidatorInterface | None = None,
        *,
        csrf_context: str | None = None,
        **options: Any,
    ):
        defaults = Form.get_defaults()
        self._validator = validator
        self._validation_groups: list[str] | None = None
        self._csrf_field_name = defaults.csrf_field_name
        self._csrf_secret = (
            defaults.csrf_secret
            if defaults.csrf_secret is not None
            else csrf.default_csrf_secret()
        )
        self._csrf_context = csrf_context or ""
        options.setdefault("locale", defaults.locale)

        super().__init__(name, data=data, **options)

        if defaults.csrf_protection:
            self.enable_csrf_protection()

    @classmethod
    def load_validator_metadata(cls, metadata: ClassMetadata) -> None:
        metadata.add_property_constraint("data", Valid())
        metadata.add_getter_constraint(
            "csrf_token_valid",
            IsTrue(message=CSRF_ERROR_MESSAGE, groups=ANY_GROUP),
        )

    # -------------------------------------------------------------------------
    # Defaults for new forms
    # -------------------------------------------------------------------------

    @staticmethod
    def get_defaults() -> FormConfig:
        return Form._defaults

    @staticmethod
    def configure_defaults(config: FormConfig) -> None:
        Form._defaults = config

    @staticmethod
    def reset_defaults() -> None:
        Form._defaults = FormConfig()

    @staticmethod
    def enable_default_csrf_protection() -> None:
        Form._defaults = replace(Form._defaults, csrf_protection=True)

    @staticmethod
    def disable_default_csrf_protection() -> None:
        Form._defaults = replace(Form._defaults, csrf_protection=False)

    @staticmethod
    def set_default_csrf_secret(secret: str | None) -> None:
        Form._defaults = replace(Form._defaults, csrf_secret=secret)

    @staticmethod
    def set_default_csrf_field_name(name: str) -> None:
        Form._defaults = replace(Form._defaults, csrf_field_name=name)

    @staticmethod
    def set_default_locale(locale: str | None) -> None:
        Form._defaults = replace(Form._defaults, locale=locale)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @property
    def validator(self) -> ValidatorInterface | None:
        return self._validator

    @property
    def validation_groups(self) -> list[str] | None:
        if self._validation_groups is None:
            return None
        return list(self._validation_groups)

    def set_validation_groups(self, groups: Iterable[str] | str | None) -> None:
        if groups is None:
            self._validation_groups = None
        elif isinstance(groups, str):
            self._validation_groups = [groups]
        else:
            self._validation_groups = list(groups)

    def bind(
        self,
        tainted_data: Any,
        tainted_files: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Bind submitted values and uploaded files, then validate.

        Args:
            tainted_data: Submitted values keyed by field key
            tainted_files: Uploaded files keyed like ``tainted_data``. Required
                for multipart forms without a parent; a parent form converts
                files for its children.

        Raises:
            InvalidArgumentError: If a multipart root form gets no files
            UnexpectedTypeError: If ``tainted_data`` is not a mapping
        """
        if tainted_files is None:
            if self.is_multipart() and self.parent is None:
                raise InvalidArgumentError(
                    "You must pass the uploaded files as second argument "
                    "when binding a multipart form"
                )
            tainted_files = {}

        super().bind(merge_files(tainted_data, tainted_files))

        if self._validator is None:
            logger.debug("Form '%s' has no validator; skipping validation", self.key)
            return

        violations = self._validator.validate(self, self._validation_groups)
        self._map_violations(violations)
        logger.debug(
            "Bound form '%s' (groups=%s): %d violation(s)",
            self.key,
            self._validation_groups,
            len(violations),
        )

    def _map_violations(self, violations: ConstraintViolationList) -> None:
        for violation in violations:
            path = (
                PropertyPath(violation.property_path)
                if violation.property_path
                else None
            )
            error_type = ErrorType.FIELD
            if path is not None and path.first == "data" and path.is_property(0):
                error_type = ErrorType.DATA
                path = path.tail()
            self.add_error(
                FieldError(violation.message_template, violation.message_parameters),
                path,
                error_type,
            )

    # -------------------------------------------------------------------------
    # CSRF protection
    # -------------------------------------------------------------------------

    def is_csrf_protected(self) -> bool:
        return self.has(self._csrf_field_name)

    def enable_csrf_protection(self) -> None:
        if not self.is_csrf_protected():
            self.add(
                HiddenField(
                    self._csrf_field_name, property_path=None, data=self.csrf_token
                )
            )

    def disable_csrf_protection(self) -> None:
        if self.is_csrf_protected():
            self.remove(self._csrf_field_name)

    @property
    def csrf_field_name(self) -> str:
        return self._csrf_field_name

    def set_csrf_field_name(self, name: str) -> None:
        protected = self.is_csrf_protected()
        if protected:
            self.disable_csrf_protection()
        self._csrf_field_name = name
        if protected:
            self.enable_csrf_protection()

    @property
    def csrf_secret(self) -> str:
        return self._csrf_secret

    def set_csrf_secret(self, secret: str) -> None:
        self._csrf_secret = secret
        if self.is_csrf_protected():
            self.get(self._csrf_field_name).set_data(self.csrf_token)

    @property
    def csrf_token(self) -> str:
        """Token expected back from the client."""
        return csrf.generate_csrf_token(
            self._csrf_secret, self._csrf_intention(), self._csrf_context
        )

    def _csrf_intention(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}:{self.key}"

    def is_csrf_token_valid(self) -> bool:
        """True if protection is disabled or the submitted token matches."""
        if not self.is_csrf_protected():
            return True
        submitted = self.get(self._csrf_field_name).displayed_data
        valid = csrf.is_csrf_token_valid(
            submitted, self._csrf_secret, self._csrf_intention(), self._csrf_context
        )
        if not valid:
            logger.warning("Invalid CSRF token submitted to form '%s'", self.key)
        return valid
