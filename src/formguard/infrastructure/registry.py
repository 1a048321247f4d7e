"""
Constraint Validator Registry with Entry Points Discovery.

Resolves the names returned by ``Constraint.validated_by()`` to validator
classes. Built-in validators are always available; external packages can
register validators in their pyproject.toml:

    [project.entry-points."formguard.constraint_validators"]
    UniqueEmailValidator = "mypackage.validators:UniqueEmailValidator"
"""

import logging
from importlib.metadata import entry_points

from formguard.constraints import BUILTIN_VALIDATORS
from formguard.domain.constraint import Constraint
from formguard.domain.exceptions import ConstraintDefinitionError
from formguard.domain.interfaces import (
    ConstraintValidatorFactoryInterface,
    ConstraintValidatorInterface,
)

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "formguard.constraint_validators"


class ConstraintValidatorRegistry:
    """
    Registry for ConstraintValidatorInterface implementations.

    Discovers validators via the 'formguard.constraint_validators' entry point
    group. Uses lazy loading - entry points are only loaded on first access.

    Example usage:
        ConstraintValidatorRegistry.register("UniqueEmailValidator", UniqueEmailValidator)
        validator_class = ConstraintValidatorRegistry.get("UniqueEmailValidator")
    """

    _validators: dict[str, type[ConstraintValidatorInterface]] = {}
    _loaded: bool = False

    @classmethod
    def _load_entry_points(cls) -> None:
        """Load built-ins and entry points (lazy, called once)."""
        if cls._loaded:
            return

        for name, validator_class in BUILTIN_VALIDATORS.items():
            cls._validators.setdefault(name, validator_class)

        for ep in entry_points(group=ENTRY_POINT_GROUP):
            try:
                validator_class = ep.load()
            except Exception as e:
                logger.warning(
                    "Failed to load constraint validator '%s' from entry point: %s",
                    ep.name,
                    e,
                )
                continue
            cls._validators[ep.name] = validator_class

        cls._loaded = True

    @classmethod
    def register(
        cls, name: str, validator_class: type[ConstraintValidatorInterface]
    ) -> None:
        """
        Manually register a validator class.

        Args:
            name: Validator identifier (e.g., "UniqueEmailValidator")
            validator_class: Class implementing ConstraintValidatorInterface
        """
        cls._validators[name] = validator_class

    @classmethod
    def get(cls, name: str) -> type[ConstraintValidatorInterface]:
        """
        Get a validator class by name.

        Raises:
            KeyError: If validator not found
        """
        cls._load_entry_points()
        if name not in cls._validators:
            available = ", ".join(sorted(cls._validators)) or "(none)"
            raise KeyError(
                f"Constraint validator '{name}' not found. "
                f"Available validators: {available}"
            )
        return cls._validators[name]

    @classmethod
    def available(cls) -> list[str]:
        """List available validator names."""
        cls._load_entry_points()
        return list(cls._validators.keys())

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered validators (useful for testing).

        Also resets the loaded flag so built-ins and entry points are reloaded.
        """
        cls._validators.clear()
        cls._loaded = False


class ConstraintValidatorFactory(ConstraintValidatorFactoryInterface):
    """Instantiates constraint validators once and reuses them."""

    def __init__(
        self, registry: type[ConstraintValidatorRegistry] = ConstraintValidatorRegistry
    ):
        self._registry = registry
        self._instances: dict[type, ConstraintValidatorInterface] = {}

    def get_instance(self, constraint: Constraint) -> ConstraintValidatorInterface:
        target = constraint.validated_by()
        if isinstance(target, str):
            try:
                validator_class = self._registry.get(target)
            except KeyError as e:
                raise ConstraintDefinitionError(
                    f"No validator found for constraint {type(constraint).__name__}: "
                    f"{e.args[0]}"
                ) from e
        else:
            validator_class = target

        if validator_class not in self._instances:
            instance = validator_class()
            if not isinstance(instance, ConstraintValidatorInterface):
                raise ConstraintDefinitionError(
                    f"{validator_class.__name__} does not implement "
                    "ConstraintValidatorInterface"
                )
            self._instances[validator_class] = instance
        return self._instances[validator_class]
