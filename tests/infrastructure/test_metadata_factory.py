"""Tests for ClassMetadataFactory and StaticMethodLoader."""

import pytest

from formguard.constraints import MaxLength, NotBlank
from formguard.domain.metadata import ClassMetadata
from formguard.infrastructure.metadata import ClassMetadataFactory, StaticMethodLoader
from formguard.infrastructure.persistence import InMemoryMetadataCache


class Person:
    @classmethod
    def load_validator_metadata(cls, metadata: ClassMetadata) -> None:
        metadata.add_property_constraint("name", NotBlank())


class Employee(Person):
    @classmethod
    def load_validator_metadata(cls, metadata: ClassMetadata) -> None:
        metadata.add_property_constraint("name", MaxLength(20))
        metadata.add_property_constraint("badge", NotBlank())


class Contractor(Person):
    pass


class Plain:
    pass


class PlainHook:
    def load_validator_metadata(self, metadata):
        pass


def constraint_types(metadata: ClassMetadata, member: str) -> list[str]:
    return [
        type(constraint).__name__
        for member_metadata in metadata.get_member_metadata(member)
        for constraint in member_metadata.constraints
    ]


class TestStaticMethodLoader:
    def test_calls_hook(self) -> None:
        metadata = ClassMetadata(Person)

        assert StaticMethodLoader().load_class_metadata(metadata) is True
        assert constraint_types(metadata, "name") == ["NotBlank"]

    def test_class_without_hook(self) -> None:
        assert StaticMethodLoader().load_class_metadata(ClassMetadata(Plain)) is False

    def test_inherited_hook_is_not_called(self) -> None:
        metadata = ClassMetadata(Contractor)

        assert StaticMethodLoader().load_class_metadata(metadata) is False
        assert not metadata.has_constraints()

    def test_plain_function_hook_raises(self) -> None:
        with pytest.raises(TypeError, match="must be a classmethod"):
            StaticMethodLoader().load_class_metadata(ClassMetadata(PlainHook))


class TestClassMetadataFactory:
    """Tests for loading, merging and caching metadata."""

    def test_loads_metadata(self) -> None:
        metadata = ClassMetadataFactory().get_class_metadata(Person)

        assert metadata.cls is Person
        assert constraint_types(metadata, "name") == ["NotBlank"]

    def test_merges_base_class_constraints(self) -> None:
        metadata = ClassMetadataFactory().get_class_metadata(Employee)

        assert constraint_types(metadata, "name") == ["NotBlank", "MaxLength"]
        assert constraint_types(metadata, "badge") == ["NotBlank"]

    def test_inherits_without_own_hook(self) -> None:
        metadata = ClassMetadataFactory().get_class_metadata(Contractor)

        assert constraint_types(metadata, "name") == ["NotBlank"]

    def test_inherited_constraints_join_subclass_group(self) -> None:
        metadata = ClassMetadataFactory().get_class_metadata(Contractor)

        constraint = metadata.get_member_metadata("name")[0].constraints[0]

        assert constraint.in_group("Contractor")
        assert constraint.in_group("Person")

    def test_base_class_constraints_keep_their_groups(self) -> None:
        factory = ClassMetadataFactory()
        factory.get_class_metadata(Contractor)

        base = factory.get_class_metadata(Person)

        constraint = base.get_member_metadata("name")[0].constraints[0]
        assert not constraint.in_group("Contractor")

    def test_metadata_is_cached(self) -> None:
        factory = ClassMetadataFactory()

        assert factory.get_class_metadata(Person) is factory.get_class_metadata(Person)

    def test_uses_given_cache(self) -> None:
        cache = InMemoryMetadataCache()
        factory = ClassMetadataFactory(cache=cache)

        metadata = factory.get_class_metadata(Employee)

        assert cache.read(Employee) is metadata
        assert cache.has(Person)

    def test_class_without_constraints(self) -> None:
        metadata = ClassMetadataFactory().get_class_metadata(Plain)

        assert not metadata.has_constraints()
