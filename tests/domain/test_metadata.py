"""Tests for ClassMetadata and MemberMetadata."""

import pytest

from formguard.constraints import All, IsTrue, NotBlank, NotNull
from formguard.domain.constraint import DEFAULT_GROUP
from formguard.domain.exceptions import ConstraintDefinitionError
from formguard.domain.metadata import ClassMetadata, MemberKind, MemberMetadata


class Author:
    def __init__(self, first_name=None, adult=True):
        self.first_name = first_name
        self._adult = adult

    def is_adult(self) -> bool:
        return self._adult


class TestClassMetadata:
    """Tests for declaring constraints."""

    def test_class_name(self) -> None:
        assert ClassMetadata(Author).class_name == "Author"

    def test_add_constraint_adds_class_group(self) -> None:
        metadata = ClassMetadata(Author)
        constraint = NotNull()

        metadata.add_constraint(constraint)

        assert metadata.constraints == [constraint]
        assert constraint.groups == (DEFAULT_GROUP, "Author")

    def test_add_property_constraint(self) -> None:
        metadata = ClassMetadata(Author)
        constraint = NotBlank()

        metadata.add_property_constraint("first_name", constraint)

        members = metadata.get_member_metadata("first_name")
        assert len(members) == 1
        assert members[0].kind is MemberKind.PROPERTY
        assert members[0].constraints == [constraint]
        assert metadata.constrained_members == ["first_name"]
        assert metadata.has_constraints()

    def test_constraints_on_same_property_are_grouped(self) -> None:
        metadata = ClassMetadata(Author)

        metadata.add_property_constraint("first_name", NotNull())
        metadata.add_property_constraint("first_name", NotBlank())

        members = metadata.get_member_metadata("first_name")
        assert len(members) == 1
        assert len(members[0].constraints) == 2

    def test_add_getter_constraint(self) -> None:
        metadata = ClassMetadata(Author)

        metadata.add_getter_constraint("adult", IsTrue())

        member = metadata.get_member_metadata("adult")[0]
        assert member.kind is MemberKind.GETTER

    def test_getter_must_exist(self) -> None:
        with pytest.raises(ConstraintDefinitionError, match="is_name, get_name, has_name"):
            ClassMetadata(Author).add_getter_constraint("name", IsTrue())

    def test_unknown_member(self) -> None:
        metadata = ClassMetadata(Author)

        assert metadata.get_member_metadata("unknown") == []
        assert not metadata.has_constraints()


class TestMergeConstraints:
    """Tests for inheriting constraints."""

    def test_parent_constraints_are_inherited(self) -> None:
        class Writer(Author):
            pass

        parent = ClassMetadata(Author)
        constraint = NotBlank()
        parent.add_property_constraint("first_name", constraint)
        child = ClassMetadata(Writer)

        child.merge_constraints(parent)

        inherited = child.get_member_metadata("first_name")[0].constraints
        assert [type(c) for c in inherited] == [NotBlank]
        assert inherited[0] is not constraint
        assert child.origin_of(inherited[0]) is constraint
        assert inherited[0].groups == (DEFAULT_GROUP, "Author", "Writer")
        assert constraint.groups == (DEFAULT_GROUP, "Author")

    def test_shared_constraints_are_merged_once(self) -> None:
        parent = ClassMetadata(Author)
        parent.add_constraint(NotNull())
        parent.add_property_constraint("first_name", NotBlank())
        child = ClassMetadata(Author)

        child.merge_constraints(parent)
        child.merge_constraints(parent)

        assert len(child.constraints) == 1
        assert len(child.get_member_metadata("first_name")[0].constraints) == 1

    def test_constraints_reached_through_several_bases_are_merged_once(self) -> None:
        class Writer(Author):
            pass

        class Editor(Author):
            pass

        class EditorInChief(Writer, Editor):
            pass

        root = ClassMetadata(Author)
        root.add_property_constraint("first_name", NotBlank())
        writer = ClassMetadata(Writer)
        writer.merge_constraints(root)
        editor = ClassMetadata(Editor)
        editor.merge_constraints(root)
        chief = ClassMetadata(EditorInChief)

        chief.merge_constraints(writer)
        chief.merge_constraints(editor)

        assert len(chief.get_member_metadata("first_name")[0].constraints) == 1

    def test_nested_constraints_are_copied(self) -> None:
        class Writer(Author):
            pass

        parent = ClassMetadata(Author)
        nested = NotBlank()
        parent.add_property_constraint("first_name", All(nested))
        child = ClassMetadata(Writer)

        child.merge_constraints(parent)

        inherited = child.get_member_metadata("first_name")[0].constraints[0]
        assert inherited.constraints[0] is not nested
        assert inherited.constraints[0].in_group("Writer")
        assert not nested.in_group("Writer")


class TestMemberMetadata:
    def test_property_value(self) -> None:
        member = MemberMetadata("first_name", MemberKind.PROPERTY)

        assert member.get_value(Author("Bernhard")) == "Bernhard"

    def test_getter_value(self) -> None:
        member = MemberMetadata("adult", MemberKind.GETTER)

        assert member.get_value(Author(adult=False)) is False
