"""Tests for PropertyPath parsing, reading and writing."""

from dataclasses import dataclass, field

import pytest

from formguard.domain.exceptions import (
    InvalidPropertyPathError,
    PropertyAccessDeniedError,
)
from formguard.domain.property_path import PropertyPath


@dataclass
class Address:
    street: str | None = None


@dataclass
class Author:
    first_name: str | None = None
    addresses: list[Address] = field(default_factory=list)
    _secret: str = "hidden"


class Account:
    """Object exposing values through accessor methods."""

    def __init__(self):
        self._active = True
        self._email = "old@example.com"

    def is_active(self) -> bool:
        return self._active

    def get_email(self) -> str:
        return self._email

    def set_email(self, email: str) -> None:
        self._email = email


class TestParsing:
    """Tests for turning strings into elements."""

    def test_simple_path(self) -> None:
        path = PropertyPath("first_name")

        assert path.elements == ("first_name",)
        assert path.is_property(0)

    def test_nested_path(self) -> None:
        path = PropertyPath("author.addresses[0].street")

        assert path.elements == ("author", "addresses", "0", "street")
        assert [path.is_index(i) for i in range(4)] == [False, False, True, False]
        assert len(path) == 4
        assert list(path) == ["author", "addresses", "0", "street"]

    def test_leading_index(self) -> None:
        path = PropertyPath("[email].message")

        assert path.first == "email"
        assert path.is_index(0)

    @pytest.mark.parametrize(
        "invalid", ["", ".name", "name..other", "name[", "name[]", "name]", "a[0]b"]
    )
    def test_invalid_paths(self, invalid) -> None:
        with pytest.raises(InvalidPropertyPathError):
            PropertyPath(invalid)

    def test_invalid_path_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            PropertyPath("name..other")

    def test_string_conversion(self) -> None:
        path = PropertyPath("fields[email].transformation_successful")

        assert str(path) == "fields[email].transformation_successful"
        assert repr(path) == "PropertyPath('fields[email].transformation_successful')"

    def test_equality_and_hash(self) -> None:
        assert PropertyPath("a.b") == PropertyPath("a.b")
        assert PropertyPath("a.b") == "a.b"
        assert PropertyPath("a.b") != PropertyPath("a.c")
        assert hash(PropertyPath("a.b")) == hash(PropertyPath("a.b"))


class TestTail:
    def test_tail_drops_first_element(self) -> None:
        assert PropertyPath("data.address.street").tail() == "address.street"

    def test_tail_of_index_path(self) -> None:
        tail = PropertyPath("fields[address].fields[street].valid").tail(2)

        assert tail == "fields[street].valid"
        assert tail.first == "fields"

    def test_tail_starting_with_index(self) -> None:
        tail = PropertyPath("lines[0].label").tail()

        assert str(tail) == "[0].label"
        assert tail.is_index(0)

    def test_tail_of_last_element_is_none(self) -> None:
        assert PropertyPath("name").tail() is None
        assert PropertyPath("a.b").tail(5) is None


class TestGetValue:
    """Tests for reading values."""

    def test_reads_attributes(self) -> None:
        assert PropertyPath("first_name").get_value(Author("Bernhard")) == "Bernhard"

    def test_reads_nested_indexes(self) -> None:
        author = Author(addresses=[Address("Main"), Address("Side")])

        assert PropertyPath("addresses[1].street").get_value(author) == "Side"

    def test_out_of_range_index_is_none(self) -> None:
        assert PropertyPath("addresses[3].street").get_value(Author()) is None

    def test_reads_mappings(self) -> None:
        data = {"author": {"first_name": "Bernhard"}}

        assert PropertyPath("author.first_name").get_value(data) == "Bernhard"
        assert PropertyPath("author[first_name]").get_value(data) == "Bernhard"
        assert PropertyPath("author.last_name").get_value(data) is None

    def test_none_along_the_way_is_none(self) -> None:
        assert PropertyPath("author.first_name").get_value({"author": None}) is None

    def test_reads_accessors(self) -> None:
        account = Account()

        assert PropertyPath("active").get_value(account) is True
        assert PropertyPath("email").get_value(account) == "old@example.com"

    def test_private_properties_are_denied(self) -> None:
        with pytest.raises(PropertyAccessDeniedError):
            PropertyPath("_secret").get_value(Author())

    def test_missing_property_raises(self) -> None:
        with pytest.raises(InvalidPropertyPathError, match="does not exist"):
            PropertyPath("last_name").get_value(Author())


class TestSetValue:
    """Tests for writing values."""

    def test_sets_attributes(self) -> None:
        author = Author()

        PropertyPath("first_name").set_value(author, "Bernhard")

        assert author.first_name == "Bernhard"

    def test_sets_nested_values(self) -> None:
        author = Author(addresses=[Address()])

        PropertyPath("addresses[0].street").set_value(author, "Main")

        assert author.addresses[0].street == "Main"

    def test_sets_list_items(self) -> None:
        author = Author(addresses=[Address("Old")])

        PropertyPath("addresses[0]").set_value(author, Address("New"))

        assert author.addresses == [Address("New")]

    def test_sets_mapping_items(self) -> None:
        data = {"author": {}}

        PropertyPath("author.first_name").set_value(data, "Bernhard")

        assert data == {"author": {"first_name": "Bernhard"}}

    def test_uses_setters(self) -> None:
        account = Account()

        PropertyPath("email").set_value(account, "new@example.com")

        assert account.get_email() == "new@example.com"

    def test_missing_intermediate_raises(self) -> None:
        with pytest.raises(InvalidPropertyPathError):
            PropertyPath("author.first_name").set_value({"author": None}, "x")

    def test_private_properties_are_denied(self) -> None:
        with pytest.raises(PropertyAccessDeniedError):
            PropertyPath("_secret").set_value(Author(), "x")

    def test_read_only_properties_raise(self) -> None:
        class ReadOnly:
            @property
            def name(self):
                return "fixed"

        with pytest.raises(InvalidPropertyPathError, match="not writable"):
            PropertyPath("name").set_value(ReadOnly(), "x")

    def test_index_one_past_the_end_appends(self) -> None:
        author = Author()

        PropertyPath("addresses[0]").set_value(author, Address("Main"))

        assert author.addresses == [Address("Main")]

    def test_out_of_range_index_raises(self) -> None:
        with pytest.raises(InvalidPropertyPathError, match="out of range"):
            PropertyPath("addresses[2]").set_value(Author(), Address("Main"))

    def test_non_integer_list_index_raises(self) -> None:
        with pytest.raises(InvalidPropertyPathError, match="is not an integer"):
            PropertyPath("addresses[first]").set_value(Author(), Address("Main"))
