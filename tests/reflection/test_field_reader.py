"""Tests for reading named fields off record-like values."""

from collections import namedtuple
from dataclasses import dataclass
from typing import NamedTuple

import pytest
from pydantic import BaseModel, ConfigDict, computed_field

from collectify.collections.errors.missing_field_error import MissingFieldError
from collectify.collections.errors.unsupported_element_shape_error import (
    UnsupportedElementShapeError,
)
from collectify.reflection.field_reader import is_record, read_field


class Account(BaseModel):
    first_name: str
    last_name: str

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class LooseAccount(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int


@dataclass
class Order:
    number: int
    total: float


class Coordinate(NamedTuple):
    lat: float
    lng: float


class Plain:
    def __init__(self) -> None:
        self.label = "plain"


class Slotted:
    __slots__ = ("code", "note")

    def __init__(self, code: int) -> None:
        self.code = code


class TestIsRecord:
    """Tests for telling records apart from other values."""

    @pytest.mark.parametrize(
        "value",
        [
            Account(first_name="Ada", last_name="Lovelace"),
            Order(number=1, total=2.0),
            Coordinate(lat=1.0, lng=2.0),
            {"id": 1},
            Plain(),
            Slotted(code=1),
        ],
    )
    def test_records(self, value: object):
        """Tests every supported record shape."""
        assert is_record(value)

    @pytest.mark.parametrize(
        "value", [1, 1.5, "text", b"bytes", [1], (1, 2), {1, 2}, None, Order, len]
    )
    def test_non_records(self, value: object):
        """Tests that scalars, plain containers, classes and callables are not records."""
        assert not is_record(value)


class TestReadField:
    """Tests for read_field."""

    def test_pydantic_declared_field(self):
        """Tests reading a declared pydantic field."""
        account = Account(first_name="Ada", last_name="Lovelace")

        assert read_field(account, "first_name") == "Ada"

    def test_pydantic_computed_field(self):
        """Tests reading a computed pydantic field."""
        account = Account(first_name="Ada", last_name="Lovelace")

        assert read_field(account, "full_name") == "Ada Lovelace"

    def test_pydantic_extra_field(self):
        """Tests reading an extra field stored on a permissive model."""
        account = LooseAccount(id=1, tier="gold")

        assert read_field(account, "tier") == "gold"

    def test_pydantic_methods_are_not_fields(self):
        """Tests that model methods are not mistaken for fields."""
        account = Account(first_name="Ada", last_name="Lovelace")

        with pytest.raises(MissingFieldError):
            read_field(account, "model_dump")

    def test_dataclass_field(self):
        """Tests reading a dataclass field."""
        assert read_field(Order(number=7, total=1.5), "number") == 7

    def test_named_tuple_fields(self):
        """Tests reading fields of typed and untyped named tuples."""
        Pair = namedtuple("Pair", ["left", "right"])

        assert read_field(Coordinate(lat=1.0, lng=2.0), "lng") == 2.0
        assert read_field(Pair(1, 2), "left") == 1

    def test_mapping_key(self):
        """Tests reading a key from a mapping."""
        assert read_field({"id": 3, "name": "Charlie"}, "name") == "Charlie"

    def test_plain_object_attribute(self):
        """Tests reading an instance attribute from a plain object."""
        assert read_field(Plain(), "label") == "plain"

    def test_slotted_object_attribute(self):
        """Tests reading an assigned slot."""
        assert read_field(Slotted(code=5), "code") == 5

    def test_unassigned_slot_is_missing(self):
        """Tests that a declared but unassigned slot counts as missing."""
        with pytest.raises(MissingFieldError):
            read_field(Slotted(code=5), "note")

    @pytest.mark.parametrize(
        "element",
        [
            Account(first_name="Ada", last_name="Lovelace"),
            Order(number=1, total=2.0),
            Coordinate(lat=1.0, lng=2.0),
            {"id": 1},
            Plain(),
        ],
    )
    def test_missing_field(self, element: object):
        """Tests that every record shape reports unknown fields the same way."""
        with pytest.raises(MissingFieldError) as exc_info:
            read_field(element, "unknown")

        assert exc_info.value.field == "unknown"
        assert exc_info.value.element_type is type(element)
        assert "unknown" in str(exc_info.value)

    @pytest.mark.parametrize("element", [42, "text", [1, 2], (1, 2), None])
    def test_unsupported_shape(self, element: object):
        """Tests that non-records cannot be read by field name."""
        with pytest.raises(UnsupportedElementShapeError) as exc_info:
            read_field(element, "anything")

        assert exc_info.value.element_type is type(element)

    def test_missing_field_is_an_attribute_error(self):
        """Tests that MissingFieldError can be caught as an AttributeError."""
        with pytest.raises(AttributeError):
            read_field(Plain(), "nope")

    def test_unsupported_shape_is_a_type_error(self):
        """Tests that UnsupportedElementShapeError can be caught as a TypeError."""
        with pytest.raises(TypeError):
            read_field(3.14, "real")
