"""Tests for value classification and record field discovery."""

from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal

import pytest
from pydantic import BaseModel, Field

from structval.validation.inspection import (
    NodeKind,
    RecordField,
    field_tags,
    is_empty,
    iter_entries,
    iter_record_fields,
    kind_of,
)


@dataclass
class Point:
    x: int = field(default=0, metadata=field_tags(validate="min:0"))
    y: int = 0
    _hidden: int = 0


class Named(BaseModel):
    name: str = Field(default="", json_schema_extra=field_tags(json="name,omitempty"))


class TestKindOf:
    """Test node kind classification."""

    @pytest.mark.parametrize("value,kind", [
        (None, NodeKind.NULL),
        ("", NodeKind.STRING),
        (0, NodeKind.NUMBER),
        (1.5, NodeKind.NUMBER),
        (Decimal("2"), NodeKind.NUMBER),
        (True, NodeKind.SCALAR),
        ([], NodeKind.SEQUENCE),
        ((1, 2), NodeKind.SEQUENCE),
        ({1, 2}, NodeKind.SEQUENCE),
        ({}, NodeKind.MAPPING),
        (b"raw", NodeKind.SCALAR),
        (Point(), NodeKind.RECORD),
        (Named(), NodeKind.RECORD),
    ])
    def test_kinds(self, value, kind):
        assert kind_of(value) == kind

    def test_dataclass_type_is_not_record(self):
        assert kind_of(Point) == NodeKind.SCALAR


class TestIsEmpty:
    """Test emptiness rules."""

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        ("", True),
        ([], True),
        ({}, True),
        ("x", False),
        (0, False),
        (False, False),
        (Point(), False),
    ])
    def test_empty(self, value, expected):
        assert is_empty(value, kind_of(value)) is expected


class TestRecordFields:
    """Test exported field discovery."""

    def test_dataclass_fields(self):
        fields = list(iter_record_fields(Point(x=3)))

        assert [f.name for f in fields] == ["x", "y"]
        assert fields[0].value == 3
        assert fields[0].constraint == "min:0"
        assert fields[1].constraint == ""

    def test_pydantic_fields(self):
        fields = list(iter_record_fields(Named()))

        assert [f.name for f in fields] == ["name"]
        assert fields[0].constraint == "omitempty"

    def test_validate_tag_wins_over_json_option(self):
        record_field = RecordField("a", "", validate="min:1", json="a,omitempty")
        assert record_field.constraint == "min:1"

    def test_json_tag_without_omitempty(self):
        assert RecordField("a", "", json="a").constraint == ""

    def test_field_tags(self):
        assert field_tags() == {}
        assert field_tags(validate="min:1", json="a") == {"validate": "min:1", "json": "a"}


class TestIterEntries:
    """Test sequence and mapping entry iteration."""

    def test_sequence_indices(self):
        assert list(iter_entries(["a", "b"], NodeKind.SEQUENCE)) == [(0, "a"), (1, "b")]

    def test_mapping_keys_stringified(self):
        value = OrderedDict([(1, "a"), ("b", "c")])
        assert list(iter_entries(value, NodeKind.MAPPING)) == [("1", "a"), ("b", "c")]
