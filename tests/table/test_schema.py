"""Tests for field and schema definitions."""

from __future__ import annotations

import pytest

from insertgen import field, schema
from insertgen.table.schema import Field, Schema
from insertgen.utils.exceptions import SchemaError


def test_field_creation():
    f = field("id", lambda r: r["id"])
    assert f.name == "id"
    assert f.has_projector
    assert f.project({"id": 7}) == 7


def test_field_without_projector():
    f = field("note")
    assert not f.has_projector
    with pytest.raises(SchemaError, match="no projector"):
        f.project(None)


@pytest.mark.parametrize("name", ["", None, 3])
def test_field_name_required(name):
    with pytest.raises(SchemaError, match="non-empty string"):
        Field(name)  # type: ignore[arg-type]


def test_field_projector_must_be_callable():
    with pytest.raises(SchemaError, match="not callable"):
        Field("id", projector="id")  # type: ignore[arg-type]


def test_schema_preserves_order():
    s = schema(field("b"), field("a"), field("c"))
    assert s.names == ["b", "a", "c"]
    assert len(s) == 3
    assert isinstance(s.fields, tuple)


def test_schema_rejects_non_fields():
    with pytest.raises(SchemaError, match="Field instances"):
        Schema(["id"])  # type: ignore[list-item]


def test_schema_from_mapping():
    s = Schema.from_mapping({"id": lambda r: r[0], "note": None})
    assert s.names == ["id", "note"]
    assert s.fields[0].project((5,)) == 5
    assert not s.fields[1].has_projector


def test_empty_schema():
    assert len(Schema()) == 0
    assert schema().names == []
