"""
Tests for typewarden.schema.
"""

import pytest

from typewarden import (
    DescriptorError,
    Enums,
    Irreducible,
    ListOf,
    Nil,
    String,
    Struct,
    TupleOf,
    check,
    to_descriptor,
)


class TestToDescriptor:
    def test_passthrough(self):
        assert to_descriptor(String) is String
        assert to_descriptor(str) is str

    def test_none(self):
        assert to_descriptor(None) is Nil

    def test_dict(self):
        d = to_descriptor({"name": str, "tags": [str]})
        assert isinstance(d, Struct)
        assert d.props["name"] is str
        assert isinstance(d.props["tags"], ListOf)

    def test_tuple(self):
        d = to_descriptor((str, int))
        assert isinstance(d, TupleOf)
        assert d.types == (str, int)

    def test_set(self):
        d = to_descriptor({"a", "b"})
        assert isinstance(d, Enums)
        assert set(d.values) == {"a", "b"}

    def test_callable(self):
        d = to_descriptor(lambda x: x > 0)
        assert isinstance(d, Irreducible)
        assert d.is_(5)

    def test_bad_list(self):
        with pytest.raises(DescriptorError):
            to_descriptor([])
        with pytest.raises(DescriptorError):
            to_descriptor([str, int])

    def test_unsupported(self):
        with pytest.raises(DescriptorError):
            to_descriptor(5)

    def test_empty_tuple(self):
        with pytest.raises(DescriptorError):
            to_descriptor(())


class TestCheck:
    def test_simple_schema(self):
        schema = {"name": str, "age": int}
        assert check({"name": "Alice", "age": 30}, schema).is_valid()
        result = check({"name": 123, "age": 30}, schema)
        assert result.first_error().path == ("name",)

    def test_nested_schema(self):
        schema = {"user": {"name": str, "email": None}, "tags": [str]}
        result = check({"user": {"name": "Alice"}, "tags": ["a", 1]}, schema)
        assert [e.path for e in result.errors] == [("tags", 1)]

    def test_options_passed_through(self):
        result = check({"name": "Alice", "extra": 1}, {"name": str}, strict=True)
        assert result.first_error().path == ("extra",)
