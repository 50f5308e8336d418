"""
Tests for typewarden.descriptors and typewarden.combinators.
"""

import pytest

from typewarden import (
    Any,
    DescriptorError,
    Kind,
    Nil,
    Number,
    String,
    dict_of,
    enums,
    enums_of,
    interface,
    intersection,
    irreducible,
    list_of,
    maybe,
    refinement,
    struct,
    tuple_of,
    union,
)
from typewarden.descriptors import kind_of


class TestKinds:
    def test_kind_tags(self):
        assert String.kind is Kind.IRREDUCIBLE
        assert enums_of("a b").kind is Kind.ENUMS
        assert struct({"x": Number}).kind is Kind.STRUCT
        assert interface({"x": Number}).kind is Kind.INTERFACE
        assert maybe(String).kind is Kind.MAYBE
        assert refinement(String, bool).kind is Kind.SUBTYPE
        assert list_of(String).kind is Kind.LIST
        assert tuple_of([String]).kind is Kind.TUPLE
        assert dict_of(String, Number).kind is Kind.DICT
        assert union([String, Number]).kind is Kind.UNION
        assert intersection([String, Number]).kind is Kind.INTERSECTION
        assert kind_of(int) is Kind.CLASS

    def test_kind_of_rejects_non_descriptors(self):
        with pytest.raises(DescriptorError):
            kind_of("String")


class TestDisplayNames:
    def test_default_names(self):
        assert list_of(Number).display_name == "Array<Number>"
        assert maybe(String).display_name == "?String"
        assert struct({"x": Number, "y": Number}).display_name == "{x: Number, y: Number}"
        assert tuple_of([String, Number]).display_name == "[String, Number]"
        assert dict_of(String, Number).display_name == "{[key: String]: Number}"
        assert union([String, Number]).display_name == "String | Number"
        assert intersection([String, Number]).display_name == "String & Number"
        assert enums([1, 2]).display_name == "1 | 2"

    def test_refinement_name_uses_predicate(self):
        def is_short(s):
            return len(s) < 3

        assert refinement(String, is_short).display_name == "{String | is_short}"

    def test_explicit_name(self):
        assert list_of(String, "Tags").display_name == "Tags"
        assert str(list_of(String, "Tags")) == "Tags"


class TestMembership:
    def test_is(self):
        Point = struct({"x": Number}, "Point")
        assert Point.is_(Point.instantiate({"x": 1}))
        assert not Point.is_({"x": 1})
        assert interface({"x": Number}).is_({"x": 1})
        assert not interface({"x": Number}, strict=True).is_({"x": 1, "y": 2})
        assert maybe(String).is_(None)
        assert list_of(Number).is_([1, 2])
        assert not list_of(Number).is_([1, "a"])
        assert tuple_of([String, Number]).is_(("a", 1))
        assert not tuple_of([String, Number]).is_(("a",))
        assert dict_of(String, Number).is_({"a": 1})
        assert union([String, Number]).is_(1)
        assert not intersection([String, refinement(String, bool)]).is_("")
        assert Any.is_(object())
        assert Nil.is_(None)

    def test_enums_from_mapping(self):
        Country = enums({"IT": "Italy", "US": "United States"}, "Country")
        assert Country.values == ("IT", "US")
        assert Country.is_("IT")
        assert not Country.is_("Italy")


class TestCombinators:
    def test_maybe_is_idempotent(self):
        m = maybe(String)
        assert maybe(m) is m

    def test_struct_props_are_read_only(self):
        Point = struct({"x": Number})
        with pytest.raises(TypeError):
            Point.props["y"] = Number

    def test_struct_model_name(self):
        assert struct({"x": Number}, "Point").model.__name__ == "Point"

    def test_enums_of_string(self):
        assert enums_of("IT US").values == ("IT", "US")

    def test_enums_rejects_string(self):
        with pytest.raises(DescriptorError):
            enums("IT US")


class TestConstructionErrors:
    def test_bad_prop_type(self):
        with pytest.raises(DescriptorError):
            struct({"x": 5})

    def test_bad_prop_name(self):
        with pytest.raises(DescriptorError):
            struct({"_x": Number})
        with pytest.raises(DescriptorError):
            struct({1: Number})

    @pytest.mark.parametrize(
        "name", ["model_config", "model_fields", "json", "copy", "dict", "schema", "validate"]
    )
    def test_prop_name_reserved_by_model(self, name):
        with pytest.raises(DescriptorError):
            struct({name: String})

    def test_bad_predicate(self):
        with pytest.raises(DescriptorError):
            refinement(String, "not callable")
        with pytest.raises(DescriptorError):
            irreducible("X", None)

    def test_irreducible_needs_name(self):
        with pytest.raises(DescriptorError):
            irreducible("", bool)

    def test_union_needs_two_members(self):
        with pytest.raises(DescriptorError):
            union([String])

    def test_empty_enums(self):
        with pytest.raises(DescriptorError):
            enums([])

    def test_bad_member(self):
        with pytest.raises(DescriptorError):
            list_of("String")
        with pytest.raises(DescriptorError):
            intersection([String, 1])

    def test_bad_message_hook(self):
        with pytest.raises(DescriptorError):
            String.with_message_hook("nope")
