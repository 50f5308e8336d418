"""
Factory functions for building type descriptors.

Each returns one of the frozen descriptor dataclasses.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from .descriptors import (
    DictOf,
    Enums,
    Interface,
    Intersection,
    Irreducible,
    ListOf,
    Maybe,
    Refinement,
    Struct,
    TupleOf,
    Union,
    is_member,
)
from .exceptions import DescriptorError
from .types import Predicate


def irreducible(name: str, predicate: Predicate) -> Irreducible:
    """
    Define a primitive type by its membership predicate.

    Usage:
        Positive = irreducible("Positive", lambda x: isinstance(x, int) and x > 0)
    """
    return Irreducible(name=name, predicate=predicate)


def enums(values: Mapping[Any, Any] | Iterable[Any], name: str | None = None) -> Enums:
    """
    Finite set of values. For a mapping, its keys are the allowed values.

    Usage:
        enums({"IT": "Italy", "US": "United States"}, "Country")
        enums([1, 2, 3])
    """
    if isinstance(values, str):
        raise DescriptorError("Use enums_of() to build enums from a string")
    if isinstance(values, Mapping):
        return Enums(tuple(values.keys()), name=name)
    return Enums(tuple(values), name=name)


def enums_of(values: str | Iterable[Any], name: str | None = None) -> Enums:
    """
    Enums from a space separated string or an iterable.

    Usage:
        enums_of("IT US", "Country")
    """
    if isinstance(values, str):
        return Enums(tuple(values.split()), name=name)
    return enums(values, name)


def struct(
    props: Mapping[str, Any],
    name: str | None = None,
    *,
    strict: bool = False,
    default_props: Mapping[str, Any] | None = None,
) -> Struct:
    """
    Nominal record type materialized as a pydantic model instance.

    Usage:
        Point = struct({"x": Number, "y": Number}, "Point")
        Point = struct({"x": Number, "y": Number}, default_props={"x": 0})
    """
    return Struct(props, strict, default_props, name=name)


def interface(
    props: Mapping[str, Any], name: str | None = None, *, strict: bool = False
) -> Interface:
    """
    Duck-typed record; valid values become plain dicts of the declared props.

    Usage:
        Serializable = interface({"serialize": Function}, "Serializable")
    """
    return Interface(props, strict, name=name)


def maybe(type: Any, name: str | None = None) -> Maybe:
    """
    Allow None, validate against `type` otherwise.

    Maybe of a maybe is the same type.
    """
    if isinstance(type, Maybe) and name is None:
        return type
    return Maybe(type, name=name)


def refinement(type: Any, predicate: Predicate, name: str | None = None) -> Refinement:
    """
    Narrow `type` with an additional predicate.

    Usage:
        URL = refinement(String, lambda s: s.startswith("http://"), "URL")
    """
    return Refinement(type, predicate, name=name)


subtype = refinement


def list_of(type: Any, name: str | None = None) -> ListOf:
    """Homogeneous list."""
    return ListOf(type, name=name)


def tuple_of(types: Iterable[Any], name: str | None = None) -> TupleOf:
    """Fixed-length sequence, one type per position."""
    return TupleOf(tuple(types), name=name)


def dict_of(domain: Any, codomain: Any, name: str | None = None) -> DictOf:
    """Mapping with typed keys and values."""
    return DictOf(domain, codomain, name=name)


def default_dispatch(types: tuple[Any, ...]) -> Callable[[Any], Any]:
    """Dispatcher choosing the first member whose membership test holds."""

    def dispatch(value: Any) -> Any:
        for t in types:
            if is_member(value, t):
                return t
        return None

    return dispatch


def union(
    types: Iterable[Any],
    name: str | None = None,
    dispatch: Callable[[Any], Any] | None = None,
) -> Union:
    """
    Alternative between member types.

    Without `dispatch`, a value goes to the first member whose `is_()`
    accepts it. Struct members only accept their own instances that way, so
    unions of structs over plain dicts usually need an explicit dispatcher.

    Usage:
        Shape = union([Circle, Square], "Shape",
                      dispatch=lambda v: Circle if "radius" in v else Square)
    """
    types = tuple(types)
    if dispatch is None:
        dispatch = default_dispatch(types)
    return Union(types, dispatch, name=name)


def intersection(types: Iterable[Any], name: str | None = None) -> Intersection:
    """
    Value must satisfy every member type.

    Usage:
        MinMax = intersection([MinLength3, MaxLength5], "MinMax")
    """
    return Intersection(tuple(types), name=name)
