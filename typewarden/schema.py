"""
Schema shorthand for typewarden.

Provides to_descriptor(), which turns dict/list/tuple/set shorthand into
descriptors, and check(), which validates against such a shorthand.
"""

from __future__ import annotations

from typing import Any

from .combinators import enums, irreducible, list_of, struct, tuple_of
from .descriptors import Type
from .engine import validate
from .exceptions import DescriptorError
from .irreducibles import Nil
from .result import ValidationResult


def to_descriptor(schema: Any) -> Any:
    """
    Coerce a shorthand schema to a descriptor.

    Conversion rules:
        descriptor -> pass through
        type -> nominal class (isinstance check)
        None -> Nil
        dict -> anonymous struct with recursive conversion
        [T] -> list of T
        (A, B, ...) -> tuple of A, B, ...
        set / frozenset -> enums of its members
        Callable -> irreducible using it as predicate

    Usage:
        Point = to_descriptor({"x": int, "y": int})
        Tags = to_descriptor([str])
    """
    if isinstance(schema, (Type, type)):
        return schema

    if schema is None:
        return Nil

    if isinstance(schema, dict):
        return struct({k: to_descriptor(v) for k, v in schema.items()})

    if isinstance(schema, list):
        if len(schema) != 1:
            raise DescriptorError(
                f"List shorthand takes exactly one item type, got {len(schema)}"
            )
        return list_of(to_descriptor(schema[0]))

    if isinstance(schema, tuple):
        if not schema:
            raise DescriptorError("Empty tuple cannot be converted to a descriptor")
        return tuple_of(to_descriptor(t) for t in schema)

    if isinstance(schema, (set, frozenset)):
        return enums(sorted(schema, key=repr))

    if callable(schema):
        name = getattr(schema, "__name__", None) or type(schema).__name__
        return irreducible(name, schema)

    raise DescriptorError(f"Cannot convert {type(schema).__name__} to a descriptor")


def check(value: Any, schema: Any, **options: Any) -> ValidationResult:
    """
    Validate `value` against a shorthand schema.

    Usage:
        result = check({"name": "Alice", "age": 30}, {"name": str, "age": int})
    """
    return validate(value, to_descriptor(schema), **options)
