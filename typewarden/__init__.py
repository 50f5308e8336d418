"""
typewarden - validate values against structural type descriptors.

Usage:
    from typewarden import Number, String, list_of, struct, validate

    Point = struct({"x": Number, "y": Number}, "Point")

    result = validate({"x": 0, "y": "a"}, Point)
    result.is_valid()             # False
    result.first_error().path     # ("y",)

    result = validate([{"x": 0, "y": 0}], list_of(Point))
    result.value[0]               # Point instance
"""

import logging

from .combinators import (
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
    subtype,
    tuple_of,
    union,
)
from .context import configure, get_fail_hook, validation_context
from .descriptors import (
    DictOf,
    Enums,
    Interface,
    Intersection,
    Irreducible,
    Kind,
    ListOf,
    Maybe,
    Refinement,
    Struct,
    TupleOf,
    Type,
    Union,
)
from .engine import validate
from .exceptions import DescriptorError, TypeWardenError
from .irreducibles import (
    Any,
    Array,
    Boolean,
    Date,
    Error,
    Function,
    Integer,
    Nil,
    Number,
    Object,
    RegExp,
    String,
)
from .messages import format_message
from .paths import parse_path, render_json_path, render_path
from .result import ValidationError, ValidationResult, failure, success
from .schema import check, to_descriptor
from .types import Err, Ok

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Engine
    "validate",
    "check",
    "to_descriptor",
    # Results
    "ValidationResult",
    "ValidationError",
    "success",
    "failure",
    "Ok",
    "Err",
    # Descriptors
    "Type",
    "Kind",
    "Irreducible",
    "Enums",
    "Struct",
    "Interface",
    "Maybe",
    "Refinement",
    "ListOf",
    "TupleOf",
    "DictOf",
    "Union",
    "Intersection",
    # Combinators
    "irreducible",
    "enums",
    "enums_of",
    "struct",
    "interface",
    "maybe",
    "refinement",
    "subtype",
    "list_of",
    "tuple_of",
    "dict_of",
    "union",
    "intersection",
    # Irreducibles
    "Any",
    "Nil",
    "String",
    "Number",
    "Integer",
    "Boolean",
    "Function",
    "Date",
    "RegExp",
    "Object",
    "Array",
    "Error",
    # Paths and messages
    "render_path",
    "render_json_path",
    "parse_path",
    "format_message",
    # Configuration
    "configure",
    "get_fail_hook",
    "validation_context",
    # Exceptions
    "TypeWardenError",
    "DescriptorError",
]
