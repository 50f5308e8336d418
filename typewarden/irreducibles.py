"""
Built-in irreducible types.
"""

from __future__ import annotations

import datetime
import math
import re
from collections.abc import Mapping

from .descriptors import Irreducible


def _is_number(x: object) -> bool:
    return (
        isinstance(x, (int, float))
        and not isinstance(x, bool)
        and math.isfinite(x)
    )


def _is_integer(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


Any = Irreducible(name="Any", predicate=lambda _: True)
Nil = Irreducible(name="Nil", predicate=lambda x: x is None)
String = Irreducible(name="String", predicate=lambda x: isinstance(x, str))
Number = Irreducible(name="Number", predicate=_is_number)
Integer = Irreducible(name="Integer", predicate=_is_integer)
Boolean = Irreducible(name="Boolean", predicate=lambda x: isinstance(x, bool))
Function = Irreducible(name="Function", predicate=callable)
Date = Irreducible(name="Date", predicate=lambda x: isinstance(x, datetime.date))
RegExp = Irreducible(name="RegExp", predicate=lambda x: isinstance(x, re.Pattern))
Object = Irreducible(name="Object", predicate=lambda x: isinstance(x, Mapping))
Array = Irreducible(name="Array", predicate=lambda x: isinstance(x, (list, tuple)))
Error = Irreducible(name="Error", predicate=lambda x: isinstance(x, BaseException))

__all__ = [
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
]
