"""
Type definitions for typewarden.

Provides a minimal Result type (Ok/Err) and the aliases shared by the engine.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Type aliases
Predicate = Callable[[Any], bool]
PathStep = Union[str, int]
Path = tuple[PathStep, ...]
Messages = Union[str, Mapping[Any, Any], None]
MessageHook = Callable[[Any, Path, Any], Union[str, None]]
FailHook = Callable[[str], Any]
