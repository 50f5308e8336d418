"""
Result model for typewarden validation.

A ValidationResult carries the (possibly coerced) value together with an
ordered tuple of ValidationError records.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .types import Err, Ok, Path

# Shared by every successful result
_NO_ERRORS: tuple[ValidationError, ...] = ()


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single validation failure located by its path."""

    message: str
    actual: Any
    expected: Any
    path: Path = ()

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of a validate() call.

    On success `value` is the coerced value and `errors` is empty. On failure
    `value` is the input as received and `errors` holds every error found,
    in depth-first order.
    """

    value: Any
    errors: tuple[ValidationError, ...] = _NO_ERRORS

    def is_valid(self) -> bool:
        return not self.errors

    def first_error(self) -> ValidationError | None:
        return self.errors[0] if self.errors else None

    def error_messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def to_result(self) -> Ok[Any] | Err[tuple[ValidationError, ...]]:
        """
        Convert to the Ok/Err pair.

        Returns:
            Ok(value) if the result is valid
            Err(errors) otherwise
        """
        if self.is_valid():
            return Ok(self.value)
        return Err(self.errors)


def success(value: Any) -> ValidationResult:
    """Result with no errors wrapping `value` unchanged."""
    return ValidationResult(value=value)


def failure(value: Any, errors: Iterable[ValidationError]) -> ValidationResult:
    """Result wrapping one or more errors; `value` is the un-coerced input."""
    errors = tuple(errors)
    if not errors:
        raise ValueError("failure() requires at least one error")
    return ValidationResult(value=value, errors=errors)
