"""
Recursive validation engine.

validate() dispatches on the descriptor kind to one strategy per kind. Every
strategy returns a ValidationResult; ordinary failures are collected, never
raised. API misuse is reported through the fail hook (see context.py).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NoReturn

from .context import get_fail_hook
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
    Type,
    Union,
    get_type_name,
    is_descriptor,
    is_object,
    is_record,
    is_sequence,
    read_prop,
    record_items,
)
from .exceptions import DescriptorError
from .irreducibles import Nil
from .messages import (
    CODOMAIN,
    DEFAULT_TEMPLATES,
    DISPATCH,
    DOMAIN,
    INPUT,
    PREDICATE,
    STRICT,
    TYPE,
    VALUE,
    format_message,
    get_message,
    is_messages,
)
from .paths import extend_path, render_json_path, render_path, to_path
from .result import ValidationError, ValidationResult, failure, success
from .types import Messages, Path, PathStep

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Options:
    """Per-call settings shared by every level of the descent."""

    context: Any = None
    strict: bool = False


def fail(message: str) -> NoReturn:
    """Report API misuse through the configured fail hook."""
    logger.error("validate() misuse: %s", message)
    get_fail_hook()(message)
    # The hook must not let validation go on
    raise DescriptorError(message)


def validate(
    value: Any,
    descriptor: Any,
    *,
    path: Any = None,
    messages: Messages = None,
    context: Any = None,
    strict: bool = False,
) -> ValidationResult:
    """
    Validate a value against a type descriptor.

    Args:
        value: The value to validate
        descriptor: A descriptor, or a plain class for an isinstance check
        path: Starting path, as a tuple/list of steps or a path string
        messages: Message configuration (string or mapping)
        context: Passed through to descriptor message hooks
        strict: Reject keys that a struct or interface does not declare

    Returns:
        ValidationResult with the coerced value on success, or the input
        value and every error found on failure

    Usage:
        Point = struct({"x": Number, "y": Number}, "Point")
        result = validate({"x": 0, "y": "a"}, Point)
        result.first_error().path  # ("y",)
    """
    if not is_descriptor(descriptor):
        fail(
            f"Invalid argument descriptor of value {descriptor!r} supplied to "
            "validate, expected a type"
        )
    try:
        start = to_path(path)
    except (TypeError, ValueError) as e:
        fail(f"Invalid argument path of value {path!r} supplied to validate: {e}")
    if not is_messages(messages):
        fail(
            f"Invalid argument messages of value {messages!r} supplied to validate, "
            "expected a string or a mapping"
        )

    logger.debug(
        "Validating against %s at %s", get_type_name(descriptor), render_path(start)
    )
    return _validate(value, descriptor, start, messages, _Options(context, bool(strict)))


def _validate(
    value: Any, descriptor: Any, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    match descriptor:
        case Irreducible() | Enums():
            return _validate_member(value, descriptor, path, messages, opts)
        case Struct():
            return _validate_struct(value, descriptor, path, messages, opts)
        case Interface():
            return _validate_interface(value, descriptor, path, messages, opts)
        case Maybe():
            return _validate_maybe(value, descriptor, path, messages, opts)
        case Refinement():
            return _validate_refinement(value, descriptor, path, messages, opts)
        case ListOf():
            return _validate_list(value, descriptor, path, messages, opts)
        case TupleOf():
            return _validate_tuple(value, descriptor, path, messages, opts)
        case DictOf():
            return _validate_dict(value, descriptor, path, messages, opts)
        case Union():
            return _validate_union(value, descriptor, path, messages, opts)
        case Intersection():
            return _validate_intersection(value, descriptor, path, messages, opts)
        case type():
            return _validate_class(value, descriptor, path, messages, opts)
        case Type():
            fail(
                f"Invalid kind {getattr(descriptor, 'kind', None)!r} of "
                f"{descriptor!r} supplied to validate"
            )
        case _:
            fail(
                f"Invalid argument {descriptor!r} supplied to validate, expected a type"
            )


# =============================================================================
# Errors
# =============================================================================


def _error(
    actual: Any,
    expected: Any,
    path: Path,
    messages: Messages,
    token: str,
    opts: _Options,
    *,
    owner: Any = None,
    **params: Any,
) -> ValidationError:
    """
    Build one error.

    Message precedence: the control token entry (or a plain string
    configuration), then the owner's message hook, then the default template.
    """
    template = get_message(messages, token)
    message = None

    if not isinstance(template, str):
        hook = owner.get_validation_error_message if isinstance(owner, Type) else None
        if hook is not None:
            message = hook(actual, path, opts.context)
        template = DEFAULT_TEMPLATES[token]

    if message is None:
        message = format_message(
            template,
            {
                "path": render_path(path),
                "jsonpath": render_json_path(path),
                "actual": repr(actual),
                "expected": get_type_name(expected),
                **params,
            },
        )
    return ValidationError(message=message, actual=actual, expected=expected, path=path)


def _reject(
    value: Any,
    descriptor: Any,
    path: Path,
    messages: Messages,
    token: str,
    opts: _Options,
    **params: Any,
) -> ValidationResult:
    """Failure raised by `descriptor` itself on the whole value."""
    err = _error(value, descriptor, path, messages, token, opts, owner=descriptor, **params)
    return failure(value, [err])


# =============================================================================
# Strategies
# =============================================================================


def _validate_member(
    value: Any, descriptor: Irreducible | Enums, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    if descriptor.is_(value):
        return success(value)
    return _reject(value, descriptor, path, messages, VALUE, opts)


def _validate_class(
    value: Any, cls: type, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    if isinstance(value, cls):
        return success(value)
    return _reject(value, cls, path, messages, VALUE, opts)


def _validate_props(
    value: Any,
    props: Mapping[str, Any],
    path: Path,
    messages: Messages,
    opts: _Options,
) -> tuple[dict[str, Any], list[ValidationError]]:
    """Validate every declared prop; all errors are gathered."""
    coerced: dict[str, Any] = {}
    errors: list[ValidationError] = []
    for name, prop in props.items():
        result = _validate(
            read_prop(value, name),
            prop,
            extend_path(path, name),
            get_message(messages, name),
            opts,
        )
        if result.is_valid():
            coerced[name] = result.value
        else:
            errors.extend(result.errors)
    return coerced, errors


def _extra_key_errors(
    value: Any,
    props: Mapping[str, Any],
    path: Path,
    messages: Messages,
    opts: _Options,
) -> list[ValidationError]:
    """Strict mode: each undeclared key is reported as expected to be Nil."""
    return [
        _error(actual, Nil, extend_path(path, _key_step(key)), messages, STRICT, opts)
        for key, actual in record_items(value).items()
        if key not in props
    ]


def _validate_struct(
    value: Any, descriptor: Struct, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    if descriptor.is_(value):
        return success(value)

    if not is_record(value):
        return _reject(value, descriptor, path, messages, INPUT, opts, shape="a mapping")

    if descriptor.default_props:
        merged = record_items(value)
        for key, default in descriptor.default_props.items():
            merged.setdefault(key, default)
        value = merged

    coerced, errors = _validate_props(value, descriptor.props, path, messages, opts)
    if opts.strict or descriptor.strict:
        errors.extend(_extra_key_errors(value, descriptor.props, path, messages, opts))

    if errors:
        return failure(value, errors)
    return success(descriptor.instantiate(coerced))


def _validate_interface(
    value: Any, descriptor: Interface, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    if not is_object(value):
        return _reject(
            value, descriptor, path, messages, INPUT, opts, shape="a mapping or object"
        )

    coerced, errors = _validate_props(value, descriptor.props, path, messages, opts)
    if opts.strict or descriptor.strict:
        errors.extend(_extra_key_errors(value, descriptor.props, path, messages, opts))

    if errors:
        return failure(value, errors)
    return success(coerced)


def _validate_maybe(
    value: Any, descriptor: Maybe, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    if value is None:
        return success(None)
    return _validate(value, descriptor.type, path, messages, opts)


def _validate_refinement(
    value: Any, descriptor: Refinement, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    base = _validate(value, descriptor.type, path, get_message(messages, TYPE), opts)
    if not base.is_valid():
        return base

    if not descriptor.predicate(base.value):
        err = _error(
            base.value, descriptor, path, messages, PREDICATE, opts, owner=descriptor
        )
        return failure(value, [err])
    return base


def _validate_list(
    value: Any, descriptor: ListOf, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    if not is_sequence(value):
        return _reject(value, descriptor, path, messages, INPUT, opts, shape="a list")

    item_messages = get_message(messages, TYPE)
    items: list[Any] = []
    errors: list[ValidationError] = []
    for i, item in enumerate(value):
        result = _validate(item, descriptor.type, extend_path(path, i), item_messages, opts)
        if result.is_valid():
            items.append(result.value)
        else:
            errors.extend(result.errors)

    if errors:
        return failure(value, errors)
    return success(items)


def _validate_tuple(
    value: Any, descriptor: TupleOf, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    length = len(descriptor.types)
    if not is_sequence(value) or len(value) != length:
        return _reject(
            value,
            descriptor,
            path,
            messages,
            INPUT,
            opts,
            shape=f"a sequence of length {length}",
            length=length,
        )

    items: list[Any] = []
    errors: list[ValidationError] = []
    for i, (item, item_type) in enumerate(zip(value, descriptor.types)):
        result = _validate(
            item, item_type, extend_path(path, i), get_message(messages, i), opts
        )
        if result.is_valid():
            items.append(result.value)
        else:
            errors.extend(result.errors)

    if errors:
        return failure(value, errors)
    return success(tuple(items))


def _key_step(key: Any) -> PathStep:
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool) and key >= 0:
        return key
    return str(key)


def _validate_dict(
    value: Any, descriptor: DictOf, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    if not isinstance(value, Mapping):
        return _reject(value, descriptor, path, messages, INPUT, opts, shape="a mapping")

    key_messages = get_message(messages, DOMAIN)
    value_messages = get_message(messages, CODOMAIN)
    out: dict[Any, Any] = {}
    errors: list[ValidationError] = []
    for key, item in value.items():
        item_path = extend_path(path, _key_step(key))
        key_result = _validate(key, descriptor.domain, item_path, key_messages, opts)
        item_result = _validate(item, descriptor.codomain, item_path, value_messages, opts)
        errors.extend(key_result.errors)
        errors.extend(item_result.errors)
        if key_result.is_valid() and item_result.is_valid():
            out[key_result.value] = item_result.value

    if errors:
        return failure(value, errors)
    return success(out)


def _validate_union(
    value: Any, descriptor: Union, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    if not callable(descriptor.dispatch):
        fail(f"unimplemented {descriptor.display_name}.dispatch()")

    member = descriptor.dispatch(value)
    if member is None:
        return _reject(value, descriptor, path, messages, DISPATCH, opts)
    if not is_descriptor(member):
        fail(
            f"{descriptor.display_name}.dispatch() returned {member!r}, "
            "expected a type or None"
        )

    member_messages = messages
    for i, t in enumerate(descriptor.types):
        if t is member:
            member_messages = get_message(messages, i)
            break
    return _validate(value, member, path, member_messages, opts)


def _validate_intersection(
    value: Any, descriptor: Intersection, path: Path, messages: Messages, opts: _Options
) -> ValidationResult:
    errors: list[ValidationError] = []
    for i, member in enumerate(descriptor.types):
        result = _validate(value, member, path, get_message(messages, i), opts)
        errors.extend(result.errors)

    if errors:
        return failure(value, errors)
    return success(value)
