"""
Type descriptors consumed by the validation engine.

One frozen dataclass per kind, each carrying only the metadata that kind
needs. A plain Python class is also accepted wherever a descriptor is
expected; it stands for the nominal `class` kind (an isinstance check).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, ClassVar

from pydantic import BaseModel, ConfigDict, create_model

from .exceptions import DescriptorError
from .types import MessageHook, Predicate


class Kind(str, Enum):
    IRREDUCIBLE = "irreducible"
    ENUMS = "enums"
    STRUCT = "struct"
    INTERFACE = "interface"
    MAYBE = "maybe"
    SUBTYPE = "subtype"
    LIST = "list"
    TUPLE = "tuple"
    DICT = "dict"
    UNION = "union"
    INTERSECTION = "intersection"
    CLASS = "class"


@dataclass(frozen=True, eq=False)
class Type:
    """
    Base class of every descriptor.

    Descriptors compare by identity. `get_validation_error_message`, when
    set, is called as hook(value, path, context) to build the message used
    when this descriptor rejects a value directly.
    """

    kind: ClassVar[Kind]

    name: str | None = field(default=None, kw_only=True)
    get_validation_error_message: MessageHook | None = field(
        default=None, kw_only=True, repr=False
    )

    def is_(self, value: Any) -> bool:
        """Membership test: does `value` already belong to this type?"""
        raise NotImplementedError

    @property
    def display_name(self) -> str:
        return self.name or self._default_name()

    def _default_name(self) -> str:
        return type(self).__name__

    def with_message_hook(self, hook: MessageHook) -> Type:
        """Return a copy of this descriptor using `hook` for its messages."""
        if not callable(hook):
            raise DescriptorError(f"Message hook must be callable, got {hook!r}")
        return replace(self, get_validation_error_message=hook)

    def __str__(self) -> str:
        return self.display_name


def is_descriptor(value: Any) -> bool:
    """True for descriptor instances and for plain classes (nominal kind)."""
    return isinstance(value, (Type, type))


def kind_of(descriptor: Any) -> Kind:
    if isinstance(descriptor, Type):
        return descriptor.kind
    if isinstance(descriptor, type):
        return Kind.CLASS
    raise DescriptorError(f"{descriptor!r} is not a type descriptor")


def get_type_name(descriptor: Any) -> str:
    if isinstance(descriptor, Type):
        return descriptor.display_name
    if isinstance(descriptor, type):
        return descriptor.__name__
    return repr(descriptor)


def is_member(value: Any, descriptor: Any) -> bool:
    """Run the membership test of a descriptor or nominal class."""
    if isinstance(descriptor, Type):
        return descriptor.is_(value)
    return isinstance(value, descriptor)


def is_record(value: Any) -> bool:
    """Mappings and pydantic model instances are keyed records."""
    return isinstance(value, (Mapping, BaseModel))


def is_object(value: Any) -> bool:
    """Records, plus any object carrying its own attributes."""
    return is_record(value) or hasattr(value, "__dict__")


def record_items(value: Any) -> dict[str, Any]:
    """Shallow key/value view of a record or attribute-carrying object."""
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, BaseModel):
        return dict(value)
    return {k: v for k, v in vars(value).items() if not k.startswith("_")}


def read_prop(value: Any, key: str) -> Any:
    """Read a property from a mapping, or an attribute from any other object."""
    if isinstance(value, Mapping):
        return value.get(key)
    return getattr(value, key, None)


def _require_descriptor(value: Any, owner: str) -> None:
    if not is_descriptor(value):
        raise DescriptorError(
            f"Invalid argument {value!r} supplied to {owner}, expected a type"
        )


def _require_callable(value: Any, owner: str) -> None:
    if not callable(value):
        raise DescriptorError(
            f"Invalid argument {value!r} supplied to {owner}, expected a callable"
        )


def _freeze_props(props: Any, owner: str) -> Mapping[str, Any]:
    if not isinstance(props, Mapping):
        raise DescriptorError(f"{owner} props must be a mapping, got {props!r}")
    for key, prop in props.items():
        if not isinstance(key, str):
            raise DescriptorError(f"{owner} prop names must be strings, got {key!r}")
        _require_descriptor(prop, f"{owner}.{key}")
    return MappingProxyType(dict(props))


def _props_name(props: Mapping[str, Any]) -> str:
    inner = ", ".join(f"{k}: {get_type_name(t)}" for k, t in props.items())
    return "{" + inner + "}"


def _predicate_name(predicate: Callable) -> str:
    return getattr(predicate, "__name__", None) or type(predicate).__name__


# =============================================================================
# Irreducibles and enums
# =============================================================================


@dataclass(frozen=True, eq=False)
class Irreducible(Type):
    """Primitive type defined by a membership predicate."""

    kind: ClassVar[Kind] = Kind.IRREDUCIBLE

    predicate: Predicate

    def __post_init__(self) -> None:
        if not self.name:
            raise DescriptorError("Irreducible types require a name")
        _require_callable(self.predicate, f"irreducible {self.name}")

    def is_(self, value: Any) -> bool:
        return bool(self.predicate(value))


@dataclass(frozen=True, eq=False)
class Enums(Type):
    """Finite set of allowed values."""

    kind: ClassVar[Kind] = Kind.ENUMS

    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if not self.values:
            raise DescriptorError("Enums require at least one value")

    def is_(self, value: Any) -> bool:
        return value in self.values

    def _default_name(self) -> str:
        return " | ".join(repr(v) for v in self.values)


# =============================================================================
# Records
# =============================================================================


_RESERVED_PROPS = frozenset(dir(BaseModel))


def _build_model(name: str, props: Mapping[str, Any]) -> type[BaseModel]:
    for key in props:
        if not key.isidentifier() or key.startswith("_"):
            raise DescriptorError(
                f"Struct {name} cannot declare prop {key!r}: struct props must be "
                "identifiers without a leading underscore"
            )
        if key in _RESERVED_PROPS:
            raise DescriptorError(
                f"Struct {name} cannot declare prop {key!r}: the name is reserved "
                "by pydantic.BaseModel"
            )
    fields: dict[str, Any] = {key: (Any, None) for key in props}
    config = ConfigDict(
        frozen=True, arbitrary_types_allowed=True, protected_namespaces=()
    )
    return create_model(name, __config__=config, **fields)


@dataclass(frozen=True, eq=False)
class Struct(Type):
    """
    Nominal record type.

    Valid values are materialized as instances of `model`, a pydantic model
    class generated for this descriptor. Those instances are recognized on
    re-validation and accepted as they are.
    """

    kind: ClassVar[Kind] = Kind.STRUCT

    props: Mapping[str, Any]
    strict: bool = False
    default_props: Mapping[str, Any] | None = None
    model: type[BaseModel] | None = field(default=None, kw_only=True, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", _freeze_props(self.props, "struct"))
        if self.default_props is not None:
            if not isinstance(self.default_props, Mapping):
                raise DescriptorError(
                    f"default_props must be a mapping, got {self.default_props!r}"
                )
            object.__setattr__(
                self, "default_props", MappingProxyType(dict(self.default_props))
            )
        if self.model is None:
            object.__setattr__(
                self, "model", _build_model(self.name or "Struct", self.props)
            )

    def is_(self, value: Any) -> bool:
        return isinstance(value, self.model)

    def instantiate(self, values: Mapping[str, Any]) -> BaseModel:
        """Build the canonical instance from already-validated prop values."""
        return self.model.model_construct(**{k: values.get(k) for k in self.props})

    def _default_name(self) -> str:
        return _props_name(self.props)


@dataclass(frozen=True, eq=False)
class Interface(Type):
    """Duck-typed record: any mapping or object exposing the declared props."""

    kind: ClassVar[Kind] = Kind.INTERFACE

    props: Mapping[str, Any]
    strict: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", _freeze_props(self.props, "interface"))

    def is_(self, value: Any) -> bool:
        if not is_object(value):
            return False
        if self.strict and any(key not in self.props for key in record_items(value)):
            return False
        return all(is_member(read_prop(value, k), t) for k, t in self.props.items())

    def _default_name(self) -> str:
        return _props_name(self.props)


# =============================================================================
# Wrappers
# =============================================================================


@dataclass(frozen=True, eq=False)
class Maybe(Type):
    """Optional value: None or a member of `type`."""

    kind: ClassVar[Kind] = Kind.MAYBE

    type: Any

    def __post_init__(self) -> None:
        _require_descriptor(self.type, "maybe")

    def is_(self, value: Any) -> bool:
        return value is None or is_member(value, self.type)

    def _default_name(self) -> str:
        return "?" + get_type_name(self.type)


@dataclass(frozen=True, eq=False)
class Refinement(Type):
    """Subtype of `type` narrowed by `predicate`."""

    kind: ClassVar[Kind] = Kind.SUBTYPE

    type: Any
    predicate: Predicate

    def __post_init__(self) -> None:
        _require_descriptor(self.type, "refinement")
        _require_callable(self.predicate, "refinement")

    def is_(self, value: Any) -> bool:
        return is_member(value, self.type) and bool(self.predicate(value))

    def _default_name(self) -> str:
        return f"{{{get_type_name(self.type)} | {_predicate_name(self.predicate)}}}"


# =============================================================================
# Containers
# =============================================================================


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass(frozen=True, eq=False)
class ListOf(Type):
    """Homogeneous list of `type`."""

    kind: ClassVar[Kind] = Kind.LIST

    type: Any

    def __post_init__(self) -> None:
        _require_descriptor(self.type, "list")

    def is_(self, value: Any) -> bool:
        return is_sequence(value) and all(is_member(v, self.type) for v in value)

    def _default_name(self) -> str:
        return f"Array<{get_type_name(self.type)}>"


@dataclass(frozen=True, eq=False)
class TupleOf(Type):
    """Fixed-length heterogeneous sequence."""

    kind: ClassVar[Kind] = Kind.TUPLE

    types: tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))
        for i, t in enumerate(self.types):
            _require_descriptor(t, f"tuple[{i}]")

    def is_(self, value: Any) -> bool:
        return (
            is_sequence(value)
            and len(value) == len(self.types)
            and all(is_member(v, t) for v, t in zip(value, self.types))
        )

    def _default_name(self) -> str:
        return "[" + ", ".join(get_type_name(t) for t in self.types) + "]"


@dataclass(frozen=True, eq=False)
class DictOf(Type):
    """Mapping whose keys belong to `domain` and values to `codomain`."""

    kind: ClassVar[Kind] = Kind.DICT

    domain: Any
    codomain: Any

    def __post_init__(self) -> None:
        _require_descriptor(self.domain, "dict domain")
        _require_descriptor(self.codomain, "dict codomain")

    def is_(self, value: Any) -> bool:
        return isinstance(value, Mapping) and all(
            is_member(k, self.domain) and is_member(v, self.codomain)
            for k, v in value.items()
        )

    def _default_name(self) -> str:
        return f"{{[key: {get_type_name(self.domain)}]: {get_type_name(self.codomain)}}}"


# =============================================================================
# Combinations
# =============================================================================


@dataclass(frozen=True, eq=False)
class Union(Type):
    """
    Tagged alternative between member types.

    `dispatch(value)` picks the one member a value is validated against and
    returns None when no member applies. A union without a dispatch function
    cannot be validated.
    """

    kind: ClassVar[Kind] = Kind.UNION

    types: tuple[Any, ...]
    dispatch: Callable[[Any], Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))
        if len(self.types) < 2:
            raise DescriptorError("Unions require at least two member types")
        for i, t in enumerate(self.types):
            _require_descriptor(t, f"union[{i}]")

    def is_(self, value: Any) -> bool:
        return any(is_member(value, t) for t in self.types)

    def _default_name(self) -> str:
        return " | ".join(get_type_name(t) for t in self.types)


@dataclass(frozen=True, eq=False)
class Intersection(Type):
    """Value must belong to every member type."""

    kind: ClassVar[Kind] = Kind.INTERSECTION

    types: tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))
        if len(self.types) < 2:
            raise DescriptorError("Intersections require at least two member types")
        for i, t in enumerate(self.types):
            _require_descriptor(t, f"intersection[{i}]")

    def is_(self, value: Any) -> bool:
        return all(is_member(value, t) for t in self.types)

    def _default_name(self) -> str:
        return " & ".join(get_type_name(t) for t in self.types)
