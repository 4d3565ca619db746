# typed_json/application/auto/_type_info.py

"""Introspection of runtime type descriptors

Answers the questions the synthesizer asks about a type: which container it
is, what its element types are, which fields a record has and which cases a
tagged union has.
"""

# Standard library imports
from collections.abc import Mapping
from collections.abc import MutableMapping
from collections.abc import MutableSequence
from collections.abc import MutableSet
from collections.abc import Sequence
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import is_dataclass
from enum import Enum
from functools import partial
from types import NoneType
from types import UnionType
from typing import Annotated
from typing import Callable
from typing import TypeAliasType
from typing import Union
from typing import get_args
from typing import get_origin
from typing import get_type_hints
from typing import is_typeddict

# Third party imports
from pydantic import BaseModel

_LIST_ORIGINS = (list, Sequence, MutableSequence)
_MAP_ORIGINS = (dict, Mapping, MutableMapping)
_SET_ORIGINS = (set, MutableSet)
_FROZEN_SET_ORIGINS = (frozenset, AbstractSet)


@dataclass(frozen=True, slots=True)
class RecordField:
    """One named field of a record type"""

    name: str
    annotation: object
    alias: str | None = None


@dataclass(frozen=True, slots=True)
class UnionCase:
    """One case of a tagged union: its name, slot types, and constructor"""

    name: str
    slots: tuple[object, ...]
    build: Callable[..., object]


def resolve_alias(target: object) -> object:
    """Strip ``type`` aliases and ``Annotated`` wrappers"""
    while True:
        if isinstance(target, TypeAliasType):
            target = target.__value__
        elif get_origin(target) is Annotated:
            target = get_args(target)[0]
        else:
            return target


def is_array_type(target: object) -> bool:
    """``tuple[T, ...]``"""
    args = get_args(target)
    return get_origin(target) is tuple and len(args) == 2 and args[1] is Ellipsis


def is_tuple_type(target: object) -> bool:
    """Fixed-arity ``tuple[A, B, ...]``"""
    return get_origin(target) is tuple and not is_array_type(target)


def is_union_type(target: object) -> bool:
    return get_origin(target) in (Union, UnionType)


def is_optional_type(target: object) -> bool:
    return is_union_type(target) and NoneType in get_args(target)


def without_none(target: object) -> object:
    """The union minus its ``None`` member"""
    members = tuple(member for member in get_args(target) if member is not NoneType)
    if len(members) == 1:
        return members[0]
    return Union[members]


def is_list_type(target: object) -> bool:
    return get_origin(target) in _LIST_ORIGINS


def is_map_type(target: object) -> bool:
    return get_origin(target) in _MAP_ORIGINS and len(get_args(target)) == 2


def is_set_type(target: object) -> bool:
    return get_origin(target) in _SET_ORIGINS + _FROZEN_SET_ORIGINS


def is_frozen_set_type(target: object) -> bool:
    return get_origin(target) in _FROZEN_SET_ORIGINS


def _is_named_tuple(target: type) -> bool:
    return issubclass(target, tuple) and hasattr(target, "_fields")


def _is_pydantic_model(target: type) -> bool:
    return issubclass(target, BaseModel)


def is_record_type(target: object) -> bool:
    """Dataclasses, NamedTuples, TypedDicts and pydantic models"""
    if not isinstance(target, type):
        return False
    return (
        is_dataclass(target)
        or _is_named_tuple(target)
        or is_typeddict(target)
        or _is_pydantic_model(target)
    )


def is_enum_type(target: object) -> bool:
    return isinstance(target, type) and issubclass(target, Enum)


def is_hashable_type(target: object) -> bool:
    """Whether decoded values of ``target`` can be used as dict keys"""
    target = resolve_alias(target)
    if is_list_type(target) or is_map_type(target):
        return False
    if is_set_type(target):
        return is_frozen_set_type(target)
    if isinstance(target, type):
        return target.__hash__ is not None
    return True


def is_tagged_union_type(target: object) -> bool:
    """An enum, or a union whose members are all records"""
    if is_enum_type(target):
        return True
    return is_union_type(target) and all(is_record_type(member) for member in get_args(target))


def record_fields(target: type) -> list[RecordField]:
    """Fields of a record type in declaration order"""
    if _is_pydantic_model(target):
        return [
            RecordField(name=name, annotation=info.annotation, alias=info.alias)
            for name, info in target.model_fields.items()
        ]

    hints = get_type_hints(target)
    if is_dataclass(target):
        return [RecordField(name=f.name, annotation=hints[f.name]) for f in fields(target) if f.init]
    if _is_named_tuple(target):
        return [RecordField(name=name, annotation=hints[name]) for name in target._fields]
    return [RecordField(name=name, annotation=hint) for name, hint in hints.items()]


def make_record(target: type, values: dict[str, object]) -> object:
    """Build a record from decoded field values keyed by field name

    Raises:
        pydantic.ValidationError: when a pydantic model rejects the values
    """
    if _is_pydantic_model(target):
        by_key = {
            record_field.alias or record_field.name: values[record_field.name]
            for record_field in record_fields(target)
        }
        return target.model_validate(by_key)
    return target(**values)


def _build_case(target: type, names: tuple[str, ...], *values: object) -> object:
    return make_record(target, dict(zip(names, values)))


def _enum_member(member: Enum) -> Enum:
    return member


def union_cases(target: object) -> list[UnionCase]:
    """Cases of an enum or of a union of records

    Enum members are zero-slot cases named after the member. Record members
    are named after their class and take their fields, in order, as slots.
    """
    if is_enum_type(target):
        return [
            UnionCase(name=member.name, slots=(), build=partial(_enum_member, member))
            for member in target
        ]

    cases = []
    for member in get_args(target):
        member_fields = record_fields(member)
        cases.append(
            UnionCase(
                name=member.__name__,
                slots=tuple(record_field.annotation for record_field in member_fields),
                build=partial(
                    _build_case,
                    member,
                    tuple(record_field.name for record_field in member_fields),
                ),
            )
        )
    return cases


__all__ = [
    "RecordField",
    "UnionCase",
    "resolve_alias",
    "is_array_type",
    "is_tuple_type",
    "is_union_type",
    "is_optional_type",
    "without_none",
    "is_list_type",
    "is_map_type",
    "is_set_type",
    "is_frozen_set_type",
    "is_record_type",
    "is_enum_type",
    "is_hashable_type",
    "is_tagged_union_type",
    "record_fields",
    "make_record",
    "union_cases",
]
