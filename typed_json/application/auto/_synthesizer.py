# typed_json/application/auto/_synthesizer.py

"""Derive decoders from runtime type descriptors

Dispatch order for a type (the first matching rule wins):

1. a user decoder registered under the type name
2. ``tuple[T, ...]``                  -> ``array``
3. ``tuple[A, B, ...]``               -> positional, exact arity
4. ``T | None``                       -> ``option`` (inner built in optional mode)
5. ``list[T]`` / ``Sequence[T]``      -> ``list_``
6. ``dict[K, V]`` / ``Mapping[K, V]`` -> object or array of pairs, sorted by key
   when the keys are orderable; unhashable ``K`` is rejected up front
7. ``set[T]`` / ``frozenset[T]``      -> ``array`` then deduplicated, unhashable ``T`` rejected
8. records                            -> every field required, by JSON key
9. enums and unions of records        -> ``"Case"`` or ``["Case", arg, ...]``
   other unions                       -> ``one_of`` over the members
10. leaf scalars                      -> primitive decoders
11. ``object`` / ``Any``              -> raw value
12. anything else: a decoder that fails only when it meets a non-null value
    in optional mode, ``DecoderGenerationError`` otherwise
"""

# Standard library imports
from collections.abc import Sequence
from datetime import datetime
from datetime import timedelta
from decimal import Decimal
from logging import getLogger
from operator import itemgetter
from types import NoneType
from typing import Any
from typing import Callable
from typing import NewType
from typing import get_args
from uuid import UUID

# Third party imports
from pydantic import ValidationError

# Local imports
from typed_json.application.auto._type_info import is_array_type
from typed_json.application.auto._type_info import is_frozen_set_type
from typed_json.application.auto._type_info import is_hashable_type
from typed_json.application.auto._type_info import is_list_type
from typed_json.application.auto._type_info import is_map_type
from typed_json.application.auto._type_info import is_optional_type
from typed_json.application.auto._type_info import is_record_type
from typed_json.application.auto._type_info import is_set_type
from typed_json.application.auto._type_info import is_tagged_union_type
from typed_json.application.auto._type_info import is_tuple_type
from typed_json.application.auto._type_info import is_union_type
from typed_json.application.auto._type_info import make_record
from typed_json.application.auto._type_info import record_fields
from typed_json.application.auto._type_info import resolve_alias
from typed_json.application.auto._type_info import union_cases
from typed_json.application.auto._type_info import without_none
from typed_json.application.decoding._collections import array
from typed_json.application.decoding._collections import list_
from typed_json.application.decoding._combinators import map_
from typed_json.application.decoding._combinators import nil
from typed_json.application.decoding._combinators import one_of
from typed_json.application.decoding._combinators import value
from typed_json.application.decoding._navigation import field
from typed_json.application.decoding._navigation import index
from typed_json.application.decoding._navigation import option
from typed_json.application.decoding._primitives import bigint
from typed_json.application.decoding._primitives import bool_
from typed_json.application.decoding._primitives import datetime_
from typed_json.application.decoding._primitives import datetime_offset
from typed_json.application.decoding._primitives import decimal_
from typed_json.application.decoding._primitives import float_
from typed_json.application.decoding._primitives import guid
from typed_json.application.decoding._primitives import int64
from typed_json.application.decoding._primitives import int_
from typed_json.application.decoding._primitives import string
from typed_json.application.decoding._primitives import timespan
from typed_json.application.decoding._primitives import uint32
from typed_json.application.decoding._primitives import uint64
from typed_json.application.decoding._tuples import tuple2
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import BadType
from typed_json.core.domain.errors import FailMessage
from typed_json.core.domain.errors import failure
from typed_json.core.domain.exceptions import DecoderGenerationError
from typed_json.core.types.aliases import DecodeResult
from typed_json.core.types.aliases import Decoder
from typed_json.core.types.json import JsonValue
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok
from typed_json.core.types.scalars import BigInt
from typed_json.core.types.scalars import DateTimeOffset
from typed_json.core.types.scalars import Int64
from typed_json.core.types.scalars import UInt32
from typed_json.core.types.scalars import UInt64
from typed_json.infrastructure.config import AutoConfig
from typed_json.shared.utils.json_utils import get_field
from typed_json.shared.utils.json_utils import is_array
from typed_json.shared.utils.json_utils import is_object
from typed_json.shared.utils.json_utils import is_string
from typed_json.shared.utils.json_utils import object_keys
from typed_json.shared.utils.text_utils import to_camel_case
from typed_json.shared.utils.type_utils import type_name

logger = getLogger(__name__)

_LEAF_DECODERS: dict[object, Decoder[Any]] = {
    bool: bool_,
    str: string,
    int: int_,
    float: float_,
    Decimal: decimal_,
    UUID: guid,
    datetime: datetime_,
    timedelta: timespan,
    UInt32: uint32,
    Int64: int64,
    UInt64: uint64,
    BigInt: bigint,
    DateTimeOffset: datetime_offset,
    NoneType: nil(None),
}

_PASSTHROUGH = (object, Any)


def _mixed_array(
    description: str,
    decoders: Sequence[Decoder[object]],
    values: Sequence[JsonValue],
    offset: int,
) -> DecodeResult[tuple[object, ...]]:
    """Decode ``values`` position by position with exactly as many decoders

    ``offset`` is where ``values`` starts inside the JSON array, so failure
    paths point at the right element.
    """
    if len(decoders) != len(values):
        return failure(
            FailMessage(message=f"Expected {len(decoders)} {description} but got {len(values)}")
        )

    decoded: list[object] = []
    for position, (decoder, item) in enumerate(zip(decoders, values)):
        result = decoder(item)
        if isinstance(result, Err):
            return result.map_error(lambda error: error.prepend_path(f".[{position + offset}]"))
        decoded.append(result.value)
    return Ok(value=tuple(decoded))


def _construct(build: Callable[[], object]) -> DecodeResult[object]:
    """Run a record constructor, reporting model validation as a failure"""
    try:
        return Ok(value=build())
    except ValidationError as e:
        return failure(FailMessage(message=str(e)))


def _sorted_dict(pairs: Sequence[tuple[object, object]]) -> dict[object, object]:
    try:
        ordered = sorted(pairs, key=itemgetter(0))
    except TypeError:
        # Keys without an ordering, such as enum members, keep the order they were read in
        ordered = pairs
    return dict(ordered)


def _deferred_failure(name: str) -> Decoder[object]:
    def decode(json_value: JsonValue) -> DecodeResult[object]:
        return failure(BadType(expected=f"an extra coder for {name}", value=json_value))

    return decode


class DecoderSynthesizer:
    """Builds decoders for one configuration

    Create one per synthesis pass: it tracks the records and unions currently
    being built so that self-referencing types resolve to the decoder under
    construction instead of recursing forever.
    """

    def __init__(self, config: AutoConfig):
        self._config = config
        self._pending: dict[str, list[Decoder[object]]] = {}

    def synthesize(self, target: object, is_optional: bool = False) -> Decoder[object]:
        """Derive a decoder for ``target``

        Args:
            target: Type descriptor
            is_optional: True while building the inside of an option, where an
                unsupported type only fails once a non-null value shows up

        Returns:
            Decoder producing values of ``target``

        Raises:
            DecoderGenerationError: unsupported type outside optional mode
        """
        name = type_name(target)
        extra = self._config.decoder_for(name)
        if extra is not None:
            return extra

        resolved = resolve_alias(target)
        if resolved is not target:
            return self.synthesize(resolved, is_optional)

        if is_array_type(target):
            return array(self.synthesize(get_args(target)[0]))
        if is_tuple_type(target):
            return self._tuple(get_args(target))
        if is_optional_type(target):
            return option(self.synthesize(without_none(target), is_optional=True))
        if is_list_type(target):
            return list_(self.synthesize(get_args(target)[0]))
        if is_map_type(target):
            key_type, value_type = get_args(target)
            if not is_hashable_type(key_type):
                raise DecoderGenerationError(name)
            return self._map(key_type, value_type)
        if is_set_type(target):
            element_type = get_args(target)[0]
            if not is_hashable_type(element_type):
                raise DecoderGenerationError(name)
            element_decoder = array(self.synthesize(element_type))
            return map_(frozenset if is_frozen_set_type(target) else set, element_decoder)
        if is_record_type(target):
            return self._late_bound(name, lambda: self._record(target))
        if is_tagged_union_type(target):
            return self._late_bound(name, lambda: self._tagged_union(target, name))
        if is_union_type(target):
            return one_of([self.synthesize(member, is_optional) for member in get_args(target)])

        leaf = _LEAF_DECODERS.get(target)
        if leaf is not None:
            return leaf
        if isinstance(target, NewType):
            return self.synthesize(target.__supertype__, is_optional)
        if target in _PASSTHROUGH:
            return value

        if is_optional:
            logger.debug(f"No decoder for {name}, deferring failure to decode time")
            return _deferred_failure(name)
        raise DecoderGenerationError(name)

    def _late_bound(self, name: str, build: Callable[[], Decoder[object]]) -> Decoder[object]:
        holder = self._pending.get(name)
        if holder is not None:
            # Self reference: resolve once the outer build has finished
            return lambda json_value: holder[0](json_value)

        holder = []
        self._pending[name] = holder
        try:
            decoder = build()
        finally:
            del self._pending[name]
        holder.append(decoder)
        logger.debug(f"Generated decoder for {name}")
        return decoder

    def _json_key(self, field_name: str, alias: str | None) -> str:
        if alias is not None:
            return alias
        if self._config.camel_case:
            return to_camel_case(field_name)
        return field_name

    def _tuple(self, slot_types: Sequence[object]) -> Decoder[tuple[object, ...]]:
        decoders = tuple(self.synthesize(slot_type) for slot_type in slot_types)

        def decode(json_value: JsonValue) -> DecodeResult[tuple[object, ...]]:
            if not is_array(json_value):
                return failure(BadPrimitive(expected="an array", value=json_value))
            return _mixed_array("tuple elements", decoders, json_value, 0)

        return decode

    def _map(self, key_type: object, value_type: object) -> Decoder[dict[object, object]]:
        key_decoder = self.synthesize(key_type)
        value_decoder = self.synthesize(value_type)

        def from_object(json_value: JsonValue) -> DecodeResult[list[tuple[object, object]]]:
            if not is_object(json_value):
                return failure(BadPrimitive(expected="an object", value=json_value))

            pairs: list[tuple[object, object]] = []
            for key in object_keys(json_value):
                key_result = key_decoder(key)
                if isinstance(key_result, Err):
                    return key_result.map_error(lambda error: error.prepend_path(f".{key}"))
                value_result = value_decoder(get_field(key, json_value))
                if isinstance(value_result, Err):
                    return value_result.map_error(lambda error: error.prepend_path(f".{key}"))
                pairs.append((key_result.value, value_result.value))
            return Ok(value=pairs)

        from_pairs = array(tuple2(key_decoder, value_decoder))
        return map_(_sorted_dict, one_of([from_object, from_pairs]))

    def _record(self, target: type) -> Decoder[object]:
        field_decoders = [
            (
                record_field.name,
                field(
                    self._json_key(record_field.name, record_field.alias),
                    self.synthesize(record_field.annotation),
                ),
            )
            for record_field in record_fields(target)
        ]

        def decode(json_value: JsonValue) -> DecodeResult[object]:
            if not is_object(json_value):
                return failure(BadPrimitive(expected="an object", value=json_value))

            values: dict[str, object] = {}
            for attribute, decoder in field_decoders:
                result = decoder(json_value)
                if isinstance(result, Err):
                    return result
                values[attribute] = result.value
            return _construct(lambda: make_record(target, values))

        return decode

    def _tagged_union(self, target: object, name: str) -> Decoder[object]:
        cases = {
            case.name: (case, tuple(self.synthesize(slot) for slot in case.slots))
            for case in union_cases(target)
        }
        case_name_decoder = index(0, string)

        def make(case_name: str, arguments: Sequence[JsonValue]) -> DecodeResult[object]:
            entry = cases.get(case_name)
            if entry is None:
                return failure(FailMessage(message=f"Cannot find case {case_name} in {name}"))
            case, decoders = entry
            return _mixed_array("union fields", decoders, arguments, 1).flat_map(
                lambda decoded: _construct(lambda: case.build(*decoded))
            )

        def decode(json_value: JsonValue) -> DecodeResult[object]:
            if is_string(json_value):
                return make(json_value, ())
            if is_array(json_value):
                case_name_result = case_name_decoder(json_value)
                if isinstance(case_name_result, Err):
                    return case_name_result
                return make(case_name_result.value, json_value[1:])
            return failure(BadPrimitive(expected="a string or array", value=json_value))

        return decode


__all__ = ["DecoderSynthesizer"]
