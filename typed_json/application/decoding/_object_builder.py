# typed_json/application/decoding/_object_builder.py

"""Imperative object decoding

``object_`` hands a builder function a ``Getters`` value whose accessors
return plain decoded values. A failing required accessor aborts the builder
right away; the abort is turned back into a failed result by ``object_`` and
never escapes it.

Example:
    point = object_(
        lambda get: Point(
            x=get.required.field("x", int_),
            y=get.required.field("y", int_),
            label=get.optional.field("label", string),
        )
    )
"""

# Standard library imports
from collections.abc import Sequence
from typing import Callable

# Local imports
from typed_json.application.decoding._navigation import at
from typed_json.application.decoding._navigation import field
from typed_json.application.decoding._navigation import option
from typed_json.core.domain.errors import BadField
from typed_json.core.domain.errors import BadOneOf
from typed_json.core.domain.errors import BadPath
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import BadPrimitiveExtra
from typed_json.core.domain.errors import BadType
from typed_json.core.domain.errors import DecodeError
from typed_json.core.domain.errors import FailMessage
from typed_json.core.domain.errors import TooSmallArray
from typed_json.core.types.aliases import DecodeResult
from typed_json.core.types.aliases import Decoder
from typed_json.core.types.json import JsonValue
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok
from typed_json.shared.utils.json_utils import is_null


class _BuilderAbort(Exception):
    def __init__(self, error: DecodeError):
        super().__init__(error.path)
        self.error = error


def _unwrap[T](decoder: Decoder[T], value: JsonValue) -> T:
    result = decoder(value)
    if isinstance(result, Err):
        raise _BuilderAbort(result.error)
    return result.value


class RequiredGetter:
    """Accessors that must succeed"""

    def __init__(self, value: JsonValue):
        self._value = value

    def field[T](self, field_name: str, decoder: Decoder[T]) -> T:
        return _unwrap(field(field_name, decoder), self._value)

    def at[T](self, field_names: Sequence[str], decoder: Decoder[T]) -> T:
        return _unwrap(at(field_names, decoder), self._value)

    def raw[T](self, decoder: Decoder[T]) -> T:
        """Run ``decoder`` on the whole object"""
        return _unwrap(decoder, self._value)


class OptionalGetter:
    """Accessors that return ``None`` when the data is absent

    Absent means a missing member, a null one, or a path that cannot be
    reached. Data that is present but malformed still aborts the builder.
    """

    def __init__(self, value: JsonValue):
        self._value = value

    def field[T](self, field_name: str, decoder: Decoder[T]) -> T | None:
        return _unwrap(field(field_name, option(decoder)), self._value)

    def at[T](self, field_names: Sequence[str], decoder: Decoder[T]) -> T | None:
        return _unwrap(at(field_names, option(decoder)), self._value)

    def raw[T](self, decoder: Decoder[T]) -> T | None:
        """Run ``decoder`` on the whole object, tolerating absence"""
        result = decoder(self._value)
        if isinstance(result, Ok):
            return result.value

        match result.error.reason:
            case (
                BadPrimitive(value=offending)
                | BadPrimitiveExtra(value=offending)
                | BadType(value=offending)
            ):
                if is_null(offending):
                    return None
                raise _BuilderAbort(result.error)
            case BadField() | BadPath():
                return None
            case TooSmallArray() | FailMessage() | BadOneOf():
                raise _BuilderAbort(result.error)


class Getters:
    """What an ``object_`` builder receives"""

    def __init__(self, value: JsonValue):
        self._required = RequiredGetter(value)
        self._optional = OptionalGetter(value)

    @property
    def required(self) -> RequiredGetter:
        return self._required

    @property
    def optional(self) -> OptionalGetter:
        return self._optional


def object_[T](builder: Callable[[Getters], T]) -> Decoder[T]:
    """Decode a value by running ``builder`` against accessors over it

    The first failing accessor ends the build; later accessors are not run.
    """

    def decode(value: JsonValue) -> DecodeResult[T]:
        try:
            return Ok(value=builder(Getters(value)))
        except _BuilderAbort as abort:
            return Err(error=abort.error)

    return decode


__all__ = ["RequiredGetter", "OptionalGetter", "Getters", "object_"]
