# typed_json/application/decoding/_combinators.py

"""Combinators that build decoders out of other decoders

None of these step into a sub-value: they all run against the value they are
given, so they add no path context of their own.
"""

# Standard library imports
from collections.abc import Sequence
from typing import Callable

# Local imports
from typed_json.application.decoding._runners import from_value
from typed_json.core.domain.errors import BadOneOf
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import FailMessage
from typed_json.core.domain.errors import failure
from typed_json.core.types.aliases import DecodeResult
from typed_json.core.types.aliases import Decoder
from typed_json.core.types.json import JsonValue
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok
from typed_json.shared.utils.json_utils import is_null

# ============================================================================
# Constant decoders
# ============================================================================


def succeed[T](output: T) -> Decoder[T]:
    """Ignore the input and succeed with ``output``"""

    def decode(value: JsonValue) -> DecodeResult[T]:
        return Ok(value=output)

    return decode


def fail(message: str) -> Decoder[object]:
    """Ignore the input and fail with ``message``"""

    def decode(value: JsonValue) -> DecodeResult[object]:
        return failure(FailMessage(message=message))

    return decode


def nil[T](output: T) -> Decoder[T]:
    """Succeed with ``output`` when the value is null"""

    def decode(value: JsonValue) -> DecodeResult[T]:
        if is_null(value):
            return Ok(value=output)
        return failure(BadPrimitive(expected="null", value=value))

    return decode


def value(json_value: JsonValue) -> DecodeResult[JsonValue]:
    """Hand back the raw value untouched"""
    return Ok(value=json_value)


# ============================================================================
# Alternatives and chaining
# ============================================================================


def one_of[T](decoders: Sequence[Decoder[T]]) -> Decoder[T]:
    """Try each decoder on the same value; the first success wins

    When all of them fail, the rendered message of each one is kept, in order.
    """
    candidates = tuple(decoders)

    def decode(json_value: JsonValue) -> DecodeResult[T]:
        messages: list[str] = []
        for decoder in candidates:
            result = from_value(decoder, json_value)
            if isinstance(result, Ok):
                return result
            messages.append(result.error)
        return failure(BadOneOf(messages=tuple(messages)))

    return decode


def and_then[A, B](callback: Callable[[A], Decoder[B]], decoder: Decoder[A]) -> Decoder[B]:
    """Pick the next decoder from what the first one produced

    The chosen decoder runs against the original value, not a sub-value.
    """

    def decode(json_value: JsonValue) -> DecodeResult[B]:
        result = decoder(json_value)
        if isinstance(result, Err):
            return result
        return callback(result.value)(json_value)

    return decode


# ============================================================================
# Map functions
# ============================================================================


def map_n[R](ctor: Callable[..., R], *decoders: Decoder[object]) -> Decoder[R]:
    """Run every decoder on the same value and combine their results

    All decoders are run; when several fail, the first one in argument order
    is reported.
    """

    def decode(json_value: JsonValue) -> DecodeResult[R]:
        results = [decoder(json_value) for decoder in decoders]
        for result in results:
            if isinstance(result, Err):
                return result
        return Ok(value=ctor(*(result.value for result in results)))

    return decode


def map_[A, R](ctor: Callable[[A], R], d1: Decoder[A]) -> Decoder[R]:
    return map_n(ctor, d1)


def map2[A, B, R](ctor: Callable[[A, B], R], d1: Decoder[A], d2: Decoder[B]) -> Decoder[R]:
    return map_n(ctor, d1, d2)


def map3[A, B, C, R](
    ctor: Callable[[A, B, C], R], d1: Decoder[A], d2: Decoder[B], d3: Decoder[C]
) -> Decoder[R]:
    return map_n(ctor, d1, d2, d3)


def map4[A, B, C, D, R](
    ctor: Callable[[A, B, C, D], R],
    d1: Decoder[A],
    d2: Decoder[B],
    d3: Decoder[C],
    d4: Decoder[D],
) -> Decoder[R]:
    return map_n(ctor, d1, d2, d3, d4)


def map5[A, B, C, D, E, R](
    ctor: Callable[[A, B, C, D, E], R],
    d1: Decoder[A],
    d2: Decoder[B],
    d3: Decoder[C],
    d4: Decoder[D],
    d5: Decoder[E],
) -> Decoder[R]:
    return map_n(ctor, d1, d2, d3, d4, d5)


def map6[A, B, C, D, E, F, R](
    ctor: Callable[[A, B, C, D, E, F], R],
    d1: Decoder[A],
    d2: Decoder[B],
    d3: Decoder[C],
    d4: Decoder[D],
    d5: Decoder[E],
    d6: Decoder[F],
) -> Decoder[R]:
    return map_n(ctor, d1, d2, d3, d4, d5, d6)


def map7[A, B, C, D, E, F, G, R](
    ctor: Callable[[A, B, C, D, E, F, G], R],
    d1: Decoder[A],
    d2: Decoder[B],
    d3: Decoder[C],
    d4: Decoder[D],
    d5: Decoder[E],
    d6: Decoder[F],
    d7: Decoder[G],
) -> Decoder[R]:
    return map_n(ctor, d1, d2, d3, d4, d5, d6, d7)


def map8[A, B, C, D, E, F, G, H, R](
    ctor: Callable[[A, B, C, D, E, F, G, H], R],
    d1: Decoder[A],
    d2: Decoder[B],
    d3: Decoder[C],
    d4: Decoder[D],
    d5: Decoder[E],
    d6: Decoder[F],
    d7: Decoder[G],
    d8: Decoder[H],
) -> Decoder[R]:
    return map_n(ctor, d1, d2, d3, d4, d5, d6, d7, d8)


__all__ = [
    "succeed",
    "fail",
    "nil",
    "value",
    "one_of",
    "and_then",
    "map_n",
    "map_",
    "map2",
    "map3",
    "map4",
    "map5",
    "map6",
    "map7",
    "map8",
]
