# typed_json/application/decoding/_tuples.py

"""Fixed-arity decoders for arrays used as tuples

Positions are decoded in order with ``index``; the first failing position
stops decoding. Extra trailing elements are ignored.
"""

# Local imports
from typed_json.application.decoding._navigation import index
from typed_json.core.types.aliases import DecodeResult
from typed_json.core.types.aliases import Decoder
from typed_json.core.types.json import JsonValue
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok


def _positional(decoders: tuple[Decoder[object], ...]) -> Decoder[tuple[object, ...]]:
    positions = tuple(index(position, decoder) for position, decoder in enumerate(decoders))

    def decode(value: JsonValue) -> DecodeResult[tuple[object, ...]]:
        decoded: list[object] = []
        for decoder in positions:
            result = decoder(value)
            if isinstance(result, Err):
                return result
            decoded.append(result.value)
        return Ok(value=tuple(decoded))

    return decode


def tuple2[T1, T2](decoder1: Decoder[T1], decoder2: Decoder[T2]) -> Decoder[tuple[T1, T2]]:
    return _positional((decoder1, decoder2))


def tuple3[T1, T2, T3](
    decoder1: Decoder[T1], decoder2: Decoder[T2], decoder3: Decoder[T3]
) -> Decoder[tuple[T1, T2, T3]]:
    return _positional((decoder1, decoder2, decoder3))


def tuple4[T1, T2, T3, T4](
    decoder1: Decoder[T1],
    decoder2: Decoder[T2],
    decoder3: Decoder[T3],
    decoder4: Decoder[T4],
) -> Decoder[tuple[T1, T2, T3, T4]]:
    return _positional((decoder1, decoder2, decoder3, decoder4))


def tuple5[T1, T2, T3, T4, T5](
    decoder1: Decoder[T1],
    decoder2: Decoder[T2],
    decoder3: Decoder[T3],
    decoder4: Decoder[T4],
    decoder5: Decoder[T5],
) -> Decoder[tuple[T1, T2, T3, T4, T5]]:
    return _positional((decoder1, decoder2, decoder3, decoder4, decoder5))


def tuple6[T1, T2, T3, T4, T5, T6](
    decoder1: Decoder[T1],
    decoder2: Decoder[T2],
    decoder3: Decoder[T3],
    decoder4: Decoder[T4],
    decoder5: Decoder[T5],
    decoder6: Decoder[T6],
) -> Decoder[tuple[T1, T2, T3, T4, T5, T6]]:
    return _positional((decoder1, decoder2, decoder3, decoder4, decoder5, decoder6))


def tuple7[T1, T2, T3, T4, T5, T6, T7](
    decoder1: Decoder[T1],
    decoder2: Decoder[T2],
    decoder3: Decoder[T3],
    decoder4: Decoder[T4],
    decoder5: Decoder[T5],
    decoder6: Decoder[T6],
    decoder7: Decoder[T7],
) -> Decoder[tuple[T1, T2, T3, T4, T5, T6, T7]]:
    return _positional((decoder1, decoder2, decoder3, decoder4, decoder5, decoder6, decoder7))


def tuple8[T1, T2, T3, T4, T5, T6, T7, T8](
    decoder1: Decoder[T1],
    decoder2: Decoder[T2],
    decoder3: Decoder[T3],
    decoder4: Decoder[T4],
    decoder5: Decoder[T5],
    decoder6: Decoder[T6],
    decoder7: Decoder[T7],
    decoder8: Decoder[T8],
) -> Decoder[tuple[T1, T2, T3, T4, T5, T6, T7, T8]]:
    return _positional(
        (decoder1, decoder2, decoder3, decoder4, decoder5, decoder6, decoder7, decoder8)
    )


__all__ = ["tuple2", "tuple3", "tuple4", "tuple5", "tuple6", "tuple7", "tuple8"]
