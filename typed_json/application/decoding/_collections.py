# typed_json/application/decoding/_collections.py

"""Decoders for homogeneous arrays and objects

All of them stop at the first element that fails; nothing after it is
decoded and no partial result is kept.
"""

# Local imports
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import failure
from typed_json.core.types.aliases import DecodeResult
from typed_json.core.types.aliases import Decoder
from typed_json.core.types.json import JsonValue
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok
from typed_json.shared.utils.json_utils import get_field
from typed_json.shared.utils.json_utils import is_array
from typed_json.shared.utils.json_utils import is_object
from typed_json.shared.utils.json_utils import object_keys


def _decode_elements[T](
    decoder: Decoder[T], values: list[JsonValue] | tuple[JsonValue, ...]
) -> DecodeResult[list[T]]:
    decoded: list[T] = []
    for position, item in enumerate(values):
        result = decoder(item)
        if isinstance(result, Err):
            return result.map_error(lambda error: error.prepend_path(f".[{position}]"))
        decoded.append(result.value)
    return Ok(value=decoded)


def list_[T](decoder: Decoder[T]) -> Decoder[list[T]]:
    """Decode every element of an array into a ``list``"""

    def decode(value: JsonValue) -> DecodeResult[list[T]]:
        if not is_array(value):
            return failure(BadPrimitive(expected="a list", value=value))
        return _decode_elements(decoder, value)

    return decode


def array[T](decoder: Decoder[T]) -> Decoder[tuple[T, ...]]:
    """Decode every element of an array into a ``tuple``"""

    def decode(value: JsonValue) -> DecodeResult[tuple[T, ...]]:
        if not is_array(value):
            return failure(BadPrimitive(expected="an array", value=value))
        return _decode_elements(decoder, value).map(tuple)

    return decode


def key_value_pairs[T](decoder: Decoder[T]) -> Decoder[list[tuple[str, T]]]:
    """Decode every member value of an object, keeping the member order"""

    def decode(value: JsonValue) -> DecodeResult[list[tuple[str, T]]]:
        if not is_object(value):
            return failure(BadPrimitive(expected="an object", value=value))

        pairs: list[tuple[str, T]] = []
        for key in object_keys(value):
            result = decoder(get_field(key, value))
            if isinstance(result, Err):
                return result.map_error(lambda error: error.prepend_path(f".{key}"))
            pairs.append((key, result.value))
        return Ok(value=pairs)

    return decode


def dict_[T](decoder: Decoder[T]) -> Decoder[dict[str, T]]:
    """Decode an object into a ``dict`` of decoded member values"""
    pairs_decoder = key_value_pairs(decoder)

    def decode(value: JsonValue) -> DecodeResult[dict[str, T]]:
        return pairs_decoder(value).map(dict)

    return decode


__all__ = ["list_", "array", "key_value_pairs", "dict_"]
