# typed_json/application/decoding/_navigation.py

"""Decoders that step into a sub-value and record where they stepped

Each combinator here adds exactly one unit of path context to a failure coming
back from the decoder it wraps: a field name, an index, or a walked path.
"""

# Standard library imports
from collections.abc import Sequence

# Local imports
from typed_json.core.domain.errors import BadField
from typed_json.core.domain.errors import BadPath
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import BadType
from typed_json.core.domain.errors import TooSmallArray
from typed_json.core.domain.errors import failure
from typed_json.core.types.aliases import DecodeResult
from typed_json.core.types.aliases import Decoder
from typed_json.core.types.json import JsonValue
from typed_json.core.types.result import Ok
from typed_json.shared.utils.json_utils import get_field
from typed_json.shared.utils.json_utils import is_array
from typed_json.shared.utils.json_utils import is_null
from typed_json.shared.utils.json_utils import is_object
from typed_json.shared.utils.json_utils import is_undefined


def field[T](field_name: str, decoder: Decoder[T]) -> Decoder[T]:
    """Decode the member ``field_name`` of an object

    The decoder is run even when the member is absent (it receives
    ``UNDEFINED``), so ``option`` can turn a missing member into ``None``.
    Any other decoder failing on an absent member is reported as ``BadField``.
    """

    def decode(value: JsonValue) -> DecodeResult[T]:
        if not is_object(value):
            return failure(BadType(expected="an object", value=value))

        field_value = get_field(field_name, value)
        result = decoder(field_value)
        if isinstance(result, Ok):
            return result
        if is_undefined(field_value):
            return failure(
                BadField(expected=f"an object with a field named `{field_name}`", value=value)
            )
        return result.map_error(lambda error: error.prepend_path(f".{field_name}"))

    return decode


def at[T](field_names: Sequence[str], decoder: Decoder[T]) -> Decoder[T]:
    """Walk a path of member names and decode the value found at the end

    A null or absent node along the way fails with ``BadPath`` naming the
    segment that could not be reached; a node that is not an object fails with
    ``BadType``.
    """
    names = tuple(field_names)
    path_description = f"an object with path `{'.'.join(names)}`"

    def decode(first_value: JsonValue) -> DecodeResult[T]:
        current_path = ""
        current_value = first_value
        for name in names:
            if is_null(current_value):
                return failure(
                    BadPath(expected=path_description, value=first_value, field_name=name),
                    path=current_path,
                )
            if not is_object(current_value):
                return failure(BadType(expected="an object", value=current_value), path=current_path)
            current_value = get_field(name, current_value)
            current_path += f".{name}"

        result = decoder(current_value)
        if isinstance(result, Ok):
            return result
        if is_undefined(current_value):
            return failure(
                BadPath(
                    expected=path_description,
                    value=first_value,
                    field_name=names[-1] if names else "",
                ),
                path=current_path,
            )
        return result.map_error(lambda error: error.prepend_path(current_path))

    return decode


def index[T](requested_index: int, decoder: Decoder[T]) -> Decoder[T]:
    """Decode one element of an array

    Raises:
        ValueError: if ``requested_index`` is negative
    """
    if requested_index < 0:
        raise ValueError(f"Array index must not be negative, got {requested_index}")

    def decode(value: JsonValue) -> DecodeResult[T]:
        if not is_array(value):
            return failure(BadPrimitive(expected="an array", value=value))
        if requested_index >= len(value):
            return failure(
                TooSmallArray(
                    expected=(
                        f"a longer array. Need index `{requested_index}` "
                        f"but there are only `{len(value)}` entries"
                    ),
                    value=value,
                )
            )
        return decoder(value[requested_index]).map_error(
            lambda error: error.prepend_path(f".[{requested_index}]")
        )

    return decode


def option[T](decoder: Decoder[T]) -> Decoder[T | None]:
    """Map null (or an absent member) to ``None``, decode anything else"""

    def decode(value: JsonValue) -> DecodeResult[T | None]:
        if is_null(value):
            return Ok(value=None)
        return decoder(value)

    return decode


def optional[T](field_name: str, decoder: Decoder[T]) -> Decoder[T | None]:
    """A member that may be missing or null, but must decode when present"""
    return field(field_name, option(decoder))


def optional_at[T](field_names: Sequence[str], decoder: Decoder[T]) -> Decoder[T | None]:
    return at(field_names, option(decoder))


__all__ = ["field", "at", "index", "option", "optional", "optional_at"]
