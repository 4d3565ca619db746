# typed_json/core/types/aliases.py

"""Type aliases for decoders and their results."""

# Standard library imports
from typing import Callable

# Local imports
from typed_json.core.domain.errors import DecodeError
from typed_json.core.types.json import JsonValue
from typed_json.core.types.result import Result

type DecodeResult[T] = Result[T, DecodeError]

# A decoder is a pure function: same input, same result, no state
type Decoder[T] = Callable[[JsonValue], DecodeResult[T]]

# Fully-qualified type name -> user supplied decoder
type ExtraCoders = dict[str, Decoder[object]]

__all__ = ["DecodeResult", "Decoder", "ExtraCoders"]
