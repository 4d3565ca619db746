# typed_json/__init__.py

"""Typed JSON Decoding Package

Composable decoders that turn parsed JSON into typed Python values with
precise, path-annotated error messages, plus decoders synthesized from type
descriptors such as dataclasses, pydantic models and enums.
"""

# Local imports
# Automatic decoders
from typed_json.application.auto import AutoDecoder
from typed_json.application.auto import auto_from_string
from typed_json.application.auto import generate_decoder

# Hand-written decoders
from typed_json.application.decoding import Getters
from typed_json.application.decoding import and_then
from typed_json.application.decoding import array
from typed_json.application.decoding import at
from typed_json.application.decoding import bigint
from typed_json.application.decoding import bool_
from typed_json.application.decoding import datetime_
from typed_json.application.decoding import datetime_offset
from typed_json.application.decoding import decimal_
from typed_json.application.decoding import dict_
from typed_json.application.decoding import fail
from typed_json.application.decoding import field
from typed_json.application.decoding import float_
from typed_json.application.decoding import from_string
from typed_json.application.decoding import from_value
from typed_json.application.decoding import guid
from typed_json.application.decoding import index
from typed_json.application.decoding import int64
from typed_json.application.decoding import int_
from typed_json.application.decoding import key_value_pairs
from typed_json.application.decoding import list_
from typed_json.application.decoding import map2
from typed_json.application.decoding import map3
from typed_json.application.decoding import map4
from typed_json.application.decoding import map5
from typed_json.application.decoding import map6
from typed_json.application.decoding import map7
from typed_json.application.decoding import map8
from typed_json.application.decoding import map_
from typed_json.application.decoding import map_n
from typed_json.application.decoding import nil
from typed_json.application.decoding import object_
from typed_json.application.decoding import one_of
from typed_json.application.decoding import option
from typed_json.application.decoding import optional
from typed_json.application.decoding import optional_at
from typed_json.application.decoding import string
from typed_json.application.decoding import succeed
from typed_json.application.decoding import timespan
from typed_json.application.decoding import tuple2
from typed_json.application.decoding import tuple3
from typed_json.application.decoding import tuple4
from typed_json.application.decoding import tuple5
from typed_json.application.decoding import tuple6
from typed_json.application.decoding import tuple7
from typed_json.application.decoding import tuple8
from typed_json.application.decoding import uint32
from typed_json.application.decoding import uint64
from typed_json.application.decoding import unsafe_from_string
from typed_json.application.decoding import value

# Error model and results
from typed_json.core.domain import DecodeError
from typed_json.core.domain import DecoderGenerationError
from typed_json.core.domain import DecodingError
from typed_json.core.types import Err
from typed_json.core.types import Ok
from typed_json.core.types import Result
from typed_json.core.types import UNDEFINED

# Scalar markers for automatic decoders
from typed_json.core.types import BigInt
from typed_json.core.types import DateTimeOffset
from typed_json.core.types import Int64
from typed_json.core.types import UInt32
from typed_json.core.types import UInt64

# For users who want lower-level control
from typed_json.infrastructure import AutoConfig
from typed_json.infrastructure import DecoderCache

run = from_value

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Runners
    "from_value",
    "run",
    "from_string",
    "unsafe_from_string",
    # Primitives
    "string",
    "bool_",
    "float_",
    "int_",
    "int64",
    "uint32",
    "uint64",
    "bigint",
    "decimal_",
    "guid",
    "datetime_",
    "datetime_offset",
    "timespan",
    # Navigation
    "field",
    "at",
    "index",
    "option",
    "optional",
    "optional_at",
    # Collections
    "list_",
    "array",
    "key_value_pairs",
    "dict_",
    # Combinators
    "one_of",
    "and_then",
    "succeed",
    "fail",
    "nil",
    "value",
    "map_n",
    "map_",
    "map2",
    "map3",
    "map4",
    "map5",
    "map6",
    "map7",
    "map8",
    "tuple2",
    "tuple3",
    "tuple4",
    "tuple5",
    "tuple6",
    "tuple7",
    "tuple8",
    "object_",
    "Getters",
    # Automatic decoders
    "AutoDecoder",
    "AutoConfig",
    "DecoderCache",
    "generate_decoder",
    "auto_from_string",
    # Errors and results
    "DecodeError",
    "DecoderGenerationError",
    "DecodingError",
    "Ok",
    "Err",
    "Result",
    "UNDEFINED",
    # Scalar markers
    "BigInt",
    "DateTimeOffset",
    "Int64",
    "UInt32",
    "UInt64",
    # Version
    "__version__",
]
