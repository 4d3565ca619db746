# typed_json/application/decoding/__init__.py

"""Hand-written decoders: primitives, navigation and combinators"""

# Local imports
from typed_json.application.decoding._collections import array
from typed_json.application.decoding._collections import dict_
from typed_json.application.decoding._collections import key_value_pairs
from typed_json.application.decoding._collections import list_
from typed_json.application.decoding._combinators import and_then
from typed_json.application.decoding._combinators import fail
from typed_json.application.decoding._combinators import map2
from typed_json.application.decoding._combinators import map3
from typed_json.application.decoding._combinators import map4
from typed_json.application.decoding._combinators import map5
from typed_json.application.decoding._combinators import map6
from typed_json.application.decoding._combinators import map7
from typed_json.application.decoding._combinators import map8
from typed_json.application.decoding._combinators import map_
from typed_json.application.decoding._combinators import map_n
from typed_json.application.decoding._combinators import nil
from typed_json.application.decoding._combinators import one_of
from typed_json.application.decoding._combinators import succeed
from typed_json.application.decoding._combinators import value
from typed_json.application.decoding._navigation import at
from typed_json.application.decoding._navigation import field
from typed_json.application.decoding._navigation import index
from typed_json.application.decoding._navigation import option
from typed_json.application.decoding._navigation import optional
from typed_json.application.decoding._navigation import optional_at
from typed_json.application.decoding._object_builder import Getters
from typed_json.application.decoding._object_builder import OptionalGetter
from typed_json.application.decoding._object_builder import RequiredGetter
from typed_json.application.decoding._object_builder import object_
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
from typed_json.application.decoding._runners import from_string
from typed_json.application.decoding._runners import from_value
from typed_json.application.decoding._runners import unsafe_from_string
from typed_json.application.decoding._tuples import tuple2
from typed_json.application.decoding._tuples import tuple3
from typed_json.application.decoding._tuples import tuple4
from typed_json.application.decoding._tuples import tuple5
from typed_json.application.decoding._tuples import tuple6
from typed_json.application.decoding._tuples import tuple7
from typed_json.application.decoding._tuples import tuple8

__all__ = [
    # Runners
    "from_value",
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
    # Tuples
    "tuple2",
    "tuple3",
    "tuple4",
    "tuple5",
    "tuple6",
    "tuple7",
    "tuple8",
    # Object builder
    "object_",
    "Getters",
    "RequiredGetter",
    "OptionalGetter",
]
