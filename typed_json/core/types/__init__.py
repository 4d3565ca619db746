# typed_json/core/types/__init__.py

"""Type definitions for typed_json

Pure type definitions with no decoding logic. Note: the decoder aliases in
``aliases`` should be imported from their module directly, since they depend
on the error model and importing them here would create a cycle.
"""

# Local imports
from typed_json.core.types.json import JSONDict
from typed_json.core.types.json import JSONList
from typed_json.core.types.json import JSONPrimitive
from typed_json.core.types.json import JSONType
from typed_json.core.types.json import JsonValue
from typed_json.core.types.json import UNDEFINED
from typed_json.core.types.json import Undefined
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok
from typed_json.core.types.result import Result
from typed_json.core.types.scalars import BigInt
from typed_json.core.types.scalars import DateTimeOffset
from typed_json.core.types.scalars import Int64
from typed_json.core.types.scalars import UInt32
from typed_json.core.types.scalars import UInt64

__all__ = [
    # JSON
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    "JsonValue",
    "UNDEFINED",
    "Undefined",
    # Result monad
    "Ok",
    "Err",
    "Result",
    # Scalar markers
    "BigInt",
    "DateTimeOffset",
    "Int64",
    "UInt32",
    "UInt64",
]
