# typed_json/core/types/json.py

"""JSON type definitions for the values decoders consume."""

# Standard library imports
from enum import Enum

# JSON Type Usage Guide:
# - JSONDict / JSONList: what json.loads hands back for objects and arrays
# - JSONType: any value produced by json.loads
# - JsonValue: what a decoder may receive, which also covers absent members

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]


class Undefined(Enum):
    """Marker for an object member that is not present at all

    Distinct from JSON null so that decoders can tell "missing" from "null".
    """

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = Undefined.UNDEFINED

type JsonValue = JSONType | Undefined

__all__ = [
    "JSONPrimitive",
    "JSONType",
    "JSONDict",
    "JSONList",
    "JsonValue",
    "Undefined",
    "UNDEFINED",
]
