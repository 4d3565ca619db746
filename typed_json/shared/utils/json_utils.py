# typed_json/shared/utils/json_utils.py

"""Runtime type tests and accessors over decoded JSON values

Values are whatever ``json.loads`` produces: ``dict`` for objects, ``list``
for arrays (tuples are accepted too), ``str``, ``int``/``float``, ``bool`` and
``None``. Members that are not present are reported as ``UNDEFINED``.
"""

# Standard library imports
from collections.abc import Mapping
from json import dumps
from math import isfinite
from typing import TypeIs

# Local imports
from typed_json.core.types.json import JsonValue
from typed_json.core.types.json import UNDEFINED
from typed_json.core.types.json import Undefined


def is_string(value: object) -> TypeIs[str]:
    return isinstance(value, str)


def is_boolean(value: object) -> TypeIs[bool]:
    return isinstance(value, bool)


def is_number(value: object) -> TypeIs[int | float]:
    """True for JSON numbers; booleans are not numbers here"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: object) -> TypeIs[list[JsonValue] | tuple[JsonValue, ...]]:
    return isinstance(value, (list, tuple))


def is_object(value: object) -> TypeIs[Mapping[str, JsonValue]]:
    return isinstance(value, Mapping)


def is_undefined(value: object) -> TypeIs[Undefined]:
    return value is UNDEFINED


def is_null(value: object) -> bool:
    """True for JSON null and for absent members"""
    return value is None or value is UNDEFINED


def is_integral(value: int | float) -> bool:
    """True when a number is finite and has no fractional part"""
    if isinstance(value, int):
        return True
    return isfinite(value) and value.is_integer()


def get_field(field_name: str, value: Mapping[str, JsonValue]) -> JsonValue:
    """Look up a member, returning ``UNDEFINED`` when it is not there"""
    return value.get(field_name, UNDEFINED)


def object_keys(value: Mapping[str, JsonValue]) -> list[str]:
    return list(value.keys())


def any_to_string(value: object) -> str:
    """Pretty-print a value for error messages

    Raises:
        ValueError: circular structure
        TypeError: value that JSON cannot represent
    """
    if value is UNDEFINED:
        return "undefined"
    return dumps(value, indent=4, ensure_ascii=False)


__all__ = [
    "is_string",
    "is_boolean",
    "is_number",
    "is_array",
    "is_object",
    "is_undefined",
    "is_null",
    "is_integral",
    "get_field",
    "object_keys",
    "any_to_string",
]
