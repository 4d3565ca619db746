# typed_json/application/decoding/_primitives.py

"""Primitive decoders

JSON numbers arrive as Python ``int`` or ``float``. Integer decoders therefore
re-check integrality and range instead of trusting the native type, and
accept numeric strings the way ``json`` producers commonly send large values.
"""

# Standard library imports
from datetime import datetime
from datetime import timedelta
from datetime import timezone
from decimal import Decimal
from decimal import InvalidOperation
from math import isfinite
from re import compile
from uuid import UUID

# Third party imports
from dateutil.parser import parse as parse_datetime

# Local imports
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import BadPrimitiveExtra
from typed_json.core.domain.errors import failure
from typed_json.core.types.aliases import DecodeResult
from typed_json.core.types.json import JsonValue
from typed_json.core.types.result import Ok
from typed_json.shared.utils.json_utils import is_boolean
from typed_json.shared.utils.json_utils import is_integral
from typed_json.shared.utils.json_utils import is_number
from typed_json.shared.utils.json_utils import is_string

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_INTEGER_PATTERN = compile(r"^\s*[+-]?\d+\s*$")
_TIMESPAN_PATTERN = compile(
    r"^\s*(?P<sign>-)?(?:(?P<days>\d+)\.)?(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})"
    r"(?::(?P<seconds>\d{1,2})(?:\.(?P<fraction>\d{1,7}))?)?\s*$"
)
_TIMESPAN_DAYS_PATTERN = compile(r"^\s*(?P<sign>-)?(?P<days>\d+)\s*$")


def _parse_integer(text: str, lower: int | None, upper: int | None) -> int | None:
    """Parse a decimal integer string, None if malformed or out of bounds"""
    if not _INTEGER_PATTERN.match(text):
        return None
    try:
        parsed = int(text)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return None
    if lower is not None and parsed < lower:
        return None
    if upper is not None and parsed > upper:
        return None
    return parsed


def _bounded_integer(
    value: JsonValue, expected: str, lower: int | None, upper: int | None
) -> DecodeResult[int]:
    if is_number(value):
        in_range = (lower is None or value >= lower) and (upper is None or value <= upper)
        if is_integral(value) and in_range:
            return Ok(value=int(value))
        return failure(
            BadPrimitiveExtra(
                expected=expected,
                value=value,
                detail=f"Value was either too large or too small for {expected}",
            )
        )
    if is_string(value):
        parsed = _parse_integer(value, lower, upper)
        if parsed is not None:
            return Ok(value=parsed)
    return failure(BadPrimitive(expected=expected, value=value))


def string(value: JsonValue) -> DecodeResult[str]:
    if is_string(value):
        return Ok(value=value)
    return failure(BadPrimitive(expected="a string", value=value))


def bool_(value: JsonValue) -> DecodeResult[bool]:
    if is_boolean(value):
        return Ok(value=value)
    return failure(BadPrimitive(expected="a boolean", value=value))


def float_(value: JsonValue) -> DecodeResult[float]:
    if is_number(value):
        try:
            return Ok(value=float(value))
        except OverflowError:
            return failure(
                BadPrimitiveExtra(
                    expected="a float",
                    value=value,
                    detail="Value was either too large or too small for a float",
                )
            )
    return failure(BadPrimitive(expected="a float", value=value))


def int_(value: JsonValue) -> DecodeResult[int]:
    """Decode a 32-bit signed integer"""
    return _bounded_integer(value, "an int", INT32_MIN, INT32_MAX)


def int64(value: JsonValue) -> DecodeResult[int]:
    return _bounded_integer(value, "an int64", INT64_MIN, INT64_MAX)


def uint32(value: JsonValue) -> DecodeResult[int]:
    return _bounded_integer(value, "an uint32", 0, UINT32_MAX)


def uint64(value: JsonValue) -> DecodeResult[int]:
    return _bounded_integer(value, "an uint64", 0, UINT64_MAX)


def bigint(value: JsonValue) -> DecodeResult[int]:
    """Decode an integer of any size"""
    return _bounded_integer(value, "a bigint", None, None)


def decimal_(value: JsonValue) -> DecodeResult[Decimal]:
    if is_number(value):
        if isinstance(value, int):
            return Ok(value=Decimal(value))
        if isfinite(value):
            # repr gives the shortest text that round-trips the float
            return Ok(value=Decimal(repr(value)))
    elif is_string(value):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation:
            pass
        else:
            if parsed.is_finite():
                return Ok(value=parsed)
    return failure(BadPrimitive(expected="a decimal", value=value))


def guid(value: JsonValue) -> DecodeResult[UUID]:
    if is_string(value):
        try:
            return Ok(value=UUID(value.strip()))
        except ValueError:
            pass
    return failure(BadPrimitive(expected="a guid", value=value))


def _parse_datetime_text(text: str) -> datetime | None:
    try:
        return parse_datetime(text)
    except (ValueError, OverflowError):
        return None


def _shift_timezone(parsed: datetime, tz: timezone | None) -> datetime | None:
    """Convert to ``tz`` (local time when None), None if the result is out of range"""
    try:
        return parsed.astimezone(tz)
    except (OverflowError, OSError):
        return None


def datetime_(value: JsonValue) -> DecodeResult[datetime]:
    """Decode a date/time and normalize it to UTC

    Values written without an offset are taken as local time.
    """
    if is_string(value):
        parsed = _parse_datetime_text(value)
        if parsed is not None:
            normalized = _shift_timezone(parsed, timezone.utc)
            if normalized is not None:
                return Ok(value=normalized)
    return failure(BadPrimitive(expected="a datetime", value=value))


def datetime_offset(value: JsonValue) -> DecodeResult[datetime]:
    """Decode a date/time keeping the offset it was written with"""
    if is_string(value):
        parsed = _parse_datetime_text(value)
        if parsed is not None:
            if parsed.tzinfo is not None:
                return Ok(value=parsed)
            localized = _shift_timezone(parsed, None)
            if localized is not None:
                return Ok(value=localized)
    return failure(BadPrimitive(expected="a datetimeoffset", value=value))


def _parse_timespan(text: str) -> timedelta | None:
    if match := _TIMESPAN_DAYS_PATTERN.match(text):
        span = timedelta(days=int(match["days"]))
        return -span if match["sign"] else span

    match = _TIMESPAN_PATTERN.match(text)
    if match is None:
        return None

    hours = int(match["hours"])
    minutes = int(match["minutes"])
    seconds = int(match["seconds"] or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        return None

    # Up to seven fractional digits (100ns ticks), truncated to microseconds
    fraction = match["fraction"] or ""
    microseconds = int((fraction + "0000000")[:7]) // 10

    span = timedelta(
        days=int(match["days"] or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=microseconds,
    )
    return -span if match["sign"] else span


def timespan(value: JsonValue) -> DecodeResult[timedelta]:
    if is_string(value):
        try:
            parsed = _parse_timespan(value)
        except (OverflowError, ValueError):
            # Day count beyond what timedelta can hold
            parsed = None
        if parsed is not None:
            return Ok(value=parsed)
    return failure(BadPrimitive(expected="a timespan", value=value))


__all__ = [
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
]
