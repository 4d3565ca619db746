# typed_json/core/domain/errors.py

"""Decode failure taxonomy and its human-readable rendering

Every decoder reports failures as a ``DecodeError``: a path (built right to
left as the failure bubbles up through enclosing combinators) and a reason.
The reason is fixed when the failure is created; only the path is extended
afterwards.
"""

# Standard library imports
from typing import Annotated
from typing import Literal
from typing import assert_never

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from typed_json.core.types.result import Err
from typed_json.shared.utils.json_utils import any_to_string

# ============================================================================
# Failure reasons
# ============================================================================


class BadPrimitive(BaseModel):
    """Value is not of the expected primitive kind."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_primitive"] = "bad_primitive"
    expected: str
    value: object


class BadType(BaseModel):
    """Value is not of the expected container kind."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_type"] = "bad_type"
    expected: str
    value: object


class BadPrimitiveExtra(BaseModel):
    """Value has the right kind but cannot be represented."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_primitive_extra"] = "bad_primitive_extra"
    expected: str
    value: object
    detail: str


class BadField(BaseModel):
    """Object is missing a required member."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_field"] = "bad_field"
    expected: str
    value: object


class BadPath(BaseModel):
    """Path traversal hit a missing or null node."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_path"] = "bad_path"
    expected: str
    value: object
    field_name: str


class TooSmallArray(BaseModel):
    """Array is shorter than the requested index."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["too_small_array"] = "too_small_array"
    expected: str
    value: object


class BadOneOf(BaseModel):
    """Every alternative failed; holds their rendered messages in order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_one_of"] = "bad_one_of"
    messages: tuple[str, ...]


class FailMessage(BaseModel):
    """Failure raised on purpose by a ``fail`` decoder."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fail_message"] = "fail_message"
    message: str


type ErrorReason = Annotated[
    BadPrimitive
    | BadType
    | BadPrimitiveExtra
    | BadField
    | BadPath
    | TooSmallArray
    | BadOneOf
    | FailMessage,
    Field(discriminator="kind"),
]


class DecodeError(BaseModel):
    """A failure reason together with where in the input it happened."""

    model_config = ConfigDict(frozen=True)

    path: str = ""
    reason: ErrorReason

    def prepend_path(self, segment: str) -> "DecodeError":
        """Return a copy with ``segment`` put in front of the current path"""
        return self.model_copy(update={"path": segment + self.path})

    def render(self) -> str:
        return render_error(self)


def failure(reason: ErrorReason, path: str = "") -> Err[DecodeError]:
    """Wrap a reason into a failed decode result"""
    return Err(error=DecodeError(path=path, reason=reason))


# ============================================================================
# Rendering
# ============================================================================


def _generic_message(expected: str, value: object, new_line: bool) -> str:
    separator = "\n" if new_line else " "
    try:
        return f"Expecting {expected} but instead got:{separator}{any_to_string(value)}"
    except (ValueError, TypeError, RecursionError):
        return (
            f"Expecting {expected} but decoder failed. "
            f"Couldn't report given value due to circular structure.{separator}"
        )


def _describe_reason(reason: ErrorReason) -> str:
    match reason:
        case BadPrimitive(expected=expected, value=value):
            return _generic_message(expected, value, False)
        case BadType(expected=expected, value=value):
            return _generic_message(expected, value, True)
        case BadPrimitiveExtra(expected=expected, value=value, detail=detail):
            return _generic_message(expected, value, False) + f"\nReason: {detail}"
        case BadField(expected=expected, value=value):
            return _generic_message(expected, value, True)
        case BadPath(expected=expected, value=value, field_name=field_name):
            return _generic_message(expected, value, True) + f"\nNode `{field_name}` is unknown."
        case TooSmallArray(expected=expected, value=value):
            try:
                return f"Expecting {expected}.\n{any_to_string(value)}"
            except (ValueError, TypeError, RecursionError):
                return f"Expecting {expected}."
        case BadOneOf(messages=messages):
            return "I run into the following problems:\n\n" + "\n".join(messages)
        case FailMessage(message=message):
            return f"I run into a `fail` decoder: {message}"
        case _:
            assert_never(reason)


def render_error(error: DecodeError) -> str:
    """Render a decode error as the message handed back to callers

    ``BadOneOf`` is shown without a location because each alternative already
    carries its own.
    """
    reason = _describe_reason(error.reason)
    if isinstance(error.reason, BadOneOf):
        return reason
    return f"Error at: `{error.path}`\n{reason}"


__all__ = [
    "BadPrimitive",
    "BadType",
    "BadPrimitiveExtra",
    "BadField",
    "BadPath",
    "TooSmallArray",
    "BadOneOf",
    "FailMessage",
    "ErrorReason",
    "DecodeError",
    "failure",
    "render_error",
]
