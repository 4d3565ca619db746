# typed_json/application/decoding/_runners.py

"""Entry points that run a decoder and render its failure

This is the only place where a ``DecodeError`` is turned into text for the
caller; everything below it passes the structured error upwards.
"""

# Standard library imports
from json import loads
from logging import getLogger

# Local imports
from typed_json.core.domain.errors import render_error
from typed_json.core.domain.exceptions import DecodingError
from typed_json.core.types.aliases import Decoder
from typed_json.core.types.json import JsonValue
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok
from typed_json.core.types.result import Result

logger = getLogger(__name__)


def from_value[T](decoder: Decoder[T], value: JsonValue) -> Result[T, str]:
    """Run a decoder on an already parsed JSON value

    Args:
        decoder: Decoder to run
        value: Parsed JSON value

    Returns:
        ``Ok`` with the decoded value, or ``Err`` with the rendered message
    """
    result = decoder(value)
    if isinstance(result, Ok):
        return result
    return Err(error=render_error(result.error))


def from_string[T](decoder: Decoder[T], text: str | bytes) -> Result[T, str]:
    """Parse JSON text and run a decoder on it

    Failure paths are rooted at ``$``.

    Args:
        decoder: Decoder to run
        text: JSON document

    Returns:
        ``Ok`` with the decoded value, or ``Err`` with the rendered message
    """
    try:
        json_value = loads(text)
    except ValueError as e:
        # Also covers undecodable bytes and over-long integer literals
        logger.debug(f"Rejected invalid JSON text: {e}")
        return Err(error=f"Given an invalid JSON: {e}")

    result = decoder(json_value)
    if isinstance(result, Ok):
        return result
    return Err(error=render_error(result.error.prepend_path("$")))


def unsafe_from_string[T](decoder: Decoder[T], text: str | bytes) -> T:
    """Like ``from_string`` but returns the value directly

    Raises:
        DecodingError: with the rendered message when parsing or decoding fails
    """
    result = from_string(decoder, text)
    if isinstance(result, Err):
        raise DecodingError(result.error)
    return result.value


__all__ = ["from_value", "from_string", "unsafe_from_string"]
