# typed_json/core/domain/__init__.py

"""Error model for decoding failures"""

# Local imports
from typed_json.core.domain.errors import BadField
from typed_json.core.domain.errors import BadOneOf
from typed_json.core.domain.errors import BadPath
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import BadPrimitiveExtra
from typed_json.core.domain.errors import BadType
from typed_json.core.domain.errors import DecodeError
from typed_json.core.domain.errors import ErrorReason
from typed_json.core.domain.errors import FailMessage
from typed_json.core.domain.errors import TooSmallArray
from typed_json.core.domain.errors import failure
from typed_json.core.domain.errors import render_error
from typed_json.core.domain.exceptions import DecoderGenerationError
from typed_json.core.domain.exceptions import DecodingError

__all__ = [
    "BadField",
    "BadOneOf",
    "BadPath",
    "BadPrimitive",
    "BadPrimitiveExtra",
    "BadType",
    "DecodeError",
    "ErrorReason",
    "FailMessage",
    "TooSmallArray",
    "failure",
    "render_error",
    "DecoderGenerationError",
    "DecodingError",
]
