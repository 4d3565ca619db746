# typed_json/shared/utils/__init__.py

"""Shared helpers with no decoding logic of their own"""

# Local imports
from typed_json.shared.utils.json_utils import any_to_string
from typed_json.shared.utils.json_utils import get_field
from typed_json.shared.utils.json_utils import is_array
from typed_json.shared.utils.json_utils import is_boolean
from typed_json.shared.utils.json_utils import is_integral
from typed_json.shared.utils.json_utils import is_null
from typed_json.shared.utils.json_utils import is_number
from typed_json.shared.utils.json_utils import is_object
from typed_json.shared.utils.json_utils import is_string
from typed_json.shared.utils.json_utils import is_undefined
from typed_json.shared.utils.json_utils import object_keys
from typed_json.shared.utils.text_utils import to_camel_case
from typed_json.shared.utils.type_utils import type_name

__all__ = [
    "any_to_string",
    "get_field",
    "is_array",
    "is_boolean",
    "is_integral",
    "is_null",
    "is_number",
    "is_object",
    "is_string",
    "is_undefined",
    "object_keys",
    "to_camel_case",
    "type_name",
]
