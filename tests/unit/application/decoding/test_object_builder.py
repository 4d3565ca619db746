# tests/unit/application/decoding/test_object_builder.py

"""Tests for the imperative object builder"""

# Standard library imports
from dataclasses import dataclass

# Local imports
from typed_json.application.decoding._collections import list_
from typed_json.application.decoding._combinators import fail
from typed_json.application.decoding._combinators import one_of
from typed_json.application.decoding._navigation import at
from typed_json.application.decoding._navigation import field
from typed_json.application.decoding._navigation import index
from typed_json.application.decoding._object_builder import object_
from typed_json.application.decoding._primitives import int_
from typed_json.application.decoding._primitives import string
from typed_json.core.domain.errors import BadField
from typed_json.core.domain.errors import BadOneOf
from typed_json.core.domain.errors import BadPath
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import BadType
from typed_json.core.domain.errors import FailMessage
from typed_json.core.domain.errors import TooSmallArray
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok


@dataclass
class User:
    name: str
    age: int | None
    city: str | None = None


user_decoder = object_(
    lambda get: User(
        name=get.required.field("name", string),
        age=get.optional.field("age", int_),
        city=get.optional.raw(at(["address", "city"], string)),
    )
)


class TestRequired:
    """Test required accessors"""

    def test_builds_value(self):
        payload = {"name": "Ada", "age": 36, "address": {"city": "London"}}
        assert user_decoder(payload) == Ok(value=User("Ada", 36, "London"))

    def test_missing_required_field(self):
        result = user_decoder({"age": 3})
        assert isinstance(result, Err)
        assert isinstance(result.error.reason, BadField)

    def test_abort_stops_builder(self):
        seen = []

        def build(get):
            get.required.field("a", int_)
            seen.append("after")
            return None

        result = object_(build)({"a": "x"})
        assert result.error.path == ".a"
        assert seen == []

    def test_required_at(self):
        decoder = object_(lambda get: get.required.at(["a", "b"], int_))
        assert decoder({"a": {"b": 2}}) == Ok(value=2)
        assert decoder({"a": {"b": "x"}}).error.path == ".a.b"

    def test_required_raw(self):
        decoder = object_(lambda get: get.required.raw(field("a", int_)))
        assert decoder({"a": 1}) == Ok(value=1)

    def test_non_object_input(self):
        result = object_(lambda get: get.required.field("a", int_))([1])
        assert result.error.reason == BadType(expected="an object", value=[1])


class TestOptional:
    """Test optional accessors"""

    def test_absent_and_null_members(self):
        assert user_decoder({"name": "Ada"}) == Ok(value=User("Ada", None, None))
        assert user_decoder({"name": "Ada", "age": None}) == Ok(value=User("Ada", None, None))

    def test_present_but_wrong(self):
        result = user_decoder({"name": "Ada", "age": "old"})
        assert result.error.path == ".age"
        assert result.error.reason == BadPrimitive(expected="an int", value="old")

    def test_optional_field_on_non_object_aborts(self):
        result = object_(lambda get: get.optional.field("a", int_))("text")
        assert isinstance(result.error.reason, BadType)

    def test_raw_missing_field_is_none(self):
        decoder = object_(lambda get: get.optional.raw(field("a", int_)))
        assert decoder({}) == Ok(value=None)

    def test_raw_null_mismatch_is_none(self):
        decoder = object_(lambda get: get.optional.raw(field("a", int_)))
        assert decoder({"a": None}) == Ok(value=None)

    def test_raw_non_null_mismatch_aborts(self):
        decoder = object_(lambda get: get.optional.raw(field("a", int_)))
        assert decoder({"a": "x"}).error.reason == BadPrimitive(expected="an int", value="x")

    def test_raw_fail_aborts(self):
        decoder = object_(lambda get: get.optional.raw(fail("boom")))
        assert decoder({}).error.reason == FailMessage(message="boom")

    def test_raw_too_small_array_aborts(self):
        decoder = object_(lambda get: get.optional.raw(field("a", index(3, int_))))
        assert isinstance(decoder({"a": [1]}).error.reason, TooSmallArray)

    def test_raw_one_of_aborts(self):
        decoder = object_(lambda get: get.optional.raw(one_of([int_, string])))
        assert isinstance(decoder({}).error.reason, BadOneOf)

    def test_raw_list_with_bad_element_aborts(self):
        decoder = object_(lambda get: get.optional.raw(field("a", list_(int_))))
        assert decoder({"a": [1, "x"]}).error.path == ".a.[1]"

    def test_raw_null_element_is_treated_as_absent(self):
        decoder = object_(lambda get: get.optional.raw(field("a", list_(int_))))
        assert decoder({"a": [1, None]}) == Ok(value=None)

    def test_optional_at_reaches_missing_leaf(self):
        decoder = object_(lambda get: get.optional.at(["a", "b"], int_))
        assert decoder({"a": {}}) == Ok(value=None)

    def test_optional_at_missing_intermediate_aborts(self):
        decoder = object_(lambda get: get.optional.at(["a", "b"], int_))
        assert isinstance(decoder({}).error.reason, BadPath)
