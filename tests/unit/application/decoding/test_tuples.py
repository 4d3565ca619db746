# tests/unit/application/decoding/test_tuples.py

"""Tests for fixed-arity tuple decoders"""

# Local imports
from typed_json.application.decoding._primitives import bool_
from typed_json.application.decoding._primitives import int_
from typed_json.application.decoding._primitives import string
from typed_json.application.decoding._tuples import tuple2
from typed_json.application.decoding._tuples import tuple3
from typed_json.application.decoding._tuples import tuple8
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import TooSmallArray
from typed_json.core.types.result import Ok


class TestTuples:
    def test_tuple2(self):
        assert tuple2(string, int_)(["a", 1]) == Ok(value=("a", 1))

    def test_extra_elements_ignored(self):
        assert tuple2(string, int_)(["a", 1, "extra"]) == Ok(value=("a", 1))

    def test_too_short(self):
        result = tuple3(string, int_, bool_)(["a", 1])
        assert isinstance(result.error.reason, TooSmallArray)

    def test_failing_slot_path(self):
        result = tuple3(string, int_, bool_)(["a", 1, "yes"])
        assert result.error.path == ".[2]"
        assert result.error.reason == BadPrimitive(expected="a boolean", value="yes")

    def test_stops_at_first_failing_slot(self, call_counter):
        counter = call_counter(int_)
        tuple2(string, counter)([1, 2])
        assert counter.calls == 0

    def test_non_array(self):
        assert tuple2(string, int_)("x").error.reason.expected == "an array"

    def test_tuple8(self):
        decoder = tuple8(*([int_] * 8))
        assert decoder(list(range(8))) == Ok(value=tuple(range(8)))
