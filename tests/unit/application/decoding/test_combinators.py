# tests/unit/application/decoding/test_combinators.py

"""Tests for constant, alternative, chaining and map combinators"""

# Standard library imports
from dataclasses import dataclass

# Local imports
from typed_json.application.decoding._combinators import and_then
from typed_json.application.decoding._combinators import fail
from typed_json.application.decoding._combinators import map2
from typed_json.application.decoding._combinators import map3
from typed_json.application.decoding._combinators import map8
from typed_json.application.decoding._combinators import map_
from typed_json.application.decoding._combinators import map_n
from typed_json.application.decoding._combinators import nil
from typed_json.application.decoding._combinators import one_of
from typed_json.application.decoding._combinators import succeed
from typed_json.application.decoding._combinators import value
from typed_json.application.decoding._navigation import field
from typed_json.application.decoding._primitives import int_
from typed_json.application.decoding._primitives import string
from typed_json.core.domain.errors import BadOneOf
from typed_json.core.domain.errors import BadPrimitive
from typed_json.core.domain.errors import FailMessage
from typed_json.core.domain.errors import render_error
from typed_json.core.types.json import UNDEFINED
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok


@dataclass
class Point:
    x: int
    y: int


class TestConstants:
    def test_succeed_ignores_input(self):
        assert succeed(7)("anything") == Ok(value=7)

    def test_fail_ignores_input(self):
        result = fail("nope")(1)
        assert result.error.reason == FailMessage(message="nope")

    def test_nil_on_null(self):
        assert nil("default")(None) == Ok(value="default")
        assert nil("default")(UNDEFINED) == Ok(value="default")

    def test_nil_on_value(self):
        assert nil(0)(1).error.reason == BadPrimitive(expected="null", value=1)

    def test_value_is_identity(self):
        payload = {"a": [1]}
        assert value(payload).value is payload


class TestOneOf:
    """Test trying alternatives in order"""

    def test_first_success_wins(self):
        decoder = one_of([map_(str, int_), string])
        assert decoder(5) == Ok(value="5")
        assert decoder("five") == Ok(value="five")

    def test_later_alternatives_not_run_after_success(self, call_counter):
        counter = call_counter(string)
        one_of([int_, counter])(1)
        assert counter.calls == 0

    def test_collects_every_message(self):
        result = one_of([int_, string])(True)
        assert isinstance(result, Err)
        reason = result.error.reason
        assert isinstance(reason, BadOneOf)
        assert reason.messages == (
            "Error at: ``\nExpecting an int but instead got: true",
            "Error at: ``\nExpecting a string but instead got: true",
        )

    def test_rendering_lists_messages(self):
        result = one_of([int_, string])(None)
        assert render_error(result.error).startswith("I run into the following problems:\n\n")

    def test_nested_paths_are_kept_in_messages(self):
        result = one_of([field("a", int_)])({"a": "x"})
        assert result.error.reason.messages[0].startswith("Error at: `.a`")

    def test_empty_alternatives_fail(self):
        assert one_of([])(1).error.reason == BadOneOf(messages=())


class TestAndThen:
    def test_chooses_next_decoder(self):
        def by_version(version):
            if version == 1:
                return field("name", string)
            return field("title", string)

        decoder = and_then(by_version, field("version", int_))
        assert decoder({"version": 1, "name": "a"}) == Ok(value="a")
        assert decoder({"version": 2, "title": "b"}) == Ok(value="b")

    def test_first_failure_short_circuits(self):
        called = []

        def callback(result):
            called.append(result)
            return succeed(result)

        result = and_then(callback, int_)("x")
        assert isinstance(result, Err)
        assert called == []


class TestMap:
    """Test combining independent decoders"""

    def test_map_transforms(self):
        assert map_(lambda n: n * 2, int_)(4) == Ok(value=8)

    def test_map2_builds(self):
        decoder = map2(Point, field("x", int_), field("y", int_))
        assert decoder({"x": 1, "y": 2}) == Ok(value=Point(1, 2))

    def test_first_failure_in_argument_order(self):
        decoder = map3(
            lambda a, b, c: (a, b, c), field("a", int_), field("b", int_), field("c", int_)
        )
        result = decoder({"a": 1, "b": "x", "c": "y"})
        assert result.error.path == ".b"

    def test_all_decoders_run(self, call_counter):
        first = call_counter(fail("first"))
        second = call_counter(int_)
        result = map2(lambda a, b: (a, b), first, second)(1)
        assert result.error.reason == FailMessage(message="first")
        assert first.calls == 1
        assert second.calls == 1

    def test_map8(self):
        decoders = [field(name, int_) for name in "abcdefgh"]
        payload = {name: position for position, name in enumerate("abcdefgh")}
        assert map8(lambda *args: sum(args), *decoders)(payload) == Ok(value=28)

    def test_map_n_variadic(self):
        assert map_n(lambda: "none")(None) == Ok(value="none")
