# tests/unit/application/decoding/test_runners.py

"""Tests for the decoder entry points"""

# Standard library imports
from logging import DEBUG

# Third party imports
import pytest

# Local imports
from typed_json import run
from typed_json.application.decoding._collections import array
from typed_json.application.decoding._navigation import field
from typed_json.application.decoding._primitives import int_
from typed_json.application.decoding._runners import from_string
from typed_json.application.decoding._runners import from_value
from typed_json.application.decoding._runners import unsafe_from_string
from typed_json.core.domain.exceptions import DecodingError
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok


class TestFromValue:
    def test_success(self):
        assert from_value(array(int_), [1, 2, 3]) == Ok(value=(1, 2, 3))

    def test_failure_is_rendered_without_root(self):
        result = from_value(array(int_), [1, "two", 3])
        assert result == Err(error='Error at: `.[1]`\nExpecting an int but instead got: "two"')

    def test_run_alias(self):
        assert run is from_value


class TestFromString:
    """Test parsing and decoding JSON text"""

    def test_success(self):
        assert from_string(field("a", int_), '{"a": 4}') == Ok(value=4)

    def test_bytes_input(self):
        assert from_string(int_, b"12") == Ok(value=12)

    def test_failure_path_is_rooted(self):
        result = from_string(array(int_), '[1, "two", 3]')
        assert isinstance(result, Err)
        assert result.error.startswith("Error at: `$.[1]`\nExpecting an int")

    def test_invalid_json(self):
        result = from_string(int_, "{not json")
        assert isinstance(result, Err)
        assert result.error.startswith("Given an invalid JSON: ")

    @pytest.mark.parametrize(
        "text",
        [
            pytest.param(b"\x80", id="undecodable_bytes"),
            pytest.param("1" * 5000, id="integer_past_conversion_limit"),
        ],
    )
    def test_unparseable_input_is_reported(self, text):
        result = from_string(int_, text)
        assert isinstance(result, Err)
        assert result.error.startswith("Given an invalid JSON: ")

    def test_invalid_json_is_logged(self, caplog):
        with caplog.at_level(DEBUG, logger="typed_json.application.decoding._runners"):
            from_string(int_, "[")
        assert "Rejected invalid JSON text" in caplog.text


class TestUnsafeFromString:
    def test_returns_value(self):
        assert unsafe_from_string(array(int_), "[1, 2]") == (1, 2)

    def test_raises_with_message(self):
        with pytest.raises(DecodingError, match=r"Error at: `\$.a`"):
            unsafe_from_string(field("a", int_), '{"a": null}')

    def test_raises_on_invalid_json(self):
        with pytest.raises(DecodingError, match="Given an invalid JSON"):
            unsafe_from_string(int_, "")
