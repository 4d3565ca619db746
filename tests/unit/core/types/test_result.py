# tests/unit/core/types/test_result.py

"""Tests for the Ok/Err result types"""

# Local imports
from typed_json.core.types.result import Err
from typed_json.core.types.result import Ok


class TestOk:
    def test_flags(self):
        assert Ok(value=1).is_ok()
        assert not Ok(value=1).is_err()

    def test_map(self):
        assert Ok(value=2).map(lambda n: n + 1) == Ok(value=3)

    def test_flat_map(self):
        assert Ok(value=2).flat_map(lambda n: Err(error=f"bad {n}")) == Err(error="bad 2")

    def test_map_error_is_noop(self):
        ok = Ok(value=2)
        assert ok.map_error(str.upper) is ok

    def test_value_is_not_copied(self):
        payload = [1, 2]
        assert Ok(value=payload).value is payload


class TestErr:
    def test_flags(self):
        assert Err(error="x").is_err()
        assert not Err(error="x").is_ok()

    def test_map_is_noop(self):
        err = Err(error="x")
        assert err.map(lambda n: n + 1) is err
        assert err.flat_map(lambda n: Ok(value=n)) is err

    def test_map_error(self):
        assert Err(error="x").map_error(str.upper) == Err(error="X")
