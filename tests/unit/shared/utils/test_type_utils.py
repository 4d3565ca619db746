# tests/unit/shared/utils/test_type_utils.py

"""Tests for type descriptor naming"""

# Standard library imports
from typing import NewType
from uuid import UUID

# Local imports
from typed_json.core.types.scalars import UInt32
from typed_json.shared.utils.type_utils import type_name

OrderId = NewType("OrderId", int)
type Names = list[str]


class Outer:
    class Inner:
        pass


class TestTypeName:
    def test_builtin(self):
        assert type_name(int) == "builtins.int"

    def test_stdlib_class(self):
        assert type_name(UUID) == "uuid.UUID"

    def test_nested_class_uses_qualname(self):
        assert type_name(Outer.Inner) == f"{__name__}.Outer.Inner"

    def test_new_type(self):
        assert type_name(OrderId) == f"{__name__}.OrderId"
        assert type_name(UInt32) == "typed_json.core.types.scalars.UInt32"

    def test_type_alias(self):
        assert type_name(Names) == f"{__name__}.Names"

    def test_parameterised_form(self):
        assert type_name(list[int]) == "list[int]"
        assert type_name(dict[str, int]) == "dict[str, int]"
