# typed_json/core/types/scalars.py

"""Markers for scalar kinds that have no dedicated Python type

Annotate record fields with these so the synthesizer picks the matching
range-checked decoder instead of the default one for the supertype.
"""

# Standard library imports
from datetime import datetime
from typing import NewType

UInt32 = NewType("UInt32", int)
Int64 = NewType("Int64", int)
UInt64 = NewType("UInt64", int)
BigInt = NewType("BigInt", int)

# A datetime that keeps the offset it was written with instead of being moved to UTC
DateTimeOffset = NewType("DateTimeOffset", datetime)

__all__ = ["UInt32", "Int64", "UInt64", "BigInt", "DateTimeOffset"]
