from typing import Annotated, TypeAlias

from annotated_types import Ge, Interval

NonNegativeInt: TypeAlias = Annotated[int, Ge(0)]
"""Identifiers, indices and timestamps (unsigned in the NGFF schema)."""

UInt8: TypeAlias = Annotated[int, Interval(ge=0, le=255)]

RGBA: TypeAlias = tuple[UInt8, UInt8, UInt8, UInt8]
