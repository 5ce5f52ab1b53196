from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Literal, TypeAlias

from pydantic import Discriminator, Field, Tag
from typing_extensions import assert_never

from ngffmeta._base import _BaseModel
from ngffmeta._errors import (
    AxesCountError,
    AxesOrderError,
    DuplicateAxisNameError,
    DuplicateOtherAxisError,
    DuplicateTimeAxisError,
    SpaceAxesCountError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "Axis",
    "ChannelAxis",
    "CustomAxis",
    "SpaceAxis",
    "SpaceUnit",
    "TimeAxis",
    "TimeUnit",
    "validate_axes",
]


class SpaceUnit(str, Enum):
    """Space units recognized by OME-NGFF (UDUNITS-2 names)."""

    ANGSTROM = "angstrom"
    ATTOMETER = "attometer"
    CENTIMETER = "centimeter"
    DECIMETER = "decimeter"
    EXAMETER = "exameter"
    FEMTOMETER = "femtometer"
    FOOT = "foot"
    GIGAMETER = "gigameter"
    HECTOMETER = "hectometer"
    INCH = "inch"
    KILOMETER = "kilometer"
    MEGAMETER = "megameter"
    METER = "meter"
    MICROMETER = "micrometer"
    MILE = "mile"
    MILLIMETER = "millimeter"
    NANOMETER = "nanometer"
    PARSEC = "parsec"
    PETAMETER = "petameter"
    PICOMETER = "picometer"
    TERAMETER = "terameter"
    YARD = "yard"
    YOCTOMETER = "yoctometer"
    YOTTAMETER = "yottameter"
    ZEPTOMETER = "zeptometer"
    ZETTAMETER = "zettameter"


class TimeUnit(str, Enum):
    """Time units recognized by OME-NGFF (UDUNITS-2 names)."""

    ATTOSECOND = "attosecond"
    CENTISECOND = "centisecond"
    DAY = "day"
    DECISECOND = "decisecond"
    EXASECOND = "exasecond"
    FEMTOSECOND = "femtosecond"
    GIGASECOND = "gigasecond"
    HECTOSECOND = "hectosecond"
    HOUR = "hour"
    KILOSECOND = "kilosecond"
    MEGASECOND = "megasecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    MINUTE = "minute"
    NANOSECOND = "nanosecond"
    PETASECOND = "petasecond"
    PICOSECOND = "picosecond"
    SECOND = "second"
    TERASECOND = "terasecond"
    YOCTOSECOND = "yoctosecond"
    YOTTASECOND = "yottasecond"
    ZEPTOSECOND = "zeptosecond"
    ZETTASECOND = "zettasecond"


# ------------------------------------------------------------------------------
# Axis models
# ------------------------------------------------------------------------------


class SpaceAxis(_BaseModel):
    """A spatial dimension (e.g. `x`, `y`, `z`)."""

    name: str = Field(description="Name of this axis, unique within a multiscale")
    type: Literal["space"] = "space"
    unit: SpaceUnit | str | None = Field(
        default=None,
        union_mode="left_to_right",
        description=(
            "Physical unit of this axis. Unrecognized units are kept verbatim."
        ),
    )


class TimeAxis(_BaseModel):
    """A temporal dimension."""

    name: str = Field(description="Name of this axis, unique within a multiscale")
    type: Literal["time"] = "time"
    unit: TimeUnit | str | None = Field(
        default=None,
        union_mode="left_to_right",
        description=(
            "Temporal unit of this axis. Unrecognized units are kept verbatim."
        ),
    )


class ChannelAxis(_BaseModel):
    """A channel dimension (e.g. fluorescence wavelengths)."""

    name: str = Field(description="Name of this axis, unique within a multiscale")
    type: Literal["channel"] = "channel"
    unit: str | None = None


class CustomAxis(_BaseModel):
    """An axis with a type outside of space/time/channel, or no type at all."""

    name: str = Field(description="Name of this axis, unique within a multiscale")
    type: str | None = Field(
        default=None, description="Free-form axis type, if any"
    )
    unit: str | None = None


_AXIS_TAGS = ("space", "time", "channel")


def _discriminate_axis(v: Any) -> str:
    if isinstance(v, dict):
        kind = v.get("type")
        return kind if kind in _AXIS_TAGS else "custom"
    if isinstance(v, SpaceAxis):
        return "space"
    if isinstance(v, TimeAxis):
        return "time"
    if isinstance(v, ChannelAxis):
        return "channel"
    return "custom"


Axis: TypeAlias = Annotated[
    (
        Annotated[SpaceAxis, Tag("space")]
        | Annotated[TimeAxis, Tag("time")]
        | Annotated[ChannelAxis, Tag("channel")]
        | Annotated[CustomAxis, Tag("custom")]
    ),
    Discriminator(_discriminate_axis),
]
"""Any axis that can appear in the `axes` list of a multiscale."""


# ------------------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------------------


def validate_axes(axes: Sequence[Axis]) -> None:
    """Check that `axes` form a legal OME-NGFF v0.4 axes list.

    The list must contain 2-5 axes with unique names, ordered as an optional
    time axis, an optional channel *or* custom axis, then 2-3 space axes.

    Parameters
    ----------
    axes : Sequence[Axis]
        The axes to check, in order.

    Raises
    ------
    InvalidAxesError
        The specific subclass for the first rule that is broken.
    """
    if not 2 <= len(axes) <= 5:
        raise AxesCountError(len(axes))

    space_count = 0
    has_time = False
    has_other = False
    names: set[str] = set()

    for axis in axes:
        if axis.name in names:
            raise DuplicateAxisNameError(axis.name)
        names.add(axis.name)

        if isinstance(axis, SpaceAxis):
            if space_count >= 3:
                raise SpaceAxesCountError()
            space_count += 1
        elif isinstance(axis, TimeAxis):
            if space_count or has_other:
                raise AxesOrderError()
            if has_time:
                raise DuplicateTimeAxisError()
            has_time = True
        elif isinstance(axis, (ChannelAxis, CustomAxis)):
            if space_count:
                raise AxesOrderError()
            if has_other:
                raise DuplicateOtherAxisError()
            has_other = True
        else:
            assert_never(axis)

    if space_count < 2:
        raise SpaceAxesCountError()
