from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from ngffmeta._base import _BaseModel
from ngffmeta._errors import (
    AcquisitionTimeError,
    DuplicateAcquisitionIdError,
    DuplicateIndexNameError,
    InconsistentWellError,
    InvalidIndexNameError,
    NonexistentWellError,
)
from ngffmeta._types import NonNegativeInt
from ngffmeta._util import is_alphanumeric

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "Acquisition",
    "Column",
    "Plate",
    "PlateWell",
    "Row",
    "validate_plate",
]


class Acquisition(_BaseModel):
    """A single imaging run of a plate.

    Multiple acquisitions allow tracking different imaging sessions of the same
    plate (e.g. time series, different conditions).
    """

    id: NonNegativeInt = Field(
        description="Unique identifier for this acquisition within the plate"
    )
    name: str | None = None
    maximum_field_count: NonNegativeInt | None = Field(
        default=None,
        alias="maximumfieldcount",
        description="Maximum number of fields of view in any well for this run",
    )
    description: str | None = None
    start_time: NonNegativeInt | None = Field(
        default=None,
        alias="starttime",
        description="Start timestamp (epoch milliseconds)",
    )
    end_time: NonNegativeInt | None = Field(
        default=None,
        alias="endtime",
        description="End timestamp (epoch milliseconds), not before `starttime`",
    )


class Column(_BaseModel):
    """A column of the plate grid."""

    name: str = Field(description="Column name, alphanumeric and unique (e.g. '1')")


class Row(_BaseModel):
    """A row of the plate grid."""

    name: str = Field(description="Row name, alphanumeric and unique (e.g. 'A')")


class PlateWell(_BaseModel):
    """A well of the plate, located by its row and column index."""

    path: str = Field(description="Path to the well group, as '{row}/{column}'")
    row_index: NonNegativeInt = Field(
        alias="rowIndex", description="Index into the plate's `rows`"
    )
    column_index: NonNegativeInt = Field(
        alias="columnIndex", description="Index into the plate's `columns`"
    )


class Plate(_BaseModel):
    """The `plate` metadata of a high-content screening plate.

    !!! example "Typical Structure"
        ```
        my_plate/
        ├── .zattrs            # Contains this metadata under "plate"
        ├── A/                 # Row A
        │   ├── 1/             # Well A/1
        │   │   ├── .zattrs    # Well metadata
        │   │   ├── 0/         # Field of view 0
        │   │   └── 1/         # Field of view 1
        │   └── 2/
        └── B/
        ```
    """

    acquisitions: list[Acquisition] | None = None
    columns: list[Column] = Field(description="Columns of the plate grid")
    rows: list[Row] = Field(description="Rows of the plate grid")
    wells: list[PlateWell] = Field(description="Wells that contain images")
    field_count: NonNegativeInt | None = Field(
        default=None, description="Maximum number of fields of view per well"
    )
    name: str | None = None
    version: str | None = None

    def acquisition_ids(self) -> set[int]:
        """Return the ids of all acquisitions (empty if there are none).

        When `acquisitions` is set, pass the result to
        [`validate_well`][ngffmeta.v04.validate_well] to check the wells of this
        plate.  Otherwise pass None: an empty set makes every field of view fail
        its acquisition check.
        """
        if self.acquisitions is None:
            return set()
        return {acq.id for acq in self.acquisitions}


def _validate_index_names(indices: Sequence[Row] | Sequence[Column]) -> None:
    names: set[str] = set()
    for idx in indices:
        if idx.name in names:
            raise DuplicateIndexNameError(idx.name)
        names.add(idx.name)
        if not is_alphanumeric(idx.name):
            raise InvalidIndexNameError(idx.name)


def _validate_acquisitions(acquisitions: Sequence[Acquisition]) -> None:
    ids: set[int] = set()
    for acq in acquisitions:
        if acq.id in ids:
            raise DuplicateAcquisitionIdError(acq.id)
        ids.add(acq.id)
        if acq.start_time is None or acq.end_time is None:
            continue
        if acq.end_time < acq.start_time:
            raise AcquisitionTimeError(acq.id)


def validate_plate(plate: Plate) -> None:
    """Check that a plate's grid, acquisitions and wells are consistent.

    Parameters
    ----------
    plate : Plate
        The plate to validate.

    Raises
    ------
    InvalidPlateError
        The specific subclass for the first problem found:

        - duplicate or non-alphanumeric row/column names
        - duplicate acquisition ids, or an acquisition ending before it starts
        - a well whose row or column index is out of range
        - a well whose path is not `"{row_name}/{column_name}"`
    """
    _validate_index_names(plate.rows)
    _validate_index_names(plate.columns)
    if plate.acquisitions is not None:
        _validate_acquisitions(plate.acquisitions)

    for well in plate.wells:
        if well.row_index >= len(plate.rows):
            raise NonexistentWellError(well.row_index)
        if well.column_index >= len(plate.columns):
            raise NonexistentWellError(well.column_index)
        row_name = plate.rows[well.row_index].name
        col_name = plate.columns[well.column_index].name
        expected = f"{row_name}/{col_name}"
        if well.path != expected:
            raise InconsistentWellError(well.path, expected)
