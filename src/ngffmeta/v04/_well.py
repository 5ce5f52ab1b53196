from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from ngffmeta._base import _BaseModel
from ngffmeta._errors import (
    DuplicateFieldOfViewPathError,
    InvalidFieldOfViewPathError,
    MissingAcquisitionError,
    UnknownAcquisitionError,
)
from ngffmeta._types import NonNegativeInt
from ngffmeta._util import is_alphanumeric

if TYPE_CHECKING:
    from collections.abc import Collection

__all__ = ["FieldOfView", "Well", "validate_well"]


class FieldOfView(_BaseModel):
    """A single field-of-view (imaging position) within a well.

    Wells typically contain multiple fields-of-view when the well area is larger
    than a single camera frame. Each field-of-view is a complete multiscale image.
    """

    path: str = Field(
        description=(
            "Relative path to this field's image group "
            "(typically a number like '0', '1', etc.)"
        ),
    )
    acquisition: NonNegativeInt | None = Field(
        default=None,
        description=(
            "Acquisition ID linking this field to a specific acquisition run. "
            "Required when the parent plate has acquisitions."
        ),
    )


class Well(_BaseModel):
    """The `well` metadata: all fields-of-view captured for one well.

    !!! example "Typical Structure"
        ```
        A/1/                   # Well at row A, column 1
        ├── .zattrs            # Contains this metadata under "well"
        ├── 0/                 # First field-of-view
        │   ├── .zattrs        # Image metadata
        │   ├── 0/             # Highest resolution
        │   └── 1/             # Next resolution
        └── 1/                 # Second field-of-view
        ```
    """

    images: list[FieldOfView] = Field(
        description="List of all fields-of-view imaged in this well",
    )
    version: str | None = None


def validate_well(well: Well, acquisitions: Collection[int] | None = None) -> None:
    """Check the fields-of-view of a well.

    Parameters
    ----------
    well : Well
        The well to validate.
    acquisitions : Collection[int] | None
        Acquisition ids known to the owning plate (see
        [`Plate.acquisition_ids`][ngffmeta.v04.Plate.acquisition_ids]).  When
        given, every field-of-view must name one of them.  When None, the
        `acquisition` of each field-of-view is not checked at all.

    Raises
    ------
    InvalidWellError
        The specific subclass for the first problem found.
    """
    paths: set[str] = set()
    for fov in well.images:
        if not is_alphanumeric(fov.path):
            raise InvalidFieldOfViewPathError(fov.path)
        if fov.path in paths:
            raise DuplicateFieldOfViewPathError(fov.path)
        paths.add(fov.path)

        if acquisitions is not None:
            if fov.acquisition is None:
                raise MissingAcquisitionError(fov.path)
            if fov.acquisition not in acquisitions:
                raise UnknownAcquisitionError(fov.acquisition)
