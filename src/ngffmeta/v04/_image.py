from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from pydantic import Field

from ngffmeta._base import _BaseModel
from ngffmeta._errors import InvalidDatasetError, InvalidTransformsError
from ngffmeta._util import SuggestDatasetPath
from ngffmeta.v04._axes import Axis, validate_axes
from ngffmeta.v04._transforms import (
    CoordinateTransformation,
    apply_transforms,
    invert_transforms,
    validate_transforms,
)

if TYPE_CHECKING:
    from collections.abc import MutableSequence

    from ngffmeta._resolve import TransformResolver

__all__ = ["Dataset", "Multiscale", "validate_dataset", "validate_multiscale"]


class Dataset(_BaseModel):
    """A single resolution level in a multiscale image pyramid.

    Each dataset points to a zarr array and describes how its array indices map
    into physical space.
    """

    path: Annotated[str, SuggestDatasetPath] = Field(
        description="Path to the zarr array for this resolution level, "
        "relative to the multiscale group",
    )
    coordinate_transformations: list[CoordinateTransformation] = Field(
        alias="coordinateTransformations",
        description=(
            "Transformations from array indices to physical coordinates: "
            "exactly one scale, optionally followed by one translation"
        ),
    )


class Multiscale(_BaseModel):
    """A multiscale image pyramid.

    `axes` and the `datasets` are validated by
    [`validate_multiscale`][ngffmeta.v04.validate_multiscale], not on
    construction, so an inconsistent pyramid can still be loaded and inspected.
    `name`, `version`, `type` and `metadata` are carried along unchecked.
    """

    axes: list[Axis] = Field(description="Dimension axes, in array order")
    datasets: list[Dataset] = Field(
        description="Resolution levels, ordered from highest to lowest resolution",
    )
    coordinate_transformations: list[CoordinateTransformation] | None = Field(
        default=None,
        alias="coordinateTransformations",
        description="Transformations applied to every dataset, after its own",
    )
    name: Any = None
    version: Any = None
    type: Any = Field(
        default=None, description="Type of downscaling method, e.g. 'gaussian'"
    )
    metadata: dict[str, Any] | None = None

    @property
    def ndim(self) -> int:
        """Number of dimensions, as given by the axes."""
        return len(self.axes)

    def _dataset(self, level: int) -> Dataset:
        # levels are pyramid indices, negative indexing is not allowed
        if not 0 <= level < len(self.datasets):
            raise IndexError(f"no dataset at level {level}")
        return self.datasets[level]

    def apply(
        self,
        level: int,
        coord: MutableSequence[float],
        resolver: TransformResolver | None = None,
    ) -> None:
        """Map `coord` from the array space of `level` into physical space.

        The dataset's own transformations are applied first, then the
        multiscale-wide ones.  `coord` is modified in place and left untouched if
        anything fails.
        """
        dataset = self._dataset(level)
        work = list(coord)
        apply_transforms(dataset.coordinate_transformations, work, resolver)
        if self.coordinate_transformations is not None:
            apply_transforms(self.coordinate_transformations, work, resolver)
        coord[:] = work

    def invert(
        self,
        level: int,
        coord: MutableSequence[float],
        resolver: TransformResolver | None = None,
    ) -> None:
        """Map `coord` from physical space back into the array space of `level`."""
        dataset = self._dataset(level)
        work = list(coord)
        if self.coordinate_transformations is not None:
            invert_transforms(self.coordinate_transformations, work, resolver)
        invert_transforms(dataset.coordinate_transformations, work, resolver)
        coord[:] = work


def validate_dataset(
    dataset: Dataset,
    ndim: int | None = None,
    resolver: TransformResolver | None = None,
) -> int | None:
    """Check the transformations of a single resolution level.

    A scale transformation is mandatory.  Returns the dimensionality implied by the
    transformations (reconciled with `ndim`).
    """
    return validate_transforms(
        dataset.coordinate_transformations, True, ndim, resolver
    )


def validate_multiscale(
    multiscale: Multiscale, resolver: TransformResolver | None = None
) -> None:
    """Check that a multiscale pyramid is internally consistent.

    The axes are validated once, then every dataset's transformations are checked
    against the number of axes, then the multiscale-wide transformations (if any).

    Raises
    ------
    InvalidAxesError
        If the axes are invalid.
    InvalidDatasetError
        If a dataset's transformations are invalid.  The underlying error is
        available as `.error` (and `__cause__`).
    InvalidTransformsError
        If the multiscale-wide transformations are invalid.
    """
    validate_axes(multiscale.axes)
    ndim = multiscale.ndim
    for i, dataset in enumerate(multiscale.datasets):
        try:
            validate_dataset(dataset, ndim, resolver)
        except InvalidTransformsError as e:
            raise InvalidDatasetError(i, dataset.path, e) from e
    if multiscale.coordinate_transformations is not None:
        validate_transforms(
            multiscale.coordinate_transformations, False, ndim, resolver
        )
