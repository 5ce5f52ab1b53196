"""Coordinate transformations: models, application, and validation.

OME-NGFF v0.4 allows three kinds of coordinate transformation in a multiscale:

- `identity`: does nothing.  It is a placeholder only and is *not* allowed in a
  validated list of transformations.
- `scale`: multiplies each coordinate by a factor.
- `translation`: adds an offset to each coordinate.

Scale and translation either embed their per-axis vector or name a zarr array by
`path`.  Applying (or inverting) a path-valued transformation requires a
[`TransformResolver`][ngffmeta.TransformResolver].

Transformations operate *in place* on a mutable coordinate buffer (a list, or a
1-D numpy array), with one value per axis.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, ClassVar, Literal, TypeAlias

from pydantic import Field, model_validator
from typing_extensions import Self, assert_never

from ngffmeta._base import _BaseModel
from ngffmeta._dims import check_dims, union_ndim
from ngffmeta._errors import (
    InconsistentDimensionality,
    MissingScaleError,
    TransformCountError,
    TransformDimensionalityError,
    TransformOrderError,
    UnresolvedTransformError,
    UnsupportedTransformError,
    ZeroScaleError,
)

if TYPE_CHECKING:
    from collections.abc import MutableSequence, Sequence

    from ngffmeta._resolve import TransformResolver

__all__ = [
    "CoordinateTransformation",
    "IdentityTransformation",
    "ScaleTransformation",
    "TranslationTransformation",
    "apply_transform",
    "apply_transforms",
    "invert_transform",
    "invert_transforms",
    "transform_ndim",
    "validate_transforms",
]


class IdentityTransformation(_BaseModel):
    """The identity transformation."""

    type: Literal["identity"] = "identity"


class _VectorOrPath(_BaseModel):
    _vector_field: ClassVar[str]

    path: str | None = Field(
        default=None,
        description="Path to a zarr array holding the per-axis vector",
    )

    @classmethod
    def from_path(cls, path: str) -> Self:
        """Create a transformation whose vector is stored at `path`."""
        return cls(path=path)

    @property
    def vector(self) -> list[float] | None:
        """The inline per-axis vector, or None if stored by path."""
        return getattr(self, self._vector_field)

    @model_validator(mode="after")
    def _check_vector_xor_path(self) -> Self:
        if (self.vector is None) == (self.path is None):
            raise ValueError(
                f"exactly one of '{self._vector_field}' or 'path' is required"
            )
        return self


class ScaleTransformation(_VectorOrPath):
    """Scale each axis by a factor.

    !!! example
        ```python
        ScaleTransformation(scale=[1.0, 0.5, 0.5])
        ScaleTransformation.from_path("scales/0")
        ```
    """

    _vector_field: ClassVar[str] = "scale"

    type: Literal["scale"] = "scale"
    scale: list[float] | None = Field(
        default=None, description="Scale factor for each axis"
    )


class TranslationTransformation(_VectorOrPath):
    """Translate each axis by an offset."""

    _vector_field: ClassVar[str] = "translation"

    type: Literal["translation"] = "translation"
    translation: list[float] | None = Field(
        default=None, description="Offset for each axis"
    )


CoordinateTransformation: TypeAlias = Annotated[
    IdentityTransformation | TranslationTransformation | ScaleTransformation,
    Field(discriminator="type"),
]


# ------------------------------------------------------------------------------
# Resolving vectors
# ------------------------------------------------------------------------------


def _resolve_vector(
    transform: ScaleTransformation | TranslationTransformation,
    resolver: TransformResolver | None,
) -> list[float]:
    if (vector := transform.vector) is not None:
        return vector
    assert transform.path is not None
    if resolver is None:
        raise UnresolvedTransformError(transform.type, transform.path)
    return [float(v) for v in resolver.resolve(transform.path)]


def transform_ndim(
    transform: CoordinateTransformation, resolver: TransformResolver | None = None
) -> int | None:
    """Return the dimensionality implied by `transform`, if it is known.

    Identity transformations have no dimensionality.  Path-valued transformations
    have an unknown dimensionality unless a `resolver` is given.
    """
    if isinstance(transform, IdentityTransformation):
        return None
    elif isinstance(transform, (ScaleTransformation, TranslationTransformation)):
        if transform.vector is None and resolver is None:
            return None
        return len(_resolve_vector(transform, resolver))
    else:
        assert_never(transform)


# ------------------------------------------------------------------------------
# Application
# ------------------------------------------------------------------------------


def apply_transform(
    transform: CoordinateTransformation,
    coord: MutableSequence[float],
    resolver: TransformResolver | None = None,
) -> None:
    """Apply `transform` to `coord` in place.

    Raises
    ------
    InconsistentDimensionality
        If the transformation vector and `coord` differ in length.  `coord` is not
        modified.
    UnresolvedTransformError
        If the transformation is stored by path and no `resolver` is given.
    """
    if isinstance(transform, IdentityTransformation):
        return
    elif isinstance(transform, TranslationTransformation):
        offsets = _resolve_vector(transform, resolver)
        check_dims(len(offsets), len(coord))
        for i, offset in enumerate(offsets):
            coord[i] += offset
    elif isinstance(transform, ScaleTransformation):
        factors = _resolve_vector(transform, resolver)
        check_dims(len(factors), len(coord))
        for i, factor in enumerate(factors):
            coord[i] *= factor
    else:
        assert_never(transform)


def invert_transform(
    transform: CoordinateTransformation,
    coord: MutableSequence[float],
    resolver: TransformResolver | None = None,
) -> None:
    """Undo `transform` on `coord` in place.

    Raises
    ------
    InconsistentDimensionality
        If the transformation vector and `coord` differ in length.
    ZeroScaleError
        If a scale factor is zero.
    UnresolvedTransformError
        If the transformation is stored by path and no `resolver` is given.

    In every error case `coord` is left untouched.
    """
    if isinstance(transform, IdentityTransformation):
        return
    elif isinstance(transform, TranslationTransformation):
        offsets = _resolve_vector(transform, resolver)
        check_dims(len(offsets), len(coord))
        for i, offset in enumerate(offsets):
            coord[i] -= offset
    elif isinstance(transform, ScaleTransformation):
        factors = _resolve_vector(transform, resolver)
        check_dims(len(factors), len(coord))
        for i, factor in enumerate(factors):
            if factor == 0:
                raise ZeroScaleError(i)
        for i, factor in enumerate(factors):
            coord[i] /= factor
    else:
        assert_never(transform)


def apply_transforms(
    transforms: Sequence[CoordinateTransformation],
    coord: MutableSequence[float],
    resolver: TransformResolver | None = None,
) -> None:
    """Apply each of `transforms` to `coord` in place, first to last.

    The sequence is applied atomically: if any transformation fails, `coord` is
    left unmodified.
    """
    work = list(coord)
    for transform in transforms:
        apply_transform(transform, work, resolver)
    coord[:] = work


def invert_transforms(
    transforms: Sequence[CoordinateTransformation],
    coord: MutableSequence[float],
    resolver: TransformResolver | None = None,
) -> None:
    """Undo `transforms` on `coord` in place, last to first.

    This is the exact inverse of [`apply_transforms`][ngffmeta.v04.apply_transforms].
    """
    work = list(coord)
    for transform in reversed(transforms):
        invert_transform(transform, work, resolver)
    coord[:] = work


# ------------------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------------------


def validate_transforms(
    transforms: Sequence[CoordinateTransformation],
    require_scale: bool,
    ndim: int | None = None,
    resolver: TransformResolver | None = None,
) -> int | None:
    """Check a list of coordinate transformations for a dataset or multiscale.

    Parameters
    ----------
    transforms : Sequence[CoordinateTransformation]
        The transformations, in order.
    require_scale : bool
        Whether an empty list is an error.  True for the datasets of a multiscale.
    ndim : int | None
        The dimensionality the transformations must agree with, if known.
    resolver : TransformResolver | None
        Used to find the dimensionality of path-valued transformations.  Without
        one their dimensionality is unknown.

    Returns
    -------
    int | None
        The reconciled dimensionality, or None if it is still unknown.

    Raises
    ------
    InvalidTransformsError
        The specific subclass for the first problem found.
    """
    if require_scale and not transforms:
        raise MissingScaleError()

    has_scale = False
    has_translation = False
    for transform in transforms:
        try:
            ndim = union_ndim(ndim, transform_ndim(transform, resolver))
        except InconsistentDimensionality as e:
            raise TransformDimensionalityError(e) from e

        if isinstance(transform, IdentityTransformation):
            raise UnsupportedTransformError("identity")
        elif isinstance(transform, TranslationTransformation):
            if not has_scale:
                raise TransformOrderError()
            if has_translation:
                raise TransformCountError("translation")
            has_translation = True
        elif isinstance(transform, ScaleTransformation):
            if has_scale:
                raise TransformCountError("scale")
            has_scale = True
        else:
            assert_never(transform)
    return ndim
