from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from ngffmeta.v04 import (
    ImageLabel,
    Multiscale,
    OMEAttributes,
    Plate,
    Well,
    validate_image_label,
    validate_multiscale,
    validate_ome_attributes,
    validate_plate,
    validate_well,
)

if TYPE_CHECKING:
    import os
    from collections.abc import Collection

    from ngffmeta._resolve import TransformResolver

__all__ = ["AnyOME", "from_uri", "validate_ome_object"]

AnyOME: TypeAlias = OMEAttributes | Multiscale | Plate | Well | ImageLabel


def from_uri(uri: str | os.PathLike) -> OMEAttributes:
    """Load and parse the OME metadata of a zarr group.

    Only the *shape* of the document is checked.  Use
    [`validate_ome_object`][ngffmeta.validate_ome_object] to check that it is
    internally consistent.

    Parameters
    ----------
    uri : str or os.PathLike
        Path or URL of a zarr group, or of its `.zattrs` file.

    Raises
    ------
    FileNotFoundError
        If the `.zattrs` file cannot be read.
    pydantic.ValidationError
        If the document is not valid OME-NGFF v0.4 metadata.
    """
    return OMEAttributes.from_uri(uri)


def validate_ome_object(
    obj: AnyOME,
    *,
    resolver: TransformResolver | None = None,
    acquisitions: Collection[int] | None = None,
) -> None:
    """Check any parsed OME metadata object for internal consistency.

    Parameters
    ----------
    obj : OMEAttributes | Multiscale | Plate | Well | ImageLabel
        The object to validate.
    resolver : TransformResolver | None
        Resolves transformations stored by path (multiscales only).
    acquisitions : Collection[int] | None
        Acquisition ids of the owning plate (wells only).

    Raises
    ------
    NGFFValidationError
        The first problem found.
    TypeError
        If `obj` is not one of the supported models.
    """
    if isinstance(obj, OMEAttributes):
        validate_ome_attributes(obj, resolver)
    elif isinstance(obj, Multiscale):
        validate_multiscale(obj, resolver)
    elif isinstance(obj, Plate):
        validate_plate(obj)
    elif isinstance(obj, Well):
        validate_well(obj, acquisitions)
    elif isinstance(obj, ImageLabel):
        validate_image_label(obj)
    else:
        raise TypeError(f"Cannot validate object of type {type(obj).__name__}")
