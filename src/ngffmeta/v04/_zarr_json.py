"""A .zattrs document found in any ome-zarr v0.4 group.

https://ngff.openmicroscopy.org/0.4/

OME-ZARR v0.4 uses zarr format version 2, where the OME metadata lives in the
`.zattrs` file of a group, without any top-level key.  These are the documents
you might encounter:

1. Image Group

```json
{
  "multiscales": [
    {
      "version": "0.4",
      "axes": [
        {"name": "c", "type": "channel"},
        {"name": "y", "type": "space", "unit": "micrometer"},
        {"name": "x", "type": "space", "unit": "micrometer"}
      ],
      "datasets": [
        {
          "path": "0",
          "coordinateTransformations": [{"type": "scale", "scale": [1, 0.5, 0.5]}]
        }
      ]
    }
  ],
  "omero": {...}
}
```

2. Label Image Group: an image group with an additional `"image-label"` key.

3. Labels Group: `{"labels": ["cell_segmentation", "nuclei"]}`

4. Plate Group: `{"plate": {"rows": [...], "columns": [...], "wells": [...]}}`

5. Well Group: `{"well": {"images": [{"path": "0", "acquisition": 1}]}}`
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any, Literal

from pydantic import Field

from ngffmeta._base import ZarrGroupModel
from ngffmeta._errors import DocumentValidationError, NGFFValidationError
from ngffmeta.v04._image import Multiscale, validate_multiscale
from ngffmeta.v04._labels import ImageLabel, validate_image_label
from ngffmeta.v04._plate import Plate, validate_plate
from ngffmeta.v04._well import Well, validate_well

if TYPE_CHECKING:
    from collections.abc import Callable

    from ngffmeta._resolve import TransformResolver

__all__ = ["OMEAttributes", "validate_ome_attributes"]

OMEKind = Literal["label-image", "image", "plate", "well", "labels-group", "unknown"]


class OMEAttributes(ZarrGroupModel):
    """The OME metadata stored in the `.zattrs` file of a v0.4 zarr group.

    Every section is optional; which ones are present determines the
    [`kind`][ngffmeta.v04.OMEAttributes.kind] of group.
    """

    multiscales: list[Multiscale] | None = None
    labels: list[str] | None = Field(
        default=None, description="Paths of the label images in a labels group"
    )
    image_label: ImageLabel | None = Field(default=None, alias="image-label")
    plate: Plate | None = None
    well: Well | None = None
    omero: Any = Field(
        default=None, description="Transitional rendering metadata, not validated"
    )

    @property
    def kind(self) -> OMEKind:
        """The type of zarr group this document describes."""
        if self.multiscales is not None:
            return "label-image" if self.image_label is not None else "image"
        if self.plate is not None:
            return "plate"
        if self.well is not None:
            return "well"
        if self.labels is not None:
            return "labels-group"
        return "unknown"


def validate_ome_attributes(
    attrs: OMEAttributes, resolver: TransformResolver | None = None
) -> None:
    """Validate every section present in a `.zattrs` document.

    Each section is validated independently.  When the document holds both a
    plate with acquisitions and a well, the well is checked against the plate's
    acquisition ids.

    Raises
    ------
    NGFFValidationError
        The error from the failing section, if exactly one section fails.
    DocumentValidationError
        If more than one section fails; it lists the first error of each.
    """
    checks: list[tuple[tuple[int | str, ...], Callable[[], None]]] = []
    for i, multiscale in enumerate(attrs.multiscales or ()):
        check = partial(validate_multiscale, multiscale, resolver)
        checks.append((("multiscales", i), check))
    if attrs.image_label is not None:
        check = partial(validate_image_label, attrs.image_label)
        checks.append((("image-label",), check))
    if attrs.plate is not None:
        checks.append((("plate",), partial(validate_plate, attrs.plate)))
    if attrs.well is not None:
        acquisitions = None
        if attrs.plate is not None and attrs.plate.acquisitions:
            acquisitions = attrs.plate.acquisition_ids()
        checks.append((("well",), partial(validate_well, attrs.well, acquisitions)))

    errors: list[tuple[tuple[int | str, ...], NGFFValidationError]] = []
    for loc, check in checks:
        try:
            check()
        except NGFFValidationError as e:
            errors.append((loc, e))

    if len(errors) == 1:
        raise errors[0][1]
    if errors:
        raise DocumentValidationError(errors)
