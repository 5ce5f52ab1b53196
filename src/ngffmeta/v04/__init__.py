"""OME-NGFF v0.4 metadata models and consistency checks.

## Core Concepts

OME-NGFF stores imaging metadata in the `.zattrs` file of each zarr group.  The
models in this module *parse* that metadata (checking only its shape), and the
`validate_*` functions check that a parsed document is internally consistent
before it is trusted for spatial computation:

- [`validate_axes`][ngffmeta.v04.validate_axes]: 2-5 uniquely named axes,
  ordered as `[time] [channel|custom] space space [space]`.
- [`validate_transforms`][ngffmeta.v04.validate_transforms]: one scale, then
  at most one translation, all agreeing on dimensionality.
- [`validate_multiscale`][ngffmeta.v04.validate_multiscale]: axes plus the
  transformations of every resolution level.
- [`validate_plate`][ngffmeta.v04.validate_plate] and
  [`validate_well`][ngffmeta.v04.validate_well]: plate grid, acquisitions, and
  field-of-view cross references.

## Quick Start

```python
from pathlib import Path

from ngffmeta import v04

attrs = v04.OMEAttributes.model_validate_json(Path("image.zarr/.zattrs").read_text())
v04.validate_ome_attributes(attrs)

multiscale = attrs.multiscales[0]
coord = [0.0, 10.0, 10.0]
multiscale.apply(0, coord)  # array indices of level 0 -> physical space
```

## Reference

Specification: <https://ngff.openmicroscopy.org/0.4/>
"""

from ._axes import (
    Axis,
    ChannelAxis,
    CustomAxis,
    SpaceAxis,
    SpaceUnit,
    TimeAxis,
    TimeUnit,
    validate_axes,
)
from ._image import Dataset, Multiscale, validate_dataset, validate_multiscale
from ._labels import (
    ImageLabel,
    LabelColor,
    LabelProperty,
    LabelSource,
    validate_image_label,
)
from ._plate import Acquisition, Column, Plate, PlateWell, Row, validate_plate
from ._transforms import (
    CoordinateTransformation,
    IdentityTransformation,
    ScaleTransformation,
    TranslationTransformation,
    apply_transform,
    apply_transforms,
    invert_transform,
    invert_transforms,
    transform_ndim,
    validate_transforms,
)
from ._well import FieldOfView, Well, validate_well
from ._zarr_json import OMEAttributes, validate_ome_attributes

__all__ = [
    "Acquisition",
    "Axis",
    "ChannelAxis",
    "Column",
    "CoordinateTransformation",
    "CustomAxis",
    "Dataset",
    "FieldOfView",
    "IdentityTransformation",
    "ImageLabel",
    "LabelColor",
    "LabelProperty",
    "LabelSource",
    "Multiscale",
    "OMEAttributes",
    "Plate",
    "PlateWell",
    "Row",
    "ScaleTransformation",
    "SpaceAxis",
    "SpaceUnit",
    "TimeAxis",
    "TimeUnit",
    "TranslationTransformation",
    "Well",
    "apply_transform",
    "apply_transforms",
    "invert_transform",
    "invert_transforms",
    "transform_ndim",
    "validate_axes",
    "validate_dataset",
    "validate_image_label",
    "validate_multiscale",
    "validate_ome_attributes",
    "validate_plate",
    "validate_transforms",
    "validate_well",
]
