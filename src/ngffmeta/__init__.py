"""Consistency checks and coordinate transforms for OME-NGFF metadata."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ngffmeta")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "uninstalled"

from . import v04
from ._dims import check_dims, union_ndim
from ._errors import (
    AcquisitionTimeError,
    AxesCountError,
    AxesOrderError,
    DocumentValidationError,
    DuplicateAcquisitionIdError,
    DuplicateAxisNameError,
    DuplicateFieldOfViewPathError,
    DuplicateIndexNameError,
    DuplicateLabelValueError,
    DuplicateOtherAxisError,
    DuplicateTimeAxisError,
    InconsistentDimensionality,
    InconsistentWellError,
    InvalidAxesError,
    InvalidDatasetError,
    InvalidFieldOfViewPathError,
    InvalidImageLabelError,
    InvalidIndexNameError,
    InvalidMultiscaleError,
    InvalidPlateError,
    InvalidTransformsError,
    InvalidWellError,
    MissingAcquisitionError,
    MissingScaleError,
    NGFFValidationError,
    NonexistentWellError,
    SpaceAxesCountError,
    TransformCountError,
    TransformDimensionalityError,
    TransformOrderError,
    UnknownAcquisitionError,
    UnresolvedTransformError,
    UnsupportedTransformError,
    ZeroScaleError,
)
from ._resolve import MappingResolver, TransformResolver
from ._validate import AnyOME, from_uri, validate_ome_object

__all__ = [
    "AcquisitionTimeError",
    "AnyOME",
    "AxesCountError",
    "AxesOrderError",
    "DocumentValidationError",
    "DuplicateAcquisitionIdError",
    "DuplicateAxisNameError",
    "DuplicateFieldOfViewPathError",
    "DuplicateIndexNameError",
    "DuplicateLabelValueError",
    "DuplicateOtherAxisError",
    "DuplicateTimeAxisError",
    "InconsistentDimensionality",
    "InconsistentWellError",
    "InvalidAxesError",
    "InvalidDatasetError",
    "InvalidFieldOfViewPathError",
    "InvalidImageLabelError",
    "InvalidIndexNameError",
    "InvalidMultiscaleError",
    "InvalidPlateError",
    "InvalidTransformsError",
    "InvalidWellError",
    "MappingResolver",
    "MissingAcquisitionError",
    "MissingScaleError",
    "NGFFValidationError",
    "NonexistentWellError",
    "SpaceAxesCountError",
    "TransformCountError",
    "TransformDimensionalityError",
    "TransformOrderError",
    "TransformResolver",
    "UnknownAcquisitionError",
    "UnresolvedTransformError",
    "UnsupportedTransformError",
    "ZeroScaleError",
    "__version__",
    "check_dims",
    "from_uri",
    "union_ndim",
    "v04",
    "validate_ome_object",
]
