"""Exceptions raised by the ngffmeta validators.

Every validator raises the *first* violation it finds as a subclass of
[`NGFFValidationError`][ngffmeta.NGFFValidationError].  Each concrete class has a
stable `type` identifier (in the spirit of pydantic error types) that is designed
for programmatic use and will change rarely or never.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "AcquisitionTimeError",
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
    "MissingAcquisitionError",
    "MissingScaleError",
    "NGFFValidationError",
    "NonexistentWellError",
    "SpaceAxesCountError",
    "TransformCountError",
    "TransformDimensionalityError",
    "TransformOrderError",
    "UnknownAcquisitionError",
    "UnresolvedTransformError",
    "UnsupportedTransformError",
    "ZeroScaleError",
]


class NGFFValidationError(ValueError):
    """Base class for all metadata consistency errors."""

    type: ClassVar[str] = "ngff_invalid"
    message: ClassVar[str] = "Invalid OME-NGFF metadata"

    def __init__(self, msg: str | None = None) -> None:
        super().__init__(msg or self.message)

    @property
    def msg(self) -> str:
        """A human readable error message."""
        return str(self)

    def __reduce__(self) -> tuple[Any, ...]:
        # subclass constructors take fields, not the message
        return _restore, (type(self), self.args), self.__dict__


def _restore(cls: type[NGFFValidationError], args: tuple) -> NGFFValidationError:
    error = cls.__new__(cls, *args)
    error.args = args
    return error


class InconsistentDimensionality(NGFFValidationError):
    """Two known dimensionalities disagree."""

    type = "dimensionality_mismatch"

    def __init__(self, ndim1: int, ndim2: int) -> None:
        self.ndim1 = ndim1
        self.ndim2 = ndim2
        super().__init__(f"Inconsistent dimensionalities: {ndim1}, {ndim2}")


# ------------------------------------------------------------------------------
# Axes
# ------------------------------------------------------------------------------


class InvalidAxesError(NGFFValidationError):
    type = "axes_invalid"
    message = "Invalid axes"


class AxesCountError(InvalidAxesError):
    type = "axes_count"

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Expected 2-5 axes, got {count}")


class SpaceAxesCountError(InvalidAxesError):
    type = "axes_space_count"
    message = "Expected 2-3 space axes"


class DuplicateTimeAxisError(InvalidAxesError):
    type = "axes_time_count"
    message = "Got >1 time axes"


class DuplicateOtherAxisError(InvalidAxesError):
    type = "axes_other_count"
    message = "Got >1 channel/custom axes"


class AxesOrderError(InvalidAxesError):
    type = "axes_order"
    message = "Invalid order: expected [time], [channel/custom], space, space, [space]"


class DuplicateAxisNameError(InvalidAxesError):
    type = "axes_name_unique"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Axis names not unique: {name!r} appears more than once")


# ------------------------------------------------------------------------------
# Coordinate transformations
# ------------------------------------------------------------------------------


class InvalidTransformsError(NGFFValidationError):
    type = "transforms_invalid"
    message = "Invalid coordinate transformations"


class MissingScaleError(InvalidTransformsError):
    type = "transforms_missing_scale"
    message = "Missing scale transform"


class TransformOrderError(InvalidTransformsError):
    type = "transforms_order"
    message = "Transformations are ordered incorrectly: translation before scale"


class TransformCountError(InvalidTransformsError):
    type = "transforms_count"

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Invalid count: multiple {kind} transformations found")


class UnsupportedTransformError(InvalidTransformsError):
    type = "transforms_unsupported"

    def __init__(self, kind: str, msg: str | None = None) -> None:
        self.kind = kind
        super().__init__(msg or f"Unsupported transformation: {kind}")


class UnresolvedTransformError(UnsupportedTransformError):
    """A transformation stores its parameters by reference and cannot be resolved."""

    type = "transforms_unresolved"

    def __init__(self, kind: str, path: str) -> None:
        self.path = path
        super().__init__(
            kind, f"Cannot resolve {kind} parameters stored at path {path!r}"
        )


class TransformDimensionalityError(InvalidTransformsError):
    type = "transforms_dimensionality"

    def __init__(self, error: InconsistentDimensionality) -> None:
        self.error = error
        super().__init__(str(error))


class ZeroScaleError(NGFFValidationError, ZeroDivisionError):
    """Inverting a scale transformation with a zero factor."""

    type = "scale_zero"

    def __init__(self, axis: int) -> None:
        self.axis = axis
        super().__init__(f"Cannot invert scale: factor for axis {axis} is zero")


# ------------------------------------------------------------------------------
# Multiscales
# ------------------------------------------------------------------------------


class InvalidMultiscaleError(NGFFValidationError):
    type = "multiscale_invalid"
    message = "Invalid multiscale"


class InvalidDatasetError(InvalidMultiscaleError):
    type = "multiscale_dataset"

    def __init__(self, index: int, path: str, error: InvalidTransformsError) -> None:
        self.index = index
        self.path = path
        self.error = error
        super().__init__(f"datasets[{index}] (path={path!r}): {error}")


# ------------------------------------------------------------------------------
# Plates
# ------------------------------------------------------------------------------


class InvalidPlateError(NGFFValidationError):
    type = "plate_invalid"
    message = "Invalid plate"


class InconsistentWellError(InvalidPlateError):
    type = "plate_well_path"

    def __init__(self, path: str, expected: str) -> None:
        self.path = path
        self.expected = expected
        super().__init__(
            f"Well indices are not consistent with their names: "
            f"path {path!r} should be {expected!r}"
        )


class NonexistentWellError(InvalidPlateError):
    type = "plate_well_index"

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"No well at index {index}")


class DuplicateIndexNameError(InvalidPlateError):
    type = "plate_index_unique"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Row or column names are not unique: {name!r}")


class InvalidIndexNameError(InvalidPlateError):
    type = "plate_index_name"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Index names must be alphanumeric, got {name!r}")


class DuplicateAcquisitionIdError(InvalidPlateError):
    type = "plate_acquisition_unique"

    def __init__(self, acquisition_id: int) -> None:
        self.acquisition_id = acquisition_id
        super().__init__(f"Acquisition IDs are not unique: {acquisition_id}")


class AcquisitionTimeError(InvalidPlateError):
    type = "plate_acquisition_time"

    def __init__(self, acquisition_id: int) -> None:
        self.acquisition_id = acquisition_id
        super().__init__(f"Acquisition {acquisition_id} ends before it starts")


# ------------------------------------------------------------------------------
# Wells
# ------------------------------------------------------------------------------


class InvalidWellError(NGFFValidationError):
    type = "well_invalid"
    message = "Invalid well"


class DuplicateFieldOfViewPathError(InvalidWellError):
    type = "well_path_unique"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Field of view paths are not unique: {path!r}")


class InvalidFieldOfViewPathError(InvalidWellError):
    type = "well_path_name"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Field of view path must be alphanumeric, got {path!r}")


class MissingAcquisitionError(InvalidWellError):
    type = "well_acquisition_missing"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Acquisition ID required but not present on field of view {path!r}"
        )


class UnknownAcquisitionError(InvalidWellError):
    type = "well_acquisition_unknown"

    def __init__(self, acquisition_id: int) -> None:
        self.acquisition_id = acquisition_id
        super().__init__(f"Unknown acquisition ID {acquisition_id}")


# ------------------------------------------------------------------------------
# Labels
# ------------------------------------------------------------------------------


class InvalidImageLabelError(NGFFValidationError):
    type = "image_label_invalid"
    message = "Invalid image-label"


class DuplicateLabelValueError(InvalidImageLabelError):
    type = "image_label_unique"

    def __init__(self, field: str, label_value: int) -> None:
        self.field = field
        self.label_value = label_value
        super().__init__(f"Label values are not unique in {field}: {label_value}")


# ------------------------------------------------------------------------------
# Whole documents
# ------------------------------------------------------------------------------


class DocumentValidationError(NGFFValidationError):
    """Raised when more than one section of a document is invalid.

    It contains the first error found in each failing section.
    """

    type = "document_invalid"

    def __init__(
        self, errors: Sequence[tuple[tuple[int | str, ...], NGFFValidationError]]
    ) -> None:
        self._errors = list(errors)
        super().__init__(self._error_message())

    def _error_message(self) -> str:
        lines = [f"{len(self._errors)} validation error(s) for OME-NGFF document:"]
        for i, (loc, error) in enumerate(self._errors, 1):
            lines.append(f"{i:>2}. {error} (type={error.type}, loc={loc})")
        return "\n".join(lines)

    def errors(self) -> list[tuple[tuple[int | str, ...], NGFFValidationError]]:
        """The `(loc, error)` pair for each failing section."""
        return list(self._errors)
