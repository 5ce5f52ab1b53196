from __future__ import annotations

from typing import Any, ClassVar

from pydantic import ConfigDict, Field

from ngffmeta._base import _BaseModel
from ngffmeta._errors import DuplicateLabelValueError
from ngffmeta._types import RGBA, NonNegativeInt

__all__ = [
    "ImageLabel",
    "LabelColor",
    "LabelProperty",
    "LabelSource",
    "validate_image_label",
]


class LabelColor(_BaseModel):
    """Display color for one label value."""

    label_value: NonNegativeInt = Field(
        alias="label-value", description="The label value this color applies to"
    )
    rgba: RGBA | None = Field(
        default=None, description="Color as [red, green, blue, alpha], each 0-255"
    )


class LabelProperty(_BaseModel):
    """Arbitrary properties for one label value.

    Any key other than `label-value` is kept and available via
    [`properties`][ngffmeta.v04.LabelProperty.properties].
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="allow")

    label_value: NonNegativeInt = Field(
        alias="label-value", description="The label value these properties apply to"
    )

    @property
    def properties(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class LabelSource(_BaseModel):
    """Location of the image that was segmented to produce the labels."""

    image: str | None = Field(
        default="../../",
        description="Relative path to the source image group",
    )


class ImageLabel(_BaseModel):
    """The `image-label` metadata of a label image."""

    version: str | None = None
    colors: list[LabelColor] | None = None
    properties: list[LabelProperty] | None = None
    source: LabelSource | None = None

    def label_colors(self) -> dict[int, RGBA]:
        """Map label value to its rgba color (labels without a color are skipped)."""
        if not self.colors:
            return {}
        return {c.label_value: c.rgba for c in self.colors if c.rgba is not None}

    def label_properties(self) -> dict[int, dict[str, Any]]:
        """Map label value to its extra properties."""
        if not self.properties:
            return {}
        return {p.label_value: p.properties for p in self.properties}


def validate_image_label(image_label: ImageLabel) -> None:
    """Check that label values are unique within `colors` and `properties`.

    Raises
    ------
    DuplicateLabelValueError
        If a label value appears more than once in either list.
    """
    for field, entries in (
        ("colors", image_label.colors),
        ("properties", image_label.properties),
    ):
        seen: set[int] = set()
        for entry in entries or ():
            if entry.label_value in seen:
                raise DuplicateLabelValueError(field, entry.label_value)
            seen.add(entry.label_value)
