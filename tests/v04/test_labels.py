from __future__ import annotations

import pytest
from pydantic import ValidationError

from ngffmeta import DuplicateLabelValueError, InvalidImageLabelError
from ngffmeta import v04

EXAMPLE = {
    "version": "0.4",
    "colors": [
        {"label-value": 1, "rgba": [255, 255, 255, 255]},
        {"label-value": 4, "rgba": [0, 255, 255, 128]},
    ],
    "properties": [
        {"label-value": 1, "area (pixels)": 1200, "class": "foo"},
        {"label-value": 4, "area (pixels)": 1650},
    ],
    "source": {"image": "../../"},
}


def test_example() -> None:
    label = v04.ImageLabel.model_validate(EXAMPLE)
    v04.validate_image_label(label)
    assert label.label_colors() == {1: (255, 255, 255, 255), 4: (0, 255, 255, 128)}
    assert label.label_properties() == {
        1: {"area (pixels)": 1200, "class": "foo"},
        4: {"area (pixels)": 1650},
    }
    assert label.source is not None
    assert label.source.image == "../../"


def test_label_round_trip() -> None:
    label = v04.ImageLabel.model_validate(EXAMPLE)
    dumped = label.model_dump(mode="json", exclude_none=True)
    assert dumped["colors"][0] == {"label-value": 1, "rgba": [255, 255, 255, 255]}
    assert dumped["properties"][0] == {
        "label-value": 1,
        "area (pixels)": 1200,
        "class": "foo",
    }
    assert v04.ImageLabel.model_validate(dumped) == label


def test_empty_image_label() -> None:
    label = v04.ImageLabel()
    v04.validate_image_label(label)
    assert label.label_colors() == {}
    assert label.label_properties() == {}


def test_default_source() -> None:
    assert v04.LabelSource().image == "../../"


def test_color_without_rgba() -> None:
    label = v04.ImageLabel.model_validate({"colors": [{"label-value": 2}]})
    v04.validate_image_label(label)
    assert label.label_colors() == {}


@pytest.mark.parametrize("rgba", [[0, 0, 0], [0, 0, 0, 256], [-1, 0, 0, 0]])
def test_invalid_rgba(rgba: list[int]) -> None:
    with pytest.raises(ValidationError):
        v04.LabelColor.model_validate({"label-value": 1, "rgba": rgba})


@pytest.mark.parametrize("field", ["colors", "properties"])
def test_duplicate_label_values(field: str) -> None:
    label = v04.ImageLabel.model_validate(
        {field: [{"label-value": 3}, {"label-value": 1}, {"label-value": 3}]}
    )
    with pytest.raises(DuplicateLabelValueError, match=field) as exc_info:
        v04.validate_image_label(label)
    assert exc_info.value.label_value == 3
    assert exc_info.value.field == field
    assert isinstance(exc_info.value, InvalidImageLabelError)


def test_same_value_in_colors_and_properties() -> None:
    label = v04.ImageLabel.model_validate(
        {"colors": [{"label-value": 1}], "properties": [{"label-value": 1}]}
    )
    v04.validate_image_label(label)
