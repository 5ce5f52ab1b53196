from __future__ import annotations

import copy
import warnings
from pathlib import Path
from typing import Any

import pytest

from ngffmeta import (
    AxesOrderError,
    InvalidDatasetError,
    MappingResolver,
    MissingScaleError,
    TransformCountError,
    TransformDimensionalityError,
    TransformOrderError,
    UnresolvedTransformError,
)
from ngffmeta import v04

DATA = Path(__file__).parent.parent / "data" / "v04"

EXAMPLE: dict[str, Any] = {
    "version": "0.4",
    "name": "example",
    "axes": [
        {"name": "t", "type": "time", "unit": "millisecond"},
        {"name": "c", "type": "channel"},
        {"name": "z", "type": "space", "unit": "micrometer"},
        {"name": "y", "type": "space", "unit": "micrometer"},
        {"name": "x", "type": "space", "unit": "micrometer"},
    ],
    "datasets": [
        {
            "path": "0",
            "coordinateTransformations": [
                {"type": "scale", "scale": [1.0, 1.0, 0.5, 0.5, 0.5]}
            ],
        },
        {
            "path": "1",
            "coordinateTransformations": [
                {"type": "scale", "scale": [1.0, 1.0, 1.0, 1.0, 1.0]}
            ],
        },
        {
            "path": "2",
            "coordinateTransformations": [
                {"type": "scale", "scale": [1.0, 1.0, 2.0, 2.0, 2.0]}
            ],
        },
    ],
    "coordinateTransformations": [
        {"type": "scale", "scale": [0.1, 1.0, 1.0, 1.0, 1.0]}
    ],
    "type": "gaussian",
    "metadata": {
        "method": "skimage.transform.pyramid_gaussian",
        "version": "0.16.1",
        "args": "[true]",
        "kwargs": {"multichannel": True},
    },
}

YX = [{"name": "y", "type": "space"}, {"name": "x", "type": "space"}]


def _multiscale(**updates: Any) -> v04.Multiscale:
    data = copy.deepcopy(EXAMPLE)
    data.update(updates)
    return v04.Multiscale.model_validate(data)


def _dataset(path: str, *transforms: dict[str, Any]) -> dict[str, Any]:
    return {"path": path, "coordinateTransformations": list(transforms)}


def test_example() -> None:
    ms = v04.Multiscale.model_validate(EXAMPLE)
    v04.validate_multiscale(ms)
    assert ms.ndim == 5
    assert ms.name == "example"
    assert ms.type == "gaussian"
    assert ms.metadata is not None
    assert ms.metadata["kwargs"] == {"multichannel": True}
    assert [d.path for d in ms.datasets] == ["0", "1", "2"]


def test_example_from_file() -> None:
    attrs = v04.OMEAttributes.model_validate_json(
        (DATA / "image.zarr" / ".zattrs").read_text()
    )
    assert attrs.multiscales is not None
    assert attrs.multiscales[0] == v04.Multiscale.model_validate(
        {**EXAMPLE, "metadata": attrs.multiscales[0].metadata}
    )


def test_multiscale_dump_uses_aliases() -> None:
    dumped = v04.Multiscale.model_validate(EXAMPLE).model_dump(mode="json")
    assert "coordinateTransformations" in dumped
    assert "coordinateTransformations" in dumped["datasets"][0]


def test_apply_and_invert_levels() -> None:
    ms = _multiscale()
    coord = [1.0, 2.0, 10.0, 10.0, 10.0]
    ms.apply(0, coord)
    assert coord == pytest.approx([0.1, 2.0, 5.0, 5.0, 5.0])
    ms.invert(0, coord)
    assert coord == pytest.approx([1.0, 2.0, 10.0, 10.0, 10.0])

    coord = [1.0, 2.0, 10.0, 10.0, 10.0]
    ms.apply(2, coord)
    assert coord == pytest.approx([0.1, 2.0, 20.0, 20.0, 20.0])


def test_apply_without_group_transforms() -> None:
    ms = _multiscale(coordinateTransformations=None)
    coord = [1.0, 2.0, 10.0, 10.0, 10.0]
    ms.apply(0, coord)
    assert coord == [1.0, 2.0, 5.0, 5.0, 5.0]


def test_apply_order_dataset_then_group() -> None:
    ms = v04.Multiscale.model_validate(
        {
            "axes": YX,
            "datasets": [
                _dataset(
                    "0",
                    {"type": "scale", "scale": [2.0, 2.0]},
                    {"type": "translation", "translation": [1.0, 1.0]},
                )
            ],
            "coordinateTransformations": [
                {"type": "scale", "scale": [10.0, 10.0]},
                {"type": "translation", "translation": [5.0, 5.0]},
            ],
        }
    )
    v04.validate_multiscale(ms)
    coord = [1.0, 2.0]
    ms.apply(0, coord)
    # ((c * 2 + 1) * 10) + 5
    assert coord == [35.0, 55.0]
    ms.invert(0, coord)
    assert coord == [1.0, 2.0]


def test_apply_is_atomic() -> None:
    ms = _multiscale(
        coordinateTransformations=[{"type": "translation", "translation": [1.0]}]
    )
    coord = [1.0, 2.0, 10.0, 10.0, 10.0]
    with pytest.raises(ValueError):
        ms.apply(0, coord)
    assert coord == [1.0, 2.0, 10.0, 10.0, 10.0]


@pytest.mark.parametrize("level", [3, -1])
def test_apply_bad_level(level: int) -> None:
    ms = _multiscale()
    coord = [1.0] * 5
    with pytest.raises(IndexError, match=f"level {level}"):
        ms.apply(level, coord)
    with pytest.raises(IndexError):
        ms.invert(level, coord)
    assert coord == [1.0] * 5


def test_path_valued_multiscale() -> None:
    ms = v04.Multiscale.model_validate(
        {
            "axes": YX,
            "datasets": [_dataset("0", {"type": "scale", "path": "scales/0"})],
        }
    )
    v04.validate_multiscale(ms)
    with pytest.raises(UnresolvedTransformError):
        ms.apply(0, [1.0, 1.0])

    resolver = MappingResolver({"scales/0": [0.5, 0.25]})
    v04.validate_multiscale(ms, resolver)
    coord = [4.0, 4.0]
    ms.apply(0, coord, resolver)
    assert coord == [2.0, 1.0]

    bad = MappingResolver({"scales/0": [0.5, 0.25, 1.0]})
    with pytest.raises(InvalidDatasetError) as exc_info:
        v04.validate_multiscale(ms, bad)
    assert isinstance(exc_info.value.error, TransformDimensionalityError)


def test_validate_bad_axes() -> None:
    ms = _multiscale(
        axes=[
            {"name": "c", "type": "channel"},
            {"name": "t", "type": "time"},
            {"name": "y", "type": "space"},
            {"name": "x", "type": "space"},
        ]
    )
    with pytest.raises(AxesOrderError):
        v04.validate_multiscale(ms)


@pytest.mark.parametrize(
    "datasets, index, cause",
    [
        ([_dataset("0")], 0, MissingScaleError),
        (
            [
                _dataset("0", {"type": "scale", "scale": [1.0, 1.0]}),
                _dataset("1", {"type": "translation", "translation": [1.0, 1.0]}),
            ],
            1,
            TransformOrderError,
        ),
        (
            [
                _dataset(
                    "0",
                    {"type": "scale", "scale": [1.0, 1.0]},
                    {"type": "scale", "scale": [1.0, 1.0]},
                )
            ],
            0,
            TransformCountError,
        ),
        (
            [_dataset("lo", {"type": "scale", "scale": [1.0, 1.0, 1.0]})],
            0,
            TransformDimensionalityError,
        ),
    ],
)
def test_validate_bad_dataset(
    datasets: list[dict[str, Any]], index: int, cause: type[Exception]
) -> None:
    ms = v04.Multiscale.model_validate({"axes": YX, "datasets": datasets})
    with pytest.raises(InvalidDatasetError) as exc_info:
        v04.validate_multiscale(ms)
    err = exc_info.value
    assert err.index == index
    assert err.path == datasets[index]["path"]
    assert isinstance(err.error, cause)
    assert err.__cause__ is err.error
    assert f"datasets[{index}]" in str(err)


def test_validate_bad_group_transforms() -> None:
    ms = _multiscale(
        coordinateTransformations=[
            {"type": "scale", "scale": [1.0, 1.0, 1.0, 1.0, 1.0]},
            {"type": "scale", "scale": [1.0, 1.0, 1.0, 1.0, 1.0]},
        ]
    )
    with pytest.raises(TransformCountError):
        v04.validate_multiscale(ms)


def test_group_transforms_need_no_scale() -> None:
    ms = _multiscale(coordinateTransformations=[])
    v04.validate_multiscale(ms)


def test_validate_dataset() -> None:
    ds = v04.Dataset.model_validate(
        _dataset("0", {"type": "scale", "scale": [1.0, 1.0]})
    )
    assert v04.validate_dataset(ds) == 2
    assert v04.validate_dataset(ds, 2) == 2
    with pytest.raises(TransformDimensionalityError):
        v04.validate_dataset(ds, 3)


def test_risky_dataset_path_warns(monkeypatch: pytest.MonkeyPatch) -> None:
    data = _dataset("my level", {"type": "scale", "scale": [1.0, 1.0]})
    with pytest.warns(UserWarning, match="Dataset.path"):
        v04.Dataset.model_validate(data)

    monkeypatch.setenv("NGFFMETA_ALLOW_RISKY_NODE_NAMES", "1")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        v04.Dataset.model_validate(data)
