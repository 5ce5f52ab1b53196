from __future__ import annotations

import json
from pathlib import Path

import pytest

from ngffmeta import (
    DuplicateFieldOfViewPathError,
    InvalidFieldOfViewPathError,
    InvalidWellError,
    MissingAcquisitionError,
    UnknownAcquisitionError,
)
from ngffmeta import v04

DATA = Path(__file__).parent.parent / "data" / "v04"

EXAMPLE1 = json.loads((DATA / "plate.zarr" / "A" / "1" / ".zattrs").read_text())
EXAMPLE2 = json.loads((DATA / "well.zarr" / ".zattrs").read_text())


def _well(*images: dict) -> v04.Well:
    return v04.Well.model_validate({"images": list(images)})


def test_examples() -> None:
    w1 = v04.Well.model_validate(EXAMPLE1["well"])
    v04.validate_well(w1)
    v04.validate_well(w1, {1, 2})
    assert w1.version == "0.4"
    assert [fov.acquisition for fov in w1.images] == [1, 1, 2, 2]

    w2 = v04.Well.model_validate(EXAMPLE2["well"])
    v04.validate_well(w2)


def test_no_acquisitions_skips_acquisition_checks() -> None:
    well = _well({"path": "0"}, {"path": "1", "acquisition": 99})
    v04.validate_well(well)
    v04.validate_well(well, None)


def test_missing_acquisition() -> None:
    well = _well({"path": "0", "acquisition": 1}, {"path": "1"})
    with pytest.raises(MissingAcquisitionError, match="'1'") as exc_info:
        v04.validate_well(well, {1})
    assert exc_info.value.path == "1"


def test_unknown_acquisition() -> None:
    well = _well({"path": "0", "acquisition": 1}, {"path": "1", "acquisition": 3})
    with pytest.raises(UnknownAcquisitionError, match="Unknown acquisition ID 3"):
        v04.validate_well(well, [1, 2])


def test_empty_acquisition_set() -> None:
    # a plate without acquisitions gives an empty set, which no field can match
    with pytest.raises(UnknownAcquisitionError):
        v04.validate_well(_well({"path": "0", "acquisition": 0}), set())


@pytest.mark.parametrize(
    "images, error",
    [
        ([{"path": "0"}, {"path": "0"}], DuplicateFieldOfViewPathError),
        ([{"path": "fov-0"}], InvalidFieldOfViewPathError),
        ([{"path": "0/1"}], InvalidFieldOfViewPathError),
    ],
)
def test_invalid_paths(images: list[dict], error: type[InvalidWellError]) -> None:
    with pytest.raises(error):
        v04.validate_well(_well(*images))


def test_duplicate_path_with_acquisitions() -> None:
    well = _well({"path": "0", "acquisition": 1}, {"path": "0", "acquisition": 1})
    with pytest.raises(DuplicateFieldOfViewPathError):
        v04.validate_well(well, {1})


def test_images_checked_in_turn() -> None:
    # the first image fails its acquisition check before the duplicate is seen
    well = _well({"path": "0"}, {"path": "0"})
    with pytest.raises(MissingAcquisitionError, match="'0'"):
        v04.validate_well(well, {1})


def test_empty_well() -> None:
    v04.validate_well(_well())
    v04.validate_well(_well(), {1})
