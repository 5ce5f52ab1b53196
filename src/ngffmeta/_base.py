from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Self

__all__ = ["ZarrGroupModel", "_BaseModel"]


class _BaseModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        validate_assignment=True,
        validate_default=True,
        validate_by_name=True,
        serialize_by_alias=True,
    )

    if not TYPE_CHECKING:

        def model_dump_json(self, **kwargs: Any) -> str:
            # required for round-tripping on pydantic <2.10.0
            kwargs.setdefault("by_alias", True)
            return super().model_dump_json(**kwargs)

        def model_dump(self, **kwargs: Any) -> dict[str, Any]:  # pragma: no-cover
            # required for round-tripping on pydantic <2.10.0
            kwargs.setdefault("by_alias", True)
            return super().model_dump(**kwargs)


class ZarrGroupModel(_BaseModel):
    """A model for the whole attributes document of one zarr group.

    In OME-NGFF v0.4 (zarr format 2) that is the group's `.zattrs` file; see
    [`v04.OMEAttributes`][ngffmeta.v04.OMEAttributes].
    """

    uri: str | None = Field(
        default=None,
        exclude=True,
        description="Where the document was read from, when loaded by `from_uri`",
        examples=[
            "https://uk1s3.embassy.ebi.ac.uk/idr/zarr/v0.4/idr0062A/6001240.zarr",
            "/data/plate.zarr/A/1",
        ],
    )

    @classmethod
    def from_uri(cls, uri: str | os.PathLike) -> Self:
        """Read and parse the attributes document of the group at `uri`.

        `uri` is a local path or fsspec URL of the group, or of its `.zattrs`
        file.  Only the shape of the document is checked.  Requires fsspec.

        Raises
        ------
        FileNotFoundError
            If the attributes file cannot be read.
        pydantic.ValidationError
            If the document does not match this model.
        """
        from ngffmeta._io import read_attrs

        text, source = read_attrs(uri)
        doc = cls.model_validate_json(text)
        doc.uri = source
        return doc
