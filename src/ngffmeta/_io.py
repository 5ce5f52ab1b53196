"""Reading `.zattrs` documents from local paths or remote URIs."""

from __future__ import annotations

import os
from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, TypeVar, cast

if TYPE_CHECKING:
    import io

    import fsspec
else:
    try:
        import fsspec
    except ImportError:
        fsspec = None

__all__ = ["ATTRS_FILE", "attrs_uri", "read_attrs"]

F = TypeVar("F", bound=Callable[..., object])

ATTRS_FILE = ".zattrs"
"""Name of the file holding the attributes of a zarr v2 group."""


def _require_fsspec(func: F) -> F:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if fsspec is None:
            raise ImportError(
                f"{func.__name__!r} needs fsspec to read from a path or URI. "
                "Install with: 'pip install ngffmeta[io]'"
            )
        return func(*args, **kwargs)

    return cast("F", wrapper)


def attrs_uri(uri: str | os.PathLike) -> str:
    """Return the URI of the attributes file for a group or attributes `uri`.

    A URI already pointing at a `.zattrs` (or any `.json`) file is returned
    unchanged; anything else is taken to be a group.

    >>> attrs_uri("s3://bucket/image.zarr/")
    's3://bucket/image.zarr/.zattrs'
    """
    uri_str = os.fspath(uri)
    if uri_str.endswith((ATTRS_FILE, ".json")):
        return uri_str
    return f"{uri_str.rstrip('/')}/{ATTRS_FILE}"


@_require_fsspec
def read_attrs(uri: str | os.PathLike) -> tuple[str, str]:
    """Read the raw `.zattrs` text of a zarr group.

    Parameters
    ----------
    uri : str or os.PathLike
        Local path or fsspec URL (e.g. `s3://bucket/plate.zarr/A/1`) of a zarr
        group, or of the `.zattrs` file itself.

    Returns
    -------
    tuple[str, str]
        The document text, and `uri` as a string.

    Raises
    ------
    FileNotFoundError
        If the attributes file cannot be opened or read.
    """
    target = attrs_uri(uri)
    try:
        with fsspec.open(target, "r") as f:
            text = cast("io.TextIOBase", f).read()
    except Exception as e:
        raise FileNotFoundError(f"Could not load JSON from URI: {target}:\n{e}") from e
    return text, os.fspath(uri)
