"""Resolution of transformation parameters stored out-of-band.

A v0.4 `scale` or `translation` transformation may name a zarr array by `path`
instead of embedding its values.  Code that needs the actual numbers asks a
[`TransformResolver`][ngffmeta.TransformResolver] for them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ngffmeta._errors import UnresolvedTransformError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

__all__ = ["MappingResolver", "TransformResolver"]


@runtime_checkable
class TransformResolver(Protocol):
    """Protocol for objects that turn a transformation `path` into numbers.

    Implementations should raise an exception (not return an empty or zero-filled
    vector) when `path` cannot be resolved.
    """

    def resolve(self, path: str) -> Sequence[float]:
        """Return the parameter vector stored at `path`."""
        ...


class MappingResolver:
    """Resolver backed by an in-memory mapping of path -> vector.

    Examples
    --------
    >>> resolver = MappingResolver({"scales/0": [1.0, 0.5, 0.5]})
    >>> resolver.resolve("scales/0")
    [1.0, 0.5, 0.5]
    """

    def __init__(self, arrays: Mapping[str, Sequence[float]]) -> None:
        self._arrays = dict(arrays)

    def resolve(self, path: str) -> list[float]:
        try:
            values = self._arrays[path]
        except KeyError as e:
            raise UnresolvedTransformError("path", path) from e
        return [float(v) for v in values]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._arrays)!r})"
