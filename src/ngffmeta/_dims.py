"""Reconciling dimensionalities that may or may not be known."""

from __future__ import annotations

from ngffmeta._errors import InconsistentDimensionality

__all__ = ["check_dims", "union_ndim"]


def check_dims(ndim1: int, ndim2: int) -> int:
    """Return `ndim1` if both dimensionalities agree.

    Raises
    ------
    InconsistentDimensionality
        If `ndim1 != ndim2`.
    """
    if ndim1 != ndim2:
        raise InconsistentDimensionality(ndim1, ndim2)
    return ndim1


def union_ndim(ndim1: int | None, ndim2: int | None) -> int | None:
    """Merge two optionally-known dimensionalities.

    An unknown (`None`) dimensionality merges to the other one unconditionally.
    Two known dimensionalities must be equal.

    Parameters
    ----------
    ndim1 : int | None
        First dimensionality, or None if unknown.
    ndim2 : int | None
        Second dimensionality, or None if unknown.

    Returns
    -------
    int | None
        The merged dimensionality, None only if both inputs are None.

    Raises
    ------
    InconsistentDimensionality
        If both dimensionalities are known and differ.
    """
    if ndim1 is None:
        return ndim2
    if ndim2 is None:
        return ndim1
    return check_dims(ndim1, ndim2)
