"""Restricts multivariate functions to a single coordinate axis."""

from __future__ import annotations

import operator
from collections.abc import Callable

from numpy.typing import ArrayLike

from gradkit.exceptions import InvalidArgumentError
from gradkit.utils.validate import validate_point

__all__ = ["axis_slice"]


def axis_slice(
    function: Callable,
    point: ArrayLike,
    axis: int,
) -> Callable[[float], float]:
    """Returns ``function`` as seen along one axis through ``point``.

    Calling the result with ``t`` evaluates ``function`` at a fresh copy of
    ``point`` whose ``axis``-th coordinate is replaced by ``t``.

    Raises:
        DimensionMismatchError: If ``point`` is not a non-empty 1D array.
        InvalidArgumentError: If ``axis`` is not an integer or lies outside
            ``point``.
    """
    base = validate_point(point, name="point")
    try:
        k = operator.index(axis)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"axis must be an integer; got {type(axis).__name__}."
        ) from exc
    if not 0 <= k < base.size:
        raise InvalidArgumentError(f"axis {k} is outside a point of length {base.size}.")

    def along(t):
        moved = base.copy()
        moved[k] = t
        return function(moved)

    return along
