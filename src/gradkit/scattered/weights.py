"""Locality weights for scattered least-squares fits.

A weight function maps a (query, neighbor) pair to a non-negative number.
Weights that decay with distance turn a global least-squares plane into a
local Taylor-style derivative estimate. Both arguments may be scalars or
vectors of equal length.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import ArrayLike

from gradkit.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    InvalidWeightError,
)

__all__ = [
    "WeightFunction",
    "Uniform",
    "InverseSquaredDistance",
    "SquaredExponential",
    "euclidean_distance",
    "get_weight_function",
]


def euclidean_distance(s: ArrayLike, t: ArrayLike) -> float:
    """Returns the Euclidean distance between two points of equal dimension.

    Raises:
        DimensionMismatchError: If ``s`` and ``t`` have different shapes.
    """
    a = np.atleast_1d(np.asarray(s, dtype=float))
    b = np.atleast_1d(np.asarray(t, dtype=float))
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"points have different shapes {a.shape} and {b.shape}."
        )
    return float(np.linalg.norm(a - b))


class WeightFunction(ABC):
    """Computes the weight of point ``t`` when fitting around point ``s``."""

    @abstractmethod
    def weight(self, s: ArrayLike, t: ArrayLike) -> float:
        """Returns a non-negative weight, symmetric in ``s`` and ``t``."""

    def __call__(self, s: ArrayLike, t: ArrayLike) -> float:
        return self.weight(s, t)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Uniform(WeightFunction):
    """Weights every sample by 1, i.e. ordinary least squares."""

    def weight(self, s: ArrayLike, t: ArrayLike) -> float:
        return 1.0


class InverseSquaredDistance(WeightFunction):
    """Weights a sample by the inverse squared Euclidean distance, ``1 / d**2``.

    The weight is undefined for a sample that coincides with the query; such a
    pair raises :class:`~gradkit.exceptions.InvalidWeightError`.
    """

    def weight(self, s: ArrayLike, t: ArrayLike) -> float:
        dist = euclidean_distance(s, t)
        if dist == 0.0:
            raise InvalidWeightError(
                "inverse squared distance weight is undefined for a sample at the query point."
            )
        w = 1.0 / (dist * dist)
        if not math.isfinite(w):
            raise InvalidWeightError(
                f"inverse squared distance weight overflows at distance {dist!r}."
            )
        return w


class SquaredExponential(WeightFunction):
    """Gaussian locality kernel ``exp(-(d / scale)**2)``.

    Equals 1 at zero distance and decays towards 0 as the distance grows.

    Args:
        scale: Length scale of the kernel. Must be finite and > 0.
    """

    def __init__(self, scale: float = 1.0):
        scale = float(scale)
        if not math.isfinite(scale) or scale <= 0.0:
            raise InvalidArgumentError(f"scale must be finite and > 0; got {scale!r}.")
        self.scale = scale

    def weight(self, s: ArrayLike, t: ArrayLike) -> float:
        norm = euclidean_distance(s, t) / self.scale
        return math.exp(-norm * norm)

    def __repr__(self) -> str:
        return f"SquaredExponential(scale={self.scale!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SquaredExponential) and other.scale == self.scale

    def __hash__(self) -> int:
        return hash((SquaredExponential, self.scale))


_WEIGHT_SPECS: list[tuple[str, type[WeightFunction], list[str]]] = [
    ("uniform", Uniform, ["ols"]),
    ("inverse_squared_distance", InverseSquaredDistance, ["isd", "inv_sq_dist"]),
    ("squared_exponential", SquaredExponential, ["gaussian", "sq_exp"]),
]


def _norm(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "", s.lower())


def get_weight_function(name: str | WeightFunction, **kwargs) -> WeightFunction:
    """Builds a weight function from its name.

    Args:
        name: Name or alias of a weight function, or an instance that is
            returned unchanged.
        **kwargs: Constructor arguments, e.g. ``scale`` for
            ``"squared_exponential"``.

    Returns:
        A weight function instance.

    Raises:
        InvalidArgumentError: If the name is unknown.
    """
    if isinstance(name, WeightFunction):
        return name
    if not isinstance(name, str):
        raise InvalidArgumentError(
            f"weighter must be a name or WeightFunction; got {type(name).__name__}."
        )
    key = _norm(name)
    for canonical, cls, aliases in _WEIGHT_SPECS:
        if key == _norm(canonical) or key in {_norm(a) for a in aliases}:
            return cls(**kwargs)
    opts = ", ".join(c for c, _, _ in _WEIGHT_SPECS)
    raise InvalidArgumentError(f"Unknown weight function '{name}'. Choose one of {{{opts}}}.")
