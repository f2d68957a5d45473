"""Gradient estimates from scattered neighbouring samples.

The gradient at a query point is estimated by fitting a plane to nearby
samples ``(location, value)`` with weighted linear least squares. The weights
come from a :class:`~gradkit.scattered.weights.WeightFunction` evaluated
between the query and each sample location, so samples far from the query
can be made to contribute little to the fit.

Examples:
--------
>>> from gradkit.scattered.plane import NeighborSample, estimate_gradient
>>> samples = [
...     NeighborSample((0.0, 0.0), 1.0),
...     NeighborSample((1.0, 0.0), 3.0),
...     NeighborSample((0.0, 1.0), 0.0),
...     NeighborSample((1.0, 1.0), 2.0),
... ]
>>> estimate_gradient((0.5, 0.5), samples).round(12).tolist()
[2.0, -1.0]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from gradkit.exceptions import DimensionMismatchError, InvalidArgumentError
from gradkit.scattered.weights import Uniform, WeightFunction
from gradkit.utils.linalg import weighted_lstsq
from gradkit.utils.types import FloatArray
from gradkit.utils.validate import validate_location, validate_point, validate_weight

__all__ = [
    "NeighborSample",
    "InterceptConstraint",
    "estimate_gradient",
    "estimate_slope",
]


@dataclass(frozen=True)
class NeighborSample:
    """A function value observed at a location near the query point."""

    location: tuple[float, ...]
    value: float

    def __post_init__(self) -> None:
        loc = np.atleast_1d(np.asarray(self.location, dtype=float))
        if loc.ndim != 1:
            raise DimensionMismatchError(
                f"sample location must be 1D; got shape {loc.shape}."
            )
        object.__setattr__(self, "location", tuple(float(v) for v in loc))
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class InterceptConstraint:
    """Constrains the fitted plane at the query location.

    Attributes:
        forced: If True, the plane must pass through ``value`` at the query
            point and only the gradient is fitted. Otherwise the intercept is
            fitted together with the gradient.
        value: Function value at the query point, used only when ``forced``.
    """

    forced: bool = False
    value: float = 0.0


SampleLike = Union[NeighborSample, Tuple[ArrayLike, float]]


def _as_sample(sample: SampleLike) -> NeighborSample:
    if isinstance(sample, NeighborSample):
        return sample
    location, value = sample
    return NeighborSample(location, value)


def _stack_locations(
    query: FloatArray,
    samples: Sequence[NeighborSample],
) -> FloatArray:
    """Returns the sample locations as an ``(n, d)`` array."""
    dim = query.size
    locs = np.empty((len(samples), dim), dtype=float)
    for i, pt in enumerate(samples):
        locs[i] = validate_location(pt.location, dim, index=i)
    return locs


def _build_system(
    query: FloatArray,
    locs: FloatArray,
    values: FloatArray,
    intercept: InterceptConstraint,
) -> tuple[FloatArray, FloatArray]:
    """Returns the unweighted design matrix and right-hand side."""
    if intercept.forced:
        return locs - query, values - float(intercept.value)
    # intercept is an extra unknown, solved for and then discarded
    design = np.hstack([locs, np.ones((locs.shape[0], 1), dtype=float)])
    return design, values


def estimate_gradient(
    query: ArrayLike,
    samples: Iterable[SampleLike],
    weighter: WeightFunction | None = None,
    intercept: InterceptConstraint | None = None,
    *,
    out: FloatArray | None = None,
) -> FloatArray:
    """Estimates the gradient at ``query`` by fitting a weighted plane.

    Each sample contributes the row ``location`` (or ``location - query`` when
    the intercept is forced) and the target ``value`` (or
    ``value - intercept.value``). Rows and targets are multiplied by
    ``weighter.weight(query, location)`` and the system is solved in the
    least-squares sense. The fitted slopes are the gradient estimate.

    Args:
        query: Point at which the gradient is wanted, shape ``(d,)``.
        samples: Neighbouring samples, either :class:`NeighborSample` objects
            or ``(location, value)`` pairs. Every location must have length
            ``d``.
        weighter: Locality weight function. Defaults to :class:`Uniform`.
        intercept: Intercept constraint. Defaults to a free intercept.
        out: Optional array of length ``d`` that receives the result.

    Returns:
        The gradient estimate of shape ``(d,)`` (``out`` if it was given).

    Raises:
        DimensionMismatchError: If a sample location or ``out`` does not match
            the query dimension, or no samples are given.
        InvalidArgumentError: If a sample value or the forced intercept value
            is NaN or infinite.
        InvalidWeightError: If a weight is negative, NaN, infinite or
            undefined. Raised before any solve.
        SingularSystemError: If the weighted design matrix is rank-deficient,
            e.g. with fewer samples than unknowns or collinear samples.
    """
    q = validate_point(query)
    dim = q.size
    if out is not None and (np.ndim(out) != 1 or np.shape(out)[0] != dim):
        raise DimensionMismatchError(
            f"out has shape {np.shape(out)}; expected ({dim},) to match the query."
        )
    weighter = Uniform() if weighter is None else weighter
    intercept = InterceptConstraint() if intercept is None else intercept

    pts = [_as_sample(s) for s in samples]
    if not pts:
        raise DimensionMismatchError("at least one sample is required.")

    locs = _stack_locations(q, pts)
    values = np.array([p.value for p in pts], dtype=float)
    bad = np.flatnonzero(~np.isfinite(values))
    if bad.size:
        i = int(bad[0])
        raise InvalidArgumentError(f"sample {i} has non-finite value {values[i]!r}.")
    if intercept.forced and not np.isfinite(intercept.value):
        raise InvalidArgumentError(
            f"forced intercept value must be finite; got {intercept.value!r}."
        )
    weights = np.array(
        [validate_weight(weighter.weight(q, loc), index=i) for i, loc in enumerate(locs)],
        dtype=float,
    )

    design, rhs = _build_system(q, locs, values, intercept)

    beta = weighted_lstsq(design, rhs, weights)
    grad = beta[:dim]

    if out is None:
        return grad
    out[:] = grad
    return out


def estimate_slope(
    x: float,
    samples: Iterable[SampleLike],
    weighter: WeightFunction | None = None,
    intercept: InterceptConstraint | None = None,
) -> float:
    """Estimates the first derivative at ``x`` by fitting a weighted line.

    This is the one-dimensional form of :func:`estimate_gradient`; sample
    locations are scalars.

    Returns:
        The fitted slope.
    """
    grad = estimate_gradient([float(x)], samples, weighter, intercept)
    return float(grad[0])
