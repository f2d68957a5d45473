"""Weighted least-squares gradient estimation from scattered samples."""

from gradkit.scattered.plane import (
    InterceptConstraint,
    NeighborSample,
    estimate_gradient,
    estimate_slope,
)
from gradkit.scattered.weights import (
    InverseSquaredDistance,
    SquaredExponential,
    Uniform,
    WeightFunction,
    get_weight_function,
)

__all__ = [
    "InterceptConstraint",
    "NeighborSample",
    "estimate_gradient",
    "estimate_slope",
    "WeightFunction",
    "Uniform",
    "InverseSquaredDistance",
    "SquaredExponential",
    "get_weight_function",
]
