"""Validation utilities shared by the gradkit estimators."""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from gradkit.exceptions import (
    DimensionMismatchError,
    InvalidArgumentError,
    InvalidWeightError,
)

__all__ = [
    "validate_step",
    "validate_real",
    "validate_scalar_output",
    "validate_point",
    "validate_location",
    "validate_weight",
]


def validate_step(step: Any) -> float:
    """Returns ``step`` as a float after checking it is finite and positive.

    Args:
        step: Candidate finite-difference step size.

    Returns:
        The step as a Python float.

    Raises:
        InvalidArgumentError: If the step is not a real number, is not finite,
            or is not strictly positive.
    """
    try:
        h = float(step)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"step must be a real number; got {step!r}.") from exc
    if not math.isfinite(h) or h <= 0.0:
        raise InvalidArgumentError(f"step must be finite and > 0; got {h!r}.")
    return h


def validate_real(value: Any, name: str = "x") -> float:
    """Returns ``value`` as a finite float.

    Raises:
        InvalidArgumentError: If ``value`` is not a real number or is NaN or
            infinite.
    """
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be a real number; got {value!r}.") from exc
    if not math.isfinite(v):
        raise InvalidArgumentError(f"{name} must be finite; got {v!r}.")
    return v


def validate_scalar_output(value: Any, where: str = "function") -> float:
    """Returns a function value as a float, rejecting array-valued outputs.

    Args:
        value: Value returned by the caller's function.
        where: Short label for the error message.

    Returns:
        The value as a Python float.

    Raises:
        InvalidArgumentError: If ``value`` holds more than one number.
    """
    arr = np.asarray(value, dtype=float)
    if arr.size != 1:
        raise InvalidArgumentError(
            f"{where} must return a scalar; got shape {arr.shape}."
        )
    return float(arr.reshape(()))


def validate_point(point: ArrayLike, name: str = "query") -> NDArray[np.float64]:
    """Converts a query point to a non-empty 1D float array.

    Scalars are promoted to length-1 vectors.

    Raises:
        DimensionMismatchError: If ``point`` is empty or has more than one axis.
    """
    arr = np.atleast_1d(np.asarray(point, dtype=float))
    if arr.ndim != 1:
        raise DimensionMismatchError(f"{name} must be 1D; got shape {arr.shape}.")
    if arr.size == 0:
        raise DimensionMismatchError(f"{name} must be non-empty.")
    return arr


def validate_location(
    location: ArrayLike,
    dim: int,
    index: int | None = None,
) -> NDArray[np.float64]:
    """Converts a sample location to a 1D float array of length ``dim``.

    Raises:
        DimensionMismatchError: If the location does not have ``dim`` entries.
    """
    arr = np.atleast_1d(np.asarray(location, dtype=float))
    if arr.ndim != 1 or arr.size != dim:
        label = "sample location" if index is None else f"sample {index} location"
        raise DimensionMismatchError(
            f"{label} has shape {arr.shape}; expected ({dim},) to match the query."
        )
    return arr


def validate_weight(weight: Any, index: int | None = None) -> float:
    """Checks that a locality weight is a finite, non-negative number.

    Raises:
        InvalidWeightError: If the weight is negative, NaN or infinite.
    """
    w = float(weight)
    if not math.isfinite(w) or w < 0.0:
        label = "weight" if index is None else f"weight of sample {index}"
        raise InvalidWeightError(f"{label} must be finite and >= 0; got {w!r}.")
    return w
