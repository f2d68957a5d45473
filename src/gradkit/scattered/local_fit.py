"""Derivative engine that fits a weighted line to samples around ``x0``."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from gradkit.exceptions import InvalidArgumentError
from gradkit.finite.batch_eval import eval_points
from gradkit.logger import gradkit_logger
from gradkit.scattered.plane import InterceptConstraint, NeighborSample, estimate_slope
from gradkit.scattered.weights import WeightFunction, get_weight_function
from gradkit.utils.validate import validate_scalar_output, validate_step

__all__ = ["LocalFitDerivative", "DEFAULT_OFFSETS"]

#: Sample offsets, in units of the step size, used when none are given.
DEFAULT_OFFSETS = (-2.0, -1.0, 1.0, 2.0)


class LocalFitDerivative:
    """Estimates a first derivative by a weighted least-squares line fit.

    The function is sampled at ``x0 + step * offset`` for each offset, and a
    line is fitted to those samples with
    :func:`~gradkit.scattered.plane.estimate_slope`. By default the line is
    pinned to ``f(x0)`` so only the slope is fitted.

    Attributes:
        function: The function to differentiate. Must accept a single
            float and return a float.
        x0: The point at which the derivative is evaluated.
    """

    def __init__(self, function: Callable[[float], float], x0: float) -> None:
        """Initialises the class based on function and central value."""
        self.function = function
        self.x0 = x0

    def differentiate(
        self,
        step: float = 1e-3,
        offsets: Sequence[float] = DEFAULT_OFFSETS,
        weighter: WeightFunction | str = "uniform",
        force_intercept: bool = True,
        concurrent: bool = False,
        n_workers: int | None = None,
    ) -> float:
        """Computes the slope of the weighted local line fit.

        Args:
            step: Spacing unit for the sample offsets.
            offsets: Sample offsets in units of ``step``. Must be non-empty
                and must not contain 0.
            weighter: Weight function, or the name of a built-in one.
            force_intercept: Pin the line to ``f(x0)`` at ``x0``.
            concurrent: Evaluate the samples on a thread pool.
            n_workers: Maximum number of threads when ``concurrent`` is True.

        Returns:
            The estimated first derivative.

        Raises:
            InvalidArgumentError: If ``offsets`` is empty or contains 0.
        """
        h = validate_step(step)
        offs = np.asarray(offsets, dtype=float).ravel()
        if offs.size == 0 or np.any(offs == 0):
            raise InvalidArgumentError("offsets must be non-empty and non-zero.")
        weight_fn = get_weight_function(weighter)

        x0 = float(self.x0)
        xs = x0 + h * offs
        ys = eval_points(self.function, xs, concurrent=concurrent, n_workers=n_workers)

        if force_intercept:
            f0 = validate_scalar_output(self.function(x0))
            intercept = InterceptConstraint(forced=True, value=f0)
        else:
            intercept = InterceptConstraint()

        gradkit_logger.debug(
            "[LocalFit] n_samples=%d weighter=%r force_intercept=%s",
            offs.size,
            weight_fn,
            force_intercept,
        )
        samples = [NeighborSample((x,), y) for x, y in zip(xs, ys)]
        return estimate_slope(x0, samples, weight_fn, intercept)
