"""Contains functions used to construct the gradient of scalar-valued functions."""

from collections.abc import Callable
from functools import partial

import numpy as np

from gradkit.exceptions import InvalidArgumentError
from gradkit.finite.finite_difference import estimate
from gradkit.finite.settings import EvalSettings, default_settings
from gradkit.finite.stencil import CENTRAL, Stencil, get_stencil
from gradkit.logger import gradkit_logger
from gradkit.utils.concurrency import normalize_workers, parallel_execute
from gradkit.utils.sandbox import axis_slice
from gradkit.utils.types import ArrayLike1D
from gradkit.utils.validate import validate_point, validate_scalar_output


def build_gradient(function: Callable,
                   theta0: ArrayLike1D,
                   method: Stencil | str = CENTRAL,
                   step: float | None = None,
                   n_workers=1,
                   ) -> np.ndarray:
    """Returns the finite-difference gradient of a scalar-valued function.

    Each component is the 1D stencil estimate along one axis with every
    other coordinate held at ``theta0``.

    Args:
        function (Callable): The function to be differentiated. Takes a 1D
            array and returns a scalar.
        theta0  (array-like): The parameter vector at which the gradient is evaluated.
        method: First-order stencil or stencil name. Default is ``"central"``.
        step: Step size. ``None`` uses the package default.
        n_workers (int): Number of threads used across parameters. Default is 1.

    Returns:
        A 1D array representing the gradient.

    Raises:
        InvalidArgumentError: If ``function`` does not return a scalar value,
            or the stencil does not approximate a first derivative.
        FloatingPointError: If a gradient component is not finite.
    """
    theta0 = validate_point(theta0, name="theta0")
    stencil = get_stencil(method)
    if stencil.order != 1:
        raise InvalidArgumentError(
            f"build_gradient needs a first-derivative stencil; '{stencil.name}' has order {stencil.order}."
        )

    f0 = validate_scalar_output(function(theta0), where="build_gradient() function")
    settings = EvalSettings(
        step=default_settings().step if step is None else step,
        origin_value=f0,
    )
    outer = min(normalize_workers(n_workers), theta0.size)
    gradkit_logger.debug(
        "[build_gradient] dim=%d stencil=%s n_workers=%d", theta0.size, stencil.name, outer
    )

    worker = partial(_grad_component, stencil=stencil, settings=settings)
    tasks = [(function, theta0, i) for i in range(theta0.size)]

    vals = parallel_execute(worker, tasks, n_workers=outer)
    grad = np.asarray(vals, dtype=float)
    if not np.isfinite(grad).all():
        raise FloatingPointError("Non-finite values encountered in build_gradient.")
    return grad


def _grad_component(
        function: Callable,
        theta0: np.ndarray,
        i: int,
        stencil: Stencil,
        settings: EvalSettings,
) -> float:
    """Returns one entry of the gradient for a scalar-valued function.

    Args:
        function: A function that returns a single value.
        theta0: The parameter values where the derivative is evaluated.
        i: The index of the parameter being varied.
        stencil: First-derivative stencil.
        settings: Evaluation settings shared by all components.

    Returns:
        A single number showing how the function changes with that parameter.
    """
    partial_vec = axis_slice(function, theta0, i)
    return estimate(partial_vec, float(theta0[i]), stencil, settings)
