"""Provides fixed-stencil finite-difference derivative estimates.

The user supplies the function to differentiate, the point at which the
derivative is wanted, a stencil and the evaluation settings.

Examples:
--------
Central difference of ``sin`` at ``0.5``:

>>> import math
>>> from gradkit.finite.finite_difference import estimate
>>> from gradkit.finite.settings import EvalSettings
>>> from gradkit.finite.stencil import CENTRAL
>>> d = estimate(math.sin, 0.5, CENTRAL, EvalSettings(step=1e-5))
>>> abs(d - math.cos(0.5)) < 1e-9
True

Reusing a known value at the point itself:

>>> from gradkit.finite.stencil import FORWARD
>>> fx = math.sin(0.5)
>>> d = estimate(math.sin, 0.5, FORWARD, EvalSettings(step=1e-6, origin_value=fx))
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from gradkit.finite.batch_eval import eval_points
from gradkit.finite.settings import EvalSettings, default_settings
from gradkit.finite.stencil import CENTRAL, Stencil, get_stencil
from gradkit.logger import gradkit_logger
from gradkit.utils.validate import validate_real

__all__ = ["estimate", "FiniteDifferenceDerivative"]


def estimate(
    function: Callable[[float], float],
    x: float,
    method: Stencil | str = CENTRAL,
    settings: EvalSettings | None = None,
) -> float:
    """Estimates a derivative of ``function`` at ``x`` with a fixed stencil.

    Every tap ``(offset, coeff)`` contributes ``coeff * f(x + step * offset)``.
    The origin tap (offset 0) uses ``settings.origin_value`` instead of calling
    ``function`` when that value is given. The weighted sum is divided by
    ``step ** method.order``.

    When ``settings.concurrent`` is True the calls to ``function`` run on a
    thread pool and the estimate is formed after all of them returned. Values
    are always combined in tap order, so both paths return the same number.

    Args:
        function: Callable mapping a float to a real number.
        x: Point at which the derivative is estimated.
        method: Stencil, or the name of a built-in stencil.
        settings: Evaluation settings. Defaults to :func:`default_settings`.

    Returns:
        The derivative estimate.

    Raises:
        InvalidArgumentError: If the stencil name is unknown, ``x`` is not
            finite, or ``function`` returns a non-scalar.
        Exception: Whatever ``function`` raises is propagated unchanged.
    """
    stencil = get_stencil(method)
    if settings is None:
        settings = default_settings()

    x = validate_real(x, name="x")
    step = settings.step

    use_origin = settings.origin_known
    coeffs = np.asarray(stencil.coefficients, dtype=float)
    values = np.empty(len(stencil.taps), dtype=float)

    eval_idx = []
    eval_x = []
    for i, tap in enumerate(stencil.taps):
        if use_origin and tap.offset == 0:
            values[i] = settings.origin_value
            continue
        eval_idx.append(i)
        eval_x.append(x + step * tap.offset)

    values[eval_idx] = eval_points(
        function,
        eval_x,
        concurrent=settings.concurrent,
        n_workers=settings.n_workers,
    )

    return float(np.dot(coeffs, values)) / step**stencil.order


class FiniteDifferenceDerivative:
    """Computes numerical derivatives with a fixed finite-difference stencil.

    Attributes:
        function: The function to differentiate. Must accept a single
            float and return a float.
        x0: The point at which the derivative is evaluated.

    Examples:
    ---------
    >>> d = FiniteDifferenceDerivative(function=lambda x: x**2, x0=3.0)
    >>> round(d.differentiate(method="central_2nd", step=1e-3), 6)
    2.0
    """

    def __init__(
        self,
        function: Callable[[float], float],
        x0: float,
    ) -> None:
        """Initialises the class based on function and central value.

        Arguments:
            function: The function to differentiate.
            x0: The point at which the derivative is evaluated.
        """
        self.function = function
        self.x0 = x0

    def differentiate(
        self,
        method: Stencil | str = CENTRAL,
        step: float | None = None,
        origin_value: float | None = None,
        concurrent: bool = False,
        n_workers: int | None = None,
    ) -> float:
        """Computes the derivative with the chosen stencil.

        Args:
            method: Stencil or built-in stencil name (``"forward"``,
                ``"backward"``, ``"central"``, ``"central_2nd"``). The order
                of the derivative is the order of the stencil.
            step: Step size. ``None`` uses the default from
                :func:`~gradkit.finite.settings.default_settings`.
            origin_value: Known value of the function at ``x0``, if any.
            concurrent: Evaluate the stencil taps on a thread pool.
            n_workers: Maximum number of threads when ``concurrent`` is True.

        Returns:
            The estimated derivative.
        """
        stencil = get_stencil(method)
        settings = EvalSettings(
            step=default_settings().step if step is None else step,
            origin_value=origin_value,
            concurrent=concurrent,
            n_workers=n_workers,
        )
        gradkit_logger.debug(
            "[FiniteDifference] stencil=%s order=%d step=%g concurrent=%s",
            stencil.name,
            stencil.order,
            settings.step,
            settings.concurrent,
        )
        return estimate(self.function, self.x0, stencil, settings)
