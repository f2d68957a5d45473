"""Batch evaluation of a function at stencil locations."""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from gradkit.utils.concurrency import parallel_execute, resolve_workers
from gradkit.utils.validate import validate_scalar_output

__all__ = ["eval_points"]


def _eval_scalar(func: Callable[[float], Any], x: float) -> float:
    return validate_scalar_output(func(x))


def eval_points(
    func: Callable[[float], Any],
    xs: Sequence[float],
    concurrent: bool = False,
    n_workers: int | None = None,
) -> np.ndarray:
    """Evaluates ``func`` at a sequence of points.

    Args:
        func: Callable taking a single float and returning a real number.
        xs: 1D sequence of points at which to evaluate ``func``.
        concurrent: If True, every evaluation is dispatched to a thread pool
            and this call blocks until all of them have returned.
        n_workers: Upper bound on the number of threads. ``None`` gives every
            point its own thread. Ignored when ``concurrent`` is False.

    Returns:
        An array of function values in the order of ``xs``.
    """
    xs_list = [float(x) for x in xs]
    if not xs_list:
        return np.asarray([], dtype=float)

    workers = resolve_workers(n_workers, len(xs_list)) if concurrent else 1
    vals = parallel_execute(
        _eval_scalar,
        [(func, x) for x in xs_list],
        n_workers=workers,
        threaded=concurrent,
    )
    return np.asarray(vals, dtype=float)
