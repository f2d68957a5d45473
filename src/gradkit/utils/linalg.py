"""Dense least-squares solves with rank diagnostics."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from gradkit.exceptions import DimensionMismatchError, SingularSystemError
from gradkit.utils.types import FloatArray

__all__ = ["weighted_lstsq"]


def weighted_lstsq(
    design: ArrayLike,
    rhs: ArrayLike,
    weights: ArrayLike | None = None,
    *,
    rcond: float | None = None,
) -> FloatArray:
    """Solves a row-weighted linear least-squares problem.

    Each row of ``design`` and the matching entry of ``rhs`` are multiplied by
    its weight before the solve, and the result is the minimizer of
    ``sum_i (w_i * (A_i @ beta - b_i))**2`` computed with the SVD-based
    :func:`numpy.linalg.lstsq`.

    Args:
        design: Design matrix of shape ``(n_rows, n_cols)``.
        rhs: Right-hand side of shape ``(n_rows,)``.
        weights: Row weights of shape ``(n_rows,)``. ``None`` means all ones.
        rcond: Cutoff for small singular values forwarded to ``lstsq``.
            ``None`` uses machine precision times the largest dimension.

    Returns:
        Solution vector of shape ``(n_cols,)``.

    Raises:
        DimensionMismatchError: If the shapes of the inputs are incompatible.
        SingularSystemError: If the weighted design matrix has rank below
            ``n_cols``. No minimum-norm solution is returned in that case.
    """
    mat = np.asarray(design, dtype=float)
    vec = np.asarray(rhs, dtype=float)

    if mat.ndim != 2:
        raise DimensionMismatchError(f"design must be 2D; got shape {mat.shape}.")
    n_rows, n_cols = mat.shape
    if vec.shape != (n_rows,):
        raise DimensionMismatchError(
            f"rhs must have shape ({n_rows},); got {vec.shape}."
        )

    if weights is not None:
        w = np.asarray(weights, dtype=float)
        if w.shape != (n_rows,):
            raise DimensionMismatchError(
                f"weights must have shape ({n_rows},); got {w.shape}."
            )
        mat = mat * w[:, None]
        vec = vec * w

    if n_rows < n_cols:
        raise SingularSystemError(
            f"Least-squares system is underdetermined: {n_rows} rows for "
            f"{n_cols} unknowns."
        )

    beta, _, rank, _ = np.linalg.lstsq(mat, vec, rcond=rcond)
    if rank < n_cols:
        raise SingularSystemError(
            f"Weighted design matrix is rank-deficient (rank={rank} < {n_cols})."
        )
    return np.asarray(beta, dtype=float)
