"""Exceptions raised by gradkit estimators."""

import numpy as np

__all__ = [
    "GradKitError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "InvalidWeightError",
    "SingularSystemError",
]


class GradKitError(Exception):
    """Base exception for derivative and gradient estimation."""

    pass


class InvalidArgumentError(GradKitError, ValueError):
    """Malformed settings, stencil, method name or weight parameter."""

    pass


class DimensionMismatchError(GradKitError, ValueError):
    """Sample location, query and output lengths disagree."""

    pass


class InvalidWeightError(GradKitError, ValueError):
    """A locality weight is negative, NaN, infinite or undefined."""

    pass


class SingularSystemError(GradKitError, np.linalg.LinAlgError):
    """The weighted design matrix of a least-squares fit is rank-deficient."""

    pass
