"""Numerical derivatives from stencils and gradients from scattered samples."""

from importlib.metadata import PackageNotFoundError, version

from gradkit.calculus.gradient import build_gradient
from gradkit.derivative_kit import DerivativeKit, available_methods, register_method
from gradkit.exceptions import (
    DimensionMismatchError,
    GradKitError,
    InvalidArgumentError,
    InvalidWeightError,
    SingularSystemError,
)
from gradkit.finite.finite_difference import FiniteDifferenceDerivative, estimate
from gradkit.finite.settings import EvalSettings, default_settings
from gradkit.finite.stencil import (
    BACKWARD,
    CENTRAL,
    CENTRAL_2ND,
    FORWARD,
    Stencil,
    StencilPoint,
)
from gradkit.scattered.local_fit import LocalFitDerivative
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
)

try:
    __version__ = version("gradkit")
except PackageNotFoundError:
    pass

__all__ = [
    "estimate",
    "estimate_gradient",
    "estimate_slope",
    "build_gradient",
    "DerivativeKit",
    "FiniteDifferenceDerivative",
    "LocalFitDerivative",
    "available_methods",
    "register_method",
    "EvalSettings",
    "default_settings",
    "Stencil",
    "StencilPoint",
    "FORWARD",
    "BACKWARD",
    "CENTRAL",
    "CENTRAL_2ND",
    "NeighborSample",
    "InterceptConstraint",
    "WeightFunction",
    "Uniform",
    "InverseSquaredDistance",
    "SquaredExponential",
    "GradKitError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "InvalidWeightError",
    "SingularSystemError",
]
