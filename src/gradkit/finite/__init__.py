"""Fixed-stencil finite-difference derivatives."""

from gradkit.finite.finite_difference import FiniteDifferenceDerivative, estimate
from gradkit.finite.settings import EvalSettings, default_settings
from gradkit.finite.stencil import (
    BACKWARD,
    CENTRAL,
    CENTRAL_2ND,
    FORWARD,
    Stencil,
    StencilPoint,
    available_stencils,
    get_stencil,
)

__all__ = [
    "FiniteDifferenceDerivative",
    "estimate",
    "EvalSettings",
    "default_settings",
    "Stencil",
    "StencilPoint",
    "FORWARD",
    "BACKWARD",
    "CENTRAL",
    "CENTRAL_2ND",
    "available_stencils",
    "get_stencil",
]
