"""Stencil definitions for fixed-step finite-difference derivatives.

A stencil is a list of taps ``(offset, coefficient)`` together with the
derivative order. The estimate at ``x`` with step ``h`` is

.. math::

    f^{(n)}(x) \\approx \\frac{1}{h^n} \\sum_k c_k f(x + o_k h).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from gradkit.exceptions import InvalidArgumentError

__all__ = [
    "StencilPoint",
    "Stencil",
    "FORWARD",
    "BACKWARD",
    "CENTRAL",
    "CENTRAL_2ND",
    "get_stencil",
    "available_stencils",
]


@dataclass(frozen=True)
class StencilPoint:
    """One tap of a finite-difference stencil."""

    offset: float
    coefficient: float


@dataclass(frozen=True)
class Stencil:
    """A finite-difference formula.

    Attributes:
        taps: The stencil points, evaluated at ``x + offset * step``.
        order: Power of the step size dividing the weighted sum. Equal to the
            order of the derivative being approximated.
        name: Display name.
    """

    taps: tuple[StencilPoint, ...]
    order: int
    name: str = "custom"

    def __post_init__(self) -> None:
        taps = tuple(
            t if isinstance(t, StencilPoint) else StencilPoint(float(t[0]), float(t[1]))
            for t in self.taps
        )
        object.__setattr__(self, "taps", taps)

        if not taps:
            raise InvalidArgumentError("stencil must have at least one tap.")
        for t in taps:
            if not (math.isfinite(t.offset) and math.isfinite(t.coefficient)):
                raise InvalidArgumentError(f"stencil tap {t} is not finite.")
        if sum(1 for t in taps if t.offset == 0) > 1:
            raise InvalidArgumentError("stencil may have at most one tap at offset 0.")
        if isinstance(self.order, bool) or not isinstance(self.order, int) or self.order < 1:
            raise InvalidArgumentError(
                f"stencil order must be a positive integer; got {self.order!r}."
            )

    @property
    def offsets(self) -> tuple[float, ...]:
        return tuple(t.offset for t in self.taps)

    @property
    def coefficients(self) -> tuple[float, ...]:
        return tuple(t.coefficient for t in self.taps)

    @property
    def has_origin(self) -> bool:
        """True if one tap evaluates the function at the point itself."""
        return any(t.offset == 0 for t in self.taps)


#: (f(x + h) - f(x)) / h
FORWARD = Stencil(
    taps=(StencilPoint(0.0, -1.0), StencilPoint(1.0, 1.0)),
    order=1,
    name="forward",
)

#: (f(x) - f(x - h)) / h
BACKWARD = Stencil(
    taps=(StencilPoint(-1.0, -1.0), StencilPoint(0.0, 1.0)),
    order=1,
    name="backward",
)

#: (f(x + h) - f(x - h)) / (2h)
CENTRAL = Stencil(
    taps=(StencilPoint(-1.0, -0.5), StencilPoint(1.0, 0.5)),
    order=1,
    name="central",
)

#: (f(x - h) - 2 f(x) + f(x + h)) / h^2
CENTRAL_2ND = Stencil(
    taps=(StencilPoint(-1.0, 1.0), StencilPoint(0.0, -2.0), StencilPoint(1.0, 1.0)),
    order=2,
    name="central_2nd",
)


_STENCIL_SPECS: list[tuple[Stencil, list[str]]] = [
    (FORWARD, ["fwd"]),
    (BACKWARD, ["bwd"]),
    (CENTRAL, []),
    (CENTRAL_2ND, ["central2", "central-2nd", "second"]),
]


def _norm(s: str) -> str:
    """Normalize a stencil name (case/spacing/punct insensitive)."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


_STENCIL_MAP: dict[str, Stencil] = {}
for _stencil, _aliases in _STENCIL_SPECS:
    _STENCIL_MAP[_norm(_stencil.name)] = _stencil
    for _alias in _aliases:
        _STENCIL_MAP[_norm(_alias)] = _stencil


def available_stencils() -> tuple[str, ...]:
    """Returns the canonical names of the built-in stencils."""
    return tuple(s.name for s, _ in _STENCIL_SPECS)


def get_stencil(method: str | Stencil) -> Stencil:
    """Resolves a stencil name, or passes a :class:`Stencil` through.

    Args:
        method: A built-in stencil name or alias, or a stencil instance.

    Returns:
        The matching stencil.

    Raises:
        InvalidArgumentError: If the name is unknown.
    """
    if isinstance(method, Stencil):
        return method
    if not isinstance(method, str):
        raise InvalidArgumentError(
            f"method must be a stencil name or Stencil; got {type(method).__name__}."
        )
    try:
        return _STENCIL_MAP[_norm(method)]
    except KeyError:
        opts = ", ".join(available_stencils())
        raise InvalidArgumentError(
            f"Unknown stencil '{method}'. Choose one of {{{opts}}}."
        ) from None
