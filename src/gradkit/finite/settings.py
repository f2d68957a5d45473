"""Evaluation settings for the finite-difference evaluator."""

from __future__ import annotations

from dataclasses import dataclass

from gradkit.utils.validate import validate_step

__all__ = ["EvalSettings", "default_settings", "DEFAULT_STEP"]

#: Step size used by :func:`default_settings`.
DEFAULT_STEP = 1e-6


@dataclass(frozen=True)
class EvalSettings:
    """Settings for a single finite-difference estimate.

    Attributes:
        step: Step size ``h``. Must be finite and strictly positive.
        origin_value: The value of the function at the evaluation point, if
            already known. When given, the origin tap of a stencil uses it
            instead of calling the function.
        concurrent: If True, the function evaluations of the stencil are
            dispatched to a thread pool.
        n_workers: Maximum number of threads used when ``concurrent`` is True.
            ``None`` uses the :func:`~gradkit.utils.concurrency.set_workers`
            setting if any, else one thread per evaluated tap.
    """

    step: float = DEFAULT_STEP
    origin_value: float | None = None
    concurrent: bool = False
    n_workers: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "step", validate_step(self.step))
        if self.origin_value is not None:
            object.__setattr__(self, "origin_value", float(self.origin_value))

    @property
    def origin_known(self) -> bool:
        return self.origin_value is not None


def default_settings() -> EvalSettings:
    """Returns basic settings: sequential evaluation with step ``1e-6``.

    Combined with the central stencil this computes a central difference
    approximation of the first derivative.
    """
    return EvalSettings(step=DEFAULT_STEP)
