"""Finite-difference calculus on multivariate functions."""

from gradkit.calculus.gradient import build_gradient

__all__ = ["build_gradient"]
