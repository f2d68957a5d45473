"""Tests for the top-level gradkit namespace."""

import math

import numpy as np
import pytest

import gradkit
from gradkit.logger import gradkit_logger, logger_name


def test_all_names_are_exported():
    """Tests that every name in __all__ is importable from the package."""
    for name in gradkit.__all__:
        assert hasattr(gradkit, name), name


def test_end_to_end_finite_and_scattered():
    """Tests both engines through the package namespace."""
    d = gradkit.estimate(math.sin, 0.0, gradkit.CENTRAL, gradkit.EvalSettings(step=1e-4))
    assert d == pytest.approx(1.0, abs=1e-8)

    samples = [gradkit.NeighborSample((x, y), 1.0 + x - y) for x, y in [(0, 0), (1, 0), (0, 1)]]
    grad = gradkit.estimate_gradient((0.0, 0.0), samples, gradkit.SquaredExponential(1.0))
    np.testing.assert_allclose(grad, [1.0, -1.0], atol=1e-12)


def test_error_hierarchy():
    """Tests that all typed errors share the package base class."""
    for exc in (
        gradkit.InvalidArgumentError,
        gradkit.DimensionMismatchError,
        gradkit.InvalidWeightError,
        gradkit.SingularSystemError,
    ):
        assert issubclass(exc, gradkit.GradKitError)


def test_logger_name():
    """Tests that the package logger uses the package name."""
    assert logger_name == "gradkit"
    assert gradkit_logger.name == "gradkit"
