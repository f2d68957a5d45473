"""Tests for gradkit.scattered.local_fit."""

import math

import pytest

from gradkit.exceptions import InvalidArgumentError
from gradkit.scattered.local_fit import LocalFitDerivative
from gradkit.scattered.weights import SquaredExponential


@pytest.mark.parametrize("f,df,x0", [(math.sin, math.cos, 0.3), (math.exp, math.exp, -0.5)])
def test_local_fit_matches_truth(f, df, x0):
    """Tests the pinned line fit against analytic first derivatives."""
    d = LocalFitDerivative(f, x0).differentiate()
    assert d == pytest.approx(df(x0), abs=1e-5)


def test_local_fit_free_intercept():
    """Tests the fit without pinning the value at x0."""
    d = LocalFitDerivative(math.sin, 0.3).differentiate(force_intercept=False)
    assert d == pytest.approx(math.cos(0.3), abs=1e-5)


def test_local_fit_with_weights_by_name_and_instance():
    """Tests that weight functions may be given by name or instance."""
    fit = LocalFitDerivative(math.sin, 1.0)
    a = fit.differentiate(step=1e-3, weighter="isd")
    b = fit.differentiate(step=1e-3, weighter=SquaredExponential(scale=2e-3))
    assert a == pytest.approx(math.cos(1.0), abs=1e-5)
    assert b == pytest.approx(math.cos(1.0), abs=1e-5)


def test_local_fit_linear_is_exact():
    """Tests that linear functions are recovered exactly."""
    d = LocalFitDerivative(lambda x: 2.5 * x + 1.0, 4.0).differentiate(step=0.1)
    assert d == pytest.approx(2.5, abs=1e-10)


def test_local_fit_concurrent_matches_serial():
    """Tests that concurrent sampling gives the same estimate."""
    fit = LocalFitDerivative(math.cos, 0.2)
    assert fit.differentiate(concurrent=True, n_workers=2) == pytest.approx(
        fit.differentiate(), rel=1e-12
    )


@pytest.mark.parametrize("offsets", [(), (-1.0, 0.0, 1.0)])
def test_local_fit_rejects_bad_offsets(offsets):
    """Tests that empty or zero offsets are rejected."""
    with pytest.raises(InvalidArgumentError):
        LocalFitDerivative(math.sin, 0.0).differentiate(offsets=offsets)
