"""Tests for gradkit.utils.linalg."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose

from gradkit.exceptions import DimensionMismatchError, SingularSystemError
from gradkit.utils.linalg import weighted_lstsq


def test_square_system_solved_exactly():
    """Tests that a well-posed square system is solved exactly."""
    a = np.array([[2.0, 1.0], [1.0, 3.0]])
    x = np.array([1.0, -2.0])
    assert_allclose(weighted_lstsq(a, a @ x), x, atol=1e-12)


def test_overdetermined_consistent_system():
    """Tests that consistent overdetermined data are fitted exactly."""
    rng = np.random.default_rng(0)
    a = rng.normal(size=(8, 3))
    x = np.array([0.5, -1.0, 2.0])
    assert_allclose(weighted_lstsq(a, a @ x), x, atol=1e-10)


def test_weights_match_scaled_rows():
    """Tests that weights act as row scaling of both sides."""
    a = np.array([[1.0, 0.0], [1.0, 1.0], [1.0, 2.0], [1.0, 3.0]])
    b = np.array([0.1, 0.9, 2.2, 2.8])
    w = np.array([1.0, 2.0, 0.5, 3.0])
    expected, *_ = np.linalg.lstsq(a * w[:, None], b * w, rcond=None)
    assert_allclose(weighted_lstsq(a, b, w), expected, atol=1e-12)


def test_weights_change_the_fit():
    """Tests that inconsistent data are pulled towards heavily weighted rows."""
    a = np.ones((2, 1))
    b = np.array([0.0, 1.0])
    assert weighted_lstsq(a, b)[0] == pytest.approx(0.5)
    assert weighted_lstsq(a, b, [1.0, 100.0])[0] == pytest.approx(1.0, abs=1e-3)


def test_rank_deficient_raises():
    """Tests that a rank-deficient design raises instead of returning min-norm."""
    a = np.array([[1.0, 2.0], [2.0, 4.0], [3.0, 6.0]])
    with pytest.raises(SingularSystemError, match="rank=1"):
        weighted_lstsq(a, np.array([1.0, 2.0, 3.0]))


def test_zero_weights_can_make_system_singular():
    """Tests that zero weights removing rows are detected as rank loss."""
    a = np.array([[1.0, 0.0], [0.0, 1.0]])
    with pytest.raises(SingularSystemError):
        weighted_lstsq(a, np.array([1.0, 1.0]), [1.0, 0.0])


def test_underdetermined_raises():
    """Tests that fewer rows than unknowns raises SingularSystemError."""
    with pytest.raises(SingularSystemError, match="underdetermined"):
        weighted_lstsq(np.ones((1, 2)), np.array([1.0]))


def test_singular_error_is_linalg_error():
    """Tests that callers catching LinAlgError still see singular systems."""
    with pytest.raises(np.linalg.LinAlgError):
        weighted_lstsq(np.zeros((3, 2)), np.zeros(3))


@pytest.mark.parametrize(
    "design,rhs,weights",
    [
        (np.ones(3), np.ones(3), None),
        (np.ones((3, 2)), np.ones(2), None),
        (np.ones((3, 2)), np.ones(3), np.ones(2)),
    ],
)
def test_shape_errors(design, rhs, weights):
    """Tests that incompatible shapes raise DimensionMismatchError."""
    with pytest.raises(DimensionMismatchError):
        weighted_lstsq(design, rhs, weights)
