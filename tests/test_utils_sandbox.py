"""Tests for gradkit.utils.sandbox."""

import numpy as np
import pytest

from gradkit.exceptions import DimensionMismatchError, InvalidArgumentError
from gradkit.utils.sandbox import axis_slice


def test_axis_slice_varies_one_coordinate():
    """Tests that only the chosen coordinate changes."""
    seen = []

    def f(theta):
        seen.append(theta.copy())
        return float(theta.sum())

    g = axis_slice(f, [1.0, 2.0, 3.0], 1)
    assert g(10.0) == 14.0
    np.testing.assert_array_equal(seen[0], [1.0, 10.0, 3.0])


def test_axis_slice_does_not_mutate_point():
    """Tests that every call works on a copy of the base point."""
    point = np.array([1.0, 2.0])
    g = axis_slice(lambda t: t[0], point, 0)
    assert g(5.0) == 5.0
    np.testing.assert_array_equal(point, [1.0, 2.0])


def test_axis_slice_accepts_numpy_integer_axis():
    """Tests that numpy integers are valid axes."""
    g = axis_slice(lambda t: t[1], [0.0, 0.0], np.int64(1))
    assert g(3.0) == 3.0


@pytest.mark.parametrize("axis", [2, -1, 1.0, "0"])
def test_axis_slice_rejects_bad_axis(axis):
    """Tests that non-integer or out-of-range axes are rejected."""
    with pytest.raises(InvalidArgumentError):
        axis_slice(sum, [1.0, 2.0], axis)


def test_axis_slice_rejects_2d_point():
    """Tests that the base point must be 1D."""
    with pytest.raises(DimensionMismatchError):
        axis_slice(sum, [[1.0, 2.0]], 0)
