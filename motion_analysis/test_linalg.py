"""Tests for motion_analysis.linalg -- Gaussian elimination solver."""

import numpy as np
import pytest

from motion_analysis.linalg import solve_linear_system


class TestSolve:

    def test_two_by_two(self):
        x = solve_linear_system([[2.0, 1.0], [1.0, 3.0]], [3.0, 5.0])
        np.testing.assert_allclose(x, [0.8, 1.4])

    def test_zero_leading_entry_needs_pivoting(self):
        A = np.array([[0.0, 2.0, 1.0], [1.0, 1.0, 1.0], [2.0, 1.0, 0.0]])
        b = np.array([5.0, 6.0, 4.0])
        np.testing.assert_allclose(solve_linear_system(A, b), np.linalg.solve(A, b))

    def test_random_well_conditioned_systems(self):
        rng = np.random.default_rng(0)
        for p in (1, 2, 3, 4):
            A = rng.normal(size=(p, p)) + p * np.eye(p)
            b = rng.normal(size=p)
            np.testing.assert_allclose(solve_linear_system(A, b), np.linalg.solve(A, b), rtol=1e-10)


class TestSingular:

    def test_singular_returns_none(self):
        assert solve_linear_system([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0]) is None

    def test_zero_matrix_returns_none(self):
        assert solve_linear_system(np.zeros((3, 3)), np.ones(3)) is None

    def test_pivot_below_tolerance(self):
        A = [[1e-13, 0.0], [0.0, 1.0]]
        assert solve_linear_system(A, [1.0, 1.0]) is None
        assert solve_linear_system(A, [1.0, 1.0], tol=1e-15) is not None


class TestInputs:

    def test_inputs_not_mutated(self):
        A = np.array([[0.0, 1.0], [1.0, 0.0]])
        b = np.array([2.0, 3.0])
        A_before, b_before = A.copy(), b.copy()
        solve_linear_system(A, b)
        np.testing.assert_array_equal(A, A_before)
        np.testing.assert_array_equal(b, b_before)

    def test_non_square_raises(self):
        with pytest.raises(ValueError):
            solve_linear_system(np.ones((2, 3)), np.ones(2))

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            solve_linear_system(np.eye(2), np.ones(3))


class TestNonFinite:

    @pytest.mark.parametrize("bad", [np.inf, -np.inf, np.nan])
    def test_non_finite_pivot_returns_none(self, bad):
        assert solve_linear_system([[bad, 1.0], [1.0, 1.0]], [1.0, 1.0]) is None

    def test_overflowing_entry_off_the_pivot_returns_none(self):
        assert solve_linear_system([[2.0, np.inf], [1.0, 1.0]], [1.0, 1.0]) is None

    def test_non_finite_right_hand_side_returns_none(self):
        assert solve_linear_system(np.eye(2), [np.inf, 1.0]) is None
