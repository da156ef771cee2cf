import numpy as np
import pytest

from tuner.lag_selection import absolute_threshold, parabolic_interpolation, select_lag


class TestAbsoluteThreshold:

    def test_skips_lags_zero_and_one(self):
        cmnd = np.array([0.0, 0.01, 0.5, 0.5])
        assert absolute_threshold(cmnd, 0.1) is None

    def test_walks_to_local_minimum(self):
        cmnd = np.array([1.0, 0.01, 0.5, 0.08, 0.05, 0.07, 0.5])
        estimate = absolute_threshold(cmnd, 0.1)
        assert estimate.tau == 4
        assert estimate.periodicity == pytest.approx(0.95)

    def test_first_dip_wins_over_deeper_later_dip(self):
        cmnd = np.array([1.0, 1.0, 0.9, 0.08, 0.5, 0.9, 0.001, 0.9])
        assert absolute_threshold(cmnd, 0.1).tau == 3

    def test_walk_stops_at_array_end(self):
        cmnd = np.array([1.0, 1.0, 0.5, 0.09, 0.05, 0.02])
        assert absolute_threshold(cmnd, 0.1).tau == 5

    def test_threshold_override(self):
        cmnd = np.array([1.0, 1.0, 0.5, 0.08, 0.05, 0.07, 0.5])
        assert absolute_threshold(cmnd, 0.06).tau == 4
        assert absolute_threshold(cmnd, 0.01) is None

    def test_nothing_below_threshold(self):
        assert absolute_threshold(np.ones(64), 0.1) is None


class TestParabolicInterpolation:

    def test_exact_vertex(self):
        x = np.arange(8, dtype=float)
        cmnd = (x - 3.3) ** 2 + 0.01
        assert parabolic_interpolation(cmnd, 3) == pytest.approx(3.3)

    def test_symmetric_neighbours_keep_integer(self):
        cmnd = np.array([1.0, 0.5, 0.1, 0.5, 1.0])
        assert parabolic_interpolation(cmnd, 2) == pytest.approx(2.0)

    def test_collinear_returns_estimate(self):
        cmnd = np.array([1.0, 0.75, 0.5, 0.25, 1.0])
        assert parabolic_interpolation(cmnd, 2) == 2.0

    def test_left_edge_keeps_estimate(self):
        assert parabolic_interpolation(np.array([0.2, 0.5, 0.9]), 0) == 0.0

    def test_left_edge_moves_to_lower_neighbour(self):
        assert parabolic_interpolation(np.array([0.5, 0.2, 0.9]), 0) == 1.0

    def test_right_edge_keeps_estimate(self):
        assert parabolic_interpolation(np.array([1.0, 0.3, 0.1]), 2) == 2.0

    def test_right_edge_moves_to_lower_neighbour(self):
        assert parabolic_interpolation(np.array([1.0, 0.1, 0.3]), 2) == 1.0

    def test_single_element(self):
        assert parabolic_interpolation(np.array([0.4]), 0) == 0.0

    def test_result_stays_within_half_sample_of_minimum(self):
        cmnd = np.array([1.0, 0.9, 0.3, 0.05, 0.04, 0.2, 0.8])
        lag = parabolic_interpolation(cmnd, 4)
        assert 3.5 <= lag <= 4.5


class TestSelectLag:

    def test_returns_refined_lag_and_estimate(self):
        x = np.arange(10, dtype=float)
        cmnd = 0.5 * (x - 5.25) ** 2 / 10
        cmnd[0] = 1.0
        lag, estimate = select_lag(cmnd, 0.1)
        assert estimate.tau == 5
        assert lag == pytest.approx(5.25)

    def test_not_found(self):
        assert select_lag(np.ones(16)) is None
