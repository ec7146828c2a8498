"""Tests for the scalar (row-wise) time-series generator."""

import numpy as np
import pandas as pd
import pytest

from config.parameters import RickerParams
from core.ricker import ricker_update
from core.timeseries import (
    validate_length,
    coerce_length,
    simulate,
    simulate_frame,
    simulate_table,
    unnest_trajectories,
    simulate_collection,
)


class TestSimulate:
    def test_length_and_initial_value(self):
        trajectory = simulate(1.5, 100.0, 50.0, 25)
        assert trajectory.shape == (25,)
        assert trajectory[0] == 50.0

    def test_each_step_applies_update(self):
        trajectory = simulate(2.2, 100.0, 10.0, 10)
        for t in range(1, 10):
            assert trajectory[t] == ricker_update(trajectory[t - 1], 2.2, 100.0)

    def test_deterministic(self):
        a = simulate(3.0, 100.0, 50.0, 500)
        b = simulate(3.0, 100.0, 50.0, 500)
        assert np.array_equal(a, b)

    def test_zero_growth_rate_is_constant(self):
        trajectory = simulate(0.0, 100.0, 37.0, 50)
        assert np.all(trajectory == 37.0)

    def test_single_step_returns_initial_value(self, monkeypatch):
        calls = []
        monkeypatch.setattr('core.timeseries.ricker_update',
                            lambda *args: calls.append(args))
        trajectory = simulate(2.0, 100.0, 42.0, 1)
        assert trajectory.tolist() == [42.0]
        assert calls == []

    def test_stable_regime_converges_to_k(self):
        trajectory = simulate(1.5, 100.0, 10.0, 500)
        assert trajectory[-1] == pytest.approx(100.0, rel=1e-9)

    def test_zero_population_stays_zero(self):
        assert np.all(simulate(2.5, 100.0, 0.0, 20) == 0.0)

    @pytest.mark.parametrize('tf', [0, -3, 2.5, '10', True])
    def test_invalid_length_raises(self, tf):
        with pytest.raises(ValueError):
            simulate(1.5, 100.0, 50.0, tf)

    def test_numpy_integer_length(self):
        assert len(simulate(1.5, 100.0, 50.0, np.int64(7))) == 7


class TestValidateLength:
    def test_returns_python_int(self):
        assert validate_length(np.int32(4)) == 4
        assert type(validate_length(np.int32(4))) is int

    def test_error_names_argument(self):
        with pytest.raises(ValueError, match='steps'):
            validate_length(0, name='steps')


class TestCoerceLength:
    def test_integral_float_accepted(self):
        assert coerce_length(5.0) == 5
        assert type(coerce_length(np.float64(5.0))) is int

    @pytest.mark.parametrize("tf", [2.5, np.float64(0.5), float("nan")])
    def test_fractional_float_raises(self, tf):
        with pytest.raises(ValueError):
            coerce_length(tf)

    def test_integral_float_below_one_raises(self):
        with pytest.raises(ValueError):
            coerce_length(0.0)


class TestSimulateFrame:
    def test_time_is_one_based(self):
        frame = simulate_frame(1.5, 100.0, 50.0, 5)
        assert list(frame.columns) == ['time', 'n']
        assert frame['time'].tolist() == [1, 2, 3, 4, 5]
        assert frame['n'].iloc[0] == 50.0


class TestSimulateTable:
    def test_one_trajectory_per_row(self, grid):
        table = simulate_table(grid)
        assert len(table) == len(grid)
        for row in table.itertuples(index=False):
            assert len(row.trajectory) == row.tf
            np.testing.assert_array_equal(row.trajectory, simulate(row.r, row.k, row.n0, row.tf))

    def test_does_not_modify_grid(self, grid):
        before = grid.copy()
        simulate_table(grid)
        pd.testing.assert_frame_equal(grid, before)

    def test_heterogeneous_lengths_allowed(self):
        grid = pd.DataFrame({'r': [1.5, 2.5], 'k': [100.0, 100.0],
                             'n0': [10.0, 10.0], 'tf': [5, 12]})
        table = simulate_table(grid)
        assert [len(t) for t in table['trajectory']] == [5, 12]
        assert table['param_id'].tolist() == [0, 1]

    def test_missing_columns_raise(self):
        with pytest.raises(ValueError, match='tf'):
            simulate_table(pd.DataFrame({'r': [1.0], 'k': [1.0], 'n0': [0.5]}))

    def test_fractional_tf_raises(self):
        grid = pd.DataFrame({'r': [1.5], 'k': [100.0], 'n0': [10.0], 'tf': [2.5]})
        with pytest.raises(ValueError, match='tf'):
            simulate_table(grid)

    def test_integral_float_tf_accepted(self):
        grid = pd.DataFrame({'r': [1.5, 2.5], 'k': [100.0, 100.0],
                             'n0': [10.0, 10.0], 'tf': [5.0, 8.0]})
        table = simulate_table(grid)
        assert [len(t) for t in table['trajectory']] == [5, 8]


class TestUnnest:
    def test_long_form(self):
        grid = pd.DataFrame({'param_id': [7, 9], 'r': [1.5, 2.5], 'k': [100.0, 50.0],
                             'n0': [10.0, 20.0], 'tf': [3, 4]})
        long = unnest_trajectories(simulate_table(grid))

        assert len(long) == 7
        assert long['param_id'].tolist() == [7, 7, 7, 9, 9, 9, 9]
        assert long['time'].tolist() == [1, 2, 3, 1, 2, 3, 4]
        assert long.loc[long['time'] == 1, 'n'].tolist() == [10.0, 20.0]
        assert 'trajectory' not in long.columns

    def test_empty_table(self):
        grid = pd.DataFrame({'r': [], 'k': [], 'n0': [], 'tf': []})
        long = unnest_trajectories(simulate_table(grid))
        assert len(long) == 0
        assert {'time', 'n'} <= set(long.columns)


class TestCollection:
    def test_keyed_by_position(self):
        sets = [RickerParams(r=1.5, tf=10), RickerParams(r=2.5, k=50.0, n0=5.0, tf=3)]
        collection = simulate_collection(sets)
        assert sorted(collection) == [0, 1]
        assert len(collection[0]) == 10
        np.testing.assert_array_equal(collection[1], simulate(2.5, 50.0, 5.0, 3))
