"""Tests for the RickerModel facade."""

import numpy as np
import pytest

from config.parameters import ModelParams, RickerParams, LyapunovParams
from core.integrator import RickerModel
from core.timeseries import simulate
from core.lyapunov import lyapunov_exponent


@pytest.fixture
def model(params):
    return RickerModel(params)


class TestSimulate:
    def test_uses_configured_parameters(self, model, params):
        result = model.simulate()
        run = params.ricker
        np.testing.assert_array_equal(result['N_full'], simulate(run.r, run.k, run.n0, run.tf))
        assert result['params']['r'] == run.r

    def test_burn_in_removed(self, model, params):
        result = model.simulate(r=2.3)
        burn_in = params.numerical.burn_in
        assert len(result['N']) == params.ricker.tf - burn_in
        assert result['times'][0] == burn_in + 1
        assert result['times_full'][0] == 1

    def test_overrides(self, model):
        result = model.simulate(r=0.0, k=10.0, n0=3.0, tf=150)
        assert np.all(result['N_full'] == 3.0)
        assert result['params'] == {'r': 0.0, 'k': 10.0, 'n0': 3.0, 'tf': 150, 'burn_in': 100}

    def test_short_run_keeps_last_value(self, model):
        result = model.simulate(tf=5)
        assert len(result['N']) == 1
        assert result['params']['burn_in'] == 4

    def test_single_value_run(self, model):
        result = model.simulate(n0=7.0, tf=1)
        assert result['N'].tolist() == [7.0]
        assert result['stats']['mean'] == 7.0

    def test_stats_match_post_burn_in_series(self, model):
        result = model.simulate(r=1.5)
        assert result['stats']['mean'] == pytest.approx(np.mean(result['N']))
        assert result['stats']['mean'] == pytest.approx(100.0)

    def test_invalid_override_rejected(self, model):
        with pytest.raises(AssertionError):
            model.simulate(k=-1.0)


class TestEnsemble:
    def test_shapes(self, model, params):
        ensemble = model.ensemble(r=1.5, n_runs=6)
        assert ensemble['trajectories'].shape == (6, params.ricker.tf)
        assert ensemble['final_values'].shape == (6,)
        assert ensemble['spread'].shape == (params.ricker.tf,)
        assert ensemble['params']['n_runs'] == 6

    def test_reproducible_with_seed(self, model):
        a = model.ensemble(r=3.0, n_runs=4, base_seed=7)
        b = model.ensemble(r=3.0, n_runs=4, base_seed=7)
        np.testing.assert_array_equal(a['trajectories'], b['trajectories'])

    def test_different_seeds_differ(self, model):
        a = model.ensemble(r=3.0, n_runs=4, base_seed=1)
        b = model.ensemble(r=3.0, n_runs=4, base_seed=2)
        assert not np.array_equal(a['initial_values'], b['initial_values'])

    def test_initial_values_close_to_n0(self, model, params):
        ensemble = model.ensemble(n_runs=50)
        np.testing.assert_allclose(ensemble['initial_values'], params.ricker.n0, rtol=1e-4)

    def test_stable_regime_contracts(self, model):
        ensemble = model.ensemble(r=1.5, n_runs=10)
        assert ensemble['spread'][-1] < ensemble['spread'][0]

    def test_chaotic_regime_amplifies_spread(self, model):
        ensemble = model.ensemble(r=3.0, n_runs=10)
        assert ensemble['spread'][-1] > 1e3 * ensemble['spread'][0]

    def test_defaults_from_params(self, params):
        params.numerical.n_ensemble = 3
        ensemble = RickerModel(params).ensemble()
        assert len(ensemble['final_values']) == 3
        assert ensemble['params']['base_seed'] == params.numerical.base_seed

    def test_reports_progress(self, model, capsys):
        model.ensemble(r=2.0, n_runs=2)
        assert 'Running ensemble: 2 realizations' in capsys.readouterr().out


class TestLyapunov:
    def test_uses_lyapunov_params(self):
        params = ModelParams(lyapunov=LyapunovParams(n0=0.3, tf=400))
        model = RickerModel(params)
        assert model.lyapunov(2.8) == lyapunov_exponent(0.3, 2.8, 400)

    def test_defaults_to_configured_r(self):
        params = ModelParams(ricker=RickerParams(r=3.0))
        assert RickerModel(params).lyapunov() > 0

    def test_log_floor_passed_through(self):
        params = ModelParams(lyapunov=LyapunovParams(n0=1.0, tf=10, log_floor=-20.0))
        assert RickerModel(params).lyapunov(1.0) == pytest.approx(-20.0)
