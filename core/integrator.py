"""
Integrator module: runs the Ricker model from a ModelParams set.

Ties together:
- Scalar generator (single runs, per-run tf)
- Vectorized generator (ensembles sharing a time axis)
- Lyapunov estimator (stability indicator)
- Trajectory statistics

Results are returned as plain dictionaries of numpy arrays, ready for
the analysis and visualization modules.
"""

import numpy as np
from typing import Dict, Optional

from config.parameters import ModelParams, RickerParams
from core.timeseries import simulate
from core.vectorized import simulate_batch
from core.lyapunov import lyapunov_exponent
from analysis.statistics import trajectory_statistics, ensemble_statistics


class RickerModel:
    """
    Ricker population model driven by a ModelParams instance.

    State variable:
        N: Population size [individuals]

    Dynamics:
        N(t+1) = N(t) × exp(r × (1 - N(t)/k))
    """

    def __init__(self, params: ModelParams):
        """
        Initialize model.

        Args:
            params: Complete ModelParams instance
        """
        self.params = params

    def _resolve(self,
                 r: Optional[float],
                 k: Optional[float],
                 n0: Optional[float],
                 tf: Optional[int]) -> RickerParams:
        """Fill unspecified run parameters from params.ricker."""
        base = self.params.ricker
        return RickerParams(
            r=base.r if r is None else r,
            k=base.k if k is None else k,
            n0=base.n0 if n0 is None else n0,
            tf=base.tf if tf is None else tf,
        )

    def simulate(self,
                 r: Optional[float] = None,
                 k: Optional[float] = None,
                 n0: Optional[float] = None,
                 tf: Optional[int] = None) -> Dict:
        """
        Run one trajectory.

        Args:
            r, k, n0, tf: Override params.ricker (uses params if None)

        Returns:
            Dictionary with time series and statistics
        """
        run = self._resolve(r, k, n0, tf)
        N = simulate(run.r, run.k, run.n0, run.tf)
        times = np.arange(1, run.tf + 1)

        # Remove burn-in (keep at least the last value)
        burn_in_steps = min(self.params.numerical.burn_in, run.tf - 1)

        return {
            'times_full': times,
            'N_full': N,
            'times': times[burn_in_steps:],
            'N': N[burn_in_steps:],
            'stats': trajectory_statistics(N, burn_in=burn_in_steps),
            'params': {
                'r': run.r,
                'k': run.k,
                'n0': run.n0,
                'tf': run.tf,
                'burn_in': burn_in_steps,
            }
        }

    def ensemble(self,
                 r: Optional[float] = None,
                 n_runs: Optional[int] = None,
                 base_seed: Optional[int] = None) -> Dict:
        """
        Run an ensemble of nearby initial conditions.

        Members differ only in n0, so they share one time axis and are
        simulated as a single vectorized batch. The spread of the final
        values shows sensitivity to initial conditions.

        Args:
            r: Growth rate (uses params if None)
            n_runs: Number of ensemble members (uses params if None)
            base_seed: Random seed (uses params if None)

        Returns:
            Dictionary with trajectories and ensemble statistics
        """
        run = self._resolve(r, None, None, None)

        if n_runs is None:
            n_runs = self.params.numerical.n_ensemble

        if base_seed is None:
            base_seed = self.params.numerical.base_seed

        rng = np.random.RandomState(base_seed)
        noise = rng.standard_normal(n_runs)
        n0 = run.n0 * (1.0 + self.params.numerical.perturbation * noise)

        print(f"Running ensemble: {n_runs} realizations at r={run.r:.3f}...")
        trajectories = simulate_batch(np.full(n_runs, run.r), run.k, n0, run.tf)

        final_values = trajectories[:, -1]
        spread = np.max(trajectories, axis=0) - np.min(trajectories, axis=0)

        return {
            'trajectories': trajectories,
            'initial_values': n0,
            'final_values': final_values,
            'spread': spread,
            'ensemble_stats': ensemble_statistics(final_values),
            'params': {
                'r': run.r,
                'k': run.k,
                'tf': run.tf,
                'n_runs': n_runs,
                'base_seed': base_seed,
            }
        }

    def lyapunov(self, r: Optional[float] = None) -> float:
        """Lyapunov exponent at r with the configured LyapunovParams."""
        run = self._resolve(r, None, None, None)
        cfg = self.params.lyapunov
        return lyapunov_exponent(cfg.n0, run.r, cfg.tf, log_floor=cfg.log_floor)


# Testing
if __name__ == "__main__":
    print("=" * 80)
    print("TESTING INTEGRATOR MODULE")
    print("=" * 80)

    params = ModelParams()
    params.validate()

    model = RickerModel(params)

    for r in (1.5, 2.3, 3.0):
        result = model.simulate(r=r)
        stats = result['stats']
        print(f"\nr = {r}:")
        print(f"  Mean: {stats['mean']:.1f} ± {stats['std']:.1f}")
        print(f"  Range: [{stats['min']:.1f}, {stats['max']:.1f}]")
        print(f"  Lyapunov: {model.lyapunov(r):+.3f}")

    print("\n" + "=" * 80)
    print("✓ All integrator tests complete")
    print("=" * 80)
