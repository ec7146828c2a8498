"""Bifurcation and stability analysis tools."""

import numpy as np
import pandas as pd
from typing import Optional

from core.vectorized import simulate_batch
from core.lyapunov import lyapunov_batch
from analysis.statistics import detect_period


def bifurcation_diagram(r_values, k=1.0, n0=0.5, tf=500, n_tail=40):
    """
    Asymptotic population values across growth rates.

    All r values share one time axis, so they are simulated in a
    single vectorized batch; only the trailing n_tail steps are kept.

    Returns:
        DataFrame with columns r, n (n_tail rows per r)
    """
    if not 1 <= n_tail <= tf:
        raise ValueError(f"n_tail must be in [1, {tf}], got {n_tail}")

    r_values = np.asarray(r_values, dtype=float)
    trajectories = simulate_batch(r_values, k, n0, tf)
    tail = trajectories[:, -n_tail:]

    return pd.DataFrame({
        'r': np.repeat(r_values, n_tail),
        'n': tail.ravel(),
    })


def lyapunov_sweep(r_values, n0=0.5, tf=1000, log_floor: Optional[float] = None):
    """
    Lyapunov exponent for each growth rate.

    Returns:
        DataFrame with columns r, lyapunov
    """
    r_values = np.asarray(r_values, dtype=float)
    return pd.DataFrame({
        'r': r_values,
        'lyapunov': lyapunov_batch(r_values, n0=n0, tf=tf, log_floor=log_floor),
    })


def parameter_sweep(model, r_values):
    """
    Sweep growth rate and collect statistics.

    Args:
        model: RickerModel instance
        r_values: Array of growth rates

    Returns:
        results: Dict with statistics for each value
    """
    results = {
        'param_values': np.asarray(r_values, dtype=float),
        'N_mean': [],
        'N_std': [],
        'N_min': [],
        'N_max': [],
        'period': [],
        'lyapunov': [],
    }

    for r in r_values:
        result = model.simulate(r=r)

        stats = result['stats']
        results['N_mean'].append(stats['mean'])
        results['N_std'].append(stats['std'])
        results['N_min'].append(stats['min'])
        results['N_max'].append(stats['max'])
        results['period'].append(detect_period(result['N']))
        results['lyapunov'].append(model.lyapunov(r))

    return results


if __name__ == "__main__":
    """Demo: r sweep (bifurcation diagram); run with python -m analysis.bifurcation"""
    from config.parameters import ModelParams
    from core.integrator import RickerModel

    print("Running bifurcation analysis (r sweep)...")
    params = ModelParams()
    model = RickerModel(params)

    r_values = np.linspace(1.5, 3.2, 18)
    print(f"Sweeping r from {r_values[0]:.2f} to {r_values[-1]:.2f} ({len(r_values)} points)")

    results = parameter_sweep(model, r_values)

    print("\nKey Findings:")
    for r, period, lyap in zip(results['param_values'], results['period'], results['lyapunov']):
        label = 'chaos' if period == -1 else f'period {period}'
        print(f"  r={r:.2f}: {label:<10} λ={lyap:+.3f}")
