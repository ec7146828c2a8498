"""Summary statistics of Ricker trajectories and ensembles."""

import numpy as np
from typing import Dict, Sequence

PERCENTILES = (5, 25, 50, 75, 95)


def trajectory_statistics(n, burn_in: int = 0) -> Dict:
    """
    Summary statistics of one trajectory.

    Args:
        n: Population values
        burn_in: Leading steps to discard

    Returns:
        Dict with mean, std, cv, min, max, percentiles and final value
    """
    n = np.asarray(n, dtype=float)[burn_in:]
    if n.size == 0:
        raise ValueError("No values left after burn-in")

    mean = np.mean(n)
    std = np.std(n)

    return {
        'mean': mean,
        'std': std,
        'cv': std / mean if mean > 0 else 0,
        'min': np.min(n),
        'max': np.max(n),
        'final': n[-1],
        'percentiles': {p: np.percentile(n, p) for p in PERCENTILES},
    }


def detect_period(n, max_period: int = 64, tol: float = 1e-6) -> int:
    """
    Smallest p with n[t] ≈ n[t+p] over the tail of a trajectory.

    The trajectory should already be past its transient. The last
    2 × max_period values are compared.

    Returns:
        Period (1 = equilibrium), or -1 if none up to max_period
    """
    n = np.asarray(n, dtype=float)
    window = min(len(n), 2 * max_period)
    tail = n[-window:]

    for p in range(1, max_period + 1):
        if p >= window:
            break
        if np.all(np.abs(tail[p:] - tail[:-p]) <= tol * max(1.0, np.max(np.abs(tail)))):
            return p

    return -1


def ensemble_statistics(final_values: Sequence[float]) -> Dict:
    """
    Compute statistics across ensemble members.

    Args:
        final_values: One value per member (e.g. population at tf)

    Returns:
        stats: Aggregated statistics
    """
    values = np.asarray(final_values, dtype=float)
    mean = np.mean(values)

    return {
        'ensemble_mean': mean,
        'ensemble_std': np.std(values),
        'ensemble_cv': np.std(values) / mean if mean > 0 else 0,
        'ensemble_spread': np.max(values) - np.min(values),
    }


def confidence_intervals(data, confidence=0.95):
    """Compute confidence intervals."""
    alpha = 1 - confidence
    lower = np.percentile(data, alpha/2 * 100)
    upper = np.percentile(data, (1 - alpha/2) * 100)
    return lower, upper
