"""
Lyapunov exponent of the normalized Ricker map.

    λ = (1/tf) × Σ_{t=1..tf} ln|f'(r, x_t)|,   x_t = f(r, x_{t-1})

The derivative is evaluated at the state AFTER each update, so the
first term uses x_1 = f(r, x_0), not x_0.

Interpretation:
    λ > 0  → chaotic (nearby trajectories diverge)
    λ ≤ 0  → stable equilibrium or periodic cycle

Zero derivative (x_t = 1/r exactly) gives ln(0) = -inf. By default
this propagates, so λ = -inf. Passing log_floor clamps every log term
from below instead. NaN terms are never clamped.
"""

import numpy as np
from typing import Optional

from core.ricker import ricker_map, ricker_derivative
from core.timeseries import validate_length


def lyapunov_exponent(n0: float,
                      r: float,
                      tf: int,
                      k: float = 1.0,
                      log_floor: Optional[float] = None) -> float:
    """
    Time-averaged log growth rate of perturbations.

    Args:
        n0: Initial population
        r: Growth rate
        tf: Number of map iterations to average over
        k: Carrying capacity used to normalize n0 (x0 = n0/k)
        log_floor: Lower bound for each log term (None = no bound)

    Returns:
        Lyapunov exponent (may be -inf or NaN for degenerate orbits)
    """
    tf = validate_length(tf)

    x = np.float64(n0) / k
    lyap = 0.0

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        for _ in range(tf):
            x = ricker_map(x, r)
            term = np.log(np.abs(ricker_derivative(x, r)))
            if log_floor is not None and term < log_floor:
                term = log_floor
            lyap += term

    return float(lyap / tf)


def lyapunov_batch(r_values,
                   n0: float = 0.5,
                   tf: int = 1000,
                   log_floor: Optional[float] = None) -> np.ndarray:
    """
    Lyapunov exponents for many growth rates in lockstep.

    Same fold as lyapunov_exponent, applied element-wise to a vector
    of states (x0 = n0 for every r).

    Returns:
        Array of exponents, one per r
    """
    tf = validate_length(tf)
    r = np.asarray(r_values, dtype=np.float64)
    if r.ndim != 1:
        raise ValueError(f"r_values must be 1-D, got shape {r.shape}")

    x = np.full(r.shape, float(n0))
    lyap = np.zeros(r.shape)

    with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
        for _ in range(tf):
            x = ricker_map(x, r)
            terms = np.log(np.abs(ricker_derivative(x, r)))
            if log_floor is not None:
                terms = np.where(terms < log_floor, log_floor, terms)
            lyap += terms

    return lyap / tf
