"""
Ricker map: one-step population update.

    n(t+1) = n(t) × exp(r × (1 - n(t)/k))

Works element-wise on numpy arrays, so the same expression drives the
scalar and the vectorized generators.

Normalized form (k = 1), used by the Lyapunov estimator:

    f(r, x)  = x × exp(r × (1 - x))
    f'(r, x) = exp(r × (1 - x)) × (1 - r × x)
"""

import numpy as np


def ricker_update(n, r, k):
    """
    Next population value.

    No special cases: n = 0 stays 0, negative n follows the formula,
    and exp overflow gives inf.

    Args:
        n: Current population (scalar or array)
        r: Growth rate
        k: Carrying capacity

    Returns:
        Population at the next generation
    """
    return n * np.exp(r * (1.0 - n / k))


def ricker_map(x, r):
    """Normalized Ricker map f(r, x)."""
    return x * np.exp(r * (1.0 - x))


def ricker_derivative(x, r):
    """Analytic derivative f'(r, x) of the normalized map."""
    return np.exp(r * (1.0 - x)) * (1.0 - r * x)
