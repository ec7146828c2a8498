"""Invariant density and quasi-potential of 1-D attractors."""

import numpy as np
from scipy.stats import gaussian_kde


def invariant_density(n, points=None, n_points=200):
    """
    Kernel density estimate of the values visited by a trajectory.

    For a chaotic r this approximates the invariant measure of the
    attractor; for a cycle it concentrates on the cycle points.

    Args:
        n: Post-transient population values
        points: Evaluation grid (defaults to n_points over [min, max]
                padded by 3 KDE bandwidths)

    Returns:
        points, density
    """
    n = np.asarray(n, dtype=float)
    n = n[np.isfinite(n)]
    if n.size == 0:
        raise ValueError("No finite values to estimate a density from")

    # KDE needs spread; collapse to a point mass on the nearest grid node
    if np.ptp(n) <= 1e-12 * max(1.0, np.max(np.abs(n))):
        if points is None:
            points = np.linspace(n[0] - 0.5, n[0] + 0.5, n_points)
        points = np.asarray(points, dtype=float)
        density = np.zeros_like(points)
        idx = np.argmin(np.abs(points - n[0]))
        width = np.diff(points).mean() if len(points) > 1 else 1.0
        density[idx] = 1.0 / width
        return points, density

    kde = gaussian_kde(n)

    if points is None:
        # Pad by 3 bandwidths so the tails are inside the grid
        pad = 3.0 * np.sqrt(kde.covariance[0, 0])
        points = np.linspace(n.min() - pad, n.max() + pad, n_points)
    points = np.asarray(points, dtype=float)

    return points, kde(points)


def quasi_potential(n, bins=50):
    """
    Compute quasi-potential V(n) = -log(P(n)).

    Returns:
        edges, V (normalized so min(V) = 0)
    """
    n = np.asarray(n, dtype=float)
    n = n[np.isfinite(n)]

    H, edges = np.histogram(n, bins=bins)

    # Convert to probability
    P = H / H.sum()
    P[P == 0] = 1e-10  # Avoid log(0)

    V = -np.log(P)
    V = V - V.min()

    return edges, V
