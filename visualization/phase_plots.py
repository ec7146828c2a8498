"""Return map and attractor density visualization."""

import matplotlib.pyplot as plt
import numpy as np

from core.ricker import ricker_update


def plot_return_map(n, r, k, save_path=None):
    """
    n(t) against n(t+1), over the Ricker curve and the diagonal.

    Cycles show up as a finite set of points on the curve; chaos
    fills a segment of it.
    """
    n = np.asarray(n, dtype=float)
    fig, ax = plt.subplots(figsize=(7, 7))

    upper = max(np.nanmax(n) * 1.1, k * 1.5)
    grid = np.linspace(0.0, upper, 400)

    ax.plot(grid, ricker_update(grid, r, k), 'k-', linewidth=1, label='Ricker map')
    ax.plot(grid, grid, 'k--', linewidth=0.8, alpha=0.5, label='n(t+1) = n(t)')
    ax.plot(n[:-1], n[1:], 'o', markersize=3, alpha=0.6, label='Trajectory')
    ax.set_xlabel('n(t)')
    ax.set_ylabel('n(t+1)')
    ax.set_title(f'Return Map (r = {r:g})')
    ax.legend(loc='upper right')
    ax.grid(True, alpha=0.3)

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig, ax


def plot_density(points, density, save_path=None):
    """Plot invariant density of the attractor."""
    fig, ax = plt.subplots(figsize=(10, 5))

    ax.fill_between(points, density, alpha=0.4)
    ax.plot(points, density, 'b-', linewidth=1)
    ax.set_xlabel('Population')
    ax.set_ylabel('Density')
    ax.set_title('Invariant Density')
    ax.grid(True, alpha=0.3)

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig, ax
