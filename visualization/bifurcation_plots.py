"""Bifurcation diagram and Lyapunov exponent plots."""

import matplotlib.pyplot as plt


def plot_bifurcation(frame, save_path=None):
    """
    Scatter of asymptotic populations against r.

    Args:
        frame: DataFrame with columns r, n (analysis.bifurcation.bifurcation_diagram)
    """
    fig, ax = plt.subplots(figsize=(12, 6))

    ax.plot(frame['r'], frame['n'], ',', alpha=0.5)
    ax.set_xlabel('Growth rate r')
    ax.set_ylabel('Population')
    ax.set_title('Bifurcation Diagram')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig, ax


def plot_lyapunov(frame, save_path=None):
    """Lyapunov exponent against r with the λ = 0 chaos boundary."""
    fig, ax = plt.subplots(figsize=(12, 4))

    ax.plot(frame['r'], frame['lyapunov'], '-', linewidth=1)
    ax.axhline(0.0, color='r', linestyle='--', alpha=0.5, label='λ = 0')
    ax.set_xlabel('Growth rate r')
    ax.set_ylabel('Lyapunov exponent λ')
    ax.set_title('Stability Indicator')
    ax.legend(loc='lower right')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig, ax
