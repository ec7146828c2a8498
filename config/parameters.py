"""
Parameter definitions for the Ricker population model.

The Ricker map describes density-dependent growth of a population
with non-overlapping generations:

    n(t+1) = n(t) × exp(r × (1 - n(t)/k))

Parameter groups:
- RickerParams: a single simulation run (r, k, n0, tf)
- SweepParams: growth-rate sweep for bifurcation diagrams
- LyapunovParams: Lyapunov exponent estimation
- NumericalParams: burn-in, ensembles, seeds

References:
- Ricker (1954) - Stock and recruitment
- May (1976) - Simple mathematical models with very complicated dynamics
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union
import numpy as np
import pandas as pd


@dataclass(frozen=True)
class RickerParams:
    """
    One parameter set of the Ricker model.

    Immutable: a trajectory is always recomputed from its parameters,
    never updated in place.
    """
    r: float = 1.5  # Intrinsic growth rate [1/generation]
    k: float = 100.0  # Carrying capacity [individuals]
    n0: float = 50.0  # Initial population [individuals]
    tf: int = 200  # Trajectory length [generations]

    def __post_init__(self):
        """Validate run parameters"""
        assert self.k > 0, "Carrying capacity must be positive"
        assert self.n0 >= 0, "Initial population must be non-negative"
        assert isinstance(self.tf, (int, np.integer)) and not isinstance(self.tf, bool), \
            "Trajectory length must be an integer"
        assert self.tf >= 1, "Trajectory length must be at least 1"

    @property
    def equilibrium(self) -> float:
        """Non-trivial fixed point n* = k"""
        return self.k

    @property
    def eigenvalue(self) -> float:
        """Slope of the map at n* = k; |1 - r| < 1 means stable"""
        return 1.0 - self.r


@dataclass
class SweepParams:
    """
    Growth-rate sweep for the bifurcation diagram.

    Period-doubling cascade of the Ricker map:
        r < 2       : stable equilibrium (monotone for r < 1, damped for 1 < r < 2)
        r ≈ 2.000   : period 2
        r ≈ 2.526   : period 4
        r ≈ 2.692   : onset of chaos
    """
    r_min: float = 1.5
    r_max: float = 3.6
    n_r: int = 400  # Number of r values
    k: float = 1.0
    n0: float = 0.5
    tf: int = 500  # Steps per trajectory
    n_tail: int = 40  # Trailing steps kept (asymptotic behaviour)

    def __post_init__(self):
        """Validate sweep parameters"""
        assert self.r_min < self.r_max, "r_min must be below r_max"
        assert self.n_r >= 2, "Sweep needs at least 2 points"
        assert 1 <= self.n_tail <= self.tf, "n_tail must be in [1, tf]"

    @property
    def r_values(self) -> np.ndarray:
        """Evenly spaced growth rates"""
        return np.linspace(self.r_min, self.r_max, self.n_r)


@dataclass
class LyapunovParams:
    """
    Lyapunov exponent estimation on the normalized map (k = 1).

    log_floor:
        None  → ln(0) = -inf propagates when f'(x) hits zero
        float → each log term is clamped below at this value
    """
    n0: float = 0.5
    tf: int = 1000
    log_floor: Optional[float] = None


@dataclass
class NumericalParams:
    """
    Simulation control parameters.

    The ensemble perturbs the initial population multiplicatively:
        n0_i = n0 × (1 + perturbation × ξ_i),  ξ_i ~ N(0, 1)
    """
    burn_in: int = 100  # Transient removal [generations]

    # Ensemble parameters
    n_ensemble: int = 20  # Number of realizations
    base_seed: int = 42  # Random seed for reproducibility
    perturbation: float = 1e-6  # Relative spread of initial conditions


@dataclass
class ModelParams:
    """
    Complete model parameter set.

    Aggregates all parameter groups with validation.
    """
    ricker: RickerParams = field(default_factory=RickerParams)
    sweep: SweepParams = field(default_factory=SweepParams)
    lyapunov: LyapunovParams = field(default_factory=LyapunovParams)
    numerical: NumericalParams = field(default_factory=NumericalParams)

    def validate(self) -> None:
        """
        Run all validation checks.

        Ensures:
        1. Burn-in leaves something to analyse
        2. Lyapunov walk is long enough to average
        3. Ensemble is non-empty with a positive spread
        """
        print("Validating model parameters...")

        # 1. Burn-in vs trajectory length
        assert 0 <= self.numerical.burn_in < self.ricker.tf, \
            f"Burn-in ({self.numerical.burn_in}) must be shorter than tf ({self.ricker.tf})"
        print(f"  ✓ Analysis window: {self.ricker.tf - self.numerical.burn_in} of {self.ricker.tf} generations")

        # 2. Lyapunov averaging length
        assert self.lyapunov.tf >= 1, "Lyapunov walk needs at least one step"
        print(f"  ✓ Lyapunov walk: {self.lyapunov.tf} steps from x0={self.lyapunov.n0}")

        # 3. Ensemble
        assert self.numerical.n_ensemble >= 1, "Ensemble needs at least one member"
        assert self.numerical.perturbation > 0, "Perturbation must be positive"
        print(f"  ✓ Ensemble: {self.numerical.n_ensemble} members, spread {self.numerical.perturbation:.1e}")

        print("✓ All parameter validations passed\n")

    def summary(self) -> str:
        """
        Generate parameter summary string.

        Returns:
            Formatted summary of key parameters
        """
        lines = [
            "=" * 60,
            "RICKER MODEL PARAMETERS",
            "=" * 60,
            "",
            "RUN:",
            f"  Growth rate r: {self.ricker.r:.3f}",
            f"  Carrying capacity k: {self.ricker.k:,.1f}",
            f"  Initial population n0: {self.ricker.n0:,.1f}",
            f"  Generations tf: {self.ricker.tf}",
            f"  Slope at equilibrium: {self.ricker.eigenvalue:+.3f}",
            "",
            "SWEEP:",
            f"  r range: [{self.sweep.r_min:.2f}, {self.sweep.r_max:.2f}] ({self.sweep.n_r} points)",
            f"  Steps: {self.sweep.tf} (last {self.sweep.n_tail} kept)",
            "",
            "LYAPUNOV:",
            f"  x0: {self.lyapunov.n0}",
            f"  Steps: {self.lyapunov.tf}",
            f"  Log floor: {self.lyapunov.log_floor}",
            "",
            "NUMERICAL:",
            f"  Burn-in: {self.numerical.burn_in} generations",
            f"  Ensemble size: {self.numerical.n_ensemble}",
            f"  Seed: {self.numerical.base_seed}",
            "=" * 60,
        ]
        return "\n".join(lines)


def parameter_grid(r_values: Union[float, Sequence[float]],
                   k_values: Union[float, Sequence[float]] = 100.0,
                   n0: float = 50.0,
                   tf: int = 100) -> pd.DataFrame:
    """
    Enumerate parameter sets over r × k.

    One row per parameter set, so the simulated trajectories can be
    stored next to the parameters that produced them.

    Returns:
        DataFrame with columns param_id, r, k, n0, tf
    """
    if (isinstance(tf, bool) or not isinstance(tf, (int, float, np.integer, np.floating))
            or not float(tf).is_integer() or tf < 1):
        raise ValueError(f"tf must be an integer >= 1, got {tf!r}")

    r_values = np.atleast_1d(np.asarray(r_values, dtype=float))
    k_values = np.atleast_1d(np.asarray(k_values, dtype=float))

    rr, kk = np.meshgrid(r_values, k_values, indexing='ij')
    n_rows = rr.size

    grid = pd.DataFrame({
        'param_id': np.arange(n_rows),
        'r': rr.ravel(),
        'k': kk.ravel(),
        'n0': np.full(n_rows, float(n0)),
        'tf': np.full(n_rows, int(tf), dtype=int),
    })
    return grid


# Convenience function for quick parameter loading
def load_default_params() -> ModelParams:
    """
    Load default parameter set with validation.

    Returns:
        ModelParams: Validated parameter set
    """
    params = ModelParams()
    params.validate()
    return params


if __name__ == "__main__":
    print("Testing parameter module...\n")

    params = load_default_params()
    print(params.summary())

    print("\nParameter grid example:")
    print(parameter_grid([1.5, 2.5], [50.0, 100.0], n0=10.0, tf=20))

    print("\nTesting validation failure...")
    try:
        RickerParams(tf=0)
    except AssertionError as e:
        print(f"  ✓ Caught invalid parameter: {e}")
