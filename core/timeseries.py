"""
Scalar time-series generator: one trajectory per parameter set.

Each value depends on the one before it, so a trajectory is built
strictly left to right. Parameter sets are handled one row at a time,
which keeps the parameters and their trajectory together in a single
table row:

    param_id | r | k | n0 | tf | trajectory
    ---------+---+---+----+----+-------------------
    0        |1.5|100| 50 | 20 | [50.0, 105.8, ...]

Rows may have different tf. For many parameter sets sharing one time
axis, core.vectorized is faster and gives the same numbers.
"""

import numpy as np
import pandas as pd
from typing import Dict, Iterable

from config.parameters import RickerParams
from core.ricker import ricker_update


def validate_length(tf, name: str = 'tf') -> int:
    """
    Check a trajectory length.

    Raises:
        ValueError: tf is not an integer or is below 1
    """
    if isinstance(tf, bool) or not isinstance(tf, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {tf!r}")
    if tf < 1:
        raise ValueError(f"{name} must be >= 1, got {tf}")
    return int(tf)


def coerce_length(tf, name: str = 'tf') -> int:
    """Like validate_length, but also accepts integral floats (pandas columns upcast to float)."""
    if isinstance(tf, (float, np.floating)) and float(tf).is_integer():
        tf = int(tf)
    return validate_length(tf, name)


def simulate(r: float, k: float, n0: float, tf: int) -> np.ndarray:
    """
    Iterate the Ricker map from n0.

    Args:
        r: Growth rate
        k: Carrying capacity
        n0: Initial population (position 1 of the trajectory)
        tf: Number of values to produce

    Returns:
        Array of length tf; tf = 1 gives [n0] with no update applied
    """
    tf = validate_length(tf)

    trajectory = np.empty(tf, dtype=np.float64)
    trajectory[0] = n0

    n = trajectory[0]
    with np.errstate(over='ignore', invalid='ignore'):
        for t in range(1, tf):
            n = ricker_update(n, r, k)
            trajectory[t] = n

    return trajectory


def simulate_frame(r: float, k: float, n0: float, tf: int) -> pd.DataFrame:
    """Trajectory paired with its 1-based time step."""
    trajectory = simulate(r, k, n0, tf)
    return pd.DataFrame({
        'time': np.arange(1, len(trajectory) + 1),
        'n': trajectory,
    })


def simulate_table(grid: pd.DataFrame) -> pd.DataFrame:
    """
    Simulate every row of a parameter grid.

    Args:
        grid: DataFrame with columns r, k, n0, tf (see config.parameters.parameter_grid)

    Returns:
        Copy of grid with a 'trajectory' column holding one array per row
    """
    missing = {'r', 'k', 'n0', 'tf'} - set(grid.columns)
    if missing:
        raise ValueError(f"Parameter grid is missing columns: {sorted(missing)}")

    table = grid.copy()
    if 'param_id' not in table.columns:
        table.insert(0, 'param_id', np.arange(len(table)))

    table['trajectory'] = [
        simulate(row.r, row.k, row.n0, coerce_length(row.tf))
        for row in table.itertuples(index=False)
    ]
    return table


def unnest_trajectories(table: pd.DataFrame) -> pd.DataFrame:
    """
    Long form of a simulated table: one row per (parameter set, time step).

    Returns:
        DataFrame with the parameter columns plus time (1-based) and n
    """
    params = table.drop(columns='trajectory')
    lengths = np.array([len(trajectory) for trajectory in table['trajectory']], dtype=int)

    long = params.loc[params.index.repeat(lengths)].reset_index(drop=True)
    if len(long) == 0:
        long['time'] = pd.Series(dtype=int)
        long['n'] = pd.Series(dtype=float)
        return long

    long['time'] = np.concatenate([np.arange(1, length + 1) for length in lengths])
    long['n'] = np.concatenate(table['trajectory'].to_list())
    return long


def simulate_collection(param_sets: Iterable[RickerParams]) -> Dict[int, np.ndarray]:
    """Trajectory collection keyed by the position of each parameter set."""
    return {
        i: simulate(p.r, p.k, p.n0, p.tf)
        for i, p in enumerate(param_sets)
    }
