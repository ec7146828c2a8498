"""
Vectorized time-series generator: many parameter sets in lockstep.

All trajectories in one call share the same time axis. At step t the
whole vector of current populations is updated element-wise:

    N[t, :] = N[t-1, :] × exp(r × (1 - N[t-1, :]/k))

There is no interaction between columns, so every trajectory equals
the one core.timeseries.simulate produces for the same parameters.

The batch is rectangular: one tf per call. Grids with mixed tf are
split into one call per tf (simulate_grouped).

Time steps are not returned; batch_to_frame re-attaches the implicit
1..tf index afterwards.
"""

import numpy as np
import pandas as pd
from typing import Dict

from core.ricker import ricker_update
from core.timeseries import coerce_length, validate_length


def _broadcast(values, m: int, name: str) -> np.ndarray:
    """Scalar → length-m vector; vectors must already have length m."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 0:
        return np.full(m, float(arr))
    if arr.ndim != 1 or arr.shape[0] != m:
        raise ValueError(f"{name} has shape {arr.shape}, expected a scalar or ({m},)")
    return arr


def _common_length(tf, m: int) -> int:
    """Single tf for the whole batch."""
    if np.ndim(tf) == 0:
        return validate_length(tf)

    lengths = np.asarray(tf)
    if lengths.ndim != 1 or lengths.shape[0] != m:
        raise ValueError(f"tf has shape {lengths.shape}, expected a scalar or ({m},)")
    unique = np.unique(lengths)
    if len(unique) != 1:
        raise ValueError(
            f"Batch must share one trajectory length, got tf values {unique.tolist()}; "
            "simulate each length separately"
        )
    return validate_length(unique[0])


def simulate_batch(r, k=100.0, n0=50.0, tf=100) -> np.ndarray:
    """
    Iterate the Ricker map for m parameter sets at once.

    Args:
        r: Growth rates, 1-D sequence of length m
        k: Carrying capacity, scalar or length m
        n0: Initial population, scalar or length m
        tf: Trajectory length, integer or length-m sequence of identical values

    Returns:
        Array of shape (m, tf); row i is the trajectory of parameter set i

    Raises:
        ValueError: shapes do not line up or tf is not shared by the batch
    """
    r = np.asarray(r, dtype=np.float64)
    if r.ndim != 1 or r.shape[0] == 0:
        raise ValueError(f"r must be a non-empty 1-D sequence, got shape {r.shape}")
    m = r.shape[0]

    k = _broadcast(k, m, 'k')
    n0 = _broadcast(n0, m, 'n0')
    tf = _common_length(tf, m)

    # Row t holds generation t+1 for all m trajectories
    buffer = np.empty((tf, m), dtype=np.float64)
    buffer[0] = n0

    with np.errstate(over='ignore', invalid='ignore'):
        for t in range(1, tf):
            buffer[t] = ricker_update(buffer[t - 1], r, k)

    return buffer.T


def batch_to_frame(trajectories: np.ndarray, r, k=100.0, n0=None) -> pd.DataFrame:
    """
    Long form of a batch result with the time step re-attached.

    Args:
        trajectories: (m, tf) array from simulate_batch
        r, k: Parameters of each row (scalar or length m)
        n0: Initial populations (defaults to the first column)

    Returns:
        DataFrame with columns param_id, r, k, n0, time, n
    """
    trajectories = np.asarray(trajectories)
    if trajectories.ndim != 2:
        raise ValueError(f"Expected a 2-D (m, tf) array, got shape {trajectories.shape}")
    m, tf = trajectories.shape

    r = _broadcast(r, m, 'r')
    k = _broadcast(k, m, 'k')
    n0 = trajectories[:, 0] if n0 is None else _broadcast(n0, m, 'n0')

    return pd.DataFrame({
        'param_id': np.repeat(np.arange(m), tf),
        'r': np.repeat(r, tf),
        'k': np.repeat(k, tf),
        'n0': np.repeat(n0, tf),
        'time': np.tile(np.arange(1, tf + 1), m),
        'n': trajectories.ravel(),
    })


def simulate_grouped(grid: pd.DataFrame) -> Dict[int, np.ndarray]:
    """
    Simulate a grid with mixed tf: one batch per tf group.

    Returns:
        Trajectory collection keyed by param_id (row position if absent)
    """
    grid = grid.reset_index(drop=True)
    ids = grid['param_id'].to_numpy() if 'param_id' in grid.columns else np.arange(len(grid))

    collection = {}
    for tf, group in grid.groupby('tf', sort=True):
        batch = simulate_batch(group['r'], group['k'], group['n0'], coerce_length(tf))
        for row_id, trajectory in zip(ids[group.index], batch):
            collection[int(row_id)] = trajectory

    return dict(sorted(collection.items()))
