#!/usr/bin/env python3
"""
Run Ricker population dynamics simulations for the standard regimes.

Simulates every regime in config.scenarios with both the row-wise
(scalar) and the vectorized generator, checks that they agree, and
writes the long-form table and a time series plot.

Usage:
    python scripts/run_simulation.py [REGIME ...]
"""

import sys
from pathlib import Path
import numpy as np
import pandas as pd

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.parameters import ModelParams
from config.scenarios import REGIMES, get_regime
from core.timeseries import simulate_table, unnest_trajectories
from core.vectorized import simulate_batch
from analysis.statistics import trajectory_statistics, detect_period
from visualization.timeseries import plot_timeseries


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    print("=" * 80)
    print("RICKER POPULATION DYNAMICS MODEL")
    print("=" * 80)

    # 1. Load parameters
    print("\n1. Loading parameters...")
    params = ModelParams()
    params.validate()

    # 2. Select regimes
    names = argv or list(REGIMES)
    try:
        regimes = [get_regime(name) for name in names]
    except KeyError as e:
        print(f"ERROR: unknown regime {e}; choose from {', '.join(REGIMES)}")
        return 1

    grid = pd.DataFrame({
        'param_id': np.arange(len(regimes)),
        'regime': [regime.name for regime in regimes],
        'r': [regime.r for regime in regimes],
        'k': [regime.k for regime in regimes],
        'n0': [regime.n0 for regime in regimes],
        'tf': [regime.tf for regime in regimes],
    })
    print(f"\n2. Simulating {len(grid)} regimes...")

    # 3. Row-wise simulation
    table = simulate_table(grid)
    long = unnest_trajectories(table)

    # 4. Vectorized cross-check (regimes with a common tf)
    print("\n3. Cross-checking vectorized generator...")
    for tf, group in grid.groupby('tf'):
        batch = simulate_batch(group['r'], group['k'], group['n0'], int(tf))
        rowwise = np.vstack(table.loc[group.index, 'trajectory'].to_list())
        max_diff = np.max(np.abs(batch - rowwise))
        print(f"  tf={tf}: {len(group)} trajectories, max |Δ| = {max_diff:.2e}")

    # 5. Display results
    print("\n4. Results:")
    print("=" * 80)
    for row in table.itertuples(index=False):
        stats = trajectory_statistics(row.trajectory, burn_in=min(params.numerical.burn_in, row.tf - 1))
        period = detect_period(row.trajectory)
        label = 'chaotic' if period == -1 else f'period {period}'
        print(f"\n{row.regime} (r={row.r}):")
        print(f"  Mean: {stats['mean']:.1f} ± {stats['std']:.1f}")
        print(f"  Range: [{stats['min']:.1f}, {stats['max']:.1f}]")
        print(f"  Detected: {label}")

    # 6. Export
    output_dir = Path(__file__).parent.parent / 'output'
    output_dir.mkdir(exist_ok=True)

    csv_path = output_dir / 'timeseries.csv'
    long.to_csv(csv_path, index=False)
    print(f"\n  Saved: {csv_path}")

    png_path = output_dir / 'timeseries.png'
    plot_timeseries(long, str(png_path))
    print(f"  Saved: {png_path}")

    print("\n" + "=" * 80)
    print("✓ Simulation complete!")
    print("=" * 80)

    return 0


if __name__ == "__main__":
    sys.exit(main())
