#!/usr/bin/env python3
"""Run bifurcation and Lyapunov analysis (r sweep)."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.parameters import ModelParams
from analysis.bifurcation import bifurcation_diagram, lyapunov_sweep
from visualization.bifurcation_plots import plot_bifurcation, plot_lyapunov
import numpy as np

params = ModelParams()
sweep = params.sweep
r_values = sweep.r_values

print(f"Running bifurcation sweep: r in [{sweep.r_min}, {sweep.r_max}] ({sweep.n_r} points)...")
diagram = bifurcation_diagram(r_values, sweep.k, sweep.n0, sweep.tf, sweep.n_tail)

print(f"Estimating Lyapunov exponents ({params.lyapunov.tf} steps each)...")
stability = lyapunov_sweep(r_values, params.lyapunov.n0, params.lyapunov.tf,
                           log_floor=params.lyapunov.log_floor)

finite = stability[np.isfinite(stability['lyapunov'])]
chaotic = finite[finite['lyapunov'] > 0]
print(f"  {len(chaotic)}/{len(stability)} growth rates chaotic (λ > 0)")
if len(chaotic):
    print(f"  First chaotic r: {chaotic['r'].iloc[0]:.3f}")
if len(finite) < len(stability):
    print(f"  {len(stability) - len(finite)} non-finite exponents")

output_dir = Path(__file__).parent.parent / 'output'
output_dir.mkdir(exist_ok=True)

diagram.to_csv(output_dir / 'bifurcation.csv', index=False)
stability.to_csv(output_dir / 'lyapunov.csv', index=False)

plot_bifurcation(diagram, str(output_dir / 'bifurcation.png'))
plot_lyapunov(stability, str(output_dir / 'lyapunov.png'))
print(f"\nSaved: {output_dir}")
