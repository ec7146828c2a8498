#!/usr/bin/env python3
"""Run initial-condition ensembles across all regimes."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.parameters import ModelParams
from config.scenarios import REGIMES
from core.integrator import RickerModel
from analysis.statistics import confidence_intervals
import matplotlib.pyplot as plt

params = ModelParams()
params.numerical.n_ensemble = 10  # Quick test
model = RickerModel(params)

results = {}
for name, regime in REGIMES.items():
    print(f"\nRunning {regime.name}...")
    ensemble = model.ensemble(regime.r)
    results[name] = ensemble

    stats = ensemble['ensemble_stats']
    lower, upper = confidence_intervals(ensemble['final_values'])
    print(f"  Final population: {stats['ensemble_mean']:.1f} ± {stats['ensemble_std']:.1f}")
    print(f"  95% CI: [{lower:.1f}, {upper:.1f}]")
    print(f"  Spread grew from {ensemble['spread'][0]:.1e} to {ensemble['spread'][-1]:.1e}")

# Plot spread of nearby initial conditions over time
fig, ax = plt.subplots(figsize=(10, 6))
for name, ensemble in results.items():
    ax.semilogy(ensemble['spread'], label=f"{REGIMES[name].name} (r={REGIMES[name].r})")
ax.set_xlabel('Generation')
ax.set_ylabel('Ensemble spread (max - min)')
ax.set_title('Sensitivity to Initial Conditions')
ax.legend()
ax.grid(True, alpha=0.3)
plt.tight_layout()

output_dir = Path(__file__).parent.parent / 'output'
output_dir.mkdir(exist_ok=True)
output_path = output_dir / 'ensemble_spread.png'
plt.savefig(output_path, dpi=150)
print(f"\nSaved: {output_path}")
