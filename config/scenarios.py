"""
Pre-defined dynamical regimes of the Ricker map.

Provides easy access to representative growth rates along the
period-doubling route to chaos. Additional regimes can be loaded
from a CSV file with columns name, r (and optionally k, n0, tf).
"""

from dataclasses import dataclass
from typing import Dict, Union
from pathlib import Path


@dataclass
class Regime:
    """Dynamical regime definition"""
    name: str
    r: float
    period: int  # Expected asymptotic period (-1 = chaotic)
    k: float = 100.0
    n0: float = 50.0
    tf: int = 100


REGIMES: Dict[str, Regime] = {
    'STABLE': Regime('Stable equilibrium', r=0.8, period=1),
    'DAMPED': Regime('Damped oscillations', r=1.5, period=1),
    'PERIOD2': Regime('Two-point cycle', r=2.3, period=2),
    'PERIOD4': Regime('Four-point cycle', r=2.6, period=4),
    'CHAOTIC': Regime('Chaos', r=3.0, period=-1),
}


def get_regime(name: str) -> Regime:
    """Get regime by key (case-insensitive)."""
    return REGIMES[name.upper()]


def load_regimes_csv(path: Union[str, Path]) -> Dict[str, Regime]:
    """Load user-defined regimes from a CSV file."""
    import pandas as pd

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Regime table not found at {path}")

    df = pd.read_csv(path)
    df = df.dropna(subset=['r'])

    defaults = Regime('', r=0.0, period=-1)  # Default k, n0, tf
    regimes = {}
    for _, row in df.iterrows():
        key = str(row['name']).upper()
        regimes[key] = Regime(
            name=str(row['name']),
            r=float(row['r']),
            period=int(row['period']) if 'period' in row and pd.notna(row['period']) else -1,
            k=float(row['k']) if 'k' in row and pd.notna(row['k']) else defaults.k,
            n0=float(row['n0']) if 'n0' in row and pd.notna(row['n0']) else defaults.n0,
            tf=int(row['tf']) if 'tf' in row and pd.notna(row['tf']) else defaults.tf,
        )

    return regimes
