"""Time series visualization."""

import matplotlib.pyplot as plt


def plot_timeseries(frame, save_path=None, label_by='r'):
    """
    Plot one line per parameter set from a long frame.

    Args:
        frame: DataFrame with columns param_id, time, n (plus parameter columns)
        label_by: Parameter column used in the legend
    """
    fig, ax = plt.subplots(figsize=(12, 5))

    if 'param_id' not in frame.columns:
        frame = frame.assign(param_id=0)

    for param_id, group in frame.groupby('param_id', sort=True):
        label = f'{label_by} = {group[label_by].iloc[0]:g}' if label_by in group else str(param_id)
        ax.plot(group['time'], group['n'], '-o', markersize=2, alpha=0.7, label=label)

    ax.set_xlabel('Generation')
    ax.set_ylabel('Population')
    ax.set_title('Ricker Dynamics')
    ax.legend(loc='upper right')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig, ax
