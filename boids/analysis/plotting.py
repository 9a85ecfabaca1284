"""
Plotting functions for visualizing headless run results.
"""

from typing import Dict, List

import matplotlib.pyplot as plt


def plot_flock_metrics(timeseries: List[Dict], output_file: str = "flock_metrics.png",
                       show: bool = True) -> str:
    """
    Plot polarization and cohesion over time for one run.

    Args:
        timeseries: Metric snapshots from a headless run
        output_file: Output filename for the plot
        show: Whether to open the plot window after saving

    Returns:
        Path to saved plot file
    """
    ticks = [d["tick"] for d in timeseries]
    polarization = [d["polarization"] for d in timeseries]
    cohesion = [d["cohesion"] for d in timeseries]

    fig, (ax_pol, ax_coh) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    ax_pol.plot(ticks, polarization, linewidth=2, color='#4ECDC4')
    ax_pol.set_ylabel('Polarization', fontsize=12, fontweight='bold')
    ax_pol.set_ylim(0, 1.05)
    ax_pol.grid(True, alpha=0.3, linestyle='--')

    ax_coh.plot(ticks, cohesion, linewidth=2, color='#FF6B6B')
    ax_coh.set_xlabel('Tick', fontsize=12, fontweight='bold')
    ax_coh.set_ylabel('Cohesion (avg dist to centroid)', fontsize=12, fontweight='bold')
    ax_coh.grid(True, alpha=0.3, linestyle='--')

    if polarization:
        ax_pol.annotate(f'{polarization[-1]:.2f}', xy=(ticks[-1], polarization[-1]),
                        xytext=(5, 0), textcoords='offset points',
                        fontsize=9, color='#4ECDC4')
        ax_coh.annotate(f'{cohesion[-1]:.0f}', xy=(ticks[-1], cohesion[-1]),
                        xytext=(5, 0), textcoords='offset points',
                        fontsize=9, color='#FF6B6B')

    fig.suptitle('Flock Formation Over Time\n'
                 '(Higher polarization = more aligned headings)',
                 fontsize=14, fontweight='bold')
    fig.tight_layout()

    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file
