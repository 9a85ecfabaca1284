"""
Analysis module for measuring, plotting and exporting flock behavior.
"""

from .metrics import polarization, cohesion, mean_speed, mean_neighbors, snapshot
from .export import export_metrics_to_csv, export_run_report, calculate_summary_stats

__all__ = [
    'polarization',
    'cohesion',
    'mean_speed',
    'mean_neighbors',
    'snapshot',
    'export_metrics_to_csv',
    'export_run_report',
    'calculate_summary_stats',
]
