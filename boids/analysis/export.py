"""
Export functions for saving headless run results to CSV and JSON.
"""

import csv
import json
from typing import Dict, List, Any


METRIC_FIELDS = ['tick', 'boid_count', 'polarization', 'cohesion', 'avg_speed', 'mean_neighbors']


def export_metrics_to_csv(timeseries: List[Dict], filename: str = "flock_metrics.csv") -> str:
    """
    Export a metrics time series to CSV format.

    Args:
        timeseries: Metric snapshots, one per sampled tick
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=METRIC_FIELDS)
        writer.writeheader()

        for entry in timeseries:
            writer.writerow({
                'tick': entry['tick'],
                'boid_count': entry['boid_count'],
                'polarization': f"{entry['polarization']:.4f}",
                'cohesion': f"{entry['cohesion']:.2f}",
                'avg_speed': f"{entry['avg_speed']:.4f}",
                'mean_neighbors': f"{entry['mean_neighbors']:.2f}",
            })

    print(f"\nCSV metrics saved to: {filename}")
    return filename


def export_run_report(results: Dict[str, Any], filename: str = "flock_report.json") -> str:
    """
    Export a full run report to JSON.

    Args:
        results: Run results dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    print(f"\nRun report saved to: {filename}")
    return filename


def calculate_summary_stats(timeseries: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean, standard deviation and final value of each metric.

    Args:
        timeseries: Metric snapshots from one run

    Returns:
        Dictionary keyed ``<metric>_mean``, ``<metric>_std`` and ``<metric>_final``
    """
    import math

    if not timeseries:
        return {}

    summary = {}

    for metric in ("polarization", "cohesion", "avg_speed", "mean_neighbors"):
        values = [entry[metric] for entry in timeseries]
        mean = sum(values) / len(values)
        summary[f"{metric}_mean"] = mean
        if len(values) > 1:
            variance = sum((x - mean) ** 2 for x in values) / (len(values) - 1)
            summary[f"{metric}_std"] = math.sqrt(variance)
        else:
            summary[f"{metric}_std"] = 0
        summary[f"{metric}_final"] = values[-1]

    return summary
