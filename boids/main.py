"""
Main entry point for the boids simulation.

Run with:
    python -m boids.main                          # Interactive simulation
    python -m boids.main --headless               # Headless run with metrics
    python -m boids.main --headless --plot        # ... and plot the metrics
"""

import os


# Set dummy video driver for headless runs
def set_headless():
    """Enable headless mode."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def run_interactive(config):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Boids Simulation: Flocking on a Wrapping Plane")
    print("=" * 60)
    print("\nControls:")
    print("  ESC   - Quit")
    print("  SPACE - Pause/resume")
    print("  H     - Toggle heading lines")
    print("  A     - Add a boid at the mouse position")
    print("  R     - Rebuild the world with a new seed")
    print("\nStarting simulation...")

    sim = Simulation(config)
    sim.run()


def run_headless(config, plot: bool = False):
    """
    Run the simulation without a display and export its metrics.

    Args:
        config: SimulationConfig for the run
        plot: Whether to plot the metrics time series

    Returns:
        The run results dictionary
    """
    set_headless()

    from .simulation.benchmark import BenchmarkSimulation
    from .analysis.export import export_metrics_to_csv, export_run_report, calculate_summary_stats

    print("=" * 60)
    print("HEADLESS FLOCKING RUN")
    print("=" * 60)
    print(f"Plane: {config.screenWidth}x{config.screenHeight}")
    print(f"Boids: {config.boidCount}")
    print(f"Ticks: {config.ticks}")
    print(f"Seed: {config.seed}")
    print()

    sim = BenchmarkSimulation(config.to_dict())
    results = sim.run_benchmark(config.ticks)

    summary = calculate_summary_stats(results["metrics_over_time"])
    report = {
        "config": config.to_dict(),
        "ticks_per_second": results["ticks_per_second"],
        "elapsed_time_seconds": results["elapsed_time_seconds"],
        "final": results["final"],
        "summary": summary,
    }

    export_metrics_to_csv(results["metrics_over_time"], config.metricsOutputFile)
    export_run_report(report, config.reportOutputFile)

    print("\n" + "=" * 60)
    print("RUN SUMMARY")
    print("=" * 60)
    print(f"   Speed: {results['ticks_per_second']:.1f} ticks/s")
    print(f"   Final polarization: {results['final']['polarization']:.3f}")
    print(f"   Final cohesion: {results['final']['cohesion']:.1f}")
    print(f"   Mean speed: {summary.get('avg_speed_mean', 0):.3f} "
          f"± {summary.get('avg_speed_std', 0):.3f}")

    if plot:
        from .analysis.plotting import plot_flock_metrics

        print("\nGenerating metrics plot...")
        plot_flock_metrics(results["metrics_over_time"], config.plotOutputFile, show=False)

    return results


def main():
    """Main entry point."""
    import argparse

    from .core.config import SimulationConfig, DEFAULT_CONFIG, HEADLESS_CONFIG

    parser = argparse.ArgumentParser(description="Boids Flocking Simulation")
    parser.add_argument("--headless", action="store_true", help="Run without a display and export metrics")
    parser.add_argument("--ticks", type=int, default=None, help="Number of ticks for a headless run")
    parser.add_argument("--agents", type=int, default=None, help="Initial number of boids")
    parser.add_argument("--width", type=int, default=None, help="Plane width")
    parser.add_argument("--height", type=int, default=None, help="Plane height")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--plot", action="store_true", help="Plot metrics after a headless run")
    parser.add_argument("--output", type=str, default=None, help="Prefix for exported files")

    args = parser.parse_args()

    base = HEADLESS_CONFIG if args.headless else DEFAULT_CONFIG
    config = SimulationConfig.from_dict(base.to_dict())

    if args.ticks is not None:
        config.ticks = args.ticks
    if args.agents is not None:
        config.boidCount = args.agents
    if args.width is not None:
        config.screenWidth = args.width
    if args.height is not None:
        config.screenHeight = args.height
    if args.seed is not None:
        config.seed = args.seed
    if args.output:
        config.metricsOutputFile = f"{args.output}_metrics.csv"
        config.reportOutputFile = f"{args.output}_report.json"
        config.plotOutputFile = f"{args.output}_metrics.png"

    if args.headless:
        run_headless(config, plot=args.plot)
    else:
        run_interactive(config)


if __name__ == "__main__":
    main()
