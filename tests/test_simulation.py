import json
import os
import sys

import pytest

from boids.core.config import SimulationConfig, DEFAULT_CONFIG, HEADLESS_CONFIG
from boids.simulation.benchmark import BenchmarkSimulation
from boids.main import main, run_headless


def _small_config(**overrides):
    config = SimulationConfig(screenWidth=300, screenHeight=200, boidCount=20,
                              seed=5, ticks=20, metricsInterval=5)
    for key, value in overrides.items():
        setattr(config, key, value)
    return config


def test_config_round_trip():
    """to_dict/from_dict preserve every field."""
    config = _small_config(showHeadings=False)
    assert SimulationConfig.from_dict(config.to_dict()) == config


def test_config_from_dict_ignores_unknown_keys():
    """Unknown keys in a loaded dict are dropped."""
    config = SimulationConfig.from_dict({"boidCount": 7, "flockName": "a"})
    assert config.boidCount == 7
    assert not hasattr(config, "flockName")


def test_default_configs():
    """The headless preset is seeded; the interactive one is not."""
    assert DEFAULT_CONFIG.seed is None
    assert HEADLESS_CONFIG.seed is not None


def test_benchmark_samples_metrics():
    """Metrics are sampled at tick 0 and every interval after."""
    sim = BenchmarkSimulation(_small_config().to_dict(), verbose=False)

    results = sim.run_benchmark(20)

    assert [m["tick"] for m in results["metrics_over_time"]] == [0, 5, 10, 15, 20]
    assert results["ticks"] == 20
    assert results["boid_count"] == 20
    assert results["final"]["tick"] == 20
    assert results["ticks_per_second"] >= 0


def test_benchmark_is_reproducible():
    """The same seed gives the same metrics time series."""
    a = BenchmarkSimulation(_small_config().to_dict(), verbose=False).run_benchmark(30)
    b = BenchmarkSimulation(_small_config().to_dict(), verbose=False).run_benchmark(30)

    assert a["metrics_over_time"] == b["metrics_over_time"]


def test_run_headless_writes_outputs(tmp_path, headless_env):
    """A headless run exports the metrics CSV and the JSON report."""
    config = _small_config(
        metricsOutputFile=str(tmp_path / "m.csv"),
        reportOutputFile=str(tmp_path / "r.json"),
    )

    results = run_headless(config)

    assert os.environ["SDL_VIDEODRIVER"] == "dummy"
    assert os.path.exists(config.metricsOutputFile)
    with open(config.reportOutputFile) as f:
        report = json.load(f)
    assert report["config"]["boidCount"] == 20
    assert report["final"]["tick"] == results["final"]["tick"] == 20
    assert "polarization_mean" in report["summary"]
    assert "mean_neighbors" in report["final"]


def test_run_headless_plot_does_not_block(tmp_path, headless_env):
    """Plotting from a headless run saves the figure without showing it."""
    import matplotlib
    matplotlib.use("Agg")
    from boids.analysis import plotting

    calls = []

    def fake_plot(timeseries, output_file, **kwargs):
        calls.append((output_file, kwargs))
        return output_file

    headless_env.setattr(plotting, "plot_flock_metrics", fake_plot)
    config = _small_config(
        metricsOutputFile=str(tmp_path / "m.csv"),
        reportOutputFile=str(tmp_path / "r.json"),
        plotOutputFile=str(tmp_path / "p.png"),
    )

    run_headless(config, plot=True)

    assert calls == [(config.plotOutputFile, {"show": False})]


def test_main_headless_applies_cli_overrides(tmp_path, headless_env):
    """CLI flags land in the run config and the shared preset is left alone."""
    preset_before = HEADLESS_CONFIG.to_dict()
    prefix = str(tmp_path / "run")
    headless_env.setattr(sys, "argv", [
        "boids", "--headless", "--ticks", "10", "--agents", "4",
        "--width", "120", "--height", "80", "--seed", "2", "--output", prefix,
    ])

    main()

    assert os.path.exists(f"{prefix}_metrics.csv")
    with open(f"{prefix}_report.json") as f:
        report = json.load(f)

    assert report["config"]["ticks"] == 10
    assert report["config"]["boidCount"] == 4
    assert report["config"]["screenWidth"] == 120
    assert report["config"]["screenHeight"] == 80
    assert report["config"]["seed"] == 2
    assert report["config"]["metricsOutputFile"] == f"{prefix}_metrics.csv"
    assert report["config"]["reportOutputFile"] == f"{prefix}_report.json"
    assert report["config"]["plotOutputFile"] == f"{prefix}_metrics.png"
    assert report["final"]["tick"] == 10
    assert report["final"]["boid_count"] == 4
    assert not os.path.exists(f"{prefix}_metrics.png")
    assert HEADLESS_CONFIG.to_dict() == preset_before


def test_main_headless_uses_preset_defaults(tmp_path, headless_env):
    """Without overrides a headless run takes the seeded preset's settings."""
    prefix = str(tmp_path / "defaults")
    headless_env.setattr(sys, "argv", ["boids", "--headless", "--ticks", "5", "--output", prefix])

    main()

    with open(f"{prefix}_report.json") as f:
        report = json.load(f)
    assert report["config"]["seed"] == HEADLESS_CONFIG.seed
    assert report["config"]["boidCount"] == HEADLESS_CONFIG.boidCount
    assert report["config"]["screenWidth"] == HEADLESS_CONFIG.screenWidth


def test_invalid_config_propagates():
    """A bad plane size surfaces from the driver as InvalidConfiguration."""
    from boids.core.config import InvalidConfiguration

    with pytest.raises(InvalidConfiguration):
        BenchmarkSimulation(_small_config(screenWidth=0).to_dict(), verbose=False)
