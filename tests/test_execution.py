"""In-process execution of single configurations and sweeps."""

import matplotlib

matplotlib.use("Agg")

import pytest

from chaosviz.config import LogisticConfig, LorenzConfig, MandelbrotConfig
from chaosviz.execution import run_single_experiment, run_sweep
from chaosviz.report import Bifurcation, LorenzTrajectory, MandelbrotGrid


@pytest.fixture(autouse=True)
def _skip_mlflow(monkeypatch):
    monkeypatch.setenv("SKIP_MLFLOW", "1")


@pytest.mark.parametrize(
    "config, expected",
    [
        (LorenzConfig(t_final=1.0), LorenzTrajectory),
        (MandelbrotConfig(resolution=5, max_iter=20), MandelbrotGrid),
        (LogisticConfig(n=10, iterations=50, last=5), Bifurcation),
    ],
    ids=["lorenz", "mandelbrot", "logistic"],
)
def test_single_experiment_returns_result(config, expected, tmp_path):
    result = run_single_experiment(config, "unit", tmp_path)
    assert isinstance(result, expected)
    assert list((tmp_path / config.kind).glob(f"{config.run_name}_*.pdf"))


def test_sweep_reports_failures(monkeypatch, capsys):
    from chaosviz import execution

    def _boom(config):
        raise RuntimeError("kernel exploded")

    monkeypatch.setitem(execution.PIPELINES, "logistic", (_boom, {}))
    configs = [MandelbrotConfig(resolution=2, max_iter=5), LogisticConfig(n=5, iterations=10, last=2)]

    rc = run_sweep(None, configs=configs, descriptor="unit")

    captured = capsys.readouterr()
    assert rc == 1
    assert "Successful: 1" in captured.out
    assert "kernel exploded" in captured.err


def test_sweep_requires_source():
    with pytest.raises(ValueError):
        run_sweep(None)
