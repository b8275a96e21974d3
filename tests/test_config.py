"""Config dataclasses and YAML sweep loading."""

from pathlib import Path

import pytest

from chaosviz.config import (
    LogisticConfig,
    LorenzConfig,
    MandelbrotConfig,
    build_config,
    default_run_config,
    get_config_by_index,
    load_named_sweep_configs,
    load_sweep_configs,
)

SWEEPS = Path(__file__).resolve().parents[1] / "configs" / "sweeps.yaml"

SWEEP_YAML = """
defaults:
  lorenz:
    dt: 0.02
  mandelbrot:
    max_iter: 64
experiments:
  - name: small
    kind: lorenz
    defaults:
      t_final: 5
      initial_state: [0, 1, 20]
    sweep:
      rho: [10, 28]
  - name: small
    kind: mandelbrot
    sweep:
      resolution: [8, 16]
      max_iter: [32, 64]
  - name: other
    kind: logistic
"""


@pytest.fixture
def sweep_file(tmp_path):
    path = tmp_path / "sweep.yaml"
    path.write_text(SWEEP_YAML)
    return path


def test_defaults_match_classic_parameters():
    lorenz = default_run_config("lorenz")
    assert (lorenz.sigma, lorenz.rho) == (10.0, 28.0)
    assert lorenz.beta == pytest.approx(8.0 / 3.0)
    assert lorenz.initial_state == (1.0, 1.0, 1.0)
    assert default_run_config("mandelbrot").max_iter == 1000
    logistic = default_run_config("logistic")
    assert (logistic.r_min, logistic.r_max) == (2.5, 4.0)


def test_default_overrides_are_coerced():
    config = default_run_config("mandelbrot", resolution="12")
    assert config.resolution == 12
    assert config.side == 25
    lorenz = default_run_config("lorenz", initial_state=[0, 1, 20])
    assert lorenz.initial_state == (0.0, 1.0, 20.0)


def test_sweep_expands_product(sweep_file):
    configs = load_sweep_configs(sweep_file)
    lorenz = [c for c in configs if isinstance(c, LorenzConfig)]
    mandelbrot = [c for c in configs if isinstance(c, MandelbrotConfig)]
    logistic = [c for c in configs if isinstance(c, LogisticConfig)]

    assert [c.rho for c in lorenz] == [10.0, 28.0]
    assert all(c.dt == 0.02 and c.t_final == 5.0 for c in lorenz)
    assert {(c.resolution, c.max_iter) for c in mandelbrot} == {(8, 32), (8, 64), (16, 32), (16, 64)}
    assert len(logistic) == 1


def test_named_suites_group_kinds(sweep_file):
    suites = dict(load_named_sweep_configs(sweep_file))
    assert set(suites) == {"small", "other"}
    assert len(suites["small"]) == 6
    assert {c.kind for c in suites["small"]} == {"lorenz", "mandelbrot"}

    only = load_named_sweep_configs(sweep_file, "other")
    assert [name for name, _ in only] == ["other"]


def test_missing_suite_raises(sweep_file):
    with pytest.raises(ValueError, match="not found"):
        load_named_sweep_configs(sweep_file, "nope")


def test_config_by_index(sweep_file):
    assert get_config_by_index(sweep_file, 0).rho == 10.0
    with pytest.raises(ValueError, match="out of range"):
        get_config_by_index(sweep_file, 7)


@pytest.mark.parametrize(
    "kind, data",
    [
        ("lorenz", {"dt": 0}),
        ("lorenz", {"initial_state": [1, 2]}),
        ("lorenz", {"gamma": 1.0}),
        ("mandelbrot", {"resolution": 0}),
        ("logistic", {"last": 0}),
        ("logistic", {"last": 10, "iterations": 5}),
        ("logistic", {"r_min": 4.0, "r_max": 2.5}),
        ("henon", {}),
        ("mandelbrot", {"resolution": 1.5}),
        ("mandelbrot", {"max_iter": "ten"}),
        ("lorenz", {"initial_state": 5}),
        ("lorenz", {"initial_state": ["a", 1, 2]}),
    ],
    ids=[
        "dt", "state-len", "unknown-field", "resolution", "last-zero", "last-too-big", "r-range",
        "unknown-kind", "fractional-int", "non-numeric-int", "scalar-state", "non-numeric-state",
    ],
)
def test_invalid_configs_rejected(kind, data):
    with pytest.raises(ValueError):
        build_config(kind, data)


def test_run_names_are_distinct_within_suites():
    for _, configs in load_named_sweep_configs(SWEEPS):
        names = [c.run_name for c in configs]
        assert len(names) == len(set(names))


def test_repository_sweeps_load():
    suites = dict(load_named_sweep_configs(SWEEPS))
    assert {"NOTEBOOK", "TESTS"} <= set(suites)
    assert sorted(c.kind for c in suites["NOTEBOOK"]) == ["logistic", "lorenz", "mandelbrot"]


def test_integral_float_accepted_for_int_field():
    assert build_config("mandelbrot", {"resolution": 8.0}).resolution == 8


def test_malformed_value_names_field():
    with pytest.raises(ValueError, match="initial_state"):
        build_config("lorenz", {"initial_state": 5})


def test_package_exports_loaders():
    import chaosviz

    assert chaosviz.load_sweep_configs is load_sweep_configs
    assert chaosviz.get_config_by_index is get_config_by_index
    assert "load_sweep_configs" in vars(chaosviz)
