"""Configuration objects and YAML loading for the chaos visualisation runs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from itertools import product
from pathlib import Path
from typing import Dict, List, Tuple, Union

import yaml


@dataclass(frozen=True)
class LorenzConfig:
    """Parameters for a forward-Euler integration of the Lorenz system."""

    sigma: float = 10.0
    rho: float = 28.0
    beta: float = 8.0 / 3.0
    initial_state: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    dt: float = 0.01
    t_final: float = 100.0

    def __post_init__(self) -> None:
        if len(self.initial_state) != 3:
            raise ValueError(f"initial_state must have 3 components, got {self.initial_state!r}")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.t_final <= 0:
            raise ValueError(f"t_final must be positive, got {self.t_final}")

    @property
    def kind(self) -> str:
        return "lorenz"

    @property
    def run_name(self) -> str:
        return f"lorenz_s{self.sigma:g}_r{self.rho:g}_b{self.beta:.4g}_dt{self.dt:g}_t{self.t_final:g}"

    def to_dict(self) -> dict:
        """Convert to dictionary for MLflow logging."""
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class MandelbrotConfig:
    """Parameters for the escape-time evaluation over a square lattice."""

    resolution: int = 100  # lattice is (2n+1) x (2n+1)
    max_iter: int = 1000
    extent: float = 2.0

    def __post_init__(self) -> None:
        if self.resolution < 1:
            raise ValueError(f"resolution must be >= 1, got {self.resolution}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")
        if self.extent <= 0:
            raise ValueError(f"extent must be positive, got {self.extent}")

    @property
    def kind(self) -> str:
        return "mandelbrot"

    @property
    def side(self) -> int:
        return 2 * self.resolution + 1

    @property
    def run_name(self) -> str:
        return f"mandelbrot_n{self.resolution}_k{self.max_iter}_{self.side}x{self.side}"

    def to_dict(self) -> dict:
        """Convert to dictionary for MLflow logging."""
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class LogisticConfig:
    """Parameters for the logistic-map bifurcation sweep."""

    r_min: float = 2.5
    r_max: float = 4.0
    n: int = 10000
    iterations: int = 1000
    last: int = 100
    x0: float = 1e-5

    def __post_init__(self) -> None:
        if self.r_min > self.r_max:
            raise ValueError(f"r_min ({self.r_min}) must not exceed r_max ({self.r_max})")
        check_sweep_counts(self.n, self.iterations, self.last)

    @property
    def kind(self) -> str:
        return "logistic"

    @property
    def run_name(self) -> str:
        return f"logistic_r{self.r_min:g}-{self.r_max:g}_n{self.n}_it{self.iterations}_last{self.last}"

    def to_dict(self) -> dict:
        """Convert to dictionary for MLflow logging."""
        return {"kind": self.kind, **asdict(self)}


def check_sweep_counts(n: int, iterations: int, last: int) -> None:
    """Raise ``ValueError`` unless the sweep keeps a non-empty tail of the iterates."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if not 0 < last <= iterations:
        raise ValueError(
            f"last must satisfy 0 < last <= iterations, got last={last}, iterations={iterations}"
        )


RunConfig = Union[LorenzConfig, MandelbrotConfig, LogisticConfig]

CONFIG_TYPES: Dict[str, type] = {
    "lorenz": LorenzConfig,
    "mandelbrot": MandelbrotConfig,
    "logistic": LogisticConfig,
}

DEFAULT_RUN_CONFIGS: Dict[str, RunConfig] = {
    "lorenz": LorenzConfig(),
    "mandelbrot": MandelbrotConfig(),
    "logistic": LogisticConfig(),
}


def default_run_config(kind: str, **overrides: object) -> RunConfig:
    """Return the canonical default config for ``kind`` optionally overridden with kwargs."""
    if kind not in DEFAULT_RUN_CONFIGS:
        raise ValueError(f"Unknown kind {kind!r}; expected one of {sorted(CONFIG_TYPES)}")
    return replace(DEFAULT_RUN_CONFIGS[kind], **_coerce_fields(kind, overrides))


def build_config(kind: str, raw_data: Dict[str, object]) -> RunConfig:
    """Build a config of ``kind`` from a plain mapping (e.g. parsed YAML)."""
    if kind not in CONFIG_TYPES:
        raise ValueError(f"Unknown kind {kind!r}; expected one of {sorted(CONFIG_TYPES)}")
    return CONFIG_TYPES[kind](**_coerce_fields(kind, raw_data))  # type: ignore[arg-type]


def load_sweep_configs(yaml_path: str | Path) -> List[RunConfig]:
    """Load a YAML sweep file and generate every configuration it describes."""
    configs: List[RunConfig] = []
    for _, suite_configs in load_named_sweep_configs(yaml_path):
        configs.extend(suite_configs)
    return configs


def load_named_sweep_configs(
    yaml_path: str | Path,
    suite: str | None = None,
) -> List[tuple[str, List[RunConfig]]]:
    """Load configurations grouped by suite name.

    Experiments sharing a ``name`` are merged into one suite, so a suite can
    mix Lorenz, Mandelbrot and logistic runs.
    """
    with open(yaml_path) as f:
        cfg = yaml.safe_load(f) or {}

    global_defaults: Dict[str, Dict[str, object]] = cfg.get("defaults", {}) or {}
    experiments = cfg.get("experiments") or []

    results: Dict[str, List[RunConfig]] = {}
    for exp in experiments:
        name = exp.get("name") or Path(yaml_path).stem
        if suite and name != suite:
            continue
        kind = exp.get("kind")
        if kind is None:
            raise ValueError(f"Experiment {name!r} in {yaml_path} is missing 'kind'")
        exp_defaults = {**(global_defaults.get(kind) or {}), **(exp.get("defaults", {}) or {})}
        sweep = exp.get("sweep") or {}
        results.setdefault(name, []).extend(_expand_sweep(kind, exp_defaults, sweep))

    if suite and not results:
        raise ValueError(f"Suite '{suite}' not found in {yaml_path}")
    return list(results.items())


def get_config_by_index(yaml_path: str | Path, index: int) -> RunConfig:
    """Get a specific config by index from sweep."""
    configs = load_sweep_configs(yaml_path)
    if index < 0 or index >= len(configs):
        raise ValueError(f"Config index {index} out of range [0, {len(configs) - 1}]")
    return configs[index]


def _expand_sweep(kind: str, defaults: Dict[str, object], sweep: Dict[str, object]) -> List[RunConfig]:
    """Expand a sweep definition into config instances (Cartesian product)."""
    keys = list(sweep.keys())
    if not keys:
        return [build_config(kind, defaults)]

    values = [_as_options(sweep[k]) for k in keys]
    return [build_config(kind, {**defaults, **dict(zip(keys, combo))}) for combo in product(*values)]


def _as_options(value: object) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _coerce_fields(kind: str, data: Dict[str, object]) -> Dict[str, object]:
    allowed = {f.name: f for f in fields(CONFIG_TYPES[kind])}
    unknown = set(data) - set(allowed)
    if unknown:
        raise ValueError(f"Unknown {kind} parameter(s): {', '.join(sorted(unknown))}")

    result: Dict[str, object] = {}
    for key, value in data.items():
        annotation = str(allowed[key].type)
        try:
            if annotation.startswith("Tuple"):
                result[key] = tuple(float(v) for v in value)  # type: ignore[union-attr]
            elif annotation == "int":
                result[key] = _as_int(value)
            elif annotation == "float":
                result[key] = float(value)  # type: ignore[arg-type]
            else:
                result[key] = value
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid {kind} parameter {key}={value!r}: {exc}") from exc
    return result


def _as_int(value: object) -> int:
    if isinstance(value, bool):
        raise ValueError("expected an integer, got a boolean")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("expected an integer, got a fractional number")
        return int(value)
    return int(value)  # type: ignore[arg-type]
