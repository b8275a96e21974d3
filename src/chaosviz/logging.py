"""MLflow tracking for chaos visualisation runs."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Sequence

import mlflow
import pandas as pd
from matplotlib.figure import Figure

from .config import RunConfig

DEFAULT_TRACKING_URI = "file:./mlruns"
EXPERIMENT_NAME = "chaosviz"
TABLE_ROWS = 500


def log_to_mlflow(
    config: RunConfig,
    result: Any,
    figures: Dict[str, Figure] | None = None,
    suite_name: str = "default",
    wall_time: float = 0.0,
) -> None:
    """Log a finished run to MLflow: parameters, summary metrics, a sample table and figures.

    Args:
        config: Run configuration
        result: Pipeline output (``LorenzTrajectory``, ``MandelbrotGrid`` or ``Bifurcation``)
        figures: Rendered figures keyed by artifact stem
        suite_name: Name of the suite (TESTS, NOTEBOOK, ...) for tagging/filtering
        wall_time: Seconds spent in the computation
    """
    # Skip logging in test mode
    if os.environ.get("SKIP_MLFLOW"):
        return

    mlflow.set_tracking_uri(_resolve_tracking_uri())
    mlflow.set_experiment(EXPERIMENT_NAME)

    with mlflow.start_run(run_name=config.run_name) as run:
        mlflow.set_tags(
            {
                "node_name": os.uname().nodename,
                "suite": suite_name,
                "kind": config.kind,
            }
        )
        mlflow.log_params(config.to_dict())

        metrics = {"wall_time": float(wall_time), **result.summary()}
        for key, value in metrics.items():
            mlflow.log_metric(key, value)

        records = result.to_records(limit=TABLE_ROWS)
        if records:
            mlflow.log_table(_records_to_table(records), f"{config.kind}.json")

        for name, fig in (figures or {}).items():
            mlflow.log_figure(fig, f"figures/{name}.png")

        print(f"[MLflow] Logged run: {config.run_name} (suite: {suite_name})")
        print(f"[MLflow] Run ID: {run.info.run_id}")


def _records_to_table(records: Sequence[Dict[str, Any]]) -> Dict[str, List[Any]]:
    """Convert row-wise records into MLflow table format."""
    frame = pd.DataFrame.from_records(records)
    return frame.to_dict(orient="list")


def _resolve_tracking_uri() -> str:
    """Resolve tracking URI."""
    return os.environ.get("MLFLOW_TRACKING_URI") or DEFAULT_TRACKING_URI
