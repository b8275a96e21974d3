from __future__ import annotations

import argparse
import sys
from pathlib import Path

from chaosviz.config import CONFIG_TYPES, default_run_config, load_named_sweep_configs
from chaosviz.execution import run_single_experiment, run_sweep
from chaosviz.plotting import PLOTS_DIR


def parse_args():
    parser = argparse.ArgumentParser(description="Run Lorenz, Mandelbrot and logistic-map visualisations.")
    parser.add_argument("--sweep", type=str, help="Path to sweep YAML file")
    parser.add_argument("--suite", type=str, help="Name of suite/experiment within sweep file")
    parser.add_argument("--list-suites", action="store_true", help="List suites in sweep file")
    parser.add_argument("--task-id", type=int, help="Run specific config index within the selection")
    parser.add_argument("--output-dir", type=str, default=str(PLOTS_DIR), help="Directory for saved figures")

    # Direct run with default parameters
    parser.add_argument("--kind", type=str, choices=sorted(CONFIG_TYPES), help="Run a single pipeline with defaults")

    return parser.parse_args()


def main():
    args = parse_args()

    # Handle sweep runs
    if args.sweep:
        sweep_path = Path(args.sweep)

        if args.list_suites:
            suites = load_named_sweep_configs(sweep_path)
            for name, configs in suites:
                print(f"{name}: {len(configs)} configurations")
            return 0

        if args.task_id is not None and args.suite is None:
            sys.exit("ERROR: --task-id requires --suite")

        suites = load_named_sweep_configs(sweep_path, args.suite) if args.suite else load_named_sweep_configs(sweep_path)

        exit_code = 0
        for suite_name, configs in suites:
            descriptor = f"{sweep_path}::{suite_name}"
            rc = run_sweep(sweep_path, args.task_id, suite_name, configs, descriptor, args.output_dir)
            exit_code = exit_code or rc
        return exit_code

    if args.suite:
        sys.exit("ERROR: --suite requires --sweep")

    if not args.kind:
        sys.exit("ERROR: Direct run requires --kind (or use --sweep)")

    run_single_experiment(default_run_config(args.kind), None, args.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
