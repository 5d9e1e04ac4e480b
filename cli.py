"""CLI to evaluate a path-loss model over distances.

Usage:
    python -m empirical_pathloss.cli --model sui --distance 500 --distance 1000 --seed 7
    python -m empirical_pathloss.cli --model cost231wi --start 50 --stop 5000 --step 50 \
        --set Environment=Urban --out loss.csv --plot loss.png
    python -m empirical_pathloss.cli --config sui.txt --tx-power 43
"""

import argparse
from pathlib import Path
from typing import List, Optional

import numpy as np

from .config import (
    MODELS,
    ModelConfig,
    model_from_config,
    normalize_model_name,
    parse_attributes_text,
)
from .logging_utils import setup_logger
from .plots import render_loss_curves
from .sweep import LinkSweep, distance_grid_m, print_table, rows_to_table, run_sweep, save_rows_csv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate empirical path-loss models over distance")
    parser.add_argument("--model", type=str, default=None, help=f"one of {sorted(MODELS)} (overrides the config file)")
    parser.add_argument("--config", type=Path, default=None, help="attribute text file (Name = value lines)")
    parser.add_argument("--set", dest="overrides", action="append", default=[], metavar="NAME=VALUE",
                        help="override one attribute, e.g. --set Frequency=1800MHz")
    parser.add_argument("--distance", type=float, action="append", default=[], help="distance in meters (repeatable)")
    parser.add_argument("--start", type=float, default=None, help="sweep start (m)")
    parser.add_argument("--stop", type=float, default=None, help="sweep stop (m)")
    parser.add_argument("--step", type=float, default=100.0, help="sweep step (m)")
    parser.add_argument("--tx-power", type=float, default=0.0, help="transmit power (dBm)")
    parser.add_argument("--seed", type=int, default=None, help="seed for SUI shadowing")
    parser.add_argument("--no-shadowing", action="store_true", help="disable SUI shadowing")
    parser.add_argument("--validate", action="store_true", help="reject parameters outside the model ranges")
    parser.add_argument("--out", type=Path, default=None, help="write results CSV")
    parser.add_argument("--plot", type=Path, default=None, help="write loss-vs-distance PNG")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser


def _distances(args: argparse.Namespace) -> List[float]:
    distances = list(args.distance)
    if args.start is not None or args.stop is not None:
        if args.start is None or args.stop is None:
            raise SystemExit("--start and --stop must be given together")
        distances.extend(distance_grid_m(args.start, args.stop, args.step))
    if not distances:
        raise SystemExit("no distances given (use --distance or --start/--stop)")
    return distances


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logger(level=args.log_level)

    cfg = parse_attributes_text(args.config.read_text(encoding="utf-8")) if args.config else ModelConfig()
    for item in args.overrides:
        if "=" not in item:
            raise SystemExit(f"bad --set value {item!r}; expected NAME=VALUE")
        name, value = item.split("=", 1)
        cfg.attributes[name.strip()] = value.strip()
    if args.model is None and cfg.model is None:
        raise SystemExit("no model selected (use --model or a 'Model:' line in --config)")

    rng = np.random.default_rng(args.seed)
    try:
        if args.no_shadowing and normalize_model_name(args.model or cfg.model) == "sui":
            cfg.attributes["EnableShadowing"] = "0"
        model = model_from_config(cfg, model=args.model, rng=rng, validate=args.validate)
    except ValueError as exc:
        parser.error(str(exc))
    logger.info("Configured %r", model)

    distances = _distances(args)
    rows = run_sweep({model.name: model}, LinkSweep(distances_m=distances, tx_power_dbm=args.tx_power))
    print_table(rows_to_table(rows))

    if args.out is not None:
        save_rows_csv(rows, args.out)
        print(f"Saved {len(rows)} rows to {args.out}")
    if args.plot is not None:
        render_loss_curves({model.name: model}, distances, outfile=args.plot)
        print(f"Saved plot to {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
