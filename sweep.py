"""Distance sweeps over one or more path-loss models.

Evaluates each model at a list of Tx-Rx distances and collects the signed loss,
the positive path loss and the received power for a given transmit power.
Results can be printed as a plain table, turned into a pandas DataFrame or
saved as CSV.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping

import numpy as np
import pandas as pd

from .base import PathLossModel

COLUMNS = ["model", "distance_m", "loss_db", "path_loss_db", "rx_power_dbm"]


@dataclass
class LinkSweep:
    """Distances to evaluate (meters) and the transmit power (dBm)."""
    distances_m: List[float]
    tx_power_dbm: float = 0.0


@dataclass
class SweepRow:
    """One model evaluated at one distance."""
    model: str
    distance_m: float
    loss_db: float
    path_loss_db: float
    rx_power_dbm: float


def distance_grid_m(start_m: float, stop_m: float, step_m: float) -> List[float]:
    """Inclusive grid of distances from start to stop."""
    if step_m <= 0:
        raise ValueError("step must be positive")
    if stop_m < start_m:
        raise ValueError("stop must not be below start")
    n = int(np.floor((stop_m - start_m) / step_m + 1e-9)) + 1
    return [float(start_m + i * step_m) for i in range(n)]


def loss_curve_db(model: PathLossModel, distances_m: Iterable[float]) -> np.ndarray:
    """Signed loss (dB) of `model` at each distance."""
    return np.array([model.compute_loss(float(d)) for d in distances_m], dtype=float)


def run_sweep(models: Mapping[str, PathLossModel], sweep: LinkSweep) -> List[SweepRow]:
    """Evaluate every model at every distance of the sweep.

    The loss is computed once per (model, distance); received power is derived
    from it, so SUI rows stay consistent when shadowing is enabled.
    """
    rows: List[SweepRow] = []
    for name, model in models.items():
        for d_m in sweep.distances_m:
            loss = model.compute_loss(d_m)
            rows.append(SweepRow(
                model=name,
                distance_m=d_m,
                loss_db=loss,
                path_loss_db=-loss,
                rx_power_dbm=sweep.tx_power_dbm + loss,
            ))
    return rows


def rows_to_table(rows: Iterable[SweepRow]) -> List[List[str]]:
    """Convert results to a simple table (strings) for printing."""
    table = [list(COLUMNS)]
    for r in rows:
        table.append([
            r.model,
            f"{r.distance_m:.1f}",
            f"{r.loss_db:.2f}",
            f"{r.path_loss_db:.2f}",
            f"{r.rx_power_dbm:.2f}",
        ])
    return table


def print_table(table: List[List[str]]) -> None:
    """Pretty-print a simple table to the console."""
    widths = [max(len(row[i]) for row in table) for i in range(len(table[0]))]
    for row in table:
        print("  ".join(cell.ljust(widths[j]) for j, cell in enumerate(row)))


def rows_to_dataframe(rows: Iterable[SweepRow]) -> pd.DataFrame:
    data: Dict[str, list] = {c: [] for c in COLUMNS}
    for r in rows:
        for c in COLUMNS:
            data[c].append(getattr(r, c))
    return pd.DataFrame(data, columns=COLUMNS)


def save_rows_csv(rows: Iterable[SweepRow], path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    rows_to_dataframe(rows).to_csv(p, index=False)
    return p
