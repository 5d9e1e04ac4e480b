"""Loss-versus-distance figures (PNG).

One line per model, positive path loss on the y axis. Output is a static
image written with matplotlib.
"""

from pathlib import Path
from typing import Iterable, Mapping

import numpy as np
import matplotlib.pyplot as plt

from .base import PathLossModel
from .sweep import loss_curve_db


def render_loss_curves(
    models: Mapping[str, PathLossModel],
    distances_m: Iterable[float],
    outfile: str | Path = "pathloss_curves.png",
    title: str = "Empirical path-loss models",
    log_distance: bool = False,
) -> Path:
    """Plot path loss (dB) against distance for each model and save a PNG.

    Distances inside a model's minimum-distance gate show up as 0 dB.
    """
    if not models:
        raise ValueError("No models to plot")
    d = np.asarray(list(distances_m), dtype=float)
    out = Path(outfile)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 6), dpi=120)
    ax.grid(color="gray", alpha=0.7, lw=0.5)
    for name, model in models.items():
        ax.plot(d, -loss_curve_db(model, d), lw=2, label=name)
    if log_distance:
        ax.set_xscale("log")
    ax.set_xlabel("distance (m)")
    ax.set_ylabel("path loss (dB)")
    ax.set_title(title)
    ax.legend()
    fig.tight_layout()
    fig.savefig(out)
    plt.close(fig)
    return out
