"""ECC-33 path-loss model.

    PL = Afs + Abm - Gb - Gr

    Afs = 92.4 + 20 log10(d) + 20 log10(f)                     free-space attenuation
    Abm = 20.41 + 9.83 log10(d) + 7.894 log10(f) + 9.56 (log10 f)^2
                                                               basic median path loss
    Gb  = log10(Hb/200) * (13.958 + 5.8 (log10 d)^2)           Tx height gain
    Gr  = (42.57 + 13.7 log10 f) * (log10 Hr - 0.585)          medium city (suburban)
    Gr  = 0.759 Hr - 1.892                                     large city (urban)

with d in km, f in GHz and heights in meters.

Two revisions of the median-loss and Tx-gain terms circulate. The squared form
above is the primary one. The linear form replaces (log10 f)^2 by 2 log10 f in
Abm and (log10 d)^2 by 2 log10 d in Gb; select it with `Ecc33Formula.LINEAR`.

Preconditions: f > 0, Hb > 0, Hr > 0. Outside them log10 fails; the model
does not clamp.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .base import ParameterEnum, PathLossModel

logger = logging.getLogger(__name__)


class Ecc33Environment(ParameterEnum):
    SUBURBAN = "Suburban"  # medium city
    URBAN = "Urban"  # large city


class Ecc33Formula(ParameterEnum):
    SQUARED = "squared"
    LINEAR = "linear"


@dataclass(frozen=True)
class Ecc33Parameters:
    """ECC-33 configuration.

    min_distance_m: separation at or below which the loss is 0 dB
    frequency_ghz: carrier frequency in GHz
    tx_height_m: base-station antenna height Hb
    rx_height_m: receiver antenna height Hr
    environment: suburban (medium city) or urban (large city) receiver gain
    formula: squared (primary) or linear revision of Abm/Gb
    """

    min_distance_m: float = 20.0
    frequency_ghz: float = 2.0
    tx_height_m: float = 50.0
    rx_height_m: float = 2.0
    environment: Ecc33Environment = Ecc33Environment.SUBURBAN
    formula: Ecc33Formula = Ecc33Formula.SQUARED

    def __post_init__(self):
        object.__setattr__(self, "environment", Ecc33Environment.parse(self.environment))
        object.__setattr__(self, "formula", Ecc33Formula.parse(self.formula))
        if self.min_distance_m < 0:
            raise ValueError("min_distance_m must be non-negative")


@dataclass(frozen=True)
class Ecc33Terms:
    afs_db: float
    abm_db: float
    gb_db: float
    gr_db: float
    loss_db: float


def receiver_gain_db(params: Ecc33Parameters) -> float:
    if params.environment is Ecc33Environment.SUBURBAN:
        return (42.57 + 13.7 * math.log10(params.frequency_ghz)) * (math.log10(params.rx_height_m) - 0.585)
    return 0.759 * params.rx_height_m - 1.892


def ecc33_terms(distance_km: float, params: Ecc33Parameters) -> Ecc33Terms:
    """Evaluate every ECC-33 term for a distance in kilometers."""
    log_d = math.log10(distance_km)
    log_f = math.log10(params.frequency_ghz)

    afs = 92.4 + 20.0 * log_d + 20.0 * log_f
    if params.formula is Ecc33Formula.SQUARED:
        abm = 20.41 + 9.83 * log_d + 7.894 * log_f + 9.56 * log_f * log_f
        gb = math.log10(params.tx_height_m / 200.0) * (13.958 + 5.8 * log_d * log_d)
    else:
        abm = 20.41 + 9.83 * log_d + 7.894 * log_f + 9.56 * 2.0 * log_f
        gb = math.log10(params.tx_height_m / 200.0) * (13.958 + 5.8 * 2.0 * log_d)
    gr = receiver_gain_db(params)
    return Ecc33Terms(afs_db=afs, abm_db=abm, gb_db=gb, gr_db=gr, loss_db=afs + abm - gb - gr)


class ECC33Model(PathLossModel):
    """ECC-33 model; distances are gated and evaluated in kilometers."""

    params_type = Ecc33Parameters
    name = "ecc33"

    def compute_loss(self, distance_m: float) -> float:
        p = self._params
        distance_km = distance_m / 1000.0
        if distance_km <= p.min_distance_m / 1000.0:
            return 0.0
        t = ecc33_terms(distance_km, p)
        logger.debug(
            "dist=%.3f m, Afs=%.4f, Abm=%.4f, Gb=%.4f, Gr=%.4f, loss=%.4f dB (f=%s GHz, Hb=%s m, Hr=%s m, %s)",
            distance_m, t.afs_db, t.abm_db, t.gb_db, t.gr_db, t.loss_db,
            p.frequency_ghz, p.tx_height_m, p.rx_height_m, p.environment.value,
        )
        return -t.loss_db
