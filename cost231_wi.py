"""COST-231 Walfisch-Ikegami path-loss model.

Combination of the Walfisch and Ikegami models developed by the COST 231
project. Only the buildings in the vertical plane between transmitter and
receiver are considered; over-rooftop multiple diffraction dominates in urban
street canyons.

    L0   = 32.4 + 20 log10(d) + 20 log10(f)                      free space
    Lrts = -16.9 - 10 log10(w) + 10 log10(f)
           + 20 log10(Hroof - Hmobile) + Lori                     rooftop-to-street
    Lmsd = Lbsh + Ka + Kd log10(d) + Kf log10(f) - 9 log10(b)     multi-screen

    L = L0 + Lrts + Lmsd    if Lrts + Lmsd > 0
    L = L0                  otherwise

d in km, f in MHz, heights and street width w in meters; the building
separation b is taken as 2 w.

Parameter ranges of the model: f 800-2000 MHz, Hbase 4-50 m, Hmobile 1-3 m,
d 20-5000 m. Preconditions: w > 0, f > 0 and Hroof > Hmobile.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .base import ParameterEnum, PathLossModel

logger = logging.getLogger(__name__)


class Cost231Environment(ParameterEnum):
    SUBURBAN = "Suburban"
    URBAN = "Urban"


@dataclass(frozen=True)
class Cost231WIParameters:
    """COST-231 WI configuration.

    min_distance_m: separation at or below which the loss is 0 dB
    frequency_mhz: carrier frequency in MHz
    street_width_m: street width w (10-25 m typical)
    orientation_angle_deg: street orientation relative to the direct path
    roof_height_m: building roof height
    mobile_height_m: mobile antenna height
    base_height_m: base-station antenna height
    environment: suburban (medium city) or urban (metropolitan) Kf
    """

    min_distance_m: float = 20.0
    frequency_mhz: float = 2000.0
    street_width_m: float = 10.0
    orientation_angle_deg: float = 90.0
    roof_height_m: float = 6.0
    mobile_height_m: float = 3.0
    base_height_m: float = 30.0
    environment: Cost231Environment = Cost231Environment.SUBURBAN

    def __post_init__(self):
        object.__setattr__(self, "environment", Cost231Environment.parse(self.environment))
        if self.min_distance_m < 0:
            raise ValueError("min_distance_m must be non-negative")


@dataclass(frozen=True)
class Cost231Terms:
    l0_db: float
    l_ori_db: float
    lrts_db: float
    lbsh_db: float
    ka: float
    kd: float
    kf: float
    lmsd_db: float
    loss_db: float
    nlos_applied: bool


def orientation_loss_db(angle_deg: float) -> float:
    """Street orientation loss Lori for an angle in degrees.

    [0, 35): -10 + 0.354 phi
    [35, 55): 2.5 + 0.075 (phi - 35)
    otherwise: 4.0 - 0.114 (phi - 35)
    """
    if 0 <= angle_deg < 35:
        return -10.0 + 0.354 * angle_deg
    if 35 <= angle_deg < 55:
        return 2.5 + 0.075 * (angle_deg - 35.0)
    return 4.0 - 0.114 * (angle_deg - 35.0)


def rooftop_to_street_db(params: Cost231WIParameters) -> float:
    delta_hmobile = params.roof_height_m - params.mobile_height_m
    return (
        -16.9
        - 10.0 * math.log10(params.street_width_m)
        + 10.0 * math.log10(params.frequency_mhz)
        + 20.0 * math.log10(delta_hmobile)
        + orientation_loss_db(params.orientation_angle_deg)
    )


def cost231_wi_terms(distance_km: float, params: Cost231WIParameters) -> Cost231Terms:
    """Evaluate every COST-231 WI term for a distance in kilometers."""
    f = params.frequency_mhz
    l0 = 32.4 + 20.0 * math.log10(distance_km) + 20.0 * math.log10(f)
    l_ori = orientation_loss_db(params.orientation_angle_deg)
    lrts = rooftop_to_street_db(params)

    delta_hbase = params.base_height_m - params.roof_height_m
    above_roof = params.base_height_m > params.roof_height_m
    if above_roof:
        lbsh = -18.0 * math.log10(1.0 + delta_hbase)
        ka = 54.0
        kd = 18.0
    else:
        lbsh = 0.0
        if distance_km >= 0.5:
            ka = 54.0 - 0.8 * delta_hbase
        else:
            ka = 54.0 - 1.6 * delta_hbase * distance_km
        kd = 18.0 - 15.0 * (delta_hbase / params.roof_height_m)

    if params.environment is Cost231Environment.SUBURBAN:
        kf = -4.0 + 0.7 * (f / 925.0 - 1.0)
    else:
        kf = -4.0 + 1.5 * (f / 925.0 - 1.0)

    building_separation_m = 2.0 * params.street_width_m
    lmsd = lbsh + ka + kd * math.log10(distance_km) + kf * math.log10(f) - 9.0 * math.log10(building_separation_m)

    nlos = (lrts + lmsd) > 0
    loss = l0 + lrts + lmsd if nlos else l0
    return Cost231Terms(
        l0_db=l0,
        l_ori_db=l_ori,
        lrts_db=lrts,
        lbsh_db=lbsh,
        ka=ka,
        kd=kd,
        kf=kf,
        lmsd_db=lmsd,
        loss_db=loss,
        nlos_applied=nlos,
    )


class Cost231WIModel(PathLossModel):
    """COST-231 Walfisch-Ikegami model; distances gated and evaluated in km."""

    params_type = Cost231WIParameters
    name = "cost231wi"

    def compute_loss(self, distance_m: float) -> float:
        p = self._params
        distance_km = distance_m / 1000.0
        if distance_km <= p.min_distance_m / 1000.0:
            return 0.0
        t = cost231_wi_terms(distance_km, p)
        logger.debug(
            "dist=%.4f km, L0=%.4f, Lori=%.4f, Lrts=%.4f, Lbsh=%.4f, Ka=%.4f, Kd=%.4f, Kf=%.4f, "
            "Lmsd=%.4f, loss=%.4f dB",
            distance_km, t.l0_db, t.l_ori_db, t.lrts_db, t.lbsh_db, t.ka, t.kd, t.kf, t.lmsd_db, t.loss_db,
        )
        return -t.loss_db
