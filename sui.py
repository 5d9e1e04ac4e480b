"""Stanford University Interim (SUI) path-loss model.

The SUI model covers three terrain categories:
- Category A: hilly terrain with moderate-to-heavy tree density (maximum loss)
- Category B: intermediate
- Category C: mostly flat terrain with light tree density (minimum loss)

Median path loss for d > d0 (d0 = 100 m):

    PLsui = A + 10 gamma log10(d/d0) + s
    A     = 20 log10(4 pi d0 / lambda)                   intercept
    gamma = a - b Htx + c/Htx + x sigma_gamma            path-loss exponent
    s     = y (mu_sigma + z sigma_sigma)                 shadow fading

x, y and z are independent N(0, 1) draws. Frequency and receiver-height
corrections are then added:

    dPLf = 6 log10(f / 2000)                 f in MHz
    dPLh = -10.8 log10(Hr / 2)               categories A and B
    dPLh = -20 log10(Hr / 2)                 category C

Validity ranges: Htx 10-80 m, Hr 2-10 m.

Random source: three standard normals are drawn on every call, even when
shadowing is disabled; in that case x and y are forced to 0 while z stays live,
which leaves s = 0 regardless of z. The source is injected (any object with a
numpy-style `standard_normal`), one stream per concurrent caller.

`SuiFormula.LEGACY` reproduces an earlier revision of the model: no shadowing,
an intercept built from a configured wavelength with pi approximated as 22/7,
and a minimum distance that is scaled to kilometers but compared against the
separation in meters (inclusive).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional

import numpy as np

from .base import ParameterEnum, PathLossModel

logger = logging.getLogger(__name__)

SPEED_OF_LIGHT_M_S = 3e8
REFERENCE_DISTANCE_M = 100.0
LEGACY_PI = 22.0 / 7.0


class SuiTerrain(ParameterEnum):
    CATEGORY_A = "CategoryA"
    CATEGORY_B = "CategoryB"
    CATEGORY_C = "CategoryC"

    @classmethod
    def parse(cls, value: Any) -> "SuiTerrain":
        if isinstance(value, str) and value.strip().upper() in ("A", "B", "C"):
            return cls("Category" + value.strip().upper())
        return super().parse(value)


class SuiFormula(ParameterEnum):
    STANDARD = "standard"
    LEGACY = "legacy"


@dataclass(frozen=True)
class TerrainConstants:
    a: float
    b: float
    c: float
    sigma_gamma: float
    mu_sigma: float
    sigma_sigma: float


TERRAIN_CONSTANTS: Dict[SuiTerrain, TerrainConstants] = {
    SuiTerrain.CATEGORY_A: TerrainConstants(a=4.6, b=0.0075, c=12.6, sigma_gamma=0.57, mu_sigma=10.6, sigma_sigma=2.3),
    SuiTerrain.CATEGORY_B: TerrainConstants(a=4.0, b=0.0065, c=17.1, sigma_gamma=0.75, mu_sigma=9.6, sigma_sigma=3.0),
    SuiTerrain.CATEGORY_C: TerrainConstants(a=3.6, b=0.005, c=20.0, sigma_gamma=0.59, mu_sigma=8.2, sigma_sigma=1.6),
}


@dataclass(frozen=True)
class SuiParameters:
    """SUI configuration.

    min_distance_m: separation below which the loss is 0 dB
    frequency_mhz: carrier frequency in MHz
    tx_height_m: base-station antenna height (10-80 m)
    rx_height_m: receiver antenna height (2-10 m)
    terrain: terrain category A/B/C
    shadowing_enabled: include the random exponent and shadow-fading terms
    formula: standard revision or the legacy one
    wavelength_m: wavelength used by the legacy intercept only
    """

    min_distance_m: float = 100.0
    frequency_mhz: float = 2000.0
    tx_height_m: float = 45.0
    rx_height_m: float = 2.0
    terrain: SuiTerrain = SuiTerrain.CATEGORY_A
    shadowing_enabled: bool = True
    formula: SuiFormula = SuiFormula.STANDARD
    wavelength_m: float = 0.15

    def __post_init__(self):
        object.__setattr__(self, "terrain", SuiTerrain.parse(self.terrain))
        object.__setattr__(self, "formula", SuiFormula.parse(self.formula))
        object.__setattr__(self, "shadowing_enabled", bool(self.shadowing_enabled))
        if self.min_distance_m < 0:
            raise ValueError("min_distance_m must be non-negative")

    @classmethod
    def legacy(cls, **overrides: Any) -> "SuiParameters":
        """Defaults of the earlier revision (200 m gate, 50 m / 6 m antennas)."""
        values = dict(
            min_distance_m=200.0,
            tx_height_m=50.0,
            rx_height_m=6.0,
            shadowing_enabled=False,
            formula=SuiFormula.LEGACY,
        )
        values.update(overrides)
        return cls(**values)


class ShadowingDraw(NamedTuple):
    x: float
    y: float
    z: float


NO_SHADOWING = ShadowingDraw(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class SuiTerms:
    intercept_db: float
    gamma: float
    shadow_db: float
    median_db: float
    delta_f_db: float
    delta_h_db: float
    loss_db: float


def draw_shadowing(rng: Any, enabled: bool = True) -> ShadowingDraw:
    """Draw (x, y, z) from the source; x and y are zeroed when disabled."""
    x, y, z = (float(v) for v in rng.standard_normal(3))
    if not enabled:
        x = 0.0
        y = 0.0
    return ShadowingDraw(x, y, z)


def path_loss_exponent(terrain: SuiTerrain, tx_height_m: float, x: float = 0.0) -> float:
    k = TERRAIN_CONSTANTS[SuiTerrain.parse(terrain)]
    return k.a - k.b * tx_height_m + k.c / tx_height_m + x * k.sigma_gamma


def intercept_db(params: SuiParameters) -> float:
    """Free-space loss at the reference distance d0."""
    if params.formula is SuiFormula.LEGACY:
        return 20.0 * math.log10(4.0 * LEGACY_PI * REFERENCE_DISTANCE_M / params.wavelength_m)
    wavelength_m = SPEED_OF_LIGHT_M_S / (params.frequency_mhz * 1e6)
    return 20.0 * math.log10(4.0 * math.pi * REFERENCE_DISTANCE_M / wavelength_m)


def height_correction_db(terrain: SuiTerrain, rx_height_m: float) -> float:
    if terrain is SuiTerrain.CATEGORY_C:
        return -20.0 * math.log10(rx_height_m / 2.0)
    return -10.8 * math.log10(rx_height_m / 2.0)


def _log10_distance_ratio(distance_m: float) -> float:
    # log10(0) -> -inf, log10(<0) -> nan; no exception
    if distance_m > 0:
        return math.log10(distance_m / REFERENCE_DISTANCE_M)
    if distance_m == 0:
        return -math.inf
    return math.nan


def sui_terms(distance_m: float, params: SuiParameters, draw: ShadowingDraw = NO_SHADOWING) -> SuiTerms:
    """Evaluate every SUI term for a distance in meters and a given random draw.

    The legacy revision has no random terms and ignores `draw`. A zero distance
    (reachable when `min_distance_m` is 0) gives an infinite loss and a
    negative one gives NaN.
    """
    if params.formula is SuiFormula.LEGACY:
        draw = NO_SHADOWING
    k = TERRAIN_CONSTANTS[params.terrain]
    a_db = intercept_db(params)
    gamma = path_loss_exponent(params.terrain, params.tx_height_m, draw.x)
    s = draw.y * (k.mu_sigma + draw.z * k.sigma_sigma)
    median = a_db + 10.0 * gamma * _log10_distance_ratio(distance_m) + s
    delta_f = 6.0 * math.log10(params.frequency_mhz / 2000.0)
    delta_h = height_correction_db(params.terrain, params.rx_height_m)
    return SuiTerms(
        intercept_db=a_db,
        gamma=gamma,
        shadow_db=s,
        median_db=median,
        delta_f_db=delta_f,
        delta_h_db=delta_h,
        loss_db=median + delta_f + delta_h,
    )


def is_below_min_distance(distance_m: float, params: SuiParameters) -> bool:
    if params.formula is SuiFormula.LEGACY:
        return distance_m <= params.min_distance_m / 1000.0
    return distance_m < params.min_distance_m


class SUIModel(PathLossModel):
    """SUI model; distances are gated and evaluated in meters."""

    params_type = SuiParameters
    name = "sui"

    def __init__(self, params: Optional[SuiParameters] = None, rng: Any = None):
        super().__init__(params)
        self.rng = rng if rng is not None else np.random.default_rng()

    def compute_loss(self, distance_m: float) -> float:
        p = self._params
        if p.formula is SuiFormula.LEGACY:
            if is_below_min_distance(distance_m, p):
                return 0.0
            t = sui_terms(distance_m, p)
        else:
            # draws happen before the distance gate, once per call
            draw = draw_shadowing(self.rng, p.shadowing_enabled)
            if is_below_min_distance(distance_m, p):
                return 0.0
            t = sui_terms(distance_m, p, draw)
        logger.debug(
            "dist=%.3f m, A=%.4f, gamma=%.4f, s=%.4f, PLsui=%.4f, dPLf=%.4f, dPLh=%.4f, loss=%.4f dB (%s)",
            distance_m, t.intercept_db, t.gamma, t.shadow_db, t.median_db,
            t.delta_f_db, t.delta_h_db, t.loss_db, p.terrain.value,
        )
        return -t.loss_db
