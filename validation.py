"""Fail-fast parameter checks.

The formulas themselves never clamp or check their inputs: a zero or negative
frequency or height makes a log10 argument non-positive, which is a
precondition violation rather than a defined result. These helpers are the
opt-in hardened path: they reject parameter blocks that violate the physical
preconditions or the documented validity ranges of each model.
"""

from typing import Any, List, Tuple

from .cost231_wi import Cost231WIParameters
from .ecc33 import Ecc33Parameters
from .sui import SuiFormula, SuiParameters


class ParameterRangeError(ValueError):
    """Raised when a parameter block is outside the model's validity domain."""

    def __init__(self, model: str, problems: List[str]):
        self.model = model
        self.problems = list(problems)
        super().__init__(f"{model}: " + "; ".join(self.problems))


def _positive(problems: List[str], name: str, value: float) -> None:
    if not value > 0:
        problems.append(f"{name} must be > 0 (got {value})")


def _within(problems: List[str], name: str, value: float, bounds: Tuple[float, float]) -> None:
    lo, hi = bounds
    if not lo <= value <= hi:
        problems.append(f"{name} must be within [{lo}, {hi}] (got {value})")


SUI_TX_HEIGHT_RANGE_M = (10.0, 80.0)
SUI_RX_HEIGHT_RANGE_M = (2.0, 10.0)
COST231_FREQUENCY_RANGE_MHZ = (800.0, 2000.0)
COST231_BASE_HEIGHT_RANGE_M = (4.0, 50.0)
COST231_MOBILE_HEIGHT_RANGE_M = (1.0, 3.0)
COST231_ORIENTATION_RANGE_DEG = (0.0, 90.0)


def validate_ecc33_params(params: Ecc33Parameters) -> Ecc33Parameters:
    problems: List[str] = []
    _positive(problems, "frequency_ghz", params.frequency_ghz)
    _positive(problems, "tx_height_m", params.tx_height_m)
    _positive(problems, "rx_height_m", params.rx_height_m)
    if problems:
        raise ParameterRangeError("ecc33", problems)
    return params


def validate_sui_params(params: SuiParameters) -> SuiParameters:
    problems: List[str] = []
    _positive(problems, "frequency_mhz", params.frequency_mhz)
    _within(problems, "tx_height_m", params.tx_height_m, SUI_TX_HEIGHT_RANGE_M)
    _within(problems, "rx_height_m", params.rx_height_m, SUI_RX_HEIGHT_RANGE_M)
    if params.formula is SuiFormula.LEGACY:
        _positive(problems, "wavelength_m", params.wavelength_m)
    if problems:
        raise ParameterRangeError("sui", problems)
    return params


def validate_cost231_params(params: Cost231WIParameters) -> Cost231WIParameters:
    problems: List[str] = []
    _within(problems, "frequency_mhz", params.frequency_mhz, COST231_FREQUENCY_RANGE_MHZ)
    _within(problems, "base_height_m", params.base_height_m, COST231_BASE_HEIGHT_RANGE_M)
    _within(problems, "mobile_height_m", params.mobile_height_m, COST231_MOBILE_HEIGHT_RANGE_M)
    _within(problems, "orientation_angle_deg", params.orientation_angle_deg, COST231_ORIENTATION_RANGE_DEG)
    _positive(problems, "street_width_m", params.street_width_m)
    _positive(problems, "roof_height_m", params.roof_height_m)
    if not params.roof_height_m > params.mobile_height_m:
        problems.append(
            f"roof_height_m ({params.roof_height_m}) must exceed mobile_height_m ({params.mobile_height_m})"
        )
    if problems:
        raise ParameterRangeError("cost231wi", problems)
    return params


def validate_params(params: Any) -> Any:
    """Dispatch to the validator for the type of `params`."""
    if isinstance(params, Ecc33Parameters):
        return validate_ecc33_params(params)
    if isinstance(params, SuiParameters):
        return validate_sui_params(params)
    if isinstance(params, Cost231WIParameters):
        return validate_cost231_params(params)
    raise TypeError(f"No validator for {type(params).__name__}")
