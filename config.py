"""Model configuration: attribute text parsing and a model factory.

Models are configured once, before evaluation, from named attributes. The
attribute names follow the usual simulator naming:

    Model: SUI
    MinDistance = 100
    Frequency = 2000 MHz
    TxAntennaHeight = 45
    RxAntennaHeight = 2
    Environment = CategoryB      # Suburban/Urban for ECC-33 and COST-231 WI
    EnableShadowing = 0

`Name = value` and `Name: value` are both accepted, `#` starts a comment and
blank lines are ignored. A frequency may carry a unit (Hz, kHz, MHz, GHz); it
is converted to the unit of the selected model. Unit-less numbers are taken in
the model's own unit (GHz for ECC-33, MHz for SUI and COST-231 WI).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

from .base import PathLossModel
from .cost231_wi import Cost231WIModel, Cost231WIParameters
from .ecc33 import ECC33Model, Ecc33Parameters
from .sui import SUIModel, SuiParameters
from .validation import validate_params


@dataclass
class ModelConfig:
    """Parsed attribute text: optional model name and raw attribute values."""
    model: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)


_HZ_SCALE = {"hz": 1.0, "khz": 1e3, "mhz": 1e6, "ghz": 1e9}
_NUMBER_RE = re.compile(r"^\s*([-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*([A-Za-z]*)\s*$")


def _parse_number_with_unit(value: str) -> Tuple[float, str]:
    m = _NUMBER_RE.match(value)
    if not m:
        raise ValueError(f"Not a number: {value!r}")
    return float(m.group(1)), m.group(2).lower()


def _float(value: str) -> float:
    num, _unit = _parse_number_with_unit(value)
    return num


def _frequency(target_unit: str) -> Callable[[str], float]:
    def convert(value: str) -> float:
        num, unit = _parse_number_with_unit(value)
        if not unit:
            return num
        if unit not in _HZ_SCALE:
            raise ValueError(f"Unknown frequency unit in {value!r}")
        return num * _HZ_SCALE[unit] / _HZ_SCALE[target_unit]
    return convert


def _bool(value: str) -> bool:
    key = value.strip().lower()
    if key in ("1", "true", "yes", "on", "enabled"):
        return True
    if key in ("0", "false", "no", "off", "disabled"):
        return False
    try:
        return _float(value) != 0.0
    except ValueError:
        raise ValueError(f"Not a boolean: {value!r}") from None


def _text(value: str) -> str:
    return value.strip()


# attribute name -> (dataclass field, converter)
ECC33_ATTRIBUTES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "MinDistance": ("min_distance_m", _float),
    "Frequency": ("frequency_ghz", _frequency("ghz")),
    "TxAntennaHeight": ("tx_height_m", _float),
    "RxAntennaHeight": ("rx_height_m", _float),
    "Environment": ("environment", _text),
    "Formula": ("formula", _text),
}

SUI_ATTRIBUTES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "MinDistance": ("min_distance_m", _float),
    "Frequency": ("frequency_mhz", _frequency("mhz")),
    "TxAntennaHeight": ("tx_height_m", _float),
    "RxAntennaHeight": ("rx_height_m", _float),
    "Environment": ("terrain", _text),
    "EnableShadowing": ("shadowing_enabled", _bool),
    "Formula": ("formula", _text),
    "Wavelength": ("wavelength_m", _float),
}

COST231_ATTRIBUTES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "MinDistance": ("min_distance_m", _float),
    "Frequency": ("frequency_mhz", _frequency("mhz")),
    "Width": ("street_width_m", _float),
    "OrientationAngle": ("orientation_angle_deg", _float),
    "RoofHeight": ("roof_height_m", _float),
    "MobileHeight": ("mobile_height_m", _float),
    "BaseHeight": ("base_height_m", _float),
    "Environment": ("environment", _text),
}

MODELS: Dict[str, Tuple[type, type, Dict[str, Tuple[str, Callable[[str], Any]]]]] = {
    "ecc33": (ECC33Model, Ecc33Parameters, ECC33_ATTRIBUTES),
    "sui": (SUIModel, SuiParameters, SUI_ATTRIBUTES),
    "cost231wi": (Cost231WIModel, Cost231WIParameters, COST231_ATTRIBUTES),
}


def normalize_model_name(name: str) -> str:
    """Map spellings like 'ECC-33' or 'cost231_wi' to a registered model key."""
    key = re.sub(r"[\s_\-]", "", str(name)).lower()
    if key.endswith("model"):
        key = key[: -len("model")]
    if key.endswith("pathloss"):
        key = key[: -len("pathloss")]
    if key.endswith("loss"):
        key = key[: -len("loss")]
    if key not in MODELS:
        raise ValueError(f"Unknown model: {name}. Available models: {list(MODELS.keys())}")
    return key


def parse_attributes_text(text: str) -> ModelConfig:
    """Parse `Name = value` lines into a ModelConfig.

    Lines that do not look like assignments are ignored. A `Model` line selects
    the model; later assignments of the same attribute win.
    """
    cfg = ModelConfig()
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        m = re.match(r"^([A-Za-z][A-Za-z0-9_]*)\s*[:=]\s*(.+)$", line)
        if not m:
            continue
        name, value = m.group(1), m.group(2).strip()
        if name.lower() == "model":
            cfg.model = value
        else:
            cfg.attributes[name] = value
    return cfg


def params_from_attributes(model: str, attributes: Dict[str, str], defaults: Any = None) -> Any:
    """Build a parameter block for `model` from raw attribute values."""
    key = normalize_model_name(model)
    _model_cls, params_cls, table = MODELS[key]
    lookup = {name.lower(): name for name in table}
    changes: Dict[str, Any] = {}
    for name, value in attributes.items():
        canonical = lookup.get(name.lower())
        if canonical is None:
            raise ValueError(f"Unknown attribute {name!r} for {key}; known: {sorted(table)}")
        field_name, convert = table[canonical]
        changes[field_name] = convert(value)
    base = defaults if defaults is not None else params_cls()
    return replace(base, **changes)


def build_model(
    name: str,
    params: Any = None,
    rng: Any = None,
    validate: bool = False,
    **overrides: Any,
) -> PathLossModel:
    """Model factory.

    Args:
        name: 'ecc33', 'sui' or 'cost231wi' (spelling variants accepted)
        params: parameter block; defaults of the model when omitted
        rng: random source for SUI shadowing (ignored by the other models)
        validate: run the fail-fast range checks before building
        **overrides: individual parameter fields to change
    """
    key = normalize_model_name(name)
    model_cls, params_cls, _table = MODELS[key]
    if params is None:
        params = params_cls(**overrides)
    elif overrides:
        params = replace(params, **overrides)
    if validate:
        validate_params(params)
    if model_cls is SUIModel:
        return SUIModel(params, rng=rng)
    return model_cls(params)


def model_from_config(cfg: ModelConfig, model: Optional[str] = None, rng: Any = None, validate: bool = False) -> PathLossModel:
    name = model or cfg.model
    if not name:
        raise ValueError("No model selected (add a 'Model:' line or pass a model name)")
    params = params_from_attributes(name, cfg.attributes)
    return build_model(name, params=params, rng=rng, validate=validate)


def load_model_from_text_file(path: str | Path, model: Optional[str] = None, rng: Any = None, validate: bool = False) -> PathLossModel:
    text = Path(path).read_text(encoding="utf-8")
    return model_from_config(parse_attributes_text(text), model=model, rng=rng, validate=validate)
