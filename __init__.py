from .base import PathLossModel, ParameterEnum
from .geometry import euclidean_distance_m, haversine_distance_m
from .ecc33 import (
    ECC33Model,
    Ecc33Parameters,
    Ecc33Environment,
    Ecc33Formula,
    Ecc33Terms,
    ecc33_terms,
)
from .sui import (
    SUIModel,
    SuiParameters,
    SuiTerrain,
    SuiFormula,
    SuiTerms,
    TerrainConstants,
    TERRAIN_CONSTANTS,
    ShadowingDraw,
    draw_shadowing,
    path_loss_exponent,
    sui_terms,
)
from .cost231_wi import (
    Cost231WIModel,
    Cost231WIParameters,
    Cost231Environment,
    Cost231Terms,
    orientation_loss_db,
    cost231_wi_terms,
)
from .validation import (
    ParameterRangeError,
    validate_ecc33_params,
    validate_sui_params,
    validate_cost231_params,
    validate_params,
)
from .config import (
    ModelConfig,
    parse_attributes_text,
    params_from_attributes,
    build_model,
    model_from_config,
    load_model_from_text_file,
)
from .logging_utils import setup_logger
from .sweep import (
    LinkSweep,
    SweepRow,
    distance_grid_m,
    loss_curve_db,
    run_sweep,
    rows_to_table,
    print_table,
    rows_to_dataframe,
    save_rows_csv,
)
from .plots import render_loss_curves

__all__ = [
    "PathLossModel",
    "ParameterEnum",
    "euclidean_distance_m",
    "haversine_distance_m",
    "ECC33Model",
    "Ecc33Parameters",
    "Ecc33Environment",
    "Ecc33Formula",
    "Ecc33Terms",
    "ecc33_terms",
    "SUIModel",
    "SuiParameters",
    "SuiTerrain",
    "SuiFormula",
    "SuiTerms",
    "TerrainConstants",
    "TERRAIN_CONSTANTS",
    "ShadowingDraw",
    "draw_shadowing",
    "path_loss_exponent",
    "sui_terms",
    "Cost231WIModel",
    "Cost231WIParameters",
    "Cost231Environment",
    "Cost231Terms",
    "orientation_loss_db",
    "cost231_wi_terms",
    "ParameterRangeError",
    "validate_ecc33_params",
    "validate_sui_params",
    "validate_cost231_params",
    "validate_params",
    "ModelConfig",
    "parse_attributes_text",
    "params_from_attributes",
    "build_model",
    "model_from_config",
    "load_model_from_text_file",
    "setup_logger",
    "LinkSweep",
    "SweepRow",
    "distance_grid_m",
    "loss_curve_db",
    "run_sweep",
    "rows_to_table",
    "print_table",
    "rows_to_dataframe",
    "save_rows_csv",
    "render_loss_curves",
]
