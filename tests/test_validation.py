import pytest

from empirical_pathloss import (
    Cost231WIParameters,
    Ecc33Parameters,
    ParameterRangeError,
    SuiParameters,
    validate_params,
)


def test_defaults_are_valid():
    for params in (Ecc33Parameters(), SuiParameters(), SuiParameters.legacy(), Cost231WIParameters()):
        assert validate_params(params) is params


def test_ecc33_non_positive_inputs():
    with pytest.raises(ParameterRangeError) as exc:
        validate_params(Ecc33Parameters(frequency_ghz=0.0, rx_height_m=-1.0))
    assert exc.value.model == "ecc33"
    assert len(exc.value.problems) == 2


@pytest.mark.parametrize("tx_h,rx_h", [(9.9, 2.0), (80.1, 2.0), (30.0, 1.5), (30.0, 10.5)])
def test_sui_height_ranges(tx_h, rx_h):
    with pytest.raises(ParameterRangeError):
        validate_params(SuiParameters(tx_height_m=tx_h, rx_height_m=rx_h))


def test_sui_range_edges_accepted():
    validate_params(SuiParameters(tx_height_m=10.0, rx_height_m=10.0))
    validate_params(SuiParameters(tx_height_m=80.0, rx_height_m=2.0))


def test_cost231_ranges():
    with pytest.raises(ParameterRangeError) as exc:
        validate_params(Cost231WIParameters(frequency_mhz=2500.0, orientation_angle_deg=-5.0))
    assert "frequency_mhz" in str(exc.value)
    assert "orientation_angle_deg" in str(exc.value)


def test_cost231_roof_must_exceed_mobile():
    with pytest.raises(ParameterRangeError, match="roof_height_m"):
        validate_params(Cost231WIParameters(roof_height_m=3.0, mobile_height_m=3.0))


def test_range_error_is_value_error():
    with pytest.raises(ValueError):
        validate_params(Cost231WIParameters(base_height_m=60.0))


def test_unknown_block_type():
    with pytest.raises(TypeError):
        validate_params(object())
