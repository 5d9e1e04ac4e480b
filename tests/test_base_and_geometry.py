import math

import numpy as np
import pytest

from empirical_pathloss import (
    Cost231WIModel,
    Cost231WIParameters,
    ECC33Model,
    Ecc33Parameters,
    SUIModel,
    SuiParameters,
    euclidean_distance_m,
    haversine_distance_m,
)


def test_euclidean_distance_2d_and_3d():
    assert euclidean_distance_m([0, 0], [3, 4]) == pytest.approx(5.0)
    assert euclidean_distance_m((0.0, 0.0, 30.0), (1000.0, 0.0, 2.0)) == pytest.approx(math.hypot(1000.0, 28.0))
    with pytest.raises(ValueError):
        euclidean_distance_m([0, 0], [0, 0, 1])


def test_haversine_one_degree_latitude():
    d = haversine_distance_m(41.0, 29.0, 42.0, 29.0)
    assert 111_000.0 < d < 111_400.0


def test_loss_between_positions_matches_scalar_distance():
    tx = np.array([0.0, 0.0, 50.0])
    rx = np.array([3000.0, 4000.0, 2.0])
    d = euclidean_distance_m(tx, rx)
    for model in (ECC33Model(), Cost231WIModel(), SUIModel(SuiParameters(shadowing_enabled=False))):
        assert model.loss_between(tx, rx) == model.compute_loss(d)
        assert model.received_power_between(20.0, tx, rx) == 20.0 + model.compute_loss(d)


def test_path_loss_db_is_positive_attenuation():
    model = ECC33Model()
    assert model.path_loss_db(2000.0) == -model.compute_loss(2000.0)
    assert model.path_loss_db(2000.0) > 0


def test_configure_replaces_frozen_block():
    model = ECC33Model()
    before = model.params
    after = model.configure(rx_height_m=6.0, environment="Urban")
    assert before.rx_height_m == 2.0
    assert model.params is after
    assert after.rx_height_m == 6.0
    assert model.compute_loss(5000.0) != ECC33Model(before).compute_loss(5000.0)


def test_set_parameters_rejects_other_model_block():
    model = Cost231WIModel()
    with pytest.raises(TypeError):
        model.set_parameters(Ecc33Parameters())
    model.set_parameters(Cost231WIParameters(street_width_m=20.0))
    assert model.params.street_width_m == 20.0


def test_parameter_blocks_are_immutable():
    params = SuiParameters()
    with pytest.raises(AttributeError):
        params.tx_height_m = 30.0
