import logging

import numpy as np
import pandas as pd
import pytest

from empirical_pathloss import (
    Cost231WIModel,
    ECC33Model,
    SUIModel,
    SuiParameters,
    setup_logger,
)
from empirical_pathloss.cli import main
from empirical_pathloss.plots import render_loss_curves
from empirical_pathloss.sweep import (
    COLUMNS,
    LinkSweep,
    distance_grid_m,
    loss_curve_db,
    rows_to_dataframe,
    rows_to_table,
    run_sweep,
    save_rows_csv,
)


def _models():
    return {
        "ecc33": ECC33Model(),
        "sui": SUIModel(SuiParameters(shadowing_enabled=False)),
        "cost231wi": Cost231WIModel(),
    }


def test_distance_grid_inclusive():
    assert distance_grid_m(100.0, 500.0, 100.0) == [100.0, 200.0, 300.0, 400.0, 500.0]
    assert distance_grid_m(10.0, 10.0, 5.0) == [10.0]
    with pytest.raises(ValueError):
        distance_grid_m(0.0, 100.0, 0.0)
    with pytest.raises(ValueError):
        distance_grid_m(100.0, 0.0, 10.0)


def test_run_sweep_rows():
    rows = run_sweep(_models(), LinkSweep(distances_m=[10.0, 1000.0], tx_power_dbm=43.0))
    assert len(rows) == 6
    for r in rows:
        assert r.path_loss_db == -r.loss_db
        assert r.rx_power_dbm == 43.0 + r.loss_db
    gated = [r for r in rows if r.distance_m == 10.0]
    assert all(r.loss_db == 0.0 for r in gated)
    table = rows_to_table(rows)
    assert table[0] == COLUMNS
    assert len(table) == 7


def test_loss_curve_matches_model():
    model = ECC33Model()
    d = [500.0, 1000.0, 2000.0]
    curve = loss_curve_db(model, d)
    assert isinstance(curve, np.ndarray)
    assert np.allclose(curve, [model.compute_loss(x) for x in d])


def test_dataframe_and_csv(tmp_path):
    rows = run_sweep(_models(), LinkSweep(distances_m=distance_grid_m(100.0, 300.0, 100.0)))
    df = rows_to_dataframe(rows)
    assert list(df.columns) == COLUMNS
    assert len(df) == 9
    out = save_rows_csv(rows, tmp_path / "nested" / "loss.csv")
    back = pd.read_csv(out)
    assert list(back.columns) == COLUMNS
    assert back["loss_db"].tolist() == pytest.approx(df["loss_db"].tolist())


def test_render_loss_curves(tmp_path):
    out = render_loss_curves(_models(), distance_grid_m(50.0, 2000.0, 50.0), outfile=tmp_path / "curves.png",
                             log_distance=True)
    assert out.exists()
    assert out.stat().st_size > 0
    with pytest.raises(ValueError):
        render_loss_curves({}, [100.0], outfile=tmp_path / "empty.png")


def test_cli_sweep_writes_outputs(tmp_path, capsys):
    csv = tmp_path / "loss.csv"
    png = tmp_path / "loss.png"
    rc = main([
        "--model", "cost231wi", "--start", "100", "--stop", "1000", "--step", "300",
        "--set", "Environment=Urban", "--tx-power", "30", "--out", str(csv), "--plot", str(png),
    ])
    assert rc == 0
    assert csv.exists() and png.exists()
    df = pd.read_csv(csv)
    assert df["distance_m"].tolist() == [100.0, 400.0, 700.0, 1000.0]
    assert (df["rx_power_dbm"] - df["loss_db"]).tolist() == pytest.approx([30.0] * 4)
    printed = capsys.readouterr().out
    assert printed.splitlines()[0].startswith("model")


def test_cli_config_file_and_seeded_shadowing(tmp_path, capsys):
    cfg = tmp_path / "sui.txt"
    cfg.write_text("Model: SUI\nEnvironment = CategoryC\n", encoding="utf-8")
    main(["--config", str(cfg), "--distance", "1500", "--seed", "5"])
    first = capsys.readouterr().out
    main(["--config", str(cfg), "--distance", "1500", "--seed", "5"])
    second = capsys.readouterr().out
    assert first == second


def test_cli_no_shadowing_ignored_for_other_models(capsys):
    assert main(["--model", "ecc33", "--distance", "2000", "--no-shadowing"]) == 0
    assert "ecc33" in capsys.readouterr().out


def test_cli_requires_model_and_distances():
    with pytest.raises(SystemExit):
        main(["--distance", "100"])
    with pytest.raises(SystemExit):
        main(["--model", "sui"])


def test_setup_logger_replaces_handlers(tmp_path):
    log_file = tmp_path / "run.log"
    logger = setup_logger("empirical_pathloss.test", level="DEBUG", log_file=str(log_file))
    logger = setup_logger("empirical_pathloss.test", level="DEBUG", log_file=str(log_file))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    logger.debug("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text()
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def test_cli_no_shadowing_makes_sui_seed_independent(capsys):
    main(["--model", "sui", "--distance", "800", "--distance", "3000", "--seed", "1", "--no-shadowing"])
    first = capsys.readouterr().out
    main(["--model", "sui", "--distance", "800", "--distance", "3000", "--seed", "2", "--no-shadowing"])
    second = capsys.readouterr().out
    assert first == second
    main(["--model", "sui", "--distance", "800", "--distance", "3000", "--seed", "2"])
    assert capsys.readouterr().out != first


def test_cli_reports_bad_model_and_attribute_as_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--model", "okumura", "--distance", "100"])
    assert exc.value.code == 2
    assert "Unknown model" in capsys.readouterr().err
    with pytest.raises(SystemExit) as exc:
        main(["--model", "cost231wi", "--distance", "100", "--set", "Width=wide"])
    assert exc.value.code == 2
