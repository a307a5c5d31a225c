import numpy as np
import pandas as pd
import pytest

from power_curve.io.sample_loader import (
    load_power_samples,
    load_sample_table,
    power_samples_from_dataframe,
    power_samples_from_values,
)


def _make_df(n=120):
    idx = pd.date_range("2025-01-01 06:00:00", periods=n, freq="1s")
    rng = np.random.default_rng(1)
    power = 200 + rng.normal(0, 15, n)
    power[10:15] = np.nan
    return pd.DataFrame({"timestamp": idx, "power": power, "heart_rate": 140.0})


def test_missing_values_become_zero():
    samples = power_samples_from_values([100, None, 250.4, float("nan"), 300])
    assert samples.tolist() == [100, 0, 250, 0, 300]
    assert samples.dtype == np.int64


def test_dataframe_power_column():
    df = _make_df()
    samples = power_samples_from_dataframe(df)
    assert len(samples) == len(df)
    assert (samples[10:15] == 0).all()
    assert (samples[20:] > 0).all()


def test_missing_column_rejected():
    with pytest.raises(ValueError):
        power_samples_from_dataframe(pd.DataFrame({"watts": [1, 2]}))


def test_csv_round_trip(tmp_path):
    path = tmp_path / "ride.csv"
    pd.DataFrame({"watts": [100, 200, None, 400]}).to_csv(path, index=False)
    assert load_power_samples(str(path), column="watts").tolist() == [100, 200, 0, 400]


def test_json_records(tmp_path):
    path = tmp_path / "ride.json"
    pd.DataFrame({"power": [10, 20, 30]}).to_json(path, orient="records")
    assert load_power_samples(str(path)).tolist() == [10, 20, 30]


def test_txt_one_value_per_line(tmp_path):
    path = tmp_path / "ride.txt"
    path.write_text("100\n200\n\n300\n")
    assert load_power_samples(str(path)).tolist() == [100, 200, 300]


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "ride.fit"
    path.write_bytes(b"\x0e\x10")
    with pytest.raises(ValueError):
        load_sample_table(str(path))


def test_non_finite_values_become_zero():
    samples = power_samples_from_values([100, float("inf"), 200, float("-inf")])
    assert samples.tolist() == [100, 0, 200, 0]


def test_negative_values_clipped_to_zero():
    assert power_samples_from_values([-50, 100, -0.4]).tolist() == [0, 100, 0]
    df = pd.DataFrame({"power": [-20.0, 310.0, np.inf]})
    assert power_samples_from_dataframe(df).tolist() == [0, 310, 0]


def test_parquet_table(tmp_path):
    path = tmp_path / "ride.parquet"
    pd.DataFrame({"power": [120.0, None, 240.0]}).to_parquet(path, index=False)
    assert load_power_samples(str(path)).tolist() == [120, 0, 240]
