import pytest

from power_curve.config import get_config, reset_config


def test_defaults():
    cfg = get_config()
    assert cfg.engine.max_workers is None
    assert cfg.engine.method == "prefix"
    assert cfg.resolved_workers() >= 1
    assert cfg.validate_configuration()


def test_update_and_summary():
    cfg = get_config()
    cfg.update_engine_settings(max_workers=3)
    assert cfg.resolved_workers() == 3
    assert cfg.get_summary()["user_inputs"] == {"engine_max_workers": 3}


def test_unknown_setting_rejected():
    with pytest.raises(ValueError):
        get_config().update_engine_settings(threads=4)


def test_validation_errors():
    cfg = get_config()
    cfg.update_engine_settings(max_workers=0, method="fft")
    with pytest.raises(ValueError) as exc:
        cfg.validate_configuration()
    assert "max_workers" in str(exc.value)
    assert "method" in str(exc.value)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("POWER_CURVE_MAX_WORKERS", "2")
    monkeypatch.setenv("POWER_CURVE_METHOD", "naive")
    cfg = reset_config()
    assert cfg.engine.max_workers == 2
    assert cfg.engine.method == "naive"


def test_bad_environment_value(monkeypatch):
    monkeypatch.setenv("POWER_CURVE_MAX_WORKERS", "many")
    with pytest.raises(ValueError):
        reset_config()
