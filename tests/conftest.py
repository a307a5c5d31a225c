import pytest

from power_curve.config import reset_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    # Engine settings are global; keep tests independent of each other and of the environment
    monkeypatch.delenv("POWER_CURVE_MAX_WORKERS", raising=False)
    monkeypatch.delenv("POWER_CURVE_METHOD", raising=False)
    reset_config()
    yield
    monkeypatch.undo()
    reset_config()
