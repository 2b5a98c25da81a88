import logging

from geom2d import Rectangle, Vector
from geom2d.config import eps
from geom2d.constants import DEFAULT_EPS, EPS_ENV_VAR


def test_default_tolerance(monkeypatch):
    monkeypatch.delenv(EPS_ENV_VAR, raising=False)
    assert eps() == DEFAULT_EPS


def test_tolerance_from_environment(monkeypatch):
    rect = Rectangle(0, 0, 10, 5)
    near = Vector(10.3, 2)

    monkeypatch.delenv(EPS_ENV_VAR, raising=False)
    assert not rect.contains(near)

    monkeypatch.setenv(EPS_ENV_VAR, "0.5")
    assert eps() == 0.5
    assert rect.contains(near)


def test_invalid_tolerance_falls_back(monkeypatch, caplog):
    with caplog.at_level(logging.WARNING, logger="geom2d.config"):
        monkeypatch.setenv(EPS_ENV_VAR, "tiny")
        assert eps() == DEFAULT_EPS

        monkeypatch.setenv(EPS_ENV_VAR, "-1")
        assert eps() == DEFAULT_EPS

    assert any(EPS_ENV_VAR in r.getMessage() for r in caplog.records)
