"""Tests for environment-driven configuration and the app factory."""

from __future__ import annotations

from pathlib import Path

import pytest

from vaultflow import config as config_module
from vaultflow import create_app


def test_defaults_come_from_environment(tmp_path):
    cfg = config_module.BaseConfig()

    assert cfg.SECRET_KEY == "test-secret"
    assert cfg.DATA_DIR == (tmp_path / "instance").resolve()
    assert cfg.DATA_DIR.is_dir()
    assert cfg.DATABASE_URL == f"sqlite:///{tmp_path / 'app.db'}"
    assert cfg.TOKEN_MAX_AGE == 30 * 24 * 60 * 60
    assert cfg.PORT == 3000


def test_database_url_falls_back_to_data_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("VAULTFLOW_DATABASE_URL")

    cfg = config_module.BaseConfig()

    assert cfg.DATABASE_URL == f"sqlite:///{Path(cfg.DATA_DIR) / 'vaultflow.db'}"


def test_integer_settings_are_parsed(monkeypatch):
    monkeypatch.setenv("VAULTFLOW_TOKEN_MAX_AGE", "3600")
    monkeypatch.setenv("PORT", "8080")

    cfg = config_module.BaseConfig()

    assert cfg.TOKEN_MAX_AGE == 3600
    assert cfg.PORT == 8080


def test_bad_integer_setting_is_reported(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ValueError, match="PORT must be an integer"):
        config_module.BaseConfig()


def test_production_requires_secret_key(monkeypatch):
    monkeypatch.setenv("VAULTFLOW_DEV_MODE", "false")
    monkeypatch.delenv("VAULTFLOW_SECRET_KEY")

    with pytest.raises(ValueError, match="VAULTFLOW_SECRET_KEY"):
        config_module.BaseConfig()


def test_sqlite_engine_options():
    cfg = config_module.BaseConfig()
    assert cfg.sqlalchemy_engine_options() == {"connect_args": {"check_same_thread": False}}

    cfg.DATABASE_URL = "postgresql://localhost/vaultflow"
    assert cfg.sqlalchemy_engine_options() == {"pool_pre_ping": True}


def test_create_app_selects_config(app):
    assert app.config["TESTING"] is True
    assert isinstance(app.config["VAULTFLOW_CONFIG"], config_module.TestConfig)
    assert {"health", "auth", "vaults", "transactions", "goals", "analytics"} <= set(app.blueprints)


def test_create_app_development():
    app = create_app("development")
    try:
        assert app.config["DEBUG"] is True
    finally:
        app.extensions["vaultflow"].dispose()
