"""Tests for environment-driven configuration and dev diagnostics."""

from __future__ import annotations

import logging

import pytest

from backoffice import devtools
from backoffice.config import BaseConfig, DevConfig


def test_defaults(isolated_config):
    config = BaseConfig()
    assert config.DEV_MODE is True
    assert config.DATA_DIR == isolated_config.resolve()
    assert config.PAGE_SIZE == 25
    assert config.LOG_LEVEL == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BACKOFFICE_DEV_MODE", "off")
    monkeypatch.setenv("BACKOFFICE_PAGE_SIZE", "50")
    monkeypatch.setenv("BACKOFFICE_LOG_LEVEL", " debug ")

    config = BaseConfig()
    assert config.DEV_MODE is False
    assert config.PAGE_SIZE == 50
    assert config.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("value", ["0", "-5"])
def test_non_positive_page_size_is_rejected(monkeypatch, value):
    monkeypatch.setenv("BACKOFFICE_PAGE_SIZE", value)
    with pytest.raises(ValueError):
        BaseConfig()


def test_dev_config_forces_dev_mode(monkeypatch):
    monkeypatch.setenv("BACKOFFICE_DEV_MODE", "0")
    assert DevConfig().DEV_MODE is True


def test_data_dir_is_not_created_until_logging_starts(isolated_config):
    BaseConfig()
    assert not isolated_config.exists()


def test_dev_log_only_in_dev_mode(monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="backoffice")

    devtools.dev_log(None, "visible", context={"path": "/users"})
    assert any(r.getMessage() == "[DEV] visible (path=/users)" for r in caplog.records)

    caplog.clear()
    monkeypatch.setenv("BACKOFFICE_DEV_MODE", "false")
    devtools.configure(BaseConfig())
    devtools.dev_log(None, "hidden")
    assert caplog.records == []


def test_explicit_config_overrides_active_one(caplog):
    caplog.set_level(logging.INFO, logger="backoffice")
    quiet = BaseConfig()
    quiet.DEV_MODE = False
    devtools.dev_log(quiet, "hidden")
    assert caplog.records == []


def test_active_config_is_built_lazily():
    devtools.configure(None)
    assert isinstance(devtools.active_config(), BaseConfig)
    assert devtools.active_config() is devtools.active_config()
