"""Unit tests for ormassert.config."""

import pytest

from ormassert import config


def test_env_var_wins(monkeypatch):
    """ORMASSERT_DB_URL is returned when set."""
    monkeypatch.setenv(config.DB_URL_ENVVAR, "postgresql+psycopg://u@h/db")
    assert config.get_db_url() == "postgresql+psycopg://u@h/db"


def test_default_when_unset(monkeypatch):
    """The in-memory SQLite URL is the default."""
    monkeypatch.delenv(config.DB_URL_ENVVAR, raising=False)
    assert config.get_db_url() == config.DEFAULT_DB_URL


def test_empty_is_unset(monkeypatch):
    """An empty variable counts as unset."""
    monkeypatch.setenv(config.DB_URL_ENVVAR, "")
    assert config.get_db_url(default="sqlite://") == "sqlite://"


def test_required_raises(monkeypatch):
    """With no default, a missing variable is an error."""
    monkeypatch.delenv(config.DB_URL_ENVVAR, raising=False)
    with pytest.raises(config.DatabaseUrlNotSetError, match="ORMASSERT_DB_URL"):
        config.get_db_url(default=None)
