"""Tests for configuration helpers."""

import pytest
from dynaconf import Dynaconf
from loginwidget import config


def test_settings_defaults() -> None:
    """Default settings compare digests strictly and carry no token."""

    settings = config.get_settings(refresh=True)

    assert settings.digest_case == "strict"
    assert settings.bot_token is None


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefixed environment variables populate the settings."""

    monkeypatch.setenv("LOGINWIDGET_BOT_TOKEN", "123456:secret")
    monkeypatch.setenv("LOGINWIDGET_DIGEST_CASE", "INSENSITIVE")

    settings = config.get_settings(refresh=True)

    assert settings.bot_token == "123456:secret"
    assert settings.digest_case == "insensitive"


def test_settings_invalid_digest_case(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unknown digest case policies raise a helpful error."""

    monkeypatch.setenv("LOGINWIDGET_DIGEST_CASE", "upper")

    with pytest.raises(ValueError, match="LOGINWIDGET_DIGEST_CASE"):
        config.get_settings(refresh=True)


def test_normalize_digest_case_none() -> None:
    """Explicit `None` values fall back to defaults."""

    source = Dynaconf(settings_files=[], load_dotenv=False, environments=False)
    source.set("DIGEST_CASE", None)

    normalized = config._normalize_settings(source)

    assert normalized.digest_case == "strict"


def test_normalize_numeric_token_is_text() -> None:
    """Tokens that parse as numbers are kept as text."""

    source = Dynaconf(settings_files=[], load_dotenv=False, environments=False)
    source.set("BOT_TOKEN", 123456)

    normalized = config._normalize_settings(source)

    assert normalized.bot_token == "123456"


def test_normalize_empty_token_is_unset() -> None:
    """An empty token is treated as missing."""

    source = Dynaconf(settings_files=[], load_dotenv=False, environments=False)
    source.set("BOT_TOKEN", "")

    assert config._normalize_settings(source).bot_token is None


def test_get_settings_refresh(monkeypatch: pytest.MonkeyPatch) -> None:
    """get_settings refresh flag should reload cached values."""

    monkeypatch.setenv("LOGINWIDGET_BOT_TOKEN", "initial")
    settings = config.get_settings(refresh=True)
    assert settings.bot_token == "initial"

    monkeypatch.setenv("LOGINWIDGET_BOT_TOKEN", "updated")
    assert config.get_settings().bot_token == "initial"
    refreshed = config.get_settings(refresh=True)
    assert refreshed.bot_token == "updated"
