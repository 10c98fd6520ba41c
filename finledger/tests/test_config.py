from __future__ import annotations

import pytest

from finledger.shared.config import AppConfig, DatabaseConfig, SecurityConfig, TokenConfig


def test_production_with_insecure_secret_exits() -> None:
    with pytest.raises(SystemExit):
        AppConfig(app_env="production", secret_key="dev")


def test_production_with_strong_secret_loads() -> None:
    config = AppConfig(app_env="prod", secret_key="k" * 48)
    assert config.is_production()


def test_nested_sections_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("TOKEN_TTL_SECONDS", "90")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("ENABLE_HSTS", "yes")

    config = AppConfig(secret_key="whatever-but-long-enough")

    assert config.database.url == "sqlite:///elsewhere.db"
    assert config.tokens.ttl_seconds == 90
    assert config.security.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.security.enable_hsts is True


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DATABASE_URL", "TOKEN_TTL_SECONDS", "ALLOWED_ORIGINS", "ENABLE_HSTS"):
        monkeypatch.delenv(name, raising=False)

    assert TokenConfig().ttl_seconds == 3600
    assert TokenConfig().algorithm == "HS256"
    assert SecurityConfig().allowed_origins == ["*"]
    assert DatabaseConfig().url.startswith("sqlite:///")


def test_production_warnings_list_weak_spots() -> None:
    config = AppConfig(app_env="development", secret_key="short-but-not-a-placeholder")

    warnings = config.production_warnings()

    assert any("SECRET_KEY" in w for w in warnings)
    assert any("ALLOWED_ORIGINS" in w for w in warnings)
    assert config.tokens.ttl.total_seconds() == config.tokens.ttl_seconds
