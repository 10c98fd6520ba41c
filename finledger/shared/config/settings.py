# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from datetime import timedelta
from functools import lru_cache
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_WEAK_SECRETS = frozenset({"", "dev", "development", "test", "secret", "changeme"})
_MIN_PRODUCTION_SECRET = 32


def _env_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


EnvBool = Annotated[bool, BeforeValidator(_env_bool)]


class _Section(BaseSettings):
    """A group of settings read straight from the environment by alias."""

    model_config = SettingsConfigDict(env_file=".env", validate_by_name=True, extra="ignore")


class DatabaseConfig(_Section):
    url: str = Field("sqlite:///finledger.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class TokenConfig(_Section):
    ttl_seconds: int = Field(3600, ge=1, alias="TOKEN_TTL_SECONDS")
    algorithm: str = Field("HS256", alias="TOKEN_ALGORITHM")
    issuer: str = Field("finledger", min_length=1, alias="TOKEN_ISSUER")

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self.ttl_seconds)


class SecurityConfig(_Section):
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: EnvBool = Field(False, alias="ENABLE_HSTS")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    debug_logging: EnvBool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    tokens: TokenConfig = Field(default_factory=TokenConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def production_warnings(self) -> list[str]:
        warnings = []
        if len(self.secret_key) < _MIN_PRODUCTION_SECRET:
            warnings.append(f"SECRET_KEY is shorter than {_MIN_PRODUCTION_SECRET} characters")
        if "*" in self.security.allowed_origins:
            warnings.append("CORS allows any origin (ALLOWED_ORIGINS=*)")
        if not self.security.enable_hsts:
            warnings.append("HSTS is disabled")
        if self.database.is_sqlite:
            warnings.append("DATABASE_URL points at SQLite")
        return warnings

    @model_validator(mode="after")
    def _refuse_weak_production_secret(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key.strip().lower() in _WEAK_SECRETS:
            print(
                "FATAL: APP_ENV is production but SECRET_KEY is a placeholder.\n"
                "SECRET_KEY signs every access token. Set it to a random value, e.g.\n"
                "  python -c \"import secrets; print(secrets.token_urlsafe(48))\"",
                file=sys.stderr,
            )
            sys.exit(1)

        for warning in self.production_warnings():
            print(f"WARNING (production): {warning}", file=sys.stderr)
        return self


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "TokenConfig", "load_config"]
