from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from finledger.app import create_app
from finledger.infrastructure.container import Container
from finledger.shared.config import AppConfig, DatabaseConfig

TEST_SECRET_KEY = "test-signing-key-not-for-production"


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "app.log"))


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        app_env="test",
        secret_key=TEST_SECRET_KEY,
        database=DatabaseConfig(url="sqlite://"),
    )


@pytest.fixture()
def container(config: AppConfig) -> Iterator[Container]:
    container = Container(config)
    yield container
    container.engine.dispose()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as client:
        yield client


@pytest.fixture()
def login_as(client: FlaskClient) -> Callable[[str, str], str]:
    """Register ``email`` (if needed) and return a fresh bearer token for it."""

    def _login(email: str, secret: str) -> str:
        register = client.post("/auth/register", json={"email": email, "secret": secret})
        assert register.status_code in (201, 400), register.get_json()
        login = client.post("/auth/login", json={"email": email, "secret": secret})
        assert login.status_code == 200, login.get_json()
        return login.get_json()["token"]

    return _login
