from __future__ import annotations

from datetime import UTC, datetime, timedelta
from decimal import Decimal

from flask.testing import FlaskClient
from sqlalchemy import func, select

from finledger.application.services.tokens import JwtTokenService
from finledger.infrastructure.container import Container
from finledger.infrastructure.db.models import LedgerTransaction
from finledger.infrastructure.unit_of_work import session_scope


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def count_transactions(container: Container) -> int:
    with session_scope(container.session_factory) as session:
        return session.scalar(select(func.count()).select_from(LedgerTransaction)) or 0


def test_register_login_deposit_flow(client: FlaskClient) -> None:
    register = client.post(
        "/auth/register", json={"email": "alice@example.com", "secret": "pw123"}
    )
    assert register.status_code == 201
    user_id = register.get_json()["id"]

    login = client.post("/auth/login", json={"email": "alice@example.com", "secret": "pw123"})
    assert login.status_code == 200
    token = login.get_json()["token"]

    created = client.post(
        "/transactions", json={"amount": 50, "kind": "deposit"}, headers=bearer(token)
    )
    assert created.status_code == 201
    body = created.get_json()
    assert body["owner"] == user_id
    assert body["amount"] == 50.0
    assert body["kind"] == "deposit"
    assert body["counterparty"] is None
    assert body["timestamp"]

    listed = client.get("/transactions", headers=bearer(token))
    assert listed.status_code == 200
    assert listed.get_json() == [body]


def test_create_without_token_is_rejected(client: FlaskClient, container: Container) -> None:
    response = client.post("/transactions", json={"amount": 50, "kind": "deposit"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "unauthorized"
    assert response.headers["WWW-Authenticate"].startswith("Bearer")
    assert count_transactions(container) == 0


def test_list_with_garbage_token_is_rejected(client: FlaskClient) -> None:
    response = client.get("/transactions", headers=bearer("not-a-token"))

    assert response.status_code == 401
    assert response.get_json() == {
        "error": "unauthorized",
        "message": "Authentication required",
    }


def test_non_bearer_scheme_is_rejected(client: FlaskClient) -> None:
    response = client.get("/transactions", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert response.status_code == 401


def test_expired_token_is_rejected(client: FlaskClient, container: Container) -> None:
    register = client.post("/auth/register", json={"email": "old@example.com", "secret": "pw"})
    user_id = register.get_json()["id"]
    two_hours_ago = datetime.now(UTC) - timedelta(hours=2)
    stale = JwtTokenService(
        secret_key=container.config.secret_key,
        ttl=timedelta(hours=1),
        clock=lambda: two_hours_ago,
    ).issue(user_id)

    response = client.get("/transactions", headers=bearer(stale.token))

    assert response.status_code == 401
    assert response.get_json()["error"] == "unauthorized"


def test_invalid_kind_is_rejected(login_as, client: FlaskClient, container: Container) -> None:
    token = login_as("alice@example.com", "pw123")

    response = client.post(
        "/transactions", json={"amount": 10, "kind": "invalid-kind"}, headers=bearer(token)
    )

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert "kind" in payload["context"]["fields"]
    assert count_transactions(container) == 0


def test_invalid_amount_is_rejected(login_as, client: FlaskClient, container: Container) -> None:
    token = login_as("alice@example.com", "pw123")

    for amount in ("ten", None, True, "1.005"):
        response = client.post(
            "/transactions", json={"amount": amount, "kind": "deposit"}, headers=bearer(token)
        )
        assert response.status_code == 400, amount
        assert response.get_json()["error"] == "validation_error"

    assert count_transactions(container) == 0


def test_missing_body_is_rejected(login_as, client: FlaskClient) -> None:
    token = login_as("alice@example.com", "pw123")
    response = client.post("/transactions", data="nope", headers=bearer(token))
    assert response.status_code == 400


def test_transactions_are_scoped_to_owner(login_as, client: FlaskClient) -> None:
    alice = login_as("alice@example.com", "pw123")
    bob = login_as("bob@example.com", "hunter2")

    client.post("/transactions", json={"amount": 5, "kind": "deposit"}, headers=bearer(alice))
    client.post(
        "/transactions",
        json={"amount": "-7.25", "kind": "transfer", "counterparty": "carol"},
        headers=bearer(bob),
    )

    alice_rows = client.get("/transactions", headers=bearer(alice)).get_json()
    bob_rows = client.get("/transactions", headers=bearer(bob)).get_json()

    assert [row["amount"] for row in alice_rows] == [5.0]
    assert [(row["amount"], row["counterparty"]) for row in bob_rows] == [(-7.25, "carol")]
    assert alice_rows[0]["owner"] != bob_rows[0]["owner"]


def test_owner_in_body_is_ignored(login_as, client: FlaskClient) -> None:
    alice = login_as("alice@example.com", "pw123")
    bob = login_as("bob@example.com", "hunter2")

    created = client.post(
        "/transactions",
        json={"amount": 1, "kind": "deposit", "owner": 999, "user_id": 999},
        headers=bearer(alice),
    )

    assert created.status_code == 201
    assert created.get_json()["owner"] != 999
    assert client.get("/transactions", headers=bearer(bob)).get_json() == []


def test_list_keeps_insertion_order(login_as, client: FlaskClient) -> None:
    token = login_as("alice@example.com", "pw123")
    for amount in (3, 1, 2):
        client.post(
            "/transactions", json={"amount": amount, "kind": "deposit"}, headers=bearer(token)
        )

    rows = client.get("/transactions", headers=bearer(token)).get_json()
    assert [row["amount"] for row in rows] == [3.0, 1.0, 2.0]


def test_duplicate_registration(client: FlaskClient) -> None:
    first = client.post("/auth/register", json={"email": "alice@example.com", "secret": "pw123"})
    second = client.post(
        "/auth/register", json={"email": "Alice@Example.com", "secret": "other"}
    )

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.get_json()["error"] == "duplicate_email"


def test_wrong_secret_and_unknown_email_look_the_same(client: FlaskClient) -> None:
    client.post("/auth/register", json={"email": "alice@example.com", "secret": "pw123"})

    wrong = client.post("/auth/login", json={"email": "alice@example.com", "secret": "nope"})
    unknown = client.post("/auth/login", json={"email": "ghost@example.com", "secret": "pw123"})

    assert wrong.status_code == unknown.status_code == 400
    assert wrong.get_json() == unknown.get_json()
    assert wrong.get_json()["error"] == "invalid_credentials"


def test_store_failure_is_generic_500(
    login_as, client: FlaskClient, container: Container
) -> None:
    token = login_as("alice@example.com", "pw123")
    LedgerTransaction.__table__.drop(container.engine)

    response = client.post(
        "/transactions", json={"amount": 1, "kind": "deposit"}, headers=bearer(token)
    )

    assert response.status_code == 500
    assert response.get_json() == {
        "error": "internal_error",
        "message": "Internal server error",
    }


def test_health_and_response_headers(client: FlaskClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_amount_survives_create_and_list_exactly(login_as, client: FlaskClient) -> None:
    token = login_as("alice@example.com", "pw123")

    created = client.post(
        "/transactions",
        json={"amount": "9999999999999.99", "kind": "deposit"},
        headers=bearer(token),
    )
    assert created.status_code == 201
    assert Decimal(repr(created.get_json()["amount"])) == Decimal("9999999999999.99")

    listed = client.get("/transactions", headers=bearer(token)).get_json()
    assert listed == [created.get_json()]
    assert Decimal(repr(listed[0]["amount"])) == Decimal("9999999999999.99")


def test_amount_that_would_lose_precision_is_rejected(
    login_as, client: FlaskClient, container: Container
) -> None:
    token = login_as("alice@example.com", "pw123")

    response = client.post(
        "/transactions",
        json={"amount": "1234567890123456.78", "kind": "deposit"},
        headers=bearer(token),
    )

    assert response.status_code == 400
    assert response.get_json()["message"].startswith("amount:")
    assert count_transactions(container) == 0


def test_trailing_zero_amount_is_accepted(login_as, client: FlaskClient) -> None:
    token = login_as("alice@example.com", "pw123")

    response = client.post(
        "/transactions", json={"amount": "1.000", "kind": "deposit"}, headers=bearer(token)
    )

    assert response.status_code == 201
    assert response.get_json()["amount"] == 1.0


def test_generated_request_id_is_echoed(client: FlaskClient) -> None:
    first = client.get("/health").headers["X-Request-ID"]
    second = client.get("/health", headers={"X-Request-ID": "x" * 65}).headers["X-Request-ID"]

    assert len(first) == 16 and first != "-"
    assert len(second) == 16 and second != first
