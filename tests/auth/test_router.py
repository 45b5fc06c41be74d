"""Tests for auth domain router."""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlmodel import Session, select

from jalanma.auth.identity import TrustedIdentityProvider, get_identity_provider
from jalanma.main import app
from jalanma.user.models import User

# --- POST /rpc/createUser ---


def test_create_user(client: TestClient, session: Session):
    response = client.post(
        "/rpc/createUser",
        json={
            "email": "budi@example.com",
            "name": "Budi",
            "avatar_url": None,
            "provider": "email",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "budi@example.com"
    assert data["name"] == "Budi"
    assert data["avatar_url"] is None
    assert data["provider"] == "email"
    assert data["created_at"].endswith("Z")
    assert data["updated_at"].endswith("Z")

    stored = session.exec(select(User).where(User.email == "budi@example.com")).one()
    assert str(stored.id) == data["id"]


def test_create_user_duplicate_email(client: TestClient, test_user: User):
    response = client.post(
        "/rpc/createUser",
        json={"email": test_user.email, "name": "Again", "provider": "google"},
    )

    assert response.status_code == 409
    assert response.json() == {
        "type": "email_exists",
        "message": "Email already registered",
    }


def test_create_user_invalid_email(client: TestClient):
    response = client.post(
        "/rpc/createUser",
        json={"email": "not-an-email", "name": "X", "provider": "email"},
    )

    assert response.status_code == 422
    body = response.json()
    assert body["type"] == "validation_error"
    assert "email" in body["message"]


def test_create_user_unknown_provider(client: TestClient):
    response = client.post(
        "/rpc/createUser",
        json={"email": "x@example.com", "name": "X", "provider": "facebook"},
    )

    assert response.status_code == 422


def test_create_user_rejects_empty_name(client: TestClient):
    response = client.post(
        "/rpc/createUser",
        json={"email": "x@example.com", "name": "", "provider": "email"},
    )

    assert response.status_code == 422


# --- POST /rpc/loginUser ---


def test_login_user(client: TestClient, test_user: User):
    response = client.post(
        "/rpc/loginUser",
        json={"email": test_user.email, "provider": "email"},
    )

    assert response.status_code == 200
    assert response.json()["id"] == str(test_user.id)


def test_login_user_provider_mismatch_returns_null(
    client: TestClient, test_user: User
):
    response = client.post(
        "/rpc/loginUser",
        json={"email": test_user.email, "provider": "google", "provider_token": "tok"},
    )

    assert response.status_code == 200
    assert response.json() is None


def test_login_user_unknown_email_returns_null(client: TestClient):
    response = client.post(
        "/rpc/loginUser",
        json={"email": "ghost@example.com", "provider": "email"},
    )

    assert response.status_code == 200
    assert response.json() is None


def test_login_user_uses_injected_identity_provider(
    client: TestClient, test_user: User
):
    rejecting = MagicMock(spec=TrustedIdentityProvider)
    rejecting.verify.return_value = False
    app.dependency_overrides[get_identity_provider] = lambda: rejecting

    response = client.post(
        "/rpc/loginUser",
        json={"email": test_user.email, "provider": "email"},
    )

    assert response.status_code == 200
    assert response.json() is None
    rejecting.verify.assert_called_once()


def test_create_user_echoes_email_unchanged(client: TestClient):
    response = client.post(
        "/rpc/createUser",
        json={"email": "Siti@Jalan.ID", "name": "Siti", "provider": "google"},
    )

    assert response.status_code == 201
    assert response.json()["email"] == "Siti@Jalan.ID"

    login = client.post(
        "/rpc/loginUser",
        json={"email": "Siti@jalan.id", "provider": "google"},
    )
    assert login.status_code == 200
    assert login.json() is None
