"""Tests for login, token handling and the admin guard."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.core.errors import AuthError
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from tests.fakes import FakeSupabase

API = "/api/v1"


class TestPasswords:
    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("hunter2")
        assert hashed != "hunter2"
        assert verify_password("hunter2", hashed)
        assert not verify_password("hunter3", hashed)

    def test_malformed_hash_is_a_mismatch(self) -> None:
        assert verify_password("hunter2", "not-a-hash") is False


class TestTokens:
    def test_round_trip_claims(self) -> None:
        claims = decode_access_token(create_access_token(7, "ada", "admin"))
        assert claims["sub"] == "7"
        assert claims["username"] == "ada"
        assert claims["role"] == "admin"

    def test_expired_token(self) -> None:
        token = create_access_token(1, "admin", "admin", expires_delta=timedelta(seconds=-5))
        with pytest.raises(AuthError) as info:
            decode_access_token(token)
        assert info.value.message == "Token expired"

    def test_wrong_signature(self) -> None:
        token = jwt.encode({"sub": "1", "role": "admin"}, "other-secret", algorithm="HS256")
        with pytest.raises(AuthError) as info:
            decode_access_token(token)
        assert info.value.message == "Invalid token"


class TestLogin:
    def test_success_returns_token_without_password(
        self, test_client: TestClient, admin_user: dict[str, Any]
    ) -> None:
        response = test_client.post(
            f"{API}/auth/login", json={"username": "admin", "password": "s3cret-pass"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["user"] == {
            "id": admin_user["id"],
            "username": "admin",
            "email": "admin@example.com",
            "role": "admin",
        }
        assert "password" not in response.text
        assert "password_hash" not in response.text

    def test_issued_token_opens_admin_routes(
        self, test_client: TestClient, admin_user: dict[str, Any]
    ) -> None:
        token = test_client.post(
            f"{API}/auth/login", json={"username": "admin", "password": "s3cret-pass"}
        ).json()["token"]

        response = test_client.get(
            f"{API}/admin/contacts", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 200

    @pytest.mark.parametrize(
        "username,password",
        [("admin", "wrong"), ("nobody", "s3cret-pass")],
    )
    def test_bad_credentials_share_one_message(
        self,
        test_client: TestClient,
        admin_user: dict[str, Any],
        username: str,
        password: str,
    ) -> None:
        response = test_client.post(
            f"{API}/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_inactive_user_cannot_log_in(
        self, test_client: TestClient, fake_db: FakeSupabase, admin_user: dict[str, Any]
    ) -> None:
        fake_db.tables["users"][0]["active"] = False
        response = test_client.post(
            f"{API}/auth/login", json={"username": "admin", "password": "s3cret-pass"}
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_empty_fields_are_400(self, test_client: TestClient) -> None:
        response = test_client.post(f"{API}/auth/login", json={"username": "", "password": ""})
        assert response.status_code == 400


class TestAdminGuard:
    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Authorization": "Token abc"},
            {"Authorization": "Bearer"},
            {"Authorization": "Bearer not.a.jwt"},
        ],
    )
    def test_missing_or_malformed_credentials_are_401(
        self, test_client: TestClient, headers: dict[str, str]
    ) -> None:
        response = test_client.get(f"{API}/admin/contacts", headers=headers)
        assert response.status_code == 401
        assert "error" in response.json()

    def test_expired_token_is_401(self, test_client: TestClient) -> None:
        token = create_access_token(1, "admin", "admin", expires_delta=timedelta(minutes=-1))
        response = test_client.get(
            f"{API}/admin/contacts", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Token expired"}

    def test_non_admin_role_is_rejected(self, test_client: TestClient) -> None:
        token = create_access_token(2, "viewer", "viewer")
        response = test_client.get(
            f"{API}/admin/contacts", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401

    def test_rejected_write_changes_nothing(
        self, test_client: TestClient, fake_db: FakeSupabase
    ) -> None:
        response = test_client.post(
            f"{API}/admin/skills",
            json={"name": "Go", "category": "Languages"},
            headers={"Authorization": "Bearer forged"},
        )
        assert response.status_code == 401
        assert fake_db.tables.get("skills", []) == []
