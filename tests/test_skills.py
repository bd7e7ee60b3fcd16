"""Endpoint tests for skills."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from tests.fakes import FakeRedis, FakeSupabase

API = "/api/v1"


def _skill(name: str = "Python", category: str = "Languages", **overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "name": name,
        "category": category,
        "level": 8,
        "description": "General purpose",
        "icon": "python",
    }
    body.update(overrides)
    return body


class TestSkills:
    def test_create_then_get_by_id_matches_input(
        self, test_client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        body = _skill()
        created = test_client.post(f"{API}/admin/skills", json=body, headers=admin_headers)
        assert created.status_code == 201

        data = test_client.get(f"{API}/skills/{created.json()['id']}").json()
        for field, value in body.items():
            assert data[field] == value

    def test_level_defaults_to_five(
        self, test_client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        body = _skill()
        del body["level"]
        created = test_client.post(f"{API}/admin/skills", json=body, headers=admin_headers)
        assert created.json()["level"] == 5

    @pytest.mark.parametrize("level", [0, 11])
    def test_level_out_of_range_is_400(
        self, test_client: TestClient, admin_headers: dict[str, str], level: int
    ) -> None:
        response = test_client.post(
            f"{API}/admin/skills", json=_skill(level=level), headers=admin_headers
        )
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "body.level"

    def test_duplicate_name_is_409_and_cache_kept(
        self, test_client: TestClient, fake_cache: FakeRedis, admin_headers: dict[str, str]
    ) -> None:
        test_client.post(f"{API}/admin/skills", json=_skill(), headers=admin_headers)
        test_client.get(f"{API}/skills")
        cached = fake_cache.data["skills"]

        response = test_client.post(f"{API}/admin/skills", json=_skill(), headers=admin_headers)

        assert response.status_code == 409
        assert fake_cache.data["skills"] == cached

    def test_listing_orders_by_category_then_name(
        self, test_client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        for name, category in (
            ("Redis", "Databases"),
            ("Rust", "Languages"),
            ("Go", "Languages"),
            ("PostgreSQL", "Databases"),
        ):
            test_client.post(
                f"{API}/admin/skills", json=_skill(name, category), headers=admin_headers
            )

        names = [s["name"] for s in test_client.get(f"{API}/skills").json()]
        assert names == ["PostgreSQL", "Redis", "Go", "Rust"]

    def test_update_is_visible_after_cached_read(
        self, test_client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        created = test_client.post(
            f"{API}/admin/skills", json=_skill(), headers=admin_headers
        ).json()
        assert test_client.get(f"{API}/skills").json()[0]["level"] == 8

        response = test_client.put(
            f"{API}/admin/skills/{created['id']}", json={"level": 10}, headers=admin_headers
        )

        assert response.status_code == 200
        assert test_client.get(f"{API}/skills").json()[0]["level"] == 10

    def test_update_and_delete_unknown_id_are_404(
        self, test_client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        update = test_client.put(f"{API}/admin/skills/77", json={"level": 2}, headers=admin_headers)
        delete = test_client.delete(f"{API}/admin/skills/77", headers=admin_headers)
        assert update.status_code == 404
        assert delete.status_code == 404

    def test_delete_removes_from_listing(
        self, test_client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        created = test_client.post(
            f"{API}/admin/skills", json=_skill(), headers=admin_headers
        ).json()
        test_client.get(f"{API}/skills")

        assert test_client.delete(
            f"{API}/admin/skills/{created['id']}", headers=admin_headers
        ).status_code == 204
        assert test_client.get(f"{API}/skills").json() == []

    @pytest.mark.parametrize("field", ["name", "category", "level"])
    def test_null_for_required_column_is_400_and_row_kept(
        self,
        test_client: TestClient,
        fake_db: FakeSupabase,
        fake_cache: FakeRedis,
        admin_headers: dict[str, str],
        field: str,
    ) -> None:
        created = test_client.post(
            f"{API}/admin/skills", json=_skill(), headers=admin_headers
        ).json()
        test_client.get(f"{API}/skills")
        before = [dict(r) for r in fake_db.tables["skills"]]

        response = test_client.put(
            f"{API}/admin/skills/{created['id']}", json={field: None}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == f"body.{field}"
        assert fake_db.tables["skills"] == before
        assert "skills" in fake_cache.data
        assert test_client.get(f"{API}/skills").status_code == 200

    def test_null_for_optional_column_is_accepted(
        self, test_client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        created = test_client.post(
            f"{API}/admin/skills", json=_skill(), headers=admin_headers
        ).json()
        response = test_client.put(
            f"{API}/admin/skills/{created['id']}", json={"icon": None}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["icon"] is None
