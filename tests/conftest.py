"""Shared test fixtures.

Sets the required environment before the application is imported and
provides ``fake_db`` / ``fake_cache`` (see ``tests.fakes``), plus a
``test_client`` wired to both.
"""

import os

os.environ["SUPABASE_URL"] = "https://test.supabase.co"
os.environ["SUPABASE_KEY"] = "test-key"
os.environ["REDIS_URL"] = "redis://localhost:6379/15"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["ADMIN_PASSWORD"] = ""
os.environ["RATE_LIMIT_PER_SECOND"] = "1000"
os.environ["RATE_LIMIT_BURST"] = "1000"

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402
from unittest.mock import patch  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tests.fakes import FakeRedis, FakeSupabase  # noqa: E402


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def fake_db() -> Generator[FakeSupabase, None, None]:
    """Patch every ``get_supabase`` lookup to return an in-memory store."""
    db = FakeSupabase()
    with patch("app.db.store.get_supabase", return_value=db), patch(
        "app.routers.health.get_supabase", return_value=db
    ):
        yield db


@pytest.fixture()
def fake_cache() -> Generator[FakeRedis, None, None]:
    """Patch every ``get_redis`` lookup to return an in-memory cache."""
    cache = FakeRedis()
    with patch("app.services.cache.get_redis", return_value=cache), patch(
        "app.routers.health.get_redis", return_value=cache
    ):
        yield cache


@pytest.fixture()
def test_client(
    fake_db: FakeSupabase, fake_cache: FakeRedis
) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient over the fake store and cache.

    Startup seeding runs against the fake store, so the profile exists.
    """
    from app.core.ratelimit import TokenBucket
    from app.main import app

    with patch("app.core.ratelimit.limiter", TokenBucket(rate=1000, capacity=1000)):
        with TestClient(app) as client:
            yield client


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    """Authorization header carrying a valid admin token."""
    from app.core.security import create_access_token

    token = create_access_token(1, "admin", "admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_user(fake_db: FakeSupabase) -> dict[str, Any]:
    """Insert an active admin user whose password is ``s3cret-pass``."""
    from app.core.security import hash_password

    return fake_db.new_row(
        "users",
        {
            "username": "admin",
            "email": "admin@example.com",
            "password_hash": hash_password("s3cret-pass"),
            "role": "admin",
            "active": True,
        },
    )
