"""Profile endpoints.

GET /profile        -- public, cached
PUT /admin/profile  -- admin, replaces the singleton and invalidates the cache
"""

from __future__ import annotations

from fastapi import APIRouter

from app.models.profile import Profile, ProfileUpdate
from app.services.profile import get_profile, update_profile

router = APIRouter()
admin_router = APIRouter()


@router.get("/profile", response_model=Profile)
def read_profile() -> Profile:
    return get_profile()


@admin_router.put("/profile", response_model=Profile)
def replace_profile(body: ProfileUpdate) -> Profile:
    return update_profile(body)
