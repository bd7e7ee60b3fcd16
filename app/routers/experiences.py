"""Work experience endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response

from app.models.experience import Experience, ExperienceCreate, ExperienceUpdate
from app.services.experiences import (
    create_experience,
    delete_experience,
    get_experience,
    list_experiences,
    update_experience,
)

router = APIRouter()
admin_router = APIRouter()


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------

@router.get("/experiences", response_model=list[Experience])
def read_experiences() -> list[Experience]:
    """Return all experiences, most recent start date first."""
    return list_experiences()


@router.get("/experiences/{experience_id}", response_model=Experience)
def read_experience(experience_id: int) -> Experience:
    return get_experience(experience_id)


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------

@admin_router.post("/experiences", response_model=Experience, status_code=201)
def add_experience(body: ExperienceCreate) -> Experience:
    return create_experience(body)


@admin_router.put("/experiences/{experience_id}", response_model=Experience)
def edit_experience(experience_id: int, body: ExperienceUpdate) -> Experience:
    return update_experience(experience_id, body)


@admin_router.delete("/experiences/{experience_id}", status_code=204)
def remove_experience(experience_id: int) -> Response:
    delete_experience(experience_id)
    return Response(status_code=204)
