"""Skill endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response

from app.models.skill import Skill, SkillCreate, SkillUpdate
from app.services.skills import create_skill, delete_skill, get_skill, list_skills, update_skill

router = APIRouter()
admin_router = APIRouter()


@router.get("/skills", response_model=list[Skill])
def read_skills() -> list[Skill]:
    """Return all skills grouped by category, then alphabetical."""
    return list_skills()


@router.get("/skills/{skill_id}", response_model=Skill)
def read_skill(skill_id: int) -> Skill:
    return get_skill(skill_id)


@admin_router.post("/skills", response_model=Skill, status_code=201)
def add_skill(body: SkillCreate) -> Skill:
    return create_skill(body)


@admin_router.put("/skills/{skill_id}", response_model=Skill)
def edit_skill(skill_id: int, body: SkillUpdate) -> Skill:
    return update_skill(skill_id, body)


@admin_router.delete("/skills/{skill_id}", status_code=204)
def remove_skill(skill_id: int) -> Response:
    delete_skill(skill_id)
    return Response(status_code=204)
