"""Skill service: cached listing (category, then name) and CRUD."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from app.core.constants import CACHE_KEY_SKILLS, TABLE_SKILLS
from app.core.errors import NotFoundError, ValidationError
from app.db import store
from app.models.skill import Skill, SkillCreate, SkillUpdate
from app.services.cache import invalidate, read_through

logger = logging.getLogger(__name__)

_list_adapter: TypeAdapter[list[Skill]] = TypeAdapter(list[Skill])


def _load_skills() -> list[Skill]:
    rows = store.select_rows(TABLE_SKILLS, order=[("category", False), ("name", False)])
    return [Skill.model_validate(row) for row in rows]


def list_skills() -> list[Skill]:
    return read_through(CACHE_KEY_SKILLS, _list_adapter, _load_skills)


def get_skill(skill_id: int) -> Skill:
    row = store.select_by_id(TABLE_SKILLS, skill_id)
    if row is None:
        raise NotFoundError("Skill not found")
    return Skill.model_validate(row)


def create_skill(payload: SkillCreate) -> Skill:
    """Insert a skill.  A duplicate name surfaces as ``ConflictError``."""
    row = store.insert_row(TABLE_SKILLS, payload.model_dump(mode="json"))
    invalidate("skills")
    logger.info("skill_created", extra={"skill_id": row["id"], "skill_name": row["name"]})
    return Skill.model_validate(row)


def update_skill(skill_id: int, payload: SkillUpdate) -> Skill:
    data = payload.model_dump(mode="json", exclude_unset=True)
    if not data:
        raise ValidationError("No fields to update")
    row = store.update_row(TABLE_SKILLS, skill_id, data)
    if row is None:
        raise NotFoundError("Skill not found")
    invalidate("skills")
    logger.info("skill_updated", extra={"skill_id": skill_id})
    return Skill.model_validate(row)


def delete_skill(skill_id: int) -> None:
    if not store.delete_row(TABLE_SKILLS, skill_id):
        raise NotFoundError("Skill not found")
    invalidate("skills")
    logger.info("skill_deleted", extra={"skill_id": skill_id})
