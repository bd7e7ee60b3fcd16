"""Pydantic models for the ``skills`` table.

``name`` is unique (enforced by the database); ``level`` is 1-10.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.constants import DEFAULT_SKILL_LEVEL, SKILL_LEVEL_MAX, SKILL_LEVEL_MIN


class SkillCreate(BaseModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    level: int = Field(default=DEFAULT_SKILL_LEVEL, ge=SKILL_LEVEL_MIN, le=SKILL_LEVEL_MAX)
    description: str = ""
    icon: str = ""


class SkillUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1)
    level: int | None = Field(default=None, ge=SKILL_LEVEL_MIN, le=SKILL_LEVEL_MAX)
    description: str | None = None
    icon: str | None = None

    @field_validator("name", "category", "level", mode="before")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field cannot be null")
        return value


class Skill(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    level: int = DEFAULT_SKILL_LEVEL
    description: str | None = None
    icon: str | None = None
    created_at: datetime
    updated_at: datetime
