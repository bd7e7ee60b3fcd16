"""Pydantic models for the ``projects`` table."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.constants import PROJECT_STATUS_DEFAULT


class ProjectCreate(BaseModel):
    """Payload for inserting a project.

    ``status`` is free text; ``completed``, ``in-progress`` and ``planned``
    are the values the site renders specially.
    """
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    long_description: str = ""
    technologies: list[str] = Field(default_factory=list)
    github_url: str = ""
    live_url: str = ""
    image_url: str = ""
    featured: bool = False
    category: str = ""
    status: str = PROJECT_STATUS_DEFAULT


class ProjectUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    long_description: str | None = None
    technologies: list[str] | None = None
    github_url: str | None = None
    live_url: str | None = None
    image_url: str | None = None
    featured: bool | None = None
    category: str | None = None
    status: str | None = None

    @field_validator("name", "description", "technologies", "featured", "status", mode="before")
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field cannot be null")
        return value


class Project(BaseModel):
    """Full project record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    long_description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    github_url: str | None = None
    live_url: str | None = None
    image_url: str | None = None
    featured: bool = False
    category: str | None = None
    status: str = PROJECT_STATUS_DEFAULT
    created_at: datetime
    updated_at: datetime
