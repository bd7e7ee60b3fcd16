"""Pydantic models for the ``profiles`` table.

The table holds exactly one row; updates replace it in place.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ProfileUpdate(BaseModel):
    """Payload for ``PUT /admin/profile``."""
    name: str = Field(min_length=1)
    title: str = Field(min_length=1)
    email: EmailStr
    location: str = ""
    phone: str = ""
    telegram: str = ""
    github: str = ""
    linkedin: str = ""
    summary: str = ""
    avatar: str = ""
    resume_url: str = ""


class Profile(BaseModel):
    """Full profile record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    title: str
    email: str | None = None
    location: str | None = None
    phone: str | None = None
    telegram: str | None = None
    github: str | None = None
    linkedin: str | None = None
    summary: str | None = None
    avatar: str | None = None
    resume_url: str | None = None
    created_at: datetime
    updated_at: datetime
