"""Pydantic models for the ``experiences`` table.

``current = True`` implies ``end_date is None``, and ``end_date`` may not
precede ``start_date``; the create and update payloads reject either.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ExperienceCreate(BaseModel):
    """Payload for inserting a work experience."""
    company: str = Field(min_length=1)
    position: str = Field(min_length=1)
    location: str = ""
    start_date: date
    end_date: date | None = None
    current: bool = False
    description: str = ""
    achievements: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dates(self) -> "ExperienceCreate":
        if self.current and self.end_date is not None:
            raise ValueError("a current position cannot have an end_date")
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ExperienceUpdate(BaseModel):
    """Partial update; only fields present in the request are written."""
    company: str | None = Field(default=None, min_length=1)
    position: str | None = Field(default=None, min_length=1)
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    current: bool | None = None
    description: str | None = None
    achievements: list[str] | None = None
    technologies: list[str] | None = None

    # location, description and end_date may be null
    @field_validator(
        "company", "position", "start_date", "current", "achievements", "technologies",
        mode="before",
    )
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field cannot be null")
        return value

    @model_validator(mode="after")
    def _check_dates(self) -> "ExperienceUpdate":
        if self.current and self.end_date is not None:
            raise ValueError("a current position cannot have an end_date")
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date < self.start_date
        ):
            raise ValueError("end_date must not be before start_date")
        return self


class Experience(BaseModel):
    """Full experience record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    company: str
    position: str
    location: str | None = None
    start_date: date
    end_date: date | None = None
    current: bool = False
    description: str | None = None
    achievements: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
