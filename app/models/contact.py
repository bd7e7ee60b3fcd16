"""Pydantic models for the ``contacts`` table (contact form submissions)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactCreate(BaseModel):
    """Body of ``POST /contact``.

    Submitter IP and user agent are taken from the request, never the body.
    """
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = ""
    message: str = Field(min_length=1)


class ContactStatusUpdate(BaseModel):
    status: str = Field(min_length=1)


class Contact(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    subject: str | None = None
    message: str
    status: str
    ip_address: str | None = None
    user_agent: str | None = None
    created_at: datetime
    updated_at: datetime
