"""Pydantic models for admin users and authentication payloads.

``password_hash`` only exists on ``UserRecord``; nothing that is returned
to a caller carries it.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import USER_ROLE_ADMIN


class UserRecord(BaseModel):
    """Row of the ``users`` table, including the password hash."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    password_hash: str
    role: str = USER_ROLE_ADMIN
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserPublic(BaseModel):
    id: int
    username: str
    email: str
    role: str


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserPublic


class Principal(BaseModel):
    """Authenticated identity attached to an admin request."""
    user_id: int
    username: str
    role: str
