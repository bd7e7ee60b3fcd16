"""Admin login endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from app.models.user import LoginRequest, LoginResponse
from app.services.auth import authenticate

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest) -> LoginResponse:
    """Exchange admin credentials for a bearer token."""
    return authenticate(body.username, body.password)
