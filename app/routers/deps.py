"""Shared router dependencies."""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.errors import AuthError
from app.models.user import Principal
from app.services.auth import validate_token

# auto_error=False: a missing or non-Bearer header yields None, so the
# 401 body follows the application error format.
_bearer_scheme = HTTPBearer(auto_error=False)


def get_current_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> Principal:
    """Validate the bearer token and attach the principal to the request."""
    if credentials is None or not credentials.credentials.strip():
        raise AuthError("Authentication required")

    principal = validate_token(credentials.credentials.strip())
    request.state.principal = principal
    return principal


def client_ip(request: Request) -> str | None:
    """Return the submitter address, preferring the first forwarded hop."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return request.client.host if request.client else None
