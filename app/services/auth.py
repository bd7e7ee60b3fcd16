"""Admin authentication service.

``authenticate`` checks a username/password pair against the ``users``
table and issues a signed bearer token.  ``validate_token`` turns a
presented token back into a ``Principal``; it does not touch the store.
"""

from __future__ import annotations

import logging

from app.core.constants import TABLE_USERS, USER_ROLE_ADMIN
from app.core.errors import AuthError
from app.core.security import create_access_token, decode_access_token, verify_password
from app.db import store
from app.models.user import LoginResponse, Principal, UserPublic, UserRecord

logger = logging.getLogger(__name__)


def authenticate(username: str, password: str) -> LoginResponse:
    """Return a token and the public user for valid admin credentials.

    Unknown user, wrong password and inactive account all produce the same
    ``AuthError`` so the response does not reveal which one failed.
    """
    row = store.select_one_by(TABLE_USERS, "username", username)
    user = UserRecord.model_validate(row) if row is not None else None

    if user is None or not verify_password(password, user.password_hash) or not user.active:
        logger.warning("login_failed", extra={"username": username})
        raise AuthError("Invalid credentials")

    token = create_access_token(user.id, user.username, user.role)
    logger.info("login_succeeded", extra={"user_id": user.id})
    return LoginResponse(
        token=token,
        user=UserPublic(id=user.id, username=user.username, email=user.email, role=user.role),
    )


def validate_token(token: str) -> Principal:
    """Decode *token* into a principal; only the admin role is accepted."""
    claims = decode_access_token(token)
    try:
        principal = Principal(
            user_id=int(claims["sub"]),
            username=str(claims.get("username", "")),
            role=str(claims.get("role", "")),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise AuthError("Invalid token") from exc

    if principal.role != USER_ROLE_ADMIN:
        raise AuthError("Invalid token")
    return principal
