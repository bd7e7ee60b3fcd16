"""Profile service: cached singleton read, in-place replace on write."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from app.core.constants import CACHE_KEY_PROFILE, TABLE_PROFILES
from app.core.errors import NotFoundError
from app.db import store
from app.models.profile import Profile, ProfileUpdate
from app.services.cache import invalidate, read_through

logger = logging.getLogger(__name__)

_profile_adapter: TypeAdapter[Profile] = TypeAdapter(Profile)


def _load_profile() -> Profile:
    row = store.select_first(TABLE_PROFILES)
    if row is None:
        raise NotFoundError("Profile not found")
    return Profile.model_validate(row)


def get_profile() -> Profile:
    return read_through(CACHE_KEY_PROFILE, _profile_adapter, _load_profile)


def update_profile(payload: ProfileUpdate) -> Profile:
    """Replace the singleton profile with *payload*.

    Inserts only when no profile row exists yet (seeding normally prevents
    that); otherwise the existing row keeps its id.
    """
    data = payload.model_dump(mode="json")
    existing = store.select_first(TABLE_PROFILES)

    if existing is None:
        row = store.insert_row(TABLE_PROFILES, data)
    else:
        row = store.update_row(TABLE_PROFILES, existing["id"], data)
        if row is None:
            # Deleted between the two calls
            raise NotFoundError("Profile not found")

    invalidate("profile")
    logger.info("profile_updated", extra={"profile_id": row["id"]})
    return Profile.model_validate(row)
