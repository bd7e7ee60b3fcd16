"""Experience service: cached listing (start date, newest first) and CRUD."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter

from app.core.constants import CACHE_KEY_EXPERIENCES, TABLE_EXPERIENCES
from app.core.errors import NotFoundError, ValidationError
from app.db import store
from app.models.experience import Experience, ExperienceCreate, ExperienceUpdate
from app.services.cache import invalidate, read_through

logger = logging.getLogger(__name__)

_list_adapter: TypeAdapter[list[Experience]] = TypeAdapter(list[Experience])


def _load_experiences() -> list[Experience]:
    rows = store.select_rows(TABLE_EXPERIENCES, order=[("start_date", True)])
    return [Experience.model_validate(row) for row in rows]


def list_experiences() -> list[Experience]:
    return read_through(CACHE_KEY_EXPERIENCES, _list_adapter, _load_experiences)


def get_experience(experience_id: int) -> Experience:
    row = store.select_by_id(TABLE_EXPERIENCES, experience_id)
    if row is None:
        raise NotFoundError("Experience not found")
    return Experience.model_validate(row)


def create_experience(payload: ExperienceCreate) -> Experience:
    row = store.insert_row(TABLE_EXPERIENCES, payload.model_dump(mode="json"))
    invalidate("experiences")
    logger.info("experience_created", extra={"experience_id": row["id"]})
    return Experience.model_validate(row)


def _update_payload(payload: ExperienceUpdate) -> dict[str, Any]:
    data = payload.model_dump(mode="json", exclude_unset=True)
    if not data:
        raise ValidationError("No fields to update")
    # Keep current and end_date consistent with each other
    if data.get("current") is True:
        data["end_date"] = None
    elif data.get("end_date") is not None and "current" not in data:
        data["current"] = False
    return data


def update_experience(experience_id: int, payload: ExperienceUpdate) -> Experience:
    row = store.update_row(TABLE_EXPERIENCES, experience_id, _update_payload(payload))
    if row is None:
        raise NotFoundError("Experience not found")
    invalidate("experiences")
    logger.info("experience_updated", extra={"experience_id": experience_id})
    return Experience.model_validate(row)


def delete_experience(experience_id: int) -> None:
    if not store.delete_row(TABLE_EXPERIENCES, experience_id):
        raise NotFoundError("Experience not found")
    invalidate("experiences")
    logger.info("experience_deleted", extra={"experience_id": experience_id})
