"""Project service: cached listings per featured filter, and CRUD.

The listing has three cache keys (unfiltered, featured, non-featured).  Any
project write invalidates all three, since an update can move a row from
one bucket to the other.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from app.core.constants import (
    CACHE_KEY_PROJECTS,
    CACHE_KEY_PROJECTS_FEATURED,
    CACHE_KEY_PROJECTS_NON_FEATURED,
    TABLE_PROJECTS,
)
from app.core.errors import NotFoundError, ValidationError
from app.db import store
from app.models.project import Project, ProjectCreate, ProjectUpdate
from app.services.cache import invalidate, read_through

logger = logging.getLogger(__name__)

_list_adapter: TypeAdapter[list[Project]] = TypeAdapter(list[Project])


def project_cache_key(featured: bool | None) -> str:
    """Return the cache key for the listing filtered by *featured*."""
    if featured is None:
        return CACHE_KEY_PROJECTS
    return CACHE_KEY_PROJECTS_FEATURED if featured else CACHE_KEY_PROJECTS_NON_FEATURED


def list_projects(featured: bool | None = None) -> list[Project]:
    """List projects newest first, optionally filtered by ``featured``."""

    def _load() -> list[Project]:
        filters = None if featured is None else {"featured": featured}
        rows = store.select_rows(
            TABLE_PROJECTS, order=[("created_at", True)], filters=filters
        )
        return [Project.model_validate(row) for row in rows]

    return read_through(project_cache_key(featured), _list_adapter, _load)


def get_project(project_id: int) -> Project:
    row = store.select_by_id(TABLE_PROJECTS, project_id)
    if row is None:
        raise NotFoundError("Project not found")
    return Project.model_validate(row)


def create_project(payload: ProjectCreate) -> Project:
    row = store.insert_row(TABLE_PROJECTS, payload.model_dump(mode="json"))
    invalidate("projects")
    logger.info("project_created", extra={"project_id": row["id"]})
    return Project.model_validate(row)


def update_project(project_id: int, payload: ProjectUpdate) -> Project:
    data = payload.model_dump(mode="json", exclude_unset=True)
    if not data:
        raise ValidationError("No fields to update")
    row = store.update_row(TABLE_PROJECTS, project_id, data)
    if row is None:
        raise NotFoundError("Project not found")
    invalidate("projects")
    logger.info("project_updated", extra={"project_id": project_id})
    return Project.model_validate(row)


def delete_project(project_id: int) -> None:
    if not store.delete_row(TABLE_PROJECTS, project_id):
        raise NotFoundError("Project not found")
    invalidate("projects")
    logger.info("project_deleted", extra={"project_id": project_id})
