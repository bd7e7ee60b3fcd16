"""Project endpoints.

``GET /projects?featured=true|false`` selects one of three cached
listings; omitting ``featured`` returns every project.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Response

from app.models.project import Project, ProjectCreate, ProjectUpdate
from app.services.projects import (
    create_project,
    delete_project,
    get_project,
    list_projects,
    update_project,
)

router = APIRouter()
admin_router = APIRouter()


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------

@router.get("/projects", response_model=list[Project])
def read_projects(
    featured: bool | None = Query(
        default=None,
        description="Only featured (true) or only non-featured (false) projects",
    ),
) -> list[Project]:
    return list_projects(featured)


@router.get("/projects/{project_id}", response_model=Project)
def read_project(project_id: int) -> Project:
    return get_project(project_id)


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------

@admin_router.post("/projects", response_model=Project, status_code=201)
def add_project(body: ProjectCreate) -> Project:
    return create_project(body)


@admin_router.put("/projects/{project_id}", response_model=Project)
def edit_project(project_id: int, body: ProjectUpdate) -> Project:
    return update_project(project_id, body)


@admin_router.delete("/projects/{project_id}", status_code=204)
def remove_project(project_id: int) -> Response:
    delete_project(project_id)
    return Response(status_code=204)
