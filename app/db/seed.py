"""Startup seeding.

* The profile singleton is created when absent, together with sample
  experiences, skills and projects when ``settings.SEED_SAMPLE_DATA``.
* A bootstrap admin user is created when the ``users`` table is empty and
  ``settings.ADMIN_PASSWORD`` is set.

Each step is idempotent; a failing step is logged and does not stop the
application.
"""

from __future__ import annotations

import logging
from typing import Any

from app.core.config import settings
from app.core.constants import (
    TABLE_EXPERIENCES,
    TABLE_PROFILES,
    TABLE_PROJECTS,
    TABLE_SKILLS,
    TABLE_USERS,
    USER_ROLE_ADMIN,
)
from app.core.errors import AppError
from app.core.security import hash_password
from app.db import store

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Sample content
# ---------------------------------------------------------------------------

DEFAULT_PROFILE: dict[str, Any] = {
    "name": "Your Name",
    "title": "Backend Engineer",
    "location": "Remote",
    "email": "hello@example.com",
    "phone": "",
    "telegram": "",
    "github": "github.com/your-handle",
    "linkedin": "",
    "summary": "Short professional summary.",
    "avatar": "",
    "resume_url": "",
}

SAMPLE_EXPERIENCES: list[dict[str, Any]] = [
    {
        "company": "Company One",
        "position": "Senior Backend Engineer",
        "location": "Remote",
        "start_date": "2024-01-01",
        "end_date": None,
        "current": True,
        "description": "Backend services and platform work.",
        "achievements": [
            "Scaled public APIs to millions of daily requests",
            "Introduced caching and rate limiting in front of the database",
        ],
        "technologies": ["Python", "FastAPI", "PostgreSQL", "Redis", "Docker"],
    },
    {
        "company": "Company Two",
        "position": "Backend Engineer",
        "location": "Remote",
        "start_date": "2021-01-01",
        "end_date": "2024-01-01",
        "current": False,
        "description": "Data pipelines and internal tooling.",
        "achievements": [
            "Built event pipelines feeding the analytics warehouse",
            "Automated deployments with CI/CD",
        ],
        "technologies": ["Python", "Kafka", "PostgreSQL", "Kubernetes"],
    },
]

SAMPLE_SKILLS: list[dict[str, Any]] = [
    {"name": "Python", "category": "Languages", "level": 9, "description": "Services, data processing, automation", "icon": ""},
    {"name": "SQL", "category": "Languages", "level": 8, "description": "Relational modelling and tuning", "icon": ""},
    {"name": "FastAPI", "category": "Frameworks", "level": 8, "description": "Async web APIs", "icon": ""},
    {"name": "Docker", "category": "DevOps", "level": 8, "description": "Containerization", "icon": ""},
    {"name": "Kubernetes", "category": "DevOps", "level": 7, "description": "Container orchestration", "icon": ""},
    {"name": "PostgreSQL", "category": "Databases", "level": 9, "description": "Relational database", "icon": ""},
    {"name": "Redis", "category": "Databases", "level": 8, "description": "In-memory data store", "icon": ""},
]

SAMPLE_PROJECTS: list[dict[str, Any]] = [
    {
        "name": "Portfolio API",
        "description": "The REST API behind this website",
        "long_description": "CRUD API with a Redis read-through cache and JWT-protected admin endpoints.",
        "technologies": ["Python", "FastAPI", "PostgreSQL", "Redis"],
        "github_url": "",
        "live_url": "",
        "image_url": "",
        "featured": True,
        "category": "Backend",
        "status": "completed",
    },
    {
        "name": "Event Pipeline",
        "description": "Streaming ingestion and aggregation",
        "long_description": "Kafka consumers aggregating events into an analytical store.",
        "technologies": ["Python", "Kafka", "ClickHouse"],
        "github_url": "",
        "live_url": "",
        "image_url": "",
        "featured": False,
        "category": "Data",
        "status": "in-progress",
    },
]


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

def seed_content() -> bool:
    """Create the profile (and sample content) if no profile exists.

    Returns True if anything was written.
    """
    if store.select_first(TABLE_PROFILES) is not None:
        return False

    store.insert_row(TABLE_PROFILES, dict(DEFAULT_PROFILE))
    logger.info("seed_profile_created")

    if settings.SEED_SAMPLE_DATA:
        for experience in SAMPLE_EXPERIENCES:
            store.insert_row(TABLE_EXPERIENCES, dict(experience))
        for skill in SAMPLE_SKILLS:
            store.insert_row(TABLE_SKILLS, dict(skill))
        for project in SAMPLE_PROJECTS:
            store.insert_row(TABLE_PROJECTS, dict(project))
        logger.info(
            "seed_sample_content_created",
            extra={
                "experiences": len(SAMPLE_EXPERIENCES),
                "skills": len(SAMPLE_SKILLS),
                "projects": len(SAMPLE_PROJECTS),
            },
        )
    return True


def seed_admin_user() -> bool:
    """Create the bootstrap admin if configured and no user exists."""
    if not settings.ADMIN_PASSWORD:
        return False
    if store.count_rows(TABLE_USERS) > 0:
        return False

    store.insert_row(
        TABLE_USERS,
        {
            "username": settings.ADMIN_USERNAME,
            "email": settings.ADMIN_EMAIL,
            "password_hash": hash_password(settings.ADMIN_PASSWORD),
            "role": USER_ROLE_ADMIN,
            "active": True,
        },
    )
    logger.info("seed_admin_created", extra={"username": settings.ADMIN_USERNAME})
    return True


def seed_database() -> None:
    """Run every seeding step, logging (not raising) failures."""
    for step in (seed_content, seed_admin_user):
        try:
            step()
        except AppError as exc:
            logger.warning(
                "seed_step_failed",
                extra={"step": step.__name__, "error_message": exc.message},
            )
