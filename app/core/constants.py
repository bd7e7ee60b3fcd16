"""Application constants.

Contains table names, cache policy (TTL and the key table per entity),
and default field values.
"""

# ---------------------------------------------------------------------------
# Store tables
# ---------------------------------------------------------------------------
TABLE_PROFILES: str = "profiles"
TABLE_EXPERIENCES: str = "experiences"
TABLE_SKILLS: str = "skills"
TABLE_PROJECTS: str = "projects"
TABLE_CONTACTS: str = "contacts"
TABLE_USERS: str = "users"

# Postgres SQLSTATEs (unique_violation, check_violation) surfaced by PostgREST as ``code``
PG_UNIQUE_VIOLATION: str = "23505"
PG_CHECK_VIOLATION: str = "23514"

# ---------------------------------------------------------------------------
# Cache policy
# ---------------------------------------------------------------------------
CACHE_TTL_SECONDS: int = 60 * 60

CACHE_KEY_PROFILE: str = "profile"
CACHE_KEY_EXPERIENCES: str = "experiences"
CACHE_KEY_SKILLS: str = "skills"
CACHE_KEY_PROJECTS: str = "projects"
CACHE_KEY_PROJECTS_FEATURED: str = "projects:featured"
CACHE_KEY_PROJECTS_NON_FEATURED: str = "projects:non-featured"

# Every key derived from an entity.  A write to the entity invalidates all
# of them; a new filtered view must add its key here.
CACHE_KEYS_BY_ENTITY: dict[str, tuple[str, ...]] = {
    "profile": (CACHE_KEY_PROFILE,),
    "experiences": (CACHE_KEY_EXPERIENCES,),
    "skills": (CACHE_KEY_SKILLS,),
    "projects": (
        CACHE_KEY_PROJECTS,
        CACHE_KEY_PROJECTS_FEATURED,
        CACHE_KEY_PROJECTS_NON_FEATURED,
    ),
    "contacts": (),
}

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_SKILL_LEVEL: int = 5
SKILL_LEVEL_MIN: int = 1
SKILL_LEVEL_MAX: int = 10

PROJECT_STATUS_DEFAULT: str = "completed"
# Known values; the column is an open string and is not restricted to these.
PROJECT_STATUSES: tuple[str, ...] = ("completed", "in-progress", "planned")

CONTACT_STATUS_NEW: str = "new"

USER_ROLE_ADMIN: str = "admin"

SERVICE_NAME: str = "portfolio-api"
SERVICE_VERSION: str = "1.0.0"
