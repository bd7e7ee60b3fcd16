"""FastAPI application entry point.

Configures CORS, security headers, request logging, global rate limiting,
the error handlers, lifespan events (logging setup, seeding, cache client
shutdown) and router registration.
"""

import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.constants import SERVICE_VERSION
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.core.ratelimit import enforce_rate_limit
from app.db.redis import close_redis
from app.db.seed import seed_database
from app.routers import auth, contacts, experiences, health, profile, projects, skills
from app.routers.deps import get_current_admin

logger = logging.getLogger(__name__)

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks."""
    setup_logging()
    logger.info("Application starting up", extra={"environment": settings.ENVIRONMENT})
    seed_database()
    yield
    close_redis()
    logger.info("Application shutting down")


app = FastAPI(
    title="Portfolio API",
    description="Profile, experience, skill, project and contact data for a personal portfolio site",
    version=SERVICE_VERSION,
    lifespan=lifespan,
    dependencies=[Depends(enforce_rate_limit)],
)

register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

@app.middleware("http")
async def log_and_secure(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log each request and add the security headers to the response."""
    started = time.perf_counter()
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    logger.info(
        "http_request",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return response


_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
_prefix = settings.API_PREFIX.rstrip("/")
_admin = [Depends(get_current_admin)]

app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, prefix=f"{_prefix}/auth", tags=["Auth"])

app.include_router(profile.router, prefix=_prefix, tags=["Profile"])
app.include_router(experiences.router, prefix=_prefix, tags=["Experiences"])
app.include_router(skills.router, prefix=_prefix, tags=["Skills"])
app.include_router(projects.router, prefix=_prefix, tags=["Projects"])
app.include_router(contacts.router, prefix=_prefix, tags=["Contact"])

for _module, _tag in (
    (profile, "Profile"),
    (experiences, "Experiences"),
    (skills, "Skills"),
    (projects, "Projects"),
    (contacts, "Contact"),
):
    app.include_router(
        _module.admin_router,
        prefix=f"{_prefix}/admin",
        tags=["Admin", _tag],
        dependencies=_admin,
    )


def run() -> None:
    """Console entry point: serve the app with uvicorn on ``settings.PORT``."""
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
