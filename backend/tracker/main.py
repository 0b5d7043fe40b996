"""
FastAPI application entrypoint.

Lifespan:
  • On startup: migrate the schema to head and seed lookup sets. A failure
    here aborts startup — the app never serves a half-built schema.
  • On shutdown: dispose the engine cleanly.

Routers:
  • /api/projects      — project CRUD
  • /api/team-members  — team-member lookup set
  • /api/sales-reps    — sales-rep lookup set (when SALES_REPS_ENABLED)
  • /health            — shallow liveness probe
  • /                  — front-end assets from STATIC_DIR, if present
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from tracker.core.config import settings
from tracker.core.database import engine
from tracker.repositories.lookups import get_lookup_sets
from tracker.routers.errors import register_exception_handlers
from tracker.routers.lookups import build_lookup_router
from tracker.routers.projects import router as projects_router
from tracker.services.schema import ensure_schema

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

lookup_sets = get_lookup_sets(settings)


# ── Lifespan ────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""

    # Startup — schema first; SchemaInitError propagates and stops the app
    await ensure_schema(engine, lookup_sets)
    logger.info("Schema ready, serving requests ✓")

    yield  # ← application runs here

    # Shutdown — clean up connection pool
    await engine.dispose()
    logger.info("Database engine disposed ✓")


# ── App ─────────────────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version="0.4.0",
    description="Project tracking API — projects, team members and sales reps.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

# Mount routers
app.include_router(projects_router, prefix="/api/projects")
for lookup in lookup_sets:
    app.include_router(build_lookup_router(lookup), prefix=f"/api/{lookup.key}")


# ── Health check ────────────────────────────────────────────
@app.get(
    "/health",
    tags=["System"],
    summary="Liveness probe",
)
async def health_check() -> dict[str, str]:
    """Shallow health check — confirms the process is alive."""
    return {"status": "healthy"}


# ── Front-end ───────────────────────────────────────────────
# Mounted last so it never shadows the API routes above.
if Path(settings.STATIC_DIR).is_dir():
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
