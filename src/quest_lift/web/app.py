"""FastAPI application for the quest-lift JSON API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..db.engine import get_db_path, init_db, seed_exercises, seed_rewards
from ..errors import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    QuestLiftError,
    StateError,
    ValidationError,
)
from ..generators.plan_generator import PlanGenerator
from ..logging_setup import configure_logging
from .routers import exercises, plans, profile, rewards, workouts

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ValidationError: 422,
    NotFoundError: 404,
    ConflictError: 409,
    StateError: 400,
    PersistenceError: 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: make sure the schema and seed data exist
    db_path = app.state.db_path
    await init_db(db_path)
    await seed_exercises(db_path)
    await seed_rewards(db_path)
    yield


async def handle_quest_lift_error(request: Request, exc: QuestLiftError) -> JSONResponse:
    """Map the error taxonomy to HTTP statuses."""
    status_code = 500
    for error_type, code in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            status_code = code
            break

    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="quest-lift",
        description="Gamified workout plans and progression",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_path = db_path or get_db_path()
    app.state.generator = PlanGenerator()

    app.add_exception_handler(QuestLiftError, handle_quest_lift_error)

    # Include routers
    app.include_router(profile.router)
    app.include_router(exercises.router)
    app.include_router(plans.router)
    app.include_router(workouts.router)
    app.include_router(rewards.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
