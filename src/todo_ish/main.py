"""
FastAPI application entry point.

Creates and configures the FastAPI application with routes, the TaskError
handler, and the storage backend selected by settings.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .api.errors import task_error_handler
from .api.routes import tasks
from .config import Settings, settings
from .database import close_db, get_session_factory, init_db
from .domain.repositories.task_repo import TaskRepository
from .exceptions import TaskError
from .infrastructure.repositories.in_memory_task_repo import InMemoryTaskRepository
from .infrastructure.repositories.postgres_task_repo import PostgresTaskRepository
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


async def build_repository(config: Settings) -> TaskRepository:
    """
    Create the TaskRepository implementation named by config.storage_backend.

    Args:
        config: Application settings

    Returns:
        In-memory or PostgreSQL backed repository
    """
    if config.storage_backend == "memory":
        logger.info("Using in-memory task repository")
        return InMemoryTaskRepository()

    if config.environment == "development":
        # Only auto-create tables in development
        await init_db()
    logger.info("Using PostgreSQL task repository")
    return PostgresTaskRepository(get_session_factory())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Wires the repository on startup and releases the connection pool on shutdown.
    """
    configure_logging(settings.log_level)
    try:
        app.state.task_repository = await build_repository(settings)
        yield
    finally:
        await close_db()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Minimal task tracking service",
    lifespan=lifespan,
    debug=settings.debug,
)

app.add_exception_handler(TaskError, task_error_handler)

# Include routers
app.include_router(tasks.router, prefix="/v1")


# Root endpoint
@app.get("/", tags=["health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "environment": settings.environment,
    }


@app.get("/health", tags=["health"])
async def health_check() -> JSONResponse:
    """Detailed health check."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "service": settings.app_name,
            "version": "0.1.0",
        },
    )
