"""plot451 API: FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plot451.config import configure_logging, get_settings
from plot451.database import create_schema, dispose_engine, initialize_database
from plot451.infrastructure.column.routers import columns_router, directories_router
from plot451.infrastructure.common.error_handlers import register_error_handlers
from plot451.infrastructure.table.routers import tables_router

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup/shutdown lifecycle."""
    initialize_database(settings)
    if settings.AUTO_CREATE_SCHEMA:
        create_schema()
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        storage_backend=settings.STORAGE_BACKEND,
    )
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(directories_router, prefix=settings.API_V1_PREFIX)
app.include_router(columns_router, prefix=settings.API_V1_PREFIX)
app.include_router(tables_router, prefix=settings.API_V1_PREFIX)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "healthy", "version": settings.VERSION}
