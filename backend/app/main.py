"""Main FastAPI application."""

# configure_structlog must run before the other app imports so cached loggers use it
from app.core.logging import configure_structlog
from app.core.config import settings

configure_structlog(
    log_level="DEBUG" if settings.debug else settings.log_level,
    json_logs=settings.json_logs and not settings.debug,
)

from contextlib import asynccontextmanager  # noqa: E402

import structlog  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from app.api.errors import register_exception_handlers  # noqa: E402
from app.api.routes import delivery, projects  # noqa: E402
from app.core.storage.database import close_db, get_session_factory, init_db  # noqa: E402
from app.core.storage.gateway import ProjectGateway  # noqa: E402
from app.services.project_service import ProjectService  # noqa: E402

logger = structlog.get_logger(__name__)


async def report_orphaned_projects() -> None:
    """Log projects that were stored without a file so they can be cleaned up."""
    async with get_session_factory()() as session:
        service = ProjectService(ProjectGateway(session, slug_bytes=settings.slug_bytes), settings)
        await service.find_orphans()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("database_initializing", database_url=settings.database_url)
    await init_db()
    logger.info("database_initialized")
    await report_orphaned_projects()

    yield

    # Shutdown
    await close_db()
    logger.info("application_shutdown")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Upload a single HTML file and serve it under a random slug",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(projects.router, prefix="/api")
    app.include_router(delivery.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": "0.1.0",
            "status": "running",
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
