"""FastAPI application for ProjectBoard."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from projectboard import __version__
from projectboard.api.routers import projects
from projectboard.config import Config
from projectboard.core.errors import ProjectBoardError
from projectboard.managers.projects import ProjectManager

logger = logging.getLogger(__name__)


async def handle_projectboard_error(request: Request, exc: ProjectBoardError) -> JSONResponse:
    """Translate domain errors into {"error": message} responses."""
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and path parameters as 400."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the ProjectBoard API bound to the database named by config."""
    config = config or Config()
    manager = ProjectManager(config.database_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        manager.init_schema()
        logger.info(f"Starting ProjectBoard API v{__version__}")
        yield
        # Shutdown
        logger.info("Shutting down ProjectBoard API")

    app = FastAPI(
        title="ProjectBoard API",
        description="Project tracking over a single SQLite table",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.project_manager = manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ProjectBoardError, handle_projectboard_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    app.include_router(projects.router, prefix="/projects", tags=["projects"])
    app.include_router(
        projects.router, prefix="/api/projects", tags=["projects"], include_in_schema=False
    )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "ProjectBoard API",
            "version": __version__,
            "status": "running",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
