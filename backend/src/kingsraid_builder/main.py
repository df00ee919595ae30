"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from kingsraid_builder.config import resolve_path, settings
from kingsraid_builder.api.routes.heroes import router as heroes_router
from kingsraid_builder.api.routes.teams import router as teams_router
from kingsraid_builder.exceptions import InvalidInput, NotFound, TeamBuilderError
from kingsraid_builder.repositories.team_repository import TeamRepository
from kingsraid_builder.services.hero_catalog_service import HeroCatalogService
from kingsraid_builder.services.team_service import TeamService

logger = logging.getLogger(__name__)

PUBLIC_DIR = resolve_path(settings.public_dir)
VIEWS_DIR = resolve_path(settings.views_dir)
SHELL_PAGE = "index.html"


def get_database_path() -> Path:
    """Get the team store path from settings."""
    return resolve_path(settings.database_path)


def build_hero_catalog() -> HeroCatalogService:
    return HeroCatalogService(
        public_dir=PUBLIC_DIR,
        hero_data_dir=settings.hero_data_dir,
        release_order_file=resolve_path(settings.release_order_file, base=PUBLIC_DIR),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: a store that can't be opened aborts before the server listens
    if not hasattr(app.state, "team_repository"):
        app.state.team_repository = TeamRepository(get_database_path())
    if not hasattr(app.state, "team_service"):
        app.state.team_service = TeamService(app.state.team_repository)
    if not hasattr(app.state, "hero_catalog"):
        app.state.hero_catalog = build_hero_catalog()
    logger.info(f"Serving static files from {PUBLIC_DIR}")
    try:
        yield
    finally:
        # Shutdown: release the store connection
        app.state.team_repository.close()


app = FastAPI(
    title="Kings Raid Team Builder",
    description="Hero catalog and shareable team compositions",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TeamBuilderError)
async def team_builder_error_handler(request: Request, exc: TeamBuilderError):
    """Render domain errors as ``{"success": false, "error": ...}``."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are bad input, reported like any other."""
    logger.info(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
    return await team_builder_error_handler(request, InvalidInput("Invalid request body"))


def _shell_response() -> FileResponse:
    shell = VIEWS_DIR / SHELL_PAGE
    if not shell.is_file():
        raise NotFound("Application page not found")
    return FileResponse(shell)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "kingsraid-builder"}


@app.get("/", include_in_schema=False)
async def index():
    """Application shell."""
    return _shell_response()


@app.get("/team/{team_id}/{title}", include_in_schema=False)
async def team_permalink(team_id: str, title: str):
    """Shared team permalink; the shell loads the team client-side."""
    return _shell_response()


# Register routers
app.include_router(heroes_router)
app.include_router(teams_router)

# Static assets last so API routes win
if PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=PUBLIC_DIR), name="public")
else:
    logger.warning(f"Public directory {PUBLIC_DIR} not found, static files disabled")


def run() -> None:
    """Start the server on settings.host:settings.port (env PORT)."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
