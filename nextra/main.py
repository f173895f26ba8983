# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles

# Local application imports
from .api.v1 import health_router, log_router, verified_user_router
from .core.config import Settings, get_settings
from .infrastructure.storage import initialize_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the data and uploads directories and the empty JSON collections
    on first start.
    """
    settings: Settings = app.state.settings

    initialize_storage(settings)
    logger.info(f"NEXTRA running at http://{settings.host}:{settings.port}")

    yield

    logger.info("Application shutdown complete")


def _register_frontend(application: FastAPI, frontend_dir: Path) -> None:
    """
    Serve the frontend bundle at / and fall back to index.html with a 404
    status for unmatched routes (client-side routing).
    """
    index_path = frontend_dir / "index.html"
    if not index_path.is_file():
        logger.warning(f"No frontend bundle at {frontend_dir}, serving API only")
        return

    @application.exception_handler(StarletteHTTPException)
    async def frontend_fallback(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return FileResponse(index_path, status_code=404)
        return await http_exception_handler(request, exc)

    application.mount("/", StaticFiles(directory=str(frontend_dir), html=True), name="frontend")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - API route registration
    - Static hosting for uploads and the frontend bundle

    Args:
        settings: Explicit settings; defaults to the environment-based singleton

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = settings or get_settings()

    application = FastAPI(
        title="NEXTRA Security API",
        version="1.0.0",
        description="Detection logs and verified users for the NEXTRA security demo",
        lifespan=lifespan
    )
    application.state.settings = settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(health_router, prefix="/api")
    application.include_router(log_router, prefix="/api/logs")
    application.include_router(verified_user_router, prefix="/api")

    # Uploaded photos; the directory is created at startup
    application.mount(
        "/uploads",
        StaticFiles(directory=str(settings.uploads_dir), check_dir=False),
        name="uploads",
    )

    # Mounted last so API routes take precedence
    _register_frontend(application, settings.frontend_dir)

    return application


# Create application instance
app = create_application()
