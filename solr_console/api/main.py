"""FastAPI main application for Solr Console."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from solr_console import __version__
from solr_console.core.logging import setup_logging
from solr_console.models.api.system import HealthResponse, RootResponse
from solr_console.models.config import ConsoleSettings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings: ConsoleSettings = app.state.settings
    setup_logging(settings.server.log_level)
    logger.info("Starting Solr Console API")

    yield

    # Shutdown
    logger.info("Solr Console API shutdown complete")


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Invalid request: {location}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": message}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def setup_routers(app: FastAPI) -> None:
    from solr_console.api.ai import router as ai_router
    from solr_console.api.collections import router as collections_router
    from solr_console.api.cores import router as cores_router
    from solr_console.api.documents import router as documents_router
    from solr_console.api.schema import router as schema_router
    from solr_console.api.system import router as system_router

    app.include_router(collections_router, prefix="/solr/collections", tags=["collections"])
    app.include_router(schema_router, prefix="/solr/schema", tags=["schema"])
    app.include_router(documents_router, prefix="/solr/schema", tags=["documents"])
    app.include_router(cores_router, prefix="/solr/cores", tags=["cores"])
    app.include_router(system_router, prefix="/solr", tags=["system"])
    app.include_router(ai_router, prefix="/ai", tags=["ai"])


def create_app(settings: ConsoleSettings | None = None) -> FastAPI:
    """Build the console API.

    Args:
        settings: Console settings; loaded from the config file when omitted
    """
    settings = settings or ConsoleSettings.load_from_file()

    app = FastAPI(
        title="Solr Console API",
        description="Stateless administration proxy for Apache Solr",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(timestamp=datetime.now(), version=__version__)

    @app.get("/", response_model=RootResponse)
    async def root():
        """Root endpoint."""
        return RootResponse(message="Solr Console API", version=__version__, docs="/docs")

    setup_routers(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    server = app.state.settings.server
    uvicorn.run(app, host=server.host, port=server.port, log_level=server.log_level.lower())
