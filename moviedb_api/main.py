"""
FastAPI application for the movie database mock API.

Public read-only API over the in-memory record store.
In files mode the JSON resources are loaded in the background at startup;
until a collection is loaded its endpoints answer 503.
"""

import asyncio
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviedb.exceptions import DataLoadError, QueryError
from moviedb.loader import DataLoader
from moviedb_api.dependencies import get_config, get_loader
from moviedb_api.exceptions import (
    generic_exception_handler,
    http_exception_handler,
    query_error_handler,
)
from moviedb_api.logging_config import (
    logger,
    generate_request_id,
    set_request_id,
)

# Import routers
from moviedb_api.routers import movies, persons, producers, search, status


def _resolve(app: FastAPI, dependency):
    """Call a dependency the way routes see it, honouring overrides."""
    return app.dependency_overrides.get(dependency, dependency)()


async def _initial_load(loader: DataLoader) -> None:
    """Load the JSON resources; total failure is logged, never fatal."""
    try:
        report = await loader.load_all()
        logger.info(f"Initial data load finished: {report.statuses}")
    except DataLoadError as e:
        logger.error(f"Initial data load failed: {e.errors}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Kick off the background loader in files mode."""
    config = _resolve(app, get_config)
    task = None
    if config.uses_loader:
        logger.info("Starting background data load")
        task = asyncio.create_task(_initial_load(_resolve(app, get_loader)))
    app.state.load_task = task
    yield
    if task is not None and not task.done():
        await task


# Create FastAPI app
app = FastAPI(
    title="Movie Database Mock API",
    description="Read-only movie, person and production company lookups",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Register exception handlers
app.add_exception_handler(QueryError, query_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Add CORS middleware (must be done before app starts)
# In production, configure ALLOWED_ORIGINS env var
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().allowed_origins or ["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all HTTP requests with timing and response status."""
    request_id = generate_request_id()
    set_request_id(request_id)

    # Skip logging for health checks and docs
    skip_paths = {"/health", "/", "/api/docs", "/api/redoc", "/api/openapi.json"}
    if request.url.path in skip_paths:
        return await call_next(request)

    start_time = time.time()
    client_ip = request.client.host if request.client else "unknown"

    logger.info(
        f"Request started: {request.method} {request.url.path} "
        f"from {client_ip}"
    )

    try:
        response = await call_next(request)
        duration_ms = (time.time() - start_time) * 1000

        log_msg = (
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration_ms:.2f}ms"
        )

        if response.status_code >= 500:
            logger.error(log_msg)
        elif response.status_code >= 400:
            logger.warning(log_msg)
        else:
            logger.info(log_msg)

        # Add request ID to response headers for debugging
        response.headers["X-Request-ID"] = request_id
        return response

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        logger.error(
            f"Request failed: {request.method} {request.url.path} "
            f"duration={duration_ms:.2f}ms error={str(e)}"
        )
        raise


# Mount public routers
app.include_router(movies.router, prefix="/api", tags=["Movies"])
app.include_router(persons.router, prefix="/api", tags=["Persons"])
app.include_router(producers.router, prefix="/api", tags=["Producers"])
app.include_router(search.router, prefix="/api", tags=["Search"])
app.include_router(status.router, prefix="/api", tags=["Status"])


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint lists where the docs live."""
    return {
        "message": "Movie Database Mock API",
        "docs": "/api/docs",
        "redoc": "/api/redoc",
    }


@app.get("/health", include_in_schema=False)
async def health():
    """Simple health check endpoint."""
    return {"status": "ok"}
