"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from labpages_core import __version__

from app.routers import endpoints, health, labs, render, sessions, steps, validate
from app.settings import settings


def configure_logging(level: str) -> None:
    """Apply the configured level to structlog and the core library loggers."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(numeric))
    # Core loggers carry their own level, so the parent alone is not enough
    for name in list(logging.root.manager.loggerDict):
        if name == "labpages_core" or name.startswith("labpages_core."):
            logging.getLogger(name).setLevel(numeric)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup."""
    configure_logging(settings.log_level)
    structlog.get_logger().info(
        "api_starting",
        environment=settings.environment,
        base_path=settings.base_path,
        steps_dir=str(settings.steps_dir),
    )
    yield


app = FastAPI(
    title="labpages API",
    description="API for rendering hands-on lab pages and validating learner API responses",
    version=__version__,
    root_path=settings.base_path,
    lifespan=lifespan,
)

# CORS middleware - allow all origins in dev/Codespaces, restrict in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.cors_allow_all else settings.cors_origins,
    allow_credentials=not settings.cors_allow_all,  # credentials require specific origins
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(render.router, prefix="/api/v1", tags=["render"])
app.include_router(validate.router, prefix="/api/v1", tags=["validate"])
app.include_router(endpoints.router, prefix="/api/v1", tags=["endpoints"])
app.include_router(sessions.router, prefix="/api/v1", tags=["sessions"])
app.include_router(labs.router, prefix="/api/v1", tags=["labs"])
app.include_router(steps.router, prefix="/api/v1", tags=["steps"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
