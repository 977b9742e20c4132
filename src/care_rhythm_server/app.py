"""Litestar application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from litestar import Litestar
from litestar.openapi import OpenAPIConfig

from care_rhythm_server import __version__
from care_rhythm_server.api import api_routers
from care_rhythm_server.core.config import settings
from care_rhythm_server.routes import root_redirect

logging.basicConfig(format="%(message)s", level=settings.log_level)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: Litestar) -> AsyncIterator[None]:
    """Log startup and shutdown with the effective heatmap settings."""
    logger.info(
        "Starting care-rhythm-server",
        version=__version__,
        run_tolerance=settings.run_tolerance,
        instant_half_window=settings.instant_half_window,
        default_window_days=settings.default_window_days,
    )

    yield

    logger.info("Shutdown complete")


def create_app() -> Litestar:
    """Create Litestar application.

    Returns:
        Configured Litestar app instance
    """
    return Litestar(
        route_handlers=[root_redirect, *api_routers],
        lifespan=[lifespan],
        openapi_config=OpenAPIConfig(
            title="care-rhythm-server API",
            version=__version__,
            description="24-hour activity heatmaps from infant-care logs",
        ),
        debug=settings.log_level == "DEBUG",
    )


# Application instance
app = create_app()
