"""API routes."""

from litestar import Router

from care_rhythm_server.api.health import health_router
from care_rhythm_server.api.heatmap import heatmap_router
from care_rhythm_server.core.config import settings

# Versioned API routers get the api_prefix (default /api/v1)
_v1_routers = [
    heatmap_router,
]

api_v1_router = Router(path=settings.api_prefix, route_handlers=_v1_routers)

# Export: health (root), v1 (prefixed)
# - health_router: /health - no version prefix
# - api_v1_router: /api/v1/* - heatmap endpoints
api_routers = [health_router, api_v1_router]

__all__ = ["api_routers"]
