"""ohsome-stats REST API.

Split into domain modules under ohsome_stats/api/. Each module exports a
register_routes(router, svc) function that adds its endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ohsome_stats import __version__
from ohsome_stats.core.services import Services

logger = logging.getLogger(__name__)


def create_api(svc: Services) -> FastAPI:
    """Build the REST API as a FastAPI app. OpenAPI docs are served at /docs."""
    app = FastAPI(
        title="Ohsome Contribution Stats Service",
        version=__version__,
        description="REST endpoints for OSM contribution statistics.",
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=svc.config.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    router = APIRouter()

    from ohsome_stats.api.stats import register_routes as reg_stats
    from ohsome_stats.api.hashtags import register_routes as reg_hashtags
    from ohsome_stats.api.metadata import register_routes as reg_metadata

    reg_stats(router, svc)
    reg_hashtags(router, svc)
    reg_metadata(router, svc)

    app.include_router(router)
    return app
