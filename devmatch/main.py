"""DevMatch — FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devmatch.config import settings
from devmatch.infrastructure.api.routes_health import router as health_router
from devmatch.infrastructure.api.routes_matching import router as matching_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.getLogger("devmatch").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="DevMatch — Developer Matching Engine",
        description="Ticket prioritization and developer ranking for help requests",
        version="0.1.0",
        debug=settings.debug,
    )

    # CORS for the web frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(matching_router, prefix="/api")

    logger.info("DevMatch API created (debug=%s)", settings.debug)
    return app


app = create_app()
