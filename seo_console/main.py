"""SEO Console Stub API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the uniform error envelope
    - The site catalog (fixture included) is loaded when the app is built,
      before the first request, and attached read-only to app.state
    - CORS configured from settings (not hardcoded)
    - No trailing-slash redirects: an unmatched path is always the 404
      envelope, never a 307

Design Decisions:
    - create_app() factory: tests build apps per site-match mode without
      touching process settings; the module-level `app` serves uvicorn
    - Lifespan only configures logging and announces the base URL; a broken
      fixture fails create_app() itself
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seo_console import __version__
from seo_console.api.error_handlers import register_error_handlers
from seo_console.api.request_logging import register_request_logging
from seo_console.api.routes import (
    health, search_analytics, sitemaps, sites, url_inspection,
)
from seo_console.config import Settings, get_settings
from seo_console.core.site_catalog import SiteCatalog
from seo_console.infrastructure.fixture_store import load_site_catalog
from seo_console.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, catalog: SiteCatalog | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"SEO Console API listening on http://localhost:{settings.port}/v1",
        )
        yield
        logger.info("SEO Console API shutting down")

    app = FastAPI(
        title="SEO Console Stub API",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.catalog = catalog or load_site_catalog(
        settings.fixture_path, settings.site_match_mode,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(sites.router)
    app.include_router(search_analytics.router)
    app.include_router(url_inspection.router)
    app.include_router(sitemaps.router)

    register_error_handlers(app)
    register_request_logging(app)
    return app


app = create_app()
