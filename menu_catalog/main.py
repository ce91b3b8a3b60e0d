from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request

from menu_catalog.api.errors import register_error_handlers
from menu_catalog.api.v1 import categories, items, subcategories
from menu_catalog.core.config import Settings, get_settings
from menu_catalog.core.constants import API_PREFIX
from menu_catalog.core.observability import setup_logging
from menu_catalog.db.session import Database

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_migrations(settings: Settings) -> None:
    from alembic import command
    from alembic.config import Config

    alembic_cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    alembic_cfg.attributes["database_url"] = settings.database_url
    alembic_cfg.attributes["configure_logger"] = False
    command.upgrade(alembic_cfg, "head")
    logger.info("Database migrations completed")


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the API with its own settings and database handle.

    Passing ``database`` lets callers (tests, scripts) supply an engine they
    manage; otherwise one is built from ``settings`` and disposed on shutdown.
    """

    settings = settings or get_settings()
    settings.validate_runtime()
    owns_database = database is None
    database = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        if settings.run_migrations:
            run_migrations(settings)
        logger.info("Menu catalog API started")
        yield
        if owns_database:
            database.dispose()
        logger.info("Menu catalog API shut down")

    app = FastAPI(title="Menu Catalog", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = database

    register_error_handlers(app)

    app.include_router(categories.router, prefix=API_PREFIX)
    app.include_router(subcategories.router, prefix=API_PREFIX)
    app.include_router(items.router, prefix=API_PREFIX)

    @app.get("/")
    def root():
        return {
            "message": "Welcome to Menu Catalog API",
            "version": app.version,
            "endpoints": {
                "categories": f"{API_PREFIX}/categories",
                "subCategories": f"{API_PREFIX}/subcategories",
                "items": f"{API_PREFIX}/items",
            },
        }

    @app.get("/healthz")
    def health_check(request: Request):
        """Health check endpoint for load balancers."""
        db_ok = request.app.state.db.health_check()
        return {"status": "ok" if db_ok else "degraded", "database": db_ok}

    return app
