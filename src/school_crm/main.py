"""FastAPI application entrypoint for the School CRM."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.router import api_router
from .core.config import Settings, get_settings
from .core.database import Database
from .core.logging import configure_logging
from .services.seed_service import seed_demo_data

logger = logging.getLogger(__name__)


def _prepare_database(settings: Settings) -> Database:
    database = Database(settings.database_url, echo=settings.sql_echo)
    database.create_all()
    if settings.seed_demo_data:
        session = database.session()
        try:
            if seed_demo_data(session):
                session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
    return database


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    app.state.database.dispose()
    logger.info("database connections released")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    Each call builds its own store, so separate apps never share state.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_logs=settings.json_logs)

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=_lifespan)
    app.state.settings = settings
    app.state.database = _prepare_database(settings)
    app.include_router(api_router, prefix="/api")
    register_exception_handlers(app)

    logger.info("%s ready on %s", settings.app_name, app.state.database.engine.url.render_as_string())
    return app


app = create_app()
