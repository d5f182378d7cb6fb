"""
Application factory.

    uvicorn hrms.main:app

`create_app()` wires logging, the database lifecycle, the request-id
middleware, the exception handlers and the /api/v1 routers. Tests call it
with their own Settings / Database.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hrms.api.v1 import api_router
from hrms.api.v1.error_handlers import register_exception_handlers
from hrms.config.settings import Settings, get_settings
from hrms.core.logging import RequestIDMiddleware, setup_logging
from hrms.database.session import Database

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Args:
        settings: defaults to the cached environment settings
        database: an already built Database; when omitted one is created from
            settings.DATABASE_URL at startup and disposed at shutdown
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings)
        owns_database = database is None
        app.state.database = database or Database(settings.DATABASE_URL, **settings.engine_options())
        logger.info(
            "app.startup",
            extra={"env": settings.ENV, "dialect": app.state.database.dialect},
        )
        try:
            yield
        finally:
            if owns_database:
                await app.state.database.dispose()
            logger.info("app.shutdown")

    app = FastAPI(title="HRMS API", lifespan=lifespan)

    # outside the lifespan so requests served without startup (tests) still work
    if database is not None:
        app.state.database = database

    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
