# components_api/main.py
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from components_api.api.routes import components as component_routes
from components_api.config import Settings, get_settings
from components_api.core.errors import register_exception_handlers
from components_api.database import Database
from components_api.logging_config import configure_logging
from components_api.middleware.cors_config import configure_cors
from components_api.middleware.security_headers import add_security_headers
from components_api.repository.util import get_repository

logger = logging.getLogger(__name__)

SERVICE_NAME = "Components API"


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI app. The Database and the repository strategy are
    created once in the lifespan and kept on `app.state` for the process
    lifetime. Pass `database` to reuse an existing pool (tests do this).
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- startup logic ---
        db = database or Database.from_settings(settings)
        owns_db = database is None
        logger.info("Database target: %s", db.describe())
        if settings.CREATE_SCHEMA:
            db.create_schema()
        app.state.database = db
        app.state.repository = get_repository(settings.DATA_ACCESS, db)
        logger.info("Data access strategy: %s", settings.DATA_ACCESS)

        yield

        # --- shutdown logic ---
        app.state.repository = None
        if owns_db:
            db.dispose()
            logger.info("Connection pool closed")
        logger.info("Shutting down %s", SERVICE_NAME)

    app = FastAPI(title=SERVICE_NAME, version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    configure_cors(app, settings.cors_origins)
    add_security_headers(app)
    register_exception_handlers(app)

    # Mount the static front-end if present
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/static", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

    app.include_router(component_routes.router)

    @app.get("/", tags=["root"])
    async def root():
        return {"status": "ok", "service": SERVICE_NAME, "data_access": settings.DATA_ACCESS}

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
