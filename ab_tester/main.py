"""Main FastAPI application.

create_app() wires the database handle, routers and error handlers.
Run it with `ab-tester` or `python -m ab_tester.main`.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ab_tester.config import Settings, settings as default_settings
from ab_tester.database import Database
from ab_tester.error_handlers import register_error_handlers
from ab_tester.logging_config import setup_logging
from ab_tester.routers import users, variants

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the app. Pass a Database to reuse an existing handle (tests do)."""
    settings = settings or default_settings
    if database is None:
        database = Database(settings.database_url, settings.statement_timeout_ms)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create tables on startup, close the pool on shutdown."""
        setup_logging(settings.log_level)
        database.init_db()
        logger.info("Database initialized")
        yield
        database.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title="A/B Tester API",
        description="Stores variants and the users assigned to them",
        version="1.0.0",
        lifespan=lifespan
    )
    # Shared, long-lived handle; get_db reads it from here
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(variants.router)
    app.include_router(users.router)

    register_error_handlers(app)

    @app.get("/")
    def root():
        """Just a basic root endpoint."""
        return {"status": "ok", "message": "A/B Tester API is running"}

    @app.get("/health")
    def health():
        """Health check endpoint, pings the database"""
        if not database.health_check():
            return JSONResponse(status_code=503, content={"status": "unhealthy"})
        return {"status": "healthy"}

    return app


app = create_app()


def run():
    """Console entry point."""
    uvicorn.run("ab_tester.main:app", host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
