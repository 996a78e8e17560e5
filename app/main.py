from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.router import api_router
from app.core.config import get_settings
from app.core.http import create_http_client
from app.core.logging import configure_logging
from app.db.session import create_engine, create_session_maker, init_db
from app.services.history import HistoryStore


logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    engine = create_engine(settings)
    try:
        await init_db(engine)
    except Exception:
        logger.exception("database_connection_failed")
        await engine.dispose()
        raise
    logger.info("database_connected")

    # Setup HTTP client
    client = create_http_client(settings)

    app.state.settings = settings
    app.state.http_client = client
    app.state.history_store = HistoryStore(create_session_maker(engine))

    try:
        yield
    finally:
        await client.aclose()
        await engine.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="weather history api",
        version="0.1.0",
        lifespan=lifespan,
    )
    register_error_handlers(app)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
