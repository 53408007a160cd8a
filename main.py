"""
devbook user service — application entry point.
"""

from __future__ import annotations

import logging
import sys
from datetime import timedelta

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.middleware import register_middleware
from api.routes import router as users_router
from auth.jwt import TokenService
from auth.routes import router as auth_router
from config.settings import Settings, config
from database.session import build_engine, build_session_factory, ping_database

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("asyncio", "sqlalchemy.engine", "uvicorn.access"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Settings = config) -> FastAPI:
    app = FastAPI(
        title="devbook",
        version="1.0.0",
        description="User accounts with bearer-token authentication.",
    )

    app.state.token_service = TokenService(
        secret=settings.jwt_secret.get_secret_value(),
        ttl=timedelta(seconds=settings.jwt_expiry_seconds),
        issuer=settings.jwt_issuer,
        algorithm=settings.jwt_algorithm,
    )
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(users_router)
    app.include_router(auth_router)

    @app.on_event("startup")
    async def on_startup():
        logger.info("Checking database connectivity…")
        await ping_database(app.state.engine)
        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.engine.dispose()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
