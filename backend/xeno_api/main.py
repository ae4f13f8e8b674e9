"""
FastAPI main application module for the Xeno marketing platform
"""

from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import time
import uuid

from xeno_api.api.api import api_router
from xeno_api.core.config import Settings, get_settings
from xeno_api.core.database import Database
from xeno_api.core.encryption import TokenEncryption
from xeno_api.core.errors import register_exception_handlers
from xeno_api.core.security import PasswordHasher, TokenIssuer
from xeno_api.services.auth_service import AuthService
from xeno_api.services.sync_providers import build_sync_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    # Note: In production, schema changes go through migrations instead
    if not settings.is_production:
        app.state.database.create_all()

    logger.info("Application startup complete")
    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    app.state.database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and every collaborator it needs from explicit settings
    """
    settings = settings or get_settings()
    settings.validate_for_environment()

    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(
        title=settings.APP_NAME,
        description="Multi-tenant marketing analytics backend for Shopify storefronts",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    token_issuer = TokenIssuer(
        settings.JWT_SECRET_KEY,
        ttl=timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
        algorithm=settings.JWT_ALGORITHM,
    )
    app.state.settings = settings
    app.state.database = Database.from_settings(settings)
    app.state.token_issuer = token_issuer
    app.state.encryption = TokenEncryption(settings.SECRET_KEY)
    app.state.auth_service = AuthService(PasswordHasher(rounds=settings.BCRYPT_ROUNDS), token_issuer)
    app.state.sync_provider = build_sync_provider(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request id and timing middleware
    @app.middleware("http")
    async def add_request_context(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id
        start_time = time.time()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(time.time() - start_time)
        return response

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint with API information"""
        return {
            "message": settings.APP_NAME,
            "version": settings.VERSION,
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "xeno_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
