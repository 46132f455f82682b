"""
User Service application factory.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from userservice.config.logger import get_logger
from userservice.config.settings import Settings, get_settings
from userservice.shared.errors import register_exception_handlers
from userservice.shared.health import HealthChecker, create_health_router
from userservice.users.crud import UserStore
from userservice.users.routes import router as users_router
from userservice.users.services import UserService


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """
    Build the FastAPI application.
    - One UserStore per app, shared by all requests through app.state.
    - Users router mounted under settings.app.api_prefix.
    - Root, health and catch-all 404 responses.
    """
    settings = settings or get_settings()
    logger = get_logger(settings.app.app_name.lower().replace(" ", "_"), settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Application startup complete",
            url=settings.server.get_url(),
            users=len(app.state.user_store.list()),
        )
        yield
        logger.info("Application shutdown")

    app = FastAPI(
        title=settings.app.app_name,
        version=settings.app.version,
        debug=settings.app.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.user_store = store if store is not None else UserStore()
    app.state.user_service = UserService(app.state.user_store, logger=get_logger("users", settings))
    health_checker = HealthChecker()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            f"{request.method} {request.url.path}",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to the {settings.app.app_name} API",
            "version": settings.app.version,
            "endpoints": {
                "users": settings.app.api_prefix,
                "health": "/health",
            },
        }

    app.include_router(create_health_router(health_checker))
    app.include_router(users_router, prefix=settings.app.api_prefix)
    register_exception_handlers(app, logger)

    return app
