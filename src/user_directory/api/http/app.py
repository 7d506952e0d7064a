"""FastAPI application factory and setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from user_directory import __version__
from user_directory.api.http.app_data import ApplicationDependencies
from user_directory.api.http.middleware import (
    ActivityLogInterceptor,
    FailureTranslationInterceptor,
    InterceptorChainMiddleware,
    TokenAuthInterceptor,
)
from user_directory.api.http.routers.health import router as health_router
from user_directory.api.http.routers.users import router as users_router
from user_directory.api.utils.app_startup import configure_logging
from user_directory.core.services import UserDirectoryService
from user_directory.core.store import DirectoryStore
from user_directory.runtime.config.config_data import ConfigData
from user_directory.runtime.context import get_config

__all__ = ["app", "create_app", "build_dependencies"]


def build_dependencies(config: ConfigData) -> ApplicationDependencies:
    """Create the store and the service that share it."""
    store = DirectoryStore(shards=config.store.shards)
    service = UserDirectoryService(
        store,
        default_take=config.pagination.default_take,
        max_take=config.pagination.max_take,
    )
    return ApplicationDependencies(
        config=config, store=store, user_directory_service=service
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    deps: ApplicationDependencies = app.state.app_dependencies
    logger.info(
        "Starting up user directory in {} environment", deps.config.app.environment
    )
    try:
        yield
    finally:
        logger.info("Shutting down user directory ({} users in memory)", deps.store.count())


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the application.

    Requests pass through the auth gate, then the failure translator, then the
    activity logger before reaching a route.
    """
    config = config or get_config()
    is_production = config.app.environment == "production"

    app = FastAPI(
        title=config.app.title,
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )
    app.state.app_dependencies = build_dependencies(config)

    app.add_middleware(
        InterceptorChainMiddleware,
        interceptors=[
            TokenAuthInterceptor(config.auth.tokens),
            FailureTranslationInterceptor(),
            ActivityLogInterceptor(),
        ],
    )

    app.include_router(health_router)
    app.include_router(users_router)
    return app


configure_logging()

app = create_app()
