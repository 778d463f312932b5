"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from prompthub.config import Settings
from prompthub.interface.api.errors import register_error_handlers
from prompthub.interface.api.gatekeeper import GatekeeperMiddleware
from prompthub.interface.api.routes import (
    auth,
    comments,
    health,
    posts,
    prompts,
    users,
)
from prompthub.util.di.container import create_container, setup_di
from prompthub.util.observability import instrument_fastapi

API_PREFIX = "/api"


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings for the gatekeeper, loaded from the environment if omitted
        container: DI container, the production container if omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="PromptHub API",
        description="Share, discover and discuss AI prompts",
        version="0.1.0",
    )

    # Read by the session cookie dependency
    app_instance.state.settings = settings

    instrument_fastapi(app_instance)

    register_error_handlers(app_instance)

    # Admission and CORS for every request, preflight included
    app_instance.add_middleware(GatekeeperMiddleware, settings=settings)

    setup_di(app_instance, container or create_container(settings))

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router, prefix=API_PREFIX)
    app_instance.include_router(posts.router, prefix=API_PREFIX)
    app_instance.include_router(comments.router, prefix=API_PREFIX)
    app_instance.include_router(prompts.router, prefix=API_PREFIX)
    app_instance.include_router(users.router, prefix=API_PREFIX)

    return app_instance
