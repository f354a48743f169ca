# Application factory and FastAPI setup.

from __future__ import annotations

from fastapi import FastAPI

from .clock import Clock
from .routers import health, root, status
from .settings import Settings, get_settings


def create_app(
    settings: Settings | None = None, clock: Clock | None = None
) -> FastAPI:
    """Create and configure the FastAPI application instance."""
    if settings is None:
        settings = get_settings()
    if clock is None:
        clock = Clock.start()

    app = FastAPI(title="SurePay API", version=settings.version)
    app.state.settings = settings
    app.state.clock = clock

    app.include_router(health.router)
    app.include_router(root.router)
    app.include_router(status.router)
    return app
