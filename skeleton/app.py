"""Skeleton — FastAPI application factory."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from skeleton.config import Settings, get_settings
from skeleton.middleware import (
    configure_cors,
    configure_rate_limiting,
    configure_request_logging,
    lifespan,
)
from skeleton.routers import health, mail, welcome
from skeleton.services.clock import utcnow
from skeleton.services.database import DatabaseProbe
from skeleton.services.mailer import Mailer
from skeleton.templating import build_templates


def create_app(
    settings: Settings | None = None,
    *,
    database: DatabaseProbe | None = None,
    mailer: Mailer | None = None,
    templates: Jinja2Templates | None = None,
    clock: Callable[[], datetime] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Collaborators default to ones built from *settings*; pass them in to
    run the app without a live database or SMTP server.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Web application skeleton with health checks and mail diagnostics",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Collaborators on app state
    app.state.settings = settings
    app.state.database = database or DatabaseProbe(settings.database_url)
    app.state.mailer = mailer or Mailer.from_settings(settings)
    app.state.templates = templates or build_templates()
    app.state.clock = clock or utcnow

    # Middleware
    configure_cors(app, settings)
    configure_rate_limiting(app, settings)
    configure_request_logging(app)

    # Routers
    app.include_router(welcome.router)
    app.include_router(health.router)
    app.include_router(mail.router)

    return app


# Default app instance for uvicorn
app = create_app()
