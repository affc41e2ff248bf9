"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pact.config import Settings
from pact.interface.api.error_handlers import register_error_handlers
from pact.interface.api.routes import (
    admin,
    auth,
    exclusions,
    health,
    invites,
    partnerships,
    reports,
    users,
)
from pact.util.di.container import create_container, setup_di
from pact.util.observability import instrument_fastapi


def create_app(settings: Settings | None = None, container=None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings (loaded from environment if omitted)
        container: DI container (production container if omitted)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Pact API",
        description="Backend API for Pact - month-long accountability partnerships",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(partnerships.router)
    app_instance.include_router(exclusions.router)
    app_instance.include_router(reports.router)
    app_instance.include_router(admin.router)

    register_error_handlers(app_instance)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
