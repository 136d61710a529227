"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quill.config import Settings
from quill.interface.api.errors import register_error_handlers
from quill.interface.api.middleware import API_KEY_HEADER, APIKeyMiddleware
from quill.interface.api.routes import comments, health, posts
from quill.util.di.container import create_container, setup_di
from quill.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings (defaults to the environment)
    """
    settings = settings or Settings()

    # Instrument httpx for outbound Contentful requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Quill API",
        description="Blog content API - posts from Contentful and reader comments",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    register_error_handlers(app_instance)

    # Middleware added last runs first: CORS must answer preflight
    # requests before the API key check sees them
    app_instance.add_middleware(APIKeyMiddleware, api_key=settings.auth.api_key)
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            API_KEY_HEADER,
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # DI shares the same settings instance as the middleware
    container = create_container(settings)
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
