"""
Main entrypoint for the Tutor Booking API.

This module assembles the FastAPI application: logging, CORS, error
handlers and the v1 routes.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app`` so it
can be served directly::

    uvicorn tutor_booking_api.app.main:app --port 3000

Connections to MongoDB and Firebase are opened once on startup and
released on shutdown.  Callers (tests in particular) may pass a ready
``AppContext`` instead, in which case no connection is opened and the
context stays owned by the caller.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.context import AppContext
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None, context: Optional[AppContext] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use.  Defaults to the ones read from the environment.
    context : Optional[AppContext]
        Pre-built process resources.  When omitted they are opened when
        the application starts and closed when it shuts down.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.context is not None:
            yield
            return
        app.state.context = await AppContext.open(settings)
        try:
            yield
        finally:
            await app.state.context.close()
            app.state.context = None

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_error_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
