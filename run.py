"""Entry point for the Tutor Booking API.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example in a container where only
a single Python file is specified::

    python run.py

Host and port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``3000``).  MongoDB and Firebase credentials
are read from the environment as described in
``tutor_booking_api/app/core/config.py``.
"""
import asyncio
import logging

from uvicorn import Config, Server

from tutor_booking_api.app.core.config import settings
from tutor_booking_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
