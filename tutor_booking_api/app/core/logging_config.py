"""
Logging setup for the Tutor Booking API.

Every module logs through ``logging.getLogger(__name__)``: the storage
connection result at startup, rejected identity tokens, denied
ownership checks, created and deleted documents, review aggregation
outcomes and storage failures.  ``setup_logging`` routes all of it to
the console and, when ``LOG_FILE`` is set, to a file as well.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the service's handlers to the root logger.

    ``level`` is a level name taken from ``LOG_LEVEL`` (unknown names mean
    ``INFO``); ``logfile`` comes from ``LOG_FILE``.  If the root logger
    already has handlers, for instance because uvicorn or an earlier
    ``create_app`` call configured it, nothing is changed.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
