"""
MongoDB integration.

This module builds the process-wide motor client, resolves the two
document collections used by the service and provides small helpers
shared by the services: ObjectId parsing, document serialisation and
the ``storage_errors`` context manager that turns driver exceptions
into :class:`StorageError`.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from .config import Settings
from .errors import StorageError


logger = logging.getLogger(__name__)


@dataclass
class Collections:
    """The two collections the service works against."""

    tutors: AsyncIOMotorCollection
    bookings: AsyncIOMotorCollection


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Create the motor client.

    The client connects lazily, so creating it never blocks.  Stable API
    version 1 is requested in strict mode so that deprecated commands are
    rejected by the server.
    """
    return AsyncIOMotorClient(
        settings.mongo_connection_uri(),
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


def get_collections(client: Any, settings: Settings) -> Collections:
    """Resolve the tutor and booking collections from ``client``."""
    return Collections(
        tutors=client[settings.tutors_db][settings.tutors_collection],
        bookings=client[settings.bookings_db][settings.bookings_collection],
    )


async def ping(client: Any) -> bool:
    """Ping the deployment; log and report whether it answered."""
    try:
        await client.admin.command("ping")
    except PyMongoError as exc:
        logger.error("MongoDB connection error: %s", exc)
        return False
    logger.info("Connected to MongoDB successfully.")
    return True


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Return ``value`` as an ObjectId, or ``None`` if it is not one."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Copy a stored document, rendering its ``_id`` as a hex string."""
    result = dict(document)
    if isinstance(result.get("_id"), ObjectId):
        result["_id"] = str(result["_id"])
    return result


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate driver failures raised inside the block into ``StorageError``."""
    try:
        yield
    except PyMongoError as exc:
        logger.error("Storage operation %r failed: %s", operation, exc)
        raise StorageError(str(exc)) from exc
