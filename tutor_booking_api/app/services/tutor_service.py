"""
Business logic for tutor listings.

``TutorService`` wraps the tutors collection.  Ownership rules are
enforced by the routes through the access guard; this service only
translates identifiers, shapes results and maps storage failures.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from ..core.db import parse_object_id, serialize_document, storage_errors
from ..core.errors import NotFoundError
from ..schemas.common import DeleteAck, InsertAck, UpdateAck
from ..schemas.tutor import TutorCreate, TutorUpdate


logger = logging.getLogger(__name__)

TUTOR_NOT_FOUND = "Tutor not found"


def _document_fields(model: Any) -> Dict[str, Any]:
    """Dump a payload model as a storable document, never carrying ``_id``."""
    fields = model.model_dump(by_alias=True, exclude_unset=True)
    fields.pop("_id", None)
    return fields


class TutorService:
    """Service for managing tutor listings."""

    def __init__(self, collection: Any) -> None:
        self.collection = collection

    async def _find(self, query: Dict[str, Any], operation: str) -> List[Dict[str, Any]]:
        with storage_errors(operation):
            documents = await self.collection.find(query).to_list(length=None)
        return [serialize_document(doc) for doc in documents]

    async def create(self, listing: TutorCreate) -> InsertAck:
        """Insert a new listing and return the storage acknowledgment."""
        with storage_errors("create tutor"):
            result = await self.collection.insert_one(_document_fields(listing))
        logger.info("Tutor listing %s created for %s", result.inserted_id, listing.email)
        return InsertAck.from_result(result)

    async def list_all(self) -> List[Dict[str, Any]]:
        return await self._find({}, "list tutors")

    async def list_by_owner(self, email: str) -> List[Dict[str, Any]]:
        return await self._find({"email": email}, "list tutors by owner")

    async def get_by_id(self, tutor_id: str) -> Dict[str, Any]:
        """Return one listing.

        Raises
        ------
        NotFoundError
            If ``tutor_id`` is not a valid identifier or no listing has it.
        """
        object_id = parse_object_id(tutor_id)
        if object_id is None:
            raise NotFoundError(TUTOR_NOT_FOUND)
        with storage_errors("get tutor"):
            document = await self.collection.find_one({"_id": object_id})
        if document is None:
            raise NotFoundError(TUTOR_NOT_FOUND)
        return serialize_document(document)

    async def search(self, language: Optional[str]) -> List[Dict[str, Any]]:
        """Case-insensitive substring search on ``language``.

        A missing or blank query returns every listing.  The query text
        is matched literally, never as a pattern.
        """
        if not language or not language.strip():
            return await self.list_all()
        query = {"language": {"$regex": re.escape(language), "$options": "i"}}
        return await self._find(query, "search tutors")

    async def replace(self, tutor_id: str, fields: TutorUpdate) -> UpdateAck:
        """Overwrite the given fields on one listing.

        An empty payload modifies nothing and reports how many listings
        matched ``tutor_id``.
        """
        object_id = parse_object_id(tutor_id)
        if object_id is None:
            raise NotFoundError(TUTOR_NOT_FOUND)
        document = _document_fields(fields)
        if not document:
            with storage_errors("update tutor"):
                matched = await self.collection.count_documents({"_id": object_id})
            return UpdateAck(acknowledged=True, matched_count=matched, modified_count=0)
        with storage_errors("update tutor"):
            result = await self.collection.update_one({"_id": object_id}, {"$set": document})
        return UpdateAck.from_result(result)

    async def delete(self, tutor_id: str) -> DeleteAck:
        object_id = parse_object_id(tutor_id)
        if object_id is None:
            raise NotFoundError(TUTOR_NOT_FOUND)
        with storage_errors("delete tutor"):
            result = await self.collection.delete_one({"_id": object_id})
        if result.deleted_count:
            logger.info("Tutor listing %s deleted", tutor_id)
        return DeleteAck.from_result(result)

    async def set_review_count(self, email: str, review_count: int) -> UpdateAck:
        """Copy ``review_count`` onto every listing owned by ``email``."""
        with storage_errors("propagate review count"):
            result = await self.collection.update_many(
                {"email": email},
                {"$set": {"reviewCount": review_count}},
            )
        return UpdateAck.from_result(result)
