"""
Business logic for bookings.

Bookings are inserted exactly as the client sends them and listed per
booking user.  The conditional review update used by the review
aggregation also lives here, since it is a single-document operation
on the bookings collection.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId

from ..core.db import serialize_document, storage_errors
from ..schemas.booking import BookingCreate
from ..schemas.common import InsertAck, UpdateAck


logger = logging.getLogger(__name__)


class BookingService:
    """Service for managing bookings."""

    def __init__(self, collection: Any) -> None:
        self.collection = collection

    async def create(self, booking: BookingCreate) -> InsertAck:
        document = booking.model_dump(by_alias=True, exclude_unset=True)
        document.pop("_id", None)
        with storage_errors("create booking"):
            result = await self.collection.insert_one(document)
        logger.info("Booking %s created by %s", result.inserted_id, booking.self_booking)
        return InsertAck.from_result(result)

    async def list_by_requester(self, email: str) -> List[Dict[str, Any]]:
        """Return the bookings made by ``email``."""
        with storage_errors("list bookings"):
            documents = await self.collection.find({"selfBooking": email}).to_list(length=None)
        return [serialize_document(doc) for doc in documents]

    async def record_review(self, booking_id: ObjectId, reviewer: str) -> UpdateAck:
        """Count one review by ``reviewer`` on a booking, at most once.

        The filter excludes bookings whose ``reviewedUser`` already holds
        the reviewer, so the increment and the append happen in one
        conditional single-document update.  A zero ``modifiedCount``
        means the reviewer had already reviewed or the booking is absent.
        """
        with storage_errors("record review"):
            result = await self.collection.update_one(
                {"_id": booking_id, "reviewedUser": {"$ne": reviewer}},
                {"$inc": {"reviewCount": 1}, "$push": {"reviewedUser": reviewer}},
            )
        return UpdateAck.from_result(result)

    async def get_raw(self, booking_id: ObjectId) -> Optional[Dict[str, Any]]:
        with storage_errors("get booking"):
            return await self.collection.find_one({"_id": booking_id})
