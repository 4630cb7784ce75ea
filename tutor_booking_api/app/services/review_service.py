"""
Review aggregation.

Submitting a review touches two collections.  First the booking is
updated conditionally (see :meth:`BookingService.record_review`), which
guarantees a reviewer is counted at most once per booking even when
duplicate submissions race.  When that update modified the booking, the
booking is read back and its ``reviewCount`` is copied, as an absolute
value, to every tutor listing sharing the booking's tutor email.

The two steps are not transactional.  A concurrent review on another
booking of the same tutor can interleave between the read-back and the
propagation, in which case the last writer wins on the listings.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.db import parse_object_id
from ..schemas.common import UpdateAck
from .booking_service import BookingService
from .tutor_service import TutorService


logger = logging.getLogger(__name__)

ALREADY_REVIEWED = "You have already reviewed"


@dataclass
class ReviewOutcome:
    """Result of a review submission.

    ``applied`` is ``False`` for the no-op case (reviewer already counted
    or booking absent); ``message`` then explains it to the caller.
    """

    applied: bool
    update_review: Optional[UpdateAck] = None
    tutor_update: Optional[UpdateAck] = None
    message: Optional[str] = None


class ReviewService:
    """Record reviews on bookings and propagate counts to tutor listings."""

    def __init__(self, bookings: BookingService, tutors: TutorService) -> None:
        self.bookings = bookings
        self.tutors = tutors

    async def submit_review(self, booking_id: str, reviewer: str) -> ReviewOutcome:
        object_id = parse_object_id(booking_id)
        if object_id is None:
            return ReviewOutcome(applied=False, message=ALREADY_REVIEWED)

        update_review = await self.bookings.record_review(object_id, reviewer)
        if update_review.modified_count == 0:
            logger.info("Review by %s on booking %s was not counted", reviewer, booking_id)
            return ReviewOutcome(applied=False, message=ALREADY_REVIEWED)

        booking = await self.bookings.get_raw(object_id)
        if booking is None:
            # Deleted between the update and the read-back; nothing to propagate.
            return ReviewOutcome(applied=False, message=ALREADY_REVIEWED)

        review_count = booking.get("reviewCount", 0)
        tutor_email = booking.get("email")
        if tutor_email is None:
            # {"email": None} would also match listings that have no email.
            tutor_update = UpdateAck(acknowledged=True, matched_count=0, modified_count=0)
        else:
            tutor_update = await self.tutors.set_review_count(tutor_email, review_count)
        logger.info(
            "Review by %s counted on booking %s; %s listing(s) of %s now at %s",
            reviewer,
            booking_id,
            tutor_update.matched_count,
            tutor_email,
            review_count,
        )
        return ReviewOutcome(applied=True, update_review=update_review, tutor_update=tutor_update)
