"""
Review endpoint for API v1.

``PATCH /updateTutor/{id}`` records a review on the booking ``id`` and
propagates the booking's review count to the tutor's listings.  The
path name predates the move of review counting onto bookings and is
kept for client compatibility.
"""

from typing import Union

from fastapi import APIRouter, Depends, Path

from tutor_booking_api.app.api.deps import get_review_service
from tutor_booking_api.app.schemas.common import MessageResponse
from tutor_booking_api.app.schemas.review import ReviewApplied, ReviewSubmit
from tutor_booking_api.app.services.review_service import ReviewService


router = APIRouter()


@router.patch(
    "/updateTutor/{booking_id}",
    response_model=Union[ReviewApplied, MessageResponse],
    summary="Submit a review",
)
async def update_tutor(
    review: ReviewSubmit,
    booking_id: str = Path(..., description="ID of the reviewed booking"),
    service: ReviewService = Depends(get_review_service),
):
    """Count one review by ``review.email``.

    A reviewer is counted once per booking.  Repeated submissions, and
    submissions for unknown bookings, return a message instead of the
    acknowledgments.
    """
    outcome = await service.submit_review(booking_id, review.email)
    if not outcome.applied:
        return MessageResponse(message=outcome.message)
    return ReviewApplied(update_review=outcome.update_review, tutor_update=outcome.tutor_update)
