"""
FastAPI dependencies resolving process-scoped collaborators.

Services are built per request from the shared :class:`AppContext`
stored on ``app.state``; constructing them is cheap because they only
hold references to the long-lived collections.
"""

from typing import Any

from fastapi import Depends, Request

from ..core.context import AppContext
from ..services.booking_service import BookingService
from ..services.review_service import ReviewService
from ..services.tutor_service import TutorService


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_tutor_service(context: AppContext = Depends(get_context)) -> TutorService:
    return TutorService(context.collections.tutors)


def get_booking_service(context: AppContext = Depends(get_context)) -> BookingService:
    return BookingService(context.collections.bookings)


def get_review_service(
    bookings: BookingService = Depends(get_booking_service),
    tutors: TutorService = Depends(get_tutor_service),
) -> ReviewService:
    return ReviewService(bookings, tutors)


def get_identity_provider(context: AppContext = Depends(get_context)) -> Any:
    return context.identity
