"""
Booking endpoints for API v1.

Anyone may create a booking; listing bookings is restricted to the user
who made them.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from tutor_booking_api.app.api.deps import get_booking_service
from tutor_booking_api.app.core.errors import ForbiddenError
from tutor_booking_api.app.core.security import enforce_owner, get_current_user
from tutor_booking_api.app.schemas.booking import BookingCreate
from tutor_booking_api.app.schemas.common import InsertAck
from tutor_booking_api.app.services.booking_service import BookingService


router = APIRouter()


@router.post("/bookTutor", response_model=InsertAck, summary="Book a tutor")
async def book_tutor(
    booking: BookingCreate,
    service: BookingService = Depends(get_booking_service),
) -> InsertAck:
    return await service.create(booking)


@router.get("/allBookings", response_model=List[Dict[str, Any]], summary="List the caller's bookings")
async def all_bookings(
    email: Optional[str] = Query(None, description="Email of the booking user"),
    current_user: dict = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    """Return bookings whose ``selfBooking`` equals ``email``.

    ``email`` must be the caller's own, otherwise 403 is returned.
    """
    enforce_owner(current_user, email, ForbiddenError)
    return await service.list_by_requester(email)
