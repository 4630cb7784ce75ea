"""
Pydantic models for booking payloads.

``selfBooking`` is the email of the user who booked and is used to list
a user's own bookings.  ``email`` is the tutor's email; review counts
recorded on a booking are copied to every listing sharing that email.
Both are optional: a booking is stored exactly as the client sends it.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingCreate(BaseModel):
    """Schema for creating a booking.  Extra attributes are stored as sent."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    self_booking: Optional[str] = Field(None, alias="selfBooking", description="Email of the booking user")
    email: Optional[str] = Field(None, description="Email of the booked tutor")
