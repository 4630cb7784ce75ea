"""
Pydantic schemas for review submission.

A review is recorded against a booking: the reviewer's email is added
to the booking's ``reviewedUser`` list and its ``reviewCount`` grows by
one.  The response echoes both storage acknowledgments.
"""

from pydantic import BaseModel, ConfigDict, Field

from .common import UpdateAck


class ReviewSubmit(BaseModel):
    """Payload identifying the reviewer."""

    email: str = Field(..., description="Email of the user submitting the review")


class ReviewApplied(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    update_review: UpdateAck = Field(..., alias="updateReview")
    tutor_update: UpdateAck = Field(..., alias="tutorUpdate")
