"""
Pydantic models for tutor listing payloads.

A listing is owned by the user whose email it carries.  Apart from
``email`` and ``language`` the document is free-form: any attribute the
creator sends (name, price, description, image ...) is stored as is.
Listings are returned exactly as stored, so there is no read model;
``reviewCount`` and ``reviewedUser`` only exist once the review
aggregation has written them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TutorBase(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    email: Optional[str] = Field(None, description="Email of the owning user")
    language: Optional[str] = Field(None, description="Language taught, used by search")


class TutorCreate(TutorBase):
    """Schema for creating a listing; ``email`` must be the caller's.

    A missing ``email`` is not a validation error: it fails the
    ownership check like any other foreign email.
    """


class TutorUpdate(TutorBase):
    """Schema for replacing listing fields.

    Only the attributes present in the request body are overwritten.
    """
